"""Transaction API Routes

FastAPI routes for transaction searches.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, Query, status

from src.api.schemas.reporting_request import TransactionSearchRequestSchema
from src.app.use_cases.reporting import (
    TransactionModel,
    TransactionSearchFilter,
    TransactionService,
)
from src.depends import get_transaction_service

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.post(
    "/by-customer",
    response_model=List[TransactionModel],
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Customer not found",
            "content": {
                "application/json": {
                    "example": {
                        "statusCode": 404,
                        "message": "Customer 5c0e9d0e-2b8b-4f0a-9a57-2f2e8f6d8b11 not found"
                    }
                }
            }
        }
    }
)
async def search_transactions(
    request: TransactionSearchRequestSchema,
    customer_id: uuid.UUID = Query(..., alias="customerId"),
    service: TransactionService = Depends(get_transaction_service),
):
    """
    Search a customer's transactions within a date range.

    **Query parameters:**
    - `customerId` (required): Customer identifier

    **Request body:**
    - `dateFrom` (optional): Earliest transaction date (inclusive)
    - `dateTo` (optional): Latest transaction date (inclusive)

    **Returns:**
    - 200: Matching transactions, oldest first
    - 404: Customer not found
    - 422: Invalid request parameters
    """
    search_filter = TransactionSearchFilter(
        date_from=request.date_from,
        date_to=request.date_to,
    )
    return await service.search_transaction(customer_id, search_filter)


@router.post(
    "/by-account",
    response_model=List[TransactionModel],
    status_code=status.HTTP_200_OK,
)
async def search_transactions_by_account(
    account_id: uuid.UUID = Query(..., alias="accountId"),
    service: TransactionService = Depends(get_transaction_service),
):
    """
    List the transactions made on an account, oldest first.

    **Query parameters:**
    - `accountId` (required): Account identifier
    """
    return await service.search_transaction_by_account(account_id)
