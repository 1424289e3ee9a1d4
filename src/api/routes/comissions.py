"""Comission API Routes

FastAPI routes for commission lookups.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from src.app.use_cases.reporting import ComissionModel, ComissionService
from src.depends import get_comission_service

router = APIRouter(prefix="/comissions", tags=["Comissions"])


@router.get(
    "",
    response_model=List[ComissionModel],
    status_code=status.HTTP_200_OK,
)
async def list_comissions(
    customer_id: Optional[uuid.UUID] = Query(default=None, alias="customerId"),
    account_id: Optional[uuid.UUID] = Query(default=None, alias="accountId"),
    date_start: Optional[datetime] = Query(default=None, alias="dateStart"),
    date_end: Optional[datetime] = Query(default=None, alias="dateEnd"),
    service: ComissionService = Depends(get_comission_service),
):
    """
    List commissions, optionally filtered.

    **Query parameters (all optional):**
    - `customerId`: Customer the commission's transaction belongs to
    - `accountId`: Account the commission's transaction was made on
    - `dateStart` / `dateEnd`: Transaction date bounds
    """
    return await service.get_comissions(
        customer_id=customer_id,
        account_id=account_id,
        date_start=date_start,
        date_end=date_end,
    )


@router.get(
    "/by-transaction/{transaction_id}",
    response_model=ComissionModel,
    status_code=status.HTTP_200_OK,
)
async def get_comission_by_transaction(
    transaction_id: uuid.UUID,
    service: ComissionService = Depends(get_comission_service),
):
    """
    Get the commission charged on a transaction.

    **Returns:**
    - 200: Commission found
    - 404: Transaction not found, or it carries no commission
    """
    return await service.get_comission_by_transaction_id(transaction_id)


@router.get(
    "/{comission_id}",
    response_model=ComissionModel,
    status_code=status.HTTP_200_OK,
)
async def get_comission(
    comission_id: uuid.UUID,
    service: ComissionService = Depends(get_comission_service),
):
    """Get a commission by ID."""
    return await service.get_comission_by_id(comission_id)
