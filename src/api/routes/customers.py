"""Customer API Routes

FastAPI routes for customer lookups and registration.
"""

import uuid

from fastapi import APIRouter, Depends, status

from src.api.schemas.reporting_request import CustomerCreateRequestSchema
from src.app.use_cases.reporting import (
    CustomerCreateDTO,
    CustomerModel,
    CustomerService,
    FullCustomerModel,
)
from src.depends import get_customer_service

router = APIRouter(prefix="/customers", tags=["Customers"])

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Customer or related entity not found",
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


@router.get(
    "/{customer_id}",
    response_model=CustomerModel,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def get_customer(
    customer_id: uuid.UUID,
    service: CustomerService = Depends(get_customer_service),
):
    """
    Get a customer summary by ID.

    **Returns:**
    - 200: Customer found
    - 404: Customer not found
    """
    return await service.get_customer_by_id(customer_id)


@router.get(
    "/{customer_id}/full",
    response_model=FullCustomerModel,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def get_full_customer(
    customer_id: uuid.UUID,
    service: CustomerService = Depends(get_customer_service),
):
    """
    Get a customer with all of its accounts and transactions.

    **Returns:**
    - 200: Customer found
    - 404: Customer not found, or the customer has no accounts
    """
    return await service.get_full_customer_by_id(customer_id)


@router.get(
    "/by-account/{account_id}",
    response_model=CustomerModel,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def get_customer_by_account(
    account_id: uuid.UUID,
    service: CustomerService = Depends(get_customer_service),
):
    """Get the customer owning an account."""
    return await service.get_customer_by_account_id(account_id)


@router.get(
    "/by-transaction/{transaction_id}",
    response_model=CustomerModel,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def get_customer_by_transaction(
    transaction_id: uuid.UUID,
    service: CustomerService = Depends(get_customer_service),
):
    """Get the customer owning a transaction."""
    return await service.get_customer_by_transaction_id(transaction_id)


@router.post(
    "",
    response_model=CustomerModel,
    status_code=status.HTTP_201_CREATED,
)
async def add_customer(
    request: CustomerCreateRequestSchema,
    service: CustomerService = Depends(get_customer_service),
):
    """
    Register a new customer.

    **Example request:**
    ```json
    {
      "firstName": "Ada",
      "lastName": "Lovelace",
      "email": "ada@example.com"
    }
    ```

    **Returns:**
    - 201: Customer registered
    - 422: Invalid request body
    """
    command = CustomerCreateDTO(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        phone=request.phone,
        birth_date=request.birth_date,
    )
    return await service.add_customer(command)
