"""Data Transfer Objects for Reporting Use Cases

Pydantic models for command inputs and response outputs. Serialized
field names are camelCase.
"""

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from src.domain import as_utc


class ReportingDTO(BaseModel):
    """Base for reporting DTOs (camelCase on the wire, snake_case in code)"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CustomerCreateDTO(ReportingDTO):
    """
    Command DTO for registering a customer

    Used as input to CustomerService.add_customer.
    """

    first_name: str = Field(
        ...,
        min_length=1,
        description="Customer first name"
    )

    last_name: str = Field(
        ...,
        min_length=1,
        description="Customer last name"
    )

    email: str = Field(
        ...,
        min_length=3,
        description="Contact email"
    )

    phone: Optional[str] = Field(
        default=None,
        description="Contact phone number"
    )

    birth_date: Optional[date] = Field(
        default=None,
        description="Date of birth"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.com",
                "phone": "+44 20 7946 0000",
                "birthDate": "1815-12-10"
            }
        }


class CustomerModel(ReportingDTO):
    """Customer summary view"""

    id: uuid.UUID = Field(..., description="Customer ID")
    first_name: str = Field(..., description="Customer first name")
    last_name: str = Field(..., description="Customer last name")
    email: str = Field(..., description="Contact email")
    phone: Optional[str] = Field(default=None, description="Contact phone number")
    birth_date: Optional[date] = Field(default=None, description="Date of birth")
    created_at: datetime = Field(..., description="Registration timestamp")


class AccountModel(ReportingDTO):
    id: uuid.UUID = Field(..., description="Account ID")
    customer_id: uuid.UUID = Field(..., description="Owning customer ID")
    currency: str = Field(..., description="Currency code (ISO 4217)")
    status: str = Field(..., description="Account status (active, blocked, closed)")
    created_at: datetime = Field(..., description="Account opening timestamp")


class TransactionModel(ReportingDTO):
    """
    Transaction response

    Returned by TransactionService searches and embedded in the full
    customer view.
    """

    id: uuid.UUID = Field(..., description="Transaction ID")
    customer_id: uuid.UUID = Field(..., description="Owning customer ID")
    account_id: uuid.UUID = Field(..., description="Account the transaction was made on")
    transaction_type: str = Field(..., description="Type of transaction (deposit, withdrawal, transfer)")
    amount: Decimal = Field(..., description="Transaction amount")
    currency: str = Field(..., description="Currency code (ISO 4217)")
    date: datetime = Field(..., description="Transaction date")

    class Config:
        json_schema_extra = {
            "example": {
                "id": "0b6f3a52-8a47-4bd4-9d4c-3d1c8f1f7a10",
                "customerId": "5c0e9d0e-2b8b-4f0a-9a57-2f2e8f6d8b11",
                "accountId": "9e1f7c7a-1c4b-4b7e-8b53-6a4a0d2f3c12",
                "transactionType": "deposit",
                "amount": "250.000000",
                "currency": "USD",
                "date": "2024-01-15T10:30:00"
            }
        }


class FullCustomerModel(CustomerModel):
    """Customer view with accounts and transactions"""

    accounts: List[AccountModel] = Field(default_factory=list, description="Customer accounts")
    transactions: List[TransactionModel] = Field(default_factory=list, description="Customer transactions")


class ComissionModel(ReportingDTO):
    id: uuid.UUID = Field(..., description="Commission ID")
    transaction_id: uuid.UUID = Field(..., description="Transaction the commission was charged on")
    amount: Decimal = Field(..., description="Commission amount")
    created_at: datetime = Field(..., description="Commission accrual timestamp")


class TransactionSearchFilter(ReportingDTO):
    """
    Date range for transaction searches

    Either bound may be omitted; both bounds are inclusive.
    """

    date_from: Optional[datetime] = Field(
        default=None,
        description="Earliest transaction date (inclusive)"
    )

    date_to: Optional[datetime] = Field(
        default=None,
        description="Latest transaction date (inclusive)"
    )

    @field_validator("date_from", "date_to")
    @classmethod
    def normalize_bound(cls, v):
        return as_utc(v)

    class Config:
        json_schema_extra = {
            "example": {
                "dateFrom": "2024-01-01T00:00:00",
                "dateTo": "2024-01-31T23:59:59"
            }
        }
