"""Request schemas for Reporting API

Pydantic models for validating incoming HTTP requests.
"""

from datetime import date, datetime
from typing import Optional
from pydantic import Field, field_validator, model_validator

from src.app.use_cases.reporting.dtos import ReportingDTO
from src.domain import as_utc


class CustomerCreateRequestSchema(ReportingDTO):
    """
    Request schema for registering a customer

    Used for POST /customers endpoint.
    """

    first_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Customer first name (required, non-empty)"
    )

    last_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Customer last name (required, non-empty)"
    )

    email: str = Field(
        ...,
        min_length=3,
        description="Contact email"
    )

    phone: Optional[str] = Field(
        default=None,
        max_length=32,
        description="Contact phone number"
    )

    birth_date: Optional[date] = Field(
        default=None,
        description="Date of birth"
    )

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        """Require a local part and a domain"""
        local, _, domain = v.partition("@")
        if not local or not domain:
            raise ValueError("Email must contain '@' between a name and a domain")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.com",
                "birthDate": "1815-12-10"
            }
        }


class TransactionSearchRequestSchema(ReportingDTO):
    """
    Request schema for searching a customer's transactions

    Used for POST /transactions/by-customer endpoint.
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
        """Compare and filter on UTC; offset-less values are read as UTC"""
        return as_utc(v)

    @model_validator(mode="after")
    def validate_range(self):
        """Reject ranges that end before they start"""
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ValueError("dateFrom must not be later than dateTo")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "dateFrom": "2024-01-01T00:00:00",
                "dateTo": "2024-01-31T23:59:59"
            }
        }
