"""Customer Domain Entity

Root record of the reporting model. A customer owns accounts and the
transactions made on them.
"""

import uuid
from datetime import date, datetime
from typing import List, Optional, TYPE_CHECKING
from sqlmodel import Field, Column, Relationship
from sqlalchemy import String
from src.domain.base import BaseModel, UTCDateTime, generate_uuid, utc_now

if TYPE_CHECKING:
    from src.domain.account import Account
    from src.domain.transaction import Transaction


class Customer(BaseModel, table=True):
    """
    Customer - Owner of accounts and transactions

    Domain Rules:
    - Every Account and Transaction references an existing Customer
    - The reporting service only ever inserts new customers, it never
      re-parents accounts or transactions
    """

    __tablename__ = "customers"

    id: uuid.UUID = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique customer identifier"
    )

    first_name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Customer first name"
    )

    last_name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Customer last name"
    )

    email: str = Field(
        index=True,
        description="Contact email"
    )

    phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(32), nullable=True),
        description="Contact phone number"
    )

    birth_date: Optional[date] = Field(
        default=None,
        description="Date of birth"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UTCDateTime(), nullable=False),
        description="Customer registration timestamp"
    )

    accounts: List["Account"] = Relationship(back_populates="customer")

    transactions: List["Transaction"] = Relationship(back_populates="customer")
