"""Transaction Domain Entity

Money movement recorded against a customer's account. Transactions are
written by the upstream core system; this service only reads them.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional, TYPE_CHECKING
from sqlmodel import Field, Column, Index, Relationship
from sqlalchemy import ForeignKey, Numeric, String, Uuid
from src.domain.base import BaseModel, UTCDateTime, generate_uuid, utc_now

if TYPE_CHECKING:
    from src.domain.account import Account
    from src.domain.commission import Commission
    from src.domain.customer import Customer


class TransactionType(str, Enum):
    """Transaction types"""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    TRANSFER = "transfer"


class Transaction(BaseModel, table=True):
    """
    Transaction - Dated money movement on an account

    Domain Rules:
    - Belongs to exactly one Customer and references one of its Accounts
    - May carry a Commission
    """

    __tablename__ = "transactions"
    __table_args__ = (
        Index('ix_transactions_customer_date', 'customer_id', 'date'),
        Index('ix_transactions_account_id', 'account_id'),
    )

    id: uuid.UUID = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique transaction identifier"
    )

    customer_id: uuid.UUID = Field(
        sa_column=Column(Uuid, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Customer"
    )

    account_id: uuid.UUID = Field(
        sa_column=Column(Uuid, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Account"
    )

    transaction_type: TransactionType = Field(
        description="Type of transaction (deposit, withdrawal, transfer)"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Transaction amount (precision: 18,6)"
    )

    currency: str = Field(
        default="USD",
        sa_column=Column(String(3), nullable=False),
        description="Currency code (ISO 4217)"
    )

    date: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UTCDateTime(), nullable=False),
        description="Transaction date"
    )

    customer: Optional["Customer"] = Relationship(back_populates="transactions")

    account: Optional["Account"] = Relationship(back_populates="transactions")

    commissions: List["Commission"] = Relationship(back_populates="transaction")
