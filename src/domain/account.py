"""Account Domain Entity"""

import uuid
from datetime import datetime
from enum import Enum
from typing import List, Optional, TYPE_CHECKING
from sqlmodel import Field, Column, Relationship
from sqlalchemy import ForeignKey, String, Uuid
from src.domain.base import BaseModel, UTCDateTime, generate_uuid, utc_now

if TYPE_CHECKING:
    from src.domain.customer import Customer
    from src.domain.transaction import Transaction


class AccountStatus(str, Enum):
    """Account lifecycle states"""
    ACTIVE = "active"
    BLOCKED = "blocked"
    CLOSED = "closed"


class Account(BaseModel, table=True):
    """
    Account - Customer money account

    Domain Rules:
    - Belongs to exactly one Customer
    - May be referenced by any number of Transactions
    """

    __tablename__ = "accounts"

    id: uuid.UUID = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique account identifier"
    )

    customer_id: uuid.UUID = Field(
        sa_column=Column(Uuid, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True),
        description="Foreign key to Customer"
    )

    currency: str = Field(
        default="USD",
        sa_column=Column(String(3), nullable=False),
        description="Currency code (ISO 4217)"
    )

    status: AccountStatus = Field(
        default=AccountStatus.ACTIVE,
        description="Account status (active, blocked, closed)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UTCDateTime(), nullable=False),
        description="Account opening timestamp"
    )

    customer: Optional["Customer"] = Relationship(back_populates="accounts")

    transactions: List["Transaction"] = Relationship(back_populates="account")
