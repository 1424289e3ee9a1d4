"""Commission Domain Entity"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional, TYPE_CHECKING
from sqlmodel import Field, Column, Relationship
from sqlalchemy import ForeignKey, Numeric, Uuid
from src.domain.base import BaseModel, UTCDateTime, generate_uuid, utc_now

if TYPE_CHECKING:
    from src.domain.transaction import Transaction


class Commission(BaseModel, table=True):
    """
    Commission - Fee charged on a transaction

    Domain Rules:
    - Belongs to exactly one Transaction
    """

    __tablename__ = "commissions"

    id: uuid.UUID = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique commission identifier"
    )

    transaction_id: uuid.UUID = Field(
        sa_column=Column(Uuid, ForeignKey("transactions.id", ondelete="CASCADE"), nullable=False, index=True),
        description="Foreign key to Transaction"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Commission amount (precision: 18,6)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UTCDateTime(), nullable=False),
        description="Commission accrual timestamp"
    )

    transaction: Optional["Transaction"] = Relationship(back_populates="commissions")
