"""Pydantic schemas for Transaction domain."""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from app.core.clock import to_local_naive

TransactionType = Literal["invoice", "payment", "expense"]
TransactionStatus = Literal["pending", "completed", "cancelled"]


class TransactionCreate(BaseModel):
    type: TransactionType
    amount: float
    description: str = Field(min_length=1)
    project_id: int
    status: TransactionStatus = "pending"
    date: Optional[datetime] = None

    @field_validator("amount")
    @classmethod
    def _non_zero_amount(cls, value: float) -> float:
        if not value:
            raise ValueError("amount is required")
        return value

    @field_validator("date")
    @classmethod
    def _local_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_local_naive(value) if value is not None else None


class TransactionStatusUpdate(BaseModel):
    status: TransactionStatus


class TransactionFilter(BaseModel):
    type: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[str] = None
    project_id: Optional[int] = None


class TransactionRead(BaseModel):
    id: int
    type: str
    amount: float = 0.0
    description: str
    project_id: Optional[int] = None
    project_title: Optional[str] = None
    status: str
    date: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_or_zero(cls, value):
        return value if value is not None else 0.0
