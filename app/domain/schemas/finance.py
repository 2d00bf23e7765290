"""Pydantic schemas for the financial summary."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

# Where a recent-activity row came from: a real transaction, or a project/task
# budget surfaced as a synthetic payment.
ActivitySource = Literal["transaction", "project", "task"]


class RecentTransaction(BaseModel):
    source: ActivitySource
    id: int
    type: str
    amount: float = 0.0
    description: str
    project_id: Optional[int] = None
    project_title: Optional[str] = None
    status: Optional[str] = None
    date: Optional[datetime] = None


class PendingInvoices(BaseModel):
    count: int = 0
    total: float = 0.0


class FinancialSummary(BaseModel):
    total_income: float
    total_expenses: float
    gross_income: float
    pending_invoices: PendingInvoices
    total_budgets: float
    monthly_revenue: float
    recent_transactions: list[RecentTransaction] = []

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
