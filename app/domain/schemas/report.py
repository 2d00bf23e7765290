"""Pydantic schemas for period reports and chart series."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

TimeFilter = Literal["weekly", "monthly", "quarterly", "yearly", "custom"]


class DateRange(BaseModel):
    period: TimeFilter
    start: datetime
    end: datetime


class AllTimeTotals(BaseModel):
    total_income: float = 0.0
    total_expenses: float = 0.0
    gross_income: float = 0.0


class PeriodMetrics(BaseModel):
    # Period-scoped
    total_income: float = 0.0
    total_expenses: float = 0.0
    net_profit: float = 0.0
    period_revenue: float = 0.0
    period_expenses: float = 0.0
    period_net_profit: float = 0.0

    # Not date-windowed
    pending_invoices: float = 0.0
    total_invoices: float = 0.0

    completed_projects: int = 0
    in_progress_projects: int = 0
    active_projects: int = 0
    overdue_projects: int = 0
    total_project_budget: float = 0.0

    completed_tasks: int = 0
    pending_tasks: int = 0

    total_clients: int = 0

    revenue_growth: float = 0.0

    all_time: AllTimeTotals = AllTimeTotals()


class RevenuePoint(BaseModel):
    name: str
    date: str
    income: float = 0.0
    expenses: float = 0.0
    value: float = 0.0


class DistributionPoint(BaseModel):
    name: str
    value: int


class ClientProjectsPoint(BaseModel):
    name: str
    value: int
    projects: int


class MonthlyPoint(BaseModel):
    name: str
    month: str
    income: float = 0.0
    expenses: float = 0.0
    projects: int = 0
    value: float = 0.0


class PerformancePoint(BaseModel):
    date: str
    completed_tasks: int = 0
    active_projects: int = 0
    revenue: float = 0.0


class ChartData(BaseModel):
    revenue: list[RevenuePoint] = []
    project_status: list[DistributionPoint] = []
    client_projects: list[ClientProjectsPoint] = []
    monthly: list[MonthlyPoint] = []
    performance: list[PerformancePoint] = []


class Report(BaseModel):
    range: DateRange
    metrics: PeriodMetrics
    charts: ChartData
    generated_at: Optional[datetime] = None
