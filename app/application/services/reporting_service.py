"""
Reporting service — period metrics derived from raw entity lists.

The engine works on already-loaded clients, projects, tasks and transactions
(pydantic reads or plain dicts) and never touches the database. Period figures
are recomputed from the records that fall inside the window, while the
backend's all-time totals are carried alongside for comparison. Malformed or
missing amounts and dates degrade to zero / "not in range"; nothing here raises.
"""

import math
from calendar import monthrange
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import date, datetime, time, timedelta
from typing import Any, List, Optional

from app.core import clock
from app.domain.schemas.common import parse_date
from app.domain.schemas.finance import FinancialSummary
from app.domain.schemas.report import AllTimeTotals, DateRange, PeriodMetrics


@dataclass
class ReportData:
    clients: List[Any] = field(default_factory=list)
    projects: List[Any] = field(default_factory=list)
    tasks: List[Any] = field(default_factory=list)
    transactions: List[Any] = field(default_factory=list)
    summary: Optional[FinancialSummary] = None


# --- Coercion helpers -------------------------------------------------------

def get_field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def to_number(value: Any) -> float:
    """Zero-default numeric coercion: None, '', junk and NaN all become 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(number) else number


def to_datetime(value: Any) -> Optional[datetime]:
    """Naive local datetime from a datetime, date or ISO string; None if unparsable."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return clock.to_local_naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str):
        return None
    try:
        return clock.to_local_naive(datetime.fromisoformat(value.strip().replace("Z", "+00:00")))
    except ValueError:
        parsed = parse_date(value)
        return datetime.combine(parsed, time.min) if parsed else None


def amount_of(item: Any, name: str = "amount") -> float:
    return to_number(get_field(item, name))


def sum_amounts(items, name: str = "amount") -> float:
    return sum((amount_of(item, name) for item in items), 0.0)


def sub_months(value: datetime, months: int) -> datetime:
    """Shift back by calendar months, clamping the day to the target month's length."""
    total = value.year * 12 + (value.month - 1) - months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    day = min(value.day, monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


# --- Date range -------------------------------------------------------------

def resolve_date_range(
    period: str = "monthly",
    custom_start: Any = None,
    custom_end: Any = None,
    now: Optional[datetime] = None,
) -> DateRange:
    """
    Map a named filter or a custom pair onto a concrete [start, end] window.

    Named filters end at ``now``. A custom pair spans start-of-day to
    end-of-day; a custom filter missing either bound falls back to monthly.
    A reversed custom pair is kept as given and simply matches nothing.
    """
    now = now or clock.now()

    if period == "custom":
        start_day = parse_date(custom_start)
        end_day = parse_date(custom_end)
        if start_day and end_day:
            return DateRange(
                period="custom",
                start=datetime.combine(start_day, time.min),
                end=datetime.combine(end_day, time.max),
            )
        period = "monthly"

    if period == "weekly":
        start = now - timedelta(days=7)
    elif period == "quarterly":
        start = sub_months(now, 3)
    elif period == "yearly":
        start = sub_months(now, 12)
    else:
        period = "monthly"
        start = sub_months(now, 1)

    return DateRange(period=period, start=start, end=now)


# --- Filtering --------------------------------------------------------------

def in_range(value: Any, date_range: DateRange) -> bool:
    moment = to_datetime(value)
    return moment is not None and date_range.start <= moment <= date_range.end


def filter_report_data(data: ReportData, date_range: DateRange) -> ReportData:
    """
    Restrict transactions, projects and tasks to the window.

    A project qualifies if its start or end date is in range, a task if its
    creation or due date is. Clients and the all-time summary are untouched.
    """
    return replace(
        data,
        transactions=[t for t in data.transactions if in_range(get_field(t, "date"), date_range)],
        projects=[
            p for p in data.projects
            if in_range(get_field(p, "start_date"), date_range)
            or in_range(get_field(p, "end_date"), date_range)
        ],
        tasks=[
            t for t in data.tasks
            if in_range(get_field(t, "created_at"), date_range)
            or in_range(get_field(t, "due_date"), date_range)
        ],
    )


# --- Metrics ----------------------------------------------------------------

def _with(items, **conditions):
    def matches(item):
        for name, expected in conditions.items():
            actual = get_field(item, name)
            if isinstance(expected, tuple):
                if actual not in expected:
                    return False
            elif actual != expected:
                return False
        return True

    return [item for item in items if matches(item)]


def completed_payments(transactions) -> float:
    return sum_amounts(_with(transactions, type="payment", status="completed"))


def calculate_growth(all_transactions, date_range: DateRange, current: float) -> float:
    """
    Percentage change of completed payments against the equal-length window
    immediately before ``date_range``. 0 when the previous window earned nothing.
    """
    previous_start = date_range.start - (date_range.end - date_range.start)
    previous = []
    for transaction in all_transactions:
        moment = to_datetime(get_field(transaction, "date"))
        if moment is not None and previous_start <= moment < date_range.start:
            previous.append(transaction)
    previous_revenue = completed_payments(previous)
    if previous_revenue <= 0:
        return 0.0
    return (current - previous_revenue) / previous_revenue * 100


def calculate_metrics(
    data: ReportData,
    filtered: ReportData,
    date_range: DateRange,
    now: Optional[datetime] = None,
) -> PeriodMetrics:
    now = now or clock.now()
    transactions, projects, tasks = filtered.transactions, filtered.projects, filtered.tasks

    income = (
        sum_amounts(_with(transactions, type="payment", status=("completed", "pending")))
        + sum_amounts(_with(projects, status="completed"), "budget")
        + sum_amounts(_with(tasks, status="completed"), "budget")
    )
    expenses = sum_amounts(_with(transactions, type="expense", status="completed"))

    # What is still owed does not age out of the window
    pending_invoices = (
        sum_amounts(_with(data.transactions, type="invoice", status="pending"))
        + sum_amounts([p for p in data.projects if get_field(p, "status") != "completed"], "budget")
    )

    period_revenue = completed_payments(transactions)
    period_expenses = sum_amounts(_with(transactions, type="expense"))

    def is_overdue(project) -> bool:
        end = to_datetime(get_field(project, "end_date"))
        return end is not None and end < now and get_field(project, "status") != "completed"

    summary = data.summary
    all_time = AllTimeTotals(
        total_income=summary.total_income if summary else 0.0,
        total_expenses=summary.total_expenses if summary else 0.0,
        gross_income=summary.gross_income if summary else 0.0,
    )

    return PeriodMetrics(
        total_income=income,
        total_expenses=expenses,
        net_profit=income - expenses,
        period_revenue=period_revenue,
        period_expenses=period_expenses,
        period_net_profit=period_revenue - period_expenses,
        pending_invoices=pending_invoices,
        total_invoices=sum_amounts(_with(data.transactions, type="invoice")),
        completed_projects=len(_with(projects, status="completed")),
        in_progress_projects=len(_with(projects, status="in_progress")),
        active_projects=len([p for p in projects if get_field(p, "status") != "completed"]),
        overdue_projects=len([p for p in projects if is_overdue(p)]),
        total_project_budget=sum_amounts(projects, "budget"),
        completed_tasks=len(_with(tasks, status="completed")),
        pending_tasks=len([t for t in tasks if get_field(t, "status") != "completed"]),
        total_clients=len(data.clients),
        revenue_growth=calculate_growth(data.transactions, date_range, period_revenue),
        all_time=all_time,
    )

