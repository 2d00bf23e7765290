"""Chart service — chart-ready series for the reports view."""

from collections import Counter, OrderedDict
from datetime import datetime, timedelta
from typing import List, Optional

from app.application.services.reporting_service import (
    ReportData,
    amount_of,
    get_field,
    sub_months,
    to_datetime,
)
from app.core import clock
from app.domain.schemas.report import (
    ChartData,
    ClientProjectsPoint,
    DateRange,
    DistributionPoint,
    MonthlyPoint,
    PerformancePoint,
    RevenuePoint,
)

PROJECT_STATUS_LABELS = OrderedDict([
    ("completed", "Completed"),
    ("in_progress", "In Progress"),
    ("not_started", "Not Started"),
    ("pending", "Pending"),
    ("cancelled", "Cancelled"),
])


def _key(value, fmt: str) -> Optional[str]:
    moment = to_datetime(value)
    return moment.strftime(fmt) if moment else None


def _is_completed_payment(transaction) -> bool:
    return get_field(transaction, "type") == "payment" and get_field(transaction, "status") == "completed"


def build_revenue_series(transactions, period: str) -> List[RevenuePoint]:
    """Income vs expenses per day, or per month for the yearly filter, sorted by bucket."""
    by_month = period == "yearly"
    key_format, label_format = ("%Y-%m", "%b %Y") if by_month else ("%Y-%m-%d", "%b %d")

    buckets = {}
    for transaction in transactions:
        key = _key(get_field(transaction, "date"), key_format)
        if key is None:
            continue
        bucket = buckets.setdefault(key, {"income": 0.0, "expenses": 0.0})
        if _is_completed_payment(transaction):
            bucket["income"] += amount_of(transaction)
        elif get_field(transaction, "type") == "expense":
            bucket["expenses"] += amount_of(transaction)

    return [
        RevenuePoint(
            name=datetime.strptime(key, key_format).strftime(label_format),
            date=key,
            income=bucket["income"],
            expenses=bucket["expenses"],
            value=bucket["income"] - bucket["expenses"],
        )
        for key, bucket in sorted(buckets.items())
    ]


def build_project_status_distribution(projects) -> List[DistributionPoint]:
    counts = Counter(get_field(project, "status") for project in projects)
    points = [
        DistributionPoint(name=label, value=counts.get(status, 0))
        for status, label in PROJECT_STATUS_LABELS.items()
    ]
    return [point for point in points if point.value > 0]


def build_client_distribution(clients, projects, limit: int = 10) -> List[ClientProjectsPoint]:
    """Top clients by number of projects; clients without projects are left out."""
    counts = Counter(get_field(project, "client_id") for project in projects)
    points = [
        ClientProjectsPoint(
            name=get_field(client, "company_name") or "Unknown",
            value=counts.get(get_field(client, "id"), 0),
            projects=counts.get(get_field(client, "id"), 0),
        )
        for client in clients
    ]
    points = [point for point in points if point.value > 0]
    points.sort(key=lambda point: point.value, reverse=True)
    return points[:limit]


def build_monthly_rollup(transactions, projects, now: Optional[datetime] = None) -> List[MonthlyPoint]:
    """Trailing twelve calendar months ending with the current one, whatever the filter."""
    now = now or clock.now()

    rollup = []
    for offset in range(11, -1, -1):
        month = sub_months(now, offset)
        month_key = month.strftime("%Y-%m")

        month_transactions = [
            t for t in transactions if _key(get_field(t, "date"), "%Y-%m") == month_key
        ]
        income = sum(amount_of(t) for t in month_transactions if _is_completed_payment(t))
        expenses = sum(amount_of(t) for t in month_transactions if get_field(t, "type") == "expense")
        project_count = len([
            p for p in projects
            if _key(get_field(p, "start_date"), "%Y-%m") == month_key
            or _key(get_field(p, "end_date"), "%Y-%m") == month_key
        ])

        rollup.append(MonthlyPoint(
            name=month.strftime("%b %Y"),
            month=month_key,
            income=income,
            expenses=expenses,
            projects=project_count,
            value=income - expenses,
        ))
    return rollup


def build_performance_series(tasks, projects, transactions, date_range: DateRange) -> List[PerformancePoint]:
    """One point per calendar day of the window."""
    completed_by_day = Counter(
        _key(get_field(task, "created_at"), "%Y-%m-%d")
        for task in tasks
        if get_field(task, "status") == "completed"
    )
    projects_by_day = Counter(_key(get_field(project, "created_at"), "%Y-%m-%d") for project in projects)
    invoiced_by_day = Counter()
    for transaction in transactions:
        if get_field(transaction, "type") == "invoice":
            invoiced_by_day[_key(get_field(transaction, "date"), "%Y-%m-%d")] += amount_of(transaction)

    series = []
    day = date_range.start.date()
    while day <= date_range.end.date():
        key = day.isoformat()
        series.append(PerformancePoint(
            date=key,
            completed_tasks=completed_by_day.get(key, 0),
            active_projects=projects_by_day.get(key, 0),
            revenue=round(invoiced_by_day.get(key, 0.0), 2),
        ))
        day += timedelta(days=1)
    return series


def build_chart_data(
    data: ReportData,
    filtered: ReportData,
    date_range: DateRange,
    now: Optional[datetime] = None,
    top_clients: int = 10,
) -> ChartData:
    return ChartData(
        revenue=build_revenue_series(filtered.transactions, date_range.period),
        project_status=build_project_status_distribution(filtered.projects),
        client_projects=build_client_distribution(data.clients, data.projects, limit=top_clients),
        monthly=build_monthly_rollup(data.transactions, data.projects, now=now),
        performance=build_performance_series(
            filtered.tasks, filtered.projects, filtered.transactions, date_range
        ),
    )
