"""Chart series built from raw entity lists."""

from datetime import datetime

import pytest

from app.application.services.chart_service import (
    build_client_distribution,
    build_monthly_rollup,
    build_performance_series,
    build_project_status_distribution,
    build_revenue_series,
)
from app.application.services.report_service import build_report
from app.application.services.reporting_service import ReportData, resolve_date_range

NOW = datetime(2024, 4, 15, 12, 0)

TRANSACTIONS = [
    {"type": "payment", "status": "completed", "amount": 100, "date": "2024-03-10T10:00:00"},
    {"type": "payment", "status": "completed", "amount": "25", "date": "2024-03-10T18:00:00"},
    {"type": "payment", "status": "pending", "amount": 70, "date": "2024-03-11T09:00:00"},
    {"type": "expense", "status": "pending", "amount": 40, "date": "2024-03-02T09:00:00"},
    {"type": "payment", "status": "completed", "amount": 999, "date": "2023-06-01T09:00:00"},
    {"type": "payment", "status": "completed", "amount": 5, "date": None},
]


def test_daily_revenue_buckets_are_sorted():
    series = build_revenue_series(TRANSACTIONS[:4], "monthly")

    assert [point.date for point in series] == ["2024-03-02", "2024-03-10", "2024-03-11"]
    assert [point.name for point in series] == ["Mar 02", "Mar 10", "Mar 11"]
    assert series[0].expenses == 40 and series[0].value == -40
    assert series[1].income == 125 and series[1].value == 125
    assert series[2].income == 0 and series[2].expenses == 0


def test_yearly_revenue_buckets_by_month():
    series = build_revenue_series(TRANSACTIONS, "yearly")

    assert [(point.date, point.name) for point in series] == [("2023-06", "Jun 2023"), ("2024-03", "Mar 2024")]
    assert series[1].income == 125
    assert series[1].expenses == 40


def test_project_status_distribution_drops_empty_buckets():
    projects = [{"status": "completed"}, {"status": "completed"}, {"status": "not_started"}, {"status": None}]

    points = build_project_status_distribution(projects)

    assert [(point.name, point.value) for point in points] == [("Completed", 2), ("Not Started", 1)]


def test_client_distribution_top_clients_by_project_count():
    clients = [{"id": i, "company_name": f"Client {i}"} for i in range(1, 13)]
    clients.append({"id": 99, "company_name": ""})
    projects = [{"client_id": i} for i in range(1, 13) for _ in range(i)]
    projects += [{"client_id": 99}, {"client_id": None}]

    points = build_client_distribution(clients, projects, limit=10)

    assert len(points) == 10
    assert points[0].name == "Client 12" and points[0].value == 12 and points[0].projects == 12
    assert [point.value for point in points] == sorted((point.value for point in points), reverse=True)

    everyone = build_client_distribution(clients, projects, limit=50)
    assert ("Unknown", 1) in [(point.name, point.value) for point in everyone]


def test_client_distribution_skips_clients_without_projects():
    assert build_client_distribution([{"id": 1, "company_name": "Idle"}], []) == []


def test_monthly_rollup_covers_trailing_twelve_months():
    projects = [{"start_date": "2024-03-05", "end_date": "2024-03-20"}, {"start_date": None, "end_date": "2023-06-30"}]

    rollup = build_monthly_rollup(TRANSACTIONS, projects, now=NOW)

    assert len(rollup) == 12
    assert rollup[0].month == "2023-05"
    assert rollup[-1].month == "2024-04"
    assert rollup[-1].name == "Apr 2024"

    by_month = {point.month: point for point in rollup}
    assert by_month["2024-03"].income == 125
    assert by_month["2024-03"].expenses == 40
    assert by_month["2024-03"].projects == 1
    assert by_month["2023-06"].income == 999
    assert by_month["2023-06"].projects == 1


def test_performance_series_has_one_point_per_day():
    date_range = resolve_date_range("custom", "2024-03-01", "2024-03-03", now=NOW)
    tasks = [
        {"status": "completed", "created_at": "2024-03-02T08:00:00"},
        {"status": "pending", "created_at": "2024-03-02T09:00:00"},
    ]
    projects = [{"created_at": "2024-03-01T10:00:00"}, {"created_at": "2024-03-01T11:00:00"}]
    transactions = [
        {"type": "invoice", "amount": 0.1, "date": "2024-03-03T10:00:00"},
        {"type": "invoice", "amount": 0.2, "date": "2024-03-03T11:00:00"},
        {"type": "payment", "amount": 50, "date": "2024-03-03T12:00:00"},
    ]

    series = build_performance_series(tasks, projects, transactions, date_range)

    assert [point.date for point in series] == ["2024-03-01", "2024-03-02", "2024-03-03"]
    assert series[0].active_projects == 2
    assert series[1].completed_tasks == 1
    assert series[2].revenue == 0.3


def test_build_report_never_raises_on_malformed_rows():
    data = ReportData(
        clients=[{"id": 1}],
        projects=[{"client_id": 1, "status": "completed", "budget": "n/a", "start_date": "bad"}],
        tasks=[{"status": "completed", "budget": None, "created_at": None, "due_date": 12}],
        transactions=[{"type": "payment", "status": "completed", "amount": None, "date": "yesterday"}],
    )

    report = build_report(data, "quarterly", now=NOW)

    assert report.range.period == "quarterly"
    assert report.metrics.total_income == 0
    assert report.charts.revenue == []
    assert report.charts.client_projects[0].name == "Unknown"
    assert len(report.charts.monthly) == 12
    assert report.generated_at == NOW


@pytest.mark.parametrize("period, points", [("weekly", 8), ("monthly", 32)])
def test_report_performance_series_spans_the_window(period, points):
    report = build_report(ReportData(), period, now=NOW)

    assert len(report.charts.performance) == points
