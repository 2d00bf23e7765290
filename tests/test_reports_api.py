"""Reports endpoint and application-level routes."""

from datetime import timedelta

import pytest

from app.core import clock


def test_report_for_custom_window(api, make_client, make_project, make_transaction):
    client = make_client(company_name="Acme")
    project = make_project(client_id=client["id"])
    make_transaction(project, 300, status="completed")
    make_transaction(project, 80, type="expense", status="completed")

    today = clock.today()
    response = api.get(
        "/api/reports",
        params={
            "period": "custom",
            "start": (today - timedelta(days=1)).isoformat(),
            "end": (today + timedelta(days=1)).isoformat(),
        },
    )

    assert response.status_code == 200, response.text
    report = response.json()["data"]
    assert report["range"]["period"] == "custom"
    assert report["metrics"]["period_revenue"] == pytest.approx(300)
    assert report["metrics"]["total_expenses"] == pytest.approx(80)
    assert report["metrics"]["total_clients"] == 1
    assert report["metrics"]["all_time"]["gross_income"] == pytest.approx(300)
    assert report["charts"]["client_projects"] == [{"name": "Acme", "value": 1, "projects": 1}]
    assert len(report["charts"]["monthly"]) == 12
    assert len(report["charts"]["performance"]) == 3


def test_report_defaults_to_monthly(api):
    response = api.get("/api/reports")

    assert response.status_code == 200
    assert response.json()["data"]["range"]["period"] == "monthly"


def test_custom_report_missing_bound_falls_back_to_monthly(api):
    response = api.get("/api/reports", params={"period": "custom", "start": "2024-01-01"})

    assert response.json()["data"]["range"]["period"] == "monthly"


def test_reversed_custom_range_returns_empty_report(api, make_project, make_transaction):
    project = make_project()
    make_transaction(project, 300, status="completed", date="2024-03-15T10:00:00")

    response = api.get("/api/reports", params={"period": "custom", "start": "2024-03-31", "end": "2024-03-01"})

    assert response.status_code == 200, response.text
    report = response.json()["data"]
    metrics = report["metrics"]
    assert report["range"]["period"] == "custom"
    assert metrics["total_income"] == 0
    assert metrics["total_expenses"] == 0
    assert metrics["period_revenue"] == 0
    assert metrics["revenue_growth"] == 0
    assert report["charts"]["revenue"] == []
    assert report["charts"]["performance"] == []


def test_unknown_period_is_rejected(api):
    assert api.get("/api/reports", params={"period": "daily"}).status_code == 400


def test_root_and_health(api):
    assert api.get("/health").json() == {"status": "healthy"}
    assert api.get("/").json()["status"] == "running"


def test_responses_carry_request_id(api):
    response = api.get("/health", headers={"X-Request-ID": "3f1c6d2e8a9b4c7d9e0f1a2b3c4d5e6f"})

    assert response.headers["X-Request-ID"] == "3f1c6d2e8a9b4c7d9e0f1a2b3c4d5e6f"
