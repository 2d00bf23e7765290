"""Financial summary: all-time aggregates, monthly revenue and the recent feed."""

from datetime import datetime, timedelta

import pytest

from app.core import clock
from app.infrastructure.repositories.finance_repository import SQLAlchemyFinanceRepository


def _summary(api):
    response = api.get("/api/finance/summary")
    assert response.status_code == 200, response.text
    return response.json()["data"]


def test_empty_database_yields_zeroes(api):
    summary = _summary(api)

    assert summary["totalIncome"] == 0
    assert summary["totalExpenses"] == 0
    assert summary["grossIncome"] == 0
    assert summary["pendingInvoices"] == {"count": 0, "total": 0}
    assert summary["totalBudgets"] == 0
    assert summary["monthlyRevenue"] == 0
    assert summary["recentTransactions"] == []


def test_gross_and_net_income(api, make_project, make_task, make_transaction):
    project = make_project(status="completed", budget=1000)
    make_task(project, status="completed", budget=100)
    make_transaction(project, 200, status="pending")
    make_transaction(project, 300, status="completed")
    make_transaction(project, 40, status="cancelled")
    make_transaction(project, 50, type="invoice", status="completed")
    make_transaction(project, 25, type="expense", status="completed")
    make_transaction(project, 1000, type="expense", status="pending")

    summary = _summary(api)

    assert summary["grossIncome"] == pytest.approx(1600)
    assert summary["totalExpenses"] == pytest.approx(75)
    assert summary["totalIncome"] == pytest.approx(1525)
    assert summary["totalIncome"] == pytest.approx(summary["grossIncome"] - summary["totalExpenses"])


def test_null_budgets_contribute_zero(api, make_project, make_task):
    project = make_project(status="completed")
    make_task(project, status="completed")

    summary = _summary(api)

    assert summary["grossIncome"] == 0
    assert summary["totalBudgets"] == 0
    assert summary["totalIncome"] == 0


def test_pending_invoices_combine_open_work_and_pending_transactions(
    api, make_project, make_task, make_transaction
):
    open_project = make_project(status="not_started", budget=400)
    done_project = make_project(status="completed", budget=1000)
    make_task(done_project, status="pending", budget=50)
    make_task(done_project, status="completed", budget=20)
    make_transaction(open_project, 70, status="pending")
    make_transaction(open_project, 10, status="completed")

    summary = _summary(api)

    assert summary["pendingInvoices"] == {"count": 3, "total": pytest.approx(520)}
    assert summary["totalBudgets"] == pytest.approx(1470)


def test_monthly_revenue_nets_payments_and_expenses_of_current_month(api, make_project, make_transaction):
    project = make_project()
    make_transaction(project, 500, status="completed")
    make_transaction(project, 100, type="expense", status="completed")

    assert _summary(api)["monthlyRevenue"] == pytest.approx(400)


def test_monthly_revenue_ignores_same_month_of_previous_year(
    api, db_session, make_project, make_transaction
):
    today = clock.today()
    last_year = datetime(today.year - 1, today.month, 1, 12, 0)
    project = make_project()
    make_transaction(project, 500, status="completed", date=last_year.isoformat())

    assert _summary(api)["monthlyRevenue"] == 0

    repo = SQLAlchemyFinanceRepository(db_session)
    assert repo.get_monthly_revenue(today, pin_year=False) == pytest.approx(500)


def test_pending_payment_is_counted_once_after_completion(api, make_project, make_transaction):
    project = make_project()
    baseline = _summary(api)["grossIncome"]

    transaction = make_transaction(project, 50, status="pending")
    assert _summary(api)["grossIncome"] == pytest.approx(baseline + 50)

    response = api.put(f"/api/finance/transactions/{transaction['id']}/status", json={"status": "completed"})
    assert response.status_code == 200

    assert _summary(api)["grossIncome"] == pytest.approx(baseline + 50)


def test_recent_feed_is_capped_sorted_and_tagged(api, make_project, make_task, make_transaction):
    base = clock.now() - timedelta(days=30)
    anchor = make_project(budget=10)
    for offset in range(7):
        make_transaction(anchor, 5 + offset, date=(base + timedelta(days=offset)).isoformat())
    for _ in range(3):
        make_project(budget=100)
    for _ in range(4):
        make_task(anchor, budget=20)

    feed = _summary(api)["recentTransactions"]

    assert len(feed) == 10
    dates = [datetime.fromisoformat(item["date"]) for item in feed]
    assert dates == sorted(dates, reverse=True)

    sources = [item["source"] for item in feed]
    assert sources.count("project") == 3
    assert sources.count("task") == 3
    assert sources.count("transaction") == 4

    synthetic = [item for item in feed if item["source"] != "transaction"]
    assert all(item["type"] == "payment" for item in synthetic)
    assert any(item["description"].startswith("Project: ") for item in synthetic)
    assert any(item["description"].startswith("Task: ") for item in synthetic)


def test_summary_is_idempotent(api, make_project, make_task, make_transaction):
    project = make_project(budget=250)
    make_task(project, budget=30)
    make_transaction(project, 80, status="completed")

    assert _summary(api) == _summary(api)
