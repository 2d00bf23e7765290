"""Report service — loads every source list once, then runs the reporting engine."""

from datetime import datetime
from typing import Any, Optional

import structlog

from app.application.services.chart_service import build_chart_data
from app.application.services.finance_service import get_summary
from app.application.services.reporting_service import (
    ReportData,
    calculate_metrics,
    filter_report_data,
    resolve_date_range,
)
from app.config import get_settings
from app.core import clock
from app.domain.repositories.client_repository import ClientRepository
from app.domain.repositories.finance_repository import FinanceRepository
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.repositories.task_repository import TaskRepository
from app.domain.repositories.transaction_repository import TransactionRepository
from app.domain.schemas.report import Report
from app.domain.schemas.transaction import TransactionFilter

settings = get_settings()
logger = structlog.get_logger(__name__)


def build_report(
    data: ReportData,
    period: str = "monthly",
    custom_start: Any = None,
    custom_end: Any = None,
    now: Optional[datetime] = None,
    top_clients: int = 10,
) -> Report:
    now = now or clock.now()
    date_range = resolve_date_range(period, custom_start, custom_end, now=now)
    filtered = filter_report_data(data, date_range)

    return Report(
        range=date_range,
        metrics=calculate_metrics(data, filtered, date_range, now=now),
        charts=build_chart_data(data, filtered, date_range, now=now, top_clients=top_clients),
        generated_at=now,
    )


def load_report_data(
    client_repo: ClientRepository,
    project_repo: ProjectRepository,
    task_repo: TaskRepository,
    transaction_repo: TransactionRepository,
    finance_repo: FinanceRepository,
) -> ReportData:
    return ReportData(
        clients=client_repo.list_with_projects(),
        projects=project_repo.list_read(),
        tasks=task_repo.list_read(),
        transactions=transaction_repo.get_with_filters(TransactionFilter()),
        summary=get_summary(finance_repo),
    )


def generate_report(
    client_repo: ClientRepository,
    project_repo: ProjectRepository,
    task_repo: TaskRepository,
    transaction_repo: TransactionRepository,
    finance_repo: FinanceRepository,
    period: str = "monthly",
    custom_start: Any = None,
    custom_end: Any = None,
) -> Report:
    data = load_report_data(client_repo, project_repo, task_repo, transaction_repo, finance_repo)
    report = build_report(
        data,
        period=period,
        custom_start=custom_start,
        custom_end=custom_end,
        top_clients=settings.REPORT_TOP_CLIENTS,
    )

    logger.info(
        "Report generated",
        period=report.range.period,
        start=report.range.start.isoformat(),
        end=report.range.end.isoformat(),
        transactions=len(data.transactions),
    )
    return report
