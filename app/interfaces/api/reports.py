"""Reports API — period metrics and chart series for a date window."""

from typing import Optional

from fastapi import APIRouter, Depends

from app.application.services.report_service import generate_report
from app.domain.repositories.client_repository import ClientRepository
from app.domain.repositories.finance_repository import FinanceRepository
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.repositories.task_repository import TaskRepository
from app.domain.repositories.transaction_repository import TransactionRepository
from app.domain.schemas.report import TimeFilter
from app.interfaces.api.responses import envelope
from app.interfaces.deps import (
    get_client_repository,
    get_finance_repository,
    get_project_repository,
    get_task_repository,
    get_transaction_repository,
)

router = APIRouter(prefix="/api/reports", tags=["Reports"])


@router.get("")
def get_report(
    period: TimeFilter = "monthly",
    start: Optional[str] = None,
    end: Optional[str] = None,
    client_repo: ClientRepository = Depends(get_client_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
    task_repo: TaskRepository = Depends(get_task_repository),
    transaction_repo: TransactionRepository = Depends(get_transaction_repository),
    finance_repo: FinanceRepository = Depends(get_finance_repository),
):
    """
    Period report. ``start``/``end`` (YYYY-MM-DD) apply to ``period=custom`` only;
    a custom period missing either bound falls back to monthly.
    """
    report = generate_report(
        client_repo,
        project_repo,
        task_repo,
        transaction_repo,
        finance_repo,
        period=period,
        custom_start=start,
        custom_end=end,
    )
    return envelope("Report generated successfully", report)
