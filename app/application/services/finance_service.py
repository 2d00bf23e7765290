"""Finance service — financial summary and transaction operations."""

from datetime import date
from typing import List, Optional

import structlog

from app.config import get_settings
from app.core import clock
from app.core.exceptions import EntityNotFoundException, ReferentialIntegrityException
from app.domain.repositories.finance_repository import FinanceRepository
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.repositories.transaction_repository import TransactionRepository
from app.domain.schemas.finance import FinancialSummary
from app.domain.schemas.transaction import (
    TransactionCreate,
    TransactionFilter,
    TransactionRead,
)

settings = get_settings()
logger = structlog.get_logger(__name__)


def get_summary(repo: FinanceRepository, today: Optional[date] = None) -> FinancialSummary:
    """
    All-time financial snapshot.

    grossIncome counts payments that are completed or pending plus the budgets of
    completed projects and tasks; totalIncome is gross minus completed invoices
    and expenses. Pending invoices deliberately include every non-completed
    project and task budget, not just invoice-type transactions.
    """
    today = today or clock.today()

    gross_income = repo.get_gross_income()
    total_expenses = repo.get_total_expenses()

    summary = FinancialSummary(
        total_income=gross_income - total_expenses,
        total_expenses=total_expenses,
        gross_income=gross_income,
        pending_invoices=repo.get_pending_invoices(),
        total_budgets=repo.get_total_budgets(),
        monthly_revenue=repo.get_monthly_revenue(today, pin_year=settings.MONTHLY_REVENUE_PIN_YEAR),
        recent_transactions=repo.get_recent_activity(limit=settings.RECENT_TRANSACTIONS_LIMIT),
    )

    logger.debug(
        "Financial summary computed",
        gross_income=summary.gross_income,
        total_expenses=summary.total_expenses,
        monthly_revenue=summary.monthly_revenue,
    )
    return summary


def get_transactions(repo: TransactionRepository, filters: TransactionFilter) -> List[TransactionRead]:
    return repo.get_with_filters(filters)


def create_transaction(
    repo: TransactionRepository,
    project_repo: ProjectRepository,
    data: TransactionCreate,
) -> TransactionRead:
    if not project_repo.exists(data.project_id):
        raise ReferentialIntegrityException(
            f"Project with id {data.project_id} does not exist",
            {"field": "project_id", "value": data.project_id},
        )

    # Omitted date falls back to the column default (now)
    transaction = repo.create(data.model_dump(exclude_none=True))
    logger.info(
        "Transaction created",
        transaction_id=transaction.id,
        type=data.type,
        amount=data.amount,
        project_id=data.project_id,
    )
    return repo.get_read(transaction.id)


def update_transaction_status(repo: TransactionRepository, transaction_id: int, status: str) -> TransactionRead:
    repo.set_status(transaction_id, status)

    # Presence is checked by re-selecting; the affected-row count is not used
    transaction = repo.get_read(transaction_id)
    if transaction is None:
        raise EntityNotFoundException("Transaction not found", {"id": transaction_id})

    logger.info("Transaction status updated", transaction_id=transaction_id, status=status)
    return transaction


def delete_transaction(repo: TransactionRepository, transaction_id: int) -> int:
    if not repo.delete(transaction_id):
        raise EntityNotFoundException("Transaction not found", {"id": transaction_id})
    logger.info("Transaction deleted", transaction_id=transaction_id)
    return transaction_id
