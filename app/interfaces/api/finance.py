"""Finance API routes — summary snapshot and transactions."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.application.services import finance_service
from app.domain.repositories.finance_repository import FinanceRepository
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.repositories.transaction_repository import TransactionRepository
from app.domain.schemas.transaction import TransactionCreate, TransactionFilter, TransactionStatusUpdate
from app.interfaces.api.responses import deleted, envelope
from app.interfaces.deps import (
    get_finance_repository,
    get_project_repository,
    get_transaction_repository,
)

router = APIRouter(prefix="/api/finance", tags=["Finance"])


@router.get("/summary")
def financial_summary(repo: FinanceRepository = Depends(get_finance_repository)):
    """All-time income, expenses, pending work, monthly revenue and recent activity."""
    return envelope("Financial summary retrieved successfully", finance_service.get_summary(repo))


@router.get("/transactions")
def list_transactions(
    type: Optional[str] = None,
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    status: Optional[str] = None,
    project_id: Optional[int] = None,
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    """Transactions newest first; type=all disables the type filter."""
    filters = TransactionFilter(
        type=type,
        start_date=start_date,
        end_date=end_date,
        status=status,
        project_id=project_id,
    )
    return envelope("Transactions retrieved successfully", finance_service.get_transactions(repo, filters))


@router.post("/transactions", status_code=status.HTTP_201_CREATED)
def create_transaction(
    data: TransactionCreate,
    repo: TransactionRepository = Depends(get_transaction_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
):
    transaction = finance_service.create_transaction(repo, project_repo, data)
    return envelope("Transaction created successfully", transaction)


@router.put("/transactions/{transaction_id}/status")
def update_transaction_status(
    transaction_id: int,
    data: TransactionStatusUpdate,
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    transaction = finance_service.update_transaction_status(repo, transaction_id, data.status)
    return envelope("Transaction status updated successfully", transaction)


@router.delete("/transactions/{transaction_id}")
def delete_transaction(
    transaction_id: int,
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    return deleted("Transaction deleted successfully", finance_service.delete_transaction(repo, transaction_id))
