"""
SQLAlchemy Implementation of Finance Repository.
All aggregates use COALESCE so an empty table contributes 0, never NULL.
"""

from datetime import date, datetime
from typing import List

from sqlalchemy import extract, func
from sqlalchemy.orm import Session

from app.domain.models.project import Project
from app.domain.models.task import Task
from app.domain.models.transaction import Transaction
from app.domain.repositories.finance_repository import FinanceRepository
from app.domain.schemas.finance import PendingInvoices, RecentTransaction

# Per-source caps for the recent activity feed
RECENT_TRANSACTIONS = 5
RECENT_PROJECTS = 3
RECENT_TASKS = 3

INCOME_PAYMENT_STATUSES = ("completed", "pending")
EXPENSE_TYPES = ("invoice", "expense")


class SQLAlchemyFinanceRepository(FinanceRepository):
    """Finance aggregates over transactions, projects and tasks."""

    def __init__(self, db: Session):
        self.db = db

    def _sum(self, column, *criteria) -> float:
        value = self.db.query(func.coalesce(func.sum(column), 0)).filter(*criteria).scalar()
        return float(value or 0)

    def _count(self, column, *criteria) -> int:
        return int(self.db.query(func.count(column)).filter(*criteria).scalar() or 0)

    @staticmethod
    def _in_month(column, today: date, pin_year: bool) -> list:
        criteria = [extract("month", column) == today.month]
        if pin_year:
            criteria.append(extract("year", column) == today.year)
        return criteria

    def get_gross_income(self) -> float:
        payments = self._sum(
            Transaction.amount,
            Transaction.type == "payment",
            Transaction.status.in_(INCOME_PAYMENT_STATUSES),
        )
        project_budgets = self._sum(Project.budget, Project.status == "completed")
        task_budgets = self._sum(Task.budget, Task.status == "completed")
        return payments + project_budgets + task_budgets

    def get_total_expenses(self) -> float:
        return self._sum(
            Transaction.amount,
            Transaction.type.in_(EXPENSE_TYPES),
            Transaction.status == "completed",
        )

    def get_pending_invoices(self) -> PendingInvoices:
        count = (
            self._count(Project.id, Project.status != "completed")
            + self._count(Task.id, Task.status != "completed")
            + self._count(Transaction.id, Transaction.status == "pending")
        )
        total = (
            self._sum(Project.budget, Project.status != "completed")
            + self._sum(Task.budget, Task.status != "completed")
            + self._sum(Transaction.amount, Transaction.status == "pending")
        )
        return PendingInvoices(count=count, total=total)

    def get_total_budgets(self) -> float:
        return self._sum(Project.budget) + self._sum(Task.budget)

    def get_monthly_revenue(self, today: date, pin_year: bool = True) -> float:
        income = (
            self._sum(
                Transaction.amount,
                Transaction.type == "payment",
                Transaction.status.in_(INCOME_PAYMENT_STATUSES),
                *self._in_month(Transaction.date, today, pin_year),
            )
            + self._sum(
                Project.budget,
                Project.status == "completed",
                *self._in_month(Project.updated_at, today, pin_year),
            )
            + self._sum(
                Task.budget,
                Task.status == "completed",
                *self._in_month(Task.updated_at, today, pin_year),
            )
        )
        expenses = self._sum(
            Transaction.amount,
            Transaction.type.in_(EXPENSE_TYPES),
            Transaction.status == "completed",
            *self._in_month(Transaction.date, today, pin_year),
        )
        return income - expenses

    def get_recent_activity(self, limit: int = 10) -> List[RecentTransaction]:
        transactions = (
            self.db.query(Transaction, Project.title.label("project_title"))
            .outerjoin(Project, Transaction.project_id == Project.id)
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .limit(RECENT_TRANSACTIONS)
            .all()
        )
        projects = (
            self.db.query(Project)
            .filter(Project.budget.isnot(None))
            .order_by(Project.updated_at.desc(), Project.id.desc())
            .limit(RECENT_PROJECTS)
            .all()
        )
        tasks = (
            self.db.query(Task, Project.title.label("project_title"))
            .outerjoin(Project, Task.project_id == Project.id)
            .filter(Task.budget.isnot(None))
            .order_by(Task.updated_at.desc(), Task.id.desc())
            .limit(RECENT_TASKS)
            .all()
        )

        feed = [
            RecentTransaction(
                source="transaction",
                id=row.Transaction.id,
                type=row.Transaction.type,
                amount=float(row.Transaction.amount or 0),
                description=row.Transaction.description,
                project_id=row.Transaction.project_id,
                project_title=row.project_title,
                status=row.Transaction.status,
                date=row.Transaction.date,
            )
            for row in transactions
        ]
        feed += [
            RecentTransaction(
                source="project",
                id=project.id,
                type="payment",
                amount=float(project.budget or 0),
                description=f"Project: {project.title}",
                project_id=project.id,
                project_title=project.title,
                status=project.status,
                date=project.updated_at,
            )
            for project in projects
        ]
        feed += [
            RecentTransaction(
                source="task",
                id=row.Task.id,
                type="payment",
                amount=float(row.Task.budget or 0),
                description=f"Task: {row.Task.title}",
                project_id=row.Task.project_id,
                project_title=row.project_title,
                status=row.Task.status,
                date=row.Task.updated_at,
            )
            for row in tasks
        ]

        feed.sort(key=lambda item: item.date or datetime.min, reverse=True)
        return feed[:limit]
