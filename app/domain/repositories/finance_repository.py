"""
Finance Repository Interface.
Cross-table aggregates over transactions, projects and tasks.
"""

from datetime import date
from typing import List, Protocol

from app.domain.schemas.finance import PendingInvoices, RecentTransaction


class FinanceRepository(Protocol):

    def get_gross_income(self) -> float:
        """Payments (completed or pending) plus completed project and task budgets."""
        ...

    def get_total_expenses(self) -> float:
        """Completed invoice and expense transactions."""
        ...

    def get_pending_invoices(self) -> PendingInvoices:
        """Non-completed projects and tasks plus pending transactions."""
        ...

    def get_total_budgets(self) -> float:
        """All project and task budgets, whatever their status."""
        ...

    def get_monthly_revenue(self, today: date, pin_year: bool = True) -> float:
        """Net income for the calendar month containing ``today``."""
        ...

    def get_recent_activity(self, limit: int = 10) -> List[RecentTransaction]:
        """Latest transactions merged with budgeted projects and tasks."""
        ...
