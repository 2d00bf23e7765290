"""
SQLAlchemy Implementation of Transaction Repository.
"""

from datetime import datetime, time, timedelta
from typing import List, Optional

from app.domain.models.project import Project
from app.domain.models.transaction import Transaction
from app.domain.repositories.transaction_repository import TransactionRepository
from app.domain.schemas.transaction import TransactionFilter, TransactionRead
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository, row_to_dict


class SQLAlchemyTransactionRepository(SQLAlchemyRepository[Transaction], TransactionRepository):
    """Transaction repository implementation using SQLAlchemy."""

    def _joined_query(self):
        return (
            self.db.query(Transaction, Project.title.label("project_title"))
            .outerjoin(Project, Transaction.project_id == Project.id)
        )

    @staticmethod
    def _to_read(row) -> TransactionRead:
        return TransactionRead.model_validate({
            **row_to_dict(row.Transaction),
            "project_title": row.project_title,
        })

    def get_with_filters(self, filters: TransactionFilter) -> List[TransactionRead]:
        query = self._joined_query()

        if filters.type and filters.type != "all":
            query = query.filter(Transaction.type == filters.type)
        if filters.start_date:
            query = query.filter(Transaction.date >= datetime.combine(filters.start_date, time.min))
        if filters.end_date:
            # Whole end day included
            next_day = datetime.combine(filters.end_date + timedelta(days=1), time.min)
            query = query.filter(Transaction.date < next_day)
        if filters.status:
            query = query.filter(Transaction.status == filters.status)
        if filters.project_id:
            query = query.filter(Transaction.project_id == int(filters.project_id))

        rows = query.order_by(Transaction.date.desc(), Transaction.id.desc()).all()
        return [self._to_read(row) for row in rows]

    def get_read(self, id: int) -> Optional[TransactionRead]:
        row = self._joined_query().filter(Transaction.id == id).first()
        return self._to_read(row) if row else None

    def set_status(self, id: int, status: str) -> None:
        self.db.query(Transaction).filter(Transaction.id == id).update(
            {Transaction.status: status}, synchronize_session=False
        )
        self.db.commit()
