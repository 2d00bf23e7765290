"""
SQLAlchemy Implementation of Project Repository.
"""

from typing import List, Optional

from sqlalchemy import case, func

from app.domain.models.client import Client
from app.domain.models.project import Project
from app.domain.models.task import Task
from app.domain.models.transaction import Transaction
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.schemas.project import ProjectRead
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository, row_to_dict


class SQLAlchemyProjectRepository(SQLAlchemyRepository[Project], ProjectRepository):
    """Project repository implementation using SQLAlchemy."""

    def _enriched_query(self):
        task_counts = (
            self.db.query(
                Task.project_id.label("project_id"),
                func.count(Task.id).label("task_count"),
                func.sum(case((Task.status != "completed", 1), else_=0)).label("open_tasks"),
            )
            .group_by(Task.project_id)
            .subquery()
        )

        # Only completed movements adjust the calculated budget
        movements = (
            self.db.query(
                Transaction.project_id.label("project_id"),
                func.sum(case((Transaction.type == "payment", Transaction.amount), else_=0)).label("total_payments"),
                func.sum(case((Transaction.type == "expense", Transaction.amount), else_=0)).label("total_expenses"),
            )
            .filter(Transaction.status == "completed")
            .group_by(Transaction.project_id)
            .subquery()
        )

        return (
            self.db.query(
                Project,
                Client.company_name.label("client_name"),
                task_counts.c.task_count,
                task_counts.c.open_tasks,
                movements.c.total_payments,
                movements.c.total_expenses,
            )
            .outerjoin(Client, Project.client_id == Client.id)
            .outerjoin(task_counts, task_counts.c.project_id == Project.id)
            .outerjoin(movements, movements.c.project_id == Project.id)
        )

    @staticmethod
    def _to_read(row) -> ProjectRead:
        project = row.Project
        budget = float(project.budget or 0)
        payments = float(row.total_payments or 0)
        expenses = float(row.total_expenses or 0)

        effective_status = project.status
        if project.status == "not_started" and (row.open_tasks or 0) > 0:
            effective_status = "in_progress"

        return ProjectRead.model_validate({
            **row_to_dict(project),
            "client_name": row.client_name,
            "task_count": int(row.task_count or 0),
            "total_payments": payments,
            "total_expenses": expenses,
            "calculated_budget": budget + payments - expenses,
            "effective_status": effective_status,
        })

    def list_read(self, client_id: Optional[int] = None) -> List[ProjectRead]:
        query = self._enriched_query()
        if client_id is not None:
            query = query.filter(Project.client_id == client_id)
        rows = query.order_by(Project.created_at.desc(), Project.id.desc()).all()
        return [self._to_read(row) for row in rows]

    def get_read(self, id: int) -> Optional[ProjectRead]:
        row = self._enriched_query().filter(Project.id == id).first()
        return self._to_read(row) if row else None
