"""
SQLAlchemy Implementation of Task Repository.
"""

from typing import List, Optional

from app.domain.models.client import Client
from app.domain.models.project import Project
from app.domain.models.task import Task
from app.domain.models.user import User
from app.domain.repositories.task_repository import TaskRepository
from app.domain.schemas.task import NO_PROJECT_TITLE, TaskRead
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository, row_to_dict


class SQLAlchemyTaskRepository(SQLAlchemyRepository[Task], TaskRepository):
    """Task repository implementation using SQLAlchemy."""

    def _enriched_query(self):
        return (
            self.db.query(
                Task,
                Client.company_name.label("client_name"),
                User.name.label("assigned_to_name"),
                Project.title.label("project_title"),
            )
            .outerjoin(Client, Task.client_id == Client.id)
            .outerjoin(User, Task.assigned_to == User.id)
            .outerjoin(Project, Task.project_id == Project.id)
        )

    @staticmethod
    def _to_read(row) -> TaskRead:
        return TaskRead.model_validate({
            **row_to_dict(row.Task),
            "client_name": row.client_name,
            "assigned_to_name": row.assigned_to_name,
            "project_title": row.project_title or NO_PROJECT_TITLE,
        })

    def list_read(self, project_id: Optional[int] = None) -> List[TaskRead]:
        query = self._enriched_query()
        if project_id is not None:
            query = query.filter(Task.project_id == project_id)
        rows = query.order_by(Task.created_at.desc(), Task.id.desc()).all()
        return [self._to_read(row) for row in rows]

    def get_read(self, id: int) -> Optional[TaskRead]:
        row = self._enriched_query().filter(Task.id == id).first()
        return self._to_read(row) if row else None
