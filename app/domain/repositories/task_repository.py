"""
Task Repository Interface.
"""

from typing import List, Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.task import Task
from app.domain.schemas.task import TaskRead


class TaskRepository(BaseRepository[Task]):
    """Interface for Task-specific operations."""

    def list_read(self, project_id: Optional[int] = None) -> List[TaskRead]:
        """Tasks joined with client, assignee and project names, newest first."""
        ...

    def get_read(self, id: int) -> Optional[TaskRead]:
        """One enriched task, or None."""
        ...
