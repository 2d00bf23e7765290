"""
Project Repository Interface.
"""

from typing import List, Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.project import Project
from app.domain.schemas.project import ProjectRead


class ProjectRepository(BaseRepository[Project]):
    """Interface for Project-specific operations."""

    def list_read(self, client_id: Optional[int] = None) -> List[ProjectRead]:
        """Projects joined with client name, task count and transaction totals."""
        ...

    def get_read(self, id: int) -> Optional[ProjectRead]:
        """One enriched project, or None."""
        ...
