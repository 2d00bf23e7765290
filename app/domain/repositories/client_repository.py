"""
Client Repository Interface.
Defines specific data access operations for Clients.
"""

from typing import List, Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.client import Client
from app.domain.schemas.client import ClientCreate, ClientDashboardStats, ClientRead, ClientUpdate


class ClientRepository(BaseRepository[Client]):
    """Interface for Client-specific operations."""

    def list_with_projects(self) -> List[ClientRead]:
        """All clients, each with its projects embedded."""
        ...

    def get_with_projects(self, id: int) -> Optional[ClientRead]:
        """One client with its projects embedded, or None."""
        ...

    def create_client(self, data: ClientCreate) -> int:
        """Insert a client and return its new ID."""
        ...

    def update_client(self, id: int, data: ClientUpdate) -> ClientRead:
        """Update a client inside a single transaction; rolls back on any failure."""
        ...

    def get_dashboard_stats(self) -> ClientDashboardStats:
        """Client and project headcounts for the dashboard."""
        ...
