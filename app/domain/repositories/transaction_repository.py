"""
Transaction Repository Interface.
"""

from typing import List, Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.transaction import Transaction
from app.domain.schemas.transaction import TransactionFilter, TransactionRead


class TransactionRepository(BaseRepository[Transaction]):
    """Interface for Transaction-specific operations."""

    def get_with_filters(self, filters: TransactionFilter) -> List[TransactionRead]:
        """Transactions joined with project title, newest first."""
        ...

    def get_read(self, id: int) -> Optional[TransactionRead]:
        """One transaction joined with its project title, or None."""
        ...

    def set_status(self, id: int, status: str) -> None:
        """Write a new status. Does not report whether a row matched."""
        ...
