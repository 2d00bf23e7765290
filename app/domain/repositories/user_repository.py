"""
User Repository Interface.
"""

from app.domain.repositories.base import BaseRepository
from app.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Users carry no behaviour beyond CRUD."""
