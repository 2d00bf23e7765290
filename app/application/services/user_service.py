"""User service — plain CRUD, no authentication semantics."""

from typing import List

import structlog

from app.core.exceptions import EntityNotFoundException
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.user import UserCreate, UserRead, UserUpdate

logger = structlog.get_logger(__name__)


def _get_or_404(repo: UserRepository, user_id: int) -> User:
    user = repo.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundException("User not found", {"id": user_id})
    return user


def list_users(repo: UserRepository) -> List[UserRead]:
    return [UserRead.model_validate(user) for user in repo.list(limit=1000)]


def get_user(repo: UserRepository, user_id: int) -> UserRead:
    return UserRead.model_validate(_get_or_404(repo, user_id))


def create_user(repo: UserRepository, data: UserCreate) -> UserRead:
    user = repo.create(data)
    logger.info("User created", user_id=user.id)
    return UserRead.model_validate(user)


def update_user(repo: UserRepository, user_id: int, data: UserUpdate) -> UserRead:
    user = _get_or_404(repo, user_id)
    changes = {field: value for field, value in data.model_dump(exclude_unset=True).items() if value is not None}
    updated = repo.update(user, changes)
    logger.info("User updated", user_id=user_id, fields=sorted(changes))
    return UserRead.model_validate(updated)


def delete_user(repo: UserRepository, user_id: int) -> int:
    if not repo.delete(user_id):
        raise EntityNotFoundException("User not found", {"id": user_id})
    logger.info("User deleted", user_id=user_id)
    return user_id
