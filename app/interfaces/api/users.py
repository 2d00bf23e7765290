"""User API routes."""

from fastapi import APIRouter, Depends, status

from app.application.services import user_service
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.user import UserCreate, UserUpdate
from app.interfaces.api.responses import deleted, envelope
from app.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("")
def list_users(repo: UserRepository = Depends(get_user_repository)):
    return envelope("Users retrieved successfully", user_service.list_users(repo))


@router.get("/{user_id}")
def get_user(user_id: int, repo: UserRepository = Depends(get_user_repository)):
    return envelope("User retrieved successfully", user_service.get_user(repo, user_id))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(data: UserCreate, repo: UserRepository = Depends(get_user_repository)):
    return envelope("User created successfully", user_service.create_user(repo, data))


@router.put("/{user_id}")
def update_user(user_id: int, data: UserUpdate, repo: UserRepository = Depends(get_user_repository)):
    return envelope("User updated successfully", user_service.update_user(repo, user_id, data))


@router.delete("/{user_id}")
def delete_user(user_id: int, repo: UserRepository = Depends(get_user_repository)):
    return deleted("User deleted successfully", user_service.delete_user(repo, user_id))
