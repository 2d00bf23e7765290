"""Task API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from app.application.services import task_service
from app.domain.repositories.client_repository import ClientRepository
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.repositories.task_repository import TaskRepository
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.task import TaskCreate, TaskUpdate
from app.interfaces.api.responses import deleted, envelope
from app.interfaces.deps import (
    get_client_repository,
    get_project_repository,
    get_task_repository,
    get_user_repository,
)

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


@router.get("")
def list_tasks(
    project_id: Optional[int] = None,
    repo: TaskRepository = Depends(get_task_repository),
):
    return envelope("Tasks retrieved successfully", task_service.list_tasks(repo, project_id))


@router.get("/{task_id}")
def get_task(task_id: int, repo: TaskRepository = Depends(get_task_repository)):
    return envelope("Task retrieved successfully", task_service.get_task(repo, task_id))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_task(
    data: TaskCreate,
    repo: TaskRepository = Depends(get_task_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
    client_repo: ClientRepository = Depends(get_client_repository),
    user_repo: UserRepository = Depends(get_user_repository),
):
    task = task_service.create_task(repo, project_repo, client_repo, user_repo, data)
    return envelope("Task created successfully", task)


@router.put("/{task_id}")
def update_task(
    task_id: int,
    data: TaskUpdate,
    repo: TaskRepository = Depends(get_task_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
    client_repo: ClientRepository = Depends(get_client_repository),
    user_repo: UserRepository = Depends(get_user_repository),
):
    task = task_service.update_task(repo, project_repo, client_repo, user_repo, task_id, data)
    return envelope("Task updated successfully", task)


@router.delete("/{task_id}")
def delete_task(task_id: int, repo: TaskRepository = Depends(get_task_repository)):
    return deleted("Task deleted successfully", task_service.delete_task(repo, task_id))
