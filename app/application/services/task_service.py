"""Task service — business logic for task CRUD."""

from typing import List, Optional

import structlog

from app.core.exceptions import EntityNotFoundException, ReferentialIntegrityException
from app.domain.repositories.base import BaseRepository
from app.domain.repositories.client_repository import ClientRepository
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.repositories.task_repository import TaskRepository
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.task import TaskCreate, TaskRead, TaskUpdate

logger = structlog.get_logger(__name__)

REQUIRED_ON_UPDATE = ("title", "status", "priority", "type", "due_date", "project_id")


def _ensure_exists(repo: BaseRepository, entity: str, field: str, value: Optional[int]) -> None:
    if value is not None and not repo.exists(value):
        raise ReferentialIntegrityException(
            f"{entity} with id {value} does not exist", {"field": field, "value": value}
        )


def list_tasks(repo: TaskRepository, project_id: Optional[int] = None) -> List[TaskRead]:
    return repo.list_read(project_id=project_id)


def get_task(repo: TaskRepository, task_id: int) -> TaskRead:
    task = repo.get_read(task_id)
    if task is None:
        raise EntityNotFoundException("Task not found", {"id": task_id})
    return task


def create_task(
    repo: TaskRepository,
    project_repo: ProjectRepository,
    client_repo: ClientRepository,
    user_repo: UserRepository,
    data: TaskCreate,
) -> TaskRead:
    _ensure_exists(project_repo, "Project", "project_id", data.project_id)
    _ensure_exists(client_repo, "Client", "client_id", data.client_id)
    _ensure_exists(user_repo, "User", "assigned_to", data.assigned_to)

    task = repo.create(data)
    logger.info("Task created", task_id=task.id, project_id=data.project_id, type=data.type)
    return get_task(repo, task.id)


def update_task(
    repo: TaskRepository,
    project_repo: ProjectRepository,
    client_repo: ClientRepository,
    user_repo: UserRepository,
    task_id: int,
    data: TaskUpdate,
) -> TaskRead:
    task = repo.get_by_id(task_id)
    if task is None:
        raise EntityNotFoundException("Task not found", {"id": task_id})

    changes = data.model_dump(exclude_unset=True)
    for field in REQUIRED_ON_UPDATE:
        if field in changes and changes[field] is None:
            del changes[field]

    _ensure_exists(project_repo, "Project", "project_id", changes.get("project_id"))
    _ensure_exists(client_repo, "Client", "client_id", changes.get("client_id"))
    _ensure_exists(user_repo, "User", "assigned_to", changes.get("assigned_to"))

    repo.update(task, changes)
    logger.info("Task updated", task_id=task_id, fields=sorted(changes))
    return get_task(repo, task_id)


def delete_task(repo: TaskRepository, task_id: int) -> int:
    if not repo.delete(task_id):
        raise EntityNotFoundException("Task not found", {"id": task_id})
    logger.info("Task deleted", task_id=task_id)
    return task_id
