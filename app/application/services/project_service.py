"""Project service — business logic for project CRUD."""

from typing import List, Optional

import structlog

from app.core.exceptions import EntityNotFoundException, ReferentialIntegrityException
from app.domain.repositories.client_repository import ClientRepository
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.repositories.task_repository import TaskRepository
from app.domain.schemas.common import parse_date
from app.domain.schemas.project import ProjectCreate, ProjectDetail, ProjectRead, ProjectUpdate

logger = structlog.get_logger(__name__)

REQUIRED_ON_UPDATE = ("title", "status")


def _ensure_client(client_repo: ClientRepository, client_id: int) -> None:
    if not client_repo.exists(client_id):
        raise ReferentialIntegrityException(
            f"Client with id {client_id} does not exist", {"field": "client_id", "value": client_id}
        )


def list_projects(repo: ProjectRepository, client_id: Optional[int] = None) -> List[ProjectRead]:
    return repo.list_read(client_id=client_id)


def get_project(repo: ProjectRepository, task_repo: TaskRepository, project_id: int) -> ProjectDetail:
    project = repo.get_read(project_id)
    if project is None:
        raise EntityNotFoundException("Project not found", {"id": project_id})
    return ProjectDetail(**project.model_dump(), tasks=task_repo.list_read(project_id=project_id))


def create_project(repo: ProjectRepository, client_repo: ClientRepository, data: ProjectCreate) -> ProjectRead:
    _ensure_client(client_repo, data.client_id)
    project = repo.create(data)
    logger.info("Project created", project_id=project.id, client_id=data.client_id)
    return repo.get_read(project.id)


def update_project(
    repo: ProjectRepository,
    client_repo: ClientRepository,
    project_id: int,
    data: ProjectUpdate,
) -> ProjectRead:
    project = repo.get_by_id(project_id)
    if project is None:
        raise EntityNotFoundException("Project not found", {"id": project_id})

    changes = data.model_dump(exclude_unset=True)
    for field in REQUIRED_ON_UPDATE:
        if field in changes and changes[field] is None:
            del changes[field]

    # Empty or null clears a date; anything unparsable keeps the stored one
    for field in ("start_date", "end_date"):
        if field not in changes:
            continue
        raw = changes[field]
        if raw is None or raw == "":
            changes[field] = None
            continue
        parsed = parse_date(raw)
        if parsed is None:
            del changes[field]
        else:
            changes[field] = parsed

    if changes.get("client_id") is not None:
        _ensure_client(client_repo, changes["client_id"])

    repo.update(project, changes)
    logger.info("Project updated", project_id=project_id, fields=sorted(changes))
    return repo.get_read(project_id)


def delete_project(repo: ProjectRepository, project_id: int) -> int:
    if not repo.delete(project_id):
        raise EntityNotFoundException("Project not found", {"id": project_id})
    logger.info("Project deleted", project_id=project_id)
    return project_id
