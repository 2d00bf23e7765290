"""Project API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from app.application.services import project_service
from app.domain.repositories.client_repository import ClientRepository
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.repositories.task_repository import TaskRepository
from app.domain.schemas.project import ProjectCreate, ProjectUpdate
from app.interfaces.api.responses import deleted, envelope
from app.interfaces.deps import get_client_repository, get_project_repository, get_task_repository

router = APIRouter(prefix="/api/projects", tags=["Projects"])


@router.get("")
def list_projects(
    client_id: Optional[int] = None,
    repo: ProjectRepository = Depends(get_project_repository),
):
    """List projects with client name, task count and calculated budget."""
    return envelope("Projects retrieved successfully", project_service.list_projects(repo, client_id))


@router.get("/{project_id}")
def get_project(
    project_id: int,
    repo: ProjectRepository = Depends(get_project_repository),
    task_repo: TaskRepository = Depends(get_task_repository),
):
    """One project with its tasks."""
    return envelope("Project retrieved successfully", project_service.get_project(repo, task_repo, project_id))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_project(
    data: ProjectCreate,
    repo: ProjectRepository = Depends(get_project_repository),
    client_repo: ClientRepository = Depends(get_client_repository),
):
    return envelope("Project created successfully", project_service.create_project(repo, client_repo, data))


@router.put("/{project_id}")
def update_project(
    project_id: int,
    data: ProjectUpdate,
    repo: ProjectRepository = Depends(get_project_repository),
    client_repo: ClientRepository = Depends(get_client_repository),
):
    return envelope(
        "Project updated successfully",
        project_service.update_project(repo, client_repo, project_id, data),
    )


@router.delete("/{project_id}")
def delete_project(project_id: int, repo: ProjectRepository = Depends(get_project_repository)):
    """Delete a project together with its tasks and transactions."""
    return deleted("Project deleted successfully", project_service.delete_project(repo, project_id))
