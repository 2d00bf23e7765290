"""Client service — business logic for client CRUD and dashboard stats."""

from typing import List

import structlog

from app.core.exceptions import EntityNotFoundException
from app.domain.repositories.client_repository import ClientRepository
from app.domain.schemas.client import ClientCreate, ClientDashboardStats, ClientRead, ClientUpdate

logger = structlog.get_logger(__name__)


def list_clients(repo: ClientRepository) -> List[ClientRead]:
    return repo.list_with_projects()


def get_client(repo: ClientRepository, client_id: int) -> ClientRead:
    client = repo.get_with_projects(client_id)
    if client is None:
        raise EntityNotFoundException("Client not found", {"id": client_id})
    return client


def create_client(repo: ClientRepository, data: ClientCreate) -> ClientRead:
    """Insert, then re-select so the response carries generated fields."""
    client_id = repo.create_client(data)
    logger.info("Client created", client_id=client_id, company_name=data.company_name)
    return get_client(repo, client_id)


def update_client(repo: ClientRepository, client_id: int, data: ClientUpdate) -> ClientRead:
    return repo.update_client(client_id, data)


def delete_client(repo: ClientRepository, client_id: int) -> int:
    if not repo.delete(client_id):
        raise EntityNotFoundException("Client not found", {"id": client_id})
    logger.info("Client deleted", client_id=client_id)
    return client_id


def get_dashboard_stats(repo: ClientRepository) -> ClientDashboardStats:
    return repo.get_dashboard_stats()
