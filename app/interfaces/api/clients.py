"""Client API routes — CRUD plus dashboard headcounts."""

from fastapi import APIRouter, Depends, status

from app.application.services import client_service
from app.domain.repositories.client_repository import ClientRepository
from app.domain.schemas.client import ClientCreate, ClientUpdate
from app.interfaces.api.responses import deleted, envelope
from app.interfaces.deps import get_client_repository

router = APIRouter(prefix="/api/clients", tags=["Clients"])


@router.get("/dashboard/stats")
def dashboard_stats(repo: ClientRepository = Depends(get_client_repository)):
    """Client and project headcounts."""
    return envelope("Dashboard stats retrieved successfully", client_service.get_dashboard_stats(repo))


@router.get("")
def list_clients(repo: ClientRepository = Depends(get_client_repository)):
    """List clients, each with its projects."""
    return envelope("Clients retrieved successfully", client_service.list_clients(repo))


@router.get("/{client_id}")
def get_client(client_id: int, repo: ClientRepository = Depends(get_client_repository)):
    return envelope("Client retrieved successfully", client_service.get_client(repo, client_id))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_client(data: ClientCreate, repo: ClientRepository = Depends(get_client_repository)):
    return envelope("Client created successfully", client_service.create_client(repo, data))


@router.put("/{client_id}")
def update_client(
    client_id: int,
    data: ClientUpdate,
    repo: ClientRepository = Depends(get_client_repository),
):
    """Update a client atomically; a failure leaves the stored row untouched."""
    return envelope("Client updated successfully", client_service.update_client(repo, client_id, data))


@router.delete("/{client_id}")
def delete_client(client_id: int, repo: ClientRepository = Depends(get_client_repository)):
    return deleted("Client deleted successfully", client_service.delete_client(repo, client_id))
