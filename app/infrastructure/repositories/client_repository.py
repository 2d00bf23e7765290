"""
SQLAlchemy Implementation of Client Repository.
"""

import json
from collections import defaultdict
from typing import List, Optional

import structlog
from sqlalchemy import func

from app.core.exceptions import EntityNotFoundException
from app.domain.models.client import Client
from app.domain.models.project import Project
from app.domain.repositories.client_repository import ClientRepository
from app.domain.schemas.client import ClientCreate, ClientDashboardStats, ClientRead, ClientUpdate
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository, row_to_dict
from app.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository

logger = structlog.get_logger(__name__)

# First write of an update; email and social contacts go in the second
IDENTITY_FIELDS = ("company_name", "contact_person", "status", "phone", "address", "country")

# Explicit null on these means "leave unchanged"
NON_NULLABLE_FIELDS = {"company_name", "contact_person", "email", "status"}


def _dump_social_contacts(value: Optional[dict]) -> Optional[str]:
    return json.dumps(value) if value is not None else None


class SQLAlchemyClientRepository(SQLAlchemyRepository[Client], ClientRepository):
    """Client repository implementation using SQLAlchemy."""

    def _projects(self) -> SQLAlchemyProjectRepository:
        return SQLAlchemyProjectRepository(self.db, Project)

    def _to_read(self, client: Client, projects) -> ClientRead:
        return ClientRead.model_validate({**row_to_dict(client), "projects": projects})

    def list_with_projects(self) -> List[ClientRead]:
        clients = self.db.query(Client).order_by(Client.created_at.desc(), Client.id.desc()).all()

        projects_by_client = defaultdict(list)
        for project in self._projects().list_read():
            if project.client_id is not None:
                projects_by_client[project.client_id].append(project)

        return [self._to_read(client, projects_by_client[client.id]) for client in clients]

    def get_with_projects(self, id: int) -> Optional[ClientRead]:
        client = self.get_by_id(id)
        if client is None:
            return None
        return self._to_read(client, self._projects().list_read(client_id=id))

    def create_client(self, data: ClientCreate) -> int:
        values = data.model_dump(exclude={"social_contacts"})
        values["contact_person"] = values.get("contact_person") or data.company_name
        values["social_contacts"] = _dump_social_contacts(
            data.social_contacts.model_dump() if data.social_contacts else None
        )

        client = Client(**values)
        self.db.add(client)
        self.db.commit()
        return client.id

    def update_client(self, id: int, data: ClientUpdate) -> ClientRead:
        changes = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if not (field in NON_NULLABLE_FIELDS and value is None)
        }

        try:
            client = (
                self.db.query(Client)
                .filter(Client.id == id)
                .with_for_update()
                .first()
            )
            if client is None:
                raise EntityNotFoundException(f"Client with id {id} not found")

            for field in IDENTITY_FIELDS:
                if field in changes:
                    setattr(client, field, changes[field])
            self.db.flush()

            if "email" in changes:
                client.email = changes["email"]
            if "social_contacts" in changes:
                client.social_contacts = _dump_social_contacts(changes["social_contacts"])
            self.db.flush()

            updated = self.get_with_projects(id)
            self.db.commit()
        except Exception as exc:
            self.db.rollback()
            logger.warning("Client update rolled back", client_id=id, error=str(exc))
            raise

        logger.info("Client updated", client_id=id, fields=sorted(changes))
        return updated

    def get_dashboard_stats(self) -> ClientDashboardStats:
        total_clients = self.db.query(func.count(Client.id)).scalar() or 0
        active_clients = (
            self.db.query(func.count(Client.id)).filter(Client.status == "active").scalar() or 0
        )
        total_projects = self.db.query(func.count(Project.id)).scalar() or 0
        active_projects = (
            self.db.query(func.count(Project.id))
            .filter(Project.status == "in_progress")
            .scalar()
            or 0
        )

        return ClientDashboardStats(
            total_clients=total_clients,
            active_clients=active_clients,
            total_projects=total_projects,
            active_projects=active_projects,
        )
