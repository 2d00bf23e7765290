"""Pydantic schemas for Client domain."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from app.domain.schemas.common import EmailAddress, parse_json_object
from app.domain.schemas.project import ProjectRead

ClientStatus = Literal["active", "inactive"]


class SocialContacts(BaseModel):
    whatsapp: Optional[str] = None
    linkedin: Optional[str] = None


class ClientBase(BaseModel):
    phone: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None
    social_contacts: Optional[SocialContacts] = None


class ClientCreate(ClientBase):
    company_name: str = Field(min_length=1)
    contact_person: Optional[str] = None
    email: EmailAddress
    status: ClientStatus = "active"


class ClientUpdate(ClientBase):
    company_name: Optional[str] = Field(default=None, min_length=1)
    contact_person: Optional[str] = None
    email: Optional[EmailAddress] = None
    status: Optional[ClientStatus] = None


class ClientRead(ClientBase):
    id: int
    company_name: str
    contact_person: str
    email: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    projects: list[ProjectRead] = []

    model_config = {"from_attributes": True}

    @field_validator("social_contacts", mode="before")
    @classmethod
    def _decode_social_contacts(cls, value):
        decoded = parse_json_object(value)
        if not isinstance(decoded, dict):
            return decoded

        # Stored blobs predate validation: scalars become text, anything nested is dropped
        contacts = {}
        for name in SocialContacts.model_fields:
            raw = decoded.get(name)
            if isinstance(raw, (str, int, float)) and not isinstance(raw, bool):
                contacts[name] = str(raw)
            else:
                contacts[name] = None
        return contacts


class ClientDashboardStats(BaseModel):
    total_clients: int
    active_clients: int
    total_projects: int
    active_projects: int

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
