"""Pydantic schemas for User."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.domain.schemas.common import EmailAddress


class UserCreate(BaseModel):
    name: str = Field(min_length=1)
    email: EmailAddress


class UserUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailAddress] = None


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
