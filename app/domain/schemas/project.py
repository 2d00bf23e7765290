"""Pydantic schemas for Project domain."""

from datetime import date, datetime
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from app.domain.schemas.common import parse_date
from app.domain.schemas.task import TaskRead

ProjectStatus = Literal["not_started", "pending", "in_progress", "completed", "cancelled"]


class ProjectOperational(BaseModel):
    project_live_url: Optional[str] = None
    project_files: Optional[str] = None
    admin_login_url: Optional[str] = None
    username_email: Optional[str] = None
    password: Optional[str] = None


class ProjectCreate(ProjectOperational):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    client_id: int
    status: ProjectStatus = "not_started"
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: Optional[float] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _normalize_date(cls, value):
        return parse_date(value)


class ProjectUpdate(ProjectOperational):
    """Partial update. Dates stay raw: invalid input keeps the stored value, null clears it."""
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    client_id: Optional[int] = None
    status: Optional[ProjectStatus] = None
    start_date: Optional[Union[date, str]] = None
    end_date: Optional[Union[date, str]] = None
    budget: Optional[float] = None


class ProjectRead(ProjectOperational):
    id: int
    title: str
    description: Optional[str] = None
    client_id: Optional[int] = None
    client_name: Optional[str] = None
    status: str
    effective_status: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: Optional[float] = None
    task_count: int = 0
    total_payments: float = 0.0
    total_expenses: float = 0.0
    calculated_budget: float = 0.0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ProjectDetail(ProjectRead):
    tasks: list[TaskRead] = []
