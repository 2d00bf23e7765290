"""Pydantic schemas for Task domain."""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from app.domain.schemas.common import parse_date

TaskStatus = Literal["pending", "in_progress", "completed", "cancelled"]
TaskPriority = Literal["low", "medium", "high"]
TaskType = Literal["development", "design", "fixing", "feedback", "round-r1", "round-r2", "round-r3"]

NO_PROJECT_TITLE = "No Project"


class TaskCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    project_id: int
    client_id: int
    assigned_to: Optional[int] = None
    status: TaskStatus = "pending"
    priority: TaskPriority = "medium"
    type: TaskType = "development"
    due_date: date
    budget: Optional[float] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def _normalize_due_date(cls, value):
        parsed = parse_date(value)
        if parsed is None:
            raise ValueError("must be a valid date")
        return parsed


class TaskUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    project_id: Optional[int] = None
    client_id: Optional[int] = None
    assigned_to: Optional[int] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    type: Optional[TaskType] = None
    due_date: Optional[date] = None
    budget: Optional[float] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def _normalize_due_date(cls, value):
        if value is None:
            return None
        parsed = parse_date(value)
        if parsed is None:
            raise ValueError("must be a valid date")
        return parsed


class TaskRead(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    project_id: Optional[int] = None
    client_id: Optional[int] = None
    assigned_to: Optional[int] = None
    status: str
    priority: str
    type: str
    due_date: Optional[date] = None
    budget: Optional[float] = None
    client_name: Optional[str] = None
    assigned_to_name: Optional[str] = None
    project_title: str = NO_PROJECT_TITLE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
