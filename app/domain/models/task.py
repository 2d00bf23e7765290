"""Task domain model — maps to the 'tasks' table."""

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Numeric, ForeignKey

from app.core.clock import now
from app.infrastructure.database import Base


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="SET NULL"), nullable=True, index=True)
    assigned_to = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    status = Column(String(20), nullable=False, default="pending", index=True)  # pending, in_progress, completed, cancelled
    priority = Column(String(10), nullable=False, default="medium")  # low, medium, high
    type = Column(String(20), nullable=False, default="development")
    due_date = Column(Date, nullable=False)
    budget = Column(Numeric(12, 2, asdecimal=False), nullable=True)

    created_at = Column(DateTime, default=now)
    updated_at = Column(DateTime, default=now, onupdate=now)

    def __repr__(self):
        return f"<Task {self.id} - {self.title}>"
