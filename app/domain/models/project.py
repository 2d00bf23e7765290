"""Project domain model — maps to the 'projects' table."""

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Numeric, ForeignKey

from app.core.clock import now
from app.infrastructure.database import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    client_id = Column(Integer, ForeignKey("clients.id", ondelete="SET NULL"), nullable=True, index=True)

    # not_started, pending, in_progress, completed, cancelled
    status = Column(String(20), nullable=False, default="not_started", index=True)

    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    budget = Column(Numeric(12, 2, asdecimal=False), nullable=True)

    # Operational fields, carried opaquely
    project_live_url = Column(String(500), nullable=True)
    project_files = Column(Text, nullable=True)
    admin_login_url = Column(String(500), nullable=True)
    username_email = Column(String(255), nullable=True)
    password = Column(String(255), nullable=True)

    created_at = Column(DateTime, default=now)
    updated_at = Column(DateTime, default=now, onupdate=now)

    def __repr__(self):
        return f"<Project {self.id} - {self.title}>"
