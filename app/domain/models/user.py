"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, Integer, String, DateTime

from app.core.clock import now
from app.infrastructure.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    created_at = Column(DateTime, default=now)

    def __repr__(self):
        return f"<User {self.email}>"
