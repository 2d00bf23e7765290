"""Client domain model — maps to the 'clients' table."""

from sqlalchemy import Column, Integer, String, Text, DateTime

from app.core.clock import now
from app.infrastructure.database import Base


class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True)

    company_name = Column(String(255), nullable=False)
    contact_person = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)
    country = Column(String(100), nullable=True)

    # Serialized JSON: {"whatsapp": ..., "linkedin": ...}
    social_contacts = Column(Text, nullable=True)

    status = Column(String(20), nullable=False, default="active", index=True)  # active, inactive

    created_at = Column(DateTime, default=now)
    updated_at = Column(DateTime, default=now, onupdate=now)

    def __repr__(self):
        return f"<Client {self.id} - {self.company_name}>"
