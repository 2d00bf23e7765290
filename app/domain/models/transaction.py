"""Transaction domain model — maps to the 'transactions' table."""

from sqlalchemy import Column, Integer, String, Text, DateTime, Numeric, ForeignKey

from app.core.clock import now
from app.infrastructure.database import Base


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(20), nullable=False, index=True)  # invoice, payment, expense
    amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    description = Column(Text, nullable=False)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="pending", index=True)  # pending, completed, cancelled
    date = Column(DateTime, nullable=False, default=now, index=True)

    created_at = Column(DateTime, default=now)

    def __repr__(self):
        return f"<Transaction {self.id} {self.type} {self.amount}>"
