"""
API Dependencies.
Each request gets repositories bound to its own database session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.domain.models.client import Client
from app.domain.models.project import Project
from app.domain.models.task import Task
from app.domain.models.transaction import Transaction
from app.domain.models.user import User
from app.domain.repositories.client_repository import ClientRepository
from app.domain.repositories.finance_repository import FinanceRepository
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.repositories.task_repository import TaskRepository
from app.domain.repositories.transaction_repository import TransactionRepository
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.database import get_db
from app.infrastructure.repositories.client_repository import SQLAlchemyClientRepository
from app.infrastructure.repositories.finance_repository import SQLAlchemyFinanceRepository
from app.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository
from app.infrastructure.repositories.task_repository import SQLAlchemyTaskRepository
from app.infrastructure.repositories.transaction_repository import SQLAlchemyTransactionRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_client_repository(db: Session = Depends(get_db)) -> ClientRepository:
    """Get client repository instance."""
    return SQLAlchemyClientRepository(db, Client)


def get_project_repository(db: Session = Depends(get_db)) -> ProjectRepository:
    """Get project repository instance."""
    return SQLAlchemyProjectRepository(db, Project)


def get_task_repository(db: Session = Depends(get_db)) -> TaskRepository:
    """Get task repository instance."""
    return SQLAlchemyTaskRepository(db, Task)


def get_transaction_repository(db: Session = Depends(get_db)) -> TransactionRepository:
    """Get transaction repository instance."""
    return SQLAlchemyTransactionRepository(db, Transaction)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


def get_finance_repository(db: Session = Depends(get_db)) -> FinanceRepository:
    """Get finance aggregate repository instance."""
    return SQLAlchemyFinanceRepository(db)
