"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure.database import engine, Base
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.core.exceptions import register_exception_handlers

# Import all models so SQLAlchemy knows about them
from app.domain.models.client import Client  # noqa: F401
from app.domain.models.project import Project  # noqa: F401
from app.domain.models.task import Task  # noqa: F401
from app.domain.models.transaction import Transaction  # noqa: F401
from app.domain.models.user import User  # noqa: F401

# Import routers
from app.interfaces.api.clients import router as clients_router
from app.interfaces.api.projects import router as projects_router
from app.interfaces.api.tasks import router as tasks_router
from app.interfaces.api.users import router as users_router
from app.interfaces.api.finance import router as finance_router
from app.interfaces.api.reports import router as reports_router

APP_NAME = "Business Desk API"
APP_VERSION = "1.0.0"

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting business desk API", env=settings.ENVIRONMENT)

    # Dev convenience; production schemas come from migrations
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    yield

    logger.info("Business desk API stopped")


app = FastAPI(
    title=APP_NAME,
    description="Clients, projects, tasks, transactions and financial reporting",
    version=APP_VERSION,
    lifespan=lifespan,
)

# Setup Middleware (Correlation ID, Logging)
setup_middleware(app)

register_exception_handlers(app)

# Added last so it wraps everything, including error responses
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(clients_router)
app.include_router(projects_router)
app.include_router(tasks_router)
app.include_router(users_router)
app.include_router(finance_router)
app.include_router(reports_router)


@app.get("/")
def root():
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
