"""School Admin API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SchoolAdminError → {success: false, error} responses
    - CORS configured from settings (not hardcoded)
    - The database session manager is built in the lifespan and lives on app.state

Design Decisions:
    - Lifespan over @app.on_event: cleaner cleanup
    - Tables created on startup only when DATABASE_CREATE_TABLES is set; otherwise alembic
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from school_admin.api.error_handlers import register_error_handlers
from school_admin.api.routes import courses, health, students, teachers
from school_admin.config import get_settings
from school_admin.db.base import Base
from school_admin.infrastructure.database import DatabaseSessionManager
from school_admin.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager.from_url(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_all(Base.metadata)
    app.state.db_manager = manager
    logger.info("School Admin API started")
    yield
    logger.info("School Admin API shutting down")
    await manager.dispose()


app = FastAPI(
    title="School Admin API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(students.router)
app.include_router(teachers.router)
app.include_router(courses.router)

register_error_handlers(app)
