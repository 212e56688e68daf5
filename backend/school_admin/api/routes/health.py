"""Health Check — store ping plus per-collection counts.

Invariants:
    - GET /api/health/live always returns 200 if the process is up (liveness)
    - GET /api/health returns 503 DATABASE_ERROR if the database is unreachable,
      else the counts
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status

from school_admin.core.errors import DatabaseError
from school_admin.infrastructure.database import DatabaseSessionManager, get_db_manager
from school_admin.services.integrity_coordinator import IntegrityCoordinator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "school-admin-api"}


@router.get("")
async def health_check(manager: DatabaseSessionManager = Depends(get_db_manager)):
    """Ping the database and report how many records each collection holds."""
    if not await manager.health_check():
        raise DatabaseError(
            "store unreachable", "connection",
            http_status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    async with manager.session() as db:
        stats = await IntegrityCoordinator(db).collection_counts()
    return {
        "success": True,
        "message": "Database connection successful",
        "stats": stats,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
