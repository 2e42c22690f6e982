"""
Health service.
Provides health check functionality.
"""

import time
from app.services.base_service import BaseService
from app.schemas.health import HealthResponse
from app.core.logging import get_logger

logger = get_logger(__name__)


class HealthService(BaseService):
    """Service for health check operations."""

    def __init__(self):
        self.start_time = time.time()

    async def get_health(self) -> HealthResponse:
        """
        Get system health status.

        Returns:
            HealthResponse with status, uptime, and checks
        """
        uptime_seconds = int(time.time() - self.start_time)
        uptime_str = f"PT{uptime_seconds}S"  # ISO 8601 duration format

        checks = {}

        # Connectivity and schema completeness; any failure degrades the status
        try:
            from app.db import session as db_session
            from app.db.repositories.health_repository import HealthRepository

            if db_session.async_session_maker is None:
                db_session.create_sessionmaker()

            async with db_session.async_session_maker() as session:
                repo = HealthRepository(session=session)
                checks["database"] = "ok" if await repo.check_database() else "error"
                missing = await repo.missing_tables()
                checks["schema"] = "ok" if not missing else f"missing: {', '.join(missing)}"
        except Exception as e:
            logger.warning("Database health check failed", extra={"error": str(e)})
            checks["database"] = f"error: {str(e)}"

        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"

        return HealthResponse(
            status=status,
            uptime=uptime_str,
            checks=checks,
        )
