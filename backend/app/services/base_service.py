"""
Base service classes.
Services contain business logic and coordinate repositories.
"""

from abc import ABC
from contextlib import asynccontextmanager
from typing import Any, Dict, Generic, Optional, TypeVar
from sqlalchemy.exc import IntegrityError

from app.core.exceptions import AppException, ConflictError, ReferenceError, DependencyError
from app.core.logging import get_logger
from app.db.repositories.base_repository import BaseRepository

logger = get_logger(__name__)

ModelType = TypeVar("ModelType")

# PostgreSQL SQLSTATE for foreign_key_violation
FOREIGN_KEY_VIOLATION = "23503"


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """Tell a foreign key rejection apart from a unique or not-null one."""
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == FOREIGN_KEY_VIOLATION:
        return True
    if getattr(orig, "pgcode", None) == FOREIGN_KEY_VIOLATION:
        return True
    # SQLite reports no code, only the message
    return "FOREIGN KEY constraint failed" in str(orig)


class BaseService(ABC):
    """Base service class for all services."""
    pass


class EntityService(BaseService, Generic[ModelType]):
    """
    Shared create/update/delete flow for catalog entities.

    Every mutation is validated by the integrity service before it is
    written and is committed as one transaction; any failure rolls the
    whole operation back.
    """

    repo: BaseRepository

    def __init__(self, session, repo: BaseRepository):
        # Imported here: integrity_service itself builds on BaseService
        from app.services.integrity_service import IntegrityService

        self.session = session
        self.repo = repo
        self.integrity = IntegrityService(session)

    @property
    def model(self):
        return self.repo.model

    def _constraint_error(self, exc: IntegrityError, action: str, record_id: Any) -> AppException:
        """Map a database constraint rejection to the matching domain error."""
        name = self.model.__name__
        details = {"entity": name, "id": record_id, "action": action}
        if not is_foreign_key_violation(exc):
            return ConflictError(f"{name} {record_id} violates a unique constraint", details=details)
        if action == "delete":
            return DependencyError(f"{name} {record_id} is still referenced by other records", details=details)
        return ReferenceError(f"{name} {record_id} references a record that does not exist", details=details)

    @asynccontextmanager
    async def _transaction(self, action: str, record_id: Any):
        """
        Run the writes of one operation and commit them, or roll everything back.

        Raises:
            ConflictError, ReferenceError, DependencyError: The database
                rejected a write the pre-checks let through
        """
        try:
            yield
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.warning(
                f"{self.model.__name__} {action} rejected by the database",
                extra={"id": record_id, "error": str(exc.orig)},
            )
            raise self._constraint_error(exc, action, record_id) from exc
        except Exception:
            await self.session.rollback()
            raise

    async def _create_record(self, values: Dict[str, Any]) -> ModelType:
        """Validate and insert a record."""
        await self.integrity.validate_create(self.model, values)
        async with self._transaction("create", values.get("id")):
            record = await self.repo.create(**values)
        logger.info(f"{self.model.__name__} created", extra={"id": record.id})
        return record

    async def _update_record(self, record_id: int, values: Dict[str, Any]) -> Optional[ModelType]:
        """Validate and apply changed fields. Returns None when the record does not exist."""
        if not await self.repo.exists(record_id):
            return None
        await self.integrity.validate_update(self.model, record_id, values)
        changes = {key: value for key, value in values.items() if key != "id"}
        async with self._transaction("update", record_id):
            await self.repo.update(record_id, **changes)
        logger.info(
            f"{self.model.__name__} updated",
            extra={"id": record_id, "fields": sorted(changes)},
        )
        return await self.repo.get(record_id)

    async def _delete_record(self, record_id: int, cascade: bool = False) -> bool:
        """
        Delete a record, rejecting it when dependents exist unless cascade is set.

        Returns:
            True if deleted, False if not found
        """
        if not await self.repo.exists(record_id):
            return False
        if not cascade:
            await self.integrity.check_deletable(self.model, record_id)
        async with self._transaction("delete", record_id):
            if cascade:
                removed = await self.integrity.cascade_delete(self.model, record_id)
            else:
                removed = {self.model.__name__: int(await self.repo.delete(record_id))}
        logger.info(
            f"{self.model.__name__} deleted",
            extra={"id": record_id, "cascade": cascade, "removed": removed},
        )
        return True
