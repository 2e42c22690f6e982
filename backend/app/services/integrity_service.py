"""
Integrity service.

Enforces the integrity rules on every mutation before anything is written:
required fields, unique fields, reference existence, identifier immutability
and delete dependencies. Rules are read from the table metadata of the
models, so a column declared ``nullable=False``, ``unique=True`` or with a
``ForeignKey`` is checked here without any per-entity code.

Record-level cascade delete lives here as well. It is unrelated to
``reset_schema`` in ``app.db.init_db``, which drops whole tables.
"""

from typing import Any, Dict, List, Mapping, Optional, Set, Tuple, Type
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationError, ConflictError, ReferenceError, DependencyError
from app.core.logging import get_logger
from app.db.base import Base
import app.models  # registers every table with Base.metadata
from app.db.repositories.base_repository import BaseRepository
from app.services.base_service import BaseService

logger = get_logger(__name__)


def _model_for_table(table) -> Type[Base]:
    """Resolve the mapped class for a table."""
    for mapper in Base.registry.mappers:
        if mapper.local_table is table:
            return mapper.class_
    raise LookupError(f"No model mapped to table {table.name}")


def required_fields(model: Type[Base]) -> List[str]:
    """Non-nullable columns other than the primary key."""
    return [
        column.name
        for column in model.__table__.columns
        if not column.nullable and not column.primary_key
    ]


def unique_fields(model: Type[Base]) -> List[str]:
    """Columns declared unique, primary key excluded."""
    return [
        column.name
        for column in model.__table__.columns
        if column.unique and not column.primary_key
    ]


def reference_fields(model: Type[Base]) -> Dict[str, Type[Base]]:
    """Map each foreign key column to the model it references."""
    references = {}
    for column in model.__table__.columns:
        for foreign_key in column.foreign_keys:
            references[column.name] = _model_for_table(foreign_key.column.table)
    return references


def dependent_links(model: Type[Base]) -> List[Tuple[Type[Base], str]]:
    """List (dependent model, foreign key column) pairs that point at model."""
    links = []
    for table in Base.metadata.sorted_tables:
        for column in table.columns:
            for foreign_key in column.foreign_keys:
                if foreign_key.column.table is model.__table__:
                    links.append((_model_for_table(table), column.name))
    return links


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class IntegrityService(BaseService):
    """Validates mutations against the integrity rules and performs cascade deletes."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _repo(self, model: Type[Base]) -> BaseRepository:
        return BaseRepository(model, self.session)

    def check_required(
        self,
        model: Type[Base],
        values: Mapping[str, Any],
        partial: bool = False,
    ) -> None:
        """
        Reject absent or blank required fields.

        Args:
            model: Entity model class
            values: Field values being written
            partial: Only check fields present in values (updates)

        Raises:
            ValidationError: A required field is absent, None or blank
        """
        fields = [name for name in required_fields(model) if not partial or name in values]
        missing = [name for name in fields if _is_blank(values.get(name))]
        if not partial and _is_blank(values.get("id")):
            missing.insert(0, "id")
        if missing:
            logger.warning(
                "Required fields missing",
                extra={"entity": model.__tablename__, "fields": missing},
            )
            raise ValidationError(
                f"Missing required field(s) for {model.__name__}: {', '.join(missing)}",
                details={"entity": model.__name__, "fields": missing},
            )

    def check_identifier_unchanged(
        self,
        model: Type[Base],
        current_id: int,
        values: Mapping[str, Any],
    ) -> None:
        """
        Reject any attempt to change a record's identifier.

        Raises:
            ValidationError: values carries an id different from current_id
        """
        if "id" in values and values["id"] != current_id:
            logger.warning(
                "Identifier change rejected",
                extra={"entity": model.__tablename__, "id": current_id, "new_id": values["id"]},
            )
            raise ValidationError(
                f"{model.__name__} identifier is immutable",
                details={"entity": model.__name__, "id": current_id, "new_id": values["id"]},
            )

    async def check_unique(
        self,
        model: Type[Base],
        values: Mapping[str, Any],
        exclude_id: Optional[int] = None,
    ) -> None:
        """
        Reject values that collide with another record's unique fields.

        Args:
            model: Entity model class
            values: Field values being written
            exclude_id: ID of the record being updated, None on create

        Raises:
            ConflictError: The identifier (on create) or a unique field is taken
        """
        repo = self._repo(model)
        if exclude_id is None and "id" in values and await repo.exists(values["id"]):
            raise ConflictError(
                f"{model.__name__} with id {values['id']} already exists",
                details={"entity": model.__name__, "field": "id", "value": values["id"]},
            )

        for field in unique_fields(model):
            value = values.get(field)
            if value is None:
                continue
            holder = await repo.find_id_by_field(field, value, exclude_id=exclude_id)
            if holder is not None:
                logger.warning(
                    "Unique field collision",
                    extra={"entity": model.__tablename__, "field": field, "holder_id": holder},
                )
                raise ConflictError(
                    f"{model.__name__} {field} '{value}' is already used by record {holder}",
                    details={"entity": model.__name__, "field": field, "value": value, "existing_id": holder},
                )

    async def check_references(self, model: Type[Base], values: Mapping[str, Any]) -> None:
        """
        Reject references to records that do not exist.

        Raises:
            ReferenceError: A non-null foreign key names a missing record
        """
        for field, target in reference_fields(model).items():
            value = values.get(field)
            if value is None:
                continue
            if not await self._repo(target).exists(value):
                logger.warning(
                    "Dangling reference",
                    extra={"entity": model.__tablename__, "field": field, "value": value},
                )
                raise ReferenceError(
                    f"{model.__name__}.{field} references missing {target.__name__} {value}",
                    details={"entity": model.__name__, "field": field, "value": value, "target": target.__name__},
                )

    async def validate_create(self, model: Type[Base], values: Mapping[str, Any]) -> None:
        """Run every create-time check in order: required, unique, references."""
        self.check_required(model, values)
        await self.check_unique(model, values)
        await self.check_references(model, values)

    async def validate_update(
        self,
        model: Type[Base],
        current_id: int,
        values: Mapping[str, Any],
    ) -> None:
        """Run the update-time checks on the changed fields only."""
        self.check_identifier_unchanged(model, current_id, values)
        changes = {key: value for key, value in values.items() if key != "id"}
        self.check_required(model, changes, partial=True)
        await self.check_unique(model, changes, exclude_id=current_id)
        await self.check_references(model, changes)

    async def find_dependents(self, model: Type[Base], record_id: int) -> Dict[str, List[int]]:
        """
        Find records that directly reference a record.

        Returns:
            Dependent IDs keyed by dependent model name; empty when none
        """
        dependents: Dict[str, List[int]] = {}
        for dependent, field in dependent_links(model):
            ids = await self._repo(dependent).list_ids_by_field(field, [record_id])
            if ids:
                dependents.setdefault(dependent.__name__, []).extend(ids)
        return dependents

    async def check_deletable(self, model: Type[Base], record_id: int) -> None:
        """
        Raises:
            DependencyError: Other records reference this one
        """
        dependents = await self.find_dependents(model, record_id)
        if dependents:
            logger.warning(
                "Delete blocked by dependents",
                extra={"entity": model.__tablename__, "id": record_id, "dependents": dependents},
            )
            raise DependencyError(
                f"{model.__name__} {record_id} has dependent records; "
                f"delete them first or request a cascade delete",
                details={"entity": model.__name__, "id": record_id, "dependents": dependents},
            )

    async def cascade_delete(self, model: Type[Base], record_id: int) -> Dict[str, int]:
        """
        Delete a record and, transitively, every record that depends on it.

        Dependents are removed before the records they reference: assignments
        and procurement before projects, projects before clients. The caller
        owns the transaction.

        Returns:
            Number of rows removed keyed by model name
        """
        pending: Dict[Type[Base], Set[int]] = {model: {record_id}}
        frontier: List[Tuple[Type[Base], Set[int]]] = [(model, {record_id})]
        while frontier:
            parent, parent_ids = frontier.pop()
            for dependent, field in dependent_links(parent):
                found = set(await self._repo(dependent).list_ids_by_field(field, parent_ids))
                new_ids = found - pending.get(dependent, set())
                if new_ids:
                    pending.setdefault(dependent, set()).update(new_ids)
                    frontier.append((dependent, new_ids))

        removed: Dict[str, int] = {}
        for table in reversed(Base.metadata.sorted_tables):
            target = _model_for_table(table)
            if target in pending:
                removed[target.__name__] = await self._repo(target).delete_many(sorted(pending[target]))

        logger.info(
            "Cascade delete completed",
            extra={"entity": model.__tablename__, "id": record_id, "removed": removed},
        )
        return removed
