"""Record Service — list/get/create/update/delete for one entity kind.

Invariants:
    - Order of checks: identifier format -> validation -> existence -> uniqueness -> write
    - Identifier and validation errors are raised before any store access
    - Primary write and its cascades commit together (one commit per operation)
    - Returned records are wire dicts (camelCase, "_id" as string)

Design Decisions:
    - Kind-specific steps selected through explicit dicts, not subclass overrides
"""

import logging
from typing import Any, Awaitable, Callable
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from school_admin.core.domain_types import EntityKind, parse_identifier
from school_admin.core.errors import RecordValidationError, ResourceNotFoundError
from school_admin.core.validation import InvalidRecord, validate_record
from school_admin.schemas import CourseOut, StudentOut, TeacherOut
from school_admin.services.integrity_coordinator import IntegrityCoordinator

logger = logging.getLogger(__name__)

_OUT_SCHEMAS: dict[EntityKind, type] = {
    EntityKind.STUDENT: StudentOut,
    EntityKind.TEACHER: TeacherOut,
    EntityKind.COURSE: CourseOut,
}


def to_wire(kind: EntityKind, record: Any) -> dict:
    """Serialize an ORM record to its API representation."""
    schema = _OUT_SCHEMAS[kind]
    values = {name: getattr(record, name) for name in schema.model_fields}
    return schema.model_validate(values).to_wire()


class RecordService:
    """API-facing operations for one collection."""

    def __init__(self, db: AsyncSession, kind: EntityKind):
        self.db = db
        self.kind = kind
        self.coordinator = IntegrityCoordinator(db)
        self.repo = self.coordinator.repository(kind)
        self._delete_cascades: dict[EntityKind, Callable[[UUID], Awaitable[int]]] = {
            EntityKind.STUDENT: self.coordinator.release_student,
            EntityKind.TEACHER: self.coordinator.release_teacher,
            EntityKind.COURSE: self.coordinator.release_course,
        }

    async def list(self, search: str | None = None) -> list[dict]:
        records = await self.repo.list(search)
        return [to_wire(self.kind, r) for r in records]

    async def get(self, raw_id: str) -> dict:
        record_id = parse_identifier(raw_id, self.kind)
        return to_wire(self.kind, await self._get_or_404(record_id))

    async def create(self, payload: Any) -> dict:
        values = await self._prepare(self._validate(payload))
        await self.coordinator.ensure_unique(self.kind, values)
        record = await self.repo.create(values)
        await self.db.commit()
        return to_wire(self.kind, await self._get_or_404(record.id))

    async def update(self, raw_id: str, payload: Any) -> dict:
        record_id = parse_identifier(raw_id, self.kind)
        validated = self._validate(payload)
        await self._get_or_404(record_id)
        values = await self._prepare(validated)
        await self.coordinator.ensure_unique(self.kind, values, exclude_id=record_id)
        record = await self.repo.update(record_id, values)
        if record is None:
            raise ResourceNotFoundError(self.kind.label, str(record_id))
        if self.kind is EntityKind.TEACHER:
            await self.coordinator.refresh_teacher_name(record)
        await self.db.commit()
        return to_wire(self.kind, await self._get_or_404(record_id))

    async def delete(self, raw_id: str) -> None:
        record_id = parse_identifier(raw_id, self.kind)
        await self._get_or_404(record_id)
        await self._delete_cascades[self.kind](record_id)
        if not await self.repo.delete(record_id):
            raise ResourceNotFoundError(self.kind.label, str(record_id))
        await self.db.commit()
        logger.info(
            f"Deleted {self.kind.label.lower()} {record_id}",
            extra={"entity": self.kind.value, "record_id": str(record_id)},
        )

    # ─── Helpers ────────────────────────────────────────────────

    def _validate(self, payload: Any) -> BaseModel:
        outcome = validate_record(self.kind, payload)
        if isinstance(outcome, InvalidRecord):
            raise RecordValidationError(outcome.violations)
        return outcome.record

    async def _prepare(self, record: BaseModel) -> dict:
        """Column values for a write; courses get their teacher resolved."""
        values = record.model_dump()
        if self.kind is EntityKind.COURSE:
            teacher_id, teacher_name = await self.coordinator.resolve_teacher(
                values.pop("teacher_id"),
            )
            values["teacher_id"] = teacher_id
            values["teacher_name"] = teacher_name
        return values

    async def _get_or_404(self, record_id: UUID):
        record = await self.repo.get(record_id)
        if record is None:
            raise ResourceNotFoundError(self.kind.label, str(record_id))
        return record
