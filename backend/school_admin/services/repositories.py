"""Repository Accessors — per-collection reads and writes over SQLAlchemy.

Invariants:
    - Every read uses populate_existing: reference sets reflect bulk cascades
      issued earlier in the same session
    - create/update flush but do not commit
    - update stamps updated_at; created_at is never rewritten
    - delete is a single DELETE statement; its rowcount is the "found" signal

Design Decisions:
    - One generic class parameterized by model and kind; subclasses only bind both
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from school_admin.core.domain_types import EntityKind
from school_admin.core.integrity_rules import SEARCH_FIELDS, normalize_search_term
from school_admin.db.base import Base
from school_admin.models import Course, Student, Teacher

logger = logging.getLogger(__name__)


def _like_pattern(term: str) -> str:
    escaped = (
        term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    )
    return f"%{escaped}%"


class SqlRecordRepository:
    """Collection accessor backed by one ORM model."""

    model: type[Base]
    kind: EntityKind

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self, search: str | None = None) -> list:
        """All records ordered by creation time, optionally filtered."""
        query = select(self.model).order_by(self.model.created_at)
        needle = normalize_search_term(search)
        if needle:
            pattern = _like_pattern(needle)
            query = query.where(or_(*(
                getattr(self.model, name).ilike(pattern, escape="\\")
                for name in SEARCH_FIELDS[self.kind]
            )))
        result = await self.db.execute(
            query.execution_options(populate_existing=True),
        )
        return list(result.scalars().all())

    async def get(self, record_id: UUID):
        result = await self.db.execute(
            select(self.model)
            .where(self.model.id == record_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def create(self, values: dict):
        record = self.model(**values)
        self.db.add(record)
        await self.db.flush()
        logger.info(
            f"Created {self.kind.label.lower()} {record.id}",
            extra={"entity": self.kind.value, "record_id": str(record.id)},
        )
        return record

    async def update(self, record_id: UUID, values: dict):
        record = await self.get(record_id)
        if record is None:
            return None
        for name, value in values.items():
            setattr(record, name, value)
        record.updated_at = datetime.now(timezone.utc)
        await self.db.flush()
        logger.info(
            f"Updated {self.kind.label.lower()} {record_id}",
            extra={"entity": self.kind.value, "record_id": str(record_id)},
        )
        return record

    async def delete(self, record_id: UUID) -> bool:
        result = await self.db.execute(
            delete(self.model).where(self.model.id == record_id),
        )
        return result.rowcount > 0

    async def find_conflict(
        self, attribute: str, value: object, exclude_id: UUID | None = None,
    ):
        """First record whose attribute equals value, other than exclude_id."""
        query = select(self.model).where(getattr(self.model, attribute) == value)
        if exclude_id is not None:
            query = query.where(self.model.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalars().first()

    async def count(self) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(self.model),
        )
        return result.scalar_one()


class StudentRepository(SqlRecordRepository):
    model = Student
    kind = EntityKind.STUDENT


class TeacherRepository(SqlRecordRepository):
    model = Teacher
    kind = EntityKind.TEACHER


class CourseRepository(SqlRecordRepository):
    model = Course
    kind = EntityKind.COURSE
