"""Enrollment Service — enroll and unenroll students in courses.

Invariants:
    - Both identifiers are parsed before any store access
    - Enrolling twice is a no-op success; capacity is maxStudents
    - Returns the course as a wire dict with its refreshed enrolledStudents
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from school_admin.core.domain_types import EntityKind, parse_identifier
from school_admin.core.errors import ResourceNotFoundError
from school_admin.services.integrity_coordinator import IntegrityCoordinator
from school_admin.services.record_service import to_wire

logger = logging.getLogger(__name__)


class EnrollmentService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.coordinator = IntegrityCoordinator(db)

    async def enroll(self, raw_course_id: str, raw_student_id: str) -> dict:
        course_id = parse_identifier(raw_course_id, EntityKind.COURSE)
        student_id = parse_identifier(raw_student_id, EntityKind.STUDENT)
        course = await self._require(EntityKind.COURSE, course_id)
        student = await self._require(EntityKind.STUDENT, student_id)
        if await self.coordinator.enroll(course, student):
            await self.db.commit()
        return await self._course_wire(course_id)

    async def unenroll(self, raw_course_id: str, raw_student_id: str) -> dict:
        course_id = parse_identifier(raw_course_id, EntityKind.COURSE)
        student_id = parse_identifier(raw_student_id, EntityKind.STUDENT)
        await self._require(EntityKind.COURSE, course_id)
        await self._require(EntityKind.STUDENT, student_id)
        if not await self.coordinator.unenroll(course_id, student_id):
            raise ResourceNotFoundError("Enrollment", f"{course_id}/{student_id}")
        await self.db.commit()
        logger.info(
            f"Unenrolled student {student_id} from course {course_id}",
            extra={"entity": EntityKind.COURSE.value, "record_id": str(course_id)},
        )
        return await self._course_wire(course_id)

    async def _require(self, kind: EntityKind, record_id: UUID):
        record = await self.coordinator.repository(kind).get(record_id)
        if record is None:
            raise ResourceNotFoundError(kind.label, str(record_id))
        return record

    async def _course_wire(self, course_id: UUID) -> dict:
        course = await self._require(EntityKind.COURSE, course_id)
        return to_wire(EntityKind.COURSE, course)
