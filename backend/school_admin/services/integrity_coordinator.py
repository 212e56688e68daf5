"""Referential Integrity Coordinator — keeps students, teachers and courses consistent.

Invariants:
    - Runs inside the request's transaction; nothing here commits
    - Every cascade is ONE bulk statement per affected relation, never a per-row loop
    - A course's teacher_id either resolves to an existing teacher or is NULL;
      an unresolvable teacherId is "no teacher", not an error
    - teacher_name is always compose_teacher_name() of the referenced teacher
    - Uniqueness is checked by explicit lookup right before the write, excluding
      the record being updated
    - Enrollment locks the course row before counting; a course never holds more
      than max_students enrollments

Design Decisions:
    - Course delete only has to drop enrollments: assignedCourses is derived from
      courses.teacher_id, so removing the course row removes it from the teacher
    - Teacher rename refreshes teacher_name on its courses in the same transaction
"""

import logging
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from school_admin.core.domain_types import EntityKind, try_parse_identifier
from school_admin.core.errors import DuplicateKeyError, ErrorContext
from school_admin.core.integrity_rules import (
    UNIQUE_FIELDS, check_capacity, compose_teacher_name,
)
from school_admin.core.repository_protocols import RecordRepository
from school_admin.models import Course, Enrollment, Student, Teacher
from school_admin.services.repositories import (
    CourseRepository, StudentRepository, TeacherRepository,
)

logger = logging.getLogger(__name__)


class IntegrityCoordinator:
    """Uniqueness, denormalization and cascades for the three collections."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.students = StudentRepository(db)
        self.teachers = TeacherRepository(db)
        self.courses = CourseRepository(db)
        self._repositories: dict[EntityKind, RecordRepository] = {
            EntityKind.STUDENT: self.students,
            EntityKind.TEACHER: self.teachers,
            EntityKind.COURSE: self.courses,
        }

    def repository(self, kind: EntityKind) -> RecordRepository:
        return self._repositories[kind]

    # ─── Uniqueness ─────────────────────────────────────────────

    async def ensure_unique(
        self, kind: EntityKind, values: dict, exclude_id: UUID | None = None,
    ) -> None:
        """Raise DuplicateKeyError for the first unique field already taken."""
        repo = self.repository(kind)
        for unique in UNIQUE_FIELDS[kind]:
            clash = await repo.find_conflict(
                unique.attribute, values[unique.attribute], exclude_id,
            )
            if clash is not None:
                raise DuplicateKeyError(
                    unique.label, unique.attribute,
                    ErrorContext(
                        entity=kind.value,
                        record_id=str(exclude_id) if exclude_id else None,
                    ),
                )

    # ─── Denormalization ────────────────────────────────────────

    async def resolve_teacher(self, raw_teacher_id: str | None) -> tuple[UUID | None, str]:
        """Map a submitted teacherId to (teacher uuid, teacherName)."""
        teacher_uuid = try_parse_identifier(raw_teacher_id)
        if teacher_uuid is None:
            return None, ""
        teacher = await self.teachers.get(teacher_uuid)
        if teacher is None:
            logger.info(
                f"teacherId {raw_teacher_id} does not resolve; course stored without teacher",
                extra={"entity": EntityKind.COURSE.value},
            )
            return None, ""
        return teacher.id, compose_teacher_name(teacher.first_name, teacher.last_name)

    async def refresh_teacher_name(self, teacher: Teacher) -> int:
        """Rewrite teacher_name on every course taught by teacher."""
        result = await self.db.execute(
            update(Course)
            .where(Course.teacher_id == teacher.id)
            .values(teacher_name=compose_teacher_name(
                teacher.first_name, teacher.last_name,
            )),
        )
        if result.rowcount:
            logger.info(
                f"Refreshed teacherName on {result.rowcount} course(s)",
                extra={"record_id": str(teacher.id), "affected": result.rowcount},
            )
        return result.rowcount

    # ─── Delete cascades ────────────────────────────────────────

    async def release_student(self, student_id: UUID) -> int:
        """Remove the student from every course's enrolledStudents."""
        result = await self.db.execute(
            delete(Enrollment).where(Enrollment.student_id == student_id),
        )
        self._log_cascade(EntityKind.STUDENT, student_id, result.rowcount)
        return result.rowcount

    async def release_course(self, course_id: UUID) -> int:
        """Remove the course from every student's enrolledCourses."""
        result = await self.db.execute(
            delete(Enrollment).where(Enrollment.course_id == course_id),
        )
        self._log_cascade(EntityKind.COURSE, course_id, result.rowcount)
        return result.rowcount

    async def release_teacher(self, teacher_id: UUID) -> int:
        """Clear teacherId and teacherName on every course of the teacher."""
        result = await self.db.execute(
            update(Course)
            .where(Course.teacher_id == teacher_id)
            .values(teacher_id=None, teacher_name=""),
        )
        self._log_cascade(EntityKind.TEACHER, teacher_id, result.rowcount)
        return result.rowcount

    def _log_cascade(self, kind: EntityKind, record_id: UUID, affected: int) -> None:
        logger.info(
            f"Cascade for {kind.label.lower()} delete touched {affected} row(s)",
            extra={
                "entity": kind.value,
                "record_id": str(record_id),
                "affected": affected,
            },
        )

    # ─── Enrollment ─────────────────────────────────────────────

    async def is_enrolled(self, course_id: UUID, student_id: UUID) -> bool:
        result = await self.db.execute(
            select(Enrollment).where(
                Enrollment.course_id == course_id,
                Enrollment.student_id == student_id,
            ),
        )
        return result.scalar_one_or_none() is not None

    async def enroll(self, course: Course, student: Student) -> bool:
        """Enroll student in course. Returns False when already enrolled.

        Holds the course row lock (SELECT ... FOR UPDATE) from the count until
        the request commits.
        """
        locked = await self.db.execute(
            select(Course.max_students)
            .where(Course.id == course.id)
            .with_for_update(),
        )
        max_students = locked.scalar_one()
        if await self.is_enrolled(course.id, student.id):
            return False
        enrolled = await self.db.execute(
            select(func.count())
            .select_from(Enrollment)
            .where(Enrollment.course_id == course.id),
        )
        check_capacity(enrolled.scalar_one(), max_students)
        self.db.add(Enrollment(course_id=course.id, student_id=student.id))
        await self.db.flush()
        logger.info(
            f"Enrolled student {student.id} in course {course.id}",
            extra={"entity": EntityKind.COURSE.value, "record_id": str(course.id)},
        )
        return True

    async def unenroll(self, course_id: UUID, student_id: UUID) -> bool:
        """Drop one enrollment. Returns False when there was none."""
        result = await self.db.execute(
            delete(Enrollment).where(
                Enrollment.course_id == course_id,
                Enrollment.student_id == student_id,
            ),
        )
        return result.rowcount > 0

    # ─── Stats ──────────────────────────────────────────────────

    async def collection_counts(self) -> dict[str, int]:
        return {
            kind.value: await repo.count()
            for kind, repo in self._repositories.items()
        }
