"""Course Routes — CRUD over the courses collection plus enrollment.

Invariants:
    - teacherName is resolved from teacherId on every create/update
    - Unknown teacherId is accepted and stored as "no teacher"
    - Enrollment endpoints are the only way enrolledStudents/enrolledCourses change
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from school_admin.api.envelope import ok, ok_message
from school_admin.core.domain_types import EntityKind
from school_admin.infrastructure.database import get_db
from school_admin.services.enrollment_service import EnrollmentService
from school_admin.services.record_service import RecordService

router = APIRouter(prefix="/api/courses", tags=["courses"])


def _service(db: AsyncSession) -> RecordService:
    return RecordService(db, EntityKind.COURSE)


@router.get("")
async def list_courses(
    search: str | None = Query(None, max_length=200),
    db: AsyncSession = Depends(get_db),
):
    """List courses, optionally filtered by name, code, description or teacher."""
    return ok(await _service(db).list(search))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_course(
    payload: Any = Body(...), db: AsyncSession = Depends(get_db),
):
    return ok(await _service(db).create(payload))


@router.get("/{course_id}")
async def get_course(course_id: str, db: AsyncSession = Depends(get_db)):
    return ok(await _service(db).get(course_id))


@router.put("/{course_id}")
async def update_course(
    course_id: str,
    payload: Any = Body(...),
    db: AsyncSession = Depends(get_db),
):
    return ok(await _service(db).update(course_id, payload))


@router.delete("/{course_id}")
async def delete_course(course_id: str, db: AsyncSession = Depends(get_db)):
    await _service(db).delete(course_id)
    return ok_message("Course deleted successfully")


# ─── Enrollment ─────────────────────────────────────────────────

@router.post("/{course_id}/students/{student_id}")
async def enroll_student(
    course_id: str, student_id: str, db: AsyncSession = Depends(get_db),
):
    """Enroll a student; 409 when the course is at maxStudents."""
    return ok(await EnrollmentService(db).enroll(course_id, student_id))


@router.delete("/{course_id}/students/{student_id}")
async def unenroll_student(
    course_id: str, student_id: str, db: AsyncSession = Depends(get_db),
):
    return ok(await EnrollmentService(db).unenroll(course_id, student_id))
