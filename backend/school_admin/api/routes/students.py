"""Student Routes — CRUD over the students collection.

Invariants:
    - Deleting a student removes it from every course's enrolledStudents
    - Body is validated by the service, so violations come back as one 400 envelope
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from school_admin.api.envelope import ok, ok_message
from school_admin.core.domain_types import EntityKind
from school_admin.infrastructure.database import get_db
from school_admin.services.record_service import RecordService

router = APIRouter(prefix="/api/students", tags=["students"])


def _service(db: AsyncSession) -> RecordService:
    return RecordService(db, EntityKind.STUDENT)


@router.get("")
async def list_students(
    search: str | None = Query(None, max_length=200),
    db: AsyncSession = Depends(get_db),
):
    """List students, optionally filtered by name, email, student ID or grade."""
    return ok(await _service(db).list(search))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_student(
    payload: Any = Body(...), db: AsyncSession = Depends(get_db),
):
    return ok(await _service(db).create(payload))


@router.get("/{student_id}")
async def get_student(student_id: str, db: AsyncSession = Depends(get_db)):
    return ok(await _service(db).get(student_id))


@router.put("/{student_id}")
async def update_student(
    student_id: str,
    payload: Any = Body(...),
    db: AsyncSession = Depends(get_db),
):
    return ok(await _service(db).update(student_id, payload))


@router.delete("/{student_id}")
async def delete_student(student_id: str, db: AsyncSession = Depends(get_db)):
    await _service(db).delete(student_id)
    return ok_message("Student deleted successfully")
