"""Teacher Routes — CRUD over the teachers collection.

Invariants:
    - Updating a teacher refreshes teacherName on the teacher's courses
    - Deleting a teacher clears teacherId/teacherName on its courses; courses survive
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from school_admin.api.envelope import ok, ok_message
from school_admin.core.domain_types import EntityKind
from school_admin.infrastructure.database import get_db
from school_admin.services.record_service import RecordService

router = APIRouter(prefix="/api/teachers", tags=["teachers"])


def _service(db: AsyncSession) -> RecordService:
    return RecordService(db, EntityKind.TEACHER)


@router.get("")
async def list_teachers(
    search: str | None = Query(None, max_length=200),
    db: AsyncSession = Depends(get_db),
):
    """List teachers, optionally filtered by name, email, ID, department or subject."""
    return ok(await _service(db).list(search))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_teacher(
    payload: Any = Body(...), db: AsyncSession = Depends(get_db),
):
    return ok(await _service(db).create(payload))


@router.get("/{teacher_id}")
async def get_teacher(teacher_id: str, db: AsyncSession = Depends(get_db)):
    return ok(await _service(db).get(teacher_id))


@router.put("/{teacher_id}")
async def update_teacher(
    teacher_id: str,
    payload: Any = Body(...),
    db: AsyncSession = Depends(get_db),
):
    return ok(await _service(db).update(teacher_id, payload))


@router.delete("/{teacher_id}")
async def delete_teacher(teacher_id: str, db: AsyncSession = Depends(get_db)):
    await _service(db).delete(teacher_id)
    return ok_message("Teacher deleted successfully")
