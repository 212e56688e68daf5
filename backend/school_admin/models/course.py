"""Course ORM — one row per course in the courses collection.

Invariants:
    - teacher_id references teachers.id or is NULL (never a dangling id)
    - teacher_name is denormalized from the referenced teacher; "" when no teacher
    - credits and max_students >= 1 (validated at the API boundary)
    - enrolled_students is derived from enrollments (never written directly)

Design Decisions:
    - No ON DELETE on teacher_id: clearing references is the coordinator's job,
      issued as one bulk UPDATE before the teacher row is deleted
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from school_admin.db.base import Base


class Course(Base):
    """Course record."""
    __tablename__ = "courses"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    course_name: Mapped[str] = mapped_column(String(200), nullable=False)
    course_code: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    credits: Mapped[int] = mapped_column(Integer, nullable=False)
    duration: Mapped[str] = mapped_column(String(100), nullable=False)
    teacher_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("teachers.id"),
        nullable=True, index=True,
    )
    teacher_name: Mapped[str] = mapped_column(
        String(201), nullable=False, default="",
    )
    max_students: Mapped[int] = mapped_column(Integer, nullable=False)
    schedule: Mapped[str | None] = mapped_column(String(200), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    enrollments: Mapped[list["Enrollment"]] = relationship(
        "Enrollment", viewonly=True, lazy="selectin",
        order_by="Enrollment.created_at",
    )

    @property
    def enrolled_students(self) -> list[str]:
        return [str(e.student_id) for e in self.enrollments]
