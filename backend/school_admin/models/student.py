"""Student ORM — one row per student in the students collection.

Invariants:
    - id is UUID primary key generated on insert
    - email and student_id uniqueness is checked before writes, not by constraints
    - enrolled_courses is derived from enrollments (never written directly)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from school_admin.db.base import Base


class Student(Base):
    """Student record."""
    __tablename__ = "students"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    student_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    grade: Mapped[str] = mapped_column(String(50), nullable=False)
    date_of_birth: Mapped[str] = mapped_column(String(50), nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
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
    def enrolled_courses(self) -> list[str]:
        return [str(e.course_id) for e in self.enrollments]
