"""Initial schema — students, teachers, courses, enrollments.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "students",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("student_id", sa.String(50), nullable=False),
        sa.Column("grade", sa.String(50), nullable=False),
        sa.Column("date_of_birth", sa.String(50), nullable=False),
        sa.Column("phone_number", sa.String(50), nullable=True),
        sa.Column("address", sa.Text, nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_students_email", "students", ["email"])
    op.create_index("ix_students_student_id", "students", ["student_id"])

    op.create_table(
        "teachers",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("teacher_id", sa.String(50), nullable=False),
        sa.Column("department", sa.String(100), nullable=False),
        sa.Column("subject", sa.String(100), nullable=False),
        sa.Column("phone_number", sa.String(50), nullable=True),
        sa.Column("address", sa.Text, nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_teachers_email", "teachers", ["email"])
    op.create_index("ix_teachers_teacher_id", "teachers", ["teacher_id"])

    op.create_table(
        "courses",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("course_name", sa.String(200), nullable=False),
        sa.Column("course_code", sa.String(50), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("credits", sa.Integer, nullable=False),
        sa.Column("duration", sa.String(100), nullable=False),
        sa.Column("teacher_id", UUID(as_uuid=True), sa.ForeignKey("teachers.id"), nullable=True),
        sa.Column("teacher_name", sa.String(201), nullable=False, server_default=""),
        sa.Column("max_students", sa.Integer, nullable=False),
        sa.Column("schedule", sa.String(200), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_courses_course_code", "courses", ["course_code"])
    op.create_index("ix_courses_teacher_id", "courses", ["teacher_id"])

    op.create_table(
        "enrollments",
        sa.Column("student_id", UUID(as_uuid=True), sa.ForeignKey("students.id"), primary_key=True),
        sa.Column("course_id", UUID(as_uuid=True), sa.ForeignKey("courses.id"), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("enrollments")
    op.drop_table("courses")
    op.drop_table("teachers")
    op.drop_table("students")
