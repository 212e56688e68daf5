"""Course Schemas — field-level validation for course payloads.

Invariants:
    - credits and maxStudents are JSON integers >= 1; booleans and numeric
      strings are rejected
    - teacherId is an opaque string here; resolution happens at write time
    - teacherName and enrolledStudents are never accepted from input
"""

from pydantic import Field, field_validator

from school_admin.schemas.common import RecordInput, RecordOut


class CourseInput(RecordInput):
    """Editable course fields."""
    course_name: str = Field(min_length=1, max_length=200)
    course_code: str = Field(min_length=1, max_length=50)
    description: str | None = Field(None, max_length=2000)
    credits: int = Field(ge=1, strict=True)
    duration: str = Field(min_length=1, max_length=100)
    teacher_id: str | None = None
    max_students: int = Field(ge=1, strict=True)
    schedule: str | None = Field(None, max_length=200)

    @field_validator("description", "schedule", "teacher_id")
    @classmethod
    def blank_optional_to_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v


class CourseOut(RecordOut):
    course_name: str
    course_code: str
    description: str | None = None
    credits: int
    duration: str
    teacher_id: str | None = None
    teacher_name: str = ""
    enrolled_students: list[str] = Field(default_factory=list)
    max_students: int
    schedule: str | None = None

    @field_validator("teacher_id", mode="before")
    @classmethod
    def stringify_teacher_id(cls, v: object) -> str | None:
        return str(v) if v is not None else None
