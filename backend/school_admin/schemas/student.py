"""Student Schemas — field-level validation for student payloads."""

from pydantic import EmailStr, Field

from school_admin.schemas.common import RecordInput, RecordOut


class StudentInput(RecordInput):
    """Editable student fields. enrolledCourses is managed by enrollment."""
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    student_id: str = Field(min_length=1, max_length=50)
    grade: str = Field(min_length=1, max_length=50)
    date_of_birth: str = Field(min_length=1, max_length=50)
    phone_number: str | None = Field(None, max_length=50)
    address: str | None = Field(None, max_length=500)


class StudentOut(RecordOut):
    first_name: str
    last_name: str
    email: str
    student_id: str
    grade: str
    date_of_birth: str
    phone_number: str | None = None
    address: str | None = None
    enrolled_courses: list[str] = Field(default_factory=list)
