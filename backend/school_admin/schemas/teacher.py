"""Teacher Schemas — field-level validation for teacher payloads."""

from pydantic import EmailStr, Field

from school_admin.schemas.common import RecordInput, RecordOut


class TeacherInput(RecordInput):
    """Editable teacher fields. assignedCourses follows course.teacherId."""
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    teacher_id: str = Field(min_length=1, max_length=50)
    department: str = Field(min_length=1, max_length=100)
    subject: str = Field(min_length=1, max_length=100)
    phone_number: str | None = Field(None, max_length=50)
    address: str | None = Field(None, max_length=500)


class TeacherOut(RecordOut):
    first_name: str
    last_name: str
    email: str
    teacher_id: str
    department: str
    subject: str
    phone_number: str | None = None
    address: str | None = None
    assigned_courses: list[str] = Field(default_factory=list)
