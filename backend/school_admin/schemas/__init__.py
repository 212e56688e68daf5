"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Wire format is camelCase; identity serialized as "_id"

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""

from school_admin.schemas.student import StudentInput, StudentOut  # noqa: F401
from school_admin.schemas.teacher import TeacherInput, TeacherOut  # noqa: F401
from school_admin.schemas.course import CourseInput, CourseOut  # noqa: F401
