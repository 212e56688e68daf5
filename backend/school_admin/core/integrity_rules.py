"""Integrity Rules — pure rules shared by the referential integrity coordinator.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - UNIQUE_FIELDS order is the order conflicts are reported in
    - compose_teacher_name is the only place the denormalized name is built

Design Decisions:
    - Rules as data (tuples per kind) so repositories stay generic over the three kinds
"""

from typing import NamedTuple

from school_admin.core.domain_types import EntityKind
from school_admin.core.errors import CourseFullError


class UniqueField(NamedTuple):
    attribute: str  # ORM / schema attribute name
    label: str      # used in the "<label> already exists" message


UNIQUE_FIELDS: dict[EntityKind, tuple[UniqueField, ...]] = {
    EntityKind.STUDENT: (
        UniqueField("student_id", "Student ID"),
        UniqueField("email", "Email"),
    ),
    EntityKind.TEACHER: (
        UniqueField("teacher_id", "Teacher ID"),
        UniqueField("email", "Email"),
    ),
    EntityKind.COURSE: (
        UniqueField("course_code", "Course code"),
    ),
}

SEARCH_FIELDS: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.STUDENT: (
        "first_name", "last_name", "email", "student_id", "grade",
    ),
    EntityKind.TEACHER: (
        "first_name", "last_name", "email", "teacher_id", "department", "subject",
    ),
    EntityKind.COURSE: (
        "course_name", "course_code", "description", "teacher_name",
    ),
}


def compose_teacher_name(first_name: str, last_name: str) -> str:
    """Denormalized display name stored on courses."""
    return f"{first_name} {last_name}".strip()


def normalize_search_term(term: str | None) -> str | None:
    """Lowercased, stripped search term; None when nothing to search for."""
    if term is None:
        return None
    term = term.strip().lower()
    return term or None


def check_capacity(enrolled: int, max_students: int) -> None:
    """Raise CourseFullError when one more enrollment would exceed capacity."""
    if enrolled >= max_students:
        raise CourseFullError(max_students)
