"""Domain Types — entity kinds and identifier parsing.

Invariants:
    - Record identity is a UUID; its string form is the "_id" seen on the wire
    - parse_identifier is PURE and runs before any store access
    - EntityKind values are the collection names (students, teachers, courses)

Design Decisions:
    - str Enum: kind doubles as URL segment and table name
"""

from enum import Enum
from uuid import UUID

from school_admin.core.errors import InvalidIdentifierError


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """The three record kinds — value is the collection name."""
    STUDENT = "students"
    TEACHER = "teachers"
    COURSE = "courses"

    @property
    def label(self) -> str:
        """Singular display name used in messages ("Student")."""
        return {
            EntityKind.STUDENT: "Student",
            EntityKind.TEACHER: "Teacher",
            EntityKind.COURSE: "Course",
        }[self]


# ─── Parsing ─────────────────────────────────────────────────────

def parse_identifier(raw_id: str, kind: EntityKind) -> UUID:
    """Parse a path identifier or raise InvalidIdentifierError.

    Accepts the canonical hyphenated form and the 32-char hex form.
    """
    try:
        return UUID(str(raw_id).strip())
    except (ValueError, AttributeError, TypeError):
        raise InvalidIdentifierError(kind.label, str(raw_id))


def try_parse_identifier(raw_id: str | None) -> UUID | None:
    """Lenient variant for optional references — None when absent or malformed."""
    if not raw_id:
        return None
    try:
        return UUID(str(raw_id).strip())
    except (ValueError, AttributeError, TypeError):
        return None
