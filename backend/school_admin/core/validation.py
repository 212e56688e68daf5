"""Record Validation — turns an untyped payload into a typed record or a violation list.

Invariants:
    - PURE: no IO, no async, no DB — runs before any existence or uniqueness check
    - Never raises for bad input; returns InvalidRecord instead
    - Violation shape: {"field": dotted camelCase path, "message": str, "type": str}

Design Decisions:
    - Discriminated result (ValidRecord | InvalidRecord) over exceptions: callers decide
      whether a failure becomes an HTTP 400
"""

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ValidationError

from school_admin.core.domain_types import EntityKind
from school_admin.schemas import CourseInput, StudentInput, TeacherInput

_INPUT_SCHEMAS: dict[EntityKind, type[BaseModel]] = {
    EntityKind.STUDENT: StudentInput,
    EntityKind.TEACHER: TeacherInput,
    EntityKind.COURSE: CourseInput,
}


@dataclass(frozen=True)
class ValidRecord:
    kind: EntityKind
    record: BaseModel
    ok: Literal[True] = True


@dataclass(frozen=True)
class InvalidRecord:
    kind: EntityKind
    violations: list[dict] = field(default_factory=list)
    ok: Literal[False] = False


ValidationOutcome = ValidRecord | InvalidRecord


def validate_record(kind: EntityKind, data: Any) -> ValidationOutcome:
    """Validate a raw payload against the input schema for kind."""
    schema = _INPUT_SCHEMAS[kind]
    try:
        record = schema.model_validate(data)
    except ValidationError as exc:
        return InvalidRecord(kind=kind, violations=violations_from(exc))
    return ValidRecord(kind=kind, record=record)


def violations_from(exc: ValidationError) -> list[dict]:
    """Flatten pydantic errors into field-level violations."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
