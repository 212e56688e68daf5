"""Integrity Rules — pure helpers behind the integrity coordinator."""

import pytest

from school_admin.core.domain_types import EntityKind
from school_admin.core.errors import CourseFullError
from school_admin.core.integrity_rules import (
    SEARCH_FIELDS, UNIQUE_FIELDS,
    check_capacity, compose_teacher_name, normalize_search_term,
)


def test_compose_teacher_name_joins_first_and_last():
    assert compose_teacher_name("Ann", "Lee") == "Ann Lee"


def test_unique_fields_per_kind():
    assert [u.attribute for u in UNIQUE_FIELDS[EntityKind.STUDENT]] == ["student_id", "email"]
    assert [u.attribute for u in UNIQUE_FIELDS[EntityKind.TEACHER]] == ["teacher_id", "email"]
    assert [u.attribute for u in UNIQUE_FIELDS[EntityKind.COURSE]] == ["course_code"]


def test_every_kind_has_search_fields():
    assert set(SEARCH_FIELDS) == set(EntityKind)
    assert "teacher_name" in SEARCH_FIELDS[EntityKind.COURSE]


@pytest.mark.parametrize("raw, expected", [
    (None, None), ("", None), ("   ", None), ("  Lee ", "lee"),
])
def test_normalize_search_term(raw, expected):
    assert normalize_search_term(raw) == expected


def test_check_capacity_allows_below_max():
    check_capacity(enrolled=2, max_students=3)


def test_check_capacity_raises_at_max():
    with pytest.raises(CourseFullError) as exc_info:
        check_capacity(enrolled=3, max_students=3)
    assert exc_info.value.http_status == 409
    assert exc_info.value.code == "COURSE_FULL"
