"""Domain Types — identifier parsing and entity kinds.

Tests:
    - parse_identifier accepts UUIDs and raises InvalidIdentifierError otherwise
    - try_parse_identifier is lenient for optional references
    - EntityKind values are collection names, labels are singular
"""

from uuid import uuid4

import pytest

from school_admin.core.domain_types import (
    EntityKind, parse_identifier, try_parse_identifier,
)
from school_admin.core.errors import InvalidIdentifierError


def test_parse_identifier_accepts_canonical_uuid():
    uid = uuid4()
    assert parse_identifier(str(uid), EntityKind.STUDENT) == uid


def test_parse_identifier_accepts_hex_form():
    uid = uuid4()
    assert parse_identifier(uid.hex, EntityKind.COURSE) == uid


@pytest.mark.parametrize("raw", ["not-a-valid-id", "", "123", "64b7f0c2e1a4c9a1b2c3d4e5"])
def test_parse_identifier_rejects_malformed(raw):
    with pytest.raises(InvalidIdentifierError) as exc_info:
        parse_identifier(raw, EntityKind.STUDENT)
    assert exc_info.value.http_status == 400
    assert exc_info.value.message == "Invalid student ID"


def test_try_parse_identifier_returns_none_for_absent_or_malformed():
    assert try_parse_identifier(None) is None
    assert try_parse_identifier("") is None
    assert try_parse_identifier("t1") is None


def test_try_parse_identifier_parses_valid():
    uid = uuid4()
    assert try_parse_identifier(str(uid)) == uid


def test_entity_kind_values_are_collection_names():
    assert [k.value for k in EntityKind] == ["students", "teachers", "courses"]


def test_entity_kind_labels():
    assert EntityKind.TEACHER.label == "Teacher"
    assert EntityKind.COURSE.label == "Course"
