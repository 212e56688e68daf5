"""Record Validation — pure payload validation for all three kinds.

Tests cover:
    - valid payloads produce typed records with normalized fields
    - required fields, email syntax and integer bounds produce violations
    - read-only fields are ignored, blank optionals become None
    - non-object input is a violation, never an exception
"""

from school_admin.core.domain_types import EntityKind
from school_admin.core.validation import InvalidRecord, ValidRecord, validate_record
from school_admin.schemas import CourseInput, StudentInput, TeacherInput


def _student(**overrides) -> dict:
    data = {
        "firstName": "Maya",
        "lastName": "Patel",
        "email": "maya.patel@school.edu",
        "studentId": "S-1001",
        "grade": "10",
        "dateOfBirth": "2009-04-12",
    }
    data.update(overrides)
    return data


def _course(**overrides) -> dict:
    data = {
        "courseName": "Biology I",
        "courseCode": "BIO-101",
        "credits": 3,
        "duration": "1 semester",
        "maxStudents": 30,
    }
    data.update(overrides)
    return data


def _fields(outcome: InvalidRecord) -> set[str]:
    return {v["field"] for v in outcome.violations}


# ─── Students ────────────────────────────────────────────────────

def test_valid_student_returns_typed_record():
    outcome = validate_record(EntityKind.STUDENT, _student())
    assert isinstance(outcome, ValidRecord)
    assert outcome.ok is True
    assert isinstance(outcome.record, StudentInput)
    assert outcome.record.first_name == "Maya"
    assert outcome.record.phone_number is None


def test_student_strings_are_stripped():
    outcome = validate_record(EntityKind.STUDENT, _student(firstName="  Maya  "))
    assert outcome.record.first_name == "Maya"


def test_whitespace_only_required_field_is_rejected():
    outcome = validate_record(EntityKind.STUDENT, _student(lastName="   "))
    assert isinstance(outcome, InvalidRecord)
    assert outcome.ok is False
    assert _fields(outcome) == {"lastName"}


def test_missing_required_fields_are_all_reported():
    outcome = validate_record(EntityKind.STUDENT, {"firstName": "Maya"})
    assert isinstance(outcome, InvalidRecord)
    assert {"lastName", "email", "studentId", "grade", "dateOfBirth"} <= _fields(outcome)


def test_invalid_email_is_rejected():
    outcome = validate_record(EntityKind.STUDENT, _student(email="not-an-email"))
    assert isinstance(outcome, InvalidRecord)
    assert _fields(outcome) == {"email"}


def test_violation_has_field_message_and_type():
    outcome = validate_record(EntityKind.STUDENT, _student(email="nope"))
    violation = outcome.violations[0]
    assert set(violation) == {"field", "message", "type"}
    assert violation["message"]


def test_read_only_fields_are_ignored():
    outcome = validate_record(EntityKind.STUDENT, _student(
        _id="abc", enrolledCourses=["x"], createdAt="2020-01-01",
    ))
    assert isinstance(outcome, ValidRecord)
    assert "enrolled_courses" not in outcome.record.model_dump()


def test_blank_optional_becomes_none():
    outcome = validate_record(EntityKind.STUDENT, _student(address="  "))
    assert outcome.record.address is None


def test_non_object_input_is_a_violation():
    outcome = validate_record(EntityKind.STUDENT, ["not", "an", "object"])
    assert isinstance(outcome, InvalidRecord)
    assert outcome.violations


# ─── Teachers ────────────────────────────────────────────────────

def test_teacher_requires_department_and_subject():
    outcome = validate_record(EntityKind.TEACHER, {
        "firstName": "Ann", "lastName": "Lee",
        "email": "ann.lee@school.edu", "teacherId": "T-01",
    })
    assert isinstance(outcome, InvalidRecord)
    assert _fields(outcome) == {"department", "subject"}


def test_valid_teacher_returns_teacher_input():
    outcome = validate_record(EntityKind.TEACHER, {
        "firstName": "Ann", "lastName": "Lee",
        "email": "ann.lee@school.edu", "teacherId": "T-01",
        "department": "Science", "subject": "Biology",
    })
    assert isinstance(outcome.record, TeacherInput)


# ─── Courses ─────────────────────────────────────────────────────

def test_valid_course_returns_course_input():
    outcome = validate_record(EntityKind.COURSE, _course())
    assert isinstance(outcome.record, CourseInput)
    assert outcome.record.teacher_id is None


def test_credits_below_one_is_rejected():
    outcome = validate_record(EntityKind.COURSE, _course(credits=0))
    assert _fields(outcome) == {"credits"}


def test_max_students_below_one_is_rejected():
    outcome = validate_record(EntityKind.COURSE, _course(maxStudents=-5))
    assert _fields(outcome) == {"maxStudents"}


def test_non_integer_credits_is_rejected():
    outcome = validate_record(EntityKind.COURSE, _course(credits=2.5))
    assert _fields(outcome) == {"credits"}


def test_boolean_credits_is_rejected():
    outcome = validate_record(EntityKind.COURSE, _course(credits=True))
    assert isinstance(outcome, InvalidRecord)
    assert _fields(outcome) == {"credits"}


def test_numeric_string_max_students_is_rejected():
    outcome = validate_record(EntityKind.COURSE, _course(maxStudents="7"))
    assert isinstance(outcome, InvalidRecord)
    assert _fields(outcome) == {"maxStudents"}


def test_teacher_name_from_input_is_ignored():
    outcome = validate_record(EntityKind.COURSE, _course(teacherName="Forged Name"))
    assert "teacher_name" not in outcome.record.model_dump()


def test_blank_teacher_id_becomes_none():
    outcome = validate_record(EntityKind.COURSE, _course(teacherId=""))
    assert outcome.record.teacher_id is None
