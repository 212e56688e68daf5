"""Enrollment — the only path that changes enrolledStudents/enrolledCourses."""

from uuid import UUID, uuid4

from sqlalchemy.dialects import postgresql

from school_admin.services.integrity_coordinator import IntegrityCoordinator


async def test_enroll_updates_both_sides(client, make_student, make_course):
    student = await make_student()
    course = await make_course()

    res = await client.post(f"/api/courses/{course['_id']}/students/{student['_id']}")
    assert res.status_code == 200
    assert res.json()["data"]["enrolledStudents"] == [student["_id"]]

    student_after = (await client.get(f"/api/students/{student['_id']}")).json()["data"]
    assert student_after["enrolledCourses"] == [course["_id"]]


async def test_enroll_twice_is_idempotent(client, make_student, make_course):
    student = await make_student()
    course = await make_course()
    url = f"/api/courses/{course['_id']}/students/{student['_id']}"
    await client.post(url)
    res = await client.post(url)
    assert res.status_code == 200
    assert res.json()["data"]["enrolledStudents"] == [student["_id"]]


async def test_enroll_into_full_course_returns_409(client, make_student, make_course):
    course = await make_course(maxStudents=1)
    first = await make_student()
    second = await make_student(email="li.wei@school.edu", studentId="S-1002")

    await client.post(f"/api/courses/{course['_id']}/students/{first['_id']}")
    res = await client.post(f"/api/courses/{course['_id']}/students/{second['_id']}")
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "COURSE_FULL"


async def test_enroll_unknown_student_returns_404(client, make_course):
    course = await make_course()
    res = await client.post(f"/api/courses/{course['_id']}/students/{uuid4()}")
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Student not found"


async def test_enroll_malformed_ids_return_400(client, make_course):
    course = await make_course()
    res = await client.post(f"/api/courses/{course['_id']}/students/abc")
    assert res.status_code == 400
    res = await client.post(f"/api/courses/abc/students/{uuid4()}")
    assert res.status_code == 400


async def test_unenroll_removes_enrollment(client, make_student, make_course):
    student = await make_student()
    course = await make_course()
    url = f"/api/courses/{course['_id']}/students/{student['_id']}"
    await client.post(url)

    res = await client.delete(url)
    assert res.status_code == 200
    assert res.json()["data"]["enrolledStudents"] == []


async def test_unenroll_when_not_enrolled_returns_404(client, make_student, make_course):
    student = await make_student()
    course = await make_course()
    res = await client.delete(f"/api/courses/{course['_id']}/students/{student['_id']}")
    assert res.status_code == 404


class _RecordingSession:
    """Delegates to a real session, keeping each statement compiled for Postgres."""

    def __init__(self, db):
        self._db = db
        self.issued: list[str] = []

    async def execute(self, statement, *args, **kwargs):
        self.issued.append(str(statement.compile(dialect=postgresql.dialect())))
        return await self._db.execute(statement, *args, **kwargs)

    def __getattr__(self, name):
        return getattr(self._db, name)


async def test_enroll_locks_course_row_before_counting(
    db_manager, make_student, make_course,
):
    student = await make_student()
    course = await make_course(maxStudents=1)

    async with db_manager.session() as db:
        coordinator = IntegrityCoordinator(db)
        course_row = await coordinator.courses.get(UUID(course["_id"]))
        student_row = await coordinator.students.get(UUID(student["_id"]))
        recorder = _RecordingSession(db)
        coordinator.db = recorder
        assert await coordinator.enroll(course_row, student_row) is True

    issued = recorder.issued
    lock_at = next(i for i, sql in enumerate(issued) if "FOR UPDATE" in sql)
    count_at = next(i for i, sql in enumerate(issued) if "count(*)" in sql)
    assert lock_at < count_at
    assert "FROM courses" in issued[lock_at]
