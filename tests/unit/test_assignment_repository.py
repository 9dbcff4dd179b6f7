from datetime import datetime, timedelta, timezone

import pytest

from coursetrack.db import models, schemas
from coursetrack.db.repositories import assignments as repo_assignments
from coursetrack.errors import NotFoundError


def test_assignments_by_course_sorted_by_due_date(db_session, course_factory, assignment_factory):
    course = course_factory()
    assignment_factory(course.id, name="march", due_date=datetime(2024, 3, 1))
    assignment_factory(course.id, name="january", due_date=datetime(2024, 1, 1))
    assignment_factory(course.id, name="february", due_date=datetime(2024, 2, 1))

    ordered = repo_assignments.get_assignments_by_course(db_session, course.id)
    assert [a.due_date for a in ordered] == [
        datetime(2024, 1, 1),
        datetime(2024, 2, 1),
        datetime(2024, 3, 1),
    ]


def test_assignments_by_course_only_that_course(db_session, course_factory, assignment_factory):
    mine = course_factory(name="Mine")
    other = course_factory(name="Other")
    assignment_factory(mine.id, name="A")
    assignment_factory(other.id, name="B")
    assert [a.name for a in repo_assignments.get_assignments_by_course(db_session, mine.id)] == ["A"]


def test_assignments_by_unknown_course_is_empty(db_session):
    assert repo_assignments.get_assignments_by_course(db_session, 12345) == []


def test_get_assignments_lists_all(db_session, course_factory, assignment_factory):
    c1 = course_factory(name="One")
    c2 = course_factory(name="Two")
    assignment_factory(c1.id)
    assignment_factory(c2.id)
    assert len(repo_assignments.get_assignments(db_session)) == 2


def test_get_assignment_not_found(db_session):
    with pytest.raises(NotFoundError) as exc:
        repo_assignments.get_assignment(db_session, 7)
    assert exc.value.resource == "Assignment"
    assert exc.value.identifier == 7


def test_add_assignment_defaults_incomplete(db_session, course_factory):
    course = course_factory()
    created = repo_assignments.add_assignment(
        db_session, course_id=course.id, name="HW1", due_date=datetime(2024, 5, 1)
    )
    db_session.commit()
    assert created.id is not None
    assert created.is_completed is False


def test_update_completion_is_idempotent(db_session, course_factory, assignment_factory):
    course = course_factory()
    assignment = assignment_factory(course.id)
    first = repo_assignments.update_assignment_completion(db_session, assignment.id, True)
    second = repo_assignments.update_assignment_completion(db_session, assignment.id, True)
    assert first.is_completed is True
    assert second.is_completed is True

    back = repo_assignments.update_assignment_completion(db_session, assignment.id, False)
    assert back.is_completed is False


def test_update_completion_missing(db_session):
    with pytest.raises(NotFoundError):
        repo_assignments.update_assignment_completion(db_session, 99, True)


def test_delete_assignment_then_missing(db_session, course_factory, assignment_factory):
    course = course_factory()
    assignment = assignment_factory(course.id)
    repo_assignments.delete_assignment(db_session, assignment.id)
    assert db_session.query(models.Assignment).count() == 0
    with pytest.raises(NotFoundError):
        repo_assignments.delete_assignment(db_session, assignment.id)


def test_delete_assignments_for_course_counts(db_session, course_factory, assignment_factory):
    course = course_factory()
    other = course_factory(name="Other")
    assignment_factory(course.id)
    assignment_factory(course.id)
    assignment_factory(other.id)
    assert repo_assignments.delete_assignments_for_course(db_session, course.id) == 2
    db_session.commit()
    assert db_session.query(models.Assignment).count() == 1


def test_create_schema_normalises_due_date_offset_to_utc():
    tokyo = timezone(timedelta(hours=9))
    payload = schemas.AssignmentCreate(name="A", due_date=datetime(2024, 1, 1, 10, tzinfo=tokyo), course_id=1)
    assert payload.due_date == datetime(2024, 1, 1, 1, tzinfo=timezone.utc)
    assert payload.due_date.utcoffset() == timedelta(0)


def test_create_schema_naive_due_date_taken_as_utc():
    payload = schemas.CourseAssignmentCreate(name="A", due_date=datetime(2024, 1, 1, 10))
    assert payload.due_date == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)


def test_mixed_offsets_order_by_instant(db_session, course_factory):
    course = course_factory()
    for name, due in (
        ("B", "2024-01-01T05:00:00Z"),
        ("A", "2024-01-01T10:00:00+09:00"),
    ):
        payload = schemas.CourseAssignmentCreate(name=name, due_date=due)
        repo_assignments.add_assignment(db_session, course_id=course.id, name=name, due_date=payload.due_date)

    ordered = repo_assignments.get_assignments_by_course(db_session, course.id)
    assert [a.name for a in ordered] == ["A", "B"]


def test_null_completion_maps_to_default():
    payload = schemas.AssignmentCreate(name="A", due_date="2024-01-01", course_id=1, is_completed=None)
    assert payload.is_completed is False
