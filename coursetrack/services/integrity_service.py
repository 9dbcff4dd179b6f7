"""
Parent/child integrity between courses and assignments.

Each operation here is a multi-statement sequence run as one transaction:

* cascading course delete: lock the course, delete its assignments, then
  delete the course;
* assignment creation: verify (and on PostgreSQL share-lock) the parent
  course, then insert.

The two lock modes conflict, so a cascade and a concurrent insert for the
same course run one after the other instead of leaving an orphan.

A failure at any step rolls the whole sequence back, so a course is never
removed while its assignments remain and no assignment is inserted against a
course that the same transaction did not see.
"""
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from coursetrack.db import schemas
from coursetrack.db.database import transaction
from coursetrack.db.repositories import assignments as repo_assignments
from coursetrack.db.repositories import courses as repo_courses
from coursetrack.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def delete_course_cascade(db: Session, course_id: int) -> int:
    """Delete a course and all of its assignments; return the assignment count.

    The child delete completes before the course delete is issued. If it
    fails the course delete never runs and ``StorageError`` is raised.
    """
    with transaction(db, f"delete course {course_id}"):
        repo_courses.get_course(db, course_id, lock="update")
        removed = repo_assignments.delete_assignments_for_course(db, course_id)
        repo_courses.delete_course(db, course_id)
    logger.info("course_deleted: course_id=%s assignments_removed=%s", course_id, removed)
    return removed


def _insert_under_course(
    db: Session,
    course_id: int,
    name: str,
    due_date: datetime,
    is_completed: bool,
):
    with transaction(db, f"create assignment for course {course_id}"):
        try:
            repo_courses.get_course(db, course_id, lock="share")
        except NotFoundError:
            logger.warning("assignment_rejected: course_id=%s not found", course_id)
            raise
        return repo_assignments.add_assignment(
            db,
            course_id=course_id,
            name=name,
            due_date=due_date,
            is_completed=is_completed,
        )


def _require(name: Optional[str], due_date: Optional[datetime], message: str) -> None:
    if not name or due_date is None:
        raise ValidationError(message)


def create_assignment_for_course(db: Session, course_id: int, payload: schemas.CourseAssignmentCreate):
    """Create an assignment under ``course_id``; it always starts incomplete."""
    _require(payload.name, payload.due_date, "Name and due date are required")
    return _insert_under_course(db, course_id, payload.name, payload.due_date, False)


def create_assignment(db: Session, payload: schemas.AssignmentCreate):
    """Create an assignment whose parent course is named in the body."""
    if payload.course_id is None:
        raise ValidationError("Name, due date, and course ID are required")
    _require(payload.name, payload.due_date, "Name, due date, and course ID are required")
    return _insert_under_course(db, payload.course_id, payload.name, payload.due_date, payload.is_completed)
