"""
Assignment repository functions.

Implements assignment reads, completion updates and deletes, plus the
statement-level insert and per-course bulk delete used by the integrity
service.
"""
from __future__ import annotations

from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from coursetrack.db import models
from coursetrack.db.database import transaction
from coursetrack.errors import NotFoundError


def get_assignments(db: Session) -> List[models.Assignment]:
    with transaction(db, "list assignments"):
        return db.query(models.Assignment).all()


def get_assignments_by_course(db: Session, course_id: int) -> List[models.Assignment]:
    """Assignments of one course, earliest due date first.

    Does not check that the course exists; an unknown id yields ``[]``.
    """
    with transaction(db, f"list assignments for course {course_id}"):
        return (
            db.query(models.Assignment)
            .filter(models.Assignment.course_id == course_id)
            .order_by(models.Assignment.due_date.asc(), models.Assignment.id.asc())
            .all()
        )


def get_assignment(db: Session, assignment_id: int):
    with transaction(db, f"fetch assignment {assignment_id}"):
        db_assignment = db.query(models.Assignment).filter(models.Assignment.id == assignment_id).first()
        if db_assignment is None:
            raise NotFoundError("Assignment", assignment_id)
        return db_assignment


def add_assignment(
    db: Session,
    *,
    course_id: int,
    name: str,
    due_date: datetime,
    is_completed: bool = False,
):
    """Insert one assignment. Runs in the caller's transaction."""
    db_assignment = models.Assignment(
        course_id=course_id,
        name=name,
        due_date=due_date,
        is_completed=is_completed,
    )
    db.add(db_assignment)
    db.flush()
    db.refresh(db_assignment)
    return db_assignment


def update_assignment_completion(db: Session, assignment_id: int, is_completed: bool):
    with transaction(db, f"update assignment {assignment_id}"):
        db_assignment = db.query(models.Assignment).filter(models.Assignment.id == assignment_id).first()
        if db_assignment is None:
            raise NotFoundError("Assignment", assignment_id)
        db_assignment.is_completed = is_completed
        db.flush()
        db.refresh(db_assignment)
    return db_assignment


def delete_assignment(db: Session, assignment_id: int) -> None:
    with transaction(db, f"delete assignment {assignment_id}"):
        deleted = db.query(models.Assignment).filter(
            models.Assignment.id == assignment_id
        ).delete(synchronize_session=False)
        if deleted == 0:
            raise NotFoundError("Assignment", assignment_id)


def delete_assignments_for_course(db: Session, course_id: int) -> int:
    """Delete every assignment of a course. Runs in the caller's transaction."""
    return db.query(models.Assignment).filter(
        models.Assignment.course_id == course_id
    ).delete(synchronize_session=False)
