"""
Course repository functions.

Implements course CRUD and the aggregate course-with-assignments listing.
"""
from __future__ import annotations

import math
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from coursetrack.db import models, schemas
from coursetrack.db.database import transaction
from coursetrack.errors import NotFoundError, ValidationError


def _validate_study_hours(study_hours) -> None:
    if study_hours is None or not math.isfinite(study_hours):
        raise ValidationError("Study hours must be a finite number")
    if study_hours < 0:
        raise ValidationError("Study hours cannot be negative")


def get_courses_with_assignments(db: Session) -> List[schemas.CourseWithAssignments]:
    """Every course with its assignments nested, in a single outer join.

    Courses without assignments are kept with an empty list.
    """
    with transaction(db, "list courses"):
        rows = (
            db.query(models.Course, models.Assignment)
            .outerjoin(models.Assignment, models.Assignment.course_id == models.Course.id)
            .order_by(models.Course.id, models.Assignment.id)
            .all()
        )

    grouped: Dict[int, schemas.CourseWithAssignments] = {}
    for course, assignment in rows:
        entry = grouped.get(course.id)
        if entry is None:
            entry = schemas.CourseWithAssignments(
                id=course.id,
                name=course.name,
                course_link=course.course_link,
                study_hours=course.study_hours,
                assignments=[],
            )
            grouped[course.id] = entry
        if assignment is not None:
            entry.assignments.append(schemas.Assignment.model_validate(assignment))
    return list(grouped.values())


def get_course(db: Session, course_id: int, *, lock: Optional[str] = None):
    """Return the course or raise ``NotFoundError``. Runs in the caller's transaction.

    ``lock="share"`` reads the row ``FOR SHARE`` so it cannot be deleted until
    the caller commits; ``lock="update"`` reads it ``FOR UPDATE`` so no new
    child can be attached meanwhile. Dialects without row locks ignore both.
    """
    if lock not in (None, "share", "update"):
        raise ValueError(f"Unknown lock mode: {lock!r}")
    q = db.query(models.Course).filter(models.Course.id == course_id)
    if lock is not None:
        q = q.with_for_update(read=(lock == "share"))
    db_course = q.first()
    if db_course is None:
        raise NotFoundError("Course", course_id)
    return db_course


def create_course(db: Session, course: schemas.CourseCreate):
    _validate_study_hours(course.study_hours)
    with transaction(db, "create course"):
        db_course = models.Course(
            name=course.name,
            course_link=course.course_link,
            study_hours=course.study_hours,
        )
        db.add(db_course)
        db.flush()
        db.refresh(db_course)
    return db_course


def update_course(db: Session, course_id: int, course: schemas.CourseUpdate):
    _validate_study_hours(course.study_hours)
    with transaction(db, f"update course {course_id}"):
        db_course = db.query(models.Course).filter(models.Course.id == course_id).first()
        if db_course is None:
            raise NotFoundError("Course", course_id)
        db_course.name = course.name
        db_course.course_link = course.course_link
        db_course.study_hours = course.study_hours
        db.flush()
        db.refresh(db_course)
    return db_course


def delete_course(db: Session, course_id: int) -> None:
    """Delete the course row only. Runs in the caller's transaction."""
    deleted = db.query(models.Course).filter(
        models.Course.id == course_id
    ).delete(synchronize_session=False)
    if deleted == 0:
        raise NotFoundError("Course", course_id)
