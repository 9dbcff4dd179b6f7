"""
Courses API endpoints.

Course CRUD, the aggregated course listing, and assignments nested under a
course path.
"""
from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from coursetrack.db import schemas
from coursetrack.db.database import get_db
from coursetrack.db.repositories import courses as repo_courses
from coursetrack.db.repositories import assignments as repo_assignments
from coursetrack.services import integrity_service

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=List[schemas.CourseWithAssignments])
def get_all_courses_endpoint(db: Session = Depends(get_db)):
    return repo_courses.get_courses_with_assignments(db)


@router.post("", response_model=schemas.Course)
def create_course_endpoint(course: schemas.CourseCreate, db: Session = Depends(get_db)):
    return repo_courses.create_course(db, course)


@router.put("/{course_id}", response_model=schemas.Course)
def update_course_endpoint(course_id: int, course: schemas.CourseUpdate, db: Session = Depends(get_db)):
    return repo_courses.update_course(db, course_id, course)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course_endpoint(course_id: int, db: Session = Depends(get_db)):
    integrity_service.delete_course_cascade(db, course_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{course_id}/assignments", response_model=schemas.Assignment, status_code=status.HTTP_201_CREATED)
def create_course_assignment_endpoint(
    course_id: int,
    assignment: schemas.CourseAssignmentCreate,
    db: Session = Depends(get_db),
):
    return integrity_service.create_assignment_for_course(db, course_id, assignment)


@router.get("/{course_id}/assignments", response_model=List[schemas.Assignment])
def get_course_assignments_endpoint(course_id: int, db: Session = Depends(get_db)):
    return repo_assignments.get_assignments_by_course(db, course_id)
