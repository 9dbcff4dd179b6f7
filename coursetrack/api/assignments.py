"""
Assignments API endpoints.
"""
from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from coursetrack.db import schemas
from coursetrack.db.database import get_db
from coursetrack.db.repositories import assignments as repo_assignments
from coursetrack.services import integrity_service

router = APIRouter(prefix="/assignments", tags=["assignments"])


@router.get("", response_model=List[schemas.Assignment])
def get_all_assignments_endpoint(db: Session = Depends(get_db)):
    return repo_assignments.get_assignments(db)


@router.post("", response_model=schemas.Assignment, status_code=status.HTTP_201_CREATED)
def create_assignment_endpoint(assignment: schemas.AssignmentCreate, db: Session = Depends(get_db)):
    return integrity_service.create_assignment(db, assignment)


@router.get("/{assignment_id}", response_model=schemas.Assignment)
def get_assignment_endpoint(assignment_id: int, db: Session = Depends(get_db)):
    return repo_assignments.get_assignment(db, assignment_id)


@router.put("/{assignment_id}", response_model=schemas.Assignment)
def update_assignment_endpoint(
    assignment_id: int,
    assignment: schemas.AssignmentUpdate,
    db: Session = Depends(get_db),
):
    return repo_assignments.update_assignment_completion(db, assignment_id, assignment.is_completed)


@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_assignment_endpoint(assignment_id: int, db: Session = Depends(get_db)):
    repo_assignments.delete_assignment(db, assignment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
