"""
Pydantic request/response schemas.

Import order: assignments first, courses nest them.
"""

from .assignments import (
    CourseAssignmentCreate,
    AssignmentCreate,
    AssignmentUpdate,
    Assignment,
)
from .courses import (
    CourseBase,
    CourseCreate,
    CourseUpdate,
    Course,
    CourseWithAssignments,
)

__all__ = [
    "CourseAssignmentCreate",
    "AssignmentCreate",
    "AssignmentUpdate",
    "Assignment",
    "CourseBase",
    "CourseCreate",
    "CourseUpdate",
    "Course",
    "CourseWithAssignments",
]
