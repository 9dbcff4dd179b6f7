"""
Service layer: operations that span more than one repository call.
"""

from .integrity_service import (
    delete_course_cascade,
    create_assignment_for_course,
    create_assignment,
)

__all__ = [
    "delete_course_cascade",
    "create_assignment_for_course",
    "create_assignment",
]
