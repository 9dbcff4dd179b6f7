"""
SQLAlchemy models for the courses service.

Re-exports ``Base`` and every ORM class so callers can use
``from coursetrack.db import models`` and ``models.Course``.
"""

from .base import Base  # re-export

from .courses import Course
from .assignments import Assignment

__all__ = [
    "Base",
    "Course",
    "Assignment",
]
