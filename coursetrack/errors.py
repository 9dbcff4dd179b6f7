"""
Domain error taxonomy.

Repositories and the integrity service raise these; the API layer maps them
to HTTP responses in one place (see ``coursetrack.api.main``).
"""
from typing import Any, Optional

from fastapi import status


class CourseTrackError(Exception):
    """Base class for domain failures that carry an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(CourseTrackError):
    """Malformed or out-of-range input (400)."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(CourseTrackError):
    """Referenced identifier does not exist (404)."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, identifier: Optional[Any] = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class StorageError(CourseTrackError):
    """Any failure raised by the database layer (500).

    The original exception is chained as ``__cause__``; the message is only
    for logs and is never returned to callers.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
