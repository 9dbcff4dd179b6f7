from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, field_validator


def as_utc(value: datetime | None) -> datetime | None:
    """Normalise to an aware UTC datetime; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class CourseAssignmentCreate(BaseModel):
    """Body for creating an assignment nested under ``/courses/{id}``.

    Fields are optional here so that absent values reach the integrity
    service, which reports them as validation failures.
    """
    name: str | None = None
    due_date: datetime | None = None

    @field_validator("due_date")
    @classmethod
    def _due_date_utc(cls, v: datetime | None):
        return as_utc(v)


class AssignmentCreate(CourseAssignmentCreate):
    course_id: int | None = None
    is_completed: bool | None = False

    @field_validator("is_completed")
    @classmethod
    def _completion_default(cls, v: bool | None):
        # explicit null means the default
        return False if v is None else v


class AssignmentUpdate(BaseModel):
    is_completed: bool


class Assignment(BaseModel):
    id: int
    course_id: int
    name: str
    due_date: datetime
    is_completed: bool = False
    model_config = ConfigDict(from_attributes=True)

    @field_validator("due_date")
    @classmethod
    def _due_date_utc(cls, v: datetime):
        return as_utc(v)
