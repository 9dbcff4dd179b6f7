from typing import List
from pydantic import BaseModel, ConfigDict

from .assignments import Assignment


class CourseBase(BaseModel):
    name: str
    course_link: str | None = None
    study_hours: float


class CourseCreate(CourseBase):
    pass


class CourseUpdate(CourseBase):
    """Full replacement of the mutable course fields."""


class Course(CourseBase):
    id: int
    model_config = ConfigDict(from_attributes=True)


class CourseWithAssignments(Course):
    assignments: List[Assignment] = []
