from sqlalchemy import Column, Integer, String, Float, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base


class Course(Base):
    __tablename__ = 'courses'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    course_link = Column(String(2048), nullable=True)
    study_hours = Column(Float, nullable=False, default=0)

    # Child removal is sequenced by the integrity service, not by the ORM.
    assignments = relationship("Assignment", back_populates="course", passive_deletes=True)

    __table_args__ = (
        CheckConstraint("study_hours >= 0", name='ck_courses_study_hours_non_negative'),
    )
