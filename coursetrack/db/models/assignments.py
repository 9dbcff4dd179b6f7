from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey, Index, false
from sqlalchemy.orm import relationship
from .base import Base


class Assignment(Base):
    __tablename__ = 'assignments'
    id = Column(Integer, primary_key=True, autoincrement=True)
    course_id = Column(Integer, ForeignKey('courses.id'), nullable=False)
    name = Column(String(255), nullable=False)
    # Stored in UTC; request schemas normalise offsets before insert.
    due_date = Column(DateTime(timezone=True), nullable=False)
    is_completed = Column(Boolean, nullable=False, default=False, server_default=false())

    course = relationship("Course", back_populates="assignments")

    __table_args__ = (
        Index('idx_assignments_course_id', 'course_id'),
        Index('idx_assignments_course_due_date', 'course_id', 'due_date'),
    )
