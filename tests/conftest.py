import os

# Force the in-memory sqlite engine before coursetrack.db.database is imported
os.environ.setdefault("PYTEST_RUNNING", "1")

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from coursetrack.db import models
from coursetrack.db.database import engine, SessionLocal
from coursetrack.api.main import app


@pytest.fixture(autouse=True)
def _schema():
    """Fresh tables for every test on the shared in-memory engine."""
    models.Base.metadata.create_all(bind=engine)
    yield
    models.Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# Backwards compatibility: some tests expect a 'db' fixture name
@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def client():
    # Not used as a context manager: the lifespan would re-run init_db/close_db
    return TestClient(app)


@pytest.fixture
def course_factory(db_session):
    def _create(name: str = "Algo 101", course_link: str | None = "http://x", study_hours: float = 5):
        course = models.Course(name=name, course_link=course_link, study_hours=study_hours)
        db_session.add(course)
        db_session.commit()
        db_session.refresh(course)
        return course
    return _create


@pytest.fixture
def assignment_factory(db_session):
    def _create(course_id: int, name: str = "HW", due_date: datetime | None = None, is_completed: bool = False):
        assignment = models.Assignment(
            course_id=course_id,
            name=name,
            due_date=due_date or datetime(2024, 5, 1),
            is_completed=is_completed,
        )
        db_session.add(assignment)
        db_session.commit()
        db_session.refresh(assignment)
        return assignment
    return _create
