import os

import pytest
from sqlalchemy.orm import sessionmaker

from coursetrack.db import models
from coursetrack.db.database import build_engine


@pytest.fixture(scope="session")
def pg_engine():
    from testcontainers.postgres import PostgresContainer

    image = os.getenv("TEST_POSTGRES_IMAGE", "postgres:16-alpine")
    with PostgresContainer(image) as pg:
        url = pg.get_connection_url()
        # Normalize driver to the psycopg2 default (postgresql+psycopg2:// -> postgresql://)
        if "+" in url.split("://", 1)[0]:
            url = "postgresql://" + url.split("://", 1)[1]
        eng = build_engine(url)
        models.Base.metadata.create_all(bind=eng)
        try:
            yield eng
        finally:
            eng.dispose()


@pytest.fixture
def pg_session(pg_engine):
    Session = sessionmaker(bind=pg_engine, autoflush=False, expire_on_commit=False)
    session = Session()
    try:
        yield session
    finally:
        session.rollback()
        session.query(models.Assignment).delete()
        session.query(models.Course).delete()
        session.commit()
        session.close()
