"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with test
fallbacks (SQLite in-memory), exposes the FastAPI session dependency, and
owns the pool lifecycle (``init_db`` at startup, ``close_db`` at shutdown).
"""
import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from coursetrack.errors import StorageError

logger = logging.getLogger(__name__)

_POSTGRES_VARS = ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB")


def _get_database_url() -> str:
    # If DATABASE_URL is explicitly set, use it
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    # Otherwise, generate from individual components (all must be set)
    missing = [name for name in _POSTGRES_VARS if not os.getenv(name)]
    if missing:
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    url = (
        f"postgresql://{os.getenv('POSTGRES_USER')}:{os.getenv('POSTGRES_PASSWORD')}"
        f"@{os.getenv('POSTGRES_HOST')}:{os.getenv('POSTGRES_PORT')}/{os.getenv('POSTGRES_DB')}"
    )
    sslmode = os.getenv("POSTGRES_SSLMODE")
    if sslmode:
        url = f"{url}?sslmode={sslmode}"
    return url


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while a test runs, so module import
    during collection also checks whether pytest is already in ``sys.modules``.
    ``PYTEST_RUNNING=1`` forces detection explicitly.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


def _resolve_database_url() -> str:
    # Test override strategy:
    # 1. COURSETRACK_TEST_DB wins.
    # 2. Else TEST_DATABASE_URL (set by e2e fixtures) is used as-is.
    # 3. Else under pytest, force in-memory sqlite.
    explicit_test_db = os.getenv("COURSETRACK_TEST_DB")
    if explicit_test_db:
        return explicit_test_db
    explicit_e2e_db = os.getenv("TEST_DATABASE_URL")
    if explicit_e2e_db:
        return explicit_e2e_db
    if _is_pytest_runtime():
        return "sqlite+pysqlite:///:memory:"
    return _get_database_url()


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url:
            # StaticPool so the schema persists across connections
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {
        "pool_pre_ping": True,
        "pool_size": int(os.getenv("DB_POOL_SIZE", "10")),
        "max_overflow": int(os.getenv("DB_MAX_OVERFLOW", "20")),
        "pool_timeout": int(os.getenv("DB_POOL_TIMEOUT", "30")),
    }


def _install_search_path(eng, search_path: str) -> None:
    @event.listens_for(eng, "connect")
    def _set_search_path(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute(f"SET search_path TO {search_path}")
        finally:
            cursor.close()


def build_engine(url: str):
    eng = create_engine(url, **_engine_kwargs(url))
    if eng.dialect.name == "postgresql":
        _install_search_path(eng, os.getenv("DB_SEARCH_PATH", "public"))
    return eng


DATABASE_URL = _resolve_database_url()

# Process-wide connection pool; sessions borrow from it per request.
engine = build_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db() -> None:
    """Create missing tables and verify connectivity. Called once at startup."""
    from coursetrack.db import models  # local import to avoid circular import at module load

    models.Base.metadata.create_all(bind=engine)
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("database_ready: dialect=%s", engine.dialect.name)


def close_db() -> None:
    """Release every pooled connection. Called once at shutdown."""
    engine.dispose()
    logger.info("database_closed")


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session, action: str) -> Iterator[Session]:
    """Run a unit of work: commit on success, roll back on any failure.

    Database errors are re-raised as ``StorageError`` chained to the original;
    domain errors raised inside the block propagate unchanged after rollback.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageError(f"Failed to {action}: {exc}") from exc
    except Exception:
        db.rollback()
        raise
