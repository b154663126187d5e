"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with a test
fallback (SQLite in-memory) and exposes the FastAPI session dependency.
"""
import os
import sys
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


def _get_database_url() -> str:
    # If DATABASE_URL is explicitly set, use it
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    # Otherwise, generate from individual components (all must be set)
    db_user = os.getenv("POSTGRES_USER")
    db_password = os.getenv("POSTGRES_PASSWORD")
    db_host = os.getenv("POSTGRES_HOST")
    db_port = os.getenv("POSTGRES_PORT")
    db_name = os.getenv("POSTGRES_DB")

    if not all([db_user, db_password, db_host, db_port, db_name]):
        missing = []
        if not db_user: missing.append("POSTGRES_USER")
        if not db_password: missing.append("POSTGRES_PASSWORD")
        if not db_host: missing.append("POSTGRES_HOST")
        if not db_port: missing.append("POSTGRES_PORT")
        if not db_name: missing.append("POSTGRES_DB")
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return f"postgresql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while a test runs, so engine creation
    at import time also checks whether pytest is already in ``sys.modules``.
    ``PYTEST_RUNNING=1`` forces the test behaviour explicitly.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    if "pytest" in sys.modules:
        return True
    return False


# Test override strategy:
# 1. If JOBBOARD_TEST_DB is set, use it.
# 2. Else under pytest, force in-memory sqlite shared through a StaticPool.
# 3. Else build the URL from DATABASE_URL / POSTGRES_* variables.
explicit_test_db = os.getenv("JOBBOARD_TEST_DB")

if explicit_test_db:
    DATABASE_URL = explicit_test_db
    _engine_kwargs = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {}
elif _is_pytest_runtime():
    DATABASE_URL = "sqlite+pysqlite:///:memory:"
    _engine_kwargs = {
        "connect_args": {"check_same_thread": False},
        "poolclass": StaticPool,
    }
else:
    DATABASE_URL = _get_database_url()
    _engine_kwargs = {"pool_pre_ping": True}


def enable_sqlite_foreign_keys(target_engine) -> None:
    """Turn on FK enforcement for every new SQLite connection of ``target_engine``."""
    if target_engine.dialect.name != "sqlite":
        return

    @event.listens_for(target_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_engine(DATABASE_URL, **_engine_kwargs)
enable_sqlite_foreign_keys(engine)

# An in-memory SQLite database has no migrations applied, so build the schema
# eagerly; every session shares the single StaticPool connection.
if DATABASE_URL.startswith("sqlite") and ":memory:" in DATABASE_URL:
    from jobboard.db import models  # local import to avoid circular import at module load
    models.Base.metadata.create_all(bind=engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
