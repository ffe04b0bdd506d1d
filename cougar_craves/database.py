"""Database connection and session management.

The engine is created once credentials are known. Every session checks a
connection out, runs its statements, and returns it; NullPool closes the
connection right away instead of keeping it pooled.
"""

import logging
import re
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, literal, select
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import NullPool

from .errors import StorageConnectivityError, StorageErrorKind
from .models import Base

logger = logging.getLogger(__name__)

# ORA-00942 table or view does not exist, ORA-04043 object does not exist
_SCHEMA_MISSING_PATTERN = re.compile(
    r"ORA-00942|ORA-04043|no such table|(relation|table) .* does not exist",
    re.IGNORECASE,
)

engine: Engine | None = None
SessionLocal = sessionmaker(autoflush=False, expire_on_commit=False)


def create_db_engine(url: str | URL, schema: str | None = None) -> Engine:
    """Create a SQLAlchemy engine without connection pooling.

    Args:
        url: Database URL.
        schema: Schema that owns the preference table, if not the
            connecting user's own.
    """
    execution_options = {}
    if schema:
        execution_options["schema_translate_map"] = {None: schema}

    return create_engine(
        url,
        poolclass=NullPool,
        echo=False,  # Set to True for SQL debugging
        execution_options=execution_options,
    )


def init_engine(url: str | URL, schema: str | None = None) -> Engine:
    """Create the module engine and bind the session factory to it."""
    global engine
    if engine is not None:
        engine.dispose()
    engine = create_db_engine(url, schema=schema)
    SessionLocal.configure(bind=engine)
    logger.info(f"Database engine created for dialect {engine.dialect.name}")
    return engine


def classify_db_error(exc: SQLAlchemyError) -> StorageConnectivityError:
    """Map a SQLAlchemy error to the user-facing storage failure."""
    detail = str(getattr(exc, "orig", None) or exc)
    if _SCHEMA_MISSING_PATTERN.search(detail):
        return StorageConnectivityError(StorageErrorKind.SCHEMA_MISSING)
    return StorageConnectivityError(StorageErrorKind.UNREACHABLE)


@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """Context manager for database sessions.

    Usage:
        with get_db_session() as db:
            db.execute(...)

    Raises:
        StorageConnectivityError: If the engine is not initialized or any
            database error occurs.
    """
    if engine is None:
        raise StorageConnectivityError(
            StorageErrorKind.UNREACHABLE,
            "Unable to create a connection to on-prem OracleDB.",
        )

    db = SessionLocal()
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error: {e}")
        raise classify_db_error(e) from e
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def check_database_health() -> None:
    """Run a trivial query against the database.

    Raises:
        StorageConnectivityError: If the database cannot be reached.
    """
    with get_db_session() as db:
        db.execute(select(literal(1)))


def create_tables() -> None:
    """Create the preference table on the current engine.

    Used for local SQLite databases and tests; the production table is
    provisioned by the DBA.
    """
    if engine is None:
        raise StorageConnectivityError(StorageErrorKind.UNREACHABLE)
    Base.metadata.create_all(engine)


def dispose_engine() -> None:
    """Dispose of the engine and all connections.

    Call this during graceful shutdown.
    """
    global engine
    if engine is not None:
        engine.dispose()
        engine = None
