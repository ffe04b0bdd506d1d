"""SQLAlchemy base and helper utilities."""

from datetime import datetime

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def local_now() -> datetime:
    """Timestamp for new rows, in local time without tzinfo."""
    return datetime.now().replace(microsecond=0)
