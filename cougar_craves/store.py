"""Data access facade for saved dining preferences.

The menu and history screens use these functions; nothing else touches
SQLAlchemy directly. Each call opens its own session and closes it before
returning, so every returned PreferenceRecord is detached.

Raises StorageConnectivityError (via get_db_session) on any database failure.
"""

import logging
from collections.abc import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from .database import check_database_health, get_db_session
from .errors import NotFound
from .models import INSTRUCTIONS_MAX_LENGTH, ChoiceKind, PreferenceRecord, local_now

logger = logging.getLogger(__name__)


def _next_choice_id(db: Session, identifier: str) -> int:
    """choice_id values count up per identifier, starting at 1."""
    current = db.execute(
        select(func.max(PreferenceRecord.choice_id)).where(
            PreferenceRecord.byu_id == identifier
        )
    ).scalar()
    return (current or 0) + 1


def _insert(db: Session, record: PreferenceRecord) -> PreferenceRecord:
    record.choice_id = _next_choice_id(db, record.byu_id)
    record.time_stamp = local_now()
    db.add(record)
    db.flush()
    return record


def check_connectivity() -> None:
    """Verify the database answers before the menu starts."""
    logger.info("Testing connection to on-prem database")
    check_database_health()
    logger.info("Successfully connected to on-prem database")


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------

def insert_recipe(
    identifier: str,
    display_name: str,
    dish_name: str,
    ingredients: Sequence[str] | str,
    instructions: str,
) -> PreferenceRecord:
    """Save an eat_in choice.

    Args:
        identifier: 9-digit BYU ID.
        display_name: First name shown in the history table title.
        dish_name: Recipe name.
        ingredients: Ingredient lines, or the lines already joined by newlines.
        instructions: Cooking instructions, truncated to 3999 characters.

    Returns:
        The stored record.
    """
    if not isinstance(ingredients, str):
        ingredients = "\n".join(ingredients)

    with get_db_session() as db:
        record = _insert(
            db,
            PreferenceRecord(
                byu_id=identifier,
                first_name=display_name,
                choice=ChoiceKind.EAT_IN,
                dish_name=dish_name,
                ingredients=ingredients,
                instructions=(instructions or "")[:INSTRUCTIONS_MAX_LENGTH],
            ),
        )
    logger.info(f"Saved eat_in choice_id={record.choice_id} for byu_id={identifier}")
    return record


def insert_location(
    identifier: str, display_name: str, location_name: str
) -> PreferenceRecord:
    """Save an eat_out choice."""
    with get_db_session() as db:
        record = _insert(
            db,
            PreferenceRecord(
                byu_id=identifier,
                first_name=display_name,
                choice=ChoiceKind.EAT_OUT,
                location_name=location_name,
            ),
        )
    logger.info(f"Saved eat_out choice_id={record.choice_id} for byu_id={identifier}")
    return record


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

def list_by_identifier(identifier: str) -> list[PreferenceRecord]:
    """All records for an identifier, newest first. Empty means no history."""
    with get_db_session() as db:
        rows = db.execute(
            select(PreferenceRecord)
            .where(PreferenceRecord.byu_id == identifier)
            .order_by(
                PreferenceRecord.time_stamp.desc(),
                PreferenceRecord.choice_id.desc(),
            )
        ).scalars().all()
    return list(rows)


def get_one(identifier: str, choice_id: int) -> PreferenceRecord:
    """Fetch a single record.

    Raises:
        NotFound: If the identifier has no record with that choice_id.
    """
    with get_db_session() as db:
        record = db.get(PreferenceRecord, (identifier, choice_id))
    if record is None:
        raise NotFound()
    return record


# ---------------------------------------------------------------------------
# Deletes
# ---------------------------------------------------------------------------

def delete_one(identifier: str, choice_id: int) -> int:
    """Delete one record. Returns the number of rows removed."""
    with get_db_session() as db:
        result = db.execute(
            delete(PreferenceRecord).where(
                PreferenceRecord.byu_id == identifier,
                PreferenceRecord.choice_id == choice_id,
            )
        )
    logger.info(f"Deleted {result.rowcount} record(s) choice_id={choice_id} for byu_id={identifier}")
    return result.rowcount


def delete_all(identifier: str) -> int:
    """Delete every record for an identifier. Returns the number removed."""
    with get_db_session() as db:
        result = db.execute(
            delete(PreferenceRecord).where(PreferenceRecord.byu_id == identifier)
        )
    logger.info(f"Deleted all {result.rowcount} record(s) for byu_id={identifier}")
    return result.rowcount
