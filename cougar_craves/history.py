"""Saved-preference screens: list, details, delete one, delete all."""

import logging

from rich.console import Console
from rich.table import Table

from . import prompts, store
from .errors import NotFound
from .models import PreferenceRecord
from .navigation import Event
from .session import Session
from .suggestions import format_location, format_recipe

logger = logging.getLogger(__name__)

console = Console()

VIEW_DETAILS = "View the details of a specific record"
DELETE_ONE = "Delete a specific record"
DELETE_ALL = "Delete all my records"
BACK_TO_MAIN_MENU = "Go back to main menu"

NEXT_STEPS = {
    VIEW_DETAILS: Event.VIEW,
    DELETE_ONE: Event.DELETE,
    DELETE_ALL: Event.DELETE_ALL,
    BACK_TO_MAIN_MENU: Event.BACK,
}


def build_table(title: str, records: list[PreferenceRecord]) -> Table:
    """Tabulate records; missing dish or location names show as blanks."""
    table = Table(title=title)
    for column in ("choice_id", "choice", "time_stamp", "dish_name", "location_name"):
        table.add_column(column, justify="center")
    for record in records:
        table.add_row(
            str(record.choice_id),
            record.choice.value,
            str(record.time_stamp),
            record.dish_name or "",
            record.location_name or "",
        )
    return table


def render_record(record: PreferenceRecord) -> str:
    """Full detail view of one saved record."""
    if record.is_recipe:
        body = format_recipe(
            record.dish_name or "", record.ingredients or "", record.instructions or ""
        )
        return f"{body}\nThis recipe was suggested for you on {record.time_stamp}"
    body = format_location(record.location_name or "")
    return f"{body}\nThis location was suggested for you on {record.time_stamp}"


def _choose_record(session: Session, action: str) -> int:
    return prompts.choose(
        f"Please choose the ID of the choice that you want to {action}:",
        session.choice_ids,
    )


def show_list(session: Session) -> Event:
    prompts.clear_screen()
    prompts.say("Please wait...")
    session.records = store.list_by_identifier(session.identifier)
    logger.info(f"Loaded {len(session.records)} record(s) for byu_id={session.identifier}")

    if not session.records:
        prompts.say("You have never logged a dining preference in Cougar Craves.")
        return Event.EMPTY

    title = f"{session.records[0].first_name}'s Dining Preferences"
    console.print(build_table(title, session.records))
    picked = prompts.choose("Next, what would you like to do?", list(NEXT_STEPS))
    return NEXT_STEPS[picked]


def show_detail(session: Session) -> Event:
    choice_id = _choose_record(session, "view")
    try:
        record = store.get_one(session.identifier, choice_id)
    except NotFound as e:
        prompts.say(e.message)
        return Event.DONE
    prompts.say(render_record(record))
    return Event.DONE


def delete_one(session: Session) -> Event:
    choice_id = _choose_record(session, "delete")
    store.delete_one(session.identifier, choice_id)
    prompts.say(f"You have successfully deleted record with choice ID = {choice_id}.")
    return Event.DONE


def delete_all(session: Session) -> Event:
    confirmed = prompts.confirm_yes_no(
        "Are you sure you want to delete all records? This action can't be undone."
    )
    if confirmed:
        store.delete_all(session.identifier)
        prompts.say("You have successfully deleted all your records.")
    else:
        prompts.say("We won't delete your records then.")
    return Event.DONE
