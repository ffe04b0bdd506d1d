"""Main menu loop and the get-a-suggestion screens."""

import logging
from collections.abc import Callable

from . import dining_service, history, prompts, recipe_service, store
from .errors import IdentityNotFound
from .identity_service import resolve_identity
from .navigation import Event, State, next_state
from .session import Session
from .suggestions import Recipe, format_suggestion

logger = logging.getLogger(__name__)

BANNER = r"""
   _____                                _____
  / ____|                              / ____|
 | |     ___  _   _  __ _  __ _ _ __  | |     _ __ __ ___   _____  ___
 | |    / _ \| | | |/ _` |/ _` | '__| | |    | '__/ _` \ \ / / _ \/ __|
 | |___| (_) | |_| | (_| | (_| | |    | |____| | | (_| |\ V /  __/\__ \
  \_____\___/ \__,_|\__, |\__,_|_|     \_____|_|  \__,_| \_/ \___||___/
                     __/ |
                    |___/
"""

MAIN_MENU = {
    "Get dining ideas": Event.GET_IDEAS,
    "View my previous records": Event.VIEW_HISTORY,
    "Exit this program": Event.EXIT,
}

KIND_MENU = {
    "Eating in": Event.EAT_IN,
    "Eating out": Event.EAT_OUT,
    "Actually, never mind. I'm going to fast today. Bye!": Event.CANCEL,
}

SAVE_MENU = {
    "Yes, please!": Event.SAVE,
    "No, thank you.": Event.DISCARD,
}

EXIT_PROGRAM = "Exit the program"

Handler = Callable[[Session], Event]


def welcome(session: Session) -> Event:
    """Main menu. The identity is looked up again each time it is shown."""
    prompts.clear_screen()
    identity = resolve_identity(session.identifier, session.access_token)
    if not identity.exists:
        raise IdentityNotFound()
    session.display_name = identity.first_name

    prompts.say(BANNER)
    prompts.say(
        f"Hi, {session.display_name}! Welcome to Cougar Craves. Here, we will help "
        "you come up with an idea to satisfy your cravings."
    )
    event = MAIN_MENU[prompts.choose("First of all, what would you like to do?", list(MAIN_MENU))]
    if event is Event.EXIT:
        prompts.say("Alright, see you next time!")
    return event


def choose_kind(session: Session) -> Event:
    event = KIND_MENU[prompts.choose("Alright. Where do you feel like eating today?", list(KIND_MENU))]
    if event is Event.CANCEL:
        prompts.say("Well, see you next time then!")
    return event


def suggest_recipe(session: Session) -> Event:
    prompts.clear_screen()
    prompts.say("Thinking of a recipe for you...")
    session.pending = recipe_service.fetch_random_recipe()
    prompts.say(format_suggestion(session.pending))
    return Event.SUGGESTED


def suggest_location(session: Session) -> Event:
    prompts.clear_screen()
    prompts.say("Finding a place for you...")
    session.pending = dining_service.fetch_random_location(session.access_token)
    prompts.say(format_suggestion(session.pending))
    return Event.SUGGESTED


def confirm_save(session: Session) -> Event:
    event = SAVE_MENU[prompts.choose(
        "Would you like to save your preference (along with our suggestion) to the database?",
        list(SAVE_MENU),
    )]
    if event is Event.DISCARD:
        session.pending = None
    return event


def save_suggestion(session: Session) -> Event:
    """Store the pending suggestion as an eat_in or eat_out record."""
    suggestion = session.pending
    prompts.say("Saving answer...")
    if isinstance(suggestion, Recipe):
        store.insert_recipe(
            session.identifier,
            session.display_name,
            suggestion.name,
            suggestion.ingredients,
            suggestion.instructions,
        )
    else:
        store.insert_location(session.identifier, session.display_name, suggestion.name)
    session.pending = None
    prompts.say("We have recorded your preference. Thank you for using Cougar Craves!")
    return Event.SAVED


def navigate_onwards(back_label: str) -> Handler:
    """Build the "go back or exit" step shown after an action completes."""
    options = {back_label: Event.BACK, EXIT_PROGRAM: Event.EXIT}

    def handler(session: Session) -> Event:
        event = options[prompts.choose("Where would you like to go now?", list(options))]
        if event is Event.BACK:
            prompts.clear_screen()
        return event

    return handler


HANDLERS: dict[State, Handler] = {
    State.WELCOME: welcome,
    State.CHOOSE_KIND: choose_kind,
    State.RECIPE: suggest_recipe,
    State.LOCATION: suggest_location,
    State.SAVE_CONFIRM: confirm_save,
    State.SAVE: save_suggestion,
    State.MAIN_MENU_PROMPT: navigate_onwards("Go back to main menu"),
    State.HISTORY_LIST: history.show_list,
    State.DETAIL: history.show_detail,
    State.DELETE_ONE: history.delete_one,
    State.DELETE_ALL: history.delete_all,
    State.RECORDS_PROMPT: navigate_onwards("Go back to my records"),
}


def run_menu(session: Session, start: State = State.WELCOME) -> None:
    """Drive the handlers until a screen chooses to exit.

    CravesError subclasses raised by a handler propagate to the caller,
    which decides how the process ends.
    """
    state = start
    while state is not State.EXIT:
        event = HANDLERS[state](session)
        following = next_state(state, event)
        logger.debug(f"{state.value} --{event.value}--> {following.value}")
        state = following
