"""Screen-to-screen navigation as a (state, event) -> state table.

Handlers in menu.py and history.py do the I/O for a state and report what
happened as an Event; next_state() decides where to go. Nothing in this
module prompts, prints, or touches the network.
"""

import enum

from .errors import InvalidTransition


class State(str, enum.Enum):
    WELCOME = "welcome"
    CHOOSE_KIND = "choose_kind"
    RECIPE = "recipe"
    LOCATION = "location"
    SAVE_CONFIRM = "save_confirm"
    SAVE = "save"
    MAIN_MENU_PROMPT = "main_menu_prompt"
    HISTORY_LIST = "history_list"
    DETAIL = "detail"
    DELETE_ONE = "delete_one"
    DELETE_ALL = "delete_all"
    RECORDS_PROMPT = "records_prompt"
    EXIT = "exit"


class Event(str, enum.Enum):
    GET_IDEAS = "get_ideas"
    VIEW_HISTORY = "view_history"
    EXIT = "exit"
    EAT_IN = "eat_in"
    EAT_OUT = "eat_out"
    CANCEL = "cancel"
    SUGGESTED = "suggested"
    SAVE = "save"
    DISCARD = "discard"
    SAVED = "saved"
    BACK = "back"
    EMPTY = "empty"
    VIEW = "view"
    DELETE = "delete"
    DELETE_ALL = "delete_all"
    DONE = "done"


TRANSITIONS: dict[tuple[State, Event], State] = {
    # Main menu
    (State.WELCOME, Event.GET_IDEAS): State.CHOOSE_KIND,
    (State.WELCOME, Event.VIEW_HISTORY): State.HISTORY_LIST,
    (State.WELCOME, Event.EXIT): State.EXIT,
    # Getting a suggestion
    (State.CHOOSE_KIND, Event.EAT_IN): State.RECIPE,
    (State.CHOOSE_KIND, Event.EAT_OUT): State.LOCATION,
    (State.CHOOSE_KIND, Event.CANCEL): State.EXIT,
    (State.RECIPE, Event.SUGGESTED): State.SAVE_CONFIRM,
    (State.LOCATION, Event.SUGGESTED): State.SAVE_CONFIRM,
    (State.SAVE_CONFIRM, Event.SAVE): State.SAVE,
    (State.SAVE_CONFIRM, Event.DISCARD): State.MAIN_MENU_PROMPT,
    (State.SAVE, Event.SAVED): State.MAIN_MENU_PROMPT,
    (State.MAIN_MENU_PROMPT, Event.BACK): State.WELCOME,
    (State.MAIN_MENU_PROMPT, Event.EXIT): State.EXIT,
    # History
    (State.HISTORY_LIST, Event.EMPTY): State.MAIN_MENU_PROMPT,
    (State.HISTORY_LIST, Event.VIEW): State.DETAIL,
    (State.HISTORY_LIST, Event.DELETE): State.DELETE_ONE,
    (State.HISTORY_LIST, Event.DELETE_ALL): State.DELETE_ALL,
    (State.HISTORY_LIST, Event.BACK): State.WELCOME,
    # Record actions go through one more prompt before the list again
    (State.DETAIL, Event.DONE): State.RECORDS_PROMPT,
    (State.DELETE_ONE, Event.DONE): State.RECORDS_PROMPT,
    (State.DELETE_ALL, Event.DONE): State.RECORDS_PROMPT,
    (State.RECORDS_PROMPT, Event.BACK): State.HISTORY_LIST,
    (State.RECORDS_PROMPT, Event.EXIT): State.EXIT,
}


def next_state(state: State, event: Event) -> State:
    """Look up the transition for an event.

    Raises:
        InvalidTransition: If the event is not valid in this state.
    """
    try:
        return TRANSITIONS[(state, event)]
    except KeyError:
        raise InvalidTransition(
            f"Cannot handle {event.value!r} on the {state.value!r} screen."
        ) from None


def events_for(state: State) -> list[Event]:
    """Events the given state accepts, in table order."""
    return [event for (s, event) in TRANSITIONS if s is state]
