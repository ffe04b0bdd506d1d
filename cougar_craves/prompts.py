"""Interactive prompts: credential collection and list menus."""

import re
from collections.abc import Sequence
from typing import TypeVar

import click

from .config import get_settings
from .errors import InputValidationError

T = TypeVar("T")

IDENTIFIER_LENGTH = 9
_DIGITS = re.compile(r"[0-9]+")


def validate_token(value: str, min_length: int | None = None) -> str:
    """Accept tokens strictly longer than min_length (default from settings)."""
    if min_length is None:
        min_length = get_settings().min_token_length
    if not len(value) > min_length:
        raise InputValidationError("Please put in the correct access token from your WSO2.")
    return value


def validate_identifier(value: str) -> str:
    """Accept exactly nine ASCII digits. Returned as a string to keep leading zeros."""
    if len(value) != IDENTIFIER_LENGTH or not _DIGITS.fullmatch(value):
        raise InputValidationError("Please type in your 9-digit BYU ID, numbers only.")
    return value


def _prompt_until_valid(text: str, validator, hide_input: bool = False) -> str:
    while True:
        value = click.prompt(text, hide_input=hide_input)
        try:
            return validator(value)
        except InputValidationError as e:
            click.echo(e.message)


def collect_token() -> str:
    return _prompt_until_valid(
        "Please enter your API Token from WSO2", validate_token, hide_input=True
    )


def collect_identifier() -> str:
    return _prompt_until_valid("Please enter your BYU ID Number", validate_identifier)


def choose(message: str, choices: Sequence[T]) -> T:
    """Show a numbered list and return the picked entry.

    Args:
        message: Question printed above the list.
        choices: Entries to pick from; shown with str().

    Returns:
        The chosen element of choices.
    """
    click.echo(message)
    for number, choice in enumerate(choices, start=1):
        click.echo(f"  {number}) {choice}")
    picked = click.prompt("Enter a number", type=click.IntRange(1, len(choices)))
    return choices[picked - 1]


def confirm_yes_no(message: str) -> bool:
    return choose(message, ["Yes", "No"]) == "Yes"


def clear_screen() -> None:
    click.clear()


def say(message: str = "") -> None:
    click.echo(message)
