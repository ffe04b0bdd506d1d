"""Mobile Dining Services client: picks a random campus dining location."""

import logging
import random

import requests

from .config import get_settings
from .errors import UpstreamUnavailable
from .suggestions import Location
from .wso2_client import gateway_get

logger = logging.getLogger(__name__)

DINING_FORBIDDEN_MESSAGE = (
    "There was an error connecting to WSO2. Please make sure you are subscribed "
    "to the Mobile Dining Services API."
)


def _locations_url() -> str:
    return f"{get_settings().dining_api_base}/locations"


def _fetch_locations(token: str) -> list[dict]:
    response = gateway_get(_locations_url(), token, forbidden_message=DINING_FORBIDDEN_MESSAGE)
    try:
        response.raise_for_status()
        data = response.json()
    except (requests.exceptions.HTTPError, ValueError) as e:
        logger.error(f"Dining locations API error: {e}")
        raise UpstreamUnavailable(
            "We can't find a place for you to eat right now. Sorry."
        ) from e

    if not isinstance(data, list):
        logger.error(f"Dining locations API returned {type(data).__name__}, expected a list")
        raise UpstreamUnavailable("We can't find a place for you to eat right now. Sorry.")
    return data


def check_dining_access(token: str) -> None:
    """Hit the locations endpoint so a bad token fails before the menu.

    Raises:
        AuthError: On 401/403.
        UpstreamUnavailable: If the request fails.
    """
    gateway_get(_locations_url(), token, forbidden_message=DINING_FORBIDDEN_MESSAGE)


def pick_index(count: int) -> int:
    """Choose a random list index according to location_index_mode.

    "live" draws from [0, count - 1]. "fixed" draws from
    [0, max_location_index] whatever the list length, which only works
    while the upstream list keeps at least that many entries.

    Raises:
        UpstreamUnavailable: If the list is empty or the fixed bound
            points past its end.
    """
    settings = get_settings()
    if count == 0:
        raise UpstreamUnavailable("There are no dining locations available right now.")

    if settings.location_index_mode == "fixed":
        index = random.randint(0, settings.max_location_index)
    else:
        index = random.randint(0, count - 1)

    if index >= count:
        logger.error(f"Location index {index} is past the end of {count} locations")
        raise UpstreamUnavailable("We can't find a place for you to eat right now. Sorry.")
    return index


def fetch_random_location(token: str) -> Location:
    """Return one dining location chosen uniformly at random.

    Args:
        token: WSO2 access token.

    Raises:
        AuthError: On 401/403.
        UpstreamUnavailable: If the list cannot be fetched or is unusable.
    """
    locations = _fetch_locations(token)
    chosen = locations[pick_index(len(locations))]
    if not isinstance(chosen, dict) or not chosen.get("name"):
        raise UpstreamUnavailable("We can't find a place for you to eat right now. Sorry.")

    try:
        latitude = _coordinate(chosen.get("latitude"))
        longitude = _coordinate(chosen.get("longitude"))
    except (TypeError, ValueError) as e:
        logger.error(f"Bad coordinates for {chosen['name']!r}: {e}")
        raise UpstreamUnavailable("We can't find a place for you to eat right now. Sorry.") from e

    logger.info(f"Picked dining location {chosen['name']!r} of {len(locations)}")
    return Location(name=chosen["name"], latitude=latitude, longitude=longitude)


def _coordinate(value) -> float | None:
    """Coordinates arrive as numbers or numeric strings; blank means unknown."""
    if value is None or value == "":
        return None
    return float(value)
