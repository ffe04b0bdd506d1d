"""Persons v3 client: resolves a BYU ID to the student's first name."""

import logging
from dataclasses import dataclass

import requests

from .config import get_settings
from .errors import UpstreamUnavailable
from .wso2_client import gateway_get

logger = logging.getLogger(__name__)

PERSONS_FORBIDDEN_MESSAGE = (
    "There was an error connecting to WSO2. Please make sure you are subscribed "
    "to the Persons-v3 and MobileDiningServices API."
)


@dataclass(frozen=True)
class Identity:
    """Result of a Persons lookup. Fields are None when the ID is unknown."""

    byu_id: str | None
    first_name: str | None

    @property
    def exists(self) -> bool:
        return self.byu_id is not None and self.first_name is not None


def _field_value(basic: dict, name: str) -> str | None:
    field = basic.get(name)
    if not isinstance(field, dict):
        return None
    value = field.get("value")
    return str(value) if value not in (None, "") else None


def resolve_identity(identifier: str, token: str) -> Identity:
    """Look up a person by BYU ID.

    Args:
        identifier: 9-digit BYU ID.
        token: WSO2 access token.

    Returns:
        Identity with byu_id and first_name, both None if the ID does not
        resolve to a person.

    Raises:
        AuthError: If the token is invalid/expired or lacks a subscription.
        UpstreamUnavailable: If the API is down or answers with garbage.
    """
    settings = get_settings()
    response = gateway_get(
        f"{settings.identity_api_base}/persons/v3/{identifier}",
        token,
        forbidden_message=PERSONS_FORBIDDEN_MESSAGE,
    )

    if response.status_code == 404:
        logger.info(f"No person found for byu_id={identifier}")
        return Identity(byu_id=None, first_name=None)

    try:
        response.raise_for_status()
        data = response.json()
    except (requests.exceptions.HTTPError, ValueError) as e:
        logger.error(f"Persons API error for byu_id={identifier}: {e}")
        raise UpstreamUnavailable() from e

    basic = data.get("basic") if isinstance(data, dict) else None
    if not isinstance(basic, dict):
        return Identity(byu_id=None, first_name=None)

    return Identity(
        byu_id=_field_value(basic, "byu_id"),
        first_name=_field_value(basic, "first_name"),
    )
