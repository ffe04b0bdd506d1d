"""Authenticated GET against the BYU WSO2 API gateway.

Both the Persons and Mobile Dining Services APIs sit behind the same
gateway and reject bad tokens the same way, so the 401/403 handling lives
here.
"""

import logging

import requests

from .config import get_settings
from .errors import AuthError, AuthErrorKind, UpstreamUnavailable

logger = logging.getLogger(__name__)


def gateway_get(url: str, token: str, forbidden_message: str | None = None) -> requests.Response:
    """GET a gateway URL with a bearer token.

    Args:
        url: Full endpoint URL.
        token: WSO2 access token.
        forbidden_message: Message for a 403, naming the API the user
            must subscribe to.

    Returns:
        The response for any status other than 401 and 403.

    Raises:
        AuthError: On 401 (UNAUTHENTICATED) or 403 (FORBIDDEN).
        UpstreamUnavailable: If the request itself fails.
    """
    settings = get_settings()
    try:
        response = requests.get(
            url,
            headers={"Authorization": f"Bearer {token}"},
            timeout=settings.request_timeout,
        )
    except requests.exceptions.RequestException as e:
        logger.error(f"Request to {url} failed: {e}")
        raise UpstreamUnavailable(
            "There was an error connecting to WSO2. Please check your network connection."
        ) from e

    if response.status_code == 401:
        logger.warning(f"WSO2 rejected token for {url} (401)")
        raise AuthError(AuthErrorKind.UNAUTHENTICATED)
    if response.status_code == 403:
        logger.warning(f"WSO2 denied access to {url} (403)")
        raise AuthError(AuthErrorKind.FORBIDDEN, forbidden_message)
    return response
