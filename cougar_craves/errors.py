"""Exception hierarchy shared by every Cougar Craves module.

Each error carries the plain-language message shown to the user and the
process exit code used when it reaches the top level.
"""

import enum


class CravesError(Exception):
    """Base class for all application errors."""

    exit_code = 1
    default_message = "Sorry, system is busy now. Maybe try again later?"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InputValidationError(CravesError):
    """User input failed validation. Recovered by re-prompting."""

    exit_code = 1
    default_message = "Invalid input."


class AuthErrorKind(str, enum.Enum):
    """Why the API gateway rejected a request."""

    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


class AuthError(CravesError):
    """The API token was rejected (HTTP 401 or 403)."""

    exit_code = 1

    def __init__(self, kind: AuthErrorKind, message: str | None = None):
        self.kind = kind
        if message is None:
            if kind is AuthErrorKind.UNAUTHENTICATED:
                message = (
                    "There was an error connecting to WSO2. Please make sure you use "
                    "the correct, valid token that hasn't expired."
                )
            else:
                message = (
                    "There was an error connecting to WSO2. Please make sure you are "
                    "subscribed to the Persons-v3 and MobileDiningServices API."
                )
        super().__init__(message)


class UpstreamUnavailable(CravesError):
    """A remote API could not produce a usable answer."""

    exit_code = 3


class StorageErrorKind(str, enum.Enum):
    """The two database failure classes the user is told apart."""

    UNREACHABLE = "unreachable"
    SCHEMA_MISSING = "schema_missing"


class StorageConnectivityError(CravesError):
    """The preference database could not be used."""

    exit_code = 2

    def __init__(self, kind: StorageErrorKind, message: str | None = None):
        self.kind = kind
        if message is None:
            if kind is StorageErrorKind.SCHEMA_MISSING:
                message = (
                    "There is an error retrieving the table. "
                    "Seems like the table does not exist."
                )
            else:
                message = (
                    "It appears you are not connected to your VPN. "
                    "Please connect and try again."
                )
        super().__init__(message)


class NotFound(CravesError):
    """A requested preference record does not exist. Recoverable."""

    exit_code = 1
    default_message = "Sorry, there does not seem to be a record with that ID."


class IdentityNotFound(CravesError):
    """The identifier did not resolve to a person."""

    exit_code = 4
    default_message = "There is no student associated with that ID."


class SecretsUnavailable(CravesError):
    """Database credentials could not be read from the parameter store."""

    exit_code = 5
    default_message = "You are not connected to the AWS CLI."


class ConfigurationError(CravesError):
    """Settings are missing or invalid."""

    exit_code = 5
    default_message = "The application is not configured correctly."


class InvalidTransition(CravesError):
    """The navigation table has no entry for a (state, event) pair."""

    exit_code = 1
