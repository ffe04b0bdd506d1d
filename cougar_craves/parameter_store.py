"""Database credentials from AWS SSM Parameter Store."""

import logging
from dataclasses import dataclass

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .config import Settings
from .errors import SecretsUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatabaseCredentials:
    username: str
    password: str

    def __repr__(self) -> str:
        return f"DatabaseCredentials(username='{self.username}')"


def load_database_credentials(settings: Settings, ssm_client=None) -> DatabaseCredentials:
    """Read the database username and password parameters.

    Args:
        settings: Supplies the region and parameter names.
        ssm_client: Optional pre-built boto3 SSM client.

    Raises:
        SecretsUnavailable: If AWS cannot be reached, the caller is not
            authenticated, or either parameter is missing.
    """
    logger.info("Testing AWS CLI connection...")
    names = [settings.ssm_username_parameter, settings.ssm_password_parameter]
    try:
        client = ssm_client or boto3.client("ssm", region_name=settings.aws_region)
        response = client.get_parameters(Names=names, WithDecryption=True)
    except (BotoCoreError, ClientError) as e:
        logger.error(f"SSM get_parameters failed: {e}")
        raise SecretsUnavailable() from e

    # Parameters come back in no particular order
    values = {p["Name"]: p["Value"] for p in response.get("Parameters", [])}
    missing = [name for name in names if name not in values]
    if missing:
        logger.error(f"SSM parameters not found: {missing}")
        raise SecretsUnavailable(
            f"Database credentials are missing from the parameter store: {', '.join(missing)}"
        )

    return DatabaseCredentials(
        username=values[settings.ssm_username_parameter],
        password=values[settings.ssm_password_parameter],
    )
