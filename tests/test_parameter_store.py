"""
SSM credential loading tests with a mocked boto3 client.
"""
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, NoCredentialsError

from cougar_craves.config import Settings
from cougar_craves.errors import SecretsUnavailable
from cougar_craves.parameter_store import load_database_credentials


@pytest.fixture
def settings():
    return Settings()


def _client(parameters):
    client = MagicMock()
    client.get_parameters.return_value = {"Parameters": parameters, "InvalidParameters": []}
    return client


def test_reads_both_parameters_in_any_order(settings):
    client = _client([
        {"Name": settings.ssm_password_parameter, "Value": "s3cret"},
        {"Name": settings.ssm_username_parameter, "Value": "craves_app"},
    ])
    credentials = load_database_credentials(settings, ssm_client=client)

    assert credentials.username == "craves_app"
    assert credentials.password == "s3cret"
    assert "s3cret" not in repr(credentials)
    client.get_parameters.assert_called_once_with(
        Names=[settings.ssm_username_parameter, settings.ssm_password_parameter],
        WithDecryption=True,
    )


def test_missing_parameter_is_fatal(settings):
    client = _client([{"Name": settings.ssm_username_parameter, "Value": "craves_app"}])
    with pytest.raises(SecretsUnavailable) as exc:
        load_database_credentials(settings, ssm_client=client)
    assert settings.ssm_password_parameter in exc.value.message
    assert exc.value.exit_code == 5


def test_no_aws_credentials_is_fatal(settings):
    client = MagicMock()
    client.get_parameters.side_effect = NoCredentialsError()
    with pytest.raises(SecretsUnavailable) as exc:
        load_database_credentials(settings, ssm_client=client)
    assert exc.value.message == "You are not connected to the AWS CLI."


def test_access_denied_is_fatal(settings):
    client = MagicMock()
    client.get_parameters.side_effect = ClientError(
        {"Error": {"Code": "AccessDeniedException", "Message": "nope"}}, "GetParameters"
    )
    with pytest.raises(SecretsUnavailable):
        load_database_credentials(settings, ssm_client=client)


def test_builds_client_for_configured_region(monkeypatch):
    monkeypatch.setenv("CRAVES_AWS_REGION", "us-east-1")
    settings = Settings()
    client = _client([
        {"Name": settings.ssm_username_parameter, "Value": "u"},
        {"Name": settings.ssm_password_parameter, "Value": "p"},
    ])
    with patch("cougar_craves.parameter_store.boto3.client", return_value=client) as factory:
        load_database_credentials(settings)
    factory.assert_called_once_with("ssm", region_name="us-east-1")
