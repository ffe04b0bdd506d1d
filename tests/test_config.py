"""
Settings tests.
"""
import pytest

from cougar_craves.config import get_settings
from cougar_craves.errors import ConfigurationError


def test_defaults():
    settings = get_settings()
    assert settings.identity_api_base == "https://api.byu.edu:443/byuapi"
    assert settings.location_index_mode == "live"
    assert settings.max_location_index == 22
    assert settings.min_token_length == 25
    assert settings.aws_region == "us-west-2"


def test_trailing_slash_is_stripped(monkeypatch):
    monkeypatch.setenv("CRAVES_RECIPE_API_BASE", "https://meals.test/api/")
    assert get_settings().recipe_api_base == "https://meals.test/api"


def test_empty_schema_means_default_schema(monkeypatch):
    monkeypatch.setenv("CRAVES_DB_SCHEMA", "")
    assert get_settings().db_schema is None


@pytest.mark.parametrize(
    "name,value",
    [
        ("CRAVES_REQUEST_TIMEOUT", "0"),
        ("CRAVES_LOCATION_INDEX_MODE", "sometimes"),
        ("CRAVES_DB_PORT", "not-a-port"),
    ],
)
def test_invalid_values_raise_configuration_error(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError) as exc:
        get_settings()
    assert exc.value.exit_code == 5


def test_database_url_hides_password():
    url = get_settings().build_database_url("craves_app", "s3cret")
    assert url.drivername == "oracle+oracledb"
    assert url.host == "ora7gdev.byu.edu"
    assert url.port == 1521
    assert url.query["service_name"] == "cescpy1.byu.edu"
    assert "s3cret" not in str(url)


def test_settings_are_reloaded_on_each_call(monkeypatch):
    assert get_settings().request_timeout == 10
    monkeypatch.setenv("CRAVES_REQUEST_TIMEOUT", "3")
    assert get_settings().request_timeout == 3
