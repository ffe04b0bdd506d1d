"""Configuration management with pydantic-settings and validation."""

from typing import Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

from .errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from CRAVES_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CRAVES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # WSO2 API gateway
    identity_api_base: str = "https://api.byu.edu:443/byuapi"
    dining_api_base: str = "https://api.byu.edu:443/domains/mobile/dining-services/v1"
    request_timeout: float = 10

    # TheMealDB (no auth)
    recipe_api_base: str = "https://www.themealdb.com/api/json/v1/1"

    # Location picking: "live" draws from the whole response,
    # "fixed" keeps the historical 0..max_location_index range.
    location_index_mode: Literal["live", "fixed"] = "live"
    max_location_index: int = 22

    # Credential prompt
    min_token_length: int = 25

    # AWS SSM Parameter Store
    aws_region: str = "us-west-2"
    ssm_username_parameter: str = "/cougar-craves/dev/USERNAME"
    ssm_password_parameter: str = "/cougar-craves/dev/PASSWORD"

    # Database Configuration
    db_dialect: str = "oracle+oracledb"
    db_host: str = "ora7gdev.byu.edu"
    db_port: int = 1521
    db_service_name: str = "cescpy1.byu.edu"
    db_schema: str | None = "OIT#SG738"
    # When set, used verbatim and the SSM lookup is skipped
    database_url: str = ""

    log_level: str = "WARNING"
    # Empty means stderr
    log_file: str = ""

    @field_validator("identity_api_base", "dining_api_base", "recipe_api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoints are joined with a leading slash."""
        v = v.strip()
        if not v:
            raise ValueError("API base URL is empty")
        return v.rstrip("/")

    @field_validator("request_timeout")
    @classmethod
    def check_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("request_timeout must be positive")
        return v

    @field_validator("db_schema", mode="before")
    @classmethod
    def empty_schema_is_none(cls, v):
        """An empty CRAVES_DB_SCHEMA means the connection's default schema."""
        if isinstance(v, str) and v.strip() == "":
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    def build_database_url(self, username: str, password: str) -> URL:
        """Build the SQLAlchemy URL for the on-prem database.

        Args:
            username: Database user from the parameter store.
            password: Database password from the parameter store.

        Returns:
            A URL object; the password is never rendered into logs.
        """
        return URL.create(
            self.db_dialect,
            username=username,
            password=password,
            host=self.db_host,
            port=self.db_port,
            query={"service_name": self.db_service_name},
        )


def get_settings() -> Settings:
    """Load and validate settings from environment.

    Raises:
        ConfigurationError: If environment variables are invalid.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
