"""Connector configuration using Pydantic BaseSettings.

All settings are loaded from environment variables.
No .env files - tokens come from the environment or AWS Secrets Manager.

Usage:
    from etl_drone_sense.config import load_settings

    settings = load_settings()
    print(settings.drone_sense_url)
"""

from enum import StrEnum
from functools import lru_cache

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from etl_drone_sense.constants import DRONE_SENSE_URL, SERVICE_NAME
from etl_drone_sense.exceptions.configuration_errors import (
    ConfigurationError,
    MissingCredentialError,
)
from etl_drone_sense.utils.secrets import SecretsClient


class Environment(StrEnum):
    """Valid deployment environments."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    DEMO = "demo"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Connector settings loaded from environment variables.

    Attributes:
        drone_sense_token: API token for DroneSense calls.
        drone_sense_token_secret_id: Secrets Manager id holding the token.
        drone_sense_url: DroneSense drones-with-sensors endpoint.
        debug: Log every produced feature.
        etl_api: Base URL of the downstream layer API.
        etl_layer: Downstream layer id.
        etl_token: Bearer token for the downstream layer API.
        etl_token_secret_id: Secrets Manager id holding the layer token.
        api_timeout_seconds: Timeout for each HTTP call.
        service_name: Name of this service for logging.
        environment: Deployment environment.
        aws_region: AWS region for Secrets Manager.
        log_level: Logging level.
    """

    model_config = SettingsConfigDict(
        env_file=None,
        case_sensitive=False,
        extra="ignore",
        str_strip_whitespace=True,
    )

    # DroneSense API
    drone_sense_token: SecretStr | None = Field(
        default=None,
        description="API Token to use when making Drone Sense API Calls",
    )
    drone_sense_token_secret_id: str = Field(default="")
    drone_sense_url: str = Field(default=DRONE_SENSE_URL, min_length=1)

    debug: bool = Field(default=False, description="Print results in logs")

    # Downstream layer
    etl_api: str = Field(default="")
    etl_layer: str = Field(default="")
    etl_token: SecretStr | None = Field(default=None)
    etl_token_secret_id: str = Field(default="")

    api_timeout_seconds: int = Field(default=30, ge=1, le=300)

    # Service identification
    service_name: str = Field(default=SERVICE_NAME, min_length=1)
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    aws_region: str = Field(default="us-east-1", min_length=1)

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level is one of the allowed values."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in allowed:
            error_message = f"log_level must be one of {allowed}, got '{value}'"
            raise ValueError(error_message)
        return upper_value

    @field_validator("etl_api")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize the layer API base URL."""
        return value.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_settings() -> Settings:
    """Load settings, converting validation failures to ConfigurationError.

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If an environment variable has an invalid value.
    """
    try:
        return get_settings()
    except ValidationError as error:
        raise ConfigurationError(
            f"Invalid connector configuration: {error.error_count()} error(s)",
            context={"fields": [".".join(map(str, item["loc"])) for item in error.errors()]},
        ) from error


def resolve_secret(
    value: SecretStr | None,
    secret_id: str,
    *,
    setting: str,
    region_name: str,
) -> str:
    """Return a credential from its setting or, failing that, from Secrets Manager.

    Args:
        value: Directly configured value, if any.
        secret_id: Secrets Manager id to read when no value is configured.
        setting: Setting name, for error reporting.
        region_name: AWS region of the secret.

    Returns:
        The credential string.

    Raises:
        MissingCredentialError: If neither source yields a non-empty value.
    """
    if value is not None and value.get_secret_value():
        return value.get_secret_value()

    if secret_id:
        secret = SecretsClient(region_name).get_secret_string(secret_id)
        if secret:
            return secret

    raise MissingCredentialError(
        f"{setting.upper()} is not configured",
        setting=setting,
        secret_id=secret_id or None,
    )
