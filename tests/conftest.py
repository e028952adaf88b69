"""Shared test fixtures."""

import pytest

from etl_drone_sense.config import get_settings
from etl_drone_sense.logging.context import clear_context
from etl_drone_sense.logging.logger import reset_logging


@pytest.fixture(autouse=True)
def _clear_environment(monkeypatch):
    """Clear environment variables and caches that affect settings."""
    env_vars_to_clear = [
        "DRONE_SENSE_TOKEN",
        "DRONE_SENSE_TOKEN_SECRET_ID",
        "DRONE_SENSE_URL",
        "DEBUG",
        "ETL_API",
        "ETL_LAYER",
        "ETL_TOKEN",
        "ETL_TOKEN_SECRET_ID",
        "API_TIMEOUT_SECONDS",
        "SERVICE_NAME",
        "ENVIRONMENT",
        "AWS_REGION",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "INCLUDE_TIMESTAMP",
        "INCLUDE_LOCATION",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    clear_context()
    yield
    get_settings.cache_clear()
    reset_logging()
    clear_context()


@pytest.fixture()
def aws_credentials(monkeypatch):
    """Fake credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
