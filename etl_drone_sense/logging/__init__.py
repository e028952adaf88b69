"""Structured logging for the DroneSense connector.

Usage:
    from etl_drone_sense.logging import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__)
    logger.info("Fetched drone locations", extra={"record_count": 4})
"""

from etl_drone_sense.logging.config import LogFormat, LoggingConfig, LogLevel
from etl_drone_sense.logging.context import (
    clear_context,
    correlation_id,
    generate_correlation_id,
    get_correlation_id,
    get_extra_context,
    set_correlation_id,
    set_extra_context,
)
from etl_drone_sense.logging.formatters import HumanFormatter, JSONFormatter
from etl_drone_sense.logging.logger import get_logger, reset_logging, setup_logging

__all__ = [
    "HumanFormatter",
    "JSONFormatter",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "clear_context",
    "correlation_id",
    "generate_correlation_id",
    "get_correlation_id",
    "get_extra_context",
    "get_logger",
    "reset_logging",
    "set_correlation_id",
    "set_extra_context",
    "setup_logging",
]
