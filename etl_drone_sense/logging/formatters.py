"""Log formatters for Lambda (JSON) and terminal (human) output."""

import json
import logging
import traceback
from datetime import UTC, datetime
from typing import Any, ClassVar

from etl_drone_sense.constants import SERVICE_NAME, SERVICE_VERSION
from etl_drone_sense.logging.context import get_correlation_id, get_extra_context

# Attributes every LogRecord has; anything else came in through ``extra=``.
_STANDARD_LOG_ATTRS: frozenset[str] = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

_LOGGER_NAME_WIDTH = 32


def _context_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Merge correlation id, cycle context and ``extra=`` fields of a record."""
    fields: dict[str, Any] = {}

    corr_id = get_correlation_id()
    if corr_id:
        fields["correlation_id"] = corr_id

    fields.update(get_extra_context())
    fields.update(
        {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_LOG_ATTRS and not key.startswith("_")
        }
    )
    return fields


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON for CloudWatch Logs Insights."""

    def __init__(
        self,
        *,
        service_name: str = SERVICE_NAME,
        include_timestamp: bool = True,
        include_location: bool = False,
    ) -> None:
        """Initialize the JSON formatter.

        Args:
            service_name: Service identifier for log aggregation.
            include_timestamp: Whether to include timestamp field.
            include_location: Whether to include module/function/line fields.
        """
        super().__init__()
        self._service_name = service_name
        self._include_timestamp = include_timestamp
        self._include_location = include_location

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {}

        if self._include_timestamp:
            log_entry["timestamp"] = datetime.fromtimestamp(record.created, UTC).isoformat(
                timespec="milliseconds"
            )

        log_entry["level"] = record.levelname
        log_entry["logger"] = record.name
        log_entry["message"] = record.getMessage()
        log_entry["service"] = self._service_name
        log_entry["version"] = SERVICE_VERSION

        if self._include_location:
            log_entry["module"] = record.module
            log_entry["function"] = record.funcName
            log_entry["line"] = record.lineno

        log_entry.update(_context_fields(record))

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            log_entry["exception"] = {
                "type": exc_type.__name__ if exc_type else "Unknown",
                "message": str(exc_value) if exc_value else "",
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_entry, default=str)


class HumanFormatter(logging.Formatter):
    """Format log records as ``time | level | logger | message | k=v`` lines."""

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET: ClassVar[str] = "\033[0m"

    def __init__(self, *, use_colors: bool = True) -> None:
        """Initialize the human formatter.

        Args:
            use_colors: Whether to use ANSI colors in output.
        """
        super().__init__()
        self._use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")

        level = f"{record.levelname:<8}"
        if self._use_colors:
            level = f"{self.COLORS.get(record.levelname, '')}{level}{self.RESET}"

        logger_name = record.name
        if len(logger_name) > _LOGGER_NAME_WIDTH:
            logger_name = "..." + logger_name[-(_LOGGER_NAME_WIDTH - 3) :]

        parts = [timestamp, level, f"{logger_name:<{_LOGGER_NAME_WIDTH}}", record.getMessage()]

        fields = _context_fields(record)
        if fields:
            parts.append(" ".join(f"{key}={value}" for key, value in fields.items()))

        result = " | ".join(parts)

        if record.exc_info:
            result += "\n" + "".join(traceback.format_exception(*record.exc_info))

        return result
