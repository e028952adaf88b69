"""Failure handling for connector entry points."""

import logging
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from etl_drone_sense.exceptions.base import ConnectorError, CycleStage

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def log_cycle_failures(func: Callable[P, T]) -> Callable[P, T]:
    """Decorator that logs a failed poll cycle and re-raises the error.

    Connector errors are logged with their structured fields; anything else
    is logged with its traceback. The exception always propagates so the
    invoker (scheduler or shell) sees the failure.

    Args:
        func: The entry point to wrap.

    Returns:
        Wrapped function with failure logging.
    """

    @wraps(func)
    def handle_call(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return func(*args, **kwargs)
        except ConnectorError as error:
            logger.error(
                "Poll cycle aborted during %s: %s",
                error.stage,
                error.message,
                extra=error.to_log_dict(),
            )
            raise
        except Exception:
            logger.exception("Poll cycle aborted by unexpected error")
            raise

    return handle_call


def get_stage_for_error_code(error_code: str) -> CycleStage:
    """Get the cycle stage for an error code.

    Args:
        error_code: The error code to look up.

    Returns:
        The stage of the registered error, or UNKNOWN if not found.
    """
    exception_class = ConnectorError.get_by_error_code(error_code)
    if exception_class is not None:
        return exception_class.stage
    return CycleStage.UNKNOWN
