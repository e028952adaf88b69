"""Base exception classes for the DroneSense connector.

Every error carries the poll-cycle stage it aborted, so the scheduler logs
can tell a bad deployment apart from a misbehaving vendor or sink.
"""

from enum import StrEnum
from typing import Any, ClassVar


class CycleStage(StrEnum):
    """Stage of the poll cycle an error belongs to."""

    CONFIGURATION = "configuration"
    FETCH = "fetch"
    SUBMIT = "submit"
    UNKNOWN = "unknown"


class ConnectorError(Exception):
    """Base exception for all connector errors.

    Subclasses register themselves by ``error_code`` so that a code found in
    a log line or an invocation result can be mapped back to its class.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        stage: Poll-cycle stage that was aborted.
        context: Additional debugging information.
    """

    error_code: ClassVar[str] = "CONNECTOR_ERROR"
    stage: ClassVar[CycleStage] = CycleStage.UNKNOWN

    _registry: ClassVar[dict[str, type["ConnectorError"]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Register subclass in the exception registry."""
        super().__init_subclass__(**kwargs)
        cls._registry[cls.error_code] = cls

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            context: Additional key-value pairs for debugging.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a JSON-serializable dictionary."""
        return {
            "error_code": self.error_code,
            "stage": self.stage.value,
            "message": self.message,
            "context": self.context,
        }

    def to_log_dict(self) -> dict[str, Any]:
        """Convert exception to flat fields for structured logging."""
        return {
            "error_code": self.error_code,
            "stage": self.stage.value,
            "error_message": self.message,
            "error_context": self.context,
            "exception_type": self.__class__.__name__,
        }

    @classmethod
    def get_by_error_code(cls, error_code: str) -> type["ConnectorError"] | None:
        """Look up exception class by error code.

        Args:
            error_code: The error code to look up.

        Returns:
            The exception class, or None if not found.
        """
        return cls._registry.get(error_code)

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} (context: {self.context})"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"context={self.context!r})"
        )
