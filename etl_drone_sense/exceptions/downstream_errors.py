"""Errors raised while submitting features to the downstream layer."""

from typing import Any, ClassVar

from etl_drone_sense.exceptions.base import ConnectorError, CycleStage


class DownstreamError(ConnectorError):
    """Base class for sink failures."""

    error_code: ClassVar[str] = "DOWNSTREAM_ERROR"
    stage: ClassVar[CycleStage] = CycleStage.SUBMIT


class SubmissionError(DownstreamError):
    """The feature collection could not be delivered to the layer."""

    error_code: ClassVar[str] = "SUBMISSION_FAILED"

    def __init__(
        self,
        message: str,
        *,
        layer: str | None = None,
        status_code: int | None = None,
        feature_count: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize submission error.

        Args:
            message: Description of the failure.
            layer: Downstream layer id.
            status_code: HTTP status returned, if a response was received.
            feature_count: Number of features in the rejected collection.
            context: Additional context information.
        """
        context_dict = context or {}
        if layer is not None:
            context_dict["layer"] = layer
        if status_code is not None:
            context_dict["status_code"] = status_code
        if feature_count is not None:
            context_dict["feature_count"] = feature_count
        super().__init__(message, context=context_dict)
