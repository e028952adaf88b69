"""Errors raised while fetching from the DroneSense API."""

from typing import Any, ClassVar

from etl_drone_sense.exceptions.base import ConnectorError, CycleStage


class UpstreamError(ConnectorError):
    """Base class for vendor fetch failures."""

    error_code: ClassVar[str] = "UPSTREAM_ERROR"
    stage: ClassVar[CycleStage] = CycleStage.FETCH


class VendorRequestError(UpstreamError):
    """The vendor request failed at the transport or HTTP level."""

    error_code: ClassVar[str] = "VENDOR_REQUEST_FAILED"

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize vendor request error.

        Args:
            message: Description of the failure.
            url: Endpoint that was called.
            status_code: HTTP status returned, if a response was received.
            context: Additional context information.
        """
        context_dict = context or {}
        if url is not None:
            context_dict["url"] = url
        if status_code is not None:
            context_dict["status_code"] = status_code
        super().__init__(message, context=context_dict)


class VendorSchemaError(UpstreamError):
    """The vendor response did not match the expected record shape.

    The whole batch is rejected; no record of a malformed response is
    ever transformed or submitted.
    """

    error_code: ClassVar[str] = "VENDOR_SCHEMA_MISMATCH"

    def __init__(
        self,
        message: str,
        *,
        error_count: int | None = None,
        first_error: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize schema error with a validation summary.

        Args:
            message: Description of the mismatch.
            error_count: Number of validation errors found.
            first_error: Location and message of the first error.
            context: Additional context information.
        """
        context_dict = context or {}
        if error_count is not None:
            context_dict["error_count"] = error_count
        if first_error is not None:
            context_dict["first_error"] = first_error
        super().__init__(message, context=context_dict)
