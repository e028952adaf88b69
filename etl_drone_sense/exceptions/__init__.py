"""DroneSense connector exception hierarchy.

Architecture:
    ConnectorError (base)
    ├── ConfigurationError (stage: configuration)
    │   └── MissingCredentialError
    ├── UpstreamError (stage: fetch)
    │   ├── VendorRequestError
    │   └── VendorSchemaError
    └── DownstreamError (stage: submit)
        └── SubmissionError

Usage:
    from etl_drone_sense.exceptions import VendorSchemaError

    try:
        records = adapter.validate_json(response.content)
    except pydantic.ValidationError as error:
        raise VendorSchemaError(
            "DroneSense response did not match DroneLocation[]",
            error_count=error.error_count(),
        ) from error
"""

from etl_drone_sense.exceptions.base import ConnectorError, CycleStage
from etl_drone_sense.exceptions.configuration_errors import (
    ConfigurationError,
    MissingCredentialError,
)
from etl_drone_sense.exceptions.downstream_errors import DownstreamError, SubmissionError
from etl_drone_sense.exceptions.handlers import get_stage_for_error_code, log_cycle_failures
from etl_drone_sense.exceptions.upstream_errors import (
    UpstreamError,
    VendorRequestError,
    VendorSchemaError,
)

__all__ = [
    "ConfigurationError",
    "ConnectorError",
    "CycleStage",
    "DownstreamError",
    "MissingCredentialError",
    "SubmissionError",
    "UpstreamError",
    "VendorRequestError",
    "VendorSchemaError",
    "get_stage_for_error_code",
    "log_cycle_failures",
]
