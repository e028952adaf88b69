"""Configuration errors, raised before any network call is made."""

from typing import Any, ClassVar

from etl_drone_sense.exceptions.base import ConnectorError, CycleStage


class ConfigurationError(ConnectorError):
    """Configuration is invalid or incomplete."""

    error_code: ClassVar[str] = "CONFIGURATION_ERROR"
    stage: ClassVar[CycleStage] = CycleStage.CONFIGURATION


class MissingCredentialError(ConfigurationError):
    """A required credential was neither set nor resolvable from a secret."""

    error_code: ClassVar[str] = "MISSING_CREDENTIAL"

    def __init__(
        self,
        message: str,
        *,
        setting: str | None = None,
        secret_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the setting that could not be resolved.

        Args:
            message: Description of the missing credential.
            setting: Name of the setting that was empty.
            secret_id: Secrets Manager id that was tried, if any.
            context: Additional context information.
        """
        context_dict = context or {}
        if setting is not None:
            context_dict["setting"] = setting
        if secret_id:
            context_dict["secret_id"] = secret_id
        super().__init__(message, context=context_dict)
