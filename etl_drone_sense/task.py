"""DroneSense ETL task: one fetch, transform, submit cycle per invocation."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any, ClassVar

from etl_drone_sense.config import Settings, resolve_secret
from etl_drone_sense.constants import SERVICE_NAME
from etl_drone_sense.exceptions.configuration_errors import ConfigurationError
from etl_drone_sense.features.models import FeatureCollection
from etl_drone_sense.features.transformer import to_feature
from etl_drone_sense.sink.client import FeatureSink
from etl_drone_sense.vendor.client import DroneSenseClient
from etl_drone_sense.vendor.models import DroneLocation

logger = logging.getLogger(__name__)

# Settings a layer operator fills in; the rest is deployment plumbing.
_INPUT_SCHEMA_FIELDS = ("drone_sense_token", "debug")


class SchemaType(StrEnum):
    """Which schema a caller asks for."""

    INPUT = "input"
    OUTPUT = "output"


class DataFlow(StrEnum):
    """Direction of data relative to the layer."""

    INCOMING = "incoming"
    OUTGOING = "outgoing"


class InvocationType(StrEnum):
    """How the task is triggered."""

    SCHEDULE = "schedule"


class DroneSenseTask:
    """Incoming, scheduled ETL task for DroneSense drone locations."""

    name: ClassVar[str] = SERVICE_NAME
    flow: ClassVar[tuple[DataFlow, ...]] = (DataFlow.INCOMING,)
    invocation: ClassVar[tuple[InvocationType, ...]] = (InvocationType.SCHEDULE,)

    def __init__(
        self,
        settings: Settings,
        *,
        vendor_client: DroneSenseClient,
        sink: FeatureSink,
    ) -> None:
        """Initialize the task.

        Args:
            settings: Connector settings.
            vendor_client: Client for the DroneSense API.
            sink: Downstream layer the features are submitted to.
        """
        self._settings = settings
        self._vendor_client = vendor_client
        self._sink = sink

    @classmethod
    def from_settings(cls, settings: Settings) -> DroneSenseTask:
        """Build a task, resolving every credential before any HTTP call.

        Args:
            settings: Connector settings.

        Returns:
            A task ready to run.

        Raises:
            ConfigurationError: If the layer location is missing.
            MissingCredentialError: If a token cannot be resolved.
        """
        missing = [name for name in ("etl_api", "etl_layer") if not getattr(settings, name)]
        if missing:
            raise ConfigurationError(
                f"Downstream layer is not configured: {', '.join(m.upper() for m in missing)}",
                context={"missing": missing},
            )

        drone_sense_token = resolve_secret(
            settings.drone_sense_token,
            settings.drone_sense_token_secret_id,
            setting="drone_sense_token",
            region_name=settings.aws_region,
        )
        etl_token = resolve_secret(
            settings.etl_token,
            settings.etl_token_secret_id,
            setting="etl_token",
            region_name=settings.aws_region,
        )

        return cls(
            settings,
            vendor_client=DroneSenseClient(
                url=settings.drone_sense_url,
                token=drone_sense_token,
                timeout_seconds=settings.api_timeout_seconds,
            ),
            sink=FeatureSink(
                api_url=settings.etl_api,
                layer=settings.etl_layer,
                token=etl_token,
                timeout_seconds=settings.api_timeout_seconds,
            ),
        )

    @staticmethod
    def schema(
        schema_type: SchemaType = SchemaType.INPUT,
        flow: DataFlow = DataFlow.INCOMING,
    ) -> dict[str, Any]:
        """Return the JSON schema of the task's environment or output records.

        Args:
            schema_type: INPUT for the environment, OUTPUT for a drone location.
            flow: Data flow; only INCOMING has schemas.

        Returns:
            A JSON schema dictionary.
        """
        if flow != DataFlow.INCOMING:
            return {"type": "object", "properties": {}}

        if schema_type == SchemaType.OUTPUT:
            return DroneLocation.model_json_schema(by_alias=True)

        full_schema = Settings.model_json_schema()
        properties = full_schema.get("properties", {})
        return {
            "type": "object",
            "title": "Environment",
            "properties": {name: properties[name] for name in _INPUT_SCHEMA_FIELDS},
        }

    def control(self) -> FeatureCollection:
        """Run one poll cycle.

        Fetch failures propagate before anything is submitted.

        Returns:
            The submitted feature collection.
        """
        collection = FeatureCollection(features=[])

        locations = self._vendor_client.fetch_locations()
        for location in locations:
            collection.features.append(to_feature(location))

        if self._settings.debug:
            for feature in collection.features:
                payload = feature.model_dump(mode="json", by_alias=True, exclude_none=True)
                logger.info("Feature %s", feature.id, extra={"feature": payload})

        self._sink.submit(collection)
        return collection

    def close(self) -> None:
        """Release the HTTP sessions."""
        self._vendor_client.close()
        self._sink.close()


def run_poll_cycle(settings: Settings) -> FeatureCollection:
    """Build a task from settings, run one cycle and release its resources.

    Args:
        settings: Connector settings.

    Returns:
        The submitted feature collection.
    """
    task = DroneSenseTask.from_settings(settings)
    try:
        return task.control()
    finally:
        task.close()
