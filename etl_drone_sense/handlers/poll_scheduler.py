"""Scheduled poll Lambda handler.

EventBridge invokes this on a fixed rate. Schema requests from the layer
API are answered without touching the vendor.
"""

import logging
from typing import Any

from etl_drone_sense.config import load_settings
from etl_drone_sense.exceptions.handlers import log_cycle_failures
from etl_drone_sense.logging.adapters.schedule_adapter import set_schedule_context
from etl_drone_sense.logging.context import clear_context
from etl_drone_sense.logging.logger import setup_logging
from etl_drone_sense.task import DataFlow, DroneSenseTask, SchemaType, run_poll_cycle
from etl_drone_sense.types import CycleResult, LambdaContext, LambdaEvent

logger = logging.getLogger(__name__)

_SCHEMA_EVENTS = {
    "schema:input": SchemaType.INPUT,
    "schema:output": SchemaType.OUTPUT,
}


def _run_cycle() -> CycleResult:
    settings = load_settings()
    collection = run_poll_cycle(settings)
    return {"feature_count": len(collection.features)}


@log_cycle_failures
def handler(event: LambdaEvent, context: LambdaContext) -> CycleResult | dict[str, Any]:
    """Run one poll cycle, or return a schema when one is requested.

    Args:
        event: EventBridge scheduled event, or ``{"type": "schema:input"}``.
        context: Lambda context.

    Returns:
        Cycle summary, or the requested JSON schema.
    """
    setup_logging()
    clear_context()
    set_schedule_context(event, context)

    event_type = str(event.get("type", ""))
    if event_type in _SCHEMA_EVENTS:
        logger.info("Schema requested: %s", event_type)
        return DroneSenseTask.schema(_SCHEMA_EVENTS[event_type], DataFlow.INCOMING)

    result = _run_cycle()
    logger.info("Poll cycle complete", extra=dict(result))
    return result
