"""Set logging context from a scheduled Lambda invocation."""

from etl_drone_sense.logging.context import set_correlation_id, set_extra_context
from etl_drone_sense.types import LambdaContext, LambdaEvent

_SCHEDULED_EVENT_DETAIL_TYPE = "Scheduled Event"


def set_schedule_context(
    event: LambdaEvent,
    context: LambdaContext,
) -> None:
    """Set logging context from an EventBridge event and Lambda context.

    Args:
        event: Lambda event dictionary.
        context: Lambda context object.
    """
    set_correlation_id(context.aws_request_id)
    set_extra_context(
        function_name=context.function_name,
        function_version=context.function_version,
    )

    if event.get("detail-type") == _SCHEDULED_EVENT_DETAIL_TYPE:
        if "id" in event:
            set_extra_context(schedule_event_id=str(event["id"]))
        if "time" in event:
            set_extra_context(scheduled_time=str(event["time"]))
