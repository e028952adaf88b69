"""Direct-invocation entry point.

Runs exactly one poll cycle from the shell, e.g. from cron or by hand:

    DRONE_SENSE_TOKEN=... ETL_API=... ETL_LAYER=... ETL_TOKEN=... etl-drone-sense
"""

import logging
import sys

from etl_drone_sense.config import load_settings
from etl_drone_sense.exceptions.base import ConnectorError
from etl_drone_sense.exceptions.handlers import log_cycle_failures
from etl_drone_sense.logging.config import LogFormat, LoggingConfig
from etl_drone_sense.logging.context import generate_correlation_id
from etl_drone_sense.logging.logger import setup_logging
from etl_drone_sense.task import run_poll_cycle

logger = logging.getLogger(__name__)


@log_cycle_failures
def run() -> int:
    """Load settings and run one cycle.

    Returns:
        Number of features submitted.
    """
    settings = load_settings()
    logger.info(
        "Starting poll cycle (environment=%s, layer=%s)",
        settings.environment,
        settings.etl_layer,
    )
    collection = run_poll_cycle(settings)
    return len(collection.features)


def main() -> int:
    """CLI entry point.

    Returns:
        Process exit status: 0 on success, 1 on connector failure.
    """
    setup_logging(
        LoggingConfig(log_format=LogFormat.HUMAN),
    )
    generate_correlation_id()

    try:
        feature_count = run()
    except ConnectorError:
        return 1

    logger.info("Submitted %d features", feature_count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
