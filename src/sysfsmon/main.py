"""
Entry point of the sysfsmon collector.

Loads `conf/config.toml`, connects the configured sink and runs the
collection loop until the process is stopped. There are no command-line
options; everything is taken from the configuration file.

Usage:
    python -m sysfsmon
"""

import logging
import signal
import sys

from .config import get_config
from .scheduling import build_scheduler
from .sinks import create_sink_connector
from .validation import TimerError, ValidationError

# --- Logging Setup ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


def _handle_signal(signum, frame):
    logger.info(f"Signal {signal.strsignal(signum)} received. Stopping collection.")
    sys.exit(0)


def main() -> int:
    """
    Run the collector.

    Returns:
        Process exit status: 1 on configuration or timer failure. The
        collection loop itself does not return otherwise.
    """
    signal.signal(signal.SIGINT, _handle_signal)
    signal.signal(signal.SIGTERM, _handle_signal)

    try:
        config = get_config()
    except (FileNotFoundError, ValidationError, ValueError) as e:
        logger.critical(f"Unable to load configuration: {e}")
        return 1

    logging.getLogger().setLevel(config.log_level)
    logger.info("Starting sysfsmon collection loop")

    try:
        connector = create_sink_connector(config.sink)
        scheduler = build_scheduler(config, connector)
        scheduler.run()
    except TimerError as e:
        logger.critical(f"Fatal timer failure, exiting: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
