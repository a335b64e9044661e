"""
Factory for creating the configured sink connector.
"""

import logging

from ..models.config import SinkConfig
from ..storage import create_storage_from_config
from .base import SinkConnector, StaticSinkConnector
from .logging_sink import LoggingSink
from .spool_sink import SpoolSink

logger = logging.getLogger(__name__)


def create_sink_connector(sink_config: SinkConfig) -> SinkConnector:
    """
    Create a connector for the sink named in the configuration.

    Raises:
        ValueError: If the sink type is unknown
    """
    if sink_config.type == "log":
        logger.debug("Creating LoggingSink")
        return StaticSinkConnector(LoggingSink())
    elif sink_config.type == "spool":
        storage = create_storage_from_config(sink_config.storage)
        logger.debug(f"Creating SpoolSink at {sink_config.spool_path}")
        return StaticSinkConnector(SpoolSink(storage, sink_config.spool_path))
    else:
        raise ValueError(f"Unsupported sink type: {sink_config.type}")
