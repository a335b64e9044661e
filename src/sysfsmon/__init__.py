"""
sysfsmon: differential metrics collection from procfs/sysfs counters.

The package periodically samples kernel and driver counters, turns them into
fixed-layout records and forwards them to a reporting sink.

The package is organized into specialized modules:
- config: Configuration loading and validation
- models: Record, state and configuration data structures
- validation: Input validation and error handling
- sources: Readers and parsers for kernel nodes
- metrics: Metric group tables and the differential assembler
- collectors: One collector per family of nodes
- scheduling: Timer and hourly/daily collection loop
- sinks: Record delivery
- storage: Parquet/NDJSON spool files

Usage:
    From command line:
        python -m sysfsmon

    Programmatically:
        from sysfsmon import build_scheduler, create_sink_connector, get_config
        config = get_config()
        scheduler = build_scheduler(config, create_sink_connector(config.sink))
        scheduler.run()
"""

# Main interfaces
from .config import clear_config_cache, get_config, set_config_path
from .scheduling import CollectionScheduler, MonotonicTimer, Timer, build_scheduler
from .sinks import ReportingSink, SinkConnector, StaticSinkConnector, create_sink_connector

# Model classes for external use
from .models import (
    AppConfig,
    AssembledRecord,
    AtomId,
    CollectionState,
    FieldValues,
    MetricGroup,
    MetricSpec,
)

# Assembly
from .metrics import assemble, assemble_into

# Validation utilities
from .validation import TimerError, ValidationError

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "CollectionScheduler",
    "MonotonicTimer",
    "Timer",
    "build_scheduler",
    "ReportingSink",
    "SinkConnector",
    "StaticSinkConnector",
    "create_sink_connector",
    # Models
    "AppConfig",
    "AssembledRecord",
    "AtomId",
    "CollectionState",
    "FieldValues",
    "MetricGroup",
    "MetricSpec",
    # Assembly
    "assemble",
    "assemble_into",
    # Validation
    "TimerError",
    "ValidationError",
]
