"""
Configuration validation utilities.

This module turns raw TOML sections into validated configuration models.
Every section is optional; missing keys fall back to the model defaults.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from ..models.config import AppConfig, SchedulerConfig, SinkConfig, SysfsPaths
from ..storage.storage_config import StorageConfig
from ..validation import (
    ValidationError,
    validate_enum_choice,
    validate_path_string,
    validate_positive_float,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_paths_config(paths_data: Dict[str, Any]) -> SysfsPaths:
    """
    Validate the `[paths]` section.

    Raises:
        ValidationError: If a key is unknown or a value is not a string
    """
    known = set(SysfsPaths.field_names())
    unknown = sorted(set(paths_data) - known)
    if unknown:
        raise ValidationError(
            f"Unknown keys in [paths]: {unknown}",
            field_name="paths",
            value=unknown,
        )

    validated = {
        key: validate_path_string(value, field_name=f"paths.{key}")
        for key, value in paths_data.items()
    }
    paths = SysfsPaths(**validated)

    missing = [name for name, value in paths.to_dict().items() if not value]
    if missing:
        logger.info(f"Nodes not configured on this device, related collectors are skipped: {missing}")
    return paths


def validate_scheduler_config(scheduler_data: Dict[str, Any]) -> SchedulerConfig:
    """
    Validate the `[scheduler]` section.

    Raises:
        ValidationError: If validation fails
    """
    defaults = SchedulerConfig()

    settle_delay_seconds = validate_positive_float(
        scheduler_data.get("settle_delay_seconds", defaults.settle_delay_seconds),
        min_value=0.0,
        max_value=3600.0,
        field_name="scheduler.settle_delay_seconds",
    )

    interval_seconds = validate_positive_float(
        scheduler_data.get("interval_seconds", defaults.interval_seconds),
        min_value=0.001,
        max_value=86400.0,
        field_name="scheduler.interval_seconds",
    )

    hours_per_day = validate_positive_integer(
        scheduler_data.get("hours_per_day", defaults.hours_per_day),
        min_value=1,
        max_value=168,
        field_name="scheduler.hours_per_day",
    )

    if interval_seconds != 3600.0:
        logger.warning(
            f"scheduler.interval_seconds is {interval_seconds}s, hourly records will not cover one hour"
        )

    return SchedulerConfig(
        settle_delay_seconds=settle_delay_seconds,
        interval_seconds=interval_seconds,
        hours_per_day=hours_per_day,
    )


def validate_sink_config(sink_data: Dict[str, Any]) -> SinkConfig:
    """
    Validate the `[sink]` section, including `[sink.storage]`.

    Raises:
        ValidationError: If validation fails
    """
    sink_type = validate_enum_choice(
        sink_data.get("type", "log"),
        valid_choices=["log", "spool"],
        field_name="sink.type",
    )

    spool_path = sink_data.get("spool_path", str(SinkConfig().spool_path))
    if not isinstance(spool_path, str) or not spool_path.strip():
        raise ValidationError(
            "sink.spool_path must be a non-empty string",
            field_name="sink.spool_path",
            value=spool_path,
        )

    try:
        storage = StorageConfig.from_dict(sink_data.get("storage", {}))
    except ValueError as e:
        raise ValidationError(str(e), field_name="sink.storage") from e

    return SinkConfig(type=sink_type, spool_path=Path(spool_path), storage=storage)


def validate_app_config(config_data: Dict[str, Any]) -> AppConfig:
    """
    Validate a whole parsed configuration file.

    Raises:
        ValidationError: If any section fails validation
    """
    logging_settings = config_data.get("logging", {})
    log_level = validate_enum_choice(
        str(logging_settings.get("level", "INFO")).upper(),
        valid_choices=VALID_LOG_LEVELS,
        field_name="logging.level",
    )

    return AppConfig(
        paths=validate_paths_config(config_data.get("paths", {})),
        scheduler=validate_scheduler_config(config_data.get("scheduler", {})),
        sink=validate_sink_config(config_data.get("sink", {})),
        log_level=log_level,
    )
