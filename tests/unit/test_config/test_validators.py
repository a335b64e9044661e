"""
Unit tests for configuration validation functionality.

Tests the validation of the paths, scheduler, sink and logging sections,
including defaults for missing sections and error handling.
"""

from pathlib import Path

import pytest

from sysfsmon.config.validators import (
    validate_app_config,
    validate_paths_config,
    validate_scheduler_config,
    validate_sink_config,
)
from sysfsmon.validation import ValidationError


@pytest.mark.unit
class TestPathsConfigValidation:
    """Test cases for the [paths] section."""

    def test_defaults(self):
        paths = validate_paths_config({})
        assert paths.vmstat == "/proc/vmstat"
        assert paths.zram_mm_stat == "/sys/block/zram0/mm_stat"
        assert paths.ion_total_pools_legacy == "/sys/kernel/ion/total_pools_kb"
        assert paths.codec == ""

    def test_override_and_strip(self):
        paths = validate_paths_config({"codec": "  /sys/devices/codec/state "})
        assert paths.codec == "/sys/devices/codec/state"

    def test_empty_string_disables(self):
        assert validate_paths_config({"vmstat": ""}).vmstat == ""

    def test_unknown_key(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_paths_config({"eeprom": "/sys/eeprom"})
        assert "eeprom" in str(exc_info.value)

    def test_non_string_value(self):
        with pytest.raises(ValidationError):
            validate_paths_config({"vmstat": 5})


@pytest.mark.unit
class TestSchedulerConfigValidation:
    """Test cases for the [scheduler] section."""

    def test_defaults(self):
        config = validate_scheduler_config({})
        assert config.settle_delay_seconds == 30.0
        assert config.interval_seconds == 3600.0
        assert config.hours_per_day == 24

    def test_zero_settle_delay_allowed(self):
        assert validate_scheduler_config({"settle_delay_seconds": 0}).settle_delay_seconds == 0.0

    @pytest.mark.parametrize(
        "section",
        [
            {"interval_seconds": 0},
            {"interval_seconds": "hourly"},
            {"hours_per_day": 0},
            {"hours_per_day": True},
            {"settle_delay_seconds": -1},
        ],
    )
    def test_invalid_values(self, section):
        with pytest.raises(ValidationError):
            validate_scheduler_config(section)


@pytest.mark.unit
class TestSinkConfigValidation:
    """Test cases for the [sink] section."""

    def test_defaults(self):
        config = validate_sink_config({})
        assert config.type == "log"
        assert config.storage.format == "parquet"

    def test_spool(self, sample_config_data):
        config = validate_sink_config(sample_config_data["sink"])
        assert config.type == "spool"
        assert isinstance(config.spool_path, Path)
        assert config.storage.compression == "zstd"

    def test_invalid_type(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_sink_config({"type": "binder"})
        assert "sink.type" in str(exc_info.value)

    def test_invalid_storage(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_sink_config({"storage": {"format": "csv"}})
        assert exc_info.value.field_name == "sink.storage"

    def test_misspelled_storage_option(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_sink_config({"storage": {"compresion": "zstd"}})
        assert exc_info.value.field_name == "sink.storage"

    def test_empty_spool_path(self):
        with pytest.raises(ValidationError):
            validate_sink_config({"type": "spool", "spool_path": " "})


@pytest.mark.unit
class TestAppConfigValidation:
    """Test cases for whole-file validation."""

    def test_full_config(self, sample_config_data):
        config = validate_app_config(sample_config_data)

        assert config.log_level == "DEBUG"
        assert config.paths.zram_bd_stat == ""
        assert config.scheduler.settle_delay_seconds == 0.0
        assert config.sink.type == "spool"

    def test_empty_config_uses_defaults(self):
        config = validate_app_config({})
        assert config.log_level == "INFO"
        assert config.sink.type == "log"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            validate_app_config({"logging": {"level": "chatty"}})
