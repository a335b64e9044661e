"""
Pytest configuration and shared fixtures for the sysfsmon test suite.

This module provides common fixtures, fake kernel nodes and test doubles
for the timer and the reporting sink.
"""

import shutil
import sys
import tempfile
from pathlib import Path
from typing import List, Optional, Tuple

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def write_node(temp_dir):
    """Write a fake sysfs/procfs node under temp_dir and return its path."""

    def _write(relative: str, content: str) -> str:
        path = temp_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return str(path)

    return _write


@pytest.fixture
def sample_config_data(temp_dir):
    """Sample configuration data for testing."""
    return {
        "paths": {
            "vmstat": str(temp_dir / "vmstat"),
            "zram_mm_stat": str(temp_dir / "mm_stat"),
            "zram_bd_stat": "",
            "codec": str(temp_dir / "codec_state"),
        },
        "scheduler": {
            "settle_delay_seconds": 0,
            "interval_seconds": 3600,
            "hours_per_day": 24,
        },
        "sink": {
            "type": "spool",
            "spool_path": str(temp_dir / "spool" / "records.parquet"),
            "storage": {"format": "parquet", "compression": "zstd"},
        },
        "logging": {"level": "debug"},
    }


@pytest.fixture
def config_files(temp_dir, sample_config_data):
    """Create a temporary config.toml for testing."""
    import toml

    config_file = temp_dir / "config.toml"
    with open(config_file, "w") as f:
        toml.dump(sample_config_data, f)

    return {"config": config_file, "dir": temp_dir}


# ============================================================================
# Test Doubles
# ============================================================================


class FakeTimer:
    """Timer that never blocks; records every call."""

    def __init__(self, fail_after_waits: Optional[int] = None):
        self.settled: List[float] = []
        self.armed: List[float] = []
        self.waits = 0
        self.fail_after_waits = fail_after_waits

    def settle(self, seconds):
        self.settled.append(seconds)

    def arm(self, interval):
        self.armed.append(interval)

    def wait(self):
        from sysfsmon.validation import TimerError

        if self.fail_after_waits is not None and self.waits >= self.fail_after_waits:
            raise TimerError("fake timer failure")
        self.waits += 1


class RecordingSink:
    """Sink that keeps every record it is given."""

    def __init__(self, ok: bool = True):
        self.ok = ok
        self.sent: List[Tuple[str, int, List[int]]] = []

    def send(self, reverse_domain_name, atom_id, values):
        self.sent.append((reverse_domain_name, atom_id, list(values)))
        return self.ok

    def atoms(self) -> List[int]:
        return [atom_id for _, atom_id, _ in self.sent]


@pytest.fixture
def fake_timer():
    return FakeTimer()


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture(autouse=True)
def clear_config_after_test():
    """Automatically clear configuration cache after each test."""
    original_config_path = Path(__file__).parent.parent / "conf" / "config.toml"

    yield  # Run the test

    from sysfsmon.config import clear_config_cache, set_config_path

    clear_config_cache()
    set_config_path(original_config_path)


@pytest.fixture
def timer_factory():
    """Build FakeTimers with custom failure points."""
    return FakeTimer


@pytest.fixture
def sink_factory():
    """Build RecordingSinks with a fixed send outcome."""
    return RecordingSink
