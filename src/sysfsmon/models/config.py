"""
Configuration data models.

This module contains the configuration structures loaded from `config.toml`:
the sysfs/procfs node locations, scheduler timing, and the reporting sink.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict

from ..storage.storage_config import StorageConfig


@dataclass
class SysfsPaths:
    """
    Locations of the kernel and driver nodes the collector reads.

    An empty string means the node does not exist on this device and the
    collector that needs it is skipped.
    """

    # Slow I/O counters, reset to 0 after each read.
    slowio_read_cnt: str = ""
    slowio_write_cnt: str = ""
    slowio_unmap_cnt: str = ""
    slowio_sync_cnt: str = ""
    # Battery
    cycle_count_bins: str = ""
    battery_capacity_cc: str = ""
    battery_capacity_vfsoc: str = ""
    # Audio
    impedance: str = ""
    codec: str = ""
    codec1: str = ""
    speech_dsp: str = ""
    # Storage
    ufs_lifetime_a: str = ""
    ufs_lifetime_b: str = ""
    ufs_lifetime_c: str = ""
    ufs_host_reset: str = ""
    # Directory prefix; the userdata block device name is appended.
    f2fs_stats: str = "/sys/fs/f2fs/"
    userdata_mount_point: str = "/data"
    # Memory management
    vmstat: str = "/proc/vmstat"
    zram_mm_stat: str = "/sys/block/zram0/mm_stat"
    zram_bd_stat: str = "/sys/block/zram0/bd_stat"
    ion_total_pools: str = "/sys/kernel/dma_heap/total_pools_kb"
    ion_total_pools_legacy: str = "/sys/kernel/ion/total_pools_kb"

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    def to_dict(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in self.field_names()}


@dataclass
class SchedulerConfig:
    """Timing of the collection loop, loaded from `[scheduler]`."""

    # Wait after launch so that drivers (e.g. the audio codec) finish loading.
    settle_delay_seconds: float = 30.0
    interval_seconds: float = 3600.0
    # Number of hourly ticks between daily cycles.
    hours_per_day: int = 24


@dataclass
class SinkConfig:
    """Where assembled records go, loaded from `[sink]`."""

    type: str = "log"  # "log" or "spool"
    spool_path: Path = Path("spool/records.parquet")
    storage: StorageConfig = field(default_factory=StorageConfig)


@dataclass
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    paths: SysfsPaths
    scheduler: SchedulerConfig
    sink: SinkConfig
    log_level: str = "INFO"
