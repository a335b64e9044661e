"""
Collectors for sysfs/procfs statistics.

Each collector reads one family of kernel nodes and returns the records to
report for the current cycle.
"""

from .audio import (
    CodecFailureCollector,
    HardwareErrorCode,
    HardwareType,
    SpeakerImpedanceCollector,
    SpeechDspStatCollector,
)
from .base import AbstractCollector
from .battery import BatteryCapacityCollector, ChargeCyclesCollector
from .mm_metrics import MmMetricsDailyCollector, MmMetricsHourlyCollector, read_ion_total_pools
from .storage import (
    BootStatsCollector,
    F2fsCompressionCollector,
    F2fsStatsCollector,
    IoOperation,
    SlowIoCollector,
    UfsLifetimeCollector,
    UfsResetCountCollector,
)
from .zram import ZramBdStatCollector, ZramMmStatCollector

__all__ = [
    "AbstractCollector",
    "BatteryCapacityCollector",
    "BootStatsCollector",
    "ChargeCyclesCollector",
    "CodecFailureCollector",
    "F2fsCompressionCollector",
    "F2fsStatsCollector",
    "HardwareErrorCode",
    "HardwareType",
    "IoOperation",
    "MmMetricsDailyCollector",
    "MmMetricsHourlyCollector",
    "SlowIoCollector",
    "SpeakerImpedanceCollector",
    "SpeechDspStatCollector",
    "UfsLifetimeCollector",
    "UfsResetCountCollector",
    "ZramBdStatCollector",
    "ZramMmStatCollector",
    "read_ion_total_pools",
]
