"""
Memory management metrics from /proc/vmstat.

Hourly records carry gauges plus the ion/dma-heap pool size; daily records
carry deltas of accumulating counters. Both withhold the first record after
process start, because the previous snapshot is empty at that point and
deltas would equal the whole since-boot value.
"""

import logging
from typing import List

from ..metrics import MM_HOUR_ION_TOTAL_POOLS_FIELD, MM_METRICS_PER_DAY, MM_METRICS_PER_HOUR, assemble_into
from ..models.records import AssembledRecord, MetricGroup
from ..models.state import CollectionState
from ..sources.base import SnapshotSource
from ..sources.readers import read_unsigned
from .base import AbstractCollector

logger = logging.getLogger(__name__)


def read_ion_total_pools(legacy_path: str, path: str) -> int:
    """
    Total size of the ion/dma-heap page pools in KiB.

    The legacy ion node is preferred; when it is missing or reads 0 the
    dma-heap node is used. 0 when neither can be read.
    """
    if not legacy_path and not path:
        logger.info("ion_total_pools path is not specified")
        return 0

    value = read_unsigned(legacy_path) if legacy_path else None
    if not value:
        value = read_unsigned(path) if path else None
        if value is None:
            return 0
    return value


class _MmMetricsCollector(AbstractCollector):
    group: MetricGroup

    def __init__(self, vmstat: SnapshotSource, state: CollectionState):
        self.vmstat = vmstat
        self.state = state

    def _assemble(self):
        snapshot = self.vmstat.sample()
        if not snapshot:
            logger.debug(f"{self.name}: vmstat unavailable, skipping")
            return None, False
        return assemble_into(self.state, self.group, snapshot)


class MmMetricsHourlyCollector(_MmMetricsCollector):
    """Hourly memory gauges plus pool size."""

    name = "mm_metrics_per_hour"
    group = MM_METRICS_PER_HOUR

    def __init__(self, vmstat: SnapshotSource, state: CollectionState,
                 ion_total_pools_legacy: str = "", ion_total_pools: str = ""):
        super().__init__(vmstat, state)
        self.ion_total_pools_legacy = ion_total_pools_legacy
        self.ion_total_pools = ion_total_pools

    def collect(self) -> List[AssembledRecord]:
        record, was_initialized = self._assemble()
        if record is None:
            return []

        record.values.expand_to(MM_HOUR_ION_TOTAL_POOLS_FIELD)
        record.values.set(
            MM_HOUR_ION_TOTAL_POOLS_FIELD,
            read_ion_total_pools(self.ion_total_pools_legacy, self.ion_total_pools),
        )

        if not was_initialized:
            return []
        return [record]


class MmMetricsDailyCollector(_MmMetricsCollector):
    """Daily deltas of reclaim/allocation/swap counters."""

    name = "mm_metrics_per_day"
    group = MM_METRICS_PER_DAY

    def collect(self) -> List[AssembledRecord]:
        record, was_initialized = self._assemble()
        if record is None or not was_initialized:
            return []
        return [record]
