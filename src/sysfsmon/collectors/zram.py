"""
zram statistics.

mm_stat is reported every cycle. Its huge_pages_since_boot column is
accumulating: it is reported as the delta since the last cycle, and as 0 on
the first cycle after process start. Kernels that predate the column report
8 fields; the missing column then stays 0.
"""

import logging
from typing import List

from ..metrics import ZRAM_MM_STAT, assemble_into, zero_accumulating
from ..models.records import AssembledRecord, AtomId
from ..models.state import CollectionState
from ..sources.base import SnapshotSource
from ..sources.readers import read_fixed_arity_line
from .base import AbstractCollector

logger = logging.getLogger(__name__)

ZRAM_BD_STAT_FIELDS = 3


class ZramMmStatCollector(AbstractCollector):
    name = "zram_mm_stat"

    def __init__(self, mm_stat: SnapshotSource, state: CollectionState):
        self.mm_stat = mm_stat
        self.state = state

    @property
    def enabled(self) -> bool:
        return self.mm_stat.is_configured

    def collect(self) -> List[AssembledRecord]:
        snapshot = self.mm_stat.sample()
        if not snapshot:
            logger.error(f"Unable to read ZramMmStat from {self.mm_stat.path}")
            return []

        record, was_initialized = assemble_into(self.state, ZRAM_MM_STAT, snapshot)
        if not was_initialized:
            zero_accumulating(ZRAM_MM_STAT, record)
        return [record]


class ZramBdStatCollector(AbstractCollector):
    """Backing-device counters: bd_count, bd_reads, bd_writes."""

    name = "zram_bd_stat"

    def __init__(self, path: str):
        self.path = path

    @property
    def enabled(self) -> bool:
        return bool(self.path)

    def collect(self) -> List[AssembledRecord]:
        values = read_fixed_arity_line(self.path, ZRAM_BD_STAT_FIELDS, ZRAM_BD_STAT_FIELDS)
        if values is None:
            return []
        return [AssembledRecord.of(AtomId.ZRAM_BD_STAT, values)]
