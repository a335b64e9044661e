"""
Metric group tables and the differential assembler.
"""

from .assembler import assemble, assemble_into, zero_accumulating
from .groups import (
    ALL_GROUPS,
    MM_HOUR_ION_TOTAL_POOLS_FIELD,
    MM_METRICS_PER_DAY,
    MM_METRICS_PER_HOUR,
    ZRAM_MM_STAT,
    ZRAM_MM_STAT_FIELDS,
    ZRAM_MM_STAT_MIN_FIELDS,
)

__all__ = [
    "assemble",
    "assemble_into",
    "zero_accumulating",
    "ALL_GROUPS",
    "MM_HOUR_ION_TOTAL_POOLS_FIELD",
    "MM_METRICS_PER_DAY",
    "MM_METRICS_PER_HOUR",
    "ZRAM_MM_STAT",
    "ZRAM_MM_STAT_FIELDS",
    "ZRAM_MM_STAT_MIN_FIELDS",
]
