"""
Metric group tables.

Each table is an ordered list of (source key, field number, accumulating)
rows. Extending a record means adding a row; the assembler derives the
record size from the largest field number.
"""

from ..models.records import AtomId, Cadence, MetricGroup, MetricSpec

# PixelMmMetricsPerHour field numbers
MM_HOUR_ION_TOTAL_POOLS_FIELD = 8

MM_METRICS_PER_HOUR = MetricGroup(
    name="mm-metrics-hourly",
    atom_id=AtomId.PIXEL_MM_METRICS_PER_HOUR,
    cadence=Cadence.HOURLY,
    specs=(
        MetricSpec("nr_free_pages", 2, False),
        MetricSpec("nr_anon_pages", 3, False),
        MetricSpec("nr_file_pages", 4, False),
        MetricSpec("nr_slab_reclaimable", 5, False),
        MetricSpec("nr_zspages", 6, False),
        MetricSpec("nr_unevictable", 7, False),
    ),
)

# workingset_refault was renamed workingset_refault_file in newer kernels;
# both land on the same field and whichever is present last wins.
MM_METRICS_PER_DAY = MetricGroup(
    name="mm-metrics-daily",
    atom_id=AtomId.PIXEL_MM_METRICS_PER_DAY,
    cadence=Cadence.DAILY,
    specs=(
        MetricSpec("workingset_refault", 2, True),
        MetricSpec("workingset_refault_file", 2, True),
        MetricSpec("pswpin", 3, True),
        MetricSpec("pswpout", 4, True),
        MetricSpec("allocstall_dma", 5, True),
        MetricSpec("allocstall_dma32", 6, True),
        MetricSpec("allocstall_normal", 7, True),
        MetricSpec("allocstall_movable", 8, True),
        MetricSpec("pgalloc_dma", 9, True),
        MetricSpec("pgalloc_dma32", 10, True),
        MetricSpec("pgalloc_normal", 11, True),
        MetricSpec("pgalloc_movable", 12, True),
        MetricSpec("pgsteal_kswapd", 13, True),
        MetricSpec("pgsteal_direct", 14, True),
        MetricSpec("pgscan_kswapd", 15, True),
        MetricSpec("pgscan_direct", 16, True),
        MetricSpec("oom_kill", 17, True),
    ),
)

# Columns of /sys/block/zram0/mm_stat. huge_pages_since_boot only exists on
# newer kernels.
ZRAM_MM_STAT_FIELDS = (
    "orig_data_size",
    "compr_data_size",
    "mem_used_total",
    "mem_limit",
    "max_used_total",
    "same_pages",
    "pages_compacted",
    "huge_pages",
    "huge_pages_since_boot",
)
ZRAM_MM_STAT_MIN_FIELDS = 8

ZRAM_MM_STAT = MetricGroup(
    name="zram-mm-stat",
    atom_id=AtomId.ZRAM_MM_STAT,
    cadence=Cadence.DAILY,
    specs=(
        MetricSpec("orig_data_size", 2, False),
        MetricSpec("compr_data_size", 3, False),
        MetricSpec("mem_used_total", 4, False),
        MetricSpec("same_pages", 5, False),
        MetricSpec("huge_pages", 6, False),
        MetricSpec("huge_pages_since_boot", 7, True),
    ),
)

ALL_GROUPS = (MM_METRICS_PER_HOUR, MM_METRICS_PER_DAY, ZRAM_MM_STAT)
