"""
The hourly/daily collection loop.

After a settle delay the scheduler runs one hourly and one daily cycle, then
wakes once per interval to run an hourly cycle; every `hours_per_day` ticks
it also runs a daily cycle. Cycles run to completion on the calling thread,
in a fixed collector order.

Each cycle connects to the sink first. If no sink is available every
collector behind that connection is skipped until the next cycle. The daily
cycle connects twice: once for the legacy atoms and once for the vendor
atoms.
"""

import logging
from typing import List, Optional, Sequence

from ..collectors import (
    AbstractCollector,
    BatteryCapacityCollector,
    BootStatsCollector,
    ChargeCyclesCollector,
    CodecFailureCollector,
    F2fsCompressionCollector,
    F2fsStatsCollector,
    IoOperation,
    MmMetricsDailyCollector,
    MmMetricsHourlyCollector,
    SlowIoCollector,
    SpeakerImpedanceCollector,
    SpeechDspStatCollector,
    UfsLifetimeCollector,
    UfsResetCountCollector,
    ZramBdStatCollector,
    ZramMmStatCollector,
)
from ..metrics import ZRAM_MM_STAT_FIELDS, ZRAM_MM_STAT_MIN_FIELDS
from ..models.config import AppConfig, SchedulerConfig
from ..models.state import CollectionState
from ..sinks.base import SinkConnector, report_record
from ..sources.base import FixedArityFileSource, KeyValueFileSource
from ..sources.properties import PropertyReader
from ..validation.exceptions import handle_collector_error
from .timer import MonotonicTimer, Timer

logger = logging.getLogger(__name__)


class CollectionScheduler:
    """
    Runs collectors on the hourly/daily cadence and forwards their records.

    Args:
        timer: Timing primitive. A TimerError from it ends `run`.
        connector: Hands out a sink at the start of each connection gate.
        hourly: Collectors of the hourly cycle.
        daily_legacy: Daily collectors reporting legacy atoms.
        daily_vendor: Daily collectors reporting vendor atoms.
        config: Settle delay, interval and ticks per day.
    """

    def __init__(
        self,
        timer: Timer,
        connector: SinkConnector,
        hourly: Sequence[AbstractCollector],
        daily_legacy: Sequence[AbstractCollector],
        daily_vendor: Sequence[AbstractCollector],
        config: Optional[SchedulerConfig] = None,
    ):
        self.timer = timer
        self.connector = connector
        self.hourly = list(hourly)
        self.daily_legacy = list(daily_legacy)
        self.daily_vendor = list(daily_vendor)
        self.config = config or SchedulerConfig()

        self.hours = 0
        self.hourly_cycles_run = 0
        self.daily_cycles_run = 0
        self.records_sent = 0
        self.records_failed = 0

    def start(self) -> None:
        """Settle, run the initial hourly and daily cycles, then arm the timer."""
        logger.info(f"Waiting {self.config.settle_delay_seconds}s for drivers to settle")
        self.timer.settle(self.config.settle_delay_seconds)
        self.run_hourly_cycle()
        self.run_daily_cycle()
        self.timer.arm(self.config.interval_seconds)

    def tick(self) -> None:
        """Handle one timer expiry."""
        self.hours += 1
        self.run_hourly_cycle()
        if self.hours >= self.config.hours_per_day:
            self.run_daily_cycle()
            self.hours = 0

    def run(self, max_ticks: Optional[int] = None) -> None:
        """
        Start, then wait and tick forever.

        Args:
            max_ticks: Stop after this many ticks; None runs until a
                TimerError propagates.
        """
        self.start()
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            self.timer.wait()
            self.tick()
            ticks += 1

    def run_hourly_cycle(self) -> None:
        self.hourly_cycles_run += 1
        logger.debug(f"Hourly cycle {self.hourly_cycles_run}")
        self._run_gate("hourly", self.hourly)

    def run_daily_cycle(self) -> None:
        self.daily_cycles_run += 1
        logger.info(f"Daily cycle {self.daily_cycles_run}")
        self._run_gate("daily legacy", self.daily_legacy)
        self._run_gate("daily vendor", self.daily_vendor)

    def _run_gate(self, label: str, collectors: List[AbstractCollector]) -> None:
        if not collectors:
            return
        sink = self.connector.connect()
        if sink is None:
            logger.error(f"Unable to get stats service, skipping {label} collection")
            return

        for collector in collectors:
            if not collector.enabled:
                logger.debug(f"{collector.name} not enabled, skipping")
                continue
            try:
                records = collector.collect()
                for record in records:
                    ok = report_record(sink, record)
                    if ok:
                        self.records_sent += 1
                    else:
                        self.records_failed += 1
                    collector.on_sent(record, ok)
            except Exception as e:
                handle_collector_error(e, collector.name, reraise=False, logger=logger)


def build_scheduler(
    config: AppConfig,
    connector: SinkConnector,
    timer: Optional[Timer] = None,
    state: Optional[CollectionState] = None,
    properties: Optional[PropertyReader] = None,
) -> CollectionScheduler:
    """
    Wire every collector from configuration into a scheduler.

    Args:
        config: Loaded application configuration.
        connector: Sink connector used by every cycle.
        timer: Defaults to a MonotonicTimer.
        state: Shared previous-snapshot state; a fresh one by default.
        properties: System property reader used for boot stats.
    """
    paths = config.paths
    state = state if state is not None else CollectionState()

    vmstat = KeyValueFileSource(paths.vmstat)
    mm_stat = FixedArityFileSource(paths.zram_mm_stat, ZRAM_MM_STAT_FIELDS, ZRAM_MM_STAT_MIN_FIELDS)

    hourly = [
        MmMetricsHourlyCollector(
            vmstat, state,
            ion_total_pools_legacy=paths.ion_total_pools_legacy,
            ion_total_pools=paths.ion_total_pools,
        ),
    ]

    daily_legacy = [
        ChargeCyclesCollector(paths.cycle_count_bins),
        CodecFailureCollector(paths.codec1, location=1),
        CodecFailureCollector(paths.codec, location=0),
        SlowIoCollector({
            IoOperation.READ: paths.slowio_read_cnt,
            IoOperation.WRITE: paths.slowio_write_cnt,
            IoOperation.UNMAP: paths.slowio_unmap_cnt,
            IoOperation.SYNC: paths.slowio_sync_cnt,
        }),
        SpeechDspStatCollector(paths.speech_dsp),
    ]

    daily_vendor = [
        BootStatsCollector(paths.f2fs_stats, paths.userdata_mount_point, properties),
        BatteryCapacityCollector(paths.battery_capacity_cc, paths.battery_capacity_vfsoc),
        F2fsStatsCollector(paths.f2fs_stats, paths.userdata_mount_point),
        F2fsCompressionCollector(paths.f2fs_stats, paths.userdata_mount_point),
        MmMetricsDailyCollector(vmstat, state),
        SpeakerImpedanceCollector(paths.impedance),
        UfsLifetimeCollector(paths.ufs_lifetime_a, paths.ufs_lifetime_b, paths.ufs_lifetime_c),
        UfsResetCountCollector(paths.ufs_host_reset),
        ZramMmStatCollector(mm_stat, state),
        ZramBdStatCollector(paths.zram_bd_stat),
    ]

    return CollectionScheduler(
        timer or MonotonicTimer(),
        connector,
        hourly,
        daily_legacy,
        daily_vendor,
        config.scheduler,
    )
