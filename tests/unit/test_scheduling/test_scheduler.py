"""
Unit tests for the hourly/daily collection loop.
"""

from typing import List

import pytest

from sysfsmon.collectors import AbstractCollector
from sysfsmon.models import AssembledRecord, AtomId, SchedulerConfig
from sysfsmon.scheduling import CollectionScheduler
from sysfsmon.sinks import StaticSinkConnector
from sysfsmon.validation import TimerError


class CountingCollector(AbstractCollector):
    """Collector that emits one record per call and counts calls."""

    def __init__(self, name, atom_id=AtomId.ZRAM_BD_STAT, enabled=True):
        self.name = name
        self.atom_id = atom_id
        self._enabled = enabled
        self.calls = 0
        self.outcomes: List[bool] = []

    @property
    def enabled(self):
        return self._enabled

    def collect(self):
        self.calls += 1
        return [AssembledRecord.of(self.atom_id, [self.calls])]

    def on_sent(self, record, ok):
        self.outcomes.append(ok)


class ExplodingCollector(AbstractCollector):
    name = "exploding"

    def collect(self):
        raise RuntimeError("driver went away")


class SequenceConnector(StaticSinkConnector):
    """Connector whose availability follows a scripted sequence."""

    def __init__(self, sink, availability):
        super().__init__(sink)
        self.availability = list(availability)

    def connect(self):
        self.available = self.availability.pop(0) if self.availability else True
        return super().connect()


def make_scheduler(timer, sink, hourly=(), legacy=(), vendor=(), connector=None, **config):
    return CollectionScheduler(
        timer,
        connector or StaticSinkConnector(sink),
        hourly,
        legacy,
        vendor,
        SchedulerConfig(**config),
    )


@pytest.mark.unit
class TestCollectionScheduler:
    """Test cases for CollectionScheduler."""

    def test_start_runs_hourly_then_daily_and_arms(self, fake_timer, recording_sink):
        hourly = CountingCollector("hourly", AtomId.PIXEL_MM_METRICS_PER_HOUR)
        daily = CountingCollector("daily", AtomId.PIXEL_MM_METRICS_PER_DAY)
        scheduler = make_scheduler(fake_timer, recording_sink, [hourly], [], [daily],
                                   settle_delay_seconds=30, interval_seconds=3600)

        scheduler.start()

        assert fake_timer.settled == [30]
        assert fake_timer.armed == [3600]
        assert recording_sink.atoms() == [AtomId.PIXEL_MM_METRICS_PER_HOUR, AtomId.PIXEL_MM_METRICS_PER_DAY]
        assert scheduler.hourly_cycles_run == 1
        assert scheduler.daily_cycles_run == 1

    def test_24_ticks_run_one_extra_daily_cycle(self, fake_timer, recording_sink):
        hourly = CountingCollector("hourly")
        daily = CountingCollector("daily")
        scheduler = make_scheduler(fake_timer, recording_sink, [hourly], [daily], [])

        scheduler.run(max_ticks=24)

        assert fake_timer.waits == 24
        assert scheduler.hourly_cycles_run == 25
        assert scheduler.daily_cycles_run == 2
        assert scheduler.hours == 0
        assert hourly.calls == 25
        assert daily.calls == 2

    def test_23_ticks_do_not_run_daily(self, fake_timer, recording_sink):
        scheduler = make_scheduler(fake_timer, recording_sink, [CountingCollector("h")], [], [])
        scheduler.run(max_ticks=23)

        assert scheduler.daily_cycles_run == 1
        assert scheduler.hours == 23

    def test_daily_order(self, fake_timer, recording_sink):
        legacy = [CountingCollector("a", AtomId.CHARGE_CYCLES), CountingCollector("b", AtomId.SLOW_IO)]
        vendor = [CountingCollector("c", AtomId.BOOT_STATS), CountingCollector("d", AtomId.ZRAM_BD_STAT)]
        scheduler = make_scheduler(fake_timer, recording_sink, [], legacy, vendor)

        scheduler.run_daily_cycle()

        assert recording_sink.atoms() == [
            AtomId.CHARGE_CYCLES, AtomId.SLOW_IO, AtomId.BOOT_STATS, AtomId.ZRAM_BD_STAT,
        ]

    def test_unavailable_sink_skips_gate(self, fake_timer, recording_sink):
        legacy = CountingCollector("legacy")
        vendor = CountingCollector("vendor")
        connector = SequenceConnector(recording_sink, [False, True])
        scheduler = make_scheduler(fake_timer, recording_sink, [], [legacy], [vendor], connector=connector)

        scheduler.run_daily_cycle()

        assert legacy.calls == 0
        assert vendor.calls == 1
        assert connector.connect_attempts == 2

    def test_unavailable_sink_keeps_loop_running(self, fake_timer, recording_sink):
        hourly = CountingCollector("hourly")
        connector = StaticSinkConnector(recording_sink, available=False)
        scheduler = make_scheduler(fake_timer, recording_sink, [hourly], [], [], connector=connector)

        scheduler.run(max_ticks=3)

        assert hourly.calls == 0
        assert scheduler.hourly_cycles_run == 4

    def test_disabled_collector_is_skipped(self, fake_timer, recording_sink):
        disabled = CountingCollector("off", enabled=False)
        scheduler = make_scheduler(fake_timer, recording_sink, [disabled], [], [])
        scheduler.run_hourly_cycle()
        assert disabled.calls == 0

    def test_collector_exception_does_not_abort_cycle(self, fake_timer, recording_sink):
        after = CountingCollector("after")
        scheduler = make_scheduler(fake_timer, recording_sink, [], [ExplodingCollector(), after], [])

        scheduler.run_daily_cycle()

        assert after.calls == 1

    def test_send_outcome_is_reported_to_collector(self, fake_timer, sink_factory):
        sink = sink_factory(ok=False)
        collector = CountingCollector("c")
        scheduler = make_scheduler(fake_timer, sink, [collector], [], [])

        scheduler.run_hourly_cycle()

        assert collector.outcomes == [False]
        assert scheduler.records_failed == 1
        assert scheduler.records_sent == 0

    def test_timer_error_propagates(self, timer_factory, recording_sink):
        timer = timer_factory(fail_after_waits=2)
        hourly = CountingCollector("hourly")
        scheduler = make_scheduler(timer, recording_sink, [hourly], [], [])

        with pytest.raises(TimerError):
            scheduler.run()

        assert hourly.calls == 3
