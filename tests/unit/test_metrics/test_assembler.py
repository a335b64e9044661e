"""
Unit tests for differential assembly.
"""

import pytest

from sysfsmon.metrics import MM_METRICS_PER_DAY, MM_METRICS_PER_HOUR, assemble, assemble_into, zero_accumulating
from sysfsmon.models import AtomId, Cadence, CollectionState, MetricGroup, MetricSpec

COUNTERS = MetricGroup(
    name="test-counters",
    atom_id=AtomId.PIXEL_MM_METRICS_PER_DAY,
    cadence=Cadence.DAILY,
    specs=(
        MetricSpec("a", 2, True),
        MetricSpec("b", 3, True),
        MetricSpec("c", 5, True),
    ),
)

MIXED = MetricGroup(
    name="test-mixed",
    atom_id=AtomId.ZRAM_MM_STAT,
    cadence=Cadence.DAILY,
    specs=(
        MetricSpec("gauge", 2, False),
        MetricSpec("counter", 3, True),
    ),
)


@pytest.mark.unit
class TestAssemble:
    """Test cases for the pure assemble function."""

    def test_gauges_are_absolute_and_counters_are_deltas(self):
        record, _ = assemble(MIXED, {"gauge": 50, "counter": 30}, {"gauge": 10, "counter": 12})
        assert record.ordered_values == [50, 18]
        assert record.atom_id == AtomId.ZRAM_MM_STAT

    @pytest.mark.parametrize("previous,current", [(0, 0), (5, 9), (100, 100), (1, 2 ** 63)])
    def test_delta_is_exact(self, previous, current):
        record, _ = assemble(COUNTERS, {"a": current}, {"a": previous})
        assert record.value_of(2) == current - previous

    def test_equal_values_give_zero(self):
        record, _ = assemble(COUNTERS, {"a": 7, "b": 8, "c": 9}, {"a": 7, "b": 8, "c": 9})
        assert record.ordered_values == [0, 0, 0, 0]

    def test_missing_key_slot_is_zero(self):
        record, _ = assemble(COUNTERS, {"a": 10, "c": 30}, {"a": 1, "c": 3})

        assert record.ordered_values == [9, 0, 0, 27]
        assert not record.values.is_present(3)

    def test_missing_previous_value_counts_from_zero(self):
        record, _ = assemble(COUNTERS, {"a": 10}, {})
        assert record.value_of(2) == 10

    def test_unaddressed_positions_are_zero(self):
        record, _ = assemble(COUNTERS, {"a": 1, "b": 1, "c": 1}, {})
        assert len(record.ordered_values) == COUNTERS.record_size
        assert record.value_of(4) == 0

    def test_counter_reset_passes_negative_delta_through(self):
        record, _ = assemble(COUNTERS, {"a": 3}, {"a": 10})
        assert record.value_of(2) == -7

    def test_updated_snapshot_is_full_copy(self):
        current = {"a": 1, "unrelated": 99}
        _, updated = assemble(COUNTERS, current, {})

        assert updated == current
        assert updated is not current

    def test_shared_position_last_spec_wins(self):
        current = {"workingset_refault": 100, "workingset_refault_file": 500}
        record, _ = assemble(MM_METRICS_PER_DAY, current, {"workingset_refault": 10, "workingset_refault_file": 50})
        assert record.value_of(2) == 450

    def test_shared_position_old_kernel_name(self):
        record, _ = assemble(MM_METRICS_PER_DAY, {"workingset_refault": 100}, {"workingset_refault": 40})
        assert record.value_of(2) == 60

    def test_hourly_group_shape(self):
        snapshot = {
            "nr_free_pages": 1,
            "nr_anon_pages": 2,
            "nr_file_pages": 3,
            "nr_slab_reclaimable": 4,
            "nr_zspages": 5,
            "nr_unevictable": 6,
        }
        record, _ = assemble(MM_METRICS_PER_HOUR, snapshot, snapshot)
        assert record.ordered_values == [1, 2, 3, 4, 5, 6]


@pytest.mark.unit
class TestAssembleInto:
    """Test cases for stateful assembly."""

    def test_first_cycle_reports_uninitialized_and_stores_snapshot(self):
        state = CollectionState()
        current = {"a": 5, "b": 6, "extra": 1}

        _, was_initialized = assemble_into(state, COUNTERS, current)

        assert was_initialized is False
        group_state = state.for_group(COUNTERS.name)
        assert group_state.initialized is True
        assert group_state.previous_snapshot == current

    def test_second_cycle_uses_stored_snapshot(self):
        state = CollectionState()
        assemble_into(state, COUNTERS, {"a": 5, "b": 6, "c": 7})
        record, was_initialized = assemble_into(state, COUNTERS, {"a": 8, "b": 6, "c": 17})

        assert was_initialized is True
        assert record.ordered_values == [3, 0, 0, 10]

    def test_same_snapshot_twice_is_all_zero(self):
        state = CollectionState()
        snapshot = {"a": 123, "b": 456, "c": 789}
        assemble_into(state, COUNTERS, snapshot)
        record, _ = assemble_into(state, COUNTERS, dict(snapshot))

        assert record.ordered_values == [0] * COUNTERS.record_size

    def test_groups_have_independent_state(self):
        state = CollectionState()
        assemble_into(state, COUNTERS, {"a": 1})
        _, was_initialized = assemble_into(state, MIXED, {"gauge": 1})

        assert was_initialized is False
        assert state.is_initialized(COUNTERS.name)

    def test_zero_accumulating(self):
        record, _ = assemble(MIXED, {"gauge": 4, "counter": 1000}, {})
        zero_accumulating(MIXED, record)

        assert record.ordered_values == [4, 0]
        assert record.values.is_present(3)
