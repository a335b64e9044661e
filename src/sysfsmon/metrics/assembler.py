"""
Differential assembly of snapshots into positional records.

Given a metric group, the current snapshot and the previous one, `assemble`
produces a record whose slots hold either the raw value (gauges) or the
difference from the previous snapshot (accumulating counters). Deltas use
plain signed arithmetic: a counter that went backwards (reset, rollover)
yields a negative value, which is reported as is.
"""

import logging
from typing import Tuple

from ..models.records import AssembledRecord, FieldValues, MetricGroup
from ..models.state import CollectionState, Snapshot

logger = logging.getLogger(__name__)


def assemble(
    group: MetricGroup,
    current: Snapshot,
    previous: Snapshot,
) -> Tuple[AssembledRecord, Snapshot]:
    """
    Assemble one record for `group` from `current`, diffing against `previous`.

    Args:
        group: Metric group definition.
        current: Snapshot taken this cycle.
        previous: Snapshot taken last cycle for the same group (may be empty).

    Returns:
        Tuple of (record, updated previous snapshot). The updated snapshot is
        a copy of the whole current snapshot, not only the keys the group
        references, so rows added to a table later keep their history.
    """
    values = FieldValues(group.record_size, group.base_offset)

    for spec in group.specs:
        cur_value = current.get(spec.source_key)
        if cur_value is None:
            continue

        if spec.is_accumulating:
            prev_value = previous.get(spec.source_key, 0)
            values.set(spec.field_position, cur_value - prev_value)
        else:
            values.set(spec.field_position, cur_value)

    return AssembledRecord(atom_id=group.atom_id, values=values), dict(current)


def assemble_into(
    state: CollectionState,
    group: MetricGroup,
    current: Snapshot,
) -> Tuple[AssembledRecord, bool]:
    """
    Assemble against the group's stored state and advance it.

    Returns:
        Tuple of (record, was_initialized). `was_initialized` is False on the
        first cycle of a group; callers must not send that record, since every
        accumulating slot then holds the whole since-boot value.
    """
    group_state = state.for_group(group.name)
    was_initialized = group_state.initialized

    record, updated = assemble(group, current, group_state.previous_snapshot)
    group_state.advance(updated)

    if not was_initialized:
        logger.debug(f"First sample of '{group.name}' taken, {len(updated)} keys")
    return record, was_initialized


def zero_accumulating(group: MetricGroup, record: AssembledRecord) -> None:
    """Set every accumulating slot of `record` to an explicit 0."""
    for position in group.accumulating_positions():
        record.values.set(position, 0)
