"""
Cross-cycle collection state.

The collector keeps, per metric group, the most recent snapshot and whether
the group has been sampled at least once. Nothing here is persisted: a new
process starts with every group uninitialized, which re-arms first-sample
suppression.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator

Snapshot = Dict[str, int]


@dataclass
class GroupState:
    """Memory for one metric group."""

    previous_snapshot: Snapshot = field(default_factory=dict)
    initialized: bool = False

    def advance(self, snapshot: Snapshot) -> None:
        """Fold a freshly taken snapshot in as the new baseline."""
        self.previous_snapshot = dict(snapshot)
        self.initialized = True


class CollectionState:
    """
    Single-owner store of GroupState keyed by metric group name.

    Entries are created on first access as empty and uninitialized.
    """

    def __init__(self):
        self._groups: Dict[str, GroupState] = {}

    def for_group(self, group_name: str) -> GroupState:
        state = self._groups.get(group_name)
        if state is None:
            state = GroupState()
            self._groups[group_name] = state
        return state

    def is_initialized(self, group_name: str) -> bool:
        state = self._groups.get(group_name)
        return state is not None and state.initialized

    def reset(self) -> None:
        self._groups.clear()

    def __contains__(self, group_name: str) -> bool:
        return group_name in self._groups

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)
