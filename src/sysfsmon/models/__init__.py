"""
Data models for the collector.

Configuration Models:
- Node locations, scheduler timing and sink settings

Record Models:
- Metric specs and groups, positional record bodies, assembled records

State Models:
- Per-group previous snapshots and first-sample flags
"""

from .config import AppConfig, SchedulerConfig, SinkConfig, SysfsPaths
from .records import (
    REVERSE_DOMAIN_NAME,
    VENDOR_ATOM_OFFSET,
    AssembledRecord,
    AtomId,
    Cadence,
    FieldValues,
    MetricGroup,
    MetricSpec,
)
from .state import CollectionState, GroupState, Snapshot

__all__ = [
    # Configuration
    "AppConfig",
    "SchedulerConfig",
    "SinkConfig",
    "SysfsPaths",
    # Records
    "REVERSE_DOMAIN_NAME",
    "VENDOR_ATOM_OFFSET",
    "AssembledRecord",
    "AtomId",
    "Cadence",
    "FieldValues",
    "MetricGroup",
    "MetricSpec",
    # State
    "CollectionState",
    "GroupState",
    "Snapshot",
]
