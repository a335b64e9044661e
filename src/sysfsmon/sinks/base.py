"""
Reporting sink interface.

A sink accepts one record at a time. Delivery is best effort: a failed send
is logged by `report_record` and never retried. A SinkConnector hands out a
sink for one cycle, or None when the backend is unreachable.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.records import AssembledRecord

logger = logging.getLogger(__name__)


class ReportingSink(ABC):
    """Abstract base class for record sinks."""

    @abstractmethod
    def send(self, reverse_domain_name: str, atom_id: int, values: List[int]) -> bool:
        """
        Deliver one record.

        Args:
            reverse_domain_name: Namespace of the atom (e.g. "com.google.pixel").
            atom_id: Numeric atom identifier.
            values: Field values in field-number order.

        Returns:
            True on success, False on failure. Must not raise for delivery
            problems.
        """
        pass


class SinkConnector(ABC):
    """Abstract base class for obtaining a sink at the start of a cycle."""

    @abstractmethod
    def connect(self) -> Optional[ReportingSink]:
        """Return a connected sink, or None when the backend is unavailable."""
        pass


class StaticSinkConnector(SinkConnector):
    """Connector that always hands out the same sink, unless marked unavailable."""

    def __init__(self, sink: ReportingSink, available: bool = True):
        self.sink = sink
        self.available = available
        self.connect_attempts = 0

    def connect(self) -> Optional[ReportingSink]:
        self.connect_attempts += 1
        if not self.available:
            return None
        return self.sink


def report_record(sink: ReportingSink, record: AssembledRecord) -> bool:
    """Send a record, logging (not raising) on failure."""
    ok = sink.send(record.reverse_domain_name, int(record.atom_id), record.ordered_values)
    if not ok:
        logger.error(f"Unable to report {record.atom_id.name} to stats service")
    return ok
