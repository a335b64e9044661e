"""
Defines the base class for collectors.

A collector reads one family of nodes and turns them into zero or more
records per cycle. Collectors never raise for unavailable or malformed
nodes; they log and return an empty list, so one missing node never aborts
the rest of a cycle.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from ..models.records import AssembledRecord

logger = logging.getLogger(__name__)


class AbstractCollector(ABC):
    """
    Abstract base class for collectors.

    Subclasses implement `collect`. The scheduler calls `on_sent` with the
    outcome of every send, which lets a collector track whether it has
    reported successfully.
    """

    name: str = "collector"

    @property
    def enabled(self) -> bool:
        """Whether the scheduler should call this collector at all."""
        return True

    @abstractmethod
    def collect(self) -> List[AssembledRecord]:
        """
        Run one collection.

        Returns:
            Records to send this cycle, possibly empty.
        """
        pass

    def on_sent(self, record: AssembledRecord, ok: bool) -> None:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
