"""
Defines the snapshot source interface and its file-backed implementations.

This module provides:
- SnapshotSource: An abstract base class for "read the current value of named
  counters from some backing store".
- KeyValueFileSource, FixedArityFileSource: the multi-field node layouts
  the stateful collectors sample.

Every source returns a Snapshot (name -> unsigned counter). An empty snapshot
means the source was unavailable this cycle; a partial one means some fields
were missing, which downstream assembly tolerates.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..models.state import Snapshot
from .readers import read_fixed_arity_line, read_key_value_file

logger = logging.getLogger(__name__)


class SnapshotSource(ABC):
    """
    Abstract base class for snapshot sources.

    Subclasses read one backing node and name its values.
    """

    def __init__(self, path: str):
        self.path = path

    @property
    def is_configured(self) -> bool:
        return bool(self.path)

    @abstractmethod
    def sample(self) -> Snapshot:
        """
        Take one snapshot.

        Returns:
            Mapping of counter name to value. Empty when unavailable.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.path!r})"


class KeyValueFileSource(SnapshotSource):
    """Multi-line `<key> <value>` node such as /proc/vmstat."""

    def sample(self) -> Snapshot:
        return read_key_value_file(self.path)


class FixedArityFileSource(SnapshotSource):
    """
    Single-line node with positional fields.

    Args:
        path: Node to read.
        field_names: Names of the positional fields, in order.
        min_fields: Number of leading fields that must be present; later ones
            are optional (they vary with kernel version).
    """

    def __init__(self, path: str, field_names: Sequence[str], min_fields: Optional[int] = None):
        super().__init__(path)
        self.field_names = tuple(field_names)
        self.min_fields = len(self.field_names) if min_fields is None else min_fields
        if not 0 < self.min_fields <= len(self.field_names):
            raise ValueError(
                f"min_fields must be between 1 and {len(self.field_names)}, got {self.min_fields}"
            )

    def sample(self) -> Snapshot:
        if not self.path:
            logger.debug(f"{self!r} path not specified")
            return {}
        values = read_fixed_arity_line(self.path, self.min_fields, len(self.field_names))
        if values is None:
            return {}
        return dict(zip(self.field_names, values))

