"""
Record and metric-definition data models.

This module contains the data structures that flow through a collection cycle:

- AtomId / Cadence: identifiers for record kinds and collection cadences.
- MetricSpec / MetricGroup: static, ordered counter definitions.
- FieldValues: a positionally-addressed record body with implicit zero defaults.
- AssembledRecord: one record ready to be handed to a reporting sink.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Iterable, List, Optional, Tuple

from ..validation import ValidationError

# Field 1 of every vendor atom is the reverse domain name, so value slot 0
# carries field number 2.
VENDOR_ATOM_OFFSET = 2

REVERSE_DOMAIN_NAME = "com.google.pixel"


class AtomId(IntEnum):
    """Record kinds reported by the collector."""

    BATTERY_CAPACITY = 105002
    STORAGE_UFS_HEALTH = 105003
    F2FS_STATS = 105004
    ZRAM_MM_STAT = 105005
    ZRAM_BD_STAT = 105006
    BOOT_STATS = 105007
    SPEAKER_IMPEDANCE = 105013
    UFS_RESET_COUNT = 105014
    PIXEL_MM_METRICS_PER_HOUR = 105015
    PIXEL_MM_METRICS_PER_DAY = 105016
    F2FS_COMPRESSION_INFO = 105017
    # Framework-level reports
    CHARGE_CYCLES = 187
    HARDWARE_FAILED = 72
    SLOW_IO = 71
    SPEECH_DSP_STAT = 191


class Cadence(Enum):
    """How often a metric group is collected."""
    HOURLY = "hourly"
    DAILY = "daily"


@dataclass(frozen=True)
class MetricSpec:
    """
    A single counter definition inside a metric group.

    Attributes:
        source_key: Name of the counter in the snapshot (e.g. "pswpin").
        field_position: Field number the value lands on in the record.
        is_accumulating: True for monotonically increasing counters that are
            reported as the delta since the previous snapshot.
    """

    source_key: str
    field_position: int
    is_accumulating: bool = False


@dataclass(frozen=True)
class MetricGroup:
    """
    An ordered set of metric specs sharing one record shape and cadence.

    Two specs may target the same field position (aliases of one value, e.g.
    ``workingset_refault`` and ``workingset_refault_file``); a source key may
    only appear once.
    """

    name: str
    atom_id: AtomId
    cadence: Cadence
    specs: Tuple[MetricSpec, ...]
    base_offset: int = VENDOR_ATOM_OFFSET

    def __post_init__(self):
        if not self.specs:
            raise ValidationError(f"Metric group '{self.name}' has no specs", field_name="specs")
        seen = set()
        for spec in self.specs:
            if spec.source_key in seen:
                raise ValidationError(
                    f"Duplicate source key '{spec.source_key}' in metric group '{self.name}'",
                    field_name="source_key",
                    value=spec.source_key,
                )
            seen.add(spec.source_key)
            if spec.field_position < self.base_offset:
                raise ValidationError(
                    f"Field position {spec.field_position} of '{spec.source_key}' is below "
                    f"the base offset {self.base_offset} in metric group '{self.name}'",
                    field_name="field_position",
                    value=spec.field_position,
                )

    @property
    def max_field_position(self) -> int:
        return max(spec.field_position for spec in self.specs)

    @property
    def record_size(self) -> int:
        """Number of value slots a record of this group carries."""
        return self.max_field_position - self.base_offset + 1

    def accumulating_positions(self) -> List[int]:
        return sorted({spec.field_position for spec in self.specs if spec.is_accumulating})


class FieldValues:
    """
    Positionally-addressed record body with implicit zero defaults.

    Slots are addressed by field number. A slot is either present (set
    explicitly) or default (reads as 0). Setting a field beyond the current
    size grows the body; setting a field twice keeps the last value.
    """

    def __init__(self, size: int = 0, base_offset: int = VENDOR_ATOM_OFFSET):
        if size < 0:
            raise ValueError(f"FieldValues size must be >= 0, got {size}")
        self.base_offset = base_offset
        self._size = size
        self._present: Dict[int, int] = {}

    @classmethod
    def from_values(cls, values: Iterable[int], base_offset: int = VENDOR_ATOM_OFFSET) -> "FieldValues":
        """Build a fully-present body from values in field order."""
        body = cls(0, base_offset)
        for index, value in enumerate(values):
            body.set(base_offset + index, value)
        return body

    def __len__(self) -> int:
        return self._size

    def _index(self, field_position: int) -> int:
        index = field_position - self.base_offset
        if index < 0:
            raise IndexError(
                f"Field {field_position} is below the base offset {self.base_offset}"
            )
        return index

    def set(self, field_position: int, value: int) -> None:
        index = self._index(field_position)
        if index >= self._size:
            self._size = index + 1
        self._present[index] = int(value)

    def get(self, field_position: int) -> int:
        index = self._index(field_position)
        if index >= self._size:
            raise IndexError(f"Field {field_position} is outside a record of size {self._size}")
        return self._present.get(index, 0)

    def is_present(self, field_position: int) -> bool:
        return self._index(field_position) in self._present

    def expand_to(self, field_position: int) -> None:
        """Grow the body so that field_position is addressable, filling with defaults."""
        index = self._index(field_position)
        if index >= self._size:
            self._size = index + 1

    def to_list(self) -> List[int]:
        return [self._present.get(index, 0) for index in range(self._size)]

    def __eq__(self, other) -> bool:
        if isinstance(other, FieldValues):
            return self.base_offset == other.base_offset and self.to_list() == other.to_list()
        return NotImplemented

    def __repr__(self) -> str:
        return f"FieldValues({self.to_list()}, base_offset={self.base_offset})"


@dataclass
class AssembledRecord:
    """One record of one atom kind, ready to send."""

    atom_id: AtomId
    values: FieldValues = field(default_factory=FieldValues)
    reverse_domain_name: str = REVERSE_DOMAIN_NAME

    @classmethod
    def of(cls, atom_id: AtomId, values: Iterable[int]) -> "AssembledRecord":
        return cls(atom_id=atom_id, values=FieldValues.from_values(values))

    @property
    def ordered_values(self) -> List[int]:
        return self.values.to_list()

    def value_of(self, field_position: int) -> Optional[int]:
        try:
            return self.values.get(field_position)
        except IndexError:
            return None
