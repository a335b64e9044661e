"""
Battery collectors: charge-cycle histogram and capacity deltas.
"""

import logging
from typing import List

from ..models.records import AssembledRecord, AtomId
from ..sources.readers import parse_int_sequence, read_scalar, read_text
from .base import AbstractCollector

logger = logging.getLogger(__name__)


class ChargeCyclesCollector(AbstractCollector):
    """
    Charge-cycle histogram.

    The node holds N buckets; bucket n counts how often the battery charge
    level was raised while in the n/N-full band. The record is as wide as the
    node, so its length depends on the fuel gauge driver.
    """

    name = "battery_charge_cycles"

    def __init__(self, path: str):
        self.path = path

    @property
    def enabled(self) -> bool:
        return bool(self.path)

    def collect(self) -> List[AssembledRecord]:
        contents = read_text(self.path)
        if contents is None:
            logger.error(f"Unable to read battery charge cycles {self.path}")
            return []

        buckets = parse_int_sequence(contents)
        if not buckets:
            logger.error(f"No charge cycle buckets in {self.path}")
            return []
        return [AssembledRecord.of(AtomId.CHARGE_CYCLES, buckets)]


class BatteryCapacityCollector(AbstractCollector):
    """Summed coulomb-counter and VFSOC capacity deltas; both are required."""

    name = "battery_capacity"

    def __init__(self, cc_path: str, vfsoc_path: str):
        self.cc_path = cc_path
        self.vfsoc_path = vfsoc_path

    @property
    def enabled(self) -> bool:
        return bool(self.cc_path) and bool(self.vfsoc_path)

    def collect(self) -> List[AssembledRecord]:
        delta_cc_sum = read_scalar(self.cc_path)
        if delta_cc_sum is None:
            return []
        delta_vfsoc_sum = read_scalar(self.vfsoc_path)
        if delta_vfsoc_sum is None:
            return []
        return [AssembledRecord.of(AtomId.BATTERY_CAPACITY, [delta_cc_sum, delta_vfsoc_sum])]
