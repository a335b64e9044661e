"""
Audio collectors: codec failure flags, speech DSP health, speaker impedance.
"""

import logging
import re
from enum import IntEnum
from typing import List

from ..models.records import AssembledRecord, AtomId
from ..sources.readers import parse_fixed_arity, read_text
from .base import AbstractCollector

logger = logging.getLogger(__name__)

_FLOAT_PAIR = re.compile(
    r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*,\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
)


class HardwareType(IntEnum):
    UNKNOWN = 0
    MICROPHONE = 1
    CODEC = 2
    SPEAKER = 3
    FINGERPRINT = 4


class HardwareErrorCode(IntEnum):
    UNKNOWN = 0
    COMPLETE = 1
    SPEAKER_HIGH_Z = 2
    SPEAKER_SHORT = 3
    FINGERPRINT_SENSOR_BROKEN = 4
    FINGERPRINT_TOO_MANY_DEAD_PIXELS = 5
    DEGRADE = 6


class CodecFailureCollector(AbstractCollector):
    """
    Reports a codec that flagged a failure during the past day.

    The node reads "0" while the codec is healthy.
    """

    def __init__(self, path: str, location: int):
        self.path = path
        self.location = location
        self.name = f"codec{location}_failed" if location else "codec_failed"

    @property
    def enabled(self) -> bool:
        return bool(self.path)

    def collect(self) -> List[AssembledRecord]:
        contents = read_text(self.path)
        if contents is None:
            logger.error(f"Unable to read codec state {self.path}")
            return []
        if contents.strip() == "0":
            return []

        logger.error(f"{self.path} report hardware fail")
        return [
            AssembledRecord.of(
                AtomId.HARDWARE_FAILED,
                [HardwareType.CODEC, self.location, HardwareErrorCode.COMPLETE],
            )
        ]


class SpeechDspStatCollector(AbstractCollector):
    """uptime, downtime, crash count and recover count of the speech DSP."""

    name = "speech_dsp_stat"

    def __init__(self, path: str):
        self.path = path

    @property
    def enabled(self) -> bool:
        return bool(self.path)

    def collect(self) -> List[AssembledRecord]:
        contents = read_text(self.path)
        if contents is None:
            logger.error(f"Unable to read speech dsp path {self.path}")
            return []

        values = parse_fixed_arity(contents, 4, 4)
        if values is None:
            logger.error(f"Unable to parse speech dsp stat {contents.strip()!r}")
            return []

        uptime, downtime, crash_count, recover_count = values
        logger.debug(
            f"SpeechDSP uptime {uptime} downtime {downtime} "
            f"crashcount {crash_count} recovercount {recover_count}"
        )
        return [AssembledRecord.of(AtomId.SPEECH_DSP_STAT, values)]


class SpeakerImpedanceCollector(AbstractCollector):
    """
    Last-detected impedance of the left and right speakers.

    The node holds "<left>,<right>" in ohms; each speaker is reported as
    its own record of [location, milliohms].
    """

    name = "speaker_impedance"

    def __init__(self, path: str):
        self.path = path

    @property
    def enabled(self) -> bool:
        return bool(self.path)

    def collect(self) -> List[AssembledRecord]:
        contents = read_text(self.path)
        if contents is None:
            logger.error(f"Unable to read impedance path {self.path}")
            return []

        match = _FLOAT_PAIR.match(contents)
        if not match:
            logger.error(f"Unable to parse speaker impedance {contents.strip()!r}")
            return []

        left, right = float(match.group(1)), float(match.group(2))
        return [
            AssembledRecord.of(AtomId.SPEAKER_IMPEDANCE, [0, int(left * 1000)]),
            AssembledRecord.of(AtomId.SPEAKER_IMPEDANCE, [1, int(right * 1000)]),
        ]
