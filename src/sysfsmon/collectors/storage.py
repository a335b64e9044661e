"""
Storage collectors: slow I/O counters, UFS health, f2fs statistics and
boot-time filesystem timings.

f2fs counters live under <f2fs root>/<userdata block device>/; the device
name is looked up in the mount table on every read, since it can change
across boots.
"""

import logging
import os
from enum import IntEnum
from typing import Dict, List, Optional

from ..models.records import AssembledRecord, AtomId
from ..sources.mounts import f2fs_device_dir
from ..sources.properties import PropertyReader
from ..sources.readers import parse_scalar, read_scalar, read_scalar_and_reset, read_text, writeback
from .base import AbstractCollector

logger = logging.getLogger(__name__)

F2FS_STATS_NODES = (
    "dirty_segments",
    "free_segments",
    "cp_foreground_calls",
    "cp_background_calls",
    "gc_foreground_calls",
    "gc_background_calls",
    "moved_blocks_foreground",
    "moved_blocks_background",
    "avg_vblocks",
)

FSCK_TIME_PROPERTY = "ro.boottime.init.fsck.data"
CHECKPOINT_TIME_PROPERTY = "ro.boottime.init.mount.data"


class IoOperation(IntEnum):
    UNKNOWN = 0
    READ = 1
    WRITE = 2
    UNMAP = 3
    SYNC = 4


class SlowIoCollector(AbstractCollector):
    """
    Counts of slow I/O operations since the last read.

    Each counter is cleared after it is read, even when its content does not
    parse. Counters that are 0 are not reported.
    """

    name = "slow_io"

    def __init__(self, paths: Dict[IoOperation, str]):
        self.paths = {operation: path for operation, path in paths.items() if path}

    @property
    def enabled(self) -> bool:
        return bool(self.paths)

    def collect(self) -> List[AssembledRecord]:
        records = []
        for operation, path in self.paths.items():
            text = read_text(path)
            if text is None:
                logger.error(f"Unable to read slowio {path}")
                continue
            if not writeback(path, 0):
                logger.error(f"Failed to clear slowio {path}")
            count = parse_scalar(text)
            if count is None:
                logger.error(f"Unable to parse slowio {path}: {text.strip()!r}")
                continue
            if count > 0:
                records.append(AssembledRecord.of(AtomId.SLOW_IO, [operation, count]))
        return records


class UfsLifetimeCollector(AbstractCollector):
    """UFS device lifetime estimates A, B and C; all three are required."""

    name = "ufs_lifetime"

    def __init__(self, lifetime_a: str, lifetime_b: str, lifetime_c: str):
        self.lifetime_paths = (lifetime_a, lifetime_b, lifetime_c)

    @property
    def enabled(self) -> bool:
        return all(self.lifetime_paths)

    def collect(self) -> List[AssembledRecord]:
        values = []
        for path in self.lifetime_paths:
            value = read_scalar(path)
            if value is None:
                logger.error(f"Unable to read UFS lifetime from {path}")
                return []
            values.append(value)
        return [AssembledRecord.of(AtomId.STORAGE_UFS_HEALTH, values)]


class UfsResetCountCollector(AbstractCollector):
    name = "ufs_reset_count"

    def __init__(self, path: str):
        self.path = path

    @property
    def enabled(self) -> bool:
        return bool(self.path)

    def collect(self) -> List[AssembledRecord]:
        host_reset_count = read_scalar(self.path)
        if host_reset_count is None:
            logger.error("Unable to read host reset count")
            return []
        return [AssembledRecord.of(AtomId.UFS_RESET_COUNT, [host_reset_count])]


class _F2fsCollector(AbstractCollector):
    def __init__(self, f2fs_root: str, mount_point: str = "/data"):
        self.f2fs_root = f2fs_root
        self.mount_point = mount_point

    @property
    def enabled(self) -> bool:
        return bool(self.f2fs_root)

    def node(self, name: str) -> str:
        return os.path.join(f2fs_device_dir(self.f2fs_root, self.mount_point), name)


class F2fsStatsCollector(_F2fsCollector):
    """
    Segment, checkpoint, GC and block-move counters of the userdata f2fs.

    Counters that cannot be read are reported as 0; if none can be read the
    record is skipped.
    """

    name = "f2fs_stats"

    def collect(self) -> List[AssembledRecord]:
        device_dir = f2fs_device_dir(self.f2fs_root, self.mount_point)
        values = []
        read_any = False
        for node in F2FS_STATS_NODES:
            value = read_scalar(os.path.join(device_dir, node))
            if value is None:
                logger.debug(f"Unable to read {node}")
                value = 0
            else:
                read_any = True
            values.append(value)

        if not read_any:
            logger.error(f"No f2fs stats readable under {device_dir}")
            return []
        return [AssembledRecord.of(AtomId.F2FS_STATS, values)]


class F2fsCompressionCollector(_F2fsCollector):
    """
    f2fs compression counters.

    compr_saved_block and compr_new_inode are cleared after reading so that
    each record covers one day. If clearing fails the value is still reported.
    """

    name = "f2fs_compression_info"

    def collect(self) -> List[AssembledRecord]:
        written_blocks = read_scalar(self.node("compr_written_block"))
        if written_blocks is None:
            logger.error("Unable to read compression written blocks")
            return []

        saved = read_scalar_and_reset(self.node("compr_saved_block"))
        if saved is None:
            logger.error("Unable to read compression saved blocks")
            return []

        new_inodes = read_scalar_and_reset(self.node("compr_new_inode"))
        if new_inodes is None:
            logger.error("Unable to read compression new inodes")
            return []

        if not (saved.reset_ok and new_inodes.reset_ok):
            logger.error("f2fs compression counters were not cleared, next record will overlap")

        return [
            AssembledRecord.of(
                AtomId.F2FS_COMPRESSION_INFO,
                [written_blocks, saved.value, new_inodes.value],
            )
        ]


class BootStatsCollector(_F2fsCollector):
    """
    Userdata mount timings of the current boot.

    Reported once per process: after one successful send the collector
    disables itself.
    """

    name = "boot_stats"

    def __init__(self, f2fs_root: str, mount_point: str = "/data",
                 properties: Optional[PropertyReader] = None):
        super().__init__(f2fs_root, mount_point)
        self.properties = properties or PropertyReader()
        self.reported = False

    @property
    def enabled(self) -> bool:
        return bool(self.f2fs_root) and not self.reported

    def collect(self) -> List[AssembledRecord]:
        mounted_time_sec = read_scalar(self.node("mounted_time_sec"))
        if mounted_time_sec is None:
            logger.debug("Unable to read mounted_time_sec")
            return []

        fsck_time_ms = self.properties.get_int(FSCK_TIME_PROPERTY, 0)
        checkpoint_time_ms = self.properties.get_int(CHECKPOINT_TIME_PROPERTY, 0)
        if fsck_time_ms == 0 and checkpoint_time_ms == 0:
            logger.debug("Boot timing properties not yet initialized")
            return []

        return [
            AssembledRecord.of(
                AtomId.BOOT_STATS,
                [mounted_time_sec, fsck_time_ms // 1000, checkpoint_time_ms // 1000],
            )
        ]

    def on_sent(self, record: AssembledRecord, ok: bool) -> None:
        if ok:
            self.reported = True
