"""
Mount table lookups.

f2fs exposes its counters under /sys/fs/f2fs/<block device>, so the collector
needs the name of the block device backing the userdata partition.
"""

import logging
import os

import psutil

logger = logging.getLogger(__name__)


def find_mount_device_name(mount_point: str = "/data") -> str:
    """
    Return the basename of the device mounted at `mount_point`.

    Args:
        mount_point: Mount directory to look up.

    Returns:
        Device basename (e.g. "dm-8"), or an empty string when nothing is
        mounted there or the mount table cannot be read.
    """
    try:
        partitions = psutil.disk_partitions(all=True)
    except OSError as e:
        logger.error(f"Error reading the mount table: {e}")
        return ""

    for partition in partitions:
        if partition.mountpoint == mount_point:
            return os.path.basename(partition.device)

    logger.debug(f"No device mounted at {mount_point}")
    return ""


def f2fs_device_dir(f2fs_stats_root: str, mount_point: str = "/data") -> str:
    """Directory holding the f2fs counters of the device mounted at `mount_point`."""
    if not f2fs_stats_root:
        return ""
    return f2fs_stats_root + find_mount_device_name(mount_point)
