"""
Snapshot sources: readers and parsers for procfs/sysfs nodes, mount table
lookups and system properties.
"""

from .base import FixedArityFileSource, KeyValueFileSource, SnapshotSource
from .mounts import f2fs_device_dir, find_mount_device_name
from .properties import PropertyReader, run_command
from .readers import (
    ResetReading,
    parse_fixed_arity,
    parse_int_sequence,
    parse_key_value_text,
    parse_scalar,
    parse_unsigned,
    read_fixed_arity_line,
    read_key_value_file,
    read_scalar,
    read_scalar_and_reset,
    read_text,
    read_unsigned,
    writeback,
)

__all__ = [
    "SnapshotSource",
    "KeyValueFileSource",
    "FixedArityFileSource",
    "find_mount_device_name",
    "f2fs_device_dir",
    "PropertyReader",
    "run_command",
    "ResetReading",
    "parse_fixed_arity",
    "parse_int_sequence",
    "parse_key_value_text",
    "parse_scalar",
    "parse_unsigned",
    "read_fixed_arity_line",
    "read_key_value_file",
    "read_scalar",
    "read_scalar_and_reset",
    "read_text",
    "read_unsigned",
    "writeback",
]
