"""
The `[sink.storage]` table: which backend the record spool is written with.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict

SPOOL_FORMATS = ("parquet", "json")
PARQUET_COMPRESSIONS = ("snappy", "gzip", "brotli", "lz4", "zstd")


@dataclass(frozen=True)
class StorageConfig:
    """
    Spool backend settings.

    `compression` is only checked for Parquet spools; NDJSON is written
    uncompressed and ignores it.

    Raises:
        ValueError: On construction with an unknown format or compression.
    """

    format: str = "parquet"
    compression: str = "snappy"

    def __post_init__(self):
        if self.format not in SPOOL_FORMATS:
            raise ValueError(f"Unsupported storage format: {self.format}")
        if self.format == "parquet" and self.compression not in PARQUET_COMPRESSIONS:
            raise ValueError(f"Unsupported compression algorithm: {self.compression}")

    @classmethod
    def from_dict(cls, table: Dict[str, Any]) -> "StorageConfig":
        """Build from a parsed `[sink.storage]` table; unknown keys are rejected."""
        if not isinstance(table, dict):
            raise ValueError(f"Storage options must be a table, got {type(table).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(table) - known)
        if unknown:
            raise ValueError(f"Unknown storage option(s): {', '.join(unknown)}")
        return cls(**table)
