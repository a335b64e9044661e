"""
Storage module for the local record spool.

Records that cannot be (or should not be) sent to a remote stats service can
be spooled to disk, one row per record, in Parquet or newline-delimited JSON.
Polars handles the DataFrame operations.
"""

from .base import DataStorage
from .parquet_storage import JsonLinesStorage, ParquetStorage
from .factory import create_storage, create_storage_from_config
from .storage_config import StorageConfig

__all__ = ["DataStorage", "JsonLinesStorage", "ParquetStorage", "StorageConfig", "create_storage",
           "create_storage_from_config"]
