"""
Selects the spool backend named in `[sink.storage]`.
"""

import logging

from .base import DataStorage
from .parquet_storage import JsonLinesStorage, ParquetStorage
from .storage_config import PARQUET_COMPRESSIONS, StorageConfig

logger = logging.getLogger(__name__)


def create_storage(format_type: str = "parquet", compression: str = "snappy") -> DataStorage:
    """
    Build the spool backend for a format.

    `compression` is only meaningful for Parquet; NDJSON spools are written
    uncompressed.

    Raises:
        ValueError: If the format or Parquet compression is not supported
    """
    if format_type == "json":
        logger.debug("Spooling records as newline-delimited JSON")
        return JsonLinesStorage()
    if format_type != "parquet":
        raise ValueError(f"Unsupported storage format: {format_type}")
    if compression not in PARQUET_COMPRESSIONS:
        raise ValueError(f"Unsupported compression algorithm: {compression}")
    logger.debug(f"Spooling records as Parquet ({compression})")
    return ParquetStorage(compression=compression)


def create_storage_from_config(storage_config: StorageConfig) -> DataStorage:
    return create_storage(storage_config.format, storage_config.compression)
