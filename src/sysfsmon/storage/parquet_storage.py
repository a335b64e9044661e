"""
Parquet and NDJSON spool backends built on Polars.

Neither format supports in-place appends, so an append reads the existing
spool, concatenates the new rows and rewrites the file. Spools grow by a few
dozen rows per day, which keeps this cheap.
"""

import logging
from pathlib import Path
from typing import List, Optional, Literal
import polars as pl

from .base import DataStorage

logger = logging.getLogger(__name__)


class _FileStorage(DataStorage):
    """Append, existence and size handling common to both formats."""

    def append_dataframe(self, df: pl.DataFrame, path: str) -> None:
        if not self.file_exists(path):
            self.save_dataframe(df, path)
            logger.debug(f"Started spool {path}")
            return
        try:
            combined = pl.concat([self.load_dataframe(path), df], how="vertical_relaxed")
        except Exception as e:
            logger.error(f"Spool {path} cannot be extended: {e}")
            raise
        self.save_dataframe(combined, path)
        logger.debug(f"Spool {path} now holds {len(combined)} rows")

    def file_exists(self, path: str) -> bool:
        return Path(path).is_file()

    def get_file_size(self, path: str) -> int:
        try:
            return Path(path).stat().st_size
        except FileNotFoundError:
            return 0

    @staticmethod
    def _prepare_parent(path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)


class ParquetStorage(_FileStorage):
    """Compressed columnar spool."""

    suffix = ".parquet"

    def __init__(self, compression: Literal["snappy", "gzip", "brotli", "lz4", "zstd"] = "snappy"):
        self.compression = compression

    def save_dataframe(self, df: pl.DataFrame, path: str) -> None:
        self._prepare_parent(path)
        try:
            df.write_parquet(path, compression=self.compression)
        except Exception as e:
            logger.error(f"Failed to write Parquet spool {path}: {e}")
            raise

    def load_dataframe(self, path: str, columns: Optional[List[str]] = None) -> pl.DataFrame:
        return pl.read_parquet(path, columns=columns or None)


class JsonLinesStorage(_FileStorage):
    """One JSON object per record, readable with standard text tools."""

    suffix = ".jsonl"

    def save_dataframe(self, df: pl.DataFrame, path: str) -> None:
        self._prepare_parent(path)
        try:
            df.write_ndjson(path)
        except Exception as e:
            logger.error(f"Failed to write NDJSON spool {path}: {e}")
            raise

    def load_dataframe(self, path: str, columns: Optional[List[str]] = None) -> pl.DataFrame:
        df = pl.read_ndjson(path)
        return df.select(columns) if columns else df
