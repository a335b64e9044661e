"""
Sink that appends records to a local spool file.

Each record becomes one row: receive time, reverse domain name, atom id and
the list of field values. The storage backend (Parquet or NDJSON) comes from
the storage factory.
"""

import logging
import time
from pathlib import Path
from typing import Callable, List

import polars as pl

from ..storage import DataStorage
from .base import ReportingSink

logger = logging.getLogger(__name__)

SPOOL_SCHEMA = {
    "timestamp": pl.Float64,
    "reverse_domain_name": pl.Utf8,
    "atom_id": pl.Int64,
    "values": pl.List(pl.Int64),
}


class SpoolSink(ReportingSink):
    """
    Appends records to a spool file through a DataStorage backend.

    Args:
        storage: Storage backend to write through.
        path: Spool file location.
        clock: Wall-clock source for the timestamp column.
    """

    def __init__(self, storage: DataStorage, path: Path, clock: Callable[[], float] = time.time):
        self.storage = storage
        self.path = Path(path)
        self.clock = clock

    def send(self, reverse_domain_name: str, atom_id: int, values: List[int]) -> bool:
        try:
            # Values outside the Int64 range fail here, not in the backend.
            row = pl.DataFrame(
                {
                    "timestamp": [self.clock()],
                    "reverse_domain_name": [reverse_domain_name],
                    "atom_id": [atom_id],
                    "values": [list(values)],
                },
                schema=SPOOL_SCHEMA,
            )
            self.storage.append_dataframe(row, str(self.path))
        except Exception as e:
            logger.error(f"Failed to spool atom {atom_id} to {self.path}: {e}")
            return False
        return True
