"""
Interface of the record spool backends.

The spool sink hands every record over as a one-row Polars DataFrame. A
backend owns the on-disk format and the append strategy.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import polars as pl


class DataStorage(ABC):
    """A file format the spool can be kept in."""

    #: Conventional file suffix of the format.
    suffix: str = ""

    @abstractmethod
    def save_dataframe(self, df: pl.DataFrame, path: str) -> None:
        """Write `df` to `path`, replacing whatever is there."""
        pass

    @abstractmethod
    def load_dataframe(
        self, path: str, columns: Optional[List[str]] = None
    ) -> pl.DataFrame:
        """
        Read the spool at `path`.

        Args:
            path: Spool file
            columns: Restrict the result to these columns
        """
        pass

    @abstractmethod
    def append_dataframe(self, df: pl.DataFrame, path: str) -> None:
        """Add the rows of `df` to the end of the spool, creating it if missing."""
        pass

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def get_file_size(self, path: str) -> int:
        """Spool size in bytes; 0 when the file does not exist yet."""
        pass
