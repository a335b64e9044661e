"""
Sink that writes every record to the log.
"""

import logging
from typing import List

from .base import ReportingSink

logger = logging.getLogger(__name__)


class LoggingSink(ReportingSink):
    """Logs each record at INFO level. Always succeeds."""

    def __init__(self, log: logging.Logger = logger):
        self.log = log
        self.sent_count = 0

    def send(self, reverse_domain_name: str, atom_id: int, values: List[int]) -> bool:
        self.sent_count += 1
        self.log.info(f"atom {reverse_domain_name}/{atom_id}: {values}")
        return True
