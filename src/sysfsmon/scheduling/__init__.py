"""
Collection scheduling: the timing primitive and the hourly/daily loop.
"""

from .scheduler import CollectionScheduler, build_scheduler
from .timer import MonotonicTimer, Timer

__all__ = [
    "CollectionScheduler",
    "build_scheduler",
    "MonotonicTimer",
    "Timer",
]
