"""
Timers driving the collection loop.

The loop needs three things from a timer: a one-off settle delay after
launch, a periodic interval, and a blocking wait for the next expiry.
MonotonicTimer implements them on the monotonic clock; tests substitute a
timer that returns immediately.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..validation.exceptions import TimerError

logger = logging.getLogger(__name__)


class Timer(ABC):
    """Abstract base class for the collection loop's timing primitive."""

    @abstractmethod
    def settle(self, seconds: float) -> None:
        """Block once for `seconds` before the first cycle."""
        pass

    @abstractmethod
    def arm(self, interval: float) -> None:
        """Start periodic expiry every `interval` seconds, counted from now."""
        pass

    @abstractmethod
    def wait(self) -> None:
        """
        Block until the next expiry.

        Raises:
            TimerError: If the timer is not armed or cannot wait.
        """
        pass


class MonotonicTimer(Timer):
    """
    Periodic timer on `time.monotonic`.

    Deadlines advance by whole intervals from the armed start, so time spent
    running a cycle does not shift later expiries. If a cycle overruns one or
    more deadlines the missed expiries are dropped and the next future
    deadline is used.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep):
        self._clock = clock
        self._sleep = sleep
        self._interval: Optional[float] = None
        self._deadline: Optional[float] = None

    def settle(self, seconds: float) -> None:
        if seconds <= 0:
            return
        logger.debug(f"Settling for {seconds}s before first collection")
        self._sleep_for(seconds)

    def arm(self, interval: float) -> None:
        if interval <= 0:
            raise TimerError(f"Timer interval must be positive, got {interval}")
        self._interval = interval
        self._deadline = self._clock() + interval
        logger.debug(f"Timer armed with interval {interval}s")

    def wait(self) -> None:
        if self._interval is None or self._deadline is None:
            raise TimerError("Timer waited on before being armed")

        now = self._clock()
        if now >= self._deadline:
            missed = int((now - self._deadline) // self._interval)
            if missed:
                logger.warning(f"Timer overran {missed} interval(s)")
            self._deadline += (missed + 1) * self._interval
            return

        self._sleep_for(self._deadline - now)
        self._deadline += self._interval

    def _sleep_for(self, seconds: float) -> None:
        try:
            self._sleep(seconds)
        except (OSError, ValueError, OverflowError) as e:
            raise TimerError(f"Failed to sleep for {seconds}s: {e}") from e
