"""Elapsed-time measurement and smoothed timestamps."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .system import current_millisecond

__all__ = ["Ticker", "SmoothTicker"]

Clock = Callable[[], int]

_default_logger = logging.getLogger(__name__)


class Ticker:
    """Measures time in milliseconds since creation and since the last reset.

    When closed, a warning with the total time is logged if *print_log* is
    set and the time exceeds *min_ms*.
    """

    def __init__(
        self,
        min_ms: int = 0,
        print_log: bool = False,
        logger: Optional[logging.Logger] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._clock: Clock = clock if clock is not None else current_millisecond
        self._logger = logger if logger is not None else _default_logger
        self._print_log = print_log
        self._min_ms = min_ms
        self._closed = False
        self._created = self._begin = self._clock()

    def elapsed_time(self) -> int:
        """Milliseconds since the last reset."""
        return self._clock() - self._begin

    def created_time(self) -> int:
        """Milliseconds since creation."""
        return self._clock() - self._created

    def reset_time(self) -> None:
        """Restart the elapsed-time measurement."""
        self._begin = self._clock()

    def close(self) -> None:
        """Finish timing, logging the total once if asked to."""
        if self._closed:
            return
        self._closed = True
        taken = self.created_time()
        if self._print_log and taken > self._min_ms:
            self._logger.warning("take time: %dms", taken)

    def __enter__(self) -> "Ticker":
        return self

    def __exit__(self, *args) -> None:
        self.close()


class SmoothTicker:
    """Produces smoothed timestamps that follow the clock without jitter.

    Every *reset_ms* milliseconds the output resynchronises with the clock.
    """

    def __init__(self, reset_ms: int = 10000, clock: Optional[Clock] = None) -> None:
        self._reset_ms = reset_ms
        self._time_inc = 0.0
        self._first_time = 0
        self._last_time = 0
        self._pkt_count = 0
        self._ticker = Ticker(clock=clock)
        self._ticker.reset_time()

    def elapsed_time(self) -> int:
        """Smoothed milliseconds since the ticker started or was reset."""
        now_time = self._ticker.elapsed_time()
        if self._first_time == 0:
            if now_time < self._last_time:
                last_time = self._last_time - self._time_inc
                elapse_time = now_time - last_time
                self._pkt_count += 1
                self._time_inc += (elapse_time / self._pkt_count) / 3
                ret_time = int(last_time + self._time_inc)
                self._last_time = ret_time
                return ret_time
            self._first_time = now_time
            self._last_time = now_time
            self._pkt_count = 0
            self._time_inc = 0.0
            return now_time

        elapse_time = now_time - self._first_time
        self._pkt_count += 1
        self._time_inc += elapse_time // self._pkt_count
        ret_time = int(self._first_time + self._time_inc)
        if elapse_time > self._reset_ms:
            self._first_time = 0
        self._last_time = ret_time
        return ret_time

    def reset_time(self) -> None:
        """Start the timestamps again from zero."""
        self._first_time = 0
        self._pkt_count = 0
        self._ticker.reset_time()