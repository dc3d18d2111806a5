"""Wall-clock timer wrapped around a search call."""

from __future__ import annotations

import time


class RunTimer:
    """Measures elapsed time between ``start`` and ``stop``.

    Can be used as a context manager.
    """

    def __init__(self) -> None:
        self._start_time: float | None = None
        self._end_time: float | None = None

    def start(self) -> None:
        self._start_time = time.perf_counter()
        self._end_time = None

    def stop(self) -> None:
        if self._start_time is not None and self._end_time is None:
            self._end_time = time.perf_counter()

    @property
    def running(self) -> bool:
        return self._start_time is not None and self._end_time is None

    @property
    def elapsed(self) -> float:
        """Seconds elapsed; keeps counting while the timer is running."""
        if self._start_time is None:
            return 0.0
        end = self._end_time if self._end_time is not None else time.perf_counter()
        return end - self._start_time

    def format(self) -> str:
        """Render as e.g. ``"2 seconds and 534/1000"``."""
        elapsed = self.elapsed
        seconds = int(elapsed)
        milliseconds = int((elapsed - seconds) * 1000)
        return f"{seconds} seconds and {milliseconds}/1000"

    def __enter__(self) -> "RunTimer":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
