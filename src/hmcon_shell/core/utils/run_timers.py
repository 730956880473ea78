# src/hmcon_shell/core/utils/run_timers.py
import time
from typing import Optional


class RunTimers:
    """
    Measures the wall time of an export pass.
    """

    def __init__(self):
        self._start_time: Optional[float] = None
        self._end_time: Optional[float] = None

    def start(self) -> None:
        self._start_time = time.perf_counter()
        self._end_time = None

    def stop(self) -> None:
        if self._start_time is not None:
            self._end_time = time.perf_counter()

    @property
    def duration(self) -> float:
        """Elapsed seconds; still counting while the timer runs."""
        if self._start_time is None:
            return 0.0
        if self._end_time is None:
            return time.perf_counter() - self._start_time
        return self._end_time - self._start_time

    def __repr__(self) -> str:
        return f"<RunTimers duration={self.duration:.4f}s>"
