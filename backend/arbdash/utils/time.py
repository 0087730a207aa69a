"""Time utilities."""

from datetime import datetime, timezone
import time


def utc_now() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


class Timer:
    """Simple timer for measuring durations."""

    def __init__(self):
        self._start: float | None = None
        self._end: float | None = None

    def start(self) -> "Timer":
        """Start the timer."""
        self._start = time.perf_counter()
        self._end = None
        return self

    def stop(self) -> "Timer":
        """Stop the timer."""
        self._end = time.perf_counter()
        return self

    @property
    def elapsed_ms(self) -> float:
        """Get elapsed time in milliseconds."""
        if self._start is None:
            return 0.0
        end = self._end if self._end is not None else time.perf_counter()
        return (end - self._start) * 1000

    def __enter__(self) -> "Timer":
        return self.start()

    def __exit__(self, *args) -> None:
        self.stop()
