"""System clock — implements ClockPort with a monotonic timer."""

import time

from lexdoc.domain.ports.clock import ClockPort


class SystemClock(ClockPort):
    """Wall-independent clock for measuring idle time."""

    def now(self) -> float:
        return time.monotonic()
