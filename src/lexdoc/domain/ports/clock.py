"""Port: Clock — monotonic time source for idle-time bookkeeping."""

from abc import ABC, abstractmethod


class ClockPort(ABC):
    """Contract for reading the current time in seconds."""

    @abstractmethod
    def now(self) -> float:
        """Return a monotonic timestamp in seconds."""
        ...
