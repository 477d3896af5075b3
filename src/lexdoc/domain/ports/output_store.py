"""Port: Output store — the managed directory generated files live in."""

from abc import ABC, abstractmethod
from pathlib import Path


class OutputStorePort(ABC):
    """Contract for locating, probing and removing generated artifacts."""

    @abstractmethod
    def path_for(self, filename: str) -> Path:
        """Return the absolute path *filename* maps to inside the store."""

    @abstractmethod
    def exists(self, filename: str) -> bool:
        """Return ``True`` if *filename* is present in the store."""

    @abstractmethod
    def delete(self, filename: str) -> None:
        """Remove *filename* from the store (missing files are ignored)."""
