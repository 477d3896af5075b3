"""Storage backends for generated documents."""

from lexdoc.infrastructure.storage.local_store import LocalOutputStore

__all__ = ["LocalOutputStore"]
