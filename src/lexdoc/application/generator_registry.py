"""Generator lifecycle registry.

Generators are constructed lazily on first request and cached per document
type. A background sweep evicts instances that have been idle longer than
the configured TTL; instances leased for an in-flight render are never
evicted.

Usage::

    registry = GeneratorRegistry(DEFAULT_FACTORIES, CachePolicy(1800, 300), SystemClock())
    registry.start()
    with registry.lease(DocumentType.NON_COMPETE_AGREEMENT) as generator:
        model = generator.build_model(user_input)
    registry.shutdown()
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Mapping, Optional

from lexdoc.domain.errors import UnsupportedDocumentTypeError
from lexdoc.domain.models.enums import DOCUMENT_CATEGORIES, DocumentCategory, DocumentType
from lexdoc.domain.ports.clock import ClockPort
from lexdoc.generators.base import DocumentGenerator

logger = logging.getLogger(__name__)

GeneratorFactory = Callable[[], DocumentGenerator]


@dataclass(frozen=True)
class CachePolicy:
    """Idle-time eviction settings, in seconds."""

    ttl_seconds: float = 1800.0
    sweep_interval_seconds: float = 300.0

    @property
    def is_degenerate(self) -> bool:
        """True when instances may be evicted on the very next sweep after use."""
        return self.ttl_seconds <= self.sweep_interval_seconds


@dataclass
class RendererInstance:
    """Cache entry for one constructed generator."""

    key: DocumentType
    behavior: DocumentGenerator
    last_used_at: float
    in_flight: int = 0


@dataclass(frozen=True)
class RegistryStatus:
    active_count: int
    registered_type_count: int
    last_sweep_at: Optional[float]


class GeneratorRegistry:
    """Lazily construct, cache and evict document generators."""

    def __init__(
        self,
        factories: Mapping[DocumentType, GeneratorFactory],
        policy: Optional[CachePolicy],
        clock: ClockPort,
    ) -> None:
        self._factories: dict[DocumentType, GeneratorFactory] = dict(factories)
        self._policy = policy or CachePolicy()
        self._clock = clock
        self._instances: dict[DocumentType, RendererInstance] = {}
        self._lock = threading.Lock()
        self._last_sweep_at: Optional[float] = None
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

        if self._policy.is_degenerate:
            logger.warning(
                "Cache TTL (%ss) does not exceed the sweep interval (%ss); "
                "idle generators may be evicted immediately",
                self._policy.ttl_seconds,
                self._policy.sweep_interval_seconds,
            )

    @property
    def policy(self) -> CachePolicy:
        return self._policy

    # -- Catalog -------------------------------------------------------------

    def register(self, key: DocumentType, factory: GeneratorFactory) -> None:
        """Add or replace the factory for *key*; a cached instance is dropped."""
        with self._lock:
            self._factories[key] = factory
            self._instances.pop(key, None)

    def is_supported(self, key: DocumentType | str) -> bool:
        resolved = self._resolve(key)
        if resolved is None:
            return False
        with self._lock:
            return resolved in self._factories

    def list_supported(self) -> list[DocumentType]:
        with self._lock:
            keys = list(self._factories)
        return sorted(keys, key=lambda t: t.value)

    @staticmethod
    def category_of(key: DocumentType | str) -> Optional[DocumentCategory]:
        resolved = GeneratorRegistry._resolve(key)
        if resolved is None:
            return None
        return DOCUMENT_CATEGORIES.get(resolved)

    # -- Access --------------------------------------------------------------

    def get(self, key: DocumentType | str) -> Optional[DocumentGenerator]:
        """Return the cached generator for *key*, constructing it if needed.

        Returns ``None`` for unsupported keys.
        """
        resolved = self._resolve(key)
        if resolved is None:
            return None
        with self._lock:
            entry = self._acquire(resolved)
            return entry.behavior if entry else None

    @contextmanager
    def lease(self, key: DocumentType | str) -> Iterator[DocumentGenerator]:
        """Hold a generator for the duration of a render.

        Raises:
            UnsupportedDocumentTypeError: If no factory is registered for *key*.
        """
        resolved = self._resolve(key)
        with self._lock:
            entry = self._acquire(resolved) if resolved is not None else None
            if entry is None:
                raise UnsupportedDocumentTypeError(str(getattr(key, "value", key)))
            entry.in_flight += 1
        try:
            yield entry.behavior
        finally:
            with self._lock:
                entry.in_flight -= 1
                entry.last_used_at = self._clock.now()

    # -- Eviction ------------------------------------------------------------

    def sweep(self) -> int:
        """Evict idle instances and return how many were removed."""
        with self._lock:
            now = self._clock.now()
            expired = [
                key
                for key, entry in self._instances.items()
                if entry.in_flight == 0 and now - entry.last_used_at > self._policy.ttl_seconds
            ]
            for key in expired:
                del self._instances[key]
            self._last_sweep_at = now

        for key in expired:
            logger.debug("Evicted idle generator: %s", key.value)
        return len(expired)

    def start(self) -> None:
        """Run :meth:`sweep` periodically on a daemon thread."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._sweep_loop, name="lexdoc-registry-sweep", daemon=True
        )
        self._thread.start()

    def shutdown(self) -> None:
        """Stop the sweep thread and drop every cached instance."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=self._policy.sweep_interval_seconds + 1)
            self._thread = None
        with self._lock:
            self._instances.clear()

    def status(self) -> RegistryStatus:
        with self._lock:
            return RegistryStatus(
                active_count=len(self._instances),
                registered_type_count=len(self._factories),
                last_sweep_at=self._last_sweep_at,
            )

    # -- Internals -----------------------------------------------------------

    def _sweep_loop(self) -> None:
        while not self._stop.wait(self._policy.sweep_interval_seconds):
            try:
                evicted = self.sweep()
            except Exception:
                logger.exception("Generator sweep failed")
                continue
            if evicted:
                logger.info("Swept %d idle generator(s)", evicted)

    def _acquire(self, key: DocumentType) -> Optional[RendererInstance]:
        # Caller holds the lock.
        now = self._clock.now()
        entry = self._instances.get(key)
        if entry is None:
            factory = self._factories.get(key)
            if factory is None:
                return None
            entry = RendererInstance(key=key, behavior=factory(), last_used_at=now)
            self._instances[key] = entry
            logger.debug("Constructed generator: %s", key.value)
        else:
            entry.last_used_at = now
        return entry

    @staticmethod
    def _resolve(key: DocumentType | str) -> Optional[DocumentType]:
        if isinstance(key, DocumentType):
            return key
        try:
            return DocumentType(key)
        except ValueError:
            return None
