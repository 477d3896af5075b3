"""Tests for the generator lifecycle registry."""

from __future__ import annotations

import logging
import threading
import time

import pytest

from lexdoc.application.generator_registry import CachePolicy, GeneratorRegistry
from lexdoc.domain.errors import UnsupportedDocumentTypeError
from lexdoc.domain.models.enums import DocumentCategory, DocumentType
from lexdoc.generators import DEFAULT_FACTORIES, NonCompeteGenerator

NON_COMPETE = DocumentType.NON_COMPETE_AGREEMENT
SETTLEMENT = DocumentType.SETTLEMENT_AGREEMENT


@pytest.fixture
def registry(clock) -> GeneratorRegistry:
    policy = CachePolicy(ttl_seconds=10, sweep_interval_seconds=5)
    return GeneratorRegistry(DEFAULT_FACTORIES, policy, clock)


# ---------------------------------------------------------------------------
# Policy
# ---------------------------------------------------------------------------


class TestCachePolicy:
    def test_defaults(self):
        policy = CachePolicy()
        assert (policy.ttl_seconds, policy.sweep_interval_seconds) == (1800, 300)
        assert not policy.is_degenerate

    @pytest.mark.parametrize("ttl,interval", [(5, 10), (10, 10)])
    def test_degenerate(self, ttl, interval):
        assert CachePolicy(ttl, interval).is_degenerate

    def test_degenerate_policy_logs_warning(self, clock, caplog):
        with caplog.at_level(logging.WARNING, logger="lexdoc.application.generator_registry"):
            GeneratorRegistry(DEFAULT_FACTORIES, CachePolicy(5, 10), clock)
        assert "does not exceed the sweep interval" in caplog.text

    def test_sane_policy_is_quiet(self, clock, caplog):
        with caplog.at_level(logging.WARNING, logger="lexdoc.application.generator_registry"):
            GeneratorRegistry(DEFAULT_FACTORIES, CachePolicy(1800, 300), clock)
        assert caplog.text == ""


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


class TestLookup:
    def test_same_instance_within_ttl(self, registry, clock):
        first = registry.get(NON_COMPETE)
        clock.advance(9)
        assert registry.get(NON_COMPETE) is first

    def test_lazy_construction(self, registry):
        assert registry.status().active_count == 0
        assert isinstance(registry.get(NON_COMPETE), NonCompeteGenerator)
        assert registry.status().active_count == 1

    def test_string_keys(self, registry):
        assert registry.get("NON_COMPETE_AGREEMENT") is registry.get(NON_COMPETE)

    def test_unknown_key_returns_none(self, registry):
        assert registry.get("NOT_A_DOCUMENT") is None

    def test_known_but_unimplemented_type_returns_none(self, registry):
        assert registry.get(DocumentType.LEASE_AGREEMENT) is None
        assert not registry.is_supported(DocumentType.LEASE_AGREEMENT)

    def test_list_supported(self, registry):
        assert registry.list_supported() == [NON_COMPETE, SETTLEMENT]

    def test_category_of(self, registry):
        assert registry.category_of(NON_COMPETE) == DocumentCategory.EMPLOYMENT_HR
        assert registry.category_of("SETTLEMENT_AGREEMENT") == DocumentCategory.LITIGATION_DISPUTE
        assert registry.category_of("bogus") is None

    def test_register(self, registry):
        registry.register(DocumentType.LEASE_AGREEMENT, NonCompeteGenerator)
        assert registry.is_supported("LEASE_AGREEMENT")
        assert registry.status().registered_type_count == 3

    def test_register_replaces_cached_instance(self, registry):
        first = registry.get(NON_COMPETE)
        registry.register(NON_COMPETE, NonCompeteGenerator)
        assert registry.get(NON_COMPETE) is not first

    def test_concurrent_gets_share_instance(self, registry):
        results = []

        def worker():
            results.append(registry.get(NON_COMPETE))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len({id(r) for r in results}) == 1

    def test_listing_while_registering(self, registry):
        errors = []
        done = threading.Event()

        def reader():
            while not done.is_set():
                try:
                    registry.list_supported()
                    registry.is_supported(NON_COMPETE)
                except RuntimeError as exc:
                    errors.append(exc)

        thread = threading.Thread(target=reader)
        thread.start()
        try:
            for _ in range(50):
                for document_type in DocumentType:
                    registry.register(document_type, NonCompeteGenerator)
        finally:
            done.set()
            thread.join()
        assert errors == []
        assert len(registry.list_supported()) == len(DocumentType)

    def test_clock_is_required(self):
        with pytest.raises(TypeError):
            GeneratorRegistry(DEFAULT_FACTORIES, CachePolicy())


class TestLease:
    def test_unknown_key_raises(self, registry):
        with pytest.raises(UnsupportedDocumentTypeError, match="NOT_A_DOCUMENT") as info:
            with registry.lease("NOT_A_DOCUMENT"):
                pass
        assert info.value.key == "NOT_A_DOCUMENT"

    def test_lease_yields_cached_instance(self, registry):
        with registry.lease(NON_COMPETE) as generator:
            assert generator is registry.get(NON_COMPETE)


# ---------------------------------------------------------------------------
# Eviction
# ---------------------------------------------------------------------------


class TestSweep:
    def test_idle_instance_evicted_after_ttl(self, registry, clock):
        first = registry.get(NON_COMPETE)
        clock.advance(11)
        assert registry.sweep() == 1
        assert registry.status().active_count == 0
        assert registry.get(NON_COMPETE) is not first

    def test_recent_instance_kept(self, registry, clock):
        first = registry.get(NON_COMPETE)
        clock.advance(5)
        assert registry.sweep() == 0
        assert registry.get(NON_COMPETE) is first

    def test_get_refreshes_idle_time(self, registry, clock):
        first = registry.get(NON_COMPETE)
        clock.advance(8)
        registry.get(NON_COMPETE)
        clock.advance(8)
        assert registry.sweep() == 0
        assert registry.get(NON_COMPETE) is first

    def test_in_flight_instance_not_evicted(self, registry, clock):
        with registry.lease(NON_COMPETE) as generator:
            clock.advance(100)
            assert registry.sweep() == 0
            assert registry.get(NON_COMPETE) is generator

    def test_lease_release_refreshes_idle_time(self, registry, clock):
        with registry.lease(NON_COMPETE):
            clock.advance(100)
        assert registry.sweep() == 0
        clock.advance(11)
        assert registry.sweep() == 1

    def test_status_records_sweep_time(self, registry, clock):
        assert registry.status().last_sweep_at is None
        registry.sweep()
        assert registry.status().last_sweep_at == clock.now()

    def test_status_counts(self, registry):
        registry.get(NON_COMPETE)
        registry.get(SETTLEMENT)
        status = registry.status()
        assert (status.active_count, status.registered_type_count) == (2, 2)


class TestBackgroundSweep:
    def test_thread_evicts_and_shutdown_clears(self, clock):
        registry = GeneratorRegistry(
            DEFAULT_FACTORIES, CachePolicy(ttl_seconds=1, sweep_interval_seconds=0.01), clock
        )
        registry.get(NON_COMPETE)
        clock.advance(5)
        registry.start()
        try:
            deadline = time.monotonic() + 2
            while registry.status().active_count and time.monotonic() < deadline:
                time.sleep(0.01)
            assert registry.status().active_count == 0
            assert registry.status().last_sweep_at is not None
        finally:
            registry.shutdown()

    def test_shutdown_clears_cache(self, registry):
        registry.get(NON_COMPETE)
        registry.shutdown()
        assert registry.status().active_count == 0

    def test_start_is_idempotent(self, registry):
        registry.start()
        registry.start()
        registry.shutdown()
