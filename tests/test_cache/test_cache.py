"""Tests for the bounded thread-safe class cache."""

import logging
import threading

import pytest

from tailwindsmart.cache import CacheStats, ClassCache
from tailwindsmart.config import TailwindSmartConfig
from tailwindsmart.model.category import UNCLASSIFIED
from tailwindsmart.model.result import VALID


def _fill(cache: ClassCache, count: int, prefix: str = "k") -> None:
    for i in range(count):
        cache.put_classification(f"{prefix}{i}", UNCLASSIFIED)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_defaults(self):
        cache = ClassCache()
        assert cache.capacity == 10_000
        assert cache.evict_batch == 1_000

    def test_rejects_non_positive_capacity(self):
        with pytest.raises(ValueError, match="capacity"):
            ClassCache(capacity=0)

    def test_rejects_non_positive_batch(self):
        with pytest.raises(ValueError, match="evict_batch"):
            ClassCache(evict_batch=0)

    def test_batch_clamped_to_capacity(self):
        assert ClassCache(capacity=2, evict_batch=5).evict_batch == 2

    def test_from_config(self):
        cache = ClassCache.from_config(TailwindSmartConfig(cache_capacity=20, cache_evict_batch=4))
        assert cache.capacity == 20
        assert cache.evict_batch == 4

    def test_repr(self):
        cache = ClassCache(capacity=5)
        cache.put_validation("p-4", VALID)
        assert repr(cache) == "ClassCache(entries=1, capacity=5)"


# ---------------------------------------------------------------------------
# Storage and eviction
# ---------------------------------------------------------------------------


class TestStorage:
    def test_get_missing(self):
        cache = ClassCache()
        assert cache.get_classification("p-4") is None
        assert cache.get_validation("p-4") is None
        assert cache.get_suggestions("p-4") is None

    def test_round_trip_per_map(self):
        cache = ClassCache()
        cache.put_classification("p-4", UNCLASSIFIED)
        cache.put_validation("p-4", VALID)
        cache.put_suggestions("flx", ["flex"])
        assert cache.get_classification("p-4") is UNCLASSIFIED
        assert cache.get_validation("p-4") is VALID
        assert cache.get_suggestions("flx") == ("flex",)
        assert cache.stats() == CacheStats(1, 1, 1)
        assert cache.stats().total_size == 3

    def test_evicts_oldest_batch_when_full(self):
        cache = ClassCache(capacity=10, evict_batch=3)
        _fill(cache, 10)
        cache.put_classification("new", UNCLASSIFIED)
        assert cache.stats().classification_size == 8
        for key in ("k0", "k1", "k2"):
            assert cache.get_classification(key) is None
        assert cache.get_classification("k3") is UNCLASSIFIED
        assert cache.get_classification("new") is UNCLASSIFIED

    def test_overwrite_when_full_does_not_evict(self):
        cache = ClassCache(capacity=3, evict_batch=1)
        _fill(cache, 3)
        cache.put_classification("k0", UNCLASSIFIED)
        assert cache.stats().classification_size == 3

    def test_maps_are_bounded_independently(self):
        cache = ClassCache(capacity=2, evict_batch=1)
        _fill(cache, 2)
        cache.put_validation("v", VALID)
        assert cache.stats() == CacheStats(2, 1, 0)


class TestInvalidation:
    def test_invalidate_one_key(self):
        cache = ClassCache()
        cache.put_classification("p-4", UNCLASSIFIED)
        cache.put_validation("p-4", VALID)
        cache.put_validation("m-2", VALID)
        cache.invalidate("p-4")
        assert cache.get_classification("p-4") is None
        assert cache.get_validation("p-4") is None
        assert cache.get_validation("m-2") is VALID

    def test_invalidate_missing_key(self):
        ClassCache().invalidate("nope")

    def test_invalidate_all(self, caplog):
        cache = ClassCache()
        _fill(cache, 4)
        cache.put_suggestions("x", ())
        with caplog.at_level(logging.INFO, logger="tailwindsmart.cache"):
            cache.invalidate_all()
        assert cache.stats().total_size == 0
        assert "5 entries dropped" in caplog.text


class TestThreadSafety:
    def test_concurrent_writers_respect_capacity(self):
        cache = ClassCache(capacity=100, evict_batch=10)
        errors: list[BaseException] = []

        def worker(n: int) -> None:
            try:
                _fill(cache, 500, prefix=f"t{n}-")
                for i in range(500):
                    cache.get_classification(f"t{n}-{i}")
            except BaseException as exc:  # pragma: no cover
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert cache.stats().classification_size <= 100
