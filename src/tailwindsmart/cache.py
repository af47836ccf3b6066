"""Thread-safe bounded cache for per-class results.

One :class:`ClassCache` is built per project-like scope and passed to the
classifier and validator explicitly. It is never a module-level singleton.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any

from tailwindsmart.model.category import Classification
from tailwindsmart.model.result import ValidationResult

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10_000
DEFAULT_EVICT_BATCH = 1_000


@dataclass(frozen=True)
class CacheStats:
    classification_size: int
    validation_size: int
    suggestion_size: int

    @property
    def total_size(self) -> int:
        return self.classification_size + self.validation_size + self.suggestion_size


class ClassCache:
    """Bounded key-value maps for classification, validation and suggestions.

    All public methods hold one lock. When a map is full, inserting evicts
    its oldest entries (insertion order, not recency) so that roughly
    *evict_batch* free slots remain. Entries never expire; callers clear
    them with :meth:`invalidate` or :meth:`invalidate_all` when the class
    universe changes.
    """

    def __init__(
        self, capacity: int = DEFAULT_CAPACITY, evict_batch: int = DEFAULT_EVICT_BATCH
    ) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        if evict_batch < 1:
            raise ValueError(f"evict_batch must be positive, got {evict_batch}")
        self.capacity = capacity
        self.evict_batch = min(evict_batch, capacity)
        self._lock = threading.Lock()
        self._classifications: dict[str, Classification] = {}
        self._validations: dict[str, ValidationResult] = {}
        self._suggestions: dict[str, tuple[str, ...]] = {}

    @classmethod
    def from_config(cls, config: Any) -> ClassCache:
        """Build a cache sized by a :class:`~tailwindsmart.config.TailwindSmartConfig`."""
        return cls(capacity=config.cache_capacity, evict_batch=config.cache_evict_batch)

    # --- internal ---------------------------------------------------------------

    def _put(self, store: dict[str, Any], key: str, value: Any) -> None:
        if key not in store and len(store) >= self.capacity:
            excess = len(store) - self.capacity + self.evict_batch
            for stale in list(store)[:excess]:
                del store[stale]
            logger.debug("Evicted %d cache entries (capacity=%d)", excess, self.capacity)
        store[key] = value

    # --- classification ---------------------------------------------------------

    def get_classification(self, base: str) -> Classification | None:
        with self._lock:
            return self._classifications.get(base)

    def put_classification(self, base: str, classification: Classification) -> None:
        with self._lock:
            self._put(self._classifications, base, classification)

    # --- validation -------------------------------------------------------------

    def get_validation(self, class_name: str) -> ValidationResult | None:
        with self._lock:
            return self._validations.get(class_name)

    def put_validation(self, class_name: str, result: ValidationResult) -> None:
        with self._lock:
            self._put(self._validations, class_name, result)

    # --- suggestions ------------------------------------------------------------

    def get_suggestions(self, base: str) -> tuple[str, ...] | None:
        with self._lock:
            return self._suggestions.get(base)

    def put_suggestions(self, base: str, suggestions: tuple[str, ...]) -> None:
        with self._lock:
            self._put(self._suggestions, base, tuple(suggestions))

    # --- invalidation -----------------------------------------------------------

    def invalidate(self, key: str) -> None:
        """Drop *key* from every map."""
        with self._lock:
            self._classifications.pop(key, None)
            self._validations.pop(key, None)
            self._suggestions.pop(key, None)

    def invalidate_all(self) -> None:
        with self._lock:
            total = len(self._classifications) + len(self._validations) + len(self._suggestions)
            self._classifications.clear()
            self._validations.clear()
            self._suggestions.clear()
        logger.info("Class cache invalidated (%d entries dropped)", total)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                classification_size=len(self._classifications),
                validation_size=len(self._validations),
                suggestion_size=len(self._suggestions),
            )

    def __repr__(self) -> str:
        stats = self.stats()
        return f"ClassCache(entries={stats.total_size}, capacity={self.capacity})"
