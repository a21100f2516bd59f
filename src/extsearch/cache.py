"""Run-scoped result cache.

Holds the lookup results already obtained for an entity so providers can skip
re-querying keys they have answers for. Providers only ever see a read-only
snapshot of the cache; the orchestrating service owns writes.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class ResultCache(Protocol):
    """Protocol for result caches."""

    def get_results(self, *, provider_id: str, entity_key: str) -> list[Any]:
        """Return a snapshot of results stored for an entity.

        Args:
            provider_id: Provider that produced the results.
            entity_key: Key identifying the entity.

        Returns:
            A new list; mutating it does not affect the cache.
        """
        ...

    def add_result(self, *, provider_id: str, entity_key: str, result: Any) -> None:
        """Record a result for an entity."""
        ...


class InMemoryResultCache:
    """In-memory result cache.

    Single-process only. Thread-safe so parallel lookups for one entity can
    record their results concurrently.
    """

    def __init__(self) -> None:
        """Initialize empty cache."""
        self._store: dict[tuple[str, str], list[Any]] = {}
        self._lock = threading.Lock()

    def get_results(self, *, provider_id: str, entity_key: str) -> list[Any]:
        with self._lock:
            return list(self._store.get((provider_id, entity_key), []))

    def add_result(self, *, provider_id: str, entity_key: str, result: Any) -> None:
        with self._lock:
            self._store.setdefault((provider_id, entity_key), []).append(result)

    def clear(self) -> None:
        """Clear all cached results."""
        with self._lock:
            self._store.clear()

    @property
    def size(self) -> int:
        """Return the total number of cached results."""
        with self._lock:
            return sum(len(v) for v in self._store.values())
