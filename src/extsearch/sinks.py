"""Clue sinks.

The host receives clues through a ClueSink. Transmission and persistence are
the host's concern; this module only defines the seam plus an in-memory
implementation for tests and local runs.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from extsearch.models import Clue

logger = logging.getLogger(__name__)


@runtime_checkable
class ClueSink(Protocol):
    """Protocol for clue sinks."""

    def emit(self, clue: Clue) -> None:
        """Hand a clue to the host."""
        ...


class InMemoryClueSink:
    """In-memory clue sink. Stores emitted clues in a list."""

    def __init__(self) -> None:
        self._clues: list[Clue] = []
        self._lock = threading.Lock()

    def emit(self, clue: Clue) -> None:
        with self._lock:
            self._clues.append(clue)
        logger.debug("Clue emitted: %s (provider=%s)", clue.code.key, clue.origin_provider_id)

    @property
    def clues(self) -> list[Clue]:
        """Return a copy of all emitted clues."""
        with self._lock:
            return list(self._clues)

    def clear(self) -> None:
        """Clear all emitted clues."""
        with self._lock:
            self._clues.clear()
