"""Diagnostics sinks for advisory provider warnings.

Providers report recoverable anomalies (e.g. an unrecognized account type in
a profile) through a DiagnosticsSink. Diagnostics never abort processing.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One advisory warning.

    Attributes:
        context: What was being processed (e.g. the profile id).
        message: Human readable description.
    """

    context: str
    message: str


@runtime_checkable
class DiagnosticsSink(Protocol):
    """Protocol for diagnostics sinks."""

    def warn(self, context: str, message: str) -> None:
        """Record an advisory warning.

        Args:
            context: What was being processed when the anomaly was seen.
            message: Description of the anomaly.
        """
        ...


class LoggingDiagnosticsSink:
    """Diagnostics sink that forwards warnings to the standard logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    def warn(self, context: str, message: str) -> None:
        self._logger.warning("%s [%s]", message, context)


class InMemoryDiagnosticsSink:
    """In-memory diagnostics sink for testing.

    Stores warnings in a list for later inspection. Also forwards each warning
    to the standard logger.
    """

    def __init__(self) -> None:
        """Initialize the in-memory sink."""
        self._diagnostics: list[Diagnostic] = []
        self._lock = threading.Lock()

    def warn(self, context: str, message: str) -> None:
        logger.warning("%s [%s]", message, context)
        with self._lock:
            self._diagnostics.append(Diagnostic(context=context, message=message))

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Return a copy of all recorded diagnostics."""
        with self._lock:
            return list(self._diagnostics)

    @property
    def messages(self) -> list[str]:
        """Return the messages of all recorded diagnostics."""
        return [d.message for d in self.diagnostics]

    def clear(self) -> None:
        """Clear all recorded diagnostics."""
        with self._lock:
            self._diagnostics.clear()
