"""External search service orchestrator.

Runs one provider against one entity:

1. Resolve provider (fail-closed on unknown id)
2. Snapshot previously obtained results for the entity from the ResultCache
3. Build queries; no queries means nothing to do
4. Execute each query independently (optionally in a thread pool); a failure
   for one key is recorded and does not stop sibling keys
5. Build clues and emit them to the ClueSink; a key whose clues fail to build
   counts as failed
6. Record results in the ResultCache, only for entities with a stable key
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

from extsearch.cache import InMemoryResultCache, ResultCache
from extsearch.config import ExternalSearchConfig, load_config
from extsearch.diagnostics import DiagnosticsSink
from extsearch.models import Clue, ExternalSearchQuery, ExternalSearchRequest
from extsearch.registry import (
    ExternalSearchProviderRegistry,
    ProviderDescriptor,
    ProviderNotRegisteredError,
)
from extsearch.sinks import ClueSink

logger = logging.getLogger(__name__)


class ExternalSearchServiceError(Exception):
    """Raised when the external search service encounters a fatal error."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class QueryFailure:
    """A lookup that raised instead of returning.

    Attributes:
        query: The query that failed.
        error: String form of the raised exception.
    """

    query: ExternalSearchQuery
    error: str


@dataclass
class SearchOutcome:
    """Result of running one provider for one entity.

    Attributes:
        queries: Queries built for the entity, in execution order.
        results: Non-empty lookup results, in query order.
        clues: Clues emitted to the sink.
        failures: Queries whose lookup raised.
    """

    queries: list[ExternalSearchQuery] = field(default_factory=list)
    results: list[Any] = field(default_factory=list)
    clues: list[Clue] = field(default_factory=list)
    failures: list[QueryFailure] = field(default_factory=list)


class ExternalSearchService:
    """Orchestrates external search requests through registered providers."""

    def __init__(
        self,
        *,
        registry: ExternalSearchProviderRegistry,
        clue_sink: ClueSink,
        result_cache: ResultCache | None = None,
        max_workers: int = 1,
    ) -> None:
        """Initialize the service.

        Args:
            registry: Provider registry.
            clue_sink: Where clues are handed to the host.
            result_cache: Run-scoped cache of results per entity.
            max_workers: Concurrent lookups per entity (1 = sequential).
        """
        self._registry = registry
        self._clue_sink = clue_sink
        self._result_cache = result_cache if result_cache is not None else InMemoryResultCache()
        self._max_workers = max_workers

    def search(self, *, provider_id: str, request: ExternalSearchRequest) -> SearchOutcome:
        """Run a provider for one entity.

        Args:
            provider_id: ID of the provider to use.
            request: The entity to enrich.

        Returns:
            SearchOutcome describing queries, results, clues and failures.

        Raises:
            ExternalSearchServiceError: If the provider is not registered.
        """
        try:
            descriptor = self._registry.get(provider_id)
        except ProviderNotRegisteredError as exc:
            raise ExternalSearchServiceError(str(exc)) from exc
        return self._run(descriptor, request)

    def search_all(self, request: ExternalSearchRequest) -> dict[str, SearchOutcome]:
        """Run every provider that accepts the entity's type.

        Returns:
            Outcome per provider id, in registration order. Empty when no
            provider accepts the entity type.
        """
        entity_type = request.entity_metadata.entity_type
        return {
            d.provider_id: self._run(d, request)
            for d in self._registry.providers_for(entity_type)
        }

    def _run(self, descriptor: ProviderDescriptor, request: ExternalSearchRequest) -> SearchOutcome:
        provider_id = descriptor.provider_id
        provider = descriptor.provider
        result_key = request.result_key
        existing = (
            self._result_cache.get_results(provider_id=provider_id, entity_key=result_key)
            if result_key is not None
            else []
        )

        outcome = SearchOutcome(queries=provider.build_queries(request, existing))
        if not outcome.queries:
            logger.debug("No %s queries for entity %s", provider_id, result_key)
            return outcome

        for query, result, error in self._execute_all(provider, outcome.queries):
            clues: list[Clue] = []
            if error is None and result is not None:
                try:
                    clues = provider.build_clues(query, result)
                except Exception as exc:
                    error = exc
            if error is not None:
                logger.warning(
                    "%s lookup failed for %r: %s", provider_id, query.identifier, error
                )
                outcome.failures.append(QueryFailure(query=query, error=str(error)))
                continue
            if result is None:
                continue

            for clue in clues:
                self._clue_sink.emit(clue)
                outcome.clues.append(clue)
            outcome.results.append(result)
            # Only results whose clues reached the sink are remembered.
            if result_key is not None:
                self._result_cache.add_result(
                    provider_id=provider_id, entity_key=result_key, result=result
                )

        logger.info(
            "External search %s for %s: queries=%d results=%d clues=%d failures=%d",
            provider_id,
            result_key,
            len(outcome.queries),
            len(outcome.results),
            len(outcome.clues),
            len(outcome.failures),
        )
        return outcome

    def list_providers(self) -> list[dict[str, Any]]:
        """List all registered providers with their metadata."""
        return [
            {
                "provider_id": d.provider_id,
                "accepted_entity_types": sorted(t.value for t in d.accepted_entity_types),
            }
            for d in self._registry.list_providers()
        ]

    def _execute_all(
        self,
        provider: Any,
        queries: list[ExternalSearchQuery],
    ) -> list[tuple[ExternalSearchQuery, Any | None, Exception | None]]:
        """Execute every query, capturing per-query exceptions. Preserves order."""

        def run(query: ExternalSearchQuery) -> tuple[ExternalSearchQuery, Any, Exception | None]:
            try:
                return query, provider.execute_search(query), None
            except Exception as exc:
                return query, None, exc

        if self._max_workers <= 1 or len(queries) <= 1:
            return [run(q) for q in queries]

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            return list(pool.map(run, queries))


def create_default_external_search_service(
    *,
    clue_sink: ClueSink,
    diagnostics: DiagnosticsSink | None = None,
    config: ExternalSearchConfig | None = None,
) -> ExternalSearchService:
    """Create an ExternalSearchService with all built-in providers registered.

    Args:
        clue_sink: Where clues are handed to the host.
        diagnostics: Sink for provider warnings.
        config: Configuration (loaded from the environment if omitted).
    """
    from extsearch.providers.gravatar.provider import GravatarProvider

    config = config or load_config()

    registry = ExternalSearchProviderRegistry()
    registry.register(GravatarProvider(diagnostics=diagnostics, config=config))

    return ExternalSearchService(
        registry=registry,
        clue_sink=clue_sink,
        result_cache=InMemoryResultCache(),
        max_workers=config.max_workers,
    )
