"""External search provider registry.

Providers are looked up either by id (fail-closed) or by the entity type they
accept, which is how the host decides which providers run for a record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from extsearch.models import EntityType, ExternalSearchProvider

logger = logging.getLogger(__name__)


class ProviderNotRegisteredError(Exception):
    """Raised when a provider id is looked up that nobody registered."""

    def __init__(self, provider_id: str) -> None:
        self.provider_id = provider_id
        super().__init__(f"No external search provider with id {provider_id!r}")


class DuplicateProviderError(Exception):
    """Raised when a second provider claims an id already in use."""

    def __init__(self, provider_id: str) -> None:
        self.provider_id = provider_id
        super().__init__(f"External search provider id {provider_id!r} is already taken")


@dataclass(frozen=True, slots=True)
class ProviderDescriptor:
    """A registered provider together with the entity types it enriches."""

    provider_id: str
    accepted_entity_types: frozenset[EntityType]
    provider: ExternalSearchProvider

    def accepts(self, entity_type: EntityType) -> bool:
        return entity_type in self.accepted_entity_types


@dataclass
class ExternalSearchProviderRegistry:
    """Registry of external search providers, in registration order."""

    _providers: dict[str, ProviderDescriptor] = field(default_factory=dict)

    def register(self, provider: ExternalSearchProvider) -> ProviderDescriptor:
        """Register a provider and return its descriptor.

        Raises:
            DuplicateProviderError: If the provider id is already registered.
        """
        pid = provider.provider_id
        if pid in self._providers:
            raise DuplicateProviderError(pid)

        descriptor = ProviderDescriptor(
            provider_id=pid,
            accepted_entity_types=frozenset(provider.accepted_entity_types),
            provider=provider,
        )
        self._providers[pid] = descriptor
        logger.info(
            "Registered external search provider %s for %s",
            pid,
            ", ".join(sorted(descriptor.accepted_entity_types)),
        )
        return descriptor

    def get(self, provider_id: str) -> ProviderDescriptor:
        """Look up a provider by id.

        Raises:
            ProviderNotRegisteredError: If provider_id is not registered.
        """
        try:
            return self._providers[provider_id]
        except KeyError:
            raise ProviderNotRegisteredError(provider_id) from None

    def providers_for(self, entity_type: EntityType) -> list[ProviderDescriptor]:
        """Providers that accept ``entity_type``, in registration order."""
        return [d for d in self._providers.values() if d.accepts(entity_type)]

    def list_providers(self) -> list[ProviderDescriptor]:
        return list(self._providers.values())
