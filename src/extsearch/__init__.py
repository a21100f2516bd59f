"""External search providers for entity enrichment.

Derives lookup keys from partially-known entities, queries external identity
services, and maps the returned profiles into clues for the host graph.
"""

from extsearch.models import (
    Clue,
    EntityCode,
    EntityMetadata,
    EntityType,
    ExternalSearchQuery,
    ExternalSearchRequest,
    QueryParameters,
)
from extsearch.service import ExternalSearchService, create_default_external_search_service

__all__ = [
    "Clue",
    "EntityCode",
    "EntityMetadata",
    "EntityType",
    "ExternalSearchQuery",
    "ExternalSearchRequest",
    "ExternalSearchService",
    "QueryParameters",
    "create_default_external_search_service",
]
