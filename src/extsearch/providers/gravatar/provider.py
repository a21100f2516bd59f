"""Gravatar external search provider.

Enriches persons, users and contacts by looking up each candidate email on
Gravatar and mapping the returned profile into a user clue.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from extsearch.config import ExternalSearchConfig
from extsearch.diagnostics import DiagnosticsSink, LoggingDiagnosticsSink
from extsearch.models import (
    Clue,
    EntityMetadata,
    EntityType,
    ExternalSearchQuery,
    ExternalSearchRequest,
    PreviewImage,
)
from extsearch.providers.gravatar import mapper, queries
from extsearch.providers.gravatar.client import GravatarClient, GravatarFetchError
from extsearch.providers.gravatar.model import GravatarResult

logger = logging.getLogger(__name__)

GRAVATAR_PROVIDER_ID = "gravatar"


class GravatarProvider:
    """Gravatar external search provider.

    Implements the ExternalSearchProvider contract.
    """

    def __init__(
        self,
        *,
        client: GravatarClient | None = None,
        diagnostics: DiagnosticsSink | None = None,
        config: ExternalSearchConfig | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            client: Gravatar client (built from ``config`` if omitted).
            diagnostics: Sink for unknown-tag warnings.
            config: External search configuration.
        """
        self._config = config or ExternalSearchConfig()
        self._client = client or GravatarClient(
            base_url=self._config.gravatar_base_url,
            timeout_seconds=self._config.gravatar_timeout_seconds,
            user_agent=self._config.gravatar_user_agent,
        )
        self._diagnostics = diagnostics or LoggingDiagnosticsSink(logger)

    @property
    def provider_id(self) -> str:
        """Unique provider identifier."""
        return GRAVATAR_PROVIDER_ID

    @property
    def accepted_entity_types(self) -> frozenset[EntityType]:
        """Persons, users and contacts."""
        return queries.ACCEPTED_ENTITY_TYPES

    def accepts(self, entity_type: EntityType) -> bool:
        return entity_type in queries.ACCEPTED_ENTITY_TYPES

    def build_queries(
        self,
        request: ExternalSearchRequest,
        existing_results: Sequence[GravatarResult] = (),
    ) -> list[ExternalSearchQuery]:
        """One query per candidate email not yet answered for this entity."""
        return queries.build_queries(self.provider_id, request, existing_results)

    def execute_search(self, query: ExternalSearchQuery) -> GravatarResult | None:
        """Look up one candidate email.

        Returns:
            The result, or None if the key is empty or Gravatar has no profile.

        Raises:
            GravatarFetchError: On transport or payload failure (not retried).
        """
        email = query.identifier
        if not email:
            return None

        profile = self._client.get_profile(email)
        if profile is None:
            logger.debug("No Gravatar profile for %s", email)
            return None

        return GravatarResult(email=email, profile=profile)

    def build_clues(self, query: ExternalSearchQuery, result: GravatarResult) -> list[Clue]:
        """Build the single user clue for a result."""
        metadata = self.get_primary_entity_metadata(result)
        preview = None
        if self._config.download_preview_images:
            preview = self.get_primary_entity_preview_image(result)

        clue = Clue(
            code=mapper.origin_entity_code(result),
            origin_provider_id=self.provider_id,
            data=metadata,
            preview_image=preview,
        )
        return [clue]

    def get_primary_entity_metadata(self, result: GravatarResult) -> EntityMetadata:
        return mapper.map_profile(result, self._diagnostics)

    def get_primary_entity_preview_image(self, result: GravatarResult) -> PreviewImage | None:
        """Download the profile thumbnail at preview size.

        Download failures are logged and yield None.
        """
        thumbnail_url = result.profile.thumbnail_url
        if not thumbnail_url:
            return None

        url = mapper.build_preview_image_url(thumbnail_url)
        try:
            content_type, data = self._client.download(url)
        except GravatarFetchError as exc:
            logger.warning("Preview image download failed for %s: %s", url, exc)
            return None

        return PreviewImage(source_url=url, content_type=content_type, data=data)
