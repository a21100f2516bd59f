"""External search domain models.

Defines the provider contract types shared by every external search provider:
- EntityType, EntityCode, EntityMetadata
- QueryParameters, ExternalSearchRequest, ExternalSearchQuery
- PreviewImage, Clue
- ExternalSearchProvider protocol
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from extsearch.vocabulary import CORE_USER_VOCABULARY


class EntityType(StrEnum):
    """Entity types understood by the host graph."""

    PERSON = "/Person"
    ORGANIZATION = "/Organization"
    USER = "/Infrastructure/User"
    CONTACT = "/Infrastructure/Contact"


class EntityCode(BaseModel):
    """Identity code used by the host to correlate facts about one entity.

    Attributes:
        entity_type: Entity type the code identifies.
        origin: Code origin, e.g. "cluedin:gravatar".
        value: Lower-cased identifying value.
    """

    model_config = ConfigDict(frozen=True)

    entity_type: EntityType
    origin: str
    value: str

    @classmethod
    def create(cls, entity_type: EntityType, origin: str, value: str) -> EntityCode:
        """Build a code, lower-casing the value."""
        return cls(entity_type=entity_type, origin=origin, value=value.lower())

    @property
    def key(self) -> str:
        """Stable string form: ``{type}#{origin}:{value}``."""
        return f"{self.entity_type.value}#{self.origin}:{self.value}"


class EntityMetadata(BaseModel):
    """Metadata describing one entity.

    Used both as the input record handed to a provider and as the mapped
    output a provider produces from an external profile.

    Attributes:
        entity_type: Type of the entity.
        name: Primary name.
        display_name: Human friendly name.
        description: Free text description.
        uri: Canonical URI of the entity.
        origin_entity_code: Code of the system the metadata came from.
        codes: Identity codes.
        aliases: Alternative names.
        properties: Vocabulary key to value, in insertion order.
        external_references: External URIs describing the entity.
    """

    entity_type: EntityType
    name: str | None = None
    display_name: str | None = None
    description: str | None = None
    uri: str | None = None
    origin_entity_code: EntityCode | None = None
    codes: set[EntityCode] = Field(default_factory=set)
    aliases: set[str] = Field(default_factory=set)
    properties: dict[str, str] = Field(default_factory=dict)
    external_references: set[str] = Field(default_factory=set)


class QueryParameters(BaseModel):
    """Typed query parameters derived from an input record."""

    email: str | None = None
    email_addresses: set[str] = Field(default_factory=set)


class ExternalSearchRequest(BaseModel):
    """Request to run external search for a single entity.

    Attributes:
        entity_metadata: The partially-known input record.
        query_parameters: Lookup parameters extracted from the record.
        entity_key: Host identifier of the record, if it has one.
    """

    entity_metadata: EntityMetadata
    query_parameters: QueryParameters = Field(default_factory=QueryParameters)
    entity_key: str | None = None

    @property
    def result_key(self) -> str | None:
        """Key under which results for this entity are remembered across runs.

        The caller-supplied ``entity_key`` wins, then the origin entity code.
        None when the record carries no stable identity; such a record never
        shares previous results with another.
        """
        if self.entity_key:
            return self.entity_key
        code = self.entity_metadata.origin_entity_code
        return code.key if code is not None else None

    @classmethod
    def from_entity(
        cls, metadata: EntityMetadata, entity_key: str | None = None
    ) -> ExternalSearchRequest:
        """Build a request, reading query parameters from the record's properties.

        ``user.email`` maps to ``email`` and ``user.emailAddresses`` (a
        semicolon-joined list) maps to ``email_addresses``.
        """
        email = metadata.properties.get(CORE_USER_VOCABULARY.email.key) or None
        raw_addresses = metadata.properties.get(CORE_USER_VOCABULARY.email_addresses.key, "")
        addresses = {a for a in raw_addresses.split(";") if a}
        return cls(
            entity_metadata=metadata,
            query_parameters=QueryParameters(email=email, email_addresses=addresses),
            entity_key=entity_key,
        )


class ExternalSearchQuery(BaseModel):
    """One logical lookup against an external provider.

    Attributes:
        provider_id: Provider that built the query.
        entity_type: Entity type of the record the query was derived from.
        identifier: The lookup key (for Gravatar, a candidate email).
    """

    model_config = ConfigDict(frozen=True)

    provider_id: str
    entity_type: EntityType
    identifier: str


class PreviewImage(BaseModel):
    """Preview image downloaded for a clue."""

    model_config = ConfigDict(ser_json_bytes="base64")

    source_url: str
    content_type: str | None = None
    data: bytes


class Clue(BaseModel):
    """Unit of evidence handed to the host.

    Attributes:
        code: Origin entity code of the clue.
        origin_provider_id: Provider that produced the clue.
        data: Mapped entity metadata.
        preview_image: Optional preview image.
    """

    code: EntityCode
    origin_provider_id: str
    data: EntityMetadata
    preview_image: PreviewImage | None = None


@runtime_checkable
class ExternalSearchProvider(Protocol):
    """Contract every external search provider implements."""

    @property
    def provider_id(self) -> str:
        """Unique identifier for this provider."""
        ...

    @property
    def accepted_entity_types(self) -> frozenset[EntityType]:
        """Entity types the provider is willing to enrich."""
        ...

    def build_queries(
        self,
        request: ExternalSearchRequest,
        existing_results: list[Any],
    ) -> list[ExternalSearchQuery]:
        """Derive the lookups worth running for a request.

        Args:
            request: The input record and its query parameters.
            existing_results: Read-only snapshot of results already obtained
                for this entity.

        Returns:
            Queries to execute, in deterministic order.
        """
        ...

    def execute_search(self, query: ExternalSearchQuery) -> Any | None:
        """Run one lookup. Returns None when the provider has no match."""
        ...

    def build_clues(self, query: ExternalSearchQuery, result: Any) -> list[Clue]:
        """Turn a lookup result into clues for the host."""
        ...
