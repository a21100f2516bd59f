"""Candidate lookup key extraction for Gravatar.

Source records are noisy: emails show up in name fields, aliases, and
delimiter-joined lists. Everything email-shaped that Gravatar has not already
answered for this entity becomes one lookup.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from extsearch.models import EntityType, ExternalSearchQuery, ExternalSearchRequest
from extsearch.providers.gravatar.model import GravatarResult
from extsearch.validation import is_guid, is_number, is_valid_email

logger = logging.getLogger(__name__)

ACCEPTED_ENTITY_TYPES: frozenset[EntityType] = frozenset(
    {EntityType.PERSON, EntityType.USER, EntityType.CONTACT}
)

_SEPARATORS_RE = re.compile(r"[,;|]")


def split_candidates(values: Iterable[str | None]) -> list[str]:
    """Split delimiter-joined values and deduplicate, keeping first occurrence.

    Fragments are whitespace-stripped; empty fragments are dropped. Fragments
    differing only in case count as one candidate.
    """
    seen: set[str] = set()
    out: list[str] = []
    for value in values:
        if not value:
            continue
        for fragment in _SEPARATORS_RE.split(value):
            fragment = fragment.strip()
            folded = fragment.lower()
            if fragment and folded not in seen:
                seen.add(folded)
                out.append(fragment)
    return out


def is_lookup_candidate(value: str, known_emails: set[str]) -> bool:
    """True if ``value`` is worth looking up.

    Args:
        value: Candidate string.
        known_emails: Lower-cased emails already answered for this entity.
    """
    if not value:
        return False
    if is_guid(value) or is_number(value):
        return False
    if not is_valid_email(value):
        return False
    return value.lower() not in known_emails


def extract_candidate_keys(
    request: ExternalSearchRequest,
    existing_results: Sequence[GravatarResult] = (),
) -> list[str]:
    """Derive the ordered, deduplicated candidate emails for a request.

    Args:
        request: Input record and its query parameters.
        existing_results: Snapshot of results already obtained for the entity.

    Returns:
        Candidate emails; empty when the entity type is not accepted.
    """
    metadata = request.entity_metadata
    if metadata.entity_type not in ACCEPTED_ENTITY_TYPES:
        return []

    params = request.query_parameters
    raw: list[str | None] = [params.email]
    raw.extend(sorted(params.email_addresses))
    raw.append(metadata.name)
    raw.append(metadata.display_name)
    raw.extend(sorted(metadata.aliases))

    known_emails = {r.email.lower() for r in existing_results}
    candidates = []
    for value in split_candidates(raw):
        if is_lookup_candidate(value, known_emails):
            candidates.append(value)
        else:
            logger.debug("Skipping Gravatar lookup candidate: %r", value)
    return candidates


def build_queries(
    provider_id: str,
    request: ExternalSearchRequest,
    existing_results: Sequence[GravatarResult] = (),
) -> list[ExternalSearchQuery]:
    """Build one query per candidate email."""
    entity_type = request.entity_metadata.entity_type
    return [
        ExternalSearchQuery(provider_id=provider_id, entity_type=entity_type, identifier=key)
        for key in extract_candidate_keys(request, existing_results)
    ]
