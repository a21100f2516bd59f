"""Gravatar profile to entity metadata mapping.

Maps a GravatarResult into EntityMetadata: identity codes, display fields,
aliases, typed vocabulary properties and external references. Sub-record tags
(account shortname, currency/IM/phone type) are an open string set; tags not
listed in the dispatch tables below are reported to the diagnostics sink and
skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from extsearch.diagnostics import DiagnosticsSink, LoggingDiagnosticsSink
from extsearch.models import EntityCode, EntityMetadata, EntityType
from extsearch.providers.gravatar.model import (
    GravatarProfile,
    GravatarResult,
    ProfileBackground,
    ProfileName,
)
from extsearch.providers.gravatar.vocabulary import GRAVATAR_USER_VOCABULARY as VOCAB
from extsearch.validation import is_valid_email
from extsearch.vocabulary import VocabularyKey

logger = logging.getLogger(__name__)

GRAVATAR_CODE_ORIGIN = "cluedin:gravatar"
EMAIL_CODE_ORIGIN = "cluedin:email"
PREVIEW_IMAGE_SUFFIX = "s=200"
EMAILS_SEPARATOR = ";"

ACCOUNT_PROPERTIES: dict[str, VocabularyKey] = {
    "facebook": VOCAB.social_facebook,
    "foursquare": VOCAB.social_foursquare,
    "google": VOCAB.social_google,
    "linkedin": VOCAB.social_linkedin,
    "twitter": VOCAB.social_twitter,
    "youtube": VOCAB.social_youtube,
    "blogger": VOCAB.social_blogger,
    "flickr": VOCAB.social_flickr,
    "goodreads": VOCAB.social_goodreads,
    "tripit": VOCAB.social_tripit,
    "tumblr": VOCAB.social_tumblr,
    "vimeo": VOCAB.social_vimeo,
    "wordpress": VOCAB.social_wordpress,
    "yahoo": VOCAB.social_yahoo,
}

CURRENCY_PROPERTIES: dict[str, VocabularyKey] = {
    "bitcoin": VOCAB.currency_bitcoin,
    "litecoin": VOCAB.currency_litecoin,
    "dogecoin": VOCAB.currency_dogecoin,
}

IM_PROPERTIES: dict[str, VocabularyKey] = {
    "aim": VOCAB.messaging_aim,
    "yahoo": VOCAB.messaging_yahoo,
    "icq": VOCAB.messaging_icq,
    "gtalk": VOCAB.messaging_gtalk,
    "skype": VOCAB.messaging_skype,
}

PHONE_NUMBER_PROPERTIES: dict[str, VocabularyKey] = {
    "mobile": VOCAB.phone_number_mobile,
    "home": VOCAB.phone_number_home,
    "work": VOCAB.phone_number_work,
}


def build_preview_image_url(thumbnail_url: str) -> str:
    """Thumbnail URL with the fixed size suffix appended."""
    return f"{thumbnail_url}{PREVIEW_IMAGE_SUFFIX}"


def origin_entity_code(result: GravatarResult) -> EntityCode:
    """Primary identity code: the Gravatar profile id."""
    return EntityCode.create(EntityType.USER, GRAVATAR_CODE_ORIGIN, result.profile.id)


class _EmailSet:
    """Case-insensitive, insertion-ordered set of emails."""

    def __init__(self) -> None:
        self._emails: dict[str, str] = {}

    def add(self, email: str | None) -> None:
        if email:
            self._emails.setdefault(email.lower(), email)

    def joined(self) -> str:
        return EMAILS_SEPARATOR.join(self._emails.values())


def _set_property(metadata: EntityMetadata, key: VocabularyKey, value: str | None) -> None:
    if value:
        metadata.properties[key.key] = value


def _context(profile: GravatarProfile) -> str:
    return f"gravatar profile {profile.id}"


def _map_aliases(metadata: EntityMetadata, profile: GravatarProfile) -> None:
    candidates = [profile.display_name, profile.preferred_username]
    name = profile.name
    if name is not None:
        candidates.append(name.formatted)
        if name.given_name and name.family_name:
            candidates.append(f"{name.given_name} {name.family_name}")
    metadata.aliases.update(a for a in candidates if a)


def _map_scalar_properties(
    metadata: EntityMetadata, profile: GravatarProfile, email: str
) -> None:
    name = profile.name or ProfileName()
    background = profile.profile_background or ProfileBackground()

    scalars: list[tuple[VocabularyKey, str | None]] = [
        (VOCAB.about_me, profile.about_me),
        (VOCAB.current_location, profile.current_location),
        (VOCAB.display_name, profile.display_name),
        (VOCAB.hash, profile.hash),
        (VOCAB.id, profile.id),
        (VOCAB.name_family_name, name.family_name),
        (VOCAB.name_given_name, name.given_name),
        (VOCAB.name_formatted, name.formatted),
        (VOCAB.preferred_username, profile.preferred_username),
        (VOCAB.request_hash, profile.request_hash),
        (VOCAB.profile_background_color, background.color),
        (VOCAB.profile_background_url, background.url),
        (VOCAB.profile_url, profile.profile_url),
        (VOCAB.thumbnail_url, profile.thumbnail_url),
        (VOCAB.email, email),
    ]
    for key, value in scalars:
        _set_property(metadata, key, value)


def _dispatch(
    metadata: EntityMetadata,
    table: dict[str, VocabularyKey],
    entries: Iterable[tuple[str | None, str | None]],
    *,
    kind: str,
    context: str,
    diagnostics: DiagnosticsSink,
) -> None:
    """Write one property per known tag; report unknown tags."""
    for tag, value in entries:
        key = table.get(tag or "")
        if key is None:
            diagnostics.warn(context, f"Unknown Gravatar {kind} Type: {tag}")
            continue
        _set_property(metadata, key, value)


def map_profile(
    result: GravatarResult,
    diagnostics: DiagnosticsSink | None = None,
) -> EntityMetadata:
    """Map a lookup result into entity metadata.

    Pure and deterministic: mapping the same result twice yields equal output.

    Args:
        result: The queried email and the profile found for it.
        diagnostics: Sink for unknown-tag warnings (logging sink if omitted).

    Returns:
        Mapped EntityMetadata of type ``/Infrastructure/User``.
    """
    diagnostics = diagnostics or LoggingDiagnosticsSink(logger)
    profile = result.profile
    context = _context(profile)
    name = profile.name
    code = origin_entity_code(result)

    metadata = EntityMetadata(
        entity_type=EntityType.USER,
        name=profile.display_name or profile.preferred_username,
        display_name=(name.formatted if name else None)
        or profile.display_name
        or profile.preferred_username,
        description=profile.about_me,
        uri=profile.profile_url,
        origin_entity_code=code,
    )

    metadata.codes.add(code)
    metadata.codes.add(EntityCode.create(EntityType.USER, GRAVATAR_CODE_ORIGIN, profile.hash))
    metadata.codes.add(EntityCode.create(EntityType.USER, EMAIL_CODE_ORIGIN, result.email))

    _map_aliases(metadata, profile)

    emails = _EmailSet()
    emails.add(result.email)
    for profile_email in profile.emails or []:
        emails.add(profile_email.value)
        if profile_email.value:
            metadata.codes.add(
                EntityCode.create(EntityType.USER, EMAIL_CODE_ORIGIN, profile_email.value)
            )

    _map_scalar_properties(metadata, profile, result.email)

    _dispatch(
        metadata,
        ACCOUNT_PROPERTIES,
        ((a.shortname, a.url or a.username) for a in profile.accounts or []),
        kind="Account",
        context=context,
        diagnostics=diagnostics,
    )
    _dispatch(
        metadata,
        CURRENCY_PROPERTIES,
        ((c.type, c.value) for c in profile.currency or []),
        kind="Currency",
        context=context,
        diagnostics=diagnostics,
    )

    ims = profile.ims or []
    for im in ims:
        # Email-shaped IM handles double as addresses.
        if is_valid_email(im.value):
            emails.add(im.value)
    _dispatch(
        metadata,
        IM_PROPERTIES,
        ((im.type, im.value) for im in ims),
        kind="IM account",
        context=context,
        diagnostics=diagnostics,
    )
    _dispatch(
        metadata,
        PHONE_NUMBER_PROPERTIES,
        ((p.type, p.value) for p in profile.phone_numbers or []),
        kind="Phone Number",
        context=context,
        diagnostics=diagnostics,
    )

    for url in profile.urls or []:
        if url.value is not None:
            metadata.external_references.add(url.value)

    metadata.properties[VOCAB.emails.key] = emails.joined()
    return metadata
