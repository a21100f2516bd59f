"""Vocabulary registry.

A vocabulary is a fixed, versioned set of named property slots a provider is
allowed to populate. Keys are durable schema: once published, a key's full
name must never change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

logger = logging.getLogger(__name__)


class VocabularyKeyDataType(StrEnum):
    """Data type of a vocabulary key."""

    TEXT = "Text"
    EMAIL = "Email"
    URI = "Uri"
    PHONE_NUMBER = "PhoneNumber"
    PERSON_NAME = "PersonName"
    GEOGRAPHY_LOCATION = "GeographyLocation"


class VocabularyKeyVisibility(StrEnum):
    """Visibility of a vocabulary key in host surfaces."""

    VISIBLE = "Visible"
    HIDDEN = "Hidden"
    HIDDEN_IN_FRONTEND_UI = "HiddenInFrontendUI"


class VocabularyError(Exception):
    """Raised when a vocabulary is defined inconsistently."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class VocabularyKey:
    """A single named property slot.

    Attributes:
        key: Fully-qualified key, e.g. ``gravatar.userProfile.aboutMe``.
        name: Local name within the vocabulary.
        data_type: Data type of the stored value.
        visibility: Visibility in host surfaces.
    """

    key: str
    name: str
    data_type: VocabularyKeyDataType = VocabularyKeyDataType.TEXT
    visibility: VocabularyKeyVisibility = VocabularyKeyVisibility.VISIBLE

    def __str__(self) -> str:
        return self.key


@dataclass
class Vocabulary:
    """Base class for vocabularies.

    Subclasses declare their keys in ``__init__`` via :meth:`add` and may map
    them onto keys of a core vocabulary via :meth:`add_mapping`.
    """

    vocabulary_name: str
    key_prefix: str
    key_separator: str = "."
    _keys: dict[str, VocabularyKey] = field(default_factory=dict, repr=False)
    _mappings: dict[str, str] = field(default_factory=dict, repr=False)

    def add(
        self,
        name: str,
        data_type: VocabularyKeyDataType = VocabularyKeyDataType.TEXT,
        visibility: VocabularyKeyVisibility = VocabularyKeyVisibility.VISIBLE,
    ) -> VocabularyKey:
        """Declare a key in this vocabulary.

        Raises:
            VocabularyError: If the key is already declared.
        """
        full_key = f"{self.key_prefix}{self.key_separator}{name}"
        if full_key in self._keys:
            raise VocabularyError(f"Duplicate vocabulary key: {full_key}")
        vocab_key = VocabularyKey(
            key=full_key, name=name, data_type=data_type, visibility=visibility
        )
        self._keys[full_key] = vocab_key
        return vocab_key

    def add_mapping(self, source: VocabularyKey, target: VocabularyKey) -> None:
        """Map one of this vocabulary's keys onto a core vocabulary key.

        Raises:
            VocabularyError: If ``source`` does not belong to this vocabulary.
        """
        if source.key not in self._keys:
            raise VocabularyError(
                f"Cannot map {source.key}: not a key of vocabulary {self.vocabulary_name}"
            )
        self._mappings[source.key] = target.key

    def mapped_key(self, key: VocabularyKey | str) -> str | None:
        """Return the core key a vocabulary key is mapped onto, if any."""
        return self._mappings.get(str(key))

    @property
    def keys(self) -> list[VocabularyKey]:
        """All declared keys, in declaration order."""
        return list(self._keys.values())

    def __contains__(self, key: object) -> bool:
        return str(key) in self._keys


class CoreUserVocabulary(Vocabulary):
    """Host-owned core vocabulary for users (the ``user.*`` keys)."""

    def __init__(self) -> None:
        super().__init__(vocabulary_name="User", key_prefix="user")

        self.email = self.add("email", VocabularyKeyDataType.EMAIL)
        self.email_addresses = self.add("emailAddresses", VocabularyKeyDataType.EMAIL)
        self.first_name = self.add("firstName")
        self.last_name = self.add("lastName")
        self.full_name = self.add("fullName", VocabularyKeyDataType.PERSON_NAME)
        self.location = self.add("location", VocabularyKeyDataType.GEOGRAPHY_LOCATION)

        self.social_facebook = self.add("social.facebook", VocabularyKeyDataType.URI)
        self.social_foursquare = self.add("social.foursquare", VocabularyKeyDataType.URI)
        self.social_google_plus = self.add("social.googleplus", VocabularyKeyDataType.URI)
        self.social_linkedin = self.add("social.linkedIn", VocabularyKeyDataType.URI)
        self.social_twitter = self.add("social.twitter", VocabularyKeyDataType.URI)
        self.social_youtube = self.add("social.youTube", VocabularyKeyDataType.URI)
        self.social_blogger = self.add("social.blogger", VocabularyKeyDataType.URI)
        self.social_flickr = self.add("social.flickr", VocabularyKeyDataType.URI)
        self.social_goodreads = self.add("social.goodReads", VocabularyKeyDataType.URI)
        self.social_tripit = self.add("social.tripIt", VocabularyKeyDataType.URI)
        self.social_tumblr = self.add("social.tumblr", VocabularyKeyDataType.URI)
        self.social_vimeo = self.add("social.vimeo", VocabularyKeyDataType.URI)
        self.social_wordpress = self.add("social.wordPress", VocabularyKeyDataType.URI)
        self.social_yahoo = self.add("social.yahoo", VocabularyKeyDataType.URI)

        self.messaging_aim = self.add("messaging.aim")
        self.messaging_yahoo = self.add("messaging.yahoo")
        self.messaging_icq = self.add("messaging.icq")
        self.messaging_google_talk = self.add("messaging.googleTalk")
        self.messaging_skype = self.add("messaging.skype")

        self.mobile_number = self.add("mobileNumber", VocabularyKeyDataType.PHONE_NUMBER)
        self.home_phone_number = self.add("homePhoneNumber", VocabularyKeyDataType.PHONE_NUMBER)
        self.phone_number = self.add("phoneNumber", VocabularyKeyDataType.PHONE_NUMBER)


CORE_USER_VOCABULARY = CoreUserVocabulary()
