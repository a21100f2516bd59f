"""Gravatar profile payload and lookup result models.

Field names follow the Gravatar JSON profile format (camelCase aliases).
Every collection is optional; "type"/"shortname" tags are open-ended strings.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _GravatarModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ProfileName(_GravatarModel):
    given_name: str | None = Field(default=None, alias="givenName")
    family_name: str | None = Field(default=None, alias="familyName")
    formatted: str | None = None


class ProfileBackground(_GravatarModel):
    color: str | None = None
    url: str | None = None


class ProfileAccount(_GravatarModel):
    """A linked social account."""

    shortname: str | None = None
    domain: str | None = None
    display: str | None = None
    url: str | None = None
    username: str | None = None
    verified: bool | None = None


class ProfileTypedValue(_GravatarModel):
    """A ``{"type": ..., "value": ...}`` sub-record (currency, IM, phone, photo)."""

    type: str | None = None
    value: str | None = None


class ProfileEmail(_GravatarModel):
    primary: bool | None = None
    value: str | None = None


class ProfileUrl(_GravatarModel):
    title: str | None = None
    value: str | None = None


class GravatarProfile(_GravatarModel):
    """One ``entry`` of a Gravatar profile response."""

    id: str
    hash: str
    request_hash: str | None = Field(default=None, alias="requestHash")
    profile_url: str | None = Field(default=None, alias="profileUrl")
    preferred_username: str | None = Field(default=None, alias="preferredUsername")
    thumbnail_url: str | None = Field(default=None, alias="thumbnailUrl")
    display_name: str | None = Field(default=None, alias="displayName")
    about_me: str | None = Field(default=None, alias="aboutMe")
    current_location: str | None = Field(default=None, alias="currentLocation")
    name: ProfileName | None = None
    profile_background: ProfileBackground | None = Field(default=None, alias="profileBackground")
    accounts: list[ProfileAccount] | None = None
    currency: list[ProfileTypedValue] | None = None
    ims: list[ProfileTypedValue] | None = None
    phone_numbers: list[ProfileTypedValue] | None = Field(default=None, alias="phoneNumbers")
    emails: list[ProfileEmail] | None = None
    urls: list[ProfileUrl] | None = None
    photos: list[ProfileTypedValue] | None = None

    @field_validator("name", "profile_background", mode="before")
    @classmethod
    def _empty_list_is_absent(cls, value: Any) -> Any:
        # Gravatar serializes empty objects as []
        if isinstance(value, list) and not value:
            return None
        return value


class GravatarResult(_GravatarModel):
    """A lookup result: the queried email paired with the profile found for it."""

    email: str
    profile: GravatarProfile
