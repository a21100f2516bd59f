"""Deterministic Gravatar profile payloads in the service's JSON format."""

from __future__ import annotations

import copy
from typing import Any

ANN_EMAIL = "ann@cluedin.com"
ANN_PROFILE_ID = "48219517"
ANN_PROFILE_HASH = "5F0C3E0D6F5A8BD4C2B2C9A1E1D8F3A7"

_ANN_PROFILE: dict[str, Any] = {
    "id": ANN_PROFILE_ID,
    "hash": ANN_PROFILE_HASH,
    "requestHash": "anncluedin",
    "profileUrl": "http://gravatar.com/anncluedin",
    "preferredUsername": "anncluedin",
    "thumbnailUrl": "https://secure.gravatar.com/avatar/5f0c3e0d6f5a8bd4c2b2c9a1e1d8f3a7?",
    "photos": [
        {
            "value": "https://secure.gravatar.com/avatar/5f0c3e0d6f5a8bd4c2b2c9a1e1d8f3a7",
            "type": "thumbnail",
        }
    ],
    "profileBackground": {"color": "#1a1a1a", "url": "https://cdn.example.org/bg.png"},
    "name": {"givenName": "Ann", "familyName": "Cluedin", "formatted": "Ann Cluedin"},
    "displayName": "Ann C",
    "aboutMe": "Data steward.",
    "currentLocation": "Copenhagen, Denmark",
    "phoneNumbers": [
        {"type": "mobile", "value": "+45 11 22 33 44"},
        {"type": "work", "value": "+45 55 66 77 88"},
    ],
    "emails": [
        {"primary": "true", "value": "Ann@CluedIn.com"},
        {"primary": "false", "value": "ann.private@mail.org"},
    ],
    "ims": [
        {"type": "skype", "value": "ann.cluedin"},
        {"type": "gtalk", "value": "ann.talk@mail.org"},
    ],
    "accounts": [
        {
            "domain": "twitter.com",
            "display": "@anncluedin",
            "url": "https://twitter.com/anncluedin",
            "username": "anncluedin",
            "verified": "true",
            "shortname": "twitter",
        },
        {
            "domain": "facebook.com",
            "display": "anncluedin",
            "url": None,
            "username": "anncluedin.fb",
            "verified": "true",
            "shortname": "facebook",
        },
    ],
    "urls": [
        {"value": "https://cluedin.com", "title": "Work"},
        {"value": None, "title": "Broken"},
    ],
    "currency": [{"type": "bitcoin", "value": "1BoatSLRHtKNngkdXEeobR76b53LETtpyT"}],
}


def make_profile_payload(**overrides: Any) -> dict[str, Any]:
    """Return a fresh copy of the sample profile with top-level overrides.

    An override value of ``None`` removes the key entirely.
    """
    payload = copy.deepcopy(_ANN_PROFILE)
    for key, value in overrides.items():
        if value is None:
            payload.pop(key, None)
        else:
            payload[key] = value
    return payload


def make_response_body(**overrides: Any) -> dict[str, Any]:
    """Wrap a profile payload in the ``{"entry": [...]}`` envelope."""
    return {"entry": [make_profile_payload(**overrides)]}
