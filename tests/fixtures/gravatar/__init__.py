"""Gravatar profile fixtures."""

from tests.fixtures.gravatar.profiles import (
    ANN_EMAIL,
    ANN_PROFILE_HASH,
    ANN_PROFILE_ID,
    make_profile_payload,
    make_response_body,
)

__all__ = [
    "ANN_EMAIL",
    "ANN_PROFILE_HASH",
    "ANN_PROFILE_ID",
    "make_profile_payload",
    "make_response_body",
]
