"""Gravatar external search provider."""

from extsearch.providers.gravatar.client import GravatarClient, GravatarFetchError
from extsearch.providers.gravatar.model import GravatarProfile, GravatarResult
from extsearch.providers.gravatar.provider import GRAVATAR_PROVIDER_ID, GravatarProvider

__all__ = [
    "GRAVATAR_PROVIDER_ID",
    "GravatarClient",
    "GravatarFetchError",
    "GravatarProfile",
    "GravatarProvider",
    "GravatarResult",
]
