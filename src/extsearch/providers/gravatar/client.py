"""HTTP client for the Gravatar profile service.

Profiles are addressed by the MD5 hash of the trimmed, lower-cased email:
``GET {base_url}/{md5}.json`` returns ``{"entry": [profile, ...]}`` or 404.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from extsearch.config import (
    DEFAULT_GRAVATAR_BASE_URL,
    DEFAULT_GRAVATAR_TIMEOUT_SECONDS,
    DEFAULT_GRAVATAR_USER_AGENT,
)
from extsearch.providers.gravatar.model import GravatarProfile

logger = logging.getLogger(__name__)


class GravatarFetchError(Exception):
    """Raised when a Gravatar request fails or returns an unparseable payload."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


def email_hash(email: str) -> str:
    """Return the Gravatar hash for an email address."""
    return hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()  # noqa: S324


class GravatarClient:
    """Synchronous Gravatar client.

    Issues exactly one request per call; retries and backoff are left to the
    caller.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_GRAVATAR_BASE_URL,
        timeout_seconds: float = DEFAULT_GRAVATAR_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_GRAVATAR_USER_AGENT,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the Gravatar client.

        Args:
            base_url: Profile endpoint root.
            timeout_seconds: HTTP timeout used when the client owns its connection.
            user_agent: User-Agent header value.
            http_client: Optional httpx.Client for dependency injection (testing).
        """
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._headers = {"Accept": "application/json", "User-Agent": user_agent}
        self._http_client = http_client

    def profile_url(self, email: str) -> str:
        """URL of the JSON profile for an email."""
        return f"{self._base_url}/{email_hash(email)}.json"

    def get_profile(self, email: str) -> GravatarProfile | None:
        """Fetch the profile registered for an email.

        Args:
            email: Email address to look up.

        Returns:
            The first profile entry, or None if Gravatar has no profile.

        Raises:
            GravatarFetchError: On network, HTTP or payload errors.
        """
        response = self._get(self.profile_url(email))
        if response.status_code == 404:
            return None

        try:
            response.raise_for_status()
            data: Any = response.json()
        except httpx.HTTPStatusError as exc:
            raise GravatarFetchError(f"Gravatar request failed: {exc}") from exc
        except ValueError as exc:
            raise GravatarFetchError(f"Gravatar returned invalid JSON: {exc}") from exc

        entries = data.get("entry") if isinstance(data, dict) else None
        if not entries:
            return None

        try:
            return GravatarProfile.model_validate(entries[0])
        except ValidationError as exc:
            raise GravatarFetchError(f"Gravatar profile payload is invalid: {exc}") from exc

    def download(self, url: str) -> tuple[str | None, bytes]:
        """Download a binary resource (e.g. a thumbnail).

        Returns:
            Tuple of (content type, body).

        Raises:
            GravatarFetchError: On network or HTTP errors.
        """
        response = self._get(url)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise GravatarFetchError(f"Gravatar download failed: {exc}") from exc
        return response.headers.get("content-type"), response.content

    def _get(self, url: str) -> httpx.Response:
        client = self._http_client
        should_close = False
        if client is None:
            client = httpx.Client(timeout=self._timeout_seconds, follow_redirects=True)
            should_close = True
        try:
            return client.get(url, headers=self._headers)
        except httpx.RequestError as exc:
            raise GravatarFetchError(f"Gravatar request to {url} failed: {exc}") from exc
        finally:
            if should_close:
                client.close()
