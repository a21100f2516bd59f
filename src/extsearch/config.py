"""Environment-driven configuration for external search.

Environment Variables:
    EXTSEARCH_GRAVATAR_BASE_URL: Gravatar profile endpoint (default: https://en.gravatar.com)
    EXTSEARCH_GRAVATAR_TIMEOUT_SECONDS: HTTP timeout for Gravatar calls (default: 30)
    EXTSEARCH_GRAVATAR_USER_AGENT: User-Agent header sent to Gravatar
    EXTSEARCH_MAX_WORKERS: Parallel lookups per entity (default: 1, sequential)
    EXTSEARCH_DOWNLOAD_PREVIEW_IMAGES: Set to "0" to skip preview image downloads
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final

logger = logging.getLogger(__name__)

ENV_GRAVATAR_BASE_URL: Final[str] = "EXTSEARCH_GRAVATAR_BASE_URL"
ENV_GRAVATAR_TIMEOUT_SECONDS: Final[str] = "EXTSEARCH_GRAVATAR_TIMEOUT_SECONDS"
ENV_GRAVATAR_USER_AGENT: Final[str] = "EXTSEARCH_GRAVATAR_USER_AGENT"
ENV_MAX_WORKERS: Final[str] = "EXTSEARCH_MAX_WORKERS"
ENV_DOWNLOAD_PREVIEW_IMAGES: Final[str] = "EXTSEARCH_DOWNLOAD_PREVIEW_IMAGES"

DEFAULT_GRAVATAR_BASE_URL: Final[str] = "https://en.gravatar.com"
DEFAULT_GRAVATAR_TIMEOUT_SECONDS: Final[float] = 30.0
DEFAULT_GRAVATAR_USER_AGENT: Final[str] = "extsearch/1.0"
DEFAULT_MAX_WORKERS: Final[int] = 1


class ExternalSearchConfigError(Exception):
    """Raised when external search configuration is invalid."""


@dataclass(frozen=True)
class ExternalSearchConfig:
    """External search configuration (immutable).

    Attributes:
        gravatar_base_url: Base URL profiles are fetched from.
        gravatar_timeout_seconds: Per-request HTTP timeout.
        gravatar_user_agent: User-Agent header value.
        max_workers: Number of lookups run concurrently for one entity.
        download_preview_images: Whether clues carry a downloaded preview image.
    """

    gravatar_base_url: str = DEFAULT_GRAVATAR_BASE_URL
    gravatar_timeout_seconds: float = DEFAULT_GRAVATAR_TIMEOUT_SECONDS
    gravatar_user_agent: str = DEFAULT_GRAVATAR_USER_AGENT
    max_workers: int = DEFAULT_MAX_WORKERS
    download_preview_images: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.gravatar_base_url.startswith(("http://", "https://")):
            raise ExternalSearchConfigError(
                f"{ENV_GRAVATAR_BASE_URL} must be an http(s) URL, got '{self.gravatar_base_url}'"
            )
        if self.gravatar_timeout_seconds <= 0:
            raise ExternalSearchConfigError(
                f"{ENV_GRAVATAR_TIMEOUT_SECONDS} must be positive, "
                f"got {self.gravatar_timeout_seconds}"
            )
        if self.max_workers <= 0:
            raise ExternalSearchConfigError(
                f"{ENV_MAX_WORKERS} must be a positive integer, got {self.max_workers}"
            )


def _get_env_bool(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    val = os.environ.get(key, "").strip().lower()
    if val in ("1", "true", "yes"):
        return True
    if val in ("0", "false", "no"):
        return False
    return default


def _parse_positive_int(env_var: str, default: int) -> int:
    """Parse a positive integer from environment variable.

    Raises:
        ExternalSearchConfigError: If value is set but not a positive integer.
    """
    raw = os.environ.get(env_var, "").strip()
    if not raw:
        return default

    try:
        value = int(raw)
    except ValueError as e:
        raise ExternalSearchConfigError(
            f"{env_var} must be a positive integer, got '{raw}'"
        ) from e

    if value <= 0:
        raise ExternalSearchConfigError(f"{env_var} must be a positive integer, got {value}")

    return value


def _parse_positive_float(env_var: str, default: float) -> float:
    """Parse a positive float from environment variable.

    Raises:
        ExternalSearchConfigError: If value is set but not a positive number.
    """
    raw = os.environ.get(env_var, "").strip()
    if not raw:
        return default

    try:
        value = float(raw)
    except ValueError as e:
        raise ExternalSearchConfigError(f"{env_var} must be a positive number, got '{raw}'") from e

    if value <= 0:
        raise ExternalSearchConfigError(f"{env_var} must be a positive number, got {value}")

    return value


def load_config() -> ExternalSearchConfig:
    """Load configuration from environment variables.

    Returns:
        Validated ExternalSearchConfig.

    Raises:
        ExternalSearchConfigError: If any variable holds an invalid value.
    """
    base_url = os.environ.get(ENV_GRAVATAR_BASE_URL, "").strip() or DEFAULT_GRAVATAR_BASE_URL
    user_agent = (
        os.environ.get(ENV_GRAVATAR_USER_AGENT, "").strip() or DEFAULT_GRAVATAR_USER_AGENT
    )

    config = ExternalSearchConfig(
        gravatar_base_url=base_url.rstrip("/"),
        gravatar_timeout_seconds=_parse_positive_float(
            ENV_GRAVATAR_TIMEOUT_SECONDS, DEFAULT_GRAVATAR_TIMEOUT_SECONDS
        ),
        gravatar_user_agent=user_agent,
        max_workers=_parse_positive_int(ENV_MAX_WORKERS, DEFAULT_MAX_WORKERS),
        download_preview_images=_get_env_bool(ENV_DOWNLOAD_PREVIEW_IMAGES, True),
    )
    logger.debug(
        "Loaded external search config: base_url=%s workers=%d previews=%s",
        config.gravatar_base_url,
        config.max_workers,
        config.download_preview_images,
    )
    return config
