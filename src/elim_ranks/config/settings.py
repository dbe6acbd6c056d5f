"""Collector settings loaded from environment variables.

Uses Pydantic Settings v2.  Every field can be overridden with an
``ELIM_RANKS_``-prefixed environment variable or a ``.env`` file:

    ELIM_RANKS_URL=http://localhost:8080/elim_ranks
    ELIM_RANKS_TIMEOUT=10

Usage::

    from elim_ranks.config.settings import get_settings

    settings = get_settings()
    settings.url
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from elim_ranks.collector.config import DEFAULT_TIMEOUT, ELIM_RANKS_URL, USER_AGENT


class Settings(BaseSettings):
    """Runtime configuration for the ranking collector."""

    model_config = SettingsConfigDict(
        env_prefix="ELIM_RANKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = ELIM_RANKS_URL
    """Page that embeds the ``ranks`` table.  Point at a mirror for testing."""

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    """Deadline for the page request in seconds."""

    user_agent: str = USER_AGENT
    """``User-Agent`` header sent with the page request."""

    log_level: str = "INFO"
    """Logging verbosity passed to ``configure_logging``."""


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings singleton.

    In tests, call ``get_settings.cache_clear()`` after patching environment
    variables.
    """
    return Settings()
