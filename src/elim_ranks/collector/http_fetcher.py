"""Blocking HTTP fetcher for the ranking page.

Uses ``httpx`` for the single ``GET`` the pipeline performs.  Redirects are
followed up to httpx's default limit.  Transport failures, redirect loops and
non-2xx final responses are raised as
:class:`~elim_ranks.core.exceptions.FetchError`; there is no retry.
"""

from __future__ import annotations

import logging

import httpx

from elim_ranks.config.settings import Settings, get_settings
from elim_ranks.core.exceptions import FetchError

logger = logging.getLogger(__name__)


def fetch_document(
    url: str | None = None,
    *,
    client: httpx.Client | None = None,
    settings: Settings | None = None,
) -> str:
    """Fetch a page and return its decoded body.

    Args:
        url: Target URL.  Defaults to ``settings.url``.
        client: Optional caller-owned :class:`httpx.Client`.  It is used as-is
            and left open.  When omitted a short-lived client is created.
        settings: Settings override.  Defaults to :func:`get_settings`.

    Returns:
        The response body decoded with the charset httpx detects.

    Raises:
        FetchError: On any transport error (including timeouts), a
            redirect chain longer than httpx allows, or a final response
            status outside the 2xx range.
    """
    settings = settings or get_settings()
    url = url or settings.url

    if client is None:
        with httpx.Client() as owned_client:
            return _get(owned_client, url, settings)
    return _get(client, url, settings)


def _get(client: httpx.Client, url: str, settings: Settings) -> str:
    try:
        response = client.get(
            url,
            timeout=settings.timeout,
            follow_redirects=True,
            headers={"User-Agent": settings.user_agent},
        )
    except httpx.TimeoutException as exc:
        logger.warning("collector: timeout fetching %s", url)
        raise FetchError(f"timeout fetching {url}", url=url, cause=exc) from exc
    except httpx.TooManyRedirects as exc:
        logger.warning("collector: too many redirects for %s", url)
        raise FetchError("too many redirects", url=url, cause=exc) from exc
    except httpx.RequestError as exc:
        logger.warning("collector: request error for %s: %s", url, exc)
        raise FetchError(f"request error: {exc}", url=url, cause=exc) from exc

    if not response.is_success:
        logger.info("collector: HTTP %d for %s", response.status_code, url)
        raise FetchError(
            f"HTTP {response.status_code}",
            url=url,
            status_code=response.status_code,
        )

    body = response.text
    logger.debug("collector: fetched %s (%d chars)", url, len(body))
    return body
