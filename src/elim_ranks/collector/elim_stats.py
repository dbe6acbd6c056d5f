"""Elimination ranking collector.

Pipeline::

    fetch_document()  →  collect_scripts_from_html()  →  find_declared_array()
                                                           ├─ parse_script()
                                                           ├─ declaration_query() / iter_captures()
                                                           └─ materialize()

Scripts are examined in document order and the search stops at the first
``ranks = [...]`` declaration found.  A script that cannot be parsed is
logged and skipped; every other error aborts the run.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx

from elim_ranks.collector.config import RANKS_VARIABLE
from elim_ranks.collector.http_fetcher import fetch_document
from elim_ranks.collector.js_query import (
    VALUE_CAPTURE,
    declaration_query,
    iter_captures,
    parse_script,
)
from elim_ranks.collector.materializer import materialize
from elim_ranks.collector.script_collector import collect_scripts_from_html
from elim_ranks.collector.values import JsArray
from elim_ranks.config.settings import Settings, get_settings
from elim_ranks.core.exceptions import RanksNotFoundError, ScriptParseError

logger = logging.getLogger(__name__)


def find_declared_array(scripts: Sequence[str], name: str = RANKS_VARIABLE) -> JsArray:
    """Return the first array literal assigned to *name* across *scripts*.

    Args:
        scripts: Script texts in document order.
        name: Declared variable name to look for.

    Returns:
        The materialized array.

    Raises:
        RanksNotFoundError: If no script declares *name* with an array literal.
        NumberParseError: If the matched literal holds an invalid number.
        CompositeKeyError: If the matched literal uses an array or object as a key.
    """
    query = declaration_query(name, "array")

    for index, script in enumerate(scripts):
        try:
            parsed = parse_script(script, script_index=index)
        except ScriptParseError as exc:
            logger.warning("collector: skipping script %d: %s", index, exc)
            continue

        for node in iter_captures(parsed, query, VALUE_CAPTURE):
            value = materialize(node, parsed.source)
            logger.info(
                "collector: found '%s' in script %d (%d entries)", name, index, len(value)
            )
            return value

    raise RanksNotFoundError(name=name, scripts_searched=len(scripts))


def extract_ranks(scripts: Sequence[str]) -> JsArray:
    """Return the ``ranks`` array declared in *scripts*."""
    return find_declared_array(scripts, RANKS_VARIABLE)


def ranks_from_html(markup: str | bytes) -> JsArray:
    """Return the ``ranks`` array embedded in an HTML document."""
    return extract_ranks(collect_scripts_from_html(markup))


def collect_elim_stats(
    *,
    client: httpx.Client | None = None,
    settings: Settings | None = None,
) -> JsArray:
    """Fetch the ranking page and return its ``ranks`` table.

    Args:
        client: Optional caller-owned :class:`httpx.Client`.
        settings: Settings override.  Defaults to :func:`get_settings`.

    Returns:
        The ranking table, conventionally a :class:`JsArray` of
        :class:`~elim_ranks.collector.values.JsObject` entries.

    Raises:
        FetchError: If the page cannot be fetched.
        HTMLParseError: If the page cannot be parsed.
        RanksNotFoundError: If no inline script declares ``ranks``.
        NumberParseError: If the table holds an invalid number literal.
        CompositeKeyError: If the table uses an array or object as a key.
    """
    settings = settings or get_settings()
    body = fetch_document(settings.url, client=client, settings=settings)
    return ranks_from_html(body)
