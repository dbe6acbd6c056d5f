"""Extracts the elimination ranking table embedded in the ut4stats.com page.

Typical use::

    from elim_ranks import collect_elim_stats, to_python

    ranks = collect_elim_stats()
    rows = to_python(ranks)
"""

from __future__ import annotations

from elim_ranks.collector.elim_stats import (
    collect_elim_stats,
    extract_ranks,
    find_declared_array,
    ranks_from_html,
)
from elim_ranks.collector.values import (
    JsArray,
    JsNumber,
    JsObject,
    JsString,
    JsValue,
    to_python,
)
from elim_ranks.core.exceptions import (
    CompositeKeyError,
    ElimRanksError,
    FetchError,
    HTMLParseError,
    MaterializationError,
    NumberParseError,
    RanksNotFoundError,
    ScriptParseError,
)

__all__ = [
    "collect_elim_stats",
    "extract_ranks",
    "find_declared_array",
    "ranks_from_html",
    "JsArray",
    "JsNumber",
    "JsObject",
    "JsString",
    "JsValue",
    "to_python",
    "CompositeKeyError",
    "ElimRanksError",
    "FetchError",
    "HTMLParseError",
    "MaterializationError",
    "NumberParseError",
    "RanksNotFoundError",
    "ScriptParseError",
]
