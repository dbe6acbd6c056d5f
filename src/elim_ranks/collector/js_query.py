"""JavaScript parsing and structural queries backed by tree-sitter.

Scripts are parsed into tree-sitter syntax trees and searched with
declarative query patterns rather than hand-written tree walks.  The
building blocks are generic:

- :func:`parse_script` parses one script source.
- :func:`declaration_query` compiles a pattern matching
  ``var|let|const <name> = <value_type literal>`` with an ``#eq?``
  predicate on the declared name.
- :func:`iter_captures` yields the nodes bound to one capture name, in
  match order then capture order.

tree-sitter is error-tolerant: a script with syntax errors still produces a
tree (with ``ERROR`` nodes) and queries run over the parts that parsed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser, Query, QueryCursor, Tree

from elim_ranks.core.exceptions import ScriptParseError

logger = logging.getLogger(__name__)

JS_LANGUAGE = Language(tree_sitter_javascript.language())

#: Capture bound to the declared identifier.
NAME_CAPTURE: str = "var-name"

#: Capture bound to the declaration's initializer.
VALUE_CAPTURE: str = "var-value"

_DECLARATION_PATTERN: str = """
(
    (variable_declarator
        name: (identifier) @{name_capture}
        value: ({value_type}) @{value_capture})
    (#eq? @{name_capture} "{name}")
)
"""

_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_NODE_TYPE_RE = re.compile(r"[a-z_]+")


@dataclass(frozen=True)
class ParsedScript:
    """A syntax tree together with the UTF-8 source it was parsed from."""

    source: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node


def node_text(node: Node, source: bytes) -> str:
    """Return the source text spanned by *node*."""
    return source[node.start_byte : node.end_byte].decode("utf-8")


def parse_script(source: str, *, script_index: int | None = None) -> ParsedScript:
    """Parse one script's source text.

    Args:
        source: Script text as collected from the page.
        script_index: Position of the script, carried on raised errors.

    Raises:
        ScriptParseError: If the source cannot be encoded as UTF-8 or the
            parser does not produce a tree.
    """
    try:
        encoded = source.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ScriptParseError(
            f"script is not encodable as UTF-8: {exc}", script_index=script_index
        ) from exc

    parser = Parser(JS_LANGUAGE)
    try:
        tree = parser.parse(encoded)
    except ValueError as exc:
        raise ScriptParseError(f"parser failed: {exc}", script_index=script_index) from exc
    if tree is None:
        raise ScriptParseError("parser returned no tree", script_index=script_index)

    if tree.root_node.has_error:
        logger.debug("collector: script %s contains syntax errors", script_index)
    return ParsedScript(source=encoded, tree=tree)


@lru_cache(maxsize=32)
def declaration_query(name: str, value_type: str = "array") -> Query:
    """Compile a query for a variable declared with a literal initializer.

    The query binds the declared identifier to :data:`NAME_CAPTURE` and the
    initializer to :data:`VALUE_CAPTURE`, keeping only declarators whose
    identifier text equals *name*.

    Args:
        name: JavaScript identifier to look for.
        value_type: tree-sitter node type the initializer must have, e.g.
            ``"array"`` or ``"object"``.

    Raises:
        ValueError: If *name* is not an identifier or *value_type* is not a
            bare node type name.
    """
    if not _IDENTIFIER_RE.fullmatch(name):
        raise ValueError(f"not a JavaScript identifier: {name!r}")
    if not _NODE_TYPE_RE.fullmatch(value_type):
        raise ValueError(f"not a node type: {value_type!r}")

    pattern = _DECLARATION_PATTERN.format(
        name=name,
        value_type=value_type,
        name_capture=NAME_CAPTURE,
        value_capture=VALUE_CAPTURE,
    )
    return Query(JS_LANGUAGE, pattern)


def iter_captures(parsed: ParsedScript, query: Query, capture: str) -> Iterator[Node]:
    """Yield every node bound to *capture*, in match order then capture order.

    Text predicates such as ``#eq?`` are evaluated by tree-sitter before a
    match is reported.
    """
    cursor = QueryCursor(query)
    for _pattern_index, captures in cursor.matches(parsed.root):
        yield from captures.get(capture, ())
