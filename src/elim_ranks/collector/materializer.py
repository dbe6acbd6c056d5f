"""Conversion of JavaScript literal syntax trees into :data:`JsValue` trees.

Supported node types are ``array``, ``object``, ``string`` and ``number``
(plus ``property_identifier`` for unquoted object keys).  Every other node
(identifiers, booleans, ``null``, negative numbers, template strings, calls,
comments) becomes ``None`` without failing the conversion.
"""

from __future__ import annotations

import re

from tree_sitter import Node

from elim_ranks.collector.js_query import node_text
from elim_ranks.collector.values import JsArray, JsNumber, JsObject, JsString, JsValue
from elim_ranks.core.exceptions import NumberParseError

# Base-10 literals only: 12, 3.14, .5, 5., 1e3, 2.5E-3.
_DECIMAL_RE = re.compile(r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_CONTAINERS: frozenset[str] = frozenset({"array", "object"})


def parse_number(text: str) -> float:
    """Parse a base-10 number literal.

    Raises:
        NumberParseError: For hex/octal/binary literals, BigInts, numeric
            separators or anything else that is not a decimal literal.
    """
    if not _DECIMAL_RE.fullmatch(text):
        raise NumberParseError(text)
    return float(text)


def _scalar(node: Node | None, source: bytes) -> JsValue:
    if node is None:
        return None
    if node.type in ("string", "property_identifier"):
        return JsString(node_text(node, source))
    if node.type == "number":
        return JsNumber(parse_number(node_text(node, source)))
    return None


def _members(node: Node) -> list[Node | None]:
    if node.type == "array":
        return list(node.named_children)
    # Objects flatten to key, value, key, value, ...; non-pair members have
    # no key/value fields and are skipped.
    members: list[Node | None] = []
    for child in node.named_children:
        if child.type == "pair":
            members.append(child.child_by_field_name("key"))
            members.append(child.child_by_field_name("value"))
    return members


def _build(node: Node, values: list[JsValue]) -> JsValue:
    if node.type == "array":
        return JsArray(tuple(values))
    return JsObject.from_pairs(zip(values[0::2], values[1::2]))


def materialize(node: Node | None, source: bytes) -> JsValue:
    """Convert a literal subtree into a :data:`JsValue`.

    The tree is walked with an explicit stack, so nesting depth is not
    limited by the interpreter's recursion limit.

    Args:
        node: Root of the literal subtree.  ``None`` yields ``None``.
        source: The UTF-8 source the tree was parsed from.

    Raises:
        NumberParseError: If a number literal is not a decimal literal.
        CompositeKeyError: If an object key is an array or object literal.
    """
    if node is None or node.type not in _CONTAINERS:
        return _scalar(node, source)

    # Each frame: container node, its member nodes, member values built so far.
    stack: list[tuple[Node, list[Node | None], list[JsValue]]] = [(node, _members(node), [])]
    while True:
        current, members, values = stack[-1]
        if len(values) < len(members):
            child = members[len(values)]
            if child is not None and child.type in _CONTAINERS:
                stack.append((child, _members(child), []))
            else:
                values.append(_scalar(child, source))
            continue

        stack.pop()
        value = _build(current, values)
        if not stack:
            return value
        stack[-1][2].append(value)
