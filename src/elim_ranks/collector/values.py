"""Generic value model for materialized JavaScript literals.

A materialized literal is a tree of :data:`JsValue`, a tagged union of four
frozen dataclasses plus ``None`` for anything that is not a supported
literal:

- :class:`JsArray`  — ordered items
- :class:`JsObject` — key/value entries in source order, keys unique
- :class:`JsString` — the literal's raw source text, quotes included
  (bare-identifier keys have none)
- :class:`JsNumber` — a 64-bit float

``to_python()`` lowers a tree to plain ``list``/``dict``/``str``/``float``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from elim_ranks.core.exceptions import CompositeKeyError

_QUOTES: frozenset[str] = frozenset({'"', "'"})

_ESCAPE_RE = re.compile(
    r"\\(?:u\{([0-9a-fA-F]+)\}|u([0-9a-fA-F]{4})|x([0-9a-fA-F]{2})|(\r\n|[\s\S]))"
)

_SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_LINE_TERMINATORS: frozenset[str] = frozenset({"\n", "\r", "\r\n", "\u2028", "\u2029"})

_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _replace_escape(match: re.Match[str]) -> str:
    braced, hex4, hex2, char = match.groups()
    if braced is not None:
        code_point = int(braced, 16)
        return chr(code_point) if code_point <= 0x10FFFF else "\ufffd"
    if hex4 is not None:
        return chr(int(hex4, 16))
    if hex2 is not None:
        return chr(int(hex2, 16))
    if char in _LINE_TERMINATORS:
        return ""
    return _SIMPLE_ESCAPES.get(char, char)


def decode_string_literal(raw: str) -> str:
    """Strip the delimiters of a JavaScript string literal and decode escapes.

    ``\\uD83D\\uDE00``-style surrogate pairs are joined into one code point;
    a lone surrogate becomes U+FFFD.

    >>> decode_string_literal('"a\\\\tb"')
    'a\\tb'
    """
    body = raw
    if len(raw) >= 2 and raw[0] in _QUOTES and raw[-1] == raw[0]:
        body = raw[1:-1]
    if "\\" not in body:
        return body

    decoded = _ESCAPE_RE.sub(_replace_escape, body)
    if _SURROGATE_RE.search(decoded):
        decoded = decoded.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
    return decoded


@dataclass(frozen=True)
class JsString:
    """A string literal.

    Attributes:
        raw: Exact source text of the literal, including its quote characters.
            No escape sequence is interpreted.  A bare-identifier object key
            (``name`` in ``{name: 1}``) has no quotes in the source, so its
            ``raw`` is the plain identifier; with ``raw_strings=True`` it
            lowers to ``name`` where ``{"name": 1}`` lowers to ``"name"``.
    """

    raw: str

    @property
    def value(self) -> str:
        """The literal's contents with quotes stripped and escapes decoded."""
        return decode_string_literal(self.raw)

    def to_python(self, *, raw_strings: bool = False) -> str:
        return self.raw if raw_strings else self.value


@dataclass(frozen=True)
class JsNumber:
    """A numeric literal as a 64-bit float."""

    value: float

    def to_python(self, *, raw_strings: bool = False) -> float:  # noqa: ARG002
        return self.value


@dataclass(frozen=True)
class JsArray:
    """An array literal; item order follows the source."""

    items: tuple[JsValue, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[JsValue]:
        return iter(self.items)

    def __getitem__(self, index: int) -> JsValue:
        return self.items[index]

    def to_python(self, *, raw_strings: bool = False) -> list[Any]:
        return to_python(self, raw_strings=raw_strings)


@dataclass(frozen=True)
class JsObject:
    """An object literal.

    Entries are kept in source order with unique keys.  Build instances with
    :meth:`from_pairs` to get mapping overwrite semantics for duplicate keys.

    String keys are identified by their decoded text, as in JavaScript:
    ``"a"``, ``'a'`` and the bare key ``a`` all name the same entry.  Lookups
    accept either a key value (``JsString('"name"')``) or a plain Python
    ``str``/``int``/``float`` compared against decoded string keys and number
    keys:

    >>> obj = JsObject.from_pairs([(JsString('"name"'), JsString('"a"'))])
    >>> obj["name"].value
    'a'
    """

    entries: tuple[tuple[JsKey, JsValue], ...] = ()
    _index: dict[object, int] = field(
        init=False, repr=False, compare=False, hash=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        index: dict[object, int] = {}
        for position, (key, _) in enumerate(self.entries):
            index[_key_identity(key)] = position
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[JsValue, JsValue]]) -> JsObject:
        """Build an object from key/value pairs; a repeated key keeps the last value.

        A repeated key stays at the position, and keeps the spelling, of its
        first occurrence.

        Raises:
            CompositeKeyError: If a key is a :class:`JsArray` or :class:`JsObject`.
        """
        merged: dict[object, tuple[JsKey, JsValue]] = {}
        for key, value in pairs:
            if isinstance(key, (JsArray, JsObject)):
                raise CompositeKeyError(type(key).__name__)
            identity = _key_identity(key)
            if identity in merged:
                key = merged[identity][0]
            merged[identity] = (key, value)
        return cls(tuple(merged.values()))

    def _resolve(self, key: object) -> object:
        if key is None or isinstance(key, (JsString, JsNumber)):
            return _key_identity(key)
        if isinstance(key, str):
            return key
        if isinstance(key, (int, float)) and not isinstance(key, bool):
            return JsNumber(float(key))
        raise KeyError(key)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[JsKey]:
        return (key for key, _ in self.entries)

    def __contains__(self, key: object) -> bool:
        try:
            return self._resolve(key) in self._index
        except KeyError:
            return False

    def __getitem__(self, key: object) -> JsValue:
        resolved = self._resolve(key)
        try:
            return self.entries[self._index[resolved]][1]
        except KeyError:
            raise KeyError(key) from None

    def get(self, key: object, default: JsValue = None) -> JsValue:
        try:
            return self[key]
        except KeyError:
            return default

    def keys(self) -> list[JsKey]:
        return [key for key, _ in self.entries]

    def values(self) -> list[JsValue]:
        return [value for _, value in self.entries]

    def items(self) -> list[tuple[JsKey, JsValue]]:
        return list(self.entries)

    def to_python(self, *, raw_strings: bool = False) -> dict[Any, Any]:
        return to_python(self, raw_strings=raw_strings)


JsValue = JsArray | JsObject | JsString | JsNumber | None
"""Any materialized literal.  ``None`` stands for an unsupported node."""

JsKey = JsString | JsNumber | None
"""Values permitted as :class:`JsObject` keys."""


def _key_identity(key: JsKey) -> object:
    # A plain str never collides with JsNumber or None.
    if isinstance(key, JsString):
        return key.value
    return key


def _lower(value: JsValue, raw_strings: bool, pending: list[tuple[Any, Any]]) -> Any:
    if isinstance(value, JsArray):
        container: Any = []
    elif isinstance(value, JsObject):
        container = {}
    elif value is None:
        return None
    else:
        return value.to_python(raw_strings=raw_strings)
    pending.append((value, container))
    return container


def to_python(value: JsValue, *, raw_strings: bool = False) -> Any:
    """Convert a :data:`JsValue` tree to plain Python containers and scalars.

    Containers are filled from an explicit work list, so nesting depth is not
    limited by the interpreter's recursion limit.

    Args:
        value: Tree to convert.
        raw_strings: Keep strings as raw source text (quotes included, except
            for bare-identifier keys) instead of decoding them.
    """
    pending: list[tuple[Any, Any]] = []
    result = _lower(value, raw_strings, pending)
    while pending:
        node, container = pending.pop()
        if isinstance(node, JsArray):
            container.extend(_lower(item, raw_strings, pending) for item in node.items)
        else:
            for key, item in node.entries:
                container[_lower(key, raw_strings, pending)] = _lower(item, raw_strings, pending)
    return result
