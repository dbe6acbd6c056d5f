"""Exception hierarchy for the elim-ranks collector.

All custom exceptions subclass ``ElimRanksError`` so that callers can catch
every pipeline failure with a single ``except`` clause when needed.

Hierarchy::

    ElimRanksError
    ├── FetchError               (url, status_code, cause)
    ├── HTMLParseError
    ├── ScriptParseError         (script_index)
    ├── RanksNotFoundError       (name, scripts_searched)
    └── MaterializationError
        ├── NumberParseError     (text)
        └── CompositeKeyError    (key_type)
"""

from __future__ import annotations


class ElimRanksError(Exception):
    """Base class for all elim-ranks exceptions."""


# ---------------------------------------------------------------------------
# Document stage
# ---------------------------------------------------------------------------


class FetchError(ElimRanksError):
    """Raised when the ranking page cannot be fetched.

    Args:
        message: Human-readable description of the failure.
        url: The URL that was requested.
        status_code: HTTP status of a non-2xx response, or ``None`` when the
            request failed at the transport level.
        cause: The underlying transport exception, if any.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class HTMLParseError(ElimRanksError):
    """Raised when the fetched body cannot be parsed into a DOM tree."""


# ---------------------------------------------------------------------------
# Script stage
# ---------------------------------------------------------------------------


class ScriptParseError(ElimRanksError):
    """Raised when a single inline script cannot be parsed.

    The locator recovers from this error by skipping the script; it never
    reaches callers of :func:`~elim_ranks.collector.elim_stats.collect_elim_stats`.

    Args:
        message: Description of the parse failure.
        script_index: Position of the script in document order, if known.
    """

    def __init__(self, message: str, script_index: int | None = None) -> None:
        super().__init__(message)
        self.script_index = script_index


class RanksNotFoundError(ElimRanksError):
    """Raised when no script declares the target variable as an array literal.

    Args:
        name: Variable name that was searched for.
        scripts_searched: Number of script texts examined.
    """

    def __init__(self, name: str = "ranks", scripts_searched: int = 0) -> None:
        super().__init__(
            f"No array declaration of '{name}' found in {scripts_searched} script(s)"
        )
        self.name = name
        self.scripts_searched = scripts_searched


# ---------------------------------------------------------------------------
# Materialization
# ---------------------------------------------------------------------------


class MaterializationError(ElimRanksError):
    """Base class for failures while converting a literal into a value."""


class NumberParseError(MaterializationError):
    """Raised when a number literal is not a base-10 decimal literal.

    Args:
        text: The literal's source text.
    """

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid decimal number literal: {text!r}")
        self.text = text


class CompositeKeyError(MaterializationError):
    """Raised when an object key materializes to an array or object.

    Args:
        key_type: Name of the value type the key materialized to.
    """

    def __init__(self, key_type: str) -> None:
        super().__init__(f"Object key materialized to composite {key_type}")
        self.key_type = key_type
