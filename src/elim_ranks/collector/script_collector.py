"""Inline ``<script>`` text collection from an HTML document.

The page is parsed with BeautifulSoup and walked depth-first with an explicit
stack.  Each direct text child of a ``<script>`` element becomes one entry in
the result; script bodies are never concatenated or stripped.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import PageElement, PreformattedString

from elim_ranks.collector.config import HTML_PARSER
from elim_ranks.core.exceptions import HTMLParseError

logger = logging.getLogger(__name__)


def _is_text_node(node: PageElement) -> bool:
    # Comments, CDATA, doctypes and processing instructions are all
    # PreformattedString subclasses; plain text and Script strings are not.
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def parse_html(markup: str | bytes) -> BeautifulSoup:
    """Parse *markup* into a BeautifulSoup document.

    Raises:
        HTMLParseError: If the tree builder rejects the markup.
    """
    try:
        return BeautifulSoup(markup, HTML_PARSER)
    except (ParserRejectedMarkup, AssertionError) as exc:
        logger.warning("collector: failed to parse HTML: %s", exc)
        raise HTMLParseError(f"failed to parse HTML: {exc}") from exc


def collect_scripts(root: Tag) -> list[str]:
    """Return the text of every ``<script>`` element under *root*.

    Traversal is document pre-order.  A script element contributes one
    string per direct text child, in child order, and its subtree is not
    searched further.

    Args:
        root: Document or element to start from.

    Returns:
        The collected script texts; empty when the document has no scripts.
    """
    scripts: list[str] = []

    stack: list[Tag] = [root]
    while stack:
        node = stack.pop()

        if node.name == "script":
            scripts.extend(str(child) for child in node.children if _is_text_node(child))
            continue

        stack.extend(child for child in reversed(node.contents) if isinstance(child, Tag))

    return scripts


def collect_scripts_from_html(markup: str | bytes) -> list[str]:
    """Parse *markup* and collect its inline script texts."""
    scripts = collect_scripts(parse_html(markup))
    logger.debug("collector: found %d script text node(s)", len(scripts))
    return scripts
