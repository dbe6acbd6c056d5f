"""Constants for the elim ranks collector."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

#: Page that embeds the elimination ranking table.
ELIM_RANKS_URL: str = "https://ut4stats.com/elim_ranks"

#: Default HTTP request timeout in seconds.
DEFAULT_TIMEOUT: float = 30.0

#: User-agent string sent with the page request.
USER_AGENT: str = "elim-ranks/0.1 (+https://ut4stats.com; ranking collector)"

# ---------------------------------------------------------------------------
# Script lookup
# ---------------------------------------------------------------------------

#: Name of the variable whose array literal holds the ranking table.
RANKS_VARIABLE: str = "ranks"

#: BeautifulSoup tree builder used for the fetched page.
HTML_PARSER: str = "html.parser"
