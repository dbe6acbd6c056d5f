"""Shared pytest fixtures for elim-ranks tests.

Fixture summary
---------------
settings        — Settings pointing at a mocked example.com ranking page.
ranks_page_html — A realistic page with several scripts, one declaring ``ranks``.

All tests run offline; HTTP is mocked with respx.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from elim_ranks.config.settings import Settings, get_settings

TEST_URL = "https://example.com/elim_ranks"

RANKS_PAGE_HTML = """<!DOCTYPE html>
<html>
<head>
  <title>Elim Ranks</title>
  <script src="/static/jquery.min.js"></script>
  <script>
    window.dataLayer = window.dataLayer || [];
    function gtag() { dataLayer.push(arguments); }
  </script>
</head>
<body>
  <!-- <script>var ranks = ["commented out"];</script> -->
  <div id="table"></div>
  <script type="text/javascript">
    var ranks = [
      {"name": "Alpha", "elo": 1520.5, "games": 42, "country": "dk"},
      {"name": "Bravo", "elo": 1490, "games": 17, "country": "de"},
    ];
    renderTable(document.getElementById("table"), ranks);
  </script>
</body>
</html>
"""


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    """Ensure no test sees settings cached by another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(url=TEST_URL, timeout=5)


@pytest.fixture
def ranks_page_html() -> str:
    return RANKS_PAGE_HTML
