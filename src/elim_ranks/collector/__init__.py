"""Ranking table collector.

Sub-modules:
- ``config``            — constants (URL, timeout, variable name)
- ``http_fetcher``      — blocking httpx page fetcher
- ``script_collector``  — BeautifulSoup DOM walk collecting inline script text
- ``js_query``          — tree-sitter parsing and structural queries
- ``values``            — ``JsValue`` tagged union
- ``materializer``      — literal syntax tree → ``JsValue``
- ``elim_stats``        — the end-to-end pipeline (``collect_elim_stats``)
"""
