"""
Wikipedia interaction module.

Provides live Wikipedia access as a graph source:
- WikiScraper: Fetches pages and extracts article links
- WikiLinkExpander: Node expander over article titles
"""

from lazypath.wikipedia.scraper import PageNotFoundError, WikiLinkExpander, WikiScraper

__all__ = [
    "WikiScraper",
    "WikiLinkExpander",
    "PageNotFoundError",
]
