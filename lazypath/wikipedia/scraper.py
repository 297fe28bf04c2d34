"""
Live Wikipedia as a lazily-expanded graph.

Pages are fetched through the MediaWiki parse API with requests and their
article links extracted with BeautifulSoup. Nothing is pre-loaded: each
expansion costs one HTTP request.
"""

from __future__ import annotations

import logging
import re
import time
from urllib.parse import quote, unquote, urljoin

import requests
from bs4 import BeautifulSoup

from lazypath.config import (
    DEFAULT_LINK_COST,
    USER_AGENT,
    WIKIPEDIA_API_URL,
    WIKIPEDIA_BASE_URL,
    WIKIPEDIA_REQUEST_DELAY,
    WIKIPEDIA_TIMEOUT,
)
from lazypath.graph.types import Cost, Link

logger = logging.getLogger(__name__)


class PageNotFoundError(LookupError):
    """The requested Wikipedia page does not exist."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Wikipedia page not found: '{title}'")
        self.title = title


class WikiScraper:
    """
    Fetches Wikipedia pages and extracts links to other articles.

    Only links from the article body are kept. Links inside navboxes,
    infoboxes, sidebars and reference lists are dropped, as are links
    into non-article namespaces.
    """

    # Href of an internal article link
    ARTICLE_PATTERN = re.compile(r"^/wiki/([^#?]+)")

    # Non-article namespaces, aliases and shortcut prefixes (lowercase).
    # Each also has a "<name> talk:" counterpart, rejected the same way.
    NAMESPACES = frozenset(
        {
            "media",
            "special",
            "talk",
            "user",
            "wikipedia",
            "project",
            "wp",
            "wt",
            "file",
            "image",
            "mediawiki",
            "template",
            "help",
            "category",
            "portal",
            "draft",
            "mos",
            "timedtext",
            "module",
            "gadget",
            "gadget definition",
            "event",
            "book",
            "education program",
            "topic",
        }
    )

    # Titles per action=query request (API limit for anonymous clients)
    RESOLVE_BATCH_SIZE = 50

    # Containers whose links are not part of the article body
    SKIP_CLASSES = (
        "navbox",
        "vertical-navbox",
        "infobox",
        "sidebar",
        "references",
        "reflist",
        "refbegin",
        "mw-references-wrap",
        "toc",
        "navigation-not-searchable",
    )

    def __init__(
        self,
        session: requests.Session | None = None,
        rate_limit: float = WIKIPEDIA_REQUEST_DELAY,
        timeout: float = WIKIPEDIA_TIMEOUT,
        api_url: str = WIKIPEDIA_API_URL,
    ) -> None:
        """
        Initialize the scraper.

        Args:
            session: HTTP session to use (a new one is created if omitted)
            rate_limit: Minimum seconds between requests
            timeout: Request timeout in seconds
            api_url: MediaWiki API endpoint
        """
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": USER_AGENT})
        self._rate_limit = rate_limit
        self._timeout = timeout
        self._api_url = api_url
        self._last_request_time: float = 0.0
        self.requests_made = 0

    def _wait_for_rate_limit(self) -> None:
        elapsed = time.monotonic() - self._last_request_time
        if elapsed < self._rate_limit:
            time.sleep(self._rate_limit - elapsed)

    @staticmethod
    def title_to_url(title: str) -> str:
        """Convert article title to its Wikipedia URL."""
        url_title = quote(title.replace(" ", "_"), safe="_/")
        return urljoin(WIKIPEDIA_BASE_URL, url_title)

    @classmethod
    def href_to_title(cls, href: str | None) -> str | None:
        """Article title an href points to, or None if it is not an article link."""
        if not href:
            return None
        match = cls.ARTICLE_PATTERN.match(href)
        if not match:
            return None
        title = unquote(match.group(1)).replace("_", " ").strip()
        if not title or cls.is_namespaced(title):
            return None
        return title

    @classmethod
    def is_namespaced(cls, title: str) -> bool:
        """Whether a title lives outside the article namespace."""
        if ":" not in title:
            return False
        prefix = title.split(":", 1)[0].strip().lower()
        if prefix.endswith(" talk"):
            prefix = prefix[: -len(" talk")]
        return prefix in cls.NAMESPACES

    def _api_get(self, params: dict, title: str) -> dict:
        """Run one API request and return its JSON payload."""
        self._wait_for_rate_limit()
        response = self._session.get(
            self._api_url,
            params={**params, "format": "json", "formatversion": 2},
            timeout=self._timeout,
        )
        self._last_request_time = time.monotonic()
        self.requests_made += 1
        response.raise_for_status()

        payload = response.json()
        if "error" in payload:
            code = payload["error"].get("code")
            if code in ("missingtitle", "invalidtitle"):
                raise PageNotFoundError(title)
            raise requests.HTTPError(
                f"Wikipedia API error for '{title}': {payload['error'].get('info', code)}",
                response=response,
            )
        return payload

    def fetch_page(self, title: str) -> tuple[str, str]:
        """
        Fetch the rendered body of a page, following redirects.

        Returns:
            (canonical title, body HTML)

        Raises:
            PageNotFoundError: If the page does not exist
            requests.RequestException: If the request fails
        """
        logger.debug(f"Fetching '{title}'")
        payload = self._api_get(
            {"action": "parse", "page": title, "prop": "text", "redirects": 1},
            title,
        )
        parsed = payload["parse"]
        return parsed.get("title", title), parsed["text"]

    def fetch_html(self, title: str) -> str:
        """Rendered body HTML of a page (redirects are followed)."""
        return self.fetch_page(title)[1]

    def resolve_titles(self, titles: list[str]) -> dict[str, str]:
        """
        Map titles to their canonical form, following normalization and redirects.

        Titles the API does not rewrite map to themselves.
        """
        resolved = {title: title for title in titles}
        for i in range(0, len(titles), self.RESOLVE_BATCH_SIZE):
            batch = titles[i : i + self.RESOLVE_BATCH_SIZE]
            payload = self._api_get(
                {"action": "query", "titles": "|".join(batch), "redirects": 1},
                batch[0],
            )
            query = payload.get("query", {})
            renames = {
                entry["from"]: entry["to"]
                for entry in query.get("normalized", []) + query.get("redirects", [])
            }
            for title in batch:
                target = title
                seen = {target}
                while target in renames and renames[target] not in seen:
                    target = renames[target]
                    seen.add(target)
                resolved[title] = target
        return resolved

    def extract_links(self, html: str) -> list[str]:
        """Unique article titles linked from the body, in document order."""
        soup = BeautifulSoup(html, "lxml")

        for css_class in self.SKIP_CLASSES:
            for container in soup.find_all(class_=css_class):
                container.decompose()

        links: list[str] = []
        seen: set[str] = set()
        for anchor in soup.find_all("a", href=True):
            title = self.href_to_title(anchor["href"])
            if title and title not in seen:
                seen.add(title)
                links.append(title)
        return links

    def get_links(self, title: str) -> list[str]:
        """Titles of the articles a page links to."""
        links = self.extract_links(self.fetch_html(title))
        logger.debug(f"Found {len(links)} links on '{title}'")
        return links


class WikiLinkExpander:
    """
    Node expander over live Wikipedia: nodes are article titles and every
    link costs the same (one click).
    """

    def __init__(
        self,
        scraper: WikiScraper | None = None,
        cost: Cost = DEFAULT_LINK_COST,
        missing_ok: bool = True,
        resolve_redirects: bool = True,
    ) -> None:
        """
        Initialize the expander.

        Args:
            scraper: Scraper to fetch pages with
            cost: Cost assigned to every link
            missing_ok: Treat missing pages as dead ends instead of failing
            resolve_redirects: Replace redirect link targets with their
                canonical titles (one extra request per 50 links), so a goal
                reached through a redirect is recognised
        """
        self._scraper = scraper or WikiScraper()
        self._cost = cost
        self._missing_ok = missing_ok
        self._resolve_redirects = resolve_redirects

    @property
    def scraper(self) -> WikiScraper:
        return self._scraper

    def __call__(self, title: str) -> list[Link]:
        try:
            canonical, html = self._scraper.fetch_page(title)
        except PageNotFoundError:
            if not self._missing_ok:
                raise
            logger.warning(f"Page '{title}' does not exist, treating as dead end")
            return []

        targets = self._scraper.extract_links(html)
        if self._resolve_redirects and targets:
            resolved = self._scraper.resolve_titles(targets)
            targets = list(dict.fromkeys(resolved[target] for target in targets))

        return [
            Link(title, target, self._cost)
            for target in targets
            if target not in (title, canonical)
        ]
