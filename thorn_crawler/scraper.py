"""
Browser-backed page source: breadcrumb labels and listing links.

A missing trail or listing table is not an error for the crawl – it simply
means "no breadcrumb" / "no children".  Navigation failures are passed on
so the crawler can mark the node as failed.
"""

from .browser import BrowserSession
from .config import SETTLE_DELAY
from .errors import ExtractionError
from .extract import extract_breadcrumb, extract_listing_links
from .logging_setup import log
from .models import Link


class ScraperPageSource:
    """Implements the crawler's ``PageSource`` protocol on a live page."""

    def __init__(self, browser: BrowserSession, settle: float = SETTLE_DELAY) -> None:
        self.browser = browser
        self.settle = settle

    def resolve_breadcrumb(self, url: str) -> str | None:
        self.browser.goto(url, settle=self.settle)
        try:
            label = extract_breadcrumb(self.browser.html())
        except ExtractionError as exc:
            log.debug("No breadcrumb on %s: %s", url, exc)
            return None
        if label:
            log.info("[TRAIL] Last breadcrumb: %s", label)
        return label

    def extract_links(self, url: str) -> list[Link]:
        self.browser.goto(url, settle=self.settle)
        try:
            links = extract_listing_links(self.browser.html(), url)
        except ExtractionError as exc:
            log.debug("No listing on %s: %s", url, exc)
            return []
        log.info("[LINKS] Found %d links in post table", len(links))
        return links
