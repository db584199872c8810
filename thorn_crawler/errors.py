"""Exception hierarchy for the crawler.

Only :class:`InitializationError` is fatal.  The others are raised by the
browser-facing collaborators and caught per node by the crawler, the
scraper or the exporters.
"""


class CrawlError(Exception):
    """Base class for every crawler error."""


class InitializationError(CrawlError):
    """The rendering surface (browser/page) could not be created."""


class NavigationError(CrawlError):
    """A URL could not be loaded (timeout or network error)."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Could not load {url}" + (f": {reason}" if reason else ""))


class ExtractionError(CrawlError):
    """An expected element is absent, or the page HTML could not be parsed."""


class ExportError(CrawlError):
    """A document could not be rendered or written."""
