"""BeautifulSoup construction shared by the extractors."""

from bs4 import BeautifulSoup

from ..errors import ExtractionError

try:
    import lxml  # noqa: F401 – used as BeautifulSoup parser backend
    _BS4_PARSER = "lxml"
except ImportError:
    _BS4_PARSER = "html.parser"


def make_soup(html: str | bytes) -> BeautifulSoup:
    """Parse *html*; encoding or parser errors become ExtractionError."""
    try:
        return BeautifulSoup(html, _BS4_PARSER)
    except ValueError as exc:
        # UnicodeEncodeError (e.g. lone surrogates in the DOM) is a ValueError
        raise ExtractionError(f"Unparseable page: {exc}") from exc
