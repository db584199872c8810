"""
thorn_crawler.extract.links
===========================
Child links of a folder page.

Only anchors inside the listing table body are considered, and only those
whose href is a folder or post hash route.  Everything else on the page
(navigation, breadcrumb, sidebar) is ignored.
"""

from ..config import LISTING_TABLE
from ..errors import ExtractionError
from ..logging_setup import log
from ..models import Link
from ..utils.url import absolutise, classify_href
from .soup import make_soup


def extract_listing_links(html: str | bytes, page_url: str) -> list[Link]:
    """
    Return the folder/post links of the listing table, in document order.

    Raises ExtractionError when the page has no listing table (or the table
    has no body); an empty table yields an empty list.
    """
    soup = make_soup(html)
    table = soup.select_one(LISTING_TABLE)
    if table is None:
        raise ExtractionError(f"No {LISTING_TABLE} found on {page_url}")
    tbody = table.find("tbody")
    if tbody is None:
        raise ExtractionError(f"No tbody in {LISTING_TABLE} on {page_url}")

    links: list[Link] = []
    for index, anchor in enumerate(tbody.select("a[href]"), start=1):
        href = anchor.get("href", "")
        link_type = classify_href(href)
        if link_type is None:
            continue
        link = Link(
            url=absolutise(href, page_url),
            text=anchor.get_text(strip=True),
            type=link_type,
        )
        log.debug("  Link %d: %s - %s - %s", index, link.type.value, link.text, link.url)
        links.append(link)
    return links
