"""Last entry of a page's navigation trail, as a folder label."""

from ..config import BREADCRUMB_CONTAINER, BREADCRUMB_LINKS
from ..errors import ExtractionError
from ..utils.text import normalise_label
from .soup import make_soup


def extract_breadcrumb(html: str | bytes) -> str | None:
    """
    Normalised text of the last folder/category link in the trail.

    Raises ExtractionError if the trail container is missing.  Returns None
    when the trail has no usable entry.
    """
    soup = make_soup(html)
    container = soup.select_one(BREADCRUMB_CONTAINER)
    if container is None:
        raise ExtractionError("No breadcrumb container found")

    trail = container.select(BREADCRUMB_LINKS)
    if not trail:
        return None
    span = trail[-1].find("span")
    if span is None:
        return None
    return normalise_label(span.get_text(strip=True))
