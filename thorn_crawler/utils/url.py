"""URL helpers for the single-page-application hash routes."""

import urllib.parse

from ..config import FOLDER_MARKER, POST_MARKER
from ..models import LinkType


def absolutise(href: str, page_url: str) -> str:
    """
    Resolve *href* against the page it was found on.

    Hash routes keep the page's path:
        ("#/posts/1", "https://thorn.io/t/doc#/folders/9")
            → "https://thorn.io/t/doc#/posts/1"
    Unparseable values are returned unchanged.
    """
    href = href.strip()
    try:
        return urllib.parse.urljoin(page_url, href)
    except ValueError:
        return href


def classify_href(href: str) -> LinkType | None:
    """Folder or post by URL shape; None for links to anything else."""
    if POST_MARKER in href:
        return LinkType.POST
    if FOLDER_MARKER in href:
        return LinkType.FOLDER
    return None
