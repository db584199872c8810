"""
thorn_crawler.extract
=====================
Pure HTML parsing for rendered pages: listing links, breadcrumb labels and
post bodies.  Nothing in here talks to the browser.

Public API
----------
    from thorn_crawler.extract import (
        extract_listing_links, extract_breadcrumb, extract_post_content,
    )
"""

from .links import extract_listing_links
from .breadcrumb import extract_breadcrumb
from .content import extract_post_content, PostContent

__all__ = [
    "extract_listing_links",
    "extract_breadcrumb",
    "extract_post_content",
    "PostContent",
]
