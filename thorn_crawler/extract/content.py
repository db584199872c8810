"""
thorn_crawler.extract.content
=============================
Prepares a rendered post for Markdown conversion.

* ``<script>``, ``<style>`` and ``<noscript>`` are dropped with their contents.
* Presentation chrome (top nav bar, header, footer, sidebar) is removed.
* Relative ``a[href]`` / ``img[src]`` values are made absolute; images get an
  inline size style so they fit when the Markdown is rendered as HTML.
* The body is taken from the first candidate container that has text,
  falling back to ``<body>``.
"""

from dataclasses import dataclass

from ..config import CHROME_SELECTORS, CONTENT_SELECTORS, IMAGE_STYLE, NON_CONTENT_TAGS
from ..logging_setup import log
from ..utils.url import absolutise
from .soup import make_soup


@dataclass(frozen=True)
class PostContent:
    title: str
    html: str
    container: str


def extract_post_content(html: str | bytes, page_url: str) -> PostContent:
    soup = make_soup(html)

    for tag in soup.find_all(NON_CONTENT_TAGS):
        tag.decompose()

    for selector in CHROME_SELECTORS:
        for el in soup.select(selector):
            if not el.decomposed:
                el.decompose()

    for anchor in soup.select("a[href]"):
        anchor["href"] = absolutise(anchor["href"], page_url)
    for img in soup.select("img[src]"):
        img["src"] = absolutise(img["src"], page_url)
        img["style"] = IMAGE_STYLE

    title_el = soup.find("title")
    title = title_el.get_text(strip=True) if title_el else ""

    for selector in CONTENT_SELECTORS:
        el = soup.select_one(selector)
        if el is not None and el.get_text(strip=True):
            log.debug("Selected content container: %s", selector)
            return PostContent(title=title or "Untitled", html=el.decode_contents(), container=selector)

    log.debug("Falling back to <body> for content extraction")
    body = soup.body or soup
    return PostContent(title=title or "Untitled", html=body.decode_contents(), container="body")
