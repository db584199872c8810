"""
thorn_crawler
=============
Python package for exporting a folder-structured single-page knowledge base
(Thorn) to local Markdown or PDF files, one file per post, mirroring the
site's folder hierarchy on disk.

Package structure
-----------------
thorn_crawler/
├── __init__.py       – package init and public API
├── config.py         – configuration constants and CrawlerConfig
├── errors.py         – exception hierarchy
├── models.py         – links, export results, per-crawl state
├── logging_setup.py  – colorlog-aware logger setup
├── browser.py        – Playwright Chromium page wrapper
├── scraper.py        – breadcrumb / listing lookups on the live page
├── exporters.py      – Markdown and PDF exporters
├── crawler.py        – depth-first Crawler class
├── cli.py            – argparse CLI (``python -m thorn_crawler``)
├── extract/          – sub-package: HTML parsing with BeautifulSoup
│   ├── links.py      – listing-table links
│   ├── breadcrumb.py – last breadcrumb label
│   └── content.py    – post body for Markdown conversion
└── utils/            – sub-package: text normalisation, URLs, output tree

Quick start
-----------
    from pathlib import Path
    from thorn_crawler import BrowserSession, Crawler, MarkdownExporter, ScraperPageSource

    with BrowserSession(session_cookie="...") as browser:
        crawler = Crawler(
            source=ScraperPageSource(browser),
            exporter=MarkdownExporter(browser),
            output_dir=Path("docplanner_export"),
            max_depth=5,
        )
        summary = crawler.crawl("https://thorn.io/t/docplanner#/folders/<id>/<slug>")
"""

from .browser import BrowserSession
from .config import CrawlerConfig
from .crawler import Crawler, place_post
from .errors import (
    CrawlError, ExportError, ExtractionError, InitializationError, NavigationError,
)
from .exporters import MarkdownExporter, PdfExporter, make_exporter
from .models import CrawlSummary, ExportResult, Link, LinkType, NodeState
from .scraper import ScraperPageSource
from .utils import build_directory, normalise_label

__all__ = [
    "BrowserSession",
    "CrawlerConfig",
    "Crawler",
    "place_post",
    "CrawlError",
    "ExportError",
    "ExtractionError",
    "InitializationError",
    "NavigationError",
    "MarkdownExporter",
    "PdfExporter",
    "make_exporter",
    "CrawlSummary",
    "ExportResult",
    "Link",
    "LinkType",
    "NodeState",
    "ScraperPageSource",
    "build_directory",
    "normalise_label",
]
