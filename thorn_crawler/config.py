"""Configuration constants for the Thorn knowledge-base crawler."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_BASE_URL = os.environ.get(
    "THORN_BASE_URL", "https://thorn.io/t/docplanner#/posts/"
)
DEFAULT_OUTPUT = os.environ.get("THORN_OUTPUT", "docplanner_export")
# Session cookie can also be supplied via the THORN_SESSION env var
DEFAULT_SESSION_COOKIE = os.environ.get("THORN_SESSION", "")
SESSION_COOKIE_NAME   = "thorn_session"
SESSION_COOKIE_DOMAIN = "thorn.io"

DEFAULT_MAX_DEPTH = 10
DEFAULT_DELAY     = 0.0     # extra pause between node visits (seconds)

NAVIGATION_TIMEOUT_MS = 30_000   # per page.goto()
NAVIGATION_WAIT_UNTIL = "networkidle"
SETTLE_DELAY          = 3.0      # SPA render time after breadcrumb/listing loads
EXPORT_SETTLE_DELAY   = 1.0      # SPA render time before exporting a post

VIEWPORT = {"width": 1200, "height": 800}

# Browser console messages with this prefix are forwarded to the logger
PAGE_LOG_PREFIX = "PAGE LOG:"

FORMAT_MARKDOWN = "markdown"
FORMAT_PDF      = "pdf"
EXPORT_FORMATS  = (FORMAT_MARKDOWN, FORMAT_PDF)

# ── Site structure ─────────────────────────────────────────────────
FOLDER_MARKER   = "#/folders/"
POST_MARKER     = "#/posts/"
CATEGORY_MARKER = "#/category/"

BREADCRUMB_CONTAINER = ".content-nav.break-work-break-all"
BREADCRUMB_LINKS     = f'a[href*="{FOLDER_MARKER}"], a[href*="{CATEGORY_MARKER}"]'
LISTING_TABLE        = ".post-table"

# Presentation chrome removed before a post is exported
NAV_HEADER_SELECTOR = (
    ".d-flex.justify-content-end.justify-content-between"
    ".align-items-center.flex-row"
)
CHROME_SELECTORS: tuple[str, ...] = (
    NAV_HEADER_SELECTOR,
    ".navbar",
    ".header",
    ".footer",
    ".sidebar",
)

# Likely post-body containers, tried in order; <body> is the fallback
CONTENT_SELECTORS: tuple[str, ...] = (
    '[data-testid="post-content"]',
    ".post-content",
    ".markdown-body",
    "article",
    "main",
    ".ql-editor",
    ".content",
)

IMAGE_STYLE = "max-width:100%; height:auto;"

# Removed together with their text before conversion
NON_CONTENT_TAGS = ["script", "style", "noscript"]

# ── Filenames ──────────────────────────────────────────────────────
SEQUENCE_WIDTH       = 3
MARKDOWN_TITLE_LIMIT = 80
PDF_TITLE_LIMIT      = 50
UNTITLED             = "untitled"

PDF_OPTIONS = {
    "format": "A4",
    "print_background": True,
    "margin": {"top": "20px", "right": "20px", "bottom": "20px", "left": "20px"},
}


@dataclass
class CrawlerConfig:
    """Options for one crawl run, as assembled by the CLI."""

    base_url: str = DEFAULT_BASE_URL
    output_dir: Path = Path(DEFAULT_OUTPUT)
    max_depth: int = DEFAULT_MAX_DEPTH
    delay: float = DEFAULT_DELAY
    format: str = FORMAT_MARKDOWN
    headless: bool = True
    session_cookie: str = DEFAULT_SESSION_COOKIE
    cookie_name: str = SESSION_COOKIE_NAME
    cookie_domain: str = SESSION_COOKIE_DOMAIN
    progress: bool = True

    def __post_init__(self) -> None:
        self.output_dir = Path(self.output_dir)
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.format not in EXPORT_FORMATS:
            raise ValueError(
                f"format must be one of {', '.join(EXPORT_FORMATS)}, got {self.format!r}"
            )
