"""
Command-line interface for the Thorn knowledge-base crawler.

Provides argument parsing and main execution flow.
"""

import argparse
import sys
from pathlib import Path

from .browser import BrowserSession
from .config import (
    DEFAULT_BASE_URL, DEFAULT_DELAY, DEFAULT_MAX_DEPTH, DEFAULT_OUTPUT,
    DEFAULT_SESSION_COOKIE, EXPORT_FORMATS, FORMAT_MARKDOWN, CrawlerConfig,
)
from .crawler import Crawler
from .errors import InitializationError
from .exporters import make_exporter
from .logging_setup import log, setup_logging
from .models import CrawlSummary
from .scraper import ScraperPageSource

try:
    import colorlog  # noqa: F401
    _COLORLOG_AVAILABLE = True
except ImportError:
    _COLORLOG_AVAILABLE = False

try:
    import tqdm  # noqa: F401
    _TQDM_AVAILABLE = True
except ImportError:
    _TQDM_AVAILABLE = False


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Thorn knowledge-base crawler – exports every post under a "
                    "folder as Markdown or PDF, mirroring the folder tree.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "The session cookie can also be provided via the THORN_SESSION env var.\n"
            "Output directory and default root URL can be set with THORN_OUTPUT\n"
            "and THORN_BASE_URL."
        ),
    )
    parser.add_argument(
        "url", nargs="?", default=DEFAULT_BASE_URL,
        help=f"Root folder URL to start from (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--output", default=DEFAULT_OUTPUT,
        help=f"Output directory (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--format", choices=EXPORT_FORMATS, default=FORMAT_MARKDOWN,
        help=f"Export format (default: {FORMAT_MARKDOWN})",
    )
    parser.add_argument(
        "--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
        help=f"Deepest folder level to descend into (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--delay", type=float, default=DEFAULT_DELAY,
        help=f"Extra pause in seconds between pages (default: {DEFAULT_DELAY})",
    )
    parser.add_argument(
        "--cookie", default=DEFAULT_SESSION_COOKIE,
        help="Session cookie value (overrides THORN_SESSION env var)",
    )
    parser.add_argument(
        "--headed", dest="headless", action="store_false", default=True,
        help="Show the browser window (PDF export requires headless mode)",
    )
    parser.add_argument(
        "--no-progress", dest="progress", action="store_false", default=True,
        help="Disable the progress bar",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    args = parser.parse_args(argv)
    if args.max_depth < 0:
        parser.error("--max-depth must be non-negative")
    return args


def run_crawl(config: CrawlerConfig, root_url: str | None = None) -> CrawlSummary:
    """
    Start a browser, crawl from *root_url* (default ``config.base_url``)
    and log the summary.  Raises InitializationError if the browser cannot
    be started.
    """
    with BrowserSession(
        headless=config.headless,
        session_cookie=config.session_cookie,
        cookie_name=config.cookie_name,
        cookie_domain=config.cookie_domain,
    ) as browser:
        crawler = Crawler(
            source=ScraperPageSource(browser),
            exporter=make_exporter(config.format, browser),
            output_dir=config.output_dir,
            max_depth=config.max_depth,
            delay=config.delay,
            progress=config.progress,
        )
        summary = crawler.crawl(root_url or config.base_url)
    crawler.log_summary(summary)
    return summary


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the crawler CLI.
    """
    args = parse_args(argv)

    setup_logging(debug=args.debug)

    if not _TQDM_AVAILABLE:
        log.info("Tip: install tqdm for a live progress bar  (pip install tqdm)")
    if not _COLORLOG_AVAILABLE:
        log.info("Tip: install colorlog for colored output   (pip install colorlog)")
    if args.format == "pdf" and not args.headless:
        log.warning("PDF export only works in headless Chromium; ignoring --headed")
        args.headless = True

    config = CrawlerConfig(
        base_url=args.url,
        output_dir=Path(args.output),
        max_depth=args.max_depth,
        delay=args.delay,
        format=args.format,
        headless=args.headless,
        session_cookie=args.cookie,
        progress=args.progress,
    )

    try:
        run_crawl(config)
    except InitializationError as exc:
        log.critical("Crawling failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
