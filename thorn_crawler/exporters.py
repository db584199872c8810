"""
thorn_crawler.exporters
=======================
Document exporters: one rendered post → one file on disk.

Both exporters share the naming scheme ``{seq:03d}_{title}.{ext}`` where the
sequence number comes from the crawl's :class:`FolderCounter` for the target
directory.  The number is reserved before the page is even loaded, so a
failed export still uses it up.
"""

from __future__ import annotations

import re
from pathlib import Path

from markdownify import ATX, MarkdownConverter

from .browser import BrowserSession
from .config import (
    CHROME_SELECTORS, EXPORT_SETTLE_DELAY, FORMAT_MARKDOWN, FORMAT_PDF,
    MARKDOWN_TITLE_LIMIT, PDF_TITLE_LIMIT,
)
from .errors import CrawlError, ExportError
from .extract import extract_post_content
from .logging_setup import log
from .models import ExportResult, FolderCounter
from .utils.files import save_document
from .utils.text import format_filename

_BLANK_LINES_RE = re.compile(r"\n{3,}")


class _PostConverter(MarkdownConverter):
    """Drops script, style and noscript elements together with their text."""

    def convert_script(self, el, text, *args, **kwargs):
        return ""

    convert_style = convert_script
    convert_noscript = convert_script


def to_markdown(html: str) -> str:
    """Convert a post body to Markdown (ATX headings, ``-`` bullets, ``**`` bold)."""
    result = _PostConverter(heading_style=ATX, bullets="-").convert(html)
    return _BLANK_LINES_RE.sub("\n\n", result).strip()


class DocumentExporter:
    """Base class; subclasses implement :meth:`_render`."""

    extension: str = ""
    title_limit: int = MARKDOWN_TITLE_LIMIT
    label: str = "documents"

    def __init__(self, browser: BrowserSession, settle: float = EXPORT_SETTLE_DELAY) -> None:
        self.browser = browser
        self.settle = settle

    def export(
        self,
        url: str,
        directory: Path,
        counter: FolderCounter,
        filename: str | None = None,
    ) -> ExportResult:
        """
        Render *url* into *directory*.  Never raises for page-level errors:
        a failure is logged and reported as ``success=False`` with the URL as
        the title.
        """
        directory = Path(directory)
        sequence = counter.next(directory)
        log.info("[EXPORT] #%03d %s", sequence, url)
        try:
            self.browser.goto(url, settle=self.settle)
            title, path = self._render(url, directory, sequence, filename)
        except (CrawlError, OSError, ValueError) as exc:
            log.error("[ERR] Failed to export %s – %s", url, exc)
            return ExportResult(success=False, path=None, title=url)
        log.info("[SAVE] %s", path)
        return ExportResult(success=True, path=path, title=title)

    def target_path(
        self, directory: Path, sequence: int, title: str, filename: str | None
    ) -> Path:
        if filename:
            if not filename.endswith(f".{self.extension}"):
                filename = f"{filename}.{self.extension}"
        else:
            filename = format_filename(sequence, title, self.extension, self.title_limit)
        return directory / filename

    def _render(
        self, url: str, directory: Path, sequence: int, filename: str | None
    ) -> tuple[str, Path]:
        raise NotImplementedError


class MarkdownExporter(DocumentExporter):
    extension = "md"
    title_limit = MARKDOWN_TITLE_LIMIT
    label = "Markdown files"

    def _render(self, url, directory, sequence, filename):
        content = extract_post_content(self.browser.html(), url)
        title = self.browser.title() or content.title
        path = self.target_path(directory, sequence, title, filename)
        save_document(path, to_markdown(content.html) + "\n")
        return title, path


class PdfExporter(DocumentExporter):
    extension = "pdf"
    title_limit = PDF_TITLE_LIMIT
    label = "PDFs"

    def _render(self, url, directory, sequence, filename):
        removed = self.browser.remove_elements(CHROME_SELECTORS)
        log.debug("Removed %d chrome element(s) from %s", removed, url)
        title = self.browser.title()
        path = self.target_path(directory, sequence, title, filename)
        directory.mkdir(parents=True, exist_ok=True)
        self.browser.pdf(path)
        return title, path


_EXPORTERS: dict[str, type[DocumentExporter]] = {
    FORMAT_MARKDOWN: MarkdownExporter,
    FORMAT_PDF: PdfExporter,
}


def make_exporter(fmt: str, browser: BrowserSession) -> DocumentExporter:
    try:
        return _EXPORTERS[fmt](browser)
    except KeyError:
        raise ExportError(f"Unknown export format: {fmt!r}") from None
