"""
Tests for the Markdown and PDF exporters, with the browser mocked out.
"""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from thorn_crawler.errors import ExportError, NavigationError
from thorn_crawler.exporters import (
    MarkdownExporter, PdfExporter, make_exporter, to_markdown,
)
from thorn_crawler.models import FolderCounter

URL = "https://thorn.io/t/doc#/posts/22/how-to-book"

POST_HTML = """
<html><head><title>How to book</title></head><body>
  <div class="navbar">menu</div>
  <div class="post-content">
    <h2>Steps</h2>
    <ul><li>Open the calendar</li><li>Pick a slot</li></ul>
    <p>Read <a href="#/posts/9/other">this</a> first.</p>
    <script>alert(1)</script>
  </div>
</body></html>
"""


def make_browser(html=POST_HTML, title="How to book"):
    browser = MagicMock()
    browser.html.return_value = html
    browser.title.return_value = title
    browser.remove_elements.return_value = 2
    return browser


class ExporterTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.directory = Path(self._tmp.name).resolve()
        self.counter = FolderCounter()

    def tearDown(self):
        self._tmp.cleanup()


class TestToMarkdown(unittest.TestCase):
    def test_atx_headings_and_dash_bullets(self):
        md = to_markdown("<h2>Steps</h2><ul><li>One</li><li>Two</li></ul>")
        self.assertIn("## Steps", md)
        self.assertIn("- One", md)
        self.assertIn("- Two", md)

    def test_script_dropped(self):
        md = to_markdown("<p>Text</p><script>alert(1)</script>")
        self.assertNotIn("alert", md)

    def test_style_and_noscript_dropped(self):
        md = to_markdown("<style>p { color: red }</style><p>Text</p><noscript>enable js</noscript>")
        self.assertEqual(md, "Text")

    def test_bold_uses_asterisks(self):
        self.assertEqual(to_markdown("<p><strong>Note</strong></p>"), "**Note**")

    def test_blank_line_runs_collapsed(self):
        md = to_markdown("<p>a</p><br><br><br><br><p>b</p>")
        self.assertNotIn("\n\n\n", md)


class TestMarkdownExporter(ExporterTestCase):
    def test_writes_numbered_markdown(self):
        browser = make_browser()
        result = MarkdownExporter(browser).export(URL, self.directory, self.counter)

        self.assertTrue(result.success)
        self.assertEqual(result.title, "How to book")
        self.assertEqual(result.path, self.directory / "001_How_to_book.md")
        text = result.path.read_text(encoding="utf-8")
        self.assertTrue(text.endswith("\n"))
        self.assertIn("## Steps", text)
        self.assertIn("(https://thorn.io/t/doc#/posts/9/other)", text)
        self.assertNotIn("menu", text)
        self.assertNotIn("alert", text)
        browser.goto.assert_called_once_with(URL, settle=1.0)

    def test_sequence_increments_per_directory(self):
        exporter = MarkdownExporter(make_browser())
        first = exporter.export(URL, self.directory, self.counter)
        second = exporter.export(URL, self.directory, self.counter)
        self.assertEqual(first.path.name, "001_How_to_book.md")
        self.assertEqual(second.path.name, "002_How_to_book.md")

    def test_explicit_filename_still_consumes_sequence(self):
        exporter = MarkdownExporter(make_browser())
        result = exporter.export(URL, self.directory, self.counter, filename="intro")
        self.assertEqual(result.path.name, "intro.md")
        self.assertEqual(self.counter.next(self.directory), 2)

    def test_long_title_truncated(self):
        exporter = MarkdownExporter(make_browser(title="T" * 120))
        result = exporter.export(URL, self.directory, self.counter)
        self.assertEqual(result.path.name, "001_" + "T" * 80 + ".md")

    def test_navigation_failure_reported_not_raised(self):
        browser = make_browser()
        browser.goto.side_effect = NavigationError(URL, "Timeout 30000ms exceeded")
        exporter = MarkdownExporter(browser)

        result = exporter.export(URL, self.directory, self.counter)
        self.assertFalse(result.success)
        self.assertIsNone(result.path)
        self.assertEqual(result.title, URL)
        # The failed attempt used up number 1
        ok = MarkdownExporter(make_browser()).export(URL, self.directory, self.counter)
        self.assertEqual(ok.path.name, "002_How_to_book.md")

    def test_unparseable_page_reported_not_raised(self):
        surrogate = UnicodeEncodeError("utf-8", "\ud800", 0, 1, "surrogates not allowed")
        with patch("thorn_crawler.extract.soup.BeautifulSoup", side_effect=surrogate):
            result = MarkdownExporter(make_browser()).export(URL, self.directory, self.counter)
        self.assertFalse(result.success)
        self.assertEqual(result.title, URL)
        self.assertEqual(list(self.directory.iterdir()), [])

    def test_value_error_from_browser_reported(self):
        browser = make_browser()
        browser.html.side_effect = ValueError("bad page text")
        result = MarkdownExporter(browser).export(URL, self.directory, self.counter)
        self.assertFalse(result.success)

    def test_write_failure_reported(self):
        blocker = self.directory / "blocked"
        blocker.write_text("not a directory")
        result = MarkdownExporter(make_browser()).export(URL, blocker, self.counter)
        self.assertFalse(result.success)


class TestPdfExporter(ExporterTestCase):
    def test_strips_chrome_and_prints(self):
        browser = make_browser(title="Invoices & Payments")
        result = PdfExporter(browser).export(URL, self.directory, self.counter)

        self.assertTrue(result.success)
        self.assertEqual(result.path, self.directory / "001_Invoices_Payments.pdf")
        browser.remove_elements.assert_called_once()
        browser.pdf.assert_called_once_with(result.path)

    def test_title_limit_is_fifty(self):
        result = PdfExporter(make_browser(title="x" * 70)).export(
            URL, self.directory, self.counter
        )
        self.assertEqual(result.path.name, "001_" + "x" * 50 + ".pdf")

    def test_render_failure(self):
        browser = make_browser()
        browser.pdf.side_effect = ExportError("boom")
        result = PdfExporter(browser).export(URL, self.directory, self.counter)
        self.assertFalse(result.success)
        self.assertEqual(result.title, URL)


class TestMakeExporter(unittest.TestCase):
    def test_known_formats(self):
        browser = MagicMock()
        self.assertIsInstance(make_exporter("markdown", browser), MarkdownExporter)
        self.assertIsInstance(make_exporter("pdf", browser), PdfExporter)

    def test_unknown_format(self):
        with self.assertRaises(ExportError):
            make_exporter("docx", MagicMock())


if __name__ == "__main__":
    unittest.main()
