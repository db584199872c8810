"""
Tests for per-crawl state: visited set, folder counters, summaries.
"""

import tempfile
import unittest
from pathlib import Path

from thorn_crawler.models import (
    CrawlContext, ExportResult, FolderCounter, NodeState, VisitedSet,
)


class TestVisitedSet(unittest.TestCase):
    def test_mark_new_then_seen(self):
        visited = VisitedSet()
        self.assertTrue(visited.mark("https://a"))
        self.assertFalse(visited.mark("https://a"))
        self.assertEqual(len(visited), 1)
        self.assertIn("https://a", visited)

    def test_exact_string_identity(self):
        visited = VisitedSet()
        visited.mark("https://a#/posts/1")
        self.assertTrue(visited.mark("https://a#/posts/1/"))
        self.assertEqual(len(visited), 2)


class TestFolderCounter(unittest.TestCase):
    def test_sequence_per_directory(self):
        with tempfile.TemporaryDirectory() as tmp:
            a, b = Path(tmp) / "a", Path(tmp) / "b"
            counter = FolderCounter()
            self.assertEqual([counter.next(a) for _ in range(3)], [1, 2, 3])
            self.assertEqual(counter.next(b), 1)
            self.assertEqual(counter.attempts(), {a.resolve(): 3, b.resolve(): 1})

    def test_same_directory_different_spelling_shares_counter(self):
        with tempfile.TemporaryDirectory() as tmp:
            counter = FolderCounter()
            counter.next(Path(tmp) / "x")
            self.assertEqual(counter.next(Path(tmp) / "y" / ".." / "x"), 2)


class TestCrawlContext(unittest.TestCase):
    def test_terminal_state_is_final(self):
        ctx = CrawlContext(root_url="r")
        ctx.set_state("r", NodeState.VISITING)
        ctx.set_state("r", NodeState.EXPANDED)
        with self.assertRaises(ValueError):
            ctx.set_state("r", NodeState.VISITING)

    def test_urls_in(self):
        ctx = CrawlContext(root_url="r")
        ctx.set_state("a", NodeState.FAILED)
        ctx.set_state("b", NodeState.EXPORTED)
        self.assertEqual(ctx.urls_in(NodeState.FAILED), ["a"])

    def test_summary_counts(self):
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp)
            ctx = CrawlContext(root_url="r")
            ctx.visited.mark("r")
            ctx.visited.mark("p1")
            ctx.counter.next(out)
            ctx.counter.next(out)
            ctx.results.append(ExportResult(True, out.resolve() / "001_a.md", "A"))
            ctx.results.append(ExportResult(False, None, "p2"))

            summary = ctx.summary(out)
            self.assertEqual(summary.visited, 2)
            self.assertEqual(summary.documents, {out.resolve(): 2})
            self.assertEqual(summary.exported, {out.resolve(): 1})
            lines = summary.summary_lines("Markdown files")
            self.assertIn("Total URLs visited: 2", lines)
            self.assertIn(f"{out.resolve()}: 2 Markdown files", lines)


if __name__ == "__main__":
    unittest.main()
