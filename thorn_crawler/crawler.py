"""
thorn_crawler.crawler
=====================
Depth-first crawler for a folder/post knowledge base.

Features
--------
* Every folder page contributes its breadcrumb label to the folder path of
  its children, so the local directory tree mirrors the site's hierarchy.
* Posts re-resolve their own breadcrumb: a post cross-listed under another
  folder is saved where its trail says it belongs.
* Each URL is visited at most once per crawl, whatever the number of
  folders that link to it.
* Folders deeper than ``max_depth`` are never loaded.
* Traversal runs off an explicit LIFO stack (depth-first, left-to-right
  over each listing) instead of recursion.
* A failure on one node is logged and the crawl moves on to the next one.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .config import DEFAULT_MAX_DEPTH
from .errors import CrawlError
from .logging_setup import log
from .models import (
    CrawlContext, CrawlSummary, ExportResult, FolderCounter, Link, LinkType,
    NodeState,
)
from .utils.files import build_directory

try:
    from tqdm import tqdm as _tqdm
    _TQDM_AVAILABLE = True
except ImportError:
    _TQDM_AVAILABLE = False

FolderPath = tuple[str, ...]


class PageSource(Protocol):
    def resolve_breadcrumb(self, url: str) -> str | None: ...

    def extract_links(self, url: str) -> list[Link]: ...


class Exporter(Protocol):
    label: str

    def export(
        self,
        url: str,
        directory: Path,
        counter: FolderCounter,
        filename: str | None = None,
    ) -> ExportResult: ...


@dataclass(frozen=True)
class _Node:
    url: str
    type: LinkType
    folder_path: FolderPath
    depth: int
    text: str = ""


def place_post(inherited: FolderPath, label: str | None, limit: int | None = None) -> FolderPath:
    """
    Folder path a post is exported under.

    The post stays in *inherited* when its breadcrumb is missing or equals
    the last inherited label; otherwise its label is appended.  *limit* caps
    the resulting length.
    """
    if not label:
        return inherited
    if inherited and inherited[-1] == label:
        return inherited
    if limit is not None and len(inherited) >= limit:
        return inherited
    return inherited + (label,)


def _fmt_path(folder_path: FolderPath) -> str:
    return " > ".join(folder_path)


class Crawler:
    """
    Walks a folder tree from a root URL and exports every post found.

    *source* answers breadcrumb and listing questions about a URL; *exporter*
    turns a post URL into a file.  All mutable crawl state lives in the
    :class:`CrawlContext` created by each :meth:`crawl` call; the most recent
    one is kept on ``self.context``.
    """

    def __init__(
        self,
        source: PageSource,
        exporter: Exporter,
        output_dir: Path,
        max_depth: int = DEFAULT_MAX_DEPTH,
        delay: float = 0.0,
        progress: bool = False,
    ) -> None:
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.source = source
        self.exporter = exporter
        self.output_dir = Path(output_dir)
        self.max_depth = max_depth
        self.delay = delay
        self.progress = progress
        self.context: CrawlContext | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def crawl(self, root_url: str) -> CrawlSummary:
        ctx = CrawlContext(root_url=root_url)
        self.context = ctx

        log.info("[CRAWL] Starting crawl from: %s", root_url)
        log.info("Output directory : %s", self.output_dir.resolve())
        log.info("Max depth        : %d", self.max_depth)
        build_directory(self.output_dir, ())

        stack: list[_Node] = [_Node(root_url, LinkType.FOLDER, (), 0)]
        if self.progress and _TQDM_AVAILABLE:
            self._run_with_progress(ctx, stack)
        else:
            while stack:
                self._step(ctx, stack.pop(), stack)

        summary = ctx.summary(self.output_dir)
        log.info(
            "[CRAWL] Crawl complete. visited=%d  exported=%d  failed=%d  skipped=%d",
            summary.visited,
            len(ctx.urls_in(NodeState.EXPORTED)),
            len(ctx.urls_in(NodeState.FAILED)),
            len(ctx.skipped),
        )
        return summary

    def log_summary(self, summary: CrawlSummary) -> None:
        for line in summary.summary_lines(getattr(self.exporter, "label", "documents")):
            log.info(line)

    def _run_with_progress(self, ctx: CrawlContext, stack: list[_Node]) -> None:
        """Traversal loop with a tqdm progress bar."""
        bar = _tqdm(desc="Crawling", unit="page", dynamic_ncols=True)
        bar.total = len(stack)
        while stack:
            prev = len(stack)
            self._step(ctx, stack.pop(), stack)
            added = len(stack) - prev + 1
            if added > 0:
                bar.total += added
            bar.update(1)
            bar.set_postfix(
                visited=len(ctx.visited),
                failed=len(ctx.urls_in(NodeState.FAILED)),
            )
        bar.close()

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _step(self, ctx: CrawlContext, node: _Node, stack: list[_Node]) -> None:
        """Take one node off the stack through to a terminal state."""
        if node.type is LinkType.FOLDER and node.depth > self.max_depth:
            log.debug("[DEPTH] Not descending past depth %d: %s", self.max_depth, node.url)
            return

        if not ctx.visited.mark(node.url):
            log.info("[SKIP] Already visited: %s", node.url)
            ctx.skip(node.url)
            return

        ctx.set_state(node.url, NodeState.VISITING)
        try:
            if node.type is LinkType.FOLDER:
                state = self._expand_folder(node, stack)
            elif node.type is LinkType.POST:
                state = self._export_post(ctx, node)
            else:
                raise ValueError(f"Unhandled link type: {node.type!r}")
        except (CrawlError, OSError, ValueError) as exc:
            log.error(
                "[ERR] %s (depth %d, folder [%s]) – %s",
                node.url, node.depth, _fmt_path(node.folder_path), exc,
            )
            state = NodeState.FAILED
        ctx.set_state(node.url, state)

        if stack and self.delay > 0:
            time.sleep(self.delay)

    def _expand_folder(self, node: _Node, stack: list[_Node]) -> NodeState:
        log.info("[CRAWL] Crawling (depth %d): %s", node.depth, node.url)
        log.debug("Folder context: [%s]", _fmt_path(node.folder_path))

        label = self.source.resolve_breadcrumb(node.url)
        folder_path = node.folder_path + (label,) if label else node.folder_path
        if label:
            log.info("[DIR] Folder path: [%s]", _fmt_path(folder_path))
        build_directory(self.output_dir, folder_path)

        links = self.source.extract_links(node.url)
        # Reversed so the first listed link is popped first
        for link in reversed(links):
            stack.append(_Node(link.url, link.type, folder_path, node.depth + 1, link.text))
        return NodeState.EXPANDED

    def _export_post(self, ctx: CrawlContext, node: _Node) -> NodeState:
        log.info("[POST] Processing post: %s", node.text or node.url)

        label = self.source.resolve_breadcrumb(node.url)
        post_path = place_post(node.folder_path, label, limit=self.max_depth + 1)
        if post_path != node.folder_path:
            log.info("[POST] Post belongs to different folder: [%s]", _fmt_path(post_path))
        else:
            log.debug("Post belongs to current folder: [%s]", _fmt_path(post_path))

        directory = build_directory(self.output_dir, post_path)
        result = self.exporter.export(node.url, directory, ctx.counter)
        ctx.results.append(result)
        return NodeState.EXPORTED if result.success else NodeState.FAILED
