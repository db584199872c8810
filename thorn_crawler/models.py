"""
thorn_crawler.models
====================
Value types and per-crawl state.

Everything mutable that a crawl needs lives in :class:`CrawlContext`, which
is created fresh for each :meth:`Crawler.crawl` call.  Two crawlers in the
same process therefore never see each other's visited URLs or counters.
"""

from __future__ import annotations

import enum
import threading
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator


class LinkType(enum.Enum):
    FOLDER = "folder"
    POST = "post"


class NodeState(enum.Enum):
    UNVISITED = "unvisited"
    VISITING = "visiting"
    EXPANDED = "expanded"
    EXPORTED = "exported"
    SKIPPED = "skipped"
    FAILED = "failed"


TERMINAL_STATES = frozenset({
    NodeState.EXPANDED, NodeState.EXPORTED, NodeState.SKIPPED, NodeState.FAILED,
})


@dataclass(frozen=True)
class Link:
    url: str
    text: str
    type: LinkType


@dataclass(frozen=True)
class ExportResult:
    success: bool
    path: Path | None
    title: str


class VisitedSet:
    """URLs already taken by this crawl; grows monotonically."""

    def __init__(self) -> None:
        self._urls: set[str] = set()
        self._lock = threading.Lock()

    def mark(self, url: str) -> bool:
        """Add *url*; True if it was new, False if it had been seen before."""
        with self._lock:
            if url in self._urls:
                return False
            self._urls.add(url)
            return True

    def __contains__(self, url: object) -> bool:
        return url in self._urls

    def __len__(self) -> int:
        return len(self._urls)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._urls))


class FolderCounter:
    """
    Per-directory sequence numbers for generated filenames.

    Keyed by absolute directory, so two folder paths resolving to the same
    directory share a sequence.  Every call to :meth:`next` consumes a
    number, whether or not the export that asked for it succeeds.
    """

    def __init__(self) -> None:
        self._next: dict[Path, int] = {}
        self._lock = threading.Lock()

    def next(self, directory: Path) -> int:
        key = Path(directory).resolve()
        with self._lock:
            seq = self._next.get(key, 1)
            self._next[key] = seq + 1
            return seq

    def attempts(self) -> dict[Path, int]:
        """Number of export attempts per directory."""
        with self._lock:
            return {d: n - 1 for d, n in self._next.items()}


@dataclass
class CrawlContext:
    """Mutable state of one crawl run."""

    root_url: str
    visited: VisitedSet = field(default_factory=VisitedSet)
    counter: FolderCounter = field(default_factory=FolderCounter)
    states: dict[str, NodeState] = field(default_factory=dict)
    results: list[ExportResult] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def set_state(self, url: str, state: NodeState) -> None:
        if self.states.get(url) in TERMINAL_STATES:
            raise ValueError(f"{url} already reached {self.states[url].value}")
        self.states[url] = state

    def skip(self, url: str) -> None:
        """Record a repeated reference to an already visited URL."""
        self.skipped.append(url)

    def state_of(self, url: str) -> NodeState:
        return self.states.get(url, NodeState.UNVISITED)

    def urls_in(self, state: NodeState) -> list[str]:
        if state is NodeState.SKIPPED:
            return list(self.skipped)
        return [u for u, s in self.states.items() if s is state]

    def summary(self, output_dir: Path) -> CrawlSummary:
        exported: Counter[Path] = Counter()
        for result in self.results:
            if result.success and result.path is not None:
                exported[result.path.parent] += 1
        return CrawlSummary(
            root_url=self.root_url,
            output_dir=Path(output_dir).resolve(),
            visited=len(self.visited),
            documents=self.counter.attempts(),
            exported=dict(exported),
        )


@dataclass(frozen=True)
class CrawlSummary:
    root_url: str
    output_dir: Path
    visited: int
    documents: dict[Path, int]
    exported: dict[Path, int]

    def summary_lines(self, label: str = "documents") -> list[str]:
        """Human-readable end-of-run report."""
        lines = [
            "CRAWL SUMMARY:",
            f"Total URLs visited: {self.visited}",
            f"Output directory: {self.output_dir}",
        ]
        for directory, count in sorted(self.documents.items()):
            lines.append(f"{directory}: {count} {label}")
        return lines
