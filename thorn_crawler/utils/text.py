"""Folder-label and document-title normalisation."""

import re

from ..config import SEQUENCE_WIDTH, UNTITLED

# A single leading run of decorative symbols (icons, emoji) and its spacing
_LEADING_SYMBOLS_RE = re.compile(r"^[^\w\s]+\s*")
# Everything that is not a word character, whitespace or a hyphen
_UNSAFE_CHARS_RE = re.compile(r"[^\w\s-]")
_WHITESPACE_RE = re.compile(r"\s+")

SEPARATOR = "_"


def _strip_unsafe(raw: str) -> str:
    cleaned = _UNSAFE_CHARS_RE.sub("", raw).strip()
    return _WHITESPACE_RE.sub(SEPARATOR, cleaned)


def normalise_label(raw: str | None) -> str | None:
    """
    Turn breadcrumb text into a directory name.

    ``"📁 Clinics & Facilities!!"`` → ``"clinics_facilities"``

    Returns None when nothing usable is left, so an empty trail entry is
    treated as "no breadcrumb" rather than as an empty folder name.
    """
    if not raw:
        return None
    text = _LEADING_SYMBOLS_RE.sub("", raw.strip(), count=1)
    label = _strip_unsafe(text).lower()
    return label or None


def clean_title(raw: str | None, max_length: int) -> str:
    """Filename stem from a page title; case is preserved."""
    stem = _strip_unsafe(raw or "")[:max_length]
    return stem or UNTITLED


def format_filename(sequence: int, title: str | None, ext: str, max_length: int) -> str:
    """``001_Some_Title.md`` style filename."""
    return f"{sequence:0{SEQUENCE_WIDTH}d}_{clean_title(title, max_length)}.{ext}"
