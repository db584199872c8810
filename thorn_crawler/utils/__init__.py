"""Utility subpackage for the Thorn knowledge-base crawler."""

from .text import normalise_label, clean_title, format_filename
from .url import absolutise, classify_href
from .files import build_directory, save_document

__all__ = [
    "normalise_label",
    "clean_title",
    "format_filename",
    "absolutise",
    "classify_href",
    "build_directory",
    "save_document",
]
