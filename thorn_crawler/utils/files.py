"""Output-tree helpers: directory resolution and document writing."""

from pathlib import Path
from typing import Iterable

from ..logging_setup import log


def build_directory(output_dir: Path, folder_path: Iterable[str]) -> Path:
    """
    Map a folder path onto a directory under *output_dir*, creating it.

    An empty path resolves to *output_dir* itself.  Labels are joined as-is;
    they are expected to be normalised already.  Calling this twice with the
    same arguments is harmless and returns the same absolute path.
    """
    directory = Path(output_dir).joinpath(*folder_path).resolve()
    if not directory.is_dir():
        directory.mkdir(parents=True, exist_ok=True)
        log.info("[DIR] Created directory: %s", directory)
    return directory


def save_document(local_path: Path, content: str | bytes) -> None:
    """Write *content* to *local_path*, creating all parent directories."""
    local_path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        local_path.write_bytes(content)
    else:
        local_path.write_text(content, encoding="utf-8")
    log.debug("Saved → %s (%d chars/bytes)", local_path, len(content))
