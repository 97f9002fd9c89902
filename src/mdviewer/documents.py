"""Document source access."""

from __future__ import annotations

import logging
from pathlib import Path

from mdviewer.errors.exceptions import DocumentAccessError

logger = logging.getLogger(__name__)


def read_contents(path: str | Path) -> str:
    """Read a Markdown source file as UTF-8.

    Raises:
        DocumentAccessError: if the file is missing, unreadable or not UTF-8.
    """
    path = Path(path)
    if not path.is_file():
        raise DocumentAccessError(f"Document not found: {path}", path=path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentAccessError(f"Cannot read document {path}: {e}", path=path, original=e) from e

    logger.debug("Read %d chars from %s", len(text), path)
    return text
