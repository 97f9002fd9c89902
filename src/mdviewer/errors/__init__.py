"""Error handling: exception hierarchy for rendering failures."""

from mdviewer.errors.exceptions import (
    ConfigError,
    DocumentAccessError,
    HighlightError,
    MdViewerError,
)

__all__ = [
    "MdViewerError",
    "DocumentAccessError",
    "HighlightError",
    "ConfigError",
]
