"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Page settings
DEFAULT_TITLE = "Documentation"

# Markdown engine settings
DEFAULT_MARKDOWN_EXTENSIONS = ["extra"]
DEFAULT_PREPROCESSING = ["normalize_list_notation"]

# Highlighter settings
DEFAULT_STYLE = "default"
DEFAULT_OVERALL_CLASS = "highlight"

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "title": DEFAULT_TITLE,
        "markdown_extensions": list(DEFAULT_MARKDOWN_EXTENSIONS),
        "preprocessing": list(DEFAULT_PREPROCESSING),
        "language_aliases": {},
        "style": DEFAULT_STYLE,
        "template_dir": None,
        "log_level": DEFAULT_LOG_LEVEL,
    }
