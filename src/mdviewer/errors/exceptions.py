"""Custom exception hierarchy for mdviewer."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class MdViewerError(Exception):
    """Base exception for all mdviewer errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class DocumentAccessError(MdViewerError):
    """The Markdown source could not be read. Fatal for the render.

    Examples: missing file, permission denied, undecodable bytes.
    """

    def __init__(
        self,
        message: str = "",
        path: str | Path | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.original = original


class HighlightError(MdViewerError):
    """The syntax highlighter failed. Fatal for the render.

    Examples: unsupported language, highlighter internal failure.
    """

    def __init__(
        self,
        message: str = "",
        language: str | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.language = language
        self.original = original


class ConfigError(MdViewerError):
    """A configuration file or value is invalid."""

    def __init__(self, message: str = "", path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
