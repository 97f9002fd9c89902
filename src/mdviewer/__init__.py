"""mdviewer: render Markdown documents as HTML pages with a table of contents."""

from mdviewer.core import MarkdownViewer, render, render_file
from mdviewer.errors import ConfigError, DocumentAccessError, HighlightError, MdViewerError
from mdviewer.types import DocumentRef, Header, RenderResult

__all__ = [
    "MarkdownViewer",
    "render",
    "render_file",
    "DocumentRef",
    "Header",
    "RenderResult",
    "MdViewerError",
    "DocumentAccessError",
    "HighlightError",
    "ConfigError",
]
