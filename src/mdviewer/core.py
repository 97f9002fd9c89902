"""Top-level entry points: render(), render_file(), MarkdownViewer."""

from __future__ import annotations

import logging
from pathlib import Path

from mdviewer.config.schema import ViewerConfig
from mdviewer.documents import read_contents
from mdviewer.page import render_page_html
from mdviewer.pipeline.engine import RenderPipeline
from mdviewer.pipeline.highlighter import Highlighter, PygmentsHighlighter
from mdviewer.pipeline.languages import LanguageAliasTable
from mdviewer.types import DocumentRef, RenderResult

logger = logging.getLogger(__name__)


class MarkdownViewer:
    """Main renderer class: Markdown in, HTML with headers and TOC out."""

    def __init__(
        self,
        config: ViewerConfig | None = None,
        highlighter: Highlighter | None = None,
        aliases: LanguageAliasTable | None = None,
    ) -> None:
        self._config = config or ViewerConfig()
        self._pipeline = RenderPipeline(self._config, highlighter=highlighter, aliases=aliases)

    @property
    def config(self) -> ViewerConfig:
        return self._config

    @property
    def pipeline(self) -> RenderPipeline:
        return self._pipeline

    def render_text(self, text: str, document: DocumentRef | None = None) -> RenderResult:
        """Render Markdown text held in memory."""
        return self._pipeline.run(text, document)

    def render_file(self, path: str | Path, title: str | None = None) -> RenderResult:
        """Read and render a Markdown file.

        Raises:
            DocumentAccessError: if the file cannot be read.
            HighlightError: if a code block cannot be highlighted.
        """
        logger.debug("Rendering file %s", path)
        document = DocumentRef.from_path(path, title=title)
        text = read_contents(path)
        return self._pipeline.run(text, document)

    def render_page(self, path: str | Path, title: str | None = None) -> str:
        """Render a Markdown file as a complete HTML page."""
        result = self.render_file(path, title=title)
        return self.page_for(result)

    def page_for(self, result: RenderResult) -> str:
        highlighter = self._pipeline.highlighter
        style_css = ""
        if isinstance(highlighter, PygmentsHighlighter) and self._config.highlight.use_classes:
            style_css = highlighter.style_defs(".doc-content pre")
        return render_page_html(
            result,
            title=self._config.title,
            style_css=style_css,
            template_dir=self._config.template_dir,
        )


# ── Module-level convenience functions ──


def render(text: str, config: ViewerConfig | None = None) -> RenderResult:
    """Render Markdown text with a default viewer."""
    return MarkdownViewer(config=config).render_text(text)


def render_file(path: str | Path, config: ViewerConfig | None = None) -> RenderResult:
    """Render a Markdown file with a default viewer."""
    return MarkdownViewer(config=config).render_file(path)
