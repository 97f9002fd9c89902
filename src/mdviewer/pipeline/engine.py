"""Render pipeline: preprocessing, conversion, header linking, highlighting."""

from __future__ import annotations

import logging

from mdviewer.config.schema import ViewerConfig
from mdviewer.pipeline.headers import extract_and_link
from mdviewer.pipeline.highlighter import Highlighter, PygmentsHighlighter, highlight_fences
from mdviewer.pipeline.languages import DEFAULT_ALIASES, LanguageAliasTable
from mdviewer.pipeline.markdown_engine import MarkdownEngine
from mdviewer.pipeline.preprocessor import run_preprocessing
from mdviewer.types import DocumentRef, RenderResult

logger = logging.getLogger(__name__)


class RenderPipeline:
    """Run one document through: normalize → Markdown → headers → code.

    Header linking and code highlighting are full sequential passes over
    the whole HTML string, each producing a new string.
    """

    def __init__(
        self,
        config: ViewerConfig | None = None,
        highlighter: Highlighter | None = None,
        aliases: LanguageAliasTable | None = None,
        markdown_engine: MarkdownEngine | None = None,
    ) -> None:
        self.config = config or ViewerConfig()
        self.aliases = (aliases or DEFAULT_ALIASES).with_overrides(self.config.language_aliases)
        self.highlighter = highlighter or PygmentsHighlighter(
            self.config.highlight, style=self.config.style
        )
        self.markdown_engine = markdown_engine or MarkdownEngine(self.config.markdown_extensions)

    def run(self, text: str, document: DocumentRef | None = None) -> RenderResult:
        """Render Markdown text into HTML plus its header forest."""
        prepared = run_preprocessing(text, self.config.preprocessing)
        html = self.markdown_engine.convert(prepared)

        html, headers = extract_and_link(html, document)
        html = highlight_fences(
            html,
            self.aliases,
            self.highlighter,
            overall_class=self.config.highlight.overall_class,
        )

        logger.info(
            "Rendered '%s': %d root headers, %d chars",
            document.title if document else "<text>",
            len(headers),
            len(html),
        )
        return RenderResult(html=html, headers=headers, document=document)
