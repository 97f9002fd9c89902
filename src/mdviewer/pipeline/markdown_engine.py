"""Markdown engine boundary: Python-Markdown with the "extra" extensions."""

from __future__ import annotations

import markdown

from mdviewer.config.defaults import DEFAULT_MARKDOWN_EXTENSIONS


class MarkdownEngine:
    """Converts Markdown source to HTML.

    Fenced code renders as ``<pre><code class="language-TAG">``, which is
    what the code highlighter scans for.
    """

    def __init__(self, extensions: list[str] | None = None) -> None:
        self.extensions = list(extensions if extensions is not None else DEFAULT_MARKDOWN_EXTENSIONS)

    def convert(self, text: str) -> str:
        # Markdown instances carry per-document state.
        md = markdown.Markdown(extensions=self.extensions, output_format="html")
        return md.convert(text)
