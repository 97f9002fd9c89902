"""Fenced code highlighting: Pygments-backed, with wrapper stripping."""

from __future__ import annotations

import html as html_lib
import logging
import re
from collections.abc import Iterator
from typing import NamedTuple, Protocol

from pygments import highlight as pygments_highlight
from pygments.filter import Filter
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.token import Name, Number, Operator, Punctuation, String, Text
from pygments.util import ClassNotFound

from mdviewer.errors.exceptions import HighlightError
from mdviewer.pipeline.languages import LanguageAliasTable
from mdviewer.types import HighlightOptions

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r'<code class="language-([^"\s]+)">(.*?)</code>', re.IGNORECASE | re.DOTALL)

# Canonical names that Pygments knows under another alias
_PYGMENTS_LEXER_NAMES: dict[str, str] = {
    "html5": "html",
}


class Highlighter(Protocol):
    def highlight(self, code: str, language: str) -> str: ...


class CodeFence(NamedTuple):
    language_tag: str
    raw_content: str
    markup: str


class _TokenCategoryFilter(Filter):
    """Downgrade disabled token categories to plain text."""

    def __init__(self, **options):
        Filter.__init__(self, **options)
        self.plain = tuple(options.get("plain", ()))

    def filter(self, lexer, stream):
        for ttype, value in stream:
            if any(ttype in category for category in self.plain):
                yield Text, value
            else:
                yield ttype, value


class PygmentsHighlighter:
    """Highlights code with Pygments using class-based HTML output.

    The fragment is wrapped in ``<div class="LANGUAGE OVERALL"><pre>``,
    which ``strip_wrapper`` knows how to remove.
    """

    def __init__(self, options: HighlightOptions | None = None, style: str = "default") -> None:
        self.options = options or HighlightOptions()
        self.style = style

    @property
    def overall_class(self) -> str:
        return self.options.overall_class

    def highlight(self, code: str, language: str) -> str:
        lexer_name = _PYGMENTS_LEXER_NAMES.get(language, language)
        try:
            lexer = get_lexer_by_name(lexer_name)
        except ClassNotFound as e:
            raise HighlightError(
                f"Unsupported language for highlighting: '{language}'",
                language=language,
                original=e,
            ) from e

        plain = self._disabled_categories()
        if plain:
            lexer.add_filter(_TokenCategoryFilter(plain=plain))

        try:
            formatter = HtmlFormatter(
                cssclass=f"{language} {self.overall_class}",
                noclasses=not self.options.use_classes,
                style=self.style,
            )
            return pygments_highlight(code, lexer, formatter)
        except Exception as e:
            raise HighlightError(
                f"Highlighter failed for language '{language}': {e}",
                language=language,
                original=e,
            ) from e

    def style_defs(self, selector: str = "pre") -> str:
        """CSS rules for the token classes emitted with ``use_classes``."""
        return HtmlFormatter(style=self.style).get_style_defs(selector)

    def _disabled_categories(self) -> list:
        opts = self.options
        plain: list = []
        if not opts.methods:
            plain.append(Name.Function)
        if not opts.numbers:
            plain.append(Number)
        if not opts.symbols:
            plain.extend([Operator, Punctuation])
        if not opts.strings:
            plain.append(String)
        return plain


def find_fences(html: str) -> Iterator[CodeFence]:
    """Yield language-tagged code elements in document order."""
    for match in _FENCE_RE.finditer(html):
        yield CodeFence(
            language_tag=match.group(1),
            raw_content=match.group(2),
            markup=match.group(0),
        )


def strip_wrapper(fragment: str, language: str, overall_class: str) -> str:
    """Remove the highlighter's own block wrapper around a fragment."""
    open_re = re.compile(
        rf'<div class="{re.escape(language)} {re.escape(overall_class)}"[^>]*>'
        r"\s*<pre[^>]*>(?:<span></span>)?"
    )
    fragment = open_re.sub("", fragment, count=1)
    return fragment.replace("</pre></div>", "").rstrip("\n")


def highlight_fences(
    html: str,
    aliases: LanguageAliasTable,
    highlighter: Highlighter,
    overall_class: str | None = None,
) -> str:
    """Replace every fenced code block's content with highlighted markup.

    Highlighter failures propagate. Identical blocks produce identical
    output, so one replacement covers all of their occurrences.
    """
    if overall_class is None:
        overall_class = getattr(highlighter, "overall_class", HighlightOptions().overall_class)

    count = 0
    for fence in find_fences(html):
        if fence.markup not in html:
            continue

        language = aliases.resolve(fence.language_tag)
        source = html_lib.unescape(fence.raw_content)
        logger.debug("Highlighting %s block as '%s'", fence.language_tag, language)

        fragment = highlighter.highlight(source, language)
        body = strip_wrapper(fragment, language, overall_class)

        open_tag = fence.markup[: fence.markup.index(">") + 1]
        html = html.replace(fence.markup, f"{open_tag}{body}</code>")
        count += 1

    if count:
        logger.debug("Highlighted %d code blocks", count)
    return html
