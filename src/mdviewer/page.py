"""Jinja2 page template: wraps a render result into a standalone HTML page."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from mdviewer.types import RenderResult

_BUILTIN_TEMPLATES_DIR = Path(__file__).parent / "templates"
_PAGE_TEMPLATE = "page.html.j2"


def _build_env(template_dir: Path | None) -> Environment:
    search_path = [str(_BUILTIN_TEMPLATES_DIR)]
    if template_dir is not None:
        # User templates shadow the builtin one
        search_path.insert(0, str(template_dir))
    return Environment(
        loader=FileSystemLoader(search_path),
        autoescape=select_autoescape(["html", "j2"]),
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def render_page_html(
    result: RenderResult,
    title: str,
    style_css: str = "",
    template_dir: Path | None = None,
) -> str:
    """Render the full document page: content, table of contents and CSS."""
    template = _build_env(template_dir).get_template(_PAGE_TEMPLATE)
    document_title = result.document.title if result.document else ""
    return template.render(
        title=title,
        document_title=document_title,
        content=result.html,
        toc=result.toc_html() if result.headers else "",
        style_css=style_css,
    )
