"""Table of contents rendering from a header forest."""

from __future__ import annotations

from mdviewer.types import Header


def render_toc(headers: list[Header]) -> str:
    """Render root headers as nested ``<ul>`` navigation markup."""
    items = "".join(_render_item(h) for h in headers)
    return f'<ul class="nav-level-0">{items}</ul>'


def _render_item(header: Header) -> str:
    children = ""
    if header.subheaders:
        inner = "".join(_render_item(sub) for sub in header.subheaders)
        children = f'<ul class="nav-level-{header.level}">{inner}</ul>'
    return (
        f'<li class="nav-level-{header.level}">'
        f'<a href="{header.anchor}">{header.title}</a>'
        f"{children}</li>"
    )
