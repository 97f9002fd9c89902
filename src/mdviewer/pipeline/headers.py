"""Header tree builder: heading extraction, nesting and anchor rewriting."""

from __future__ import annotations

import html as html_lib
import logging
import re

from markdown.extensions.toc import slugify_unicode, unique

from mdviewer.types import DocumentRef, Header

logger = logging.getLogger(__name__)

# Opening tag, inner content up to the first closing tag of the same level.
_HEADING_RE = re.compile(r"<h([1-9])\b([^>]*)>(.*?)</h\1>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")
_ATTR_RE = re.compile(r'([^\s=/>]+)\s*=\s*"([^"]*)"')

_FALLBACK_ANCHOR = "section"


def slugify(title: str) -> str:
    """Derive a URL-fragment-safe identifier from heading inner HTML."""
    text = html_lib.unescape(_TAG_RE.sub("", title))
    return slugify_unicode(text, "-") or _FALLBACK_ANCHOR


def _parse_attributes(tag_body: str) -> dict[str, str]:
    return {name.lower(): value for name, value in _ATTR_RE.findall(tag_body)}


def scan_headers(html: str) -> list[Header]:
    """Find all headings in document order, each with a unique anchor.

    An ``id`` already on the heading (``{#custom}`` with attr_list) is kept
    as its anchor. Unterminated or malformed headings do not match and are
    left out.
    """
    seen: set[str] = set()
    headers: list[Header] = []
    for match in _HEADING_RE.finditer(html):
        title = match.group(3)
        attributes = _parse_attributes(match.group(2))
        explicit_id = attributes.pop("id", None)
        if explicit_id:
            seen.add(explicit_id)
            anchor_id = explicit_id
        else:
            anchor_id = unique(slugify(title), seen)
        headers.append(
            Header(
                title=title,
                level=int(match.group(1)),
                original_markup=match.group(0),
                anchor_id=anchor_id,
                attributes=attributes,
            )
        )
    return headers


def build_forest(headers: list[Header]) -> list[Header]:
    """Link headers into a tree and return the level-1 roots.

    A header attaches under the most recent header one level up. Deeper
    slots in ``active`` are never cleared; only ``level - 1`` is consulted.
    """
    active: dict[int, Header] = {}
    roots: list[Header] = []

    for header in headers:
        level = header.level
        active[level] = header

        if level == 1:
            roots.append(header)
            continue

        parent = active.get(level - 1)
        if parent is not None:
            parent.add_subheader(header)
        else:
            logger.debug("Orphaned h%d '%s' has no h%d ancestor", level, header.anchor_id, level - 1)

    return roots


def heading_markup(header: Header, document: DocumentRef | None = None) -> str:
    """Build the self-linking replacement markup for a heading.

    Attributes of the original tag are kept; ``doc-header`` is appended to
    any existing class.
    """
    base = document.href if document is not None else ""
    attributes = dict(header.attributes)
    classes = " ".join(filter(None, [attributes.pop("class", ""), "doc-header"]))
    extra = "".join(f' {name}="{value}"' for name, value in attributes.items())
    return (
        f'<h{header.level} id="{header.anchor_id}" class="{classes}"{extra}>'
        f"{header.title} "
        f'<a class="header-anchor" href="{base}#{header.anchor_id}">&para;</a>'
        f"</h{header.level}>"
    )


def extract_and_link(
    html: str,
    document: DocumentRef | None = None,
) -> tuple[str, list[Header]]:
    """Extract the header forest and rewrite headings with anchors.

    Every occurrence of a heading's original markup is replaced, so for
    byte-identical duplicates only the first header is linked correctly.

    Returns (rewritten_html, roots).
    """
    headers = scan_headers(html)
    if not headers:
        return html, []

    roots = build_forest(headers)

    for header in headers:
        html = html.replace(header.original_markup, heading_markup(header, document))

    logger.debug("Linked %d headers (%d roots)", len(headers), len(roots))
    return html, roots
