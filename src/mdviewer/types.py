"""Shared Pydantic models for mdviewer."""

from __future__ import annotations

import hashlib
from collections.abc import Iterator
from pathlib import Path

from pydantic import BaseModel, Field

from mdviewer.config.defaults import DEFAULT_OVERALL_CLASS

# ── Document models ──


class DocumentRef(BaseModel):
    """The document currently being rendered."""

    id: str
    title: str
    path: Path | None = None

    @classmethod
    def from_path(cls, path: str | Path, title: str | None = None) -> DocumentRef:
        path = Path(path)
        digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:12]
        return cls(id=digest, title=title or path.stem, path=path)

    @property
    def href(self) -> str:
        """Link base pointing at this document."""
        return f"?doc={self.id}"


class Header(BaseModel):
    """One heading element found in the rendered HTML."""

    title: str
    level: int = Field(ge=1, le=9)
    original_markup: str
    anchor_id: str
    attributes: dict[str, str] = Field(default_factory=dict)
    subheaders: list[Header] = Field(default_factory=list)

    @property
    def anchor(self) -> str:
        return f"#{self.anchor_id}"

    def add_subheader(self, header: Header) -> None:
        self.subheaders.append(header)

    def walk(self) -> Iterator[Header]:
        """Yield this header and all descendants, depth-first in document order."""
        yield self
        for sub in self.subheaders:
            yield from sub.walk()


# ── Highlighting ──


class HighlightOptions(BaseModel):
    """Options requested from the highlighter on every invocation."""

    use_classes: bool = True
    methods: bool = True
    numbers: bool = True
    symbols: bool = True
    strings: bool = True
    overall_class: str = DEFAULT_OVERALL_CLASS


# ── Runtime models ──


class RenderResult(BaseModel):
    html: str
    headers: list[Header] = Field(default_factory=list)
    document: DocumentRef | None = None

    def all_headers(self) -> list[Header]:
        """Flatten the header forest in document order."""
        return [h for root in self.headers for h in root.walk()]

    def toc_html(self) -> str:
        from mdviewer.toc import render_toc

        return render_toc(self.headers)
