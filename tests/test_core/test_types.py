"""Tests for shared models, table of contents and document access."""

from pathlib import Path

import pytest

from mdviewer.documents import read_contents
from mdviewer.errors.exceptions import DocumentAccessError
from mdviewer.pipeline.headers import extract_and_link
from mdviewer.toc import render_toc
from mdviewer.types import DocumentRef, Header, RenderResult


def _forest(html: str) -> list[Header]:
    return extract_and_link(html)[1]


class TestDocumentRef:
    def test_from_path(self):
        doc = DocumentRef.from_path("docs/guide.md")
        assert doc.title == "guide"
        assert doc.path == Path("docs/guide.md")
        assert len(doc.id) == 12

    def test_stable_id(self):
        assert DocumentRef.from_path("a.md").id == DocumentRef.from_path("a.md").id
        assert DocumentRef.from_path("a.md").id != DocumentRef.from_path("b.md").id

    def test_href(self):
        assert DocumentRef(id="x1", title="X").href == "?doc=x1"


class TestHeader:
    def test_level_bounds(self):
        with pytest.raises(ValueError):
            Header(title="x", level=0, original_markup="", anchor_id="x")

    def test_walk_order(self):
        [root] = _forest("<h1>A</h1><h2>B</h2><h3>C</h3><h2>D</h2>")
        assert [h.title for h in root.walk()] == ["A", "B", "C", "D"]

    def test_anchor(self):
        header = Header(title="X", level=2, original_markup="<h2>X</h2>", anchor_id="x")
        assert header.anchor == "#x"


class TestRenderResult:
    def test_all_headers_flat(self):
        roots = _forest("<h1>A</h1><h2>B</h2><h1>C</h1>")
        result = RenderResult(html="", headers=roots)
        assert [h.title for h in result.all_headers()] == ["A", "B", "C"]


class TestRenderToc:
    def test_empty(self):
        assert render_toc([]) == '<ul class="nav-level-0"></ul>'

    def test_nested(self):
        toc = render_toc(_forest("<h1>A</h1><h2>B</h2><h3>C</h3><h2>D</h2>"))
        assert toc == (
            '<ul class="nav-level-0">'
            '<li class="nav-level-1"><a href="#a">A</a>'
            '<ul class="nav-level-1">'
            '<li class="nav-level-2"><a href="#b">B</a>'
            '<ul class="nav-level-2"><li class="nav-level-3"><a href="#c">C</a></li></ul>'
            "</li>"
            '<li class="nav-level-2"><a href="#d">D</a></li>'
            "</ul></li></ul>"
        )

    def test_result_toc_html(self):
        result = RenderResult(html="", headers=_forest("<h1>Only</h1>"))
        assert '<a href="#only">Only</a>' in result.toc_html()


class TestReadContents:
    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "doc.md"
        path.write_text("# Café\n", encoding="utf-8")
        assert read_contents(path) == "# Café\n"

    def test_missing(self, tmp_path):
        with pytest.raises(DocumentAccessError, match="not found"):
            read_contents(tmp_path / "nope.md")

    def test_directory(self, tmp_path):
        with pytest.raises(DocumentAccessError):
            read_contents(tmp_path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin.md"
        path.write_bytes(b"caf\xe9\n")
        with pytest.raises(DocumentAccessError) as exc_info:
            read_contents(path)
        assert isinstance(exc_info.value.original, UnicodeDecodeError)
