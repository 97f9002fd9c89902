"""Tests for the top-level viewer API."""

import pytest

import mdviewer
from mdviewer.config.schema import ViewerConfig
from mdviewer.core import MarkdownViewer
from mdviewer.errors.exceptions import DocumentAccessError, HighlightError
from mdviewer.types import HighlightOptions


class TestMarkdownViewer:
    def test_render_text(self, fake_highlighter, sample_markdown):
        viewer = MarkdownViewer(highlighter=fake_highlighter)
        result = viewer.render_text(sample_markdown)
        assert [h.title for h in result.all_headers()] == ["Title", "Usage", "Details", "API"]
        assert result.document is None

    def test_render_file_sets_document(self, fake_highlighter, sample_markdown_file):
        viewer = MarkdownViewer(highlighter=fake_highlighter)
        result = viewer.render_file(sample_markdown_file)
        assert result.document is not None
        assert result.document.title == "guide"
        assert result.document.path == sample_markdown_file
        assert f'href="?doc={result.document.id}#title"' in result.html

    def test_render_file_title_override(self, fake_highlighter, sample_markdown_file):
        result = MarkdownViewer(highlighter=fake_highlighter).render_file(
            sample_markdown_file, title="User Guide"
        )
        assert result.document.title == "User Guide"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(DocumentAccessError) as exc_info:
            MarkdownViewer().render_file(tmp_path / "missing.md")
        assert exc_info.value.path == tmp_path / "missing.md"

    def test_highlight_error_propagates(self, tmp_path):
        path = tmp_path / "bad.md"
        path.write_text("```no-such-language-xyz\nx\n```\n")
        with pytest.raises(HighlightError):
            MarkdownViewer().render_file(path)

    def test_render_page(self, sample_markdown_file):
        viewer = MarkdownViewer(config=ViewerConfig(title="Handbook"))
        page = viewer.render_page(sample_markdown_file)
        assert page.startswith("<!DOCTYPE html>")
        assert "<title>guide | Handbook</title>" in page
        assert 'class="nav-level-0"' in page
        assert '<a href="#usage">Usage</a>' in page
        assert ".doc-content pre .k" in page

    def test_render_page_without_classes_has_no_css(self, sample_markdown_file):
        config = ViewerConfig(highlight=HighlightOptions(use_classes=False))
        page = MarkdownViewer(config=config).render_page(sample_markdown_file)
        assert ".doc-content pre .k" not in page

    def test_empty_document_page(self, tmp_path):
        path = tmp_path / "empty.md"
        path.write_text("")
        page = MarkdownViewer().render_page(path)
        assert "No Content Found" in page

    def test_custom_template_dir(self, tmp_path, sample_markdown_file):
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "page.html.j2").write_text("CUSTOM {{ title }}|{{ content | safe }}")
        viewer = MarkdownViewer(config=ViewerConfig(title="T", template_dir=templates))
        page = viewer.render_page(sample_markdown_file)
        assert page.startswith("CUSTOM T|")


class TestConvenienceFunctions:
    def test_render(self):
        result = mdviewer.render("# Hi\n\n```python\nx = 1\n```\n")
        assert result.headers[0].anchor_id == "hi"
        assert '<code class="language-python"><span' in result.html

    def test_render_file(self, sample_markdown_file):
        result = mdviewer.render_file(sample_markdown_file)
        assert len(result.headers) == 1

    def test_render_with_config(self):
        config = ViewerConfig(preprocessing=[])
        result = mdviewer.render("1) one\n2) two\n", config=config)
        assert "<ol>" not in result.html
