import html

import pytest


class FakeHighlighter:
    """Records calls and returns a Pygments-shaped wrapped fragment."""

    def __init__(self, overall_class: str = "highlight") -> None:
        self.overall_class = overall_class
        self.calls: list[tuple[str, str]] = []

    def highlight(self, code: str, language: str) -> str:
        self.calls.append((code, language))
        return (
            f'<div class="{language} {self.overall_class}"><pre><span></span>'
            f'<span class="hl">{html.escape(code)}</span></pre></div>\n'
        )


@pytest.fixture
def fake_highlighter():
    return FakeHighlighter()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project config files and MDVIEWER_* env vars out of tests."""
    monkeypatch.setattr(
        "mdviewer.config.hierarchy._GLOBAL_CONFIG_PATH", tmp_path / "no-global" / "config.yaml"
    )
    for key in (
        "MDVIEWER_TITLE",
        "MDVIEWER_STYLE",
        "MDVIEWER_OVERALL_CLASS",
        "MDVIEWER_TEMPLATE_DIR",
        "MDVIEWER_LOG_LEVEL",
        "MDVIEWER_MARKDOWN_EXTENSIONS",
    ):
        monkeypatch.delenv(key, raising=False)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture
def sample_markdown():
    return (
        "# Title\n"
        "\n"
        "1) first\n"
        "2) second\n"
        "\n"
        "## Usage\n"
        "\n"
        "```js\n"
        "console.log(1)\n"
        "```\n"
        "\n"
        "### Details\n"
        "\n"
        "Some `inline` code.\n"
        "\n"
        "## API\n"
    )


@pytest.fixture
def sample_markdown_file(tmp_path, sample_markdown):
    path = tmp_path / "guide.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path
