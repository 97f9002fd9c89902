"""Click CLI for mdviewer: render Markdown documents to HTML."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from mdviewer.config.hierarchy import load_viewer_config
from mdviewer.errors.exceptions import MdViewerError
from mdviewer.types import Header

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


def _apply_log_level(verbosity: int, log_level: str) -> None:
    """Apply the configured log level unless -v was given."""
    if verbosity:
        return
    level = logging.getLevelName(log_level.upper())
    if isinstance(level, int):
        logging.getLogger().setLevel(level)


def _load_config(config_path: str | None, **overrides):
    if config_path:
        from mdviewer.config.hierarchy import build_viewer_config
        from mdviewer.config.loader import load_viewer_section

        # Only the keys the file sets act as runtime overrides
        section = load_viewer_section(config_path)
        build_viewer_config(section)
        overrides = {**section, **{k: v for k, v in overrides.items() if v is not None}}
    return load_viewer_config(**overrides)


@click.group()
@click.version_option(package_name="mdviewer")
def cli() -> None:
    """mdviewer: Markdown to HTML with a table of contents and highlighted code."""


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(), help="Output HTML file path.")
@click.option("--fragment", is_flag=True, default=False, help="Emit only the HTML body fragment.")
@click.option("--title", type=str, default=None, help="Page title.")
@click.option("--style", type=str, default=None, help="Pygments style for code blocks.")
@click.option("--config", "config_path", type=click.Path(exists=True), help="Viewer YAML file.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def render(
    input_path: str,
    output: str | None,
    fragment: bool,
    title: str | None,
    style: str | None,
    config_path: str | None,
    verbose: int,
) -> None:
    """Render a Markdown file as an HTML page."""
    from mdviewer.core import MarkdownViewer

    _setup_logging(verbose)

    try:
        config = _load_config(config_path, title=title, style=style)
        _apply_log_level(verbose, config.log_level)
        viewer = MarkdownViewer(config=config)
        result = viewer.render_file(input_path)
        html = result.html if fragment else viewer.page_for(result)
    except MdViewerError as e:
        error_console.print(f"[red]Error:[/red] {escape(e.message)}")
        sys.exit(1)
    except Exception as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(html, encoding="utf-8")
        console.print(f"[green]Written to {out_path}[/green]")
    else:
        click.echo(html)

    if verbose >= 1:
        _print_summary(result.all_headers())


def _print_summary(headers: list[Header]) -> None:
    error_console.print()
    table = Table(title="Render Summary", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Headers", str(len(headers)))
    table.add_row("Roots", str(sum(1 for h in headers if h.level == 1)))
    error_console.print(table)


@cli.command("toc")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
def show_toc(input_path: str) -> None:
    """Print the header tree of a Markdown file."""
    from mdviewer.core import MarkdownViewer

    try:
        result = MarkdownViewer(config=load_viewer_config()).render_file(input_path)
    except MdViewerError as e:
        error_console.print(f"[red]Error:[/red] {escape(e.message)}")
        sys.exit(1)

    title = result.document.title if result.document else input_path
    tree = Tree(f"[bold]{escape(title)}[/bold]")
    for header in result.headers:
        _add_branch(tree, header)
    console.print(tree)


def _add_branch(parent: Tree, header: Header) -> None:
    branch = parent.add(f"{escape(header.title)} [dim]#{header.anchor_id}[/dim]")
    for sub in header.subheaders:
        _add_branch(branch, sub)


@cli.command("languages")
def list_languages() -> None:
    """List fence language aliases."""
    from mdviewer.pipeline.languages import DEFAULT_ALIASES

    config = load_viewer_config()
    aliases = DEFAULT_ALIASES.with_overrides(config.language_aliases)

    table = Table(title="Language Aliases", show_header=True)
    table.add_column("Fence tag", style="cyan")
    table.add_column("Highlighted as")

    for tag in sorted(aliases):
        table.add_row(tag, aliases[tag])

    console.print(table)


@cli.command("validate-config")
@click.argument("config_yaml", type=click.Path(exists=True))
def validate_config(config_yaml: str) -> None:
    """Validate a viewer YAML file."""
    from mdviewer.config.loader import load_config_yaml
    from mdviewer.pipeline.preprocessor import list_preprocess_steps

    try:
        config = load_config_yaml(config_yaml)
    except Exception as e:
        error_console.print(f"[red]Invalid config:[/red] {escape(str(e))}")
        sys.exit(1)

    known = list_preprocess_steps()
    unknown = [step for step in config.preprocessing if step not in known]
    if unknown:
        error_console.print(
            f"[red]Invalid config:[/red] unknown preprocessing steps: {escape(', '.join(unknown))}"
        )
        error_console.print(f"  Available: {', '.join(known)}")
        sys.exit(1)

    console.print(f"[green]Valid config:[/green] {config.title}")
    console.print(f"  Extensions: {', '.join(config.markdown_extensions) or '-'}")
    console.print(f"  Preprocessing: {', '.join(config.preprocessing) or '-'}")
    console.print(f"  Style: {config.style}")


def main() -> None:
    """Entry point for the CLI."""
    cli()
