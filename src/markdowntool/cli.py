"""Click CLI for markdowntool — normalize markdown documents."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from markdowntool.config.defaults import DEFAULT_STEPS
from markdowntool.core import MarkdownTool
from markdowntool.errors.exceptions import MarkdownToolError

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


def _load_tool(sections: str | None, steps: tuple[str, ...]) -> MarkdownTool:
    try:
        return MarkdownTool(sections_file=sections, steps=list(steps) or None)
    except (MarkdownToolError, FileNotFoundError, ValueError) as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@click.group()
@click.version_option(package_name="markdowntool")
def cli() -> None:
    """markdowntool — normalize emphasis and section blocks in markdown."""


@cli.command()
@click.argument("input_path", type=click.Path(exists=True))
@click.option("-o", "--output", type=click.Path(), help="Output file path (single file).")
@click.option("--output-dir", type=click.Path(), help="Output directory for a directory input.")
@click.option("-i", "--in-place", is_flag=True, default=False, help="Rewrite input files.")
@click.option("--check", is_flag=True, default=False, help="Exit 1 if any file would change.")
@click.option(
    "--sections", type=click.Path(exists=True), default=None, help="YAML file of section defaults."
)
@click.option(
    "--step", "steps", multiple=True, help="Transform to run (repeatable, default: all)."
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def fix(
    input_path: str,
    output: str | None,
    output_dir: str | None,
    in_place: bool,
    check: bool,
    sections: str | None,
    steps: tuple[str, ...],
    verbose: int,
) -> None:
    """Normalize a markdown file or every markdown file under a directory."""
    _setup_logging(verbose)
    tool = _load_tool(sections, steps)
    if not verbose:
        logging.getLogger().setLevel(tool.config.log_level)

    input_path_obj = Path(input_path)
    if input_path_obj.is_dir():
        if output:
            error_console.print(
                "[red]Error:[/red] --output takes a single file; use --output-dir for a directory"
            )
            sys.exit(1)
        files = sorted(p for p in input_path_obj.rglob(tool.config.glob) if p.is_file())
        if not files:
            error_console.print("[yellow]No markdown files found in directory.[/yellow]")
            return
        if not (check or in_place or output_dir):
            error_console.print(
                "[red]Error:[/red] directory input needs --in-place, --output-dir or --check"
            )
            sys.exit(1)
    else:
        files = [input_path_obj]

    changed: list[Path] = []
    for file in files:
        try:
            original = file.read_text(encoding=tool.config.encoding)
            result = tool.normalize_text(original)
        except MarkdownToolError as e:
            error_console.print(f"[red]Error:[/red] {file}: {e}")
            sys.exit(1)

        if result != original:
            changed.append(file)
        if check:
            continue

        if output_dir and input_path_obj.is_dir():
            target = Path(output_dir) / file.relative_to(input_path_obj)
        elif output:
            target = Path(output)
        elif in_place:
            target = file
        else:
            click.echo(result, nl=False)
            continue

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(result, encoding=tool.config.encoding)
        console.print(f"[green]Written to {target}[/green]")

    if check:
        for file in changed:
            error_console.print(f"would change: {file}")
        if changed:
            sys.exit(1)
        console.print(f"[green]{len(files)} file(s) already normalized.[/green]")


@cli.command("sections")
@click.option(
    "--sections", type=click.Path(exists=True), default=None, help="YAML file of section defaults."
)
def list_sections(sections: str | None) -> None:
    """Show the resolved section table."""
    tool = _load_tool(sections, ())

    table = Table(title="Section Defaults", show_header=True)
    table.add_column("Title", style="cyan")
    table.add_column("Description")

    for title, description in tool.sections.items():
        table.add_row(title, description or "-")

    console.print(table)


@cli.command("transforms")
def list_transforms() -> None:
    """List available transforms."""
    import markdowntool.transforms  # noqa: F401
    from markdowntool.pipeline.runner import available_transforms, get_transform

    table = Table(title="Available Transforms", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Default")
    table.add_column("Description")

    defaults = DEFAULT_STEPS
    for name in available_transforms():
        fn = get_transform(name)
        doc = (fn.__doc__ or "").strip().splitlines()[0] if fn and fn.__doc__ else "-"
        table.add_row(name, "yes" if name in defaults else "no", doc)

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    cli()
