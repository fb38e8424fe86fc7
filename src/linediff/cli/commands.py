"""CLI command implementations"""

import logging
import shutil
from dataclasses import replace
from pathlib import Path
from typing import Annotated, Optional

import typer

from linediff.config import Settings, load_config
from linediff.core.engine import split_lines
from linediff.core.errors import LineDiffError
from linediff.core.models import ExportFormat
from linediff.core.pipeline import Comparison, compare, export_comparison
from linediff.core.render import render_split, render_summary, render_unified
from linediff.util.fs import DirectorySink, FileSource, format_file_size


LeftArg = Annotated[Path, typer.Argument(help="Original (left) file")]
RightArg = Annotated[Path, typer.Argument(help="Modified (right) file")]
IgnoreWhitespaceOpt = Annotated[Optional[bool], typer.Option(
    "--ignore-whitespace/--no-ignore-whitespace", "-w", help="Collapse whitespace runs before comparing")]
IgnoreCaseOpt = Annotated[Optional[bool], typer.Option(
    "--ignore-case/--no-ignore-case", "-i", help="Compare lines case-insensitively")]
ContextOpt = Annotated[Optional[int], typer.Option(
    "--context", "-c", help="Unchanged lines shown around each change (0-10), in both views")]
LineNumbersOpt = Annotated[Optional[bool], typer.Option(
    "--line-numbers/--no-line-numbers", help="Show line numbers")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and set up logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        # pydantic's ValidationError is a ValueError too
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _compare(left: Path, right: Path, settings: Settings) -> Comparison:
    """Run the comparison, converting source and engine errors into CLI failures."""
    try:
        return compare(
            FileSource(left), FileSource(right), settings.normalization(),
            max_cells=settings.max_cells, warn_cells=settings.warn_cells,
        )
    except LineDiffError as e:
        _fail(str(e))
    except OSError as e:
        _fail("Cannot read input", e)


def diff_cmd(
    left: LeftArg,
    right: RightArg,
    ignore_whitespace: IgnoreWhitespaceOpt = None,
    ignore_case: IgnoreCaseOpt = None,
    context: ContextOpt = None,
    line_numbers: LineNumbersOpt = None,
    view: Annotated[Optional[str], typer.Option("--view", help="unified or split")] = None,
    full: Annotated[bool, typer.Option("--full", help="Show every line instead of chunks")] = False,
    reverse: Annotated[bool, typer.Option("--reverse", help="Swap sides: compare RIGHT to LEFT")] = False,
    exit_code: Annotated[bool, typer.Option("--exit-code", help="Exit with 1 when the inputs differ")] = False,
    ):
    """Compare two text files line by line and print the differences."""
    settings = _settings(overrides={
        "ignore_whitespace": ignore_whitespace, "ignore_case": ignore_case,
        "context_lines": context, "show_line_numbers": line_numbers, "view_mode": view,
    })
    if reverse:
        left, right = right, left
    comparison = _compare(left, right, settings)

    if comparison.diff:
        context_lines = None if full else settings.context_lines
        if settings.view_mode == "split":
            width = shutil.get_terminal_size((120, 24)).columns
            body = render_split(comparison.diff, width, settings.show_line_numbers, context_lines)
        else:
            body = render_unified(comparison.diff, settings.show_line_numbers, context_lines)
        if body:
            typer.echo(body)
    typer.echo(render_summary(comparison.stats))

    if exit_code and not comparison.identical:
        raise typer.Exit(1)


def stats_cmd(
    left: LeftArg,
    right: RightArg,
    ignore_whitespace: IgnoreWhitespaceOpt = None,
    ignore_case: IgnoreCaseOpt = None,
    ):
    """Print addition/deletion counts and file details for two files."""
    settings = _settings(overrides={"ignore_whitespace": ignore_whitespace, "ignore_case": ignore_case})
    comparison = _compare(left, right, settings)

    for path, text in ((left, comparison.left_text), (right, comparison.right_text)):
        lines = len(split_lines(text))
        typer.echo(f"{path.name}: {format_file_size(FileSource(path).size)}, {lines} lines")
    stats = comparison.stats
    typer.echo(f"Additions:     {stats.additions}")
    typer.echo(f"Deletions:     {stats.deletions}")
    typer.echo(f"Modifications: {stats.modifications}")
    typer.echo(f"Total:         {stats.total}")


def export_cmd(
    left: LeftArg,
    right: RightArg,
    fmt: Annotated[ExportFormat, typer.Option("--format", "-f", help="patch, html or json")] = ExportFormat.patch,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    name_left: Annotated[Optional[str], typer.Option("--name-left", help="Label for the left file")] = None,
    name_right: Annotated[Optional[str], typer.Option("--name-right", help="Label for the right file")] = None,
    ignore_whitespace: IgnoreWhitespaceOpt = None,
    ignore_case: IgnoreCaseOpt = None,
    context: ContextOpt = None,
    line_numbers: LineNumbersOpt = None,
    ):
    """Write the diff of two files as a patch, HTML report or JSON document."""
    settings = _settings(overrides={
        "output_dir": out, "ignore_whitespace": ignore_whitespace, "ignore_case": ignore_case,
        "context_lines": context, "show_line_numbers": line_numbers,
        "left_name": name_left, "right_name": name_right,
    })
    comparison = _compare(left, right, settings)
    # --name-* > config.yaml / env > file name
    comparison = replace(
        comparison,
        left_name=settings.left_name or comparison.left_name,
        right_name=settings.right_name or comparison.right_name,
    )

    try:
        path = export_comparison(
            comparison, fmt, DirectorySink(Path(settings.output_dir)),
            context_lines=settings.context_lines, show_line_numbers=settings.show_line_numbers,
        )
    except OSError as e:
        _fail("Export failed", e)
    typer.echo(f"{render_summary(comparison.stats)} -> {path}")
