from __future__ import annotations

import sys
from pathlib import Path

import typer

from yamldelta.constants import (
    EXIT_CHANGES,
    EXIT_INTERNAL_ERROR,
    EXIT_NO_CHANGES,
    STDIN_PATH,
)
from yamldelta.core.diff import UNCHANGED, diff, summarize
from yamldelta.core.document import Node, load_document_bytes, load_document_file
from yamldelta.core.errors import YamlDeltaError
from yamldelta.report import write
from yamldelta.term.color import Palette, color_enabled


def _version_callback(value: bool) -> None:
    if value:
        from yamldelta import __version__

        typer.echo(f"yamldelta {__version__}")
        raise typer.Exit()


app = typer.Typer(add_completion=False, help="Show structural differences between two YAML documents")


@app.callback(invoke_without_command=True)
def _main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
) -> None:
    pass


def _load(path: Path) -> Node:
    if str(path) == STDIN_PATH:
        return load_document_bytes(typer.get_binary_stream("stdin").read(), source="<stdin>")
    return load_document_file(path)


def _format_summary(counts: dict[str, int]) -> str:
    return f"{counts['added']} added, {counts['removed']} removed, {counts['changed']} changed"


@app.command("diff")
def diff_command(
    old: Path = typer.Argument(..., help="Old document, or - for stdin"),
    current: Path = typer.Argument(..., help="Current document, or - for stdin"),
    color: bool | None = typer.Option(
        None,
        "--color/--no-color",
        help="Force styled output on or off. Defaults to the COLOR env var, then the terminal.",
    ),
    summary: bool = typer.Option(False, "--summary", help="Print a count of changed values."),
    output: Path | None = typer.Option(None, "--output", help="Write the diff to a file instead of stdout"),
) -> None:
    """Diff OLD against CURRENT and print what changed."""
    stderr_palette = Palette(color_enabled(sys.stderr))
    if str(old) == STDIN_PATH and str(current) == STDIN_PATH:
        typer.echo("ERROR: only one document can be read from stdin", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR)

    try:
        tree = diff(_load(old), _load(current))
        if output is None:
            enabled = color if color is not None else color_enabled(sys.stdout)
            write(tree, sys.stdout, decorate=Palette(enabled).decorate)
        else:
            output.parent.mkdir(parents=True, exist_ok=True)
            with output.open("w", encoding="utf-8") as handle:
                # A file is never a terminal, so only --color or COLOR=true style it.
                enabled = color if color is not None else color_enabled(handle)
                write(tree, handle, decorate=Palette(enabled).decorate)
    except (OSError, YamlDeltaError) as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        typer.echo(f"Tip: run {stderr_palette.highlight_code('yamldelta diff --help')} for usage.", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc

    if output is not None:
        typer.echo(f"Wrote diff to {stderr_palette.highlight_resource(str(output))}", err=True)
    if summary:
        typer.echo(_format_summary(summarize(tree)) if tree is not UNCHANGED else "No changes.")
    raise typer.Exit(EXIT_NO_CHANGES if tree is UNCHANGED else EXIT_CHANGES)
