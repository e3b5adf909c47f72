#!/usr/bin/env python3
"""
html_splitter.cli.cli

Typer-based CLI for splitting monolithic HTML files into Electron app skeletons.

Examples
--------
Install core + CLI:

    uv pip install -e ".[cli]"

Split a document next to itself and zip the result:

    html-splitter split dashboard.html --zip
"""

from __future__ import annotations

import asyncio
import logging
import traceback
from pathlib import Path

import typer

from html_splitter.application.results import OutputManifest

app = typer.Typer(
    name="html-splitter",
    help="Split single-file HTML apps into separate CSS, JS and Electron scaffold files.",
    no_args_is_help=True,
)

INPUT_HELP = "Monolithic HTML file with inline <style>/<script> blocks."
ALL_BLOCKS_HELP = "Extract every inline block instead of only the first of each kind."


def _print_split_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error and return the process exit code."""
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _print_manifest(manifest: OutputManifest) -> None:
    typer.echo(f"✓ Split into {manifest.output_dir}")
    for path in manifest.paths():
        typer.echo(f"  {path}")


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False, "--debug", help="Show full tracebacks and debug logging on error."
    ),
) -> None:
    """Initialize shared CLI state and logging.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug output.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("split")
def split_cmd(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., help=INPUT_HELP),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Destination directory. Defaults to the input file stem, beside the input.",
    ),
    create_zip: bool = typer.Option(
        False, "--zip", help="Also write <output-dir>.zip next to the output directory."
    ),
    app_name: str | None = typer.Option(
        None, "--app-name", help="package.json name. Defaults to the output directory name."
    ),
    app_version: str = typer.Option("1.0.0", "--app-version", help="package.json version."),
    all_blocks: bool = typer.Option(False, "--all-blocks", help=ALL_BLOCKS_HELP),
) -> None:
    """Split an HTML file into style.css, renderer.js, index.html, main.js and package.json.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    input_path : Path
        HTML document to split.
    output_dir : Path | None, default=None
        Destination directory.
    create_zip : bool, default=False
        Whether to archive the output directory.

    Notes
    -----
    - Only the first inline ``<style>`` and classic ``<script>`` are moved
      unless ``--all-blocks`` is given; the rest stay inline with a warning.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    from html_splitter.api import split_html_to_electron
    from html_splitter.application.use_cases import build_split_options

    options = build_split_options(
        output_dir=output_dir,
        create_zip=create_zip,
        app_name=app_name,
        app_version=app_version,
        extract_all=all_blocks,
    )
    result = asyncio.run(split_html_to_electron(input_path, options))
    if not result.success or result.files is None:
        typer.echo(f"✗ {result.error}", err=True)
        raise typer.Exit(code=1)
    if debug:
        typer.echo(f"stage: {result.stage.value}")
    _print_manifest(result.files)


@app.command("inspect")
def inspect_cmd(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., help=INPUT_HELP),
    all_blocks: bool = typer.Option(False, "--all-blocks", help=ALL_BLOCKS_HELP),
) -> None:
    """Report which inline blocks would be extracted, without writing files."""
    debug: bool = bool(ctx.obj.get("debug", False))

    from html_splitter.api import inspect_html_file

    try:
        assets = inspect_html_file(input_path, extract_all=all_blocks)
    except Exception as exc:
        raise typer.Exit(code=_print_split_error(exc, debug))

    for kind, found, text in (
        ("style", assets.style_blocks, assets.style_text),
        ("script", assets.script_blocks, assets.script_text),
    ):
        moved = 0 if text is None else (found if all_blocks else 1)
        typer.echo(f"{kind}: {found} inline block(s), {moved} to extract")


if __name__ == "__main__":
    app()
