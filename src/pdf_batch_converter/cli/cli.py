#!/usr/bin/env python3
"""
pdf_batch_converter.cli.cli

Typer-based CLI that converts every PDF below a folder into a mirrored
output tree.

Examples
--------
Convert with the default parallelism (2) into ``<folder>/pdf_output``:

    pdf-batch-convert ./documents

Convert four files at a time into a separate output folder:

    pdf-batch-convert ./documents 4 ./converted
"""

from __future__ import annotations

import logging
import traceback
from enum import Enum
from pathlib import Path

import typer

from pdf_batch_converter.application.options import (
    DEFAULT_EXTENSION,
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_OUTPUT_DIRNAME,
    DEFAULT_SUFFIX,
)
from pdf_batch_converter.errors import BatchConversionError

app = typer.Typer(
    name="pdf-batch-convert",
    help="Convert a tree of PDF files into a mirrored output directory.",
    add_completion=False,
)

USAGE = (
    "Usage: pdf-batch-convert <folder> [parallelism] [output-folder]\n"
    'Example: pdf-batch-convert "/data/invoices" 2 "/data/converted"\n'
    f"If no output folder is given, '{DEFAULT_OUTPUT_DIRNAME}' is created inside the input folder."
)
LOG_FORMAT = "%(asctime)s [%(threadName)s] %(levelname)s %(message)s"


class LogLevel(str, Enum):
    """Log levels accepted by ``--log-level``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def _parse_parallelism(raw: str | None) -> int:
    """Parse the parallelism argument, falling back to the default with a warning."""
    if raw is None:
        return DEFAULT_MAX_CONCURRENCY
    try:
        return int(raw)
    except ValueError:
        typer.echo(
            f"Warning: cannot parse parallelism '{raw}', using default {DEFAULT_MAX_CONCURRENCY}.",
            err=True,
        )
        return DEFAULT_MAX_CONCURRENCY


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(level=level.value, format=LOG_FORMAT, force=True)


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly fatal error.

    Parameters
    ----------
    exc : Exception
        Exception that terminated the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# Negative parallelism such as "-1" reaches the positional argument instead of
# failing as an unknown option.
@app.command(context_settings={"ignore_unknown_options": True})
def convert_cmd(
    source_root: Path | None = typer.Argument(
        None, help="Folder scanned recursively for PDF files."
    ),
    parallelism: str | None = typer.Argument(
        None,
        help=f"Maximum conversions in flight (default {DEFAULT_MAX_CONCURRENCY}).",
    ),
    output_root: Path | None = typer.Argument(
        None,
        help=f"Output folder (default: <folder>/{DEFAULT_OUTPUT_DIRNAME}).",
    ),
    sequential: bool = typer.Option(
        False, "--sequential", help="Convert one file at a time in discovery order."
    ),
    extension: str = typer.Option(
        DEFAULT_EXTENSION, "--extension", help="Extension of the files to convert."
    ),
    suffix: str = typer.Option(
        DEFAULT_SUFFIX, "--suffix", help="Token appended to output filename stems."
    ),
    converter: str | None = typer.Option(
        None, "--converter", help="Explicit converter plugin name."
    ),
    converter_module: list[str] | None = typer.Option(
        None,
        "--converter-module",
        help="Converter plugin module import path or file path (repeatable).",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.INFO,
        "--log-level",
        envvar="PDF_BATCH_LOG_LEVEL",
        help="Verbosity of per-file progress logging.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Convert every matching file below SOURCE_ROOT into a mirrored tree."""
    if source_root is None:
        typer.echo(USAGE)
        raise typer.Exit(code=0)

    _configure_logging(log_level)
    max_concurrency = _parse_parallelism(parallelism)
    typer.echo(f"Processing folder: {source_root}")
    typer.echo(f"Parallelism: {max_concurrency}")

    try:
        from pdf_batch_converter.api import convert_directory

        report = convert_directory(
            source_root=source_root,
            output_root=output_root,
            max_concurrency=max_concurrency,
            sequential=sequential,
            extension=extension,
            suffix=suffix,
            converter_name=converter,
            converter_modules=converter_module,
        )
    except BatchConversionError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_error(exc, debug))

    if report.item_count == 0:
        typer.echo("No matching files found.")
        return
    for line in report.summary_lines():
        typer.echo(line)
    typer.echo("Done.")


if __name__ == "__main__":
    app()
