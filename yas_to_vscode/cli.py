import json
import logging
from pathlib import Path
from typing import Optional

import typer
from decouple import config as env_config
from rich.console import Console
from rich.markup import escape

from . import __version__
from .conversion import ConversionReport, convert_file, convert_tree
from .errors import SnippetError

app = typer.Typer(help="yas-to-vscode: convert yasnippet snippets to VS Code snippets")

logger = logging.getLogger(__name__)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

DEFAULT_STRICT = env_config("YAS_TO_VSCODE_STRICT", default=False, cast=bool)
DEFAULT_LOG_LEVEL = env_config("YAS_TO_VSCODE_LOG_LEVEL", default="WARNING")


def log_level(verbosity: int, default: str = DEFAULT_LOG_LEVEL) -> int:
    """Logging level from the number of -v flags.

    0: YAS_TO_VSCODE_LOG_LEVEL (WARNING unless set, or unknown)
    1 (-v): INFO logs
    2+ (-vv): DEBUG logs
    """
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity >= 1:
        return logging.INFO
    level = getattr(logging, str(default).strip().upper(), None)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def setup_logging(verbosity: int) -> None:
    logging.basicConfig(
        level=log_level(verbosity),
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True, help="More logging (-v info, -vv debug)"
    ),
):
    """yas-to-vscode: convert yasnippet snippets to VS Code snippets"""
    setup_logging(verbose)


def _print_notes(name: str, language: str, warnings) -> None:
    for warning in warnings:
        console.print(f"NOTE: `{escape(name)}' in {escape(language)} {warning.describe()}")


def _print_report(report: ConversionReport) -> None:
    for name, warnings in report.warnings.items():
        _print_notes(name, report.language, warnings)
    for name, message in report.failures.items():
        err_console.print(
            f"[red]Skipped[/red] `{escape(name)}' in {escape(report.language)}: {escape(message)}"
        )


@app.command()
def convert(
    source: Path = typer.Argument(
        ..., help="Snippet tree with one directory per mode, e.g. snippets/"
    ),
    destination: Path = typer.Argument(
        ..., help="Directory to write one <language>.json file per mode into"
    ),
    strict: bool = typer.Option(
        DEFAULT_STRICT,
        "--strict/--permissive",
        help="Require a `key' header instead of using the file name as prefix",
    ),
):
    """Convert every mode directory under SOURCE into DESTINATION."""
    if not source.is_dir():
        err_console.print(f"[red]Error:[/red] {escape(str(source))} is not a directory")
        raise typer.Exit(1)

    reports = convert_tree(source, destination, strict=strict)
    for report in reports:
        _print_report(report)

    converted = sum(len(r.snippets) for r in reports)
    skipped = sum(len(r.failures) for r in reports)
    console.print(
        f"Converted {converted} snippets for {len(reports)} languages into "
        f"{escape(str(destination))} ({skipped} skipped)"
    )


@app.command()
def show(
    path: Path = typer.Argument(..., help="A single yasnippet file"),
    strict: bool = typer.Option(
        DEFAULT_STRICT,
        "--strict/--permissive",
        help="Require a `key' header instead of using the file name as prefix",
    ),
):
    """Print the VS Code JSON for one snippet file."""
    if not path.is_file():
        err_console.print(f"[red]Error:[/red] {escape(str(path))} is not a file")
        raise typer.Exit(1)

    try:
        converted = convert_file(path, strict=strict)
    except SnippetError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    typer.echo(
        json.dumps({path.name: converted.result.model_dump()}, indent=2, ensure_ascii=False)
    )
    _print_notes(path.name, path.parent.name, converted.warnings)


if __name__ == "__main__":
    app()
