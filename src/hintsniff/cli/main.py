"""hintsniff CLI - type hint checks for PHP.

This module provides the command-line interface for hintsniff,
running checks over files and directories and describing declarations.
"""

from __future__ import annotations

import json
import logging
import traceback
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="hintsniff",
    help="Function signature and type hint checks for PHP",
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()
err_console = Console(stderr=True)

# Global verbose flag
_verbose: bool = False


def set_verbose(verbose: bool) -> None:
    """Set global verbose mode."""
    global _verbose
    _verbose = verbose


def is_verbose() -> bool:
    """Check if verbose mode is enabled."""
    return _verbose


def print_exception(e: Exception) -> None:
    """Print exception details in verbose mode."""
    if _verbose:
        err_console.print("\n[dim]--- Traceback (verbose mode) ---[/dim]")
        err_console.print(f"[dim]{traceback.format_exc()}[/dim]")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with full tracebacks"),
    ] = False,
) -> None:
    """hintsniff CLI - type hint checks for PHP."""
    set_verbose(verbose)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def check(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Files or directories to check", exists=True, resolve_path=True),
    ],
    fix: Annotated[
        bool,
        typer.Option("--fix", help="Apply available fixes in place"),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output machine-readable JSON"),
    ] = False,
) -> None:
    """Check files for type hint problems.

    Example:
        hintsniff check src/
        hintsniff check src/Controller.php --fix
    """
    from hintsniff.cli._tables import build_diagnostics_table
    from hintsniff.services.checker_service import CheckerService, CheckResult

    service = CheckerService()
    result = CheckResult()
    for path in paths:
        partial = service.check_path(path, fix=fix)
        result.files.extend(partial.files)
        result.errors.extend(partial.errors)

    if json_output:
        payload = {
            "files": [
                {
                    "path": str(report.path),
                    "fixes_applied": report.fixes_applied,
                    "diagnostics": [d.model_dump(mode="json") for d in report.diagnostics],
                }
                for report in result.files
            ],
            "errors": result.errors,
        }
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for report in result.files:
            if report.diagnostics:
                console.print(build_diagnostics_table(report))
        for error in result.errors:
            err_console.print(f"[red]Error:[/red] {error}")

        if fix and result.fixes_applied:
            console.print(f"[green]✓[/green] Applied {result.fixes_applied} fix(es)")
        if result.success:
            console.print(f"[green]✓[/green] {result.files_checked} file(s) checked, no problems found")
        else:
            console.print(
                f"[yellow]![/yellow] {result.files_checked} file(s) checked, "
                f"{result.diagnostics_count} problem(s) found"
            )

    if not result.success:
        raise typer.Exit(1)


@app.command()
def describe(
    file: Annotated[
        Path,
        typer.Argument(
            help="PHP file to describe",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output machine-readable JSON"),
    ] = False,
) -> None:
    """Describe every function, method and closure declared in a file.

    Example:
        hintsniff describe src/Controller.php --json
    """
    from hintsniff.cli._tables import build_descriptors_table
    from hintsniff.core.tokens import MalformedBufferError
    from hintsniff.services.checker_service import CheckerService

    try:
        descriptors = CheckerService(checks=[]).describe_file(file)
    except (OSError, MalformedBufferError) as e:
        err_console.print(f"[red]Error:[/red] Failed to read {file}: {e}")
        print_exception(e)
        raise typer.Exit(1)

    if json_output:
        typer.echo(
            json.dumps([d.model_dump(mode="json") for d in descriptors], ensure_ascii=False, indent=2)
        )
        return

    if not descriptors:
        console.print("[yellow]No declarations found[/yellow]")
        return
    console.print(build_descriptors_table(descriptors, str(file)))


if __name__ == "__main__":
    app()
