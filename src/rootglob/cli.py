# Command-line interface definition for rootglob.
# This file is responsible only for argument parsing, logging setup,
# and printing what the traversal yields.
#
# No matching or traversal logic should live here.

from __future__ import annotations

import logging
import os
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from rootglob import __version__
from rootglob.errors import AbsolutePathRequired, ParseError
from rootglob.models import Options
from rootglob.traverse import list_files

app = typer.Typer(
    add_completion=False,
    help="Lazily list every filesystem entry matching an absolute glob.",
)
console = Console()
_err = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    # Library modules only log soft filesystem failures at debug level.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_err, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(__version__)
        raise typer.Exit(code=0)


def _effective_pattern(pattern: str, opts: Options) -> str:
    # --dirs-only is shorthand for a trailing separator.
    if opts.dirs_only and not pattern.endswith(os.sep):
        return pattern + os.sep
    return pattern


def _emit(path_s: str, opts: Options) -> None:
    if opts.null_separated:
        console.file.write(path_s + "\0")
    else:
        console.print(path_s, markup=False, highlight=False, emoji=False, soft_wrap=True)


def run_list(pattern: str, opts: Options) -> int:
    # Stream matches to stdout and return how many were found.
    count = 0
    collected: List[str] = []

    with list_files(_effective_pattern(pattern, opts)) as matches:
        for path_s in matches:
            count += 1
            if opts.count:
                continue
            if opts.sort:
                collected.append(path_s)
            else:
                _emit(path_s, opts)

    for path_s in sorted(collected):
        _emit(path_s, opts)

    if opts.count:
        console.print(count)
    return count


@app.command(help="List every path matching PATTERN, which must be absolute.")
def main(
    pattern: str = typer.Argument(
        ...,
        help="Absolute glob, e.g. '/home/me/**/*.txt'. Quote it to stop the shell expanding it.",
    ),
    dirs_only: bool = typer.Option(
        False, "--dirs-only",
        help="Only match directories (same as a trailing separator).",
        rich_help_panel="Matching",
    ),
    sort: bool = typer.Option(
        False, "--sort",
        help="Collect all matches and print them sorted.",
        rich_help_panel="Output",
    ),
    count: bool = typer.Option(
        False, "--count",
        help="Print only the number of matches.",
        rich_help_panel="Output",
    ),
    null_separated: bool = typer.Option(
        False, "--null", "-z",
        help="Separate matches with NUL instead of newline.",
        rich_help_panel="Output",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Log skipped directories and unresolvable symlinks to stderr.",
    ),
    version: Optional[bool] = typer.Option(
        None, "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
):
    opts = Options(
        dirs_only=dirs_only,
        sort=sort,
        count=count,
        null_separated=null_separated,
        verbose=verbose,
    )
    _configure_logging(opts.verbose)

    try:
        run_list(pattern, opts)
    except AbsolutePathRequired as exc:
        raise typer.BadParameter(str(exc), param_hint="PATTERN")
    except ParseError as exc:
        _err.print(f"[red]Invalid glob:[/red] {exc}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
