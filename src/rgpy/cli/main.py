"""
Command-line interface for rgpy.

Main Commands:
    search: Scan a file or a directory tree for lines matching a pattern
    engines: List the pattern engines and whether they are installed

Exit Status:
    0: at least one line reported (or a non-zero count)
    1: nothing reported
    2: invalid pattern, unavailable engine, unreadable file or bad options

Example Usage:
    $ rgpy search "def \\w+" src --count
    $ rgpy search todo notes.txt -i --format json
    $ rgpy search "(?<=id=)\\d+" logs --engine pcre2 --show-errors
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from ..core.config import ScanConfig
from ..core.types import Engine, OutputFormat
from ..search.matchers import compile_matcher, engine_available
from ..utils.error_handling import ErrorCollector, SearchError, create_error_report
from ..utils.formatter import format_result
from ..utils.logging_config import LogFormat, LogLevel, configure_logging

EXIT_MATCH = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2


@click.group()
@click.version_option(package_name="rgpy")
def cli() -> None:
    """rgpy - compiled-once line search over files and directory trees"""
    pass


@cli.command("search")
@click.argument("pattern")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("-i", "--ignore-case", is_flag=True, default=False, help="Case-insensitive matching")
@click.option(
    "--engine",
    type=click.Choice([e.value for e in Engine]),
    default=Engine.REGEX.value,
    help="Pattern engine",
)
@click.option("-c", "--count", is_flag=True, default=False, help="Print the number of matching lines")
@click.option(
    "-v", "--invert-match", is_flag=True, default=False, help="Report lines that do not match"
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice([e.value for e in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format",
)
@click.option("--workers", type=int, default=0, help="Worker threads (0 = auto)")
@click.option("--no-parallel", is_flag=True, default=False, help="Scan sequentially")
@click.option("--include", multiple=True, help="Glob of files to scan (directories only)")
@click.option("--exclude", multiple=True, help="Glob of files or directories to skip")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging")
@click.option(
    "--log-level",
    type=click.Choice([lvl.value for lvl in LogLevel]),
    default=LogLevel.WARNING.value,
    help="Log level",
)
@click.option(
    "--log-format",
    type=click.Choice([f.value for f in LogFormat]),
    default=LogFormat.SIMPLE.value,
    help="Log format",
)
@click.option("--log-file", type=click.Path(path_type=Path), default=None, help="Log file path")
@click.option(
    "--show-errors", is_flag=True, default=False, help="Report files skipped in a directory scan"
)
def search_cmd(
    pattern: str,
    path: Path,
    ignore_case: bool,
    engine: str,
    count: bool,
    invert_match: bool,
    fmt: str,
    workers: int,
    no_parallel: bool,
    include: tuple[str, ...],
    exclude: tuple[str, ...],
    debug: bool,
    log_level: str,
    log_format: str,
    log_file: Path | None,
    show_errors: bool,
) -> None:
    """Search PATH (a file or a directory) for lines matching PATTERN."""
    if debug:
        log_level = LogLevel.DEBUG.value

    configure_logging(
        level=LogLevel(log_level),
        format_type=LogFormat(log_format),
        log_file=log_file,
        enable_file=log_file is not None,
        enable_console=True,
    )

    try:
        config = ScanConfig(
            parallel=not no_parallel,
            workers=workers,
            include=list(include) or None,
            exclude=list(exclude) or None,
        )
        matcher = compile_matcher(pattern, ignore_case=ignore_case, engine=engine)
    except SearchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    collector = ErrorCollector()
    try:
        if path.is_dir():
            result = matcher.search_dir(
                path, count=count, invert_match=invert_match, config=config, errors=collector
            )
        else:
            result = matcher.search_file(
                path, count=count, invert_match=invert_match, config=config
            )
    except SearchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    rendered = format_result(result, OutputFormat(fmt))
    if rendered:
        click.echo(rendered)

    if show_errors and collector.errors:
        click.echo("\n" + create_error_report(collector), err=True)

    found = result if isinstance(result, int) else len(result)
    sys.exit(EXIT_MATCH if found else EXIT_NO_MATCH)


@cli.command("engines")
def engines_cmd() -> None:
    """List pattern engines and whether they are available."""
    for engine in Engine:
        status = "available" if engine_available(engine) else "not installed"
        default = " (default)" if engine is Engine.REGEX else ""
        click.echo(f"{engine.value}{default}: {status}")


def main() -> None:
    cli(prog_name="rgpy")


if __name__ == "__main__":
    main()
