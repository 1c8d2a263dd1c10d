"""Click command group for sending log messages from the shell.

Purpose
-------
Expose the dispatcher to scripts and operators: ``lib_log_media log`` sends
one message to the media named on the command line, or to the defaults
configured through ``LOG_MEDIA``.

Contents
--------
* :func:`cli` - root group; prints the metadata banner without a subcommand.
* ``info`` / ``log`` subcommands.
* :func:`main` - test-friendly wrapper returning an exit code.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

import click

from . import __init__conf__
from .config import configure_from_environment, enable_dotenv
from .domain import LogLevel, LogMediaError
from .runtime import LoggingRuntime, build_runtime, current_runtime

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.shell_command)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Dispatch structured log messages to syslog, files, or SQLite."""

    if ctx.invoked_subcommand is None:
        click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(__init__conf__.summary_info(), nl=False)


def _parse_context(raw: str | None) -> dict[str, Any]:
    if raw is None:
        return {}
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc.msg}", param_hint="--context") from exc
    if not isinstance(parsed, dict):
        raise click.BadParameter("must be a JSON object", param_hint="--context")
    return parsed


def _build_media(
    runtime: LoggingRuntime,
    *,
    use_syslog: bool,
    file_paths: Sequence[str],
    lock_paths: Sequence[str],
    sqlite_path: str | None,
    table: str | None,
) -> list[Any]:
    media: list[Any] = []
    if use_syslog:
        media.append(runtime.system_log())
    media.extend(runtime.file_put(path) for path in file_paths)
    media.extend(runtime.file_lock(path) for path in lock_paths)
    if sqlite_path is not None:
        media.append(runtime.sqlite(sqlite_path, table))
    return media


@cli.command("log", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@click.option(
    "--level",
    "-l",
    default=LogLevel.INFO.name,
    show_default=True,
    type=click.Choice([level.name for level in LogLevel], case_sensitive=False),
    help="Severity of the message.",
)
@click.option("--context", "context_json", default=None, help="JSON object attached to the message.")
@click.option("--syslog", "use_syslog", is_flag=True, help="Write to the system log.")
@click.option("--file", "file_paths", multiple=True, help="Append to a file without locking (repeatable).")
@click.option("--file-lock", "lock_paths", multiple=True, help="Append to a file under an exclusive lock (repeatable).")
@click.option("--sqlite", "sqlite_path", default=None, help="Insert into an SQLite database.")
@click.option("--table", default=None, help="SQLite table name (default: logs).")
@click.option("--dotenv/--no-dotenv", "use_dotenv", default=False, help="Load the nearest .env before reading LOG_MEDIA.")
def cli_log(
    *,
    text: str,
    level: str,
    context_json: str | None,
    use_syslog: bool,
    file_paths: tuple[str, ...],
    lock_paths: tuple[str, ...],
    sqlite_path: str | None,
    table: str | None,
    use_dotenv: bool,
) -> None:
    """Send TEXT to the selected media, or to the configured defaults."""

    context = _parse_context(context_json)
    runtime = current_runtime(build_runtime)
    try:
        media = _build_media(
            runtime,
            use_syslog=use_syslog,
            file_paths=file_paths,
            lock_paths=lock_paths,
            sqlite_path=sqlite_path,
            table=table,
        )
        if not media:
            if use_dotenv:
                enable_dotenv()
            configure_from_environment(runtime=runtime)
    except (LogMediaError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc
    runtime.log(text, level, context, *media)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command group and return its exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    lib_log_media, version ...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0


__all__ = ["cli", "main"]
