"""Distribution metadata shared by the CLI banner and packaging checks."""

from __future__ import annotations

from collections.abc import Callable

name = "lib_log_media"
title = "Structured logging to syslog, files, and SQLite with fail-open dispatch"
version = "0.1.0"
shell_command = "lib_log_media"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner line by line through ``writer`` (default: ``print``)."""

    fields = [("name", name), ("title", title), ("version", version), ("shell_command", shell_command)]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label:<{pad}} = {value}\n" for label, value in fields)
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in lines:
        emit(line)


def summary_info() -> str:
    """Return the banner produced by :func:`print_info` as one string."""

    lines: list[str] = []
    print_info(writer=lines.append)
    return "".join(lines)


__all__ = ["name", "print_info", "shell_command", "summary_info", "title", "version"]
