"""Concrete media and the fallback channel."""

from __future__ import annotations

from .fallback import StderrFallback
from .files import FileLockMedium, FilePutMedium
from .sqlite import SqliteMedium
from .syslog import SyslogMedium

__all__ = [
    "FileLockMedium",
    "FilePutMedium",
    "SqliteMedium",
    "StderrFallback",
    "SyslogMedium",
]
