"""SQLite medium storing one row per message.

Purpose
-------
Persist messages in an embedded relational store so they can be queried with
plain SQL. The table is created when the medium is built.

Contents
--------
* :data:`SCHEMA` - table definition (kept stable for existing databases).
* :func:`open_store`, :func:`create_table`, :func:`insert` - store primitives.
* :class:`SqliteMedium` - :class:`MediumPort` implementation.

System Role
-----------
Values are always bound as statement parameters. Table and column names
cannot be bound, so they must be plain identifiers; anything else is refused
with :class:`StoreFailure` before a statement is built.
"""

from __future__ import annotations

import logging
import os
import re
import sqlite3
from collections.abc import Iterator, Mapping
from contextlib import closing, contextmanager
from threading import RLock

from lib_log_media.application.ports.media import MediumPort
from lib_log_media.domain.codec import encode_context, validate
from lib_log_media.domain.errors import EncodingFailure, StoreFailure
from lib_log_media.domain.message import Message
from lib_log_media.domain.setup_registry import SetupRegistry

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "logs"
MEMORY_PATH = ":memory:"

SCHEMA = """CREATE TABLE IF NOT EXISTS {table} (
    id TEXT PRIMARY KEY,
    level TEXT NOT NULL,
    message TEXT NOT NULL,
    context JSON,
    time TEXT NOT NULL
)"""

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _check_identifier(path: str, name: str, *, table: str | None = None) -> str:
    if not _IDENTIFIER.match(name):
        raise StoreFailure(path, f"Invalid SQL identifier {name!r}", table=table)
    return name


def open_store(path: str) -> sqlite3.Connection:
    """Open the database at ``path``; raises :class:`StoreFailure`."""

    try:
        return sqlite3.connect(path, check_same_thread=False)
    except sqlite3.Error as exc:
        raise StoreFailure(path, f"Failed to open SQLite database ({exc})") from exc


def create_table(conn: sqlite3.Connection, path: str, table: str) -> None:
    """Create ``table`` with :data:`SCHEMA` unless it already exists."""

    _check_identifier(path, table, table=table)
    try:
        with conn:
            conn.execute(SCHEMA.format(table=table))
    except sqlite3.Error as exc:
        raise StoreFailure(path, f"Failed to create logs table ({exc})", table=table) from exc


def insert(conn: sqlite3.Connection, path: str, table: str, record: Mapping[str, str]) -> None:
    """Insert ``record`` (column -> value) into ``table`` as one row."""

    _check_identifier(path, table, table=table)
    columns = [_check_identifier(path, column, table=table) for column in record]
    statement = f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({', '.join('?' for _ in columns)})"
    try:
        with conn:
            conn.execute(statement, tuple(record.values()))
    except sqlite3.Error as exc:
        raise StoreFailure(path, f"Failed to insert log entry ({exc})", table=table) from exc


class _Connector:
    """Hand out connections: a fresh one per use for files, one shared for ``:memory:``."""

    def __init__(self, path: str) -> None:
        self._path = path
        self._shared: sqlite3.Connection | None = None
        self._lock = RLock()

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        if self._path == MEMORY_PATH:
            with self._lock:
                if self._shared is None:
                    self._shared = open_store(self._path)
                yield self._shared
            return
        with closing(open_store(self._path)) as conn:
            yield conn


class SqliteMedium(MediumPort):
    """Insert messages into an SQLite table created at construction time."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        table_name: str | None = None,
        *,
        setup_registry: SetupRegistry | None = None,
    ) -> None:
        self.path = os.fspath(path)
        self.table_name = table_name or DEFAULT_TABLE
        self.name = f"database {self.path}"
        _check_identifier(self.path, self.table_name, table=self.table_name)
        self._connector = _Connector(self.path)
        registry = setup_registry if setup_registry is not None else SetupRegistry()
        # an in-memory database lives in this medium's connection only
        if self.path == MEMORY_PATH:
            self._prepare()
        else:
            registry.once(f"sqlite:{os.path.abspath(self.path)}@{self.table_name}", self._prepare)

    def _prepare(self) -> None:
        with self._connector.connect() as conn:
            create_table(conn, self.path, self.table_name)
        logger.debug("sqlite table ready: %s@%s", self.path, self.table_name)

    def write(self, message: Message) -> None:
        if not validate(message):
            raise EncodingFailure(message.to_dict(), "message cannot be JSON encoded")
        payload = message.to_dict()
        record = {
            "id": payload["id"],
            "level": payload["level"],
            "message": payload["message"],
            "context": encode_context(message),
            "time": payload["time"],
        }
        with self._connector.connect() as conn:
            insert(conn, self.path, self.table_name, record)

    def __repr__(self) -> str:
        return f"SqliteMedium({self.path!r}, {self.table_name!r})"


__all__ = ["DEFAULT_TABLE", "SCHEMA", "SqliteMedium", "create_table", "insert", "open_store"]
