"""Public package surface: structured log dispatch to pluggable media.

``import lib_log_media`` exposes the runtime façade (``log`` and the level
helpers, the media factories, the default-media accessors) together with the
domain types and failure classes callers may need to catch.
"""

from __future__ import annotations

from .application.ports import MediumPort
from .domain import (
    EncodingFailure,
    FileLockFailure,
    FileSetupFailure,
    FileWriteFailure,
    LogLevel,
    LogMediaError,
    Message,
    StoreFailure,
)
from .runtime import (
    LoggingRuntime,
    alert,
    build_runtime,
    create_message,
    critical,
    debug,
    emergency,
    encode,
    error,
    file_lock,
    file_put,
    get_default_media,
    info,
    log,
    notice,
    reset_runtime,
    set_default_media,
    sqlite,
    system_log,
    validate,
    warning,
)

__all__ = [
    "EncodingFailure",
    "FileLockFailure",
    "FileSetupFailure",
    "FileWriteFailure",
    "LogLevel",
    "LogMediaError",
    "LoggingRuntime",
    "MediumPort",
    "Message",
    "StoreFailure",
    "alert",
    "build_runtime",
    "create_message",
    "critical",
    "debug",
    "emergency",
    "encode",
    "error",
    "file_lock",
    "file_put",
    "get_default_media",
    "info",
    "log",
    "notice",
    "reset_runtime",
    "set_default_media",
    "sqlite",
    "system_log",
    "validate",
    "warning",
]
