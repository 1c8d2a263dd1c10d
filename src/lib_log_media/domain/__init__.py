"""Domain entities and value objects used by the media layer."""

from __future__ import annotations

from .codec import JsonValue, encode, encode_context, is_json_value, validate
from .errors import (
    EncodingFailure,
    FileLockFailure,
    FileSetupFailure,
    FileWriteFailure,
    LogMediaError,
    StoreFailure,
)
from .levels import LogLevel, coerce_level
from .message import Message, format_time
from .setup_registry import SetupRegistry

__all__ = [
    "EncodingFailure",
    "FileLockFailure",
    "FileSetupFailure",
    "FileWriteFailure",
    "JsonValue",
    "LogLevel",
    "LogMediaError",
    "Message",
    "SetupRegistry",
    "StoreFailure",
    "coerce_level",
    "encode",
    "encode_context",
    "format_time",
    "is_json_value",
    "validate",
]
