"""JSON codec for :class:`~lib_log_media.domain.message.Message`.

``validate`` is the boolean probe callers use before committing to a write
(before any lock is taken or file opened); ``encode`` is used once committed
and raises :class:`EncodingFailure` instead of returning a status.
"""

from __future__ import annotations

import json
import math
from typing import Any, Union

from .errors import EncodingFailure
from .message import Message

JsonValue = Union[None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]]


def is_json_value(value: Any) -> bool:
    """Return ``True`` when ``value`` belongs to the closed JSON value family.

    Examples
    --------
    >>> is_json_value({"k": [1, 2.5, None, True, "x"]})
    True
    >>> is_json_value({"k": object()})
    False
    >>> is_json_value({1: "not a str key"})
    False
    >>> is_json_value(float("nan"))
    False
    """

    if value is None or isinstance(value, (bool, int, str)):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, (list, tuple)):
        return all(is_json_value(item) for item in value)
    if isinstance(value, dict):
        return all(isinstance(key, str) and is_json_value(item) for key, item in value.items())
    return False


def _dumps(data: dict[str, Any]) -> str:
    return json.dumps(data, ensure_ascii=False, allow_nan=False)


def validate(message: Message) -> bool:
    """Return whether ``message`` can be encoded without raising."""

    data = message.to_dict()
    if not is_json_value(data):
        return False
    try:
        _dumps(data)
    except (TypeError, ValueError):
        return False
    return True


def encode(message: Message) -> bytes:
    """Return the UTF-8 JSON form of ``message``.

    Raises
    ------
    EncodingFailure
        When the context holds values JSON cannot represent, including
        mapping keys that are not strings. Fails exactly when
        :func:`validate` returns ``False``.
    """

    data = message.to_dict()
    if not is_json_value(data):
        raise EncodingFailure(data, "context holds values without a JSON form")
    try:
        return _dumps(data).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingFailure(data, str(exc)) from exc


def encode_context(message: Message) -> str:
    """Return the context mapping alone as JSON text (SQLite ``context`` column)."""

    if not is_json_value(message.context):
        raise EncodingFailure(message.to_dict(), "context holds values without a JSON form")
    try:
        return _dumps(message.context)
    except (TypeError, ValueError) as exc:
        raise EncodingFailure(message.to_dict(), str(exc)) from exc


__all__ = ["JsonValue", "encode", "encode_context", "is_json_value", "validate"]
