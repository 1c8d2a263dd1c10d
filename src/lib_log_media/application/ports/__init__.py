"""Protocols the application layer depends on."""

from __future__ import annotations

from .fallback import FallbackPort
from .media import MediumPort
from .time import ClockPort, IdProvider

__all__ = ["ClockPort", "FallbackPort", "IdProvider", "MediumPort"]
