"""Use cases: message creation, default media, dispatch."""

from __future__ import annotations

from .defaults import DefaultMediaRegistry
from .dispatch import CallableMedium, Dispatcher, as_medium, create_dispatch
from .messages import create_message

__all__ = [
    "CallableMedium",
    "DefaultMediaRegistry",
    "Dispatcher",
    "as_medium",
    "create_dispatch",
    "create_message",
]
