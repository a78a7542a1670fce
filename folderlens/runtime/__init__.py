"""Runtime package: the engine state container, preferences and host actions."""

from .engine import TreeStateEngine, empty_root, log_notification

__all__ = [
    "TreeStateEngine",
    "empty_root",
    "log_notification",
]
