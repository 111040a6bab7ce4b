"""TARDIS: linear snapshot chronology with undo/redo navigation."""

from tardis.core.types import ChronologyState
from tardis.history import (
    HistoryConfig,
    HistoryTracker,
    SynchronizedHistoryTracker,
    UninitializedHistoryError,
    build_tracker,
)

__version__ = "0.1.0"

__all__ = [
    "ChronologyState",
    "HistoryConfig",
    "HistoryTracker",
    "SynchronizedHistoryTracker",
    "UninitializedHistoryError",
    "build_tracker",
]
