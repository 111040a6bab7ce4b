"""Snapshot chronology with undo/redo navigation for TARDIS."""

from tardis.history.config import HistoryConfig
from tardis.history.synchronized import SynchronizedHistoryTracker, build_tracker
from tardis.history.tracker import HistoryTracker, UninitializedHistoryError

__all__ = [
    "HistoryConfig",
    "HistoryTracker",
    "SynchronizedHistoryTracker",
    "UninitializedHistoryError",
    "build_tracker",
]
