"""SynchronizedHistoryTracker: lock-guarded facade over HistoryTracker."""

from __future__ import annotations

import threading
from typing import Any, Generic

from tardis.core.types import ChronologyState
from tardis.history.config import HistoryConfig
from tardis.history.tracker import HistoryTracker, S


class SynchronizedHistoryTracker(Generic[S]):
    """Thread-safe wrapper around a :class:`HistoryTracker`.

    Every public method acquires ``self._lock`` and delegates to the wrapped
    tracker, so interleaved save/navigate calls from several threads always
    observe a consistent ``(history, cursor)`` pair.  Snapshots are returned
    as-is; if they are mutable the caller must not share them unguarded.

    :class:`~tardis.history.tracker.UninitializedHistoryError` propagates
    unchanged.
    """

    def __init__(
        self,
        tracker: HistoryTracker[S] | None = None,
        max_snapshots: int | None = None,
    ) -> None:
        # An empty tracker is falsy (__len__ == 0)
        if tracker is None:
            tracker = HistoryTracker(max_snapshots=max_snapshots)
        self._tracker: HistoryTracker[S] = tracker
        self._lock = threading.Lock()

    @property
    def tracker(self) -> HistoryTracker[S]:
        """The wrapped tracker.  Bypasses the lock; use from one thread only."""
        return self._tracker

    @property
    def max_snapshots(self) -> int | None:
        return self._tracker.max_snapshots

    @property
    def snapshot_count(self) -> int:
        with self._lock:
            return self._tracker.snapshot_count

    def __len__(self) -> int:
        return self.snapshot_count

    @property
    def cursor(self) -> int:
        with self._lock:
            return self._tracker.cursor

    @property
    def state(self) -> ChronologyState:
        with self._lock:
            return self._tracker.state

    @property
    def has_previous(self) -> bool:
        with self._lock:
            return self._tracker.has_previous

    @property
    def has_next(self) -> bool:
        with self._lock:
            return self._tracker.has_next

    @property
    def current(self) -> S:
        with self._lock:
            return self._tracker.current

    def get_all_snapshots(self) -> list[S]:
        with self._lock:
            return self._tracker.get_all_snapshots()

    def get_status(self) -> dict[str, Any]:
        with self._lock:
            return self._tracker.get_status()

    def save(self, snapshot: S) -> None:
        with self._lock:
            self._tracker.save(snapshot)

    def reboot(self, snapshot: S) -> None:
        with self._lock:
            self._tracker.reboot(snapshot)

    def previous(self) -> S:
        with self._lock:
            return self._tracker.previous()

    def next(self) -> S:
        with self._lock:
            return self._tracker.next()

    def oldest(self) -> S:
        with self._lock:
            return self._tracker.oldest()

    def latest(self) -> S:
        with self._lock:
            return self._tracker.latest()


def build_tracker(
    config: HistoryConfig | None = None,
) -> HistoryTracker[Any] | SynchronizedHistoryTracker[Any]:
    """Create the tracker described by *config* (plain unless ``synchronized``)."""
    config = config or HistoryConfig()
    tracker: HistoryTracker[Any] = HistoryTracker.from_config(config)
    if config.synchronized:
        return SynchronizedHistoryTracker(tracker)
    return tracker
