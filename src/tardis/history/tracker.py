"""HistoryTracker: linear undo/redo chronology of application snapshots."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from tardis.core.types import ChronologyState

if TYPE_CHECKING:
    from tardis.history.config import HistoryConfig

logger = logging.getLogger(__name__)

S = TypeVar("S")


class UninitializedHistoryError(RuntimeError):
    """Raised when a snapshot is read before anything was saved.

    This is a caller bug, not a recoverable condition: save or reboot
    the tracker before navigating it.
    """

    def __init__(self) -> None:
        super().__init__(
            "Cannot fetch a snapshot from the chronology before saving one "
            "(call save() or reboot() first)"
        )


class HistoryTracker(Generic[S]):
    """Linear chronology of snapshots with undo/redo navigation.

    Snapshots are kept newest-first in ``self._snapshots``; index 0 is the
    most recent save.  ``self._cursor`` says how far back the caller has
    navigated: 0 is the newest snapshot, larger values are older ones.

    Saving while rewound discards every snapshot newer than the cursor
    (the redo branch) before the new snapshot becomes the newest entry.

    The tracker never inspects snapshots and is not thread-safe; see
    :class:`~tardis.history.synchronized.SynchronizedHistoryTracker`.
    """

    def __init__(self, max_snapshots: int | None = None) -> None:
        if max_snapshots is not None and max_snapshots < 1:
            raise ValueError(f"max_snapshots must be >= 1, got {max_snapshots}")
        self._max_snapshots = max_snapshots
        self._snapshots: list[S] = []
        self._cursor = 0

    @classmethod
    def from_config(cls, config: HistoryConfig) -> HistoryTracker[S]:
        return cls(max_snapshots=config.max_snapshots)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def max_snapshots(self) -> int | None:
        return self._max_snapshots

    @property
    def snapshot_count(self) -> int:
        return len(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def state(self) -> ChronologyState:
        if not self._snapshots:
            return ChronologyState.UNINITIALIZED
        return ChronologyState.INITIALIZED

    @property
    def has_previous(self) -> bool:
        """True if an older snapshot than the current one exists."""
        return self._cursor < len(self._snapshots) - 1

    @property
    def has_next(self) -> bool:
        """True if a newer snapshot than the current one exists."""
        return self._cursor > 0

    @property
    def current(self) -> S:
        """The snapshot under the cursor.

        Raises:
            UninitializedHistoryError: if nothing has been saved yet.
        """
        if not self._snapshots:
            raise UninitializedHistoryError()
        return self._snapshots[self._cursor]

    def get_all_snapshots(self) -> list[S]:
        """Return a shallow copy of the history, newest first."""
        return list(self._snapshots)

    def get_status(self) -> dict[str, Any]:
        """Return a plain-dict summary for display and logging."""
        return {
            "state": self.state.value,
            "cursor": self._cursor,
            "snapshot_count": len(self._snapshots),
            "max_snapshots": self._max_snapshots,
            "has_previous": self.has_previous,
            "has_next": self.has_next,
        }

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def save(self, snapshot: S) -> None:
        """Record *snapshot* as the newest entry and make it current.

        If the cursor is rewound, every snapshot newer than the cursor is
        discarded first.
        """
        truncated = self._cursor
        self._snapshots.insert(self._cursor, snapshot)
        del self._snapshots[:truncated]
        self._cursor = 0

        evicted = 0
        if self._max_snapshots is not None:
            evicted = max(0, len(self._snapshots) - self._max_snapshots)
            if evicted:
                del self._snapshots[self._max_snapshots :]

        if truncated or evicted:
            logger.debug(
                "Snapshot saved: %d future dropped, %d oldest evicted (%d stored)",
                truncated,
                evicted,
                len(self._snapshots),
            )

    def reboot(self, snapshot: S) -> None:
        """Discard the whole chronology and start over from *snapshot*."""
        dropped = len(self._snapshots)
        self._snapshots = [snapshot]
        self._cursor = 0
        logger.debug("Chronology rebooted (%d snapshots dropped)", dropped)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def previous(self) -> S:
        """Move one step back and return the snapshot there.

        At the oldest snapshot this is a no-op returning the current one.
        """
        self._require_initialized()
        if self.has_previous:
            self._cursor += 1
        return self._snapshots[self._cursor]

    def next(self) -> S:
        """Move one step forward and return the snapshot there.

        At the newest snapshot this is a no-op returning the current one.
        """
        self._require_initialized()
        if self.has_next:
            self._cursor -= 1
        return self._snapshots[self._cursor]

    def oldest(self) -> S:
        """Jump to the oldest snapshot and return it."""
        self._require_initialized()
        if self.has_previous:
            self._cursor = len(self._snapshots) - 1
        return self._snapshots[self._cursor]

    def latest(self) -> S:
        """Jump to the newest snapshot and return it."""
        self._require_initialized()
        if self.has_next:
            self._cursor = 0
        return self._snapshots[self._cursor]

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _require_initialized(self) -> None:
        if not self._snapshots:
            raise UninitializedHistoryError()
