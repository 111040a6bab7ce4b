"""Core data types for the TARDIS chronology tracker."""

from __future__ import annotations

import enum


class ChronologyState(enum.Enum):
    """Lifecycle state of a chronology, derived from its snapshot count."""

    UNINITIALIZED = "uninitialized"  # nothing saved yet
    INITIALIZED = "initialized"
