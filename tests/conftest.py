"""Shared pytest fixtures for TARDIS tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from omegaconf import OmegaConf

from tardis.history.tracker import HistoryTracker


@pytest.fixture(autouse=True)
def _reset_tardis_logger():
    """Undo setup_logging() so caplog sees tardis records in later tests."""
    yield
    root = logging.getLogger("tardis")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def config_path(project_root: Path) -> Path:
    return project_root / "config" / "default.yaml"


@pytest.fixture
def default_config(config_path: Path):
    return OmegaConf.load(config_path)


@pytest.fixture
def counted_tracker() -> HistoryTracker[int]:
    """Tracker after ``save(1)``, ``save(2)``, ``save(3)``: history [3, 2, 1]."""
    tracker: HistoryTracker[int] = HistoryTracker()
    for i in (1, 2, 3):
        tracker.save(i)
    return tracker
