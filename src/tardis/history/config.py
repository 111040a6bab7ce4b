"""Chronology configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from omegaconf import OmegaConf


@dataclass
class HistoryConfig:
    """Chronology tracker configuration."""

    max_snapshots: int | None = None  # None = unbounded
    synchronized: bool = False

    @classmethod
    def from_omegaconf(cls, cfg: Any) -> HistoryConfig:
        """Build from the ``tardis.history`` section (OmegaConf or plain dict)."""
        if cfg is None:
            return cls()

        if OmegaConf.is_config(cfg):
            cfg = OmegaConf.to_container(cfg, resolve=True)

        if not isinstance(cfg, dict):
            cfg = dict(cfg)

        max_snapshots = cfg.get("max_snapshots")
        return cls(
            max_snapshots=int(max_snapshots) if max_snapshots is not None else None,
            synchronized=bool(cfg.get("synchronized", False)),
        )
