"""YAML configuration loading using OmegaConf."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf


class TardisConfig:
    """Loads a YAML configuration file and applies dot-path overrides."""

    def __init__(self, config_path: str | Path = "config/default.yaml"):
        self._config_path = Path(config_path)
        self._config: DictConfig | None = None

    def load(self, validate: bool = False) -> DictConfig:
        """Load the config file.

        Args:
            validate: If True, validate the loaded config against the
                Pydantic schema and raise ``pydantic.ValidationError``
                on invalid values.
        """
        if not self._config_path.exists():
            raise FileNotFoundError(f"Config not found: {self._config_path}")

        base = OmegaConf.load(self._config_path)
        assert isinstance(base, DictConfig)

        if validate or OmegaConf.select(base, "tardis.system.validate_config", default=False):
            from tardis.core.config_schema import validate_config

            validate_config(OmegaConf.to_container(base, resolve=True))

        self._config = base
        return self._config

    def override(self, dotpath: str, value: Any) -> None:
        """Override a config value using dot notation.

        Example: config.override("tardis.history.max_snapshots", 50)
        """
        if self._config is None:
            raise RuntimeError("Config not loaded yet. Call load() first.")
        OmegaConf.update(self._config, dotpath, value)

    @property
    def cfg(self) -> DictConfig:
        if self._config is None:
            raise RuntimeError("Config not loaded yet. Call load() first.")
        return self._config
