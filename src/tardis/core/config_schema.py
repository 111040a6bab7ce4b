"""Pydantic schema for TARDIS configuration validation.

Mirrors the YAML structure in config/default.yaml. Used when
``validate=True`` is passed to ``TardisConfig.load()``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class SystemConfig(BaseModel):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = None
    log_json: bool = False
    validate_config: bool = False


class HistorySchema(BaseModel):
    max_snapshots: int | None = Field(default=None, gt=0)
    synchronized: bool = False


class TardisSection(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    history: HistorySchema = Field(default_factory=HistorySchema)


class TardisConfigSchema(BaseModel):
    tardis: TardisSection = Field(default_factory=TardisSection)


def validate_config(cfg_dict: dict) -> TardisConfigSchema:
    """Validate a raw config dict (e.g. from OmegaConf) against the schema.

    Raises ``pydantic.ValidationError`` on invalid config.
    """
    return TardisConfigSchema.model_validate(cfg_dict)
