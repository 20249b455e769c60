"""Command line settings, read from TOML files into frozen pydantic models."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Literal

import typer
from pydantic import BaseModel, ConfigDict, Field, field_validator

APP_NAME = "reaction"


def default_config_path() -> Path:
    """Return the per-user settings file, e.g. ~/.config/reaction/config.toml."""
    return Path(typer.get_app_dir(APP_NAME)) / "config.toml"


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def level_upper(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class ReactionConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.logging.level)

    @classmethod
    def from_files(cls, *paths: Path) -> ReactionConfig:
        """Layer settings files in order; a later file wins per key.

        Missing files are skipped. Each file is validated on its own, so an
        error points at the file that caused it.
        """
        layered: dict[str, dict[str, Any]] = {}
        for path in paths:
            if not path.is_file():
                continue
            with path.open("rb") as f:
                layer = cls.model_validate(tomllib.load(f))
            for section, values in layer.model_dump(exclude_unset=True).items():
                layered.setdefault(section, {}).update(values)
        return cls.model_validate(layered)
