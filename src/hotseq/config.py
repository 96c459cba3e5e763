"""Project configuration models and YAML loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field


class SequenceSettings(BaseModel):
    values: list[Any] = Field(default_factory=lambda: list(range(1, 11)), min_length=1)
    delay_seconds: float = Field(1.0, gt=0)


class DemoSettings(BaseModel):
    late_subscribe_at_seconds: float = Field(1.5, ge=0)
    jsonl_path: str | None = None


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class AppSettings(BaseModel):
    sequence: SequenceSettings = Field(default_factory=SequenceSettings)
    demo: DemoSettings = Field(default_factory=DemoSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


def load_settings(config_path: str | Path | None = None) -> AppSettings:
    """Load YAML configuration into typed app settings."""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if not path.exists():
        return AppSettings()

    with path.open("r", encoding="utf-8") as f:
        raw: dict[str, Any] = yaml.safe_load(f) or {}

    return AppSettings.model_validate(raw)


def dump_settings(settings: AppSettings) -> str:
    return yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=False)
