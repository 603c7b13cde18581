"""
cutlist.config - YAML config loading, act tables, validation.

Handles loading cutlist.yaml, resolving a built-in act table by name, and
validating all parameters.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cutlist.exceptions import ConfigError

CONFIG_FILENAME = "cutlist.yaml"

DEFAULT_TITLE = "CYBERNETIC LIST"

DEFAULT_TEXT_PARAM_NAMES = [
    "Source Text",
    "Text",
    "source text",
    "text",
    "Main Title",
    "Title",
]

DEFAULT_TEXT_KEYWORDS = ["text", "title"]


class Act(BaseModel):
    """A named, half-open frame range [start, end) used to group clips."""

    model_config = ConfigDict(frozen=True)

    name: str
    start: int
    end: int

    @property
    def duration_frames(self) -> int:
        return self.end - self.start

    def contains(self, frame: int) -> bool:
        return self.start <= frame < self.end


BUILTIN_ACT_TABLES: dict[str, list[dict[str, Any]]] = {
    "cybernetic": [
        {"name": "THE RACE", "start": 0, "end": 449},
        {"name": "REJECTION", "start": 449, "end": 606},
        {"name": "RESCUE", "start": 606, "end": 1284},
        {"name": "THE HERO", "start": 1284, "end": 1440},
    ],
}


def default_acts() -> list[Act]:
    return [Act(**act) for act in BUILTIN_ACT_TABLES["cybernetic"]]


class AuditConfig(BaseModel):
    """Resolved configuration for an audit run."""

    title: str = DEFAULT_TITLE
    acts: list[Act] = Field(default_factory=default_acts)

    default_fps: float = Field(default=24.0, gt=0.0)

    text_param_names: list[str] = Field(default_factory=lambda: list(DEFAULT_TEXT_PARAM_NAMES))
    text_keywords: list[str] = Field(default_factory=lambda: list(DEFAULT_TEXT_KEYWORDS))

    config_path: Path | None = None

    @field_validator("acts")
    @classmethod
    def validate_acts(cls, v: list[Act]) -> list[Act]:
        if not v:
            raise ValueError("acts must contain at least one act")
        seen: set[str] = set()
        for act in v:
            if act.end <= act.start:
                raise ValueError(f"act '{act.name}' must end after it starts")
            if act.name in seen:
                raise ValueError(f"duplicate act name: {act.name}")
            seen.add(act.name)
        return v

    @field_validator("text_keywords")
    @classmethod
    def lowercase_keywords(cls, v: list[str]) -> list[str]:
        return [k.lower() for k in v]


def load_act_table(name: str) -> list[dict[str, Any]]:
    """Return a built-in act table by name."""
    if name in BUILTIN_ACT_TABLES:
        return [act.copy() for act in BUILTIN_ACT_TABLES[name]]
    raise ConfigError(f"Unknown act table: {name}")


def find_config_file(start: Path | None = None) -> Path | None:
    """Find cutlist.yaml in the start directory or any of its parents."""
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.exists():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def load_config(path: Path | None = None) -> AuditConfig:
    """Load and validate configuration.

    Args:
        path: Path to a YAML config file. When omitted, cutlist.yaml is
            searched for from the working directory upward, and defaults
            are used if none is found.

    Returns:
        Validated AuditConfig

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid
    """
    if path is None:
        path = find_config_file()
        if path is None:
            return AuditConfig()
    elif not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigError(f"{path} must contain a mapping")

    table_name = raw_config.pop("act_table", None)
    if table_name and "acts" not in raw_config:
        raw_config["acts"] = load_act_table(table_name)

    raw_config["config_path"] = path

    try:
        return AuditConfig(**raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e


def create_default_config(title: str = DEFAULT_TITLE) -> dict[str, Any]:
    """Create a default config dict for a new audit."""
    return {
        "title": title,
        "default_fps": 24,
        "acts": load_act_table("cybernetic"),
        "text_param_names": list(DEFAULT_TEXT_PARAM_NAMES),
        "text_keywords": list(DEFAULT_TEXT_KEYWORDS),
    }


def write_config(config: dict[str, Any], path: Path) -> None:
    """Write configuration to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
