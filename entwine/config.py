"""Configuration for Entwine.

Settings live in a JSON file at $ENTWINE_CONFIG, falling back to
~/.config/entwine/config.json. A missing file means defaults.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ENTWINE_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GenerationSettings(BaseModel):
    """Defaults for `entwine sample`."""

    seed: int | None = None
    count: int = 10
    bias_frequency: int | None = None
    max_depth: int = 8


class LoggingSettings(BaseModel):
    level: str = "WARNING"


class EntwineConfig(BaseModel):
    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# key -> (section, field, kind)
CONFIG_KEYS: dict[str, tuple[str, str, str]] = {
    "generation.seed": ("generation", "seed", "optional_int"),
    "generation.count": ("generation", "count", "int"),
    "generation.bias_frequency": ("generation", "bias_frequency", "optional_int"),
    "generation.max_depth": ("generation", "max_depth", "int"),
    "logging.level": ("logging", "level", "level"),
}


def get_config_path() -> Path:
    """Get config file path from the environment, or the per-user default."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".config" / "entwine" / "config.json"


def load_config(path: Path | None = None) -> EntwineConfig:
    """Load config from disk, returning defaults if the file does not exist."""
    path = path or get_config_path()
    if not path.exists():
        return EntwineConfig()
    with open(path) as f:
        data = json.load(f)
    logger.debug(f"Loaded config from {path}")
    return EntwineConfig.model_validate(data)


def save_config(config: EntwineConfig, path: Path | None = None) -> Path:
    """Write config to disk, creating parent directories as needed."""
    path = path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(config.model_dump(mode="json"), f, indent=2)
    logger.debug(f"Saved config to {path}")
    return path


def _parse_value(key: str, kind: str, raw: str):
    if kind == "optional_int" and raw.lower() in ("none", "null", ""):
        return None
    if kind in ("int", "optional_int"):
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"Invalid integer for {key}: {raw!r}")
    level = raw.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level for {key}: {raw!r} (expected one of {', '.join(LOG_LEVELS)})")
    return level


def set_config_value(config: EntwineConfig, key: str, raw: str) -> EntwineConfig:
    """Return a copy of config with the dotted key set from a raw string.

    Raises:
        ValueError: If the key is unknown or the value cannot be parsed
    """
    if key not in CONFIG_KEYS:
        raise ValueError(f"Unknown key: {key} (valid keys: {', '.join(CONFIG_KEYS)})")
    section_name, field_name, kind = CONFIG_KEYS[key]
    value = _parse_value(key, kind, raw)

    section = getattr(config, section_name).model_copy(update={field_name: value})
    return config.model_copy(update={section_name: section})
