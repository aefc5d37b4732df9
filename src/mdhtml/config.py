"""Application configuration: settings schema and config.yaml loader"""

import codecs
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDHTML_"


class Settings(BaseModel):
    app_name:      str = "mdhtml"
    output_dir:    Optional[str] = Field(default=None, description="Directory for HTML output; unset writes next to each source")
    output_suffix: str = Field(default=".html", pattern=r"^\.\w+$", description="Suffix of written files")
    encoding:      str = Field(default="utf-8", description="Encoding of markdown sources; HTML is always written as UTF-8")
    log_level:     str = Field(default="WARNING", description="Logging threshold")

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        """Normalise to the codec's canonical name, e.g. 'Latin1' -> 'iso8859-1'."""
        try:
            return codecs.lookup(value).name
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level


def _read_config_file(path: Path) -> dict[str, Any]:
    """Return the mapping in path, or {} when the file is absent or empty."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def _env_values() -> dict[str, str]:
    """Collect non-empty MDHTML_<FIELD> variables for known Settings fields."""
    return {
        name: val
        for name in Settings.model_fields
        if (val := os.getenv(f"{ENV_PREFIX}{name.upper()}"))
    }


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Layer config.yaml, then MDHTML_<FIELD> env vars, then non-None CLI overrides."""
    data = _read_config_file(Path(CONFIG_FILE))
    data.update(_env_values())
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
