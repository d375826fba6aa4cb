"""Application configuration: settings schema and mdindex.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError


CONFIG_FILE = "mdindex.yaml"
ENV_PREFIX = "MDINDEX_"
LOG_LEVELS = "^(?:DEBUG|INFO|WARNING|ERROR|CRITICAL|debug|info|warning|error|critical)$"


class Settings(BaseModel):
    app_name:      str = "mdindex"
    output_dir:    str = Field(default="dist",        description="Directory for written JSON records")
    output_format: str = Field(default="json", pattern="^(json|zip)$", description="json files or a zip archive")
    archive_name:  str = Field(default="records.zip", description="Zip file name inside output_dir")
    indent:        int = Field(default=2, ge=0,       description="JSON indent; 0 writes compact JSON")
    log_level:     str = Field(default="WARNING", pattern=LOG_LEVELS, description="Logging level name")


def _read_config_file(path: Path) -> dict[str, Any]:
    """Return the mdindex.yaml mapping; unknown keys are rejected by name."""
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    unknown = sorted(str(k) for k in data if k not in Settings.model_fields)
    if unknown:
        raise ValueError(f"Invalid {path.name}: unknown setting(s) {', '.join(unknown)}")
    return data


def _read_env() -> dict[str, str]:
    """Collect non-empty MDINDEX_<FIELD> variables; a prefix with no matching field is an error."""
    data = {}
    for key, val in os.environ.items():
        if not key.startswith(ENV_PREFIX) or not val:
            continue
        name = key[len(ENV_PREFIX):].lower()
        if name not in Settings.model_fields:
            raise ValueError(f"Unknown environment variable {key}; expected one of "
                             + ", ".join(ENV_PREFIX + f.upper() for f in Settings.model_fields))
        data[name] = val
    return data


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Merge mdindex.yaml, then MDINDEX_<FIELD> env vars, then non-None CLI overrides.

    Every problem surfaces as ValueError with a one-line message naming the
    offending setting.
    """
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        data.update(_read_config_file(Path(CONFIG_FILE)))
    data.update(_read_env())
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except PydanticValidationError as e:
        problems = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
        raise ValueError(f"Invalid settings: {problems}") from e
