"""
Settings management.

Loads optional settings from a YAML file, then applies environment variable
overrides (a .env file is loaded first when present).

Expected YAML format:
```yaml
ypbank:
  log_level: INFO
  log_format: json
  default_output_format: csv
```
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

# Environment variable -> settings field
ENV_OVERRIDES = {
    "LOG_LEVEL": "log_level",
    "LOG_FORMAT": "log_format",
    "YPBANK_OUTPUT_FORMAT": "default_output_format",
}


class CodecSettings(BaseModel):
    """
    Settings shared by the CLIs.

    Attributes:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_format: "json" or "text"
        default_output_format: Format used when --output-format is omitted
    """

    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"
    default_output_format: Literal["csv", "txt", "bin"] = "csv"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v):
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level '{v}'")
        return level


def _load_yaml(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict) or not isinstance(config.get("ypbank", {}), dict):
        raise ValueError("Configuration file must contain a 'ypbank' mapping")
    return dict(config.get("ypbank") or {})


def load_settings(config_path: str | Path | None = None, env_file: str | Path | None = None) -> CodecSettings:
    """
    Load settings from YAML and the environment.

    Args:
        config_path: Optional YAML file with a top-level 'ypbank' section
        env_file: Optional .env file; defaults to ./.env when present

    Returns:
        Validated settings

    Raises:
        FileNotFoundError: If config_path does not exist
        ValueError: If a setting is invalid
    """
    if env_file:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(override=False)

    values: dict[str, Any] = {}
    if config_path is not None:
        values.update(_load_yaml(Path(config_path)))

    for env_name, field_name in ENV_OVERRIDES.items():
        env_value = os.getenv(env_name)
        if env_value:
            values[field_name] = env_value

    try:
        return CodecSettings(**values)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise ValueError(f"Invalid settings ({fields}): {e}") from e
