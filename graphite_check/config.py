"""
Configuration loading and validation for graphite-check.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from graphite_check.comparators import Comparator
from graphite_check.core import ConfigError

DEFAULT_NAME = "graphite check"


class CheckConfig(BaseModel):
    """Options for a single check run. Read once, never mutated."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    target: str | None = None  # May contain "$" for the local hostname
    server: str | None = None  # host:port of the Graphite web app
    warning: float | None = None
    critical: float | None = None
    comparator: Comparator = Comparator.GREATER_THAN
    reset_on_change: int | None = Field(default=None, ge=1)
    allowed_age: int = 60  # Seconds
    timespan: int = Field(default=5, ge=1)  # Minutes of history to request
    hostname_sub: str = "_"
    name: str | None = None
    timeout: float = Field(default=10.0, gt=0)  # Seconds per HTTP request

    @field_validator("comparator", mode="before")
    @classmethod
    def _parse_comparator(cls, value: Any) -> Comparator:
        return Comparator.parse(value)

    @property
    def display_name(self) -> str:
        return self.name or DEFAULT_NAME

    def require(self) -> None:
        """
        Check that the options needed to query Graphite are present.

        Raises:
            ConfigError: For the first missing required option
        """
        for key in ("server", "target"):
            if not getattr(self, key):
                raise ConfigError(f"No graphite {key} provided")


def build_config(values: Mapping[str, Any]) -> CheckConfig:
    """
    Validate option values into a CheckConfig.

    Options set to None are dropped so model defaults apply.

    Raises:
        ConfigError: If any option is invalid
    """
    cleaned = {key: value for key, value in values.items() if value is not None}
    try:
        return CheckConfig.model_validate(cleaned)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {_summarize(e)}") from e


def load_config(
    config_path: str | Path,
    overrides: Mapping[str, Any] | None = None
) -> CheckConfig:
    """
    Load check options from a YAML file.

    Args:
        config_path: Path to a YAML mapping of option names to values
        overrides: Values that take precedence over the file (None is ignored)

    Returns:
        Validated CheckConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If the file or the merged options are invalid
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with path.open('r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid configuration file {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping")

    merged = dict(raw_config)
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value

    return build_config(merged)


def _summarize(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "config"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
