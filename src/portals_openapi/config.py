"""Build configuration.

Defaults reproduce the stock portal build; a YAML file and CLI options can
override any of them.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from portals_openapi.errors import ConfigError
from portals_openapi.output.formatter import DEFAULT_FORMATTER
from portals_openapi.transform.transformer import DEFAULT_PREFIX


class BuildConfig(BaseModel):
    """Settings for one build."""

    model_config = ConfigDict(extra="forbid")

    source: str = "portals.json"
    output_name: str | None = None  # defaults to the source file name
    prefix: str = DEFAULT_PREFIX
    title: str = "Community Server REST API"
    version: str = "latest"
    formatter: list[str] = DEFAULT_FORMATTER
    log_name: str = "report.log"

    @property
    def target_name(self) -> str:
        return self.output_name or Path(self.source).name


def load_config(path: Path | None = None, **overrides) -> BuildConfig:
    """Load a BuildConfig from an optional YAML file, then apply non-None overrides."""
    data = {}
    if path is not None:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except OSError as e:
            raise ConfigError(f"Failed to read config {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a mapping")

    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return BuildConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}") from e
