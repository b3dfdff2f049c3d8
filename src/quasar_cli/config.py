"""Project configuration for locating API descriptor files.

An optional `quasar.describe.yaml` in the project directory may set:

    api_dir: node_modules/quasar/dist/api
    extensions:
      qmarkdown: node_modules/@quasar/quasar-app-extension-qmarkdown/src/api

Relative paths resolve against the project directory.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

CONFIG_FILE = "quasar.describe.yaml"
DEFAULT_API_DIR = Path("node_modules/quasar/dist/api")


class ConfigError(Exception):
    """The project configuration file could not be read."""


class DescribeConfig(BaseModel):
    """Where the base framework and each extension keep their API JSON."""

    api_dir: Path = DEFAULT_API_DIR
    extensions: dict[str, Path] = {}


def load_config(project_dir: Path, api_dir: Path | None = None) -> DescribeConfig:
    """Load the project config, applying an explicit `api_dir` override."""
    config_file = project_dir / CONFIG_FILE
    data = {}
    if config_file.exists():
        try:
            data = yaml.safe_load(config_file.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_file} must contain a mapping")

    try:
        config = DescribeConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid {config_file}: {e}") from e

    if api_dir is not None:
        config.api_dir = api_dir

    config.api_dir = project_dir / config.api_dir
    config.extensions = {
        ext_id: project_dir / path for ext_id, path in config.extensions.items()
    }
    return config
