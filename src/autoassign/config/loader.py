"""Configuration file loading."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from autoassign.config.settings import Settings

CONFIG_FILENAMES = [
  ".github/reviewers.yml",
  ".github/reviewers.yaml",
  ".reviewers.yml",
  ".reviewers.yaml",
]


class ConfigError(Exception):
  """Config file exists but cannot be used."""


def find_config_file(config_path: Path | None = None, cwd: Path | None = None) -> Path | None:
  """Find config file path, or None if no config exists."""
  if config_path:
    if not config_path.exists():
      raise ConfigError(f"Config file not found: {config_path}")
    return config_path

  base = cwd or Path.cwd()
  for filename in CONFIG_FILENAMES:
    path = base / filename
    if path.exists():
      return path

  return None


def load_config(config_path: Path | None = None, cwd: Path | None = None) -> Settings | None:
  """Load reviewer configuration.

  Returns:
    Parsed settings, or None when no config file exists. Callers
    should skip assignment in that case rather than fail.

  Raises:
    ConfigError: The file is missing (explicit path), unreadable,
      not valid YAML, or does not match the schema.
  """
  path = find_config_file(config_path, cwd)
  if not path:
    return None
  return _load_from_file(path)


def _load_from_file(path: Path) -> Settings:
  """Load settings from a YAML file."""
  try:
    with open(path, encoding="utf-8") as f:
      data = yaml.safe_load(f)
  except OSError as e:
    raise ConfigError(f"Could not read config file {path}: {e.strerror}") from e
  except yaml.YAMLError as e:
    raise ConfigError(f"Invalid YAML in {path}: {e}") from e

  return parse_config(data, source=str(path))


def parse_config(data: object, source: str = "config") -> Settings:
  """Parse a loaded YAML document into Settings."""
  if data is None:
    return Settings()
  if not isinstance(data, dict):
    raise ConfigError(f"{source}: expected a mapping at the top level")

  try:
    return Settings.model_validate(data)
  except ValidationError as e:
    raise ConfigError(f"{source}: {_format_errors(e)}") from e


def _format_errors(error: ValidationError) -> str:
  parts = []
  for item in error.errors():
    location = ".".join(str(p) for p in item["loc"])
    parts.append(f"{location}: {item['msg']}" if location else item["msg"])
  return "; ".join(parts)
