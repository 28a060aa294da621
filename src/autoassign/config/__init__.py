"""Configuration management."""

from autoassign.config.loader import ConfigError, load_config
from autoassign.config.settings import Settings

__all__ = ["ConfigError", "Settings", "load_config"]
