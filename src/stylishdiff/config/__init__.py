"""Configuration loading, schema, and defaults."""

from stylishdiff.config.loader import ConfigError, load_config
from stylishdiff.config.schema import DEFAULT_STYLES, OutputConfig, StylishDiffConfig

__all__ = [
    "ConfigError",
    "DEFAULT_STYLES",
    "OutputConfig",
    "StylishDiffConfig",
    "load_config",
]
