"""Load and merge configuration from .stylishdiff.toml, CLI flags, and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from rich.errors import StyleSyntaxError
from rich.style import Style

from stylishdiff.config.schema import (
    COLOR_MODES,
    DEFAULT_STYLES,
    VARIANTS,
    OutputConfig,
    StylishDiffConfig,
)

CONFIG_FILENAME = ".stylishdiff.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return the [name] table, or an empty one if absent."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _build_output(data: Dict[str, Any]) -> OutputConfig:
    """Build the [output] section, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(OutputConfig)}
    filtered = {k: v for k, v in _section(data, "output").items() if k in valid_fields}
    output = OutputConfig(**filtered)
    if output.variant not in VARIANTS:
        raise ConfigError(f"Unknown variant: {output.variant!r}")
    if output.color not in COLOR_MODES:
        raise ConfigError(f"Unknown color mode: {output.color!r}")
    return output


def _build_styles(data: Dict[str, Any]) -> Dict[str, str]:
    """Merge the [styles] section over the defaults and check each definition."""
    styles = dict(DEFAULT_STYLES)
    for name, definition in _section(data, "styles").items():
        if name not in DEFAULT_STYLES:
            continue
        try:
            Style.parse(str(definition))
        except StyleSyntaxError as exc:
            raise ConfigError(f"Invalid style for {name!r}: {exc}") from exc
        styles[name] = str(definition)
    return styles


def _merge_env_overrides(cfg: StylishDiffConfig) -> None:
    """Apply STYLISHDIFF_* environment variable overrides."""
    if val := os.environ.get("STYLISHDIFF_VARIANT"):
        if val in VARIANTS:
            cfg.output.variant = val  # type: ignore[assignment]
    if val := os.environ.get("STYLISHDIFF_COLOR"):
        if val in COLOR_MODES:
            cfg.output.color = val  # type: ignore[assignment]


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> StylishDiffConfig:
    """Load, validate, and return a StylishDiffConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = StylishDiffConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = StylishDiffConfig(
            version=raw.get("version", "1.0"),
            output=_build_output(raw),
            styles=_build_styles(raw),
        )

    _merge_env_overrides(cfg)
    return cfg
