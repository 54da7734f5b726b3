"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal

Variant = Literal["full", "diff-only"]
ColorMode = Literal["auto", "always", "never"]

VARIANTS: tuple[str, ...] = ("full", "diff-only")
COLOR_MODES: tuple[str, ...] = ("auto", "always", "never")

# Semantic style name -> rich style definition
DEFAULT_STYLES: Dict[str, str] = {
    "underline": "underline",
    "error": "red",
    "warning": "yellow",
    "muted": "dim",
    "changed": "green",
    "bold": "bold",
}


@dataclass
class OutputConfig:
    variant: Variant = "full"
    color: ColorMode = "auto"


@dataclass
class StylishDiffConfig:
    version: str = "1.0"
    output: OutputConfig = field(default_factory=OutputConfig)
    styles: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_STYLES))
