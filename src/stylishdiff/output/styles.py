"""Semantic emphasis and visual-width measurement on top of Rich styles."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from rich.cells import cell_len
from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style
from rich.text import Text

from stylishdiff.config.schema import DEFAULT_STYLES


def strip_styles(text: str) -> str:
    """Return *text* with ANSI control sequences removed."""
    if "\x1b" not in text:
        return text
    return "\n".join(Text.from_ansi(line).plain for line in text.split("\n"))


def visual_width(text: str) -> int:
    """Terminal cells occupied by *text*, ignoring style control sequences."""
    return cell_len(strip_styles(text))


def detect_color(mode: str = "auto") -> bool:
    """Resolve a color mode to on/off. ``auto`` defers to Rich's detection,
    which honours NO_COLOR, FORCE_COLOR and whether stdout is a terminal."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    console = Console()
    return console.is_terminal and not console.no_color


class Styler:
    """Maps semantic style names (error, warning, muted, ...) to ANSI text.

    With ``color=False`` every call returns the text unchanged, which keeps
    layout identical while making output easy to assert on.
    """

    def __init__(
        self,
        styles: Optional[Mapping[str, str]] = None,
        *,
        color: bool = True,
        color_system: ColorSystem = ColorSystem.STANDARD,
    ) -> None:
        self.styles: Dict[str, str] = dict(DEFAULT_STYLES)
        if styles:
            self.styles.update(styles)
        self.color = color
        self._color_system = color_system
        self._cache: Dict[tuple, Style] = {}

    def _style(self, names: tuple) -> Style:
        style = self._cache.get(names)
        if style is None:
            style = Style.parse(" ".join(self.styles[n] for n in names))
            self._cache[names] = style
        return style

    def emphasize(self, text: str, *names: str) -> str:
        """Render *text* in the combination of the named semantic styles."""
        if not self.color or not names:
            return text
        return self._style(names).render(text, color_system=self._color_system)

    def visual_width(self, text: str) -> int:
        return visual_width(text)


PLAIN = Styler(color=False)
