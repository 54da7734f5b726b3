"""Terminal styling and column layout primitives."""

from stylishdiff.output.styles import PLAIN, Styler, detect_color, strip_styles, visual_width
from stylishdiff.output.table import layout

__all__ = ["PLAIN", "Styler", "detect_color", "layout", "strip_styles", "visual_width"]
