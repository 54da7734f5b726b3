"""Plain-text column layout for already-styled cells.

Rich's ``Table`` renders through a Console and owns its own styling, so the
report lays out its pre-styled cells here instead: widths come from a
pluggable measurement function (visual width by default) and the result is a
single string.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from stylishdiff.output.styles import visual_width

Row = Sequence[object]


def _pad(cell: str, missing: int, align: str) -> str:
    if missing <= 0:
        return cell
    if align == "r":
        return " " * missing + cell
    if align == "c":
        left = (missing + 1) // 2
        return " " * left + cell + " " * (missing - left)
    return cell + " " * missing


def column_widths(
    rows: Sequence[Sequence[str]],
    string_length: Callable[[str], int],
) -> List[int]:
    """Widest cell per column; ragged rows only widen the columns they reach."""
    widths: List[int] = []
    for row in rows:
        for ix, cell in enumerate(row):
            n = string_length(cell)
            if ix >= len(widths):
                widths.append(n)
            elif n > widths[ix]:
                widths[ix] = n
    return widths


def layout(
    rows: Sequence[Row],
    align: Optional[Sequence[str]] = None,
    *,
    hsep: str = "  ",
    string_length: Callable[[str], int] = visual_width,
) -> str:
    """Align *rows* into columns and return one block of text.

    *align* holds one hint per column: ``"l"`` (default, also ``""``),
    ``"r"`` or ``"c"``. Cells are joined with *hsep*, trailing whitespace is
    trimmed from every line, and an empty row yields an empty line.
    """
    hints = list(align or [])
    cells = [[str(c) for c in row] for row in rows]
    widths = column_widths(cells, string_length)

    lines: List[str] = []
    for row in cells:
        padded = [
            _pad(cell, widths[ix] - string_length(cell), hints[ix] if ix < len(hints) else "l")
            for ix, cell in enumerate(row)
        ]
        lines.append(hsep.join(padded).rstrip())
    return "\n".join(lines)
