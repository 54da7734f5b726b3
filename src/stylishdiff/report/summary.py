"""Summary line composition."""

from __future__ import annotations

from stylishdiff.output.styles import Styler
from stylishdiff.report.rows import pluralize
from stylishdiff.results.models import Counts

CROSS_MARK = "✖"
FIX_HINT = "potentially fixable with the `--fix` option."


def problem_line(counts: Counts) -> str:
    return (
        f"{CROSS_MARK} {counts.total}{pluralize(' problem', counts.total)}"
        f" ({counts.errors}{pluralize(' error', counts.errors)},"
        f" {counts.warnings}{pluralize(' warning', counts.warnings)})"
    )


def fixable_line(counts: Counts) -> str:
    return (
        f"  {counts.fixable_errors}{pluralize(' error', counts.fixable_errors)},"
        f" {counts.fixable_warnings}{pluralize(' warning', counts.fixable_warnings)}"
        f" {FIX_HINT}"
    )


def compose_summary(counts: Counts, color: str, styler: Styler) -> str:
    """Return the bold summary (and fixability hint, if any) in *color*.

    *color* is a semantic style name, ``"error"`` or ``"warning"``. Returns
    ``""`` when there is nothing to summarise.
    """
    if counts.total == 0:
        return ""
    out = styler.emphasize(problem_line(counts), color, "bold") + "\n"
    if counts.any_fixable:
        out += styler.emphasize(fixable_line(counts), color, "bold") + "\n"
    return out
