"""The two report flavours: every diagnostic, or only diff diagnostics."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from stylishdiff.output.styles import Styler
from stylishdiff.report.engine import ReportVariant, render
from stylishdiff.report.rows import diff_only_row, full_row, restyle_locations
from stylishdiff.results.models import AnalysisResult

FULL = ReportVariant(
    name="full",
    keep=lambda message: True,
    project=full_row,
    align=("", "l", "l"),
    scope=lambda totals: totals.ordinary,
)

DIFF_ONLY = ReportVariant(
    name="diff-only",
    keep=lambda message: message.is_diff,
    project=diff_only_row,
    align=("", "r", "l"),
    scope=lambda totals: totals.diff,
    post_layout=restyle_locations,
)

VARIANTS: Dict[str, ReportVariant] = {v.name: v for v in (FULL, DIFF_ONLY)}


def get_variant(name: str) -> ReportVariant:
    try:
        return VARIANTS[name]
    except KeyError:
        raise ValueError(f"Unknown report variant: {name!r}") from None


def diff_full(results: Iterable[AnalysisResult], styler: Optional[Styler] = None) -> str:
    """All diagnostics, with diff lines highlighted."""
    return render(results, FULL, styler)


def diff_only(results: Iterable[AnalysisResult], styler: Optional[Styler] = None) -> str:
    """Only diagnostics flagged as part of the diff, totals from diff counters."""
    return render(results, DIFF_ONLY, styler)
