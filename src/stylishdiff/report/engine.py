"""Core report pipeline — filter, project, lay out, and summarise.

Both report variants run through :func:`build_report`; a
:class:`ReportVariant` supplies everything that differs between them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from stylishdiff.output.styles import Styler
from stylishdiff.output.table import layout
from stylishdiff.report.rows import Projection
from stylishdiff.report.summary import compose_summary
from stylishdiff.results.models import AnalysisResult, Counts, Diagnostic, ReportTotals

LayoutFn = Callable[..., str]


@dataclass(frozen=True)
class ReportVariant:
    """Configuration of one report flavour."""

    name: str
    keep: Callable[[Diagnostic], bool]  # which messages are rendered
    project: Callable[[Diagnostic, Styler], Projection]
    align: Tuple[str, ...]
    scope: Callable[[ReportTotals], Counts]  # counters that gate the summary
    post_layout: Optional[Callable[[str, Styler], str]] = None


@dataclass
class Report:
    """Outcome of one render call."""

    text: str
    totals: ReportTotals
    counts: Counts
    has_errors: bool  # any rendered row classified as an error

    @property
    def summary_color(self) -> str:
        return "error" if self.has_errors else "warning"


def render_file(
    result: AnalysisResult,
    messages: Sequence[Diagnostic],
    variant: ReportVariant,
    styler: Styler,
    layout_fn: LayoutFn = layout,
) -> Tuple[str, bool]:
    """Render one file block; also report whether any row was an error."""
    projections = [variant.project(m, styler) for m in messages]
    table = layout_fn(
        [row for row, _ in projections],
        variant.align,
        string_length=styler.visual_width,
    )
    if variant.post_layout is not None:
        table = variant.post_layout(table, styler)
    header = styler.emphasize(result.file_path, "underline")
    return f"{header}\n{table}\n\n", any(flag for _, flag in projections)


def build_report(
    results: Iterable[AnalysisResult],
    variant: ReportVariant,
    styler: Optional[Styler] = None,
    *,
    layout_fn: LayoutFn = layout,
) -> Report:
    """Render *results* with *variant*. Empty text when nothing qualifies."""
    if styler is None:
        styler = Styler()

    totals = ReportTotals()
    blocks: List[str] = []
    has_errors = False

    for result in results:
        messages = [m for m in result.messages if variant.keep(m)]
        if not messages:
            continue

        totals.add(result)
        block, block_has_errors = render_file(result, messages, variant, styler, layout_fn)
        blocks.append(block)
        has_errors = has_errors or block_has_errors

    counts = variant.scope(totals)
    if counts.total == 0:
        return Report(text="", totals=totals, counts=counts, has_errors=has_errors)

    color = "error" if has_errors else "warning"
    text = "\n" + "".join(blocks) + compose_summary(counts, color, styler)
    return Report(text=text, totals=totals, counts=counts, has_errors=has_errors)


def render(
    results: Iterable[AnalysisResult],
    variant: ReportVariant,
    styler: Optional[Styler] = None,
) -> str:
    """Return the finished report text for *results*."""
    return build_report(results, variant, styler).text
