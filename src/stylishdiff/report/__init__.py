"""Diagnostic aggregation and column-aligned report rendering."""

from stylishdiff.report.engine import Report, ReportVariant, build_report, render
from stylishdiff.report.rows import pluralize, strip_trailing_period
from stylishdiff.report.variants import DIFF_ONLY, FULL, diff_full, diff_only, get_variant

__all__ = [
    "DIFF_ONLY",
    "FULL",
    "Report",
    "ReportVariant",
    "build_report",
    "diff_full",
    "diff_only",
    "get_variant",
    "pluralize",
    "render",
    "strip_trailing_period",
]
