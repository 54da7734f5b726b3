"""Analysis result models and JSON loading."""

from stylishdiff.results.loader import ResultsError, load_results
from stylishdiff.results.models import AnalysisResult, Counts, Diagnostic, ReportTotals

__all__ = [
    "AnalysisResult",
    "Counts",
    "Diagnostic",
    "ReportTotals",
    "ResultsError",
    "load_results",
]
