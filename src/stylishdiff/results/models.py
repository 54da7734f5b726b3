"""Result data models — one AnalysisResult per file, one Diagnostic per issue."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


def _counter(data: Dict[str, Any], key: str) -> int:
    """Read a counter; absent or null counts as 0, anything else must be an int."""
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class Diagnostic:
    """A single reported issue. Read-only input to the renderer."""

    line: int = 0
    column: int = 0
    severity: int = 1  # 2 = error, anything else = warning
    message: str = ""
    rule_id: str = ""
    fatal: bool = False
    is_diff: bool = False

    @property
    def is_error(self) -> bool:
        """True if this diagnostic is rendered as an error."""
        return self.fatal or self.severity == 2

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Diagnostic":
        """Build from an upstream camelCase record; absent fields default."""
        return cls(
            line=data.get("line") or 0,
            column=data.get("column") or 0,
            severity=data.get("severity") or 0,
            message=data.get("message") or "",
            rule_id=data.get("ruleId") or "",
            fatal=bool(data.get("fatal", False)),
            is_diff=bool(data.get("isDiff", False)),
        )


@dataclass
class AnalysisResult:
    """All diagnostics for one analysed file plus the engine's counters.

    The counters are trusted: the renderer sums them but never recounts
    ``messages``.
    """

    file_path: str
    messages: List[Diagnostic] = field(default_factory=list)
    error_count: int = 0
    warning_count: int = 0
    fixable_error_count: int = 0
    fixable_warning_count: int = 0
    diff_error_count: int = 0
    diff_warning_count: int = 0
    diff_fixable_error_count: int = 0
    diff_fixable_warning_count: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisResult":
        """Build from an upstream record. ``filePath`` and ``messages`` are required."""
        return cls(
            file_path=data["filePath"],
            messages=[Diagnostic.from_dict(m) for m in data["messages"]],
            error_count=_counter(data, "errorCount"),
            warning_count=_counter(data, "warningCount"),
            fixable_error_count=_counter(data, "fixableErrorCount"),
            fixable_warning_count=_counter(data, "fixableWarningCount"),
            diff_error_count=_counter(data, "diffErrorCount"),
            diff_warning_count=_counter(data, "diffWarningCount"),
            diff_fixable_error_count=_counter(data, "diffFixableErrorCount"),
            diff_fixable_warning_count=_counter(data, "diffFixableWarningCount"),
        )

    @property
    def counts(self) -> "Counts":
        return Counts(
            errors=self.error_count,
            warnings=self.warning_count,
            fixable_errors=self.fixable_error_count,
            fixable_warnings=self.fixable_warning_count,
        )

    @property
    def diff_counts(self) -> "Counts":
        return Counts(
            errors=self.diff_error_count,
            warnings=self.diff_warning_count,
            fixable_errors=self.diff_fixable_error_count,
            fixable_warnings=self.diff_fixable_warning_count,
        )


@dataclass
class Counts:
    """Error/warning totals, plain and auto-fixable."""

    errors: int = 0
    warnings: int = 0
    fixable_errors: int = 0
    fixable_warnings: int = 0

    @property
    def total(self) -> int:
        return self.errors + self.warnings

    @property
    def any_fixable(self) -> bool:
        return self.fixable_errors > 0 or self.fixable_warnings > 0

    def add(self, other: "Counts") -> None:
        self.errors += other.errors
        self.warnings += other.warnings
        self.fixable_errors += other.fixable_errors
        self.fixable_warnings += other.fixable_warnings


@dataclass
class ReportTotals:
    """Running totals for one render call."""

    ordinary: Counts = field(default_factory=Counts)
    diff: Counts = field(default_factory=Counts)
    files: int = 0

    def add(self, result: AnalysisResult) -> None:
        """Accumulate a retained result's counters into both scopes."""
        self.ordinary.add(result.counts)
        self.diff.add(result.diff_counts)
        self.files += 1
