"""Projection of diagnostics into display cells."""

from __future__ import annotations

import re
from typing import List, Tuple

from stylishdiff.output.styles import Styler
from stylishdiff.results.models import Diagnostic

RenderedRow = List[str]
Projection = Tuple[RenderedRow, bool]

# One trailing period, only when the character before it is not a space.
_TRAILING_PERIOD = re.compile(r"([^ ])\.\Z")


def pluralize(word: str, count: int) -> str:
    """Append an ``s`` to *word* unless *count* is exactly one."""
    return word if count == 1 else f"{word}s"


def strip_trailing_period(message: str) -> str:
    """``"Missing semicolon."`` -> ``"Missing semicolon"``; ``"..."`` -> ``".."``."""
    return _TRAILING_PERIOD.sub(r"\1", message, count=1)


def severity_cell(diagnostic: Diagnostic, styler: Styler) -> Tuple[str, bool]:
    """Return the styled severity label and whether it counts as an error."""
    if diagnostic.is_error:
        return styler.emphasize("error", "error"), True
    return styler.emphasize("warning", "warning"), False


def location_cell(diagnostic: Diagnostic, styler: Styler) -> str:
    """Inline ``line:column``; diff lines get the changed emphasis on the line."""
    line, column = diagnostic.line or 0, diagnostic.column or 0
    if diagnostic.is_diff:
        return styler.emphasize(str(line), "changed") + styler.emphasize(f":{column}", "muted")
    return styler.emphasize(f"{line}:{column}", "muted")


def full_row(diagnostic: Diagnostic, styler: Styler) -> Projection:
    severity, is_error = severity_cell(diagnostic, styler)
    return [
        "",
        location_cell(diagnostic, styler),
        severity,
        strip_trailing_period(diagnostic.message),
        styler.emphasize(diagnostic.rule_id or "", "muted"),
    ], is_error


def diff_only_row(diagnostic: Diagnostic, styler: Styler) -> Projection:
    """Line and column stay as separate plain cells so they can be
    right-aligned; :func:`restyle_locations` joins them after layout."""
    if not diagnostic.is_diff:
        return [], False
    severity, is_error = severity_cell(diagnostic, styler)
    return [
        "",
        str(diagnostic.line or 0),
        str(diagnostic.column or 0),
        severity,
        strip_trailing_period(diagnostic.message),
        styler.emphasize(diagnostic.rule_id or "", "muted"),
    ], is_error


_LINE_COLUMN = re.compile(r"(\d+)\s+(\d+)")


def restyle_locations(block: str, styler: Styler) -> str:
    """Rewrite the first ``<digits><spaces><digits>`` of every laid-out line
    into a muted ``line:column`` token."""
    return "\n".join(
        _LINE_COLUMN.sub(
            lambda m: styler.emphasize(f"{m.group(1)}:{m.group(2)}", "muted"),
            line,
            count=1,
        )
        for line in block.split("\n")
    )
