"""Shared test fixtures — sample results batches and stylers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

import pytest

from stylishdiff.output.styles import PLAIN, Styler
from stylishdiff.results.models import AnalysisResult, Diagnostic


@pytest.fixture
def plain() -> Styler:
    """A styler that emits no control sequences."""
    return PLAIN


@pytest.fixture
def colored() -> Styler:
    return Styler(color=True)


@pytest.fixture
def single_error() -> List[AnalysisResult]:
    """One file, one error-level diagnostic inside the diff."""
    return [
        AnalysisResult(
            file_path="src/app.js",
            messages=[
                Diagnostic(
                    line=1,
                    column=1,
                    severity=2,
                    message="Missing semicolon.",
                    rule_id="semi",
                    is_diff=True,
                ),
            ],
            error_count=1,
            diff_error_count=1,
        ),
    ]


@pytest.fixture
def mixed_diff() -> List[AnalysisResult]:
    """One file with three messages, only one of them in the diff."""
    return [
        AnalysisResult(
            file_path="lib/index.js",
            messages=[
                Diagnostic(line=3, column=7, severity=2, message="'x' is not defined.", rule_id="no-undef"),
                Diagnostic(line=8, column=1, severity=1, message="Unexpected console statement.", rule_id="no-console", is_diff=True),
                Diagnostic(line=20, column=14, severity=2, message="Strings must use singlequote.", rule_id="quotes"),
            ],
            error_count=2,
            warning_count=1,
            fixable_error_count=1,
            diff_warning_count=1,
        ),
    ]


@pytest.fixture
def results_json(tmp_path: Path) -> Path:
    """A results document in the upstream camelCase shape."""
    data = [
        {
            "filePath": "src/app.js",
            "messages": [
                {
                    "ruleId": "semi",
                    "severity": 2,
                    "message": "Missing semicolon.",
                    "line": 1,
                    "column": 10,
                    "isDiff": True,
                },
                {
                    "ruleId": "no-unused-vars",
                    "severity": 1,
                    "message": "'y' is assigned a value but never used.",
                    "line": 4,
                    "column": 5,
                },
            ],
            "errorCount": 1,
            "warningCount": 1,
            "fixableErrorCount": 1,
            "fixableWarningCount": 0,
            "diffErrorCount": 1,
            "diffWarningCount": 0,
            "diffFixableErrorCount": 1,
            "diffFixableWarningCount": 0,
        },
        {
            "filePath": "src/clean.js",
            "messages": [],
            "errorCount": 0,
            "warningCount": 0,
        },
    ]
    path = tmp_path / "results.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
