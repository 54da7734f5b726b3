"""Tests for result models and JSON loading."""

import json
from pathlib import Path

import pytest

from stylishdiff.results.loader import ResultsError, load_results, parse_results
from stylishdiff.results.models import AnalysisResult, Counts, Diagnostic, ReportTotals


class TestDiagnostic:
    def test_absent_fields_default(self):
        d = Diagnostic.from_dict({"message": "Parsing error", "fatal": True})
        assert d.line == 0
        assert d.column == 0
        assert d.rule_id == ""
        assert d.is_diff is False
        assert d.is_error is True

    def test_null_location(self):
        d = Diagnostic.from_dict({"line": None, "column": None, "ruleId": None, "severity": 1})
        assert (d.line, d.column, d.rule_id) == (0, 0, "")
        assert d.is_error is False

    def test_is_frozen(self):
        d = Diagnostic()
        with pytest.raises(Exception):
            d.line = 3  # type: ignore[misc]


class TestAnalysisResult:
    def test_from_dict(self):
        r = AnalysisResult.from_dict({
            "filePath": "a.js",
            "messages": [{"line": 1, "column": 2, "severity": 2, "isDiff": True}],
            "errorCount": 1,
            "diffErrorCount": 1,
            "diffFixableErrorCount": 1,
        })
        assert r.file_path == "a.js"
        assert r.messages[0].is_diff is True
        assert r.counts == Counts(errors=1)
        assert r.diff_counts == Counts(errors=1, fixable_errors=1)

    def test_null_counters_count_as_zero(self):
        r = AnalysisResult.from_dict({"filePath": "a.js", "messages": [], "errorCount": None})
        assert r.error_count == 0

    @pytest.mark.parametrize("value", ["3", 1.5, True, [1]])
    def test_non_integer_counter_rejected(self, value):
        with pytest.raises(TypeError, match="warningCount"):
            AnalysisResult.from_dict({"filePath": "a.js", "messages": [], "warningCount": value})

    def test_missing_messages_propagates(self):
        with pytest.raises(KeyError):
            AnalysisResult.from_dict({"filePath": "a.js"})


class TestReportTotals:
    def test_accumulates_both_scopes(self):
        totals = ReportTotals()
        totals.add(AnalysisResult("a.js", error_count=2, diff_error_count=1))
        totals.add(AnalysisResult("b.js", warning_count=1, fixable_warning_count=1))
        assert totals.ordinary == Counts(errors=2, warnings=1, fixable_warnings=1)
        assert totals.diff == Counts(errors=1)
        assert totals.files == 2
        assert totals.ordinary.total == 3
        assert totals.ordinary.any_fixable is True
        assert totals.diff.any_fixable is False


class TestLoader:
    def test_load_file(self, results_json: Path):
        results = load_results(str(results_json))
        assert [r.file_path for r in results] == ["src/app.js", "src/clean.js"]
        assert results[0].messages[0].rule_id == "semi"
        assert results[1].messages == []

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ResultsError, match="not found"):
            load_results(str(tmp_path / "nope.json"))

    def test_invalid_json(self):
        with pytest.raises(ResultsError, match="not valid JSON"):
            parse_results("{nope")

    def test_not_a_list(self):
        with pytest.raises(ResultsError, match="JSON array"):
            parse_results(json.dumps({"filePath": "a.js"}))

    def test_record_not_object(self):
        with pytest.raises(ResultsError, match="Record 0"):
            parse_results("[1]")

    def test_record_missing_messages(self):
        with pytest.raises(ResultsError, match="messages"):
            parse_results(json.dumps([{"filePath": "a.js"}]))

    def test_record_with_bad_counter(self):
        with pytest.raises(ResultsError, match="Record 0 is malformed"):
            parse_results(json.dumps([{"filePath": "a.js", "messages": [], "errorCount": "two"}]))

    def test_stdin(self, monkeypatch, results_json: Path):
        import io

        monkeypatch.setattr("sys.stdin", io.StringIO(results_json.read_text()))
        assert len(load_results("-")) == 2
