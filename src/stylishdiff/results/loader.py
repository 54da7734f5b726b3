"""Load a batch of analysis results from a JSON document."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from stylishdiff.results.models import AnalysisResult


class ResultsError(Exception):
    """Raised when the results document is unreadable or has the wrong shape."""


def _read_text(source: Optional[str]) -> str:
    if source is None or source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise ResultsError(f"Results file not found: {source}")
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ResultsError(f"Failed to read {source}: {exc}") from exc


def parse_results(text: str) -> List[AnalysisResult]:
    """Decode a JSON array of result records into AnalysisResult objects."""
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResultsError(f"Results are not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise ResultsError("Results must be a JSON array of per-file records")

    results: List[AnalysisResult] = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise ResultsError(f"Record {index} is not an object")
        try:
            results.append(AnalysisResult.from_dict(record))
        except KeyError as exc:
            raise ResultsError(f"Record {index} is missing {exc}") from exc
        except (TypeError, AttributeError) as exc:
            raise ResultsError(f"Record {index} is malformed: {exc}") from exc
    return results


def load_results(source: Optional[str] = None) -> List[AnalysisResult]:
    """Read results from *source* (a path, or ``-``/None for stdin)."""
    return parse_results(_read_text(source))
