"""UI-facing payloads: analysis feedback messages and the reference sidebar."""

from __future__ import annotations

from typing import Any

from tenseflow.reference import ReferenceTables, tags_in_example

from .analyzer import AnalysisResult


def build_analysis_ui_feedback(result: AnalysisResult) -> dict[str, str] | None:
    """Visible message for a finished analysis, or ``None`` when nothing to say."""
    if result.error is not None:
        return {
            "severity": "error",
            "title": "Analysis failed",
            "message": f"{result.error}. Showing the default example instead.",
        }
    if result.fallback:
        return {
            "severity": "warning",
            "title": "Unrecognized analysis result",
            "message": "The analyzer returned data in an unexpected format. Showing the default example instead.",
        }
    return None


def build_display_payload(examples: list[Any], tables: ReferenceTables) -> dict[str, Any]:
    """Examples plus the tag and tense reference rows they point at."""
    rows: list[dict[str, Any]] = []
    for example in examples:
        tense = example.get("tense") if isinstance(example, dict) else None
        rows.append(
            {
                "example": example,
                "tags": tags_in_example(example, tables),
                "tense_reference": tables.tense_payload(tense) if isinstance(tense, str) else {},
            }
        )
    return {"reference_version": tables.version, "items": rows}
