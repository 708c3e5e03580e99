"""Runtime helpers: analyzer client, analysis session and UI payloads."""

from .analyzer import (
    SHAPE_ERROR,
    AnalysisResult,
    AnalysisSession,
    AnalyzerClient,
    AnalyzerError,
    SubmissionInFlightError,
    clean_sentence,
)
from .ui_state import build_analysis_ui_feedback, build_display_payload

__all__ = [
    "SHAPE_ERROR",
    "AnalysisResult",
    "AnalysisSession",
    "AnalyzerClient",
    "AnalyzerError",
    "SubmissionInFlightError",
    "clean_sentence",
    "build_analysis_ui_feedback",
    "build_display_payload",
]
