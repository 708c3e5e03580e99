"""HTTP client for the remote sentence analyzer and the single-flight session."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from tenseflow.config import TenseFlowConfig
from tenseflow.contract import default_examples
from tenseflow.normalize import SHAPE_UNRECOGNIZED, classify_payload, normalize

logger = logging.getLogger(__name__)

SHAPE_ERROR = "error"


class AnalyzerError(RuntimeError):
    """Transport failure, non-2xx status or non-JSON body from the analyzer."""


class SubmissionInFlightError(RuntimeError):
    """Raised when a sentence is submitted while another request is outstanding."""


def clean_sentence(sentence: Any) -> str:
    text = sentence.strip() if isinstance(sentence, str) else ""
    if not text:
        raise ValueError("sentence must be a non-empty string")
    return text


@dataclass
class AnalyzerClient:
    endpoint: str
    timeout: float = 30.0
    session: Optional[requests.Session] = None

    @classmethod
    def from_config(cls, config: TenseFlowConfig) -> "AnalyzerClient":
        return cls(endpoint=config.analyzer_url, timeout=config.analyzer_timeout)

    def analyze(self, sentence: str) -> Any:
        """POST ``{"sentence": ...}`` and return the decoded JSON body as-is."""
        text = clean_sentence(sentence)
        http = self.session or requests
        try:
            resp = http.post(
                self.endpoint,
                json={"sentence": text},
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else "?"
            raise AnalyzerError(f"HTTP {status}") from exc
        except requests.RequestException as exc:
            raise AnalyzerError(f"Analyzer unavailable: {self.endpoint}") from exc
        try:
            return resp.json()
        except ValueError as exc:
            raise AnalyzerError(f"Invalid JSON from analyzer: {self.endpoint}") from exc


@dataclass(frozen=True)
class AnalysisResult:
    examples: List[Dict[str, Any]]
    shape: str
    error: Optional[str] = None

    @property
    def fallback(self) -> bool:
        return self.error is not None or self.shape == SHAPE_UNRECOGNIZED

    def as_payload(self) -> Dict[str, Any]:
        return {
            "examples": self.examples,
            "shape": self.shape,
            "error": self.error,
            "fallback": self.fallback,
        }


@dataclass
class AnalysisSession:
    """Runs at most one analyzer request at a time.

    ``fetching`` is true while a request is outstanding; a second ``submit``
    in that window raises ``SubmissionInFlightError`` instead of racing.
    Every completed submission yields a renderable ``AnalysisResult``.
    """

    client: AnalyzerClient
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)
    _fetching: bool = field(default=False, init=False, repr=False)

    @property
    def fetching(self) -> bool:
        return self._fetching

    def submit(self, sentence: str) -> AnalysisResult:
        text = clean_sentence(sentence)
        with self._lock:
            if self._fetching:
                raise SubmissionInFlightError("An analysis request is already in flight.")
            self._fetching = True
        try:
            logger.info("submitting sentence to analyzer (%d chars)", len(text))
            try:
                payload = self.client.analyze(text)
            except AnalyzerError as exc:
                logger.warning("analyzer request failed, using default example: %s", exc)
                return AnalysisResult(examples=default_examples(), shape=SHAPE_ERROR, error=str(exc))
            shape = classify_payload(payload)
            if shape == SHAPE_UNRECOGNIZED:
                logger.warning("unrecognized analyzer response shape, using default example")
            return AnalysisResult(examples=normalize(payload), shape=shape)
        finally:
            with self._lock:
                self._fetching = False
