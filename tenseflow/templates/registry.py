"""Versioned template sets."""

from __future__ import annotations

from typing import Dict, Tuple

from tenseflow.constants import TEMPLATE_SET_V1, TEMPLATE_SET_V2

from .library import (
    SentenceTemplate,
    future_continuous_interrogative,
    future_simple_negative,
    future_simple_wh,
    past_continuous_positive,
    past_simple_interrogative,
    past_simple_negative,
    present_continuous_wh,
    present_perfect_continuous_positive,
    present_simple_negative,
    present_simple_positive,
)

_V1: Tuple[SentenceTemplate, ...] = (
    present_simple_positive,
    present_simple_negative,
    present_continuous_wh,
    past_simple_interrogative,
    present_perfect_continuous_positive,
    future_simple_negative,
    past_continuous_positive,
    future_simple_wh,
)

TEMPLATE_SETS: Dict[str, Tuple[SentenceTemplate, ...]] = {
    TEMPLATE_SET_V1: _V1,
    TEMPLATE_SET_V2: _V1 + (past_simple_negative, future_continuous_interrogative),
}


def get_template_set(version: str) -> Tuple[SentenceTemplate, ...]:
    v = (version or "").strip().lower()
    if v not in TEMPLATE_SETS:
        raise ValueError(f"template_set must be one of: {' | '.join(sorted(TEMPLATE_SETS))}, got: {version!r}")
    return TEMPLATE_SETS[v]
