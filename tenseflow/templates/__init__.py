"""Sentence template library and versioned template sets."""

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
from .registry import TEMPLATE_SETS, get_template_set

__all__ = [
    "SentenceTemplate",
    "present_simple_positive",
    "present_simple_negative",
    "present_continuous_wh",
    "past_simple_interrogative",
    "present_perfect_continuous_positive",
    "future_simple_negative",
    "past_continuous_positive",
    "future_simple_wh",
    "past_simple_negative",
    "future_continuous_interrogative",
    "TEMPLATE_SETS",
    "get_template_set",
]
