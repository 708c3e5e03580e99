"""Map analyzer JSON into the list of examples the UI renders."""

from __future__ import annotations

from typing import Any, Dict, List

from tenseflow.contract import default_examples

SHAPE_ARRAY = "array"
SHAPE_MESSAGES = "messages"
SHAPE_SINGLE = "single"
SHAPE_UNRECOGNIZED = "unrecognized"


def classify_payload(payload: Any) -> str:
    if isinstance(payload, list):
        return SHAPE_ARRAY if payload else SHAPE_UNRECOGNIZED
    if isinstance(payload, dict):
        messages = payload.get("messages")
        if isinstance(messages, list):
            return SHAPE_MESSAGES if messages else SHAPE_UNRECOGNIZED
        if (
            isinstance(payload.get("sentence"), str)
            and isinstance(payload.get("tense"), str)
            and isinstance(payload.get("tags"), list)
        ):
            return SHAPE_SINGLE
    return SHAPE_UNRECOGNIZED


def normalize(payload: Any) -> List[Dict[str, Any]]:
    """Return the examples carried by ``payload``, or the default example.

    Accepted shapes, checked in order: a non-empty list of examples, an object
    with a non-empty list ``messages`` field, or a single example object with string
    ``sentence``/``tense`` and list ``tags``. Elements are not validated.
    Anything else yields the default example. Never raises and never mutates
    ``payload``.
    """
    shape = classify_payload(payload)
    if shape == SHAPE_ARRAY:
        return list(payload)
    if shape == SHAPE_MESSAGES:
        return list(payload["messages"])
    if shape == SHAPE_SINGLE:
        return [payload]
    return default_examples()
