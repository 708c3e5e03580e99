"""Example/Tag record helpers and the fixed default example."""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Sequence

from tenseflow.constants import EXTRA_ATTRIBUTE_FIELDS


def build_tag(word: str, tag: str, phonetic: str) -> Dict[str, str]:
    return {"word": word, "tag": tag, "phonetic": phonetic}


def build_example(
    sentence: str,
    tense: str,
    tags: Sequence[Dict[str, str]],
    *,
    person: Optional[str] = None,
    number: Optional[str] = None,
    polarity: Optional[str] = None,
    question_type: Optional[str] = None,
    extras: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Assemble one example record in the wire shape the UI renders.

    Optional grammatical features are only present when given, so an example
    built without them looks exactly like a bare analyzer response. ``extras``
    may carry ``aspect``, ``voice`` and ``timeReference``; other keys are dropped.
    """
    example: Dict[str, Any] = {
        "sentence": sentence,
        "tense": tense,
        "tags": [dict(t) for t in tags],
    }
    if person is not None:
        example["person"] = person
    if number is not None:
        example["number"] = number
    if polarity is not None:
        example["polarity"] = polarity
    if question_type is not None:
        example["questionType"] = question_type
    for key in EXTRA_ATTRIBUTE_FIELDS:
        value = (extras or {}).get(key)
        if value is not None:
            example[key] = value
    return example


DEFAULT_EXAMPLE: Dict[str, Any] = build_example(
    "She has been reading a book since morning.",
    "Present Perfect Continuous",
    [
        build_tag("She", "PRP", "ʃiː"),
        build_tag("has", "VBZ", "hæz"),
        build_tag("been", "VBN", "bɪn"),
        build_tag("reading", "VBG", "ˈriːdɪŋ"),
        build_tag("a", "DT", "ə"),
        build_tag("book", "NN", "bʊk"),
        build_tag("since", "IN", "sɪns"),
        build_tag("morning", "NN", "ˈmɔːrnɪŋ"),
    ],
    person="third",
    number="singular",
    polarity="positive",
    question_type="none",
)


def default_examples() -> List[Dict[str, Any]]:
    return [copy.deepcopy(DEFAULT_EXAMPLE)]
