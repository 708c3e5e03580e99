"""Pronoun, verb, noun and time-expression pools."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from tenseflow.constants import NUMBERS, PERSONS


@dataclass(frozen=True)
class PronounEntry:
    word: str
    person: str
    number: str

    def __post_init__(self) -> None:
        if self.person not in PERSONS:
            raise ValueError(f"person must be one of {sorted(PERSONS)}, got: {self.person!r}")
        if self.number not in NUMBERS:
            raise ValueError(f"number must be one of {sorted(NUMBERS)}, got: {self.number!r}")

    @property
    def is_third_singular(self) -> bool:
        return self.person == "third" and self.number == "singular"

    @property
    def inline(self) -> str:
        # "I" keeps its capital when it is not sentence-initial.
        return self.word if self.word == "I" else self.word.lower()


PRONOUNS: Tuple[PronounEntry, ...] = (
    PronounEntry("I", "first", "singular"),
    PronounEntry("You", "second", "singular"),
    PronounEntry("He", "third", "singular"),
    PronounEntry("She", "third", "singular"),
    PronounEntry("They", "third", "plural"),
    PronounEntry("We", "first", "plural"),
)

VERBS_BASE: Tuple[str, ...] = ("read", "write", "draw", "play", "study", "cook", "watch")
NOUNS: Tuple[str, ...] = ("book", "movie", "song", "game", "recipe", "story", "article")
TIMES: Tuple[str, ...] = (
    "morning",
    "afternoon",
    "evening",
    "night",
    "weekend",
    "today",
    "yesterday",
    "tomorrow",
)


@dataclass(frozen=True)
class LexicalPools:
    pronouns: Tuple[PronounEntry, ...] = PRONOUNS
    verbs: Tuple[str, ...] = VERBS_BASE
    nouns: Tuple[str, ...] = NOUNS
    times: Tuple[str, ...] = TIMES

    def __post_init__(self) -> None:
        for name in ("pronouns", "verbs", "nouns", "times"):
            if not getattr(self, name):
                raise ValueError(f"lexical pool '{name}' must not be empty")


def default_pools() -> LexicalPools:
    return LexicalPools()
