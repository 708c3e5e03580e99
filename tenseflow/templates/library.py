"""Deterministic sentence templates.

Every template is a pure function of one lexical selection (pronoun, noun,
time expression, base verb). It returns a fully tagged example whose
person/number always come from the selected pronoun.

Verb inflection is naive on purpose: ``verb + "s"`` and ``verb + "ing"``
with no spelling adjustments ("studys", "writeing").
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from tenseflow.constants import ASPECTS, POLARITIES, QUESTION_TYPES, TENSE_NAMES, TIME_REFERENCES, VOICES
from tenseflow.contract import build_example, build_tag
from tenseflow.lexicon import PronounEntry
from tenseflow.phonetic import PhoneticResolver, StaticPhoneticResolver

_RESOLVER = StaticPhoneticResolver()

TagList = List[Dict[str, str]]
Builder = Callable[[PronounEntry, str, str, str, str, PhoneticResolver], Tuple[str, TagList]]


def _wh_tag(wh: str) -> str:
    return "WP" if wh.lower() in {"what", "who", "which"} else "WRB"


def _tok(word: str, tag: str, resolver: PhoneticResolver) -> Dict[str, str]:
    return build_tag(word, tag, resolver.resolve(word))


@dataclass(frozen=True)
class SentenceTemplate:
    name: str
    tense: str
    polarity: str
    question_type: str
    aspect: str
    voice: str
    time_reference: str
    build: Builder
    wh_words: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        closed = (
            ("tense", self.tense, TENSE_NAMES),
            ("polarity", self.polarity, POLARITIES),
            ("question_type", self.question_type, QUESTION_TYPES),
            ("aspect", self.aspect, ASPECTS),
            ("voice", self.voice, VOICES),
            ("time_reference", self.time_reference, TIME_REFERENCES),
        )
        for name, value, allowed in closed:
            if value not in allowed:
                raise ValueError(f"{self.name}: {name} must be one of {sorted(allowed)}, got: {value!r}")
        if self.question_type == "WH" and not self.wh_words:
            raise ValueError(f"{self.name}: WH templates need at least one wh word")

    def __call__(
        self,
        pronoun: PronounEntry,
        noun: str,
        time: str,
        verb: str,
        *,
        wh: Optional[str] = None,
        extra_attributes: bool = False,
        resolver: Optional[PhoneticResolver] = None,
    ) -> Dict[str, Any]:
        if wh is None:
            wh = self.wh_words[0] if self.wh_words else ""
        sentence, tags = self.build(pronoun, noun, time, verb, wh, resolver or _RESOLVER)
        extras = None
        if extra_attributes:
            extras = {"aspect": self.aspect, "voice": self.voice, "timeReference": self.time_reference}
        return build_example(
            sentence,
            self.tense,
            tags,
            person=pronoun.person,
            number=pronoun.number,
            polarity=self.polarity,
            question_type=self.question_type,
            extras=extras,
        )


def _present_simple_positive(p, noun, time, verb, wh, r):
    if p.is_third_singular:
        form, tag = f"{verb}s", "VBZ"
    else:
        form, tag = verb, "VBP"
    sentence = f"{p.word} {form} the {noun} every {time}."
    return sentence, [
        _tok(p.word, "PRP", r),
        _tok(form, tag, r),
        _tok("the", "DT", r),
        _tok(noun, "NN", r),
        _tok("every", "DT", r),
        _tok(time, "NN", r),
    ]


def _present_simple_negative(p, noun, time, verb, wh, r):
    aux = "does" if p.is_third_singular else "do"
    sentence = f"{p.word} {aux} not {verb} the {noun}."
    return sentence, [
        _tok(p.word, "PRP", r),
        _tok(aux, "AUX", r),
        _tok("not", "PART", r),
        _tok(verb, "VB", r),
        _tok("the", "DT", r),
        _tok(noun, "NN", r),
    ]


def _present_continuous_wh(p, noun, time, verb, wh, r):
    aux = "is" if p.is_third_singular else "are"
    verb_ing = f"{verb}ing"
    sentence = f"{wh} {aux} {p.inline} {verb_ing}?"
    return sentence, [
        _tok(wh, _wh_tag(wh), r),
        _tok(aux, "AUX", r),
        _tok(p.inline, "PRP", r),
        _tok(verb_ing, "VBG", r),
    ]


def _past_simple_interrogative(p, noun, time, verb, wh, r):
    sentence = f"Did {p.inline} {verb} the {noun} yesterday?"
    return sentence, [
        _tok("Did", "AUX", r),
        _tok(p.inline, "PRP", r),
        _tok(verb, "VB", r),
        _tok("the", "DT", r),
        _tok(noun, "NN", r),
        _tok("yesterday", "NN", r),
    ]


def _present_perfect_continuous_positive(p, noun, time, verb, wh, r):
    if p.is_third_singular:
        aux, aux_tag = "has", "VBZ"
    else:
        aux, aux_tag = "have", "VBP"
    verb_ing = f"{verb}ing"
    sentence = f"{p.word} {aux} been {verb_ing} since {time}."
    return sentence, [
        _tok(p.word, "PRP", r),
        _tok(aux, aux_tag, r),
        _tok("been", "VBN", r),
        _tok(verb_ing, "VBG", r),
        _tok("since", "IN", r),
        _tok(time, "NN", r),
    ]


def _future_simple_negative(p, noun, time, verb, wh, r):
    sentence = f"{p.word} will not {verb} the {noun} tomorrow."
    return sentence, [
        _tok(p.word, "PRP", r),
        _tok("will", "MD", r),
        _tok("not", "PART", r),
        _tok(verb, "VB", r),
        _tok("the", "DT", r),
        _tok(noun, "NN", r),
        _tok("tomorrow", "NN", r),
    ]


def _past_continuous_positive(p, noun, time, verb, wh, r):
    aux = "were" if p.word.lower() in {"they", "we"} else "was"
    verb_ing = f"{verb}ing"
    sentence = f"{p.word} {aux} {verb_ing} when I called."
    return sentence, [
        _tok(p.word, "PRP", r),
        _tok(aux, "VBD", r),
        _tok(verb_ing, "VBG", r),
        _tok("when", "IN", r),
        _tok("I", "PRP", r),
        _tok("called", "VBD", r),
    ]


def _future_simple_wh(p, noun, time, verb, wh, r):
    sentence = f"{wh} will {p.inline} {verb}?"
    return sentence, [
        _tok(wh, _wh_tag(wh), r),
        _tok("will", "MD", r),
        _tok(p.inline, "PRP", r),
        _tok(verb, "VB", r),
    ]


def _past_simple_negative(p, noun, time, verb, wh, r):
    sentence = f"{p.word} did not {verb} the {noun} yesterday."
    return sentence, [
        _tok(p.word, "PRP", r),
        _tok("did", "AUX", r),
        _tok("not", "PART", r),
        _tok(verb, "VB", r),
        _tok("the", "DT", r),
        _tok(noun, "NN", r),
        _tok("yesterday", "NN", r),
    ]


def _future_continuous_interrogative(p, noun, time, verb, wh, r):
    verb_ing = f"{verb}ing"
    sentence = f"Will {p.inline} be {verb_ing} tomorrow?"
    return sentence, [
        _tok("Will", "MD", r),
        _tok(p.inline, "PRP", r),
        _tok("be", "VB", r),
        _tok(verb_ing, "VBG", r),
        _tok("tomorrow", "NN", r),
    ]


present_simple_positive = SentenceTemplate(
    name="present_simple_positive",
    tense="Present Simple",
    polarity="positive",
    question_type="none",
    aspect="simple",
    voice="active",
    time_reference="ongoing",
    build=_present_simple_positive,
)

present_simple_negative = SentenceTemplate(
    name="present_simple_negative",
    tense="Present Simple",
    polarity="negative",
    question_type="none",
    aspect="simple",
    voice="active",
    time_reference="ongoing",
    build=_present_simple_negative,
)

present_continuous_wh = SentenceTemplate(
    name="present_continuous_wh",
    tense="Present Continuous",
    polarity="positive",
    question_type="WH",
    aspect="continuous",
    voice="active",
    time_reference="ongoing",
    build=_present_continuous_wh,
    wh_words=("What", "Why", "How"),
)

past_simple_interrogative = SentenceTemplate(
    name="past_simple_interrogative",
    tense="Past Simple",
    polarity="positive",
    question_type="interrogative",
    aspect="simple",
    voice="active",
    time_reference="past-relative",
    build=_past_simple_interrogative,
)

present_perfect_continuous_positive = SentenceTemplate(
    name="present_perfect_continuous_positive",
    tense="Present Perfect Continuous",
    polarity="positive",
    question_type="none",
    aspect="perfect continuous",
    voice="active",
    time_reference="ongoing",
    build=_present_perfect_continuous_positive,
)

future_simple_negative = SentenceTemplate(
    name="future_simple_negative",
    tense="Future Simple",
    polarity="negative",
    question_type="none",
    aspect="simple",
    voice="active",
    time_reference="future-relative",
    build=_future_simple_negative,
)

past_continuous_positive = SentenceTemplate(
    name="past_continuous_positive",
    tense="Past Continuous",
    polarity="positive",
    question_type="none",
    aspect="continuous",
    voice="active",
    time_reference="past-relative",
    build=_past_continuous_positive,
)

future_simple_wh = SentenceTemplate(
    name="future_simple_wh",
    tense="Future Simple",
    polarity="positive",
    question_type="WH",
    aspect="simple",
    voice="active",
    time_reference="future-relative",
    build=_future_simple_wh,
    wh_words=("When", "Where"),
)

past_simple_negative = SentenceTemplate(
    name="past_simple_negative",
    tense="Past Simple",
    polarity="negative",
    question_type="none",
    aspect="simple",
    voice="active",
    time_reference="past-relative",
    build=_past_simple_negative,
)

future_continuous_interrogative = SentenceTemplate(
    name="future_continuous_interrogative",
    tense="Future Continuous",
    polarity="positive",
    question_type="interrogative",
    aspect="continuous",
    voice="active",
    time_reference="future-relative",
    build=_future_continuous_interrogative,
)
