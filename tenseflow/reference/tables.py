"""POS-tag explanations and tense formula/usage/example tables.

Two generations of the tables exist. ``basic`` carries one-line tag notes and a
single formula/usage/example per tense. ``extended`` carries longer tag notes
with a further-reading link, and each tense additionally describes its
negative, interrogative and WH-question forms.

Both versions cover every tag the template library emits and every tense name
in ``tenseflow.constants.TENSE_NAMES``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from tenseflow.constants import REFERENCE_BASIC, REFERENCE_EXTENDED, TENSE_NAMES

_WIKI_POS = "https://en.wikipedia.org/wiki/Part_of_speech"
_NLTK_POS = "https://www.tutorialspoint.com/natural_language_toolkit/natural_language_toolkit_basics_of_part_of_speech_tagging.htm"
_DETERMINERS = "https://learnenglishweekly.com/advanced-english/pronouns-and-determiners-guide"

_BASIC_TAGS: Dict[str, str] = {
    "PRP": "Pronoun: replaces a noun (e.g., she, he, they).",
    "VB": "Verb, base form (e.g., go, read, eat).",
    "VBZ": "Verb, 3rd person singular present (e.g., has, does).",
    "VBP": "Verb, non-3rd person singular present (e.g., have, do).",
    "VBN": "Verb, past participle (e.g., been, eaten).",
    "VBG": "Present participle or gerund verb (e.g., reading, going).",
    "VBD": "Verb, past tense (e.g., did, went).",
    "MD": "Modal auxiliary (e.g., will, would).",
    "AUX": "Auxiliary verb.",
    "PART": "Particle: negation marker (e.g., not).",
    "DT": "Determiner: introduces a noun (e.g., a, the, some).",
    "NN": "Noun: person, place, thing (e.g., book, idea, apple).",
    "IN": "Preposition: shows relationship (e.g., since, on, at).",
    "WP": "WH-pronoun (e.g., what, who).",
    "WRB": "WH-adverb (e.g., when, where, why, how).",
}

# (explanation, further-reading link or "")
_EXTENDED_TAGS: Dict[str, tuple] = {
    "PRP": ("Personal Pronoun: replaces a noun (e.g., I, you, he, she, it, we, they).", _WIKI_POS),
    "PRP$": ("Possessive Pronoun: shows ownership (e.g., my, your, his, her, its, our, their).", _DETERMINERS),
    "WP": ("WH-pronoun: introduces questions (e.g., who, what, which).", _WIKI_POS),
    "WP$": ("Possessive WH-pronoun (e.g., whose).", _DETERMINERS),
    "EX": ("Existential there: indicates existence (e.g., there is, there are).", _NLTK_POS),
    "VB": ("Verb, base form (e.g., go, read, eat).", _NLTK_POS),
    "VBP": ("Verb, non-3rd person singular present (e.g., run, have, do).", _NLTK_POS),
    "VBZ": ("Verb, 3rd person singular present (e.g., runs, has, does).", _NLTK_POS),
    "VBD": ("Verb, past tense (e.g., went, ate, played).", _WIKI_POS),
    "VBN": ("Verb, past participle (e.g., eaten, gone, played).", _WIKI_POS),
    "VBG": ("Verb, gerund or present participle (e.g., running, reading).", _WIKI_POS),
    "MD": (
        "Modal verb: indicates possibility, necessity, or future (e.g., can, could, will, would, should, must).",
        _NLTK_POS,
    ),
    "AUX": ("Auxiliary verb: helps main verb form tenses/voices (e.g., am, is, are, have, be, do).", _WIKI_POS),
    "PART": ("Particle: a function word such as the negator 'not' or infinitival 'to'.", _WIKI_POS),
    "NN": ("Noun, singular or mass (e.g., book, apple, water).", "https://en.wikipedia.org/wiki/Noun"),
    "NNS": ("Noun, plural (e.g., books, apples, cars).", "https://en.wikipedia.org/wiki/Plural"),
    "NNP": ("Proper noun, singular (e.g., John, London, Microsoft).", "https://en.wikipedia.org/wiki/Proper_noun"),
    "NNPS": ("Proper noun, plural (e.g., Americans, Beatles).", "https://en.wikipedia.org/wiki/Proper_noun"),
    "DT": ("Determiner: introduces a noun (e.g., a, an, the, some, this, those).", _DETERMINERS),
    "PDT": ("Predeterminer: comes before a determiner (e.g., all, both, half).", _DETERMINERS),
    "WDT": ("WH-determiner (e.g., which, what).", _DETERMINERS),
    "JJ": ("Adjective: describes a noun (e.g., big, red, happy).", _WIKI_POS),
    "JJR": ("Adjective, comparative (e.g., bigger, faster, happier).", _WIKI_POS),
    "JJS": ("Adjective, superlative (e.g., biggest, fastest, happiest).", _WIKI_POS),
    "RB": ("Adverb: modifies a verb, adjective, or another adverb (e.g., quickly, very, well).", _WIKI_POS),
    "RBR": ("Adverb, comparative (e.g., faster, earlier, better).", _WIKI_POS),
    "RBS": ("Adverb, superlative (e.g., fastest, earliest, best).", _WIKI_POS),
    "WRB": ("WH-adverb (e.g., where, when, why, how).", _WIKI_POS),
    "IN": ("Preposition or subordinating conjunction (e.g., in, on, at, because, since, although).", _WIKI_POS),
    "CC": ("Coordinating conjunction (e.g., and, but, or, yet, so).", _WIKI_POS),
    "TO": ("Infinitive marker (e.g., to go, to read).", _NLTK_POS),
    "UH": ("Interjection: expresses emotion (e.g., oh, wow, hey).", _WIKI_POS),
    "CD": ("Cardinal number (e.g., one, two, 100).", _NLTK_POS),
    "LS": ("List item marker (e.g., 1., A., i.).", _NLTK_POS),
    "FW": ("Foreign word (e.g., bonjour, gracias).", _NLTK_POS),
    "SYM": ("Symbol (e.g., $, %, +, =).", _NLTK_POS),
}

_BASIC_TENSES: Dict[str, Dict[str, str]] = {
    "Present Simple": {
        "formula": "Subject + base verb (s/es for 3rd person)",
        "usage": "Routine or general truth.",
        "example": "She reads every morning.",
    },
    "Present Continuous": {
        "formula": "Subject + am/is/are + verb-ing",
        "usage": "Action happening now.",
        "example": "She is reading a book.",
    },
    "Present Perfect": {
        "formula": "Subject + has/have + past participle",
        "usage": "Action completed at unspecified time.",
        "example": "She has read the book.",
    },
    "Present Perfect Continuous": {
        "formula": "Subject + has/have + been + verb-ing",
        "usage": "Action started in past and continues.",
        "example": "She has been reading since morning.",
    },
    "Past Simple": {
        "formula": "Subject + past verb",
        "usage": "Completed action in past.",
        "example": "She read the book yesterday.",
    },
    "Past Continuous": {
        "formula": "Subject + was/were + verb-ing",
        "usage": "Action in progress in past.",
        "example": "She was reading when I called.",
    },
    "Past Perfect": {
        "formula": "Subject + had + past participle",
        "usage": "Action completed before another past action.",
        "example": "She had read it before class.",
    },
    "Future Simple": {
        "formula": "Subject + will + base verb",
        "usage": "Prediction or plan.",
        "example": "She will read tomorrow.",
    },
    "Future Continuous": {
        "formula": "Subject + will be + verb-ing",
        "usage": "Action that will be in progress.",
        "example": "She will be reading at noon.",
    },
    "Future Perfect": {
        "formula": "Subject + will have + past participle",
        "usage": "Action completed before a future time.",
        "example": "She will have read it by tomorrow.",
    },
}


def _entry(formula: str, usage: str, *examples: str) -> Dict[str, str]:
    return {"formula": formula, "usage": usage, "example": "\n".join(examples)}


_EXTENDED_TENSES: Dict[str, Dict[str, Any]] = {
    "Present Simple": {
        **_entry(
            "Subject + base verb (s/es for 3rd person)",
            "Routine or general truth.",
            "I walk to school every day.",
            "He plays football on Sundays.",
            "She reads every morning.",
            "They study English after class.",
            "The sun rises in the east.",
        ),
        "negative": _entry(
            "Subject + do/does not + base verb",
            "To say something is not true or not happening regularly.",
            "I do not like coffee.",
            "He does not play tennis.",
            "They do not watch TV.",
        ),
        "interrogative": _entry(
            "Do/Does + subject + base verb?",
            "To ask about habits or general truth.",
            "Do you play football?",
            "Does she like pizza?",
            "Do they study English?",
        ),
        "wh_question": _entry(
            "Wh- + do/does + subject + base verb?",
            "To ask detailed questions.",
            "Where do you live?",
            "What does she read?",
            "When do they arrive?",
        ),
    },
    "Present Continuous": {
        **_entry(
            "Subject + am/is/are + verb-ing",
            "Action happening now.",
            "I am eating lunch right now.",
            "He is watching TV.",
            "She is reading a book.",
            "They are playing football.",
            "We are studying English.",
        ),
        "negative": _entry(
            "Subject + am/is/are not + verb-ing",
            "To say an action is not happening right now.",
            "I am not sleeping.",
            "He is not watching TV.",
            "We are not running.",
        ),
        "interrogative": _entry(
            "Am/Is/Are + subject + verb-ing?",
            "To ask if something is happening right now.",
            "Am I disturbing you?",
            "Is she working?",
            "Are they coming now?",
        ),
        "wh_question": _entry(
            "Wh- + am/is/are + subject + verb-ing?",
            "To ask about details of actions happening now.",
            "What are you doing?",
            "Where is she going?",
            "Why are they shouting?",
        ),
    },
    "Present Perfect": {
        **_entry(
            "Subject + has/have + past participle",
            "Action completed at unspecified time.",
            "I have finished my homework.",
            "He has eaten breakfast.",
            "She has read the book.",
            "They have traveled to Japan.",
            "We have watched that movie.",
        ),
        "negative": _entry(
            "Subject + has/have not + past participle",
            "To say an action has not been completed.",
            "I have not seen that movie.",
            "He has not done his homework.",
            "We have not visited London.",
        ),
        "interrogative": _entry(
            "Has/Have + subject + past participle?",
            "To ask if an action has been completed.",
            "Have you done your homework?",
            "Has she arrived?",
            "Have they finished dinner?",
        ),
        "wh_question": _entry(
            "Wh- + has/have + subject + past participle?",
            "To ask about details of past actions with present relevance.",
            "Where have you been?",
            "What has she done?",
            "Which countries have they visited?",
        ),
    },
    "Present Perfect Continuous": {
        **_entry(
            "Subject + has/have + been + verb-ing",
            "Action started in past and continues.",
            "I have been studying since morning.",
            "He has been working all day.",
            "She has been reading since morning.",
            "They have been playing football for two hours.",
            "We have been waiting for you.",
        ),
        "negative": _entry(
            "Subject + has/have not + been + verb-ing",
            "To say an action has not continued.",
            "I have not been sleeping well.",
            "He has not been working today.",
            "We have not been studying enough.",
        ),
        "interrogative": _entry(
            "Has/Have + subject + been + verb-ing?",
            "To ask if an action has been continuing.",
            "Have you been studying?",
            "Has she been working?",
            "Have they been playing football?",
        ),
        "wh_question": _entry(
            "Wh- + has/have + subject + been + verb-ing?",
            "To ask about the details of a continuing action.",
            "What have you been doing?",
            "Where has she been going?",
            "Why have they been waiting?",
        ),
    },
    "Past Simple": {
        **_entry(
            "Subject + past verb",
            "Completed action in past.",
            "I walked to school yesterday.",
            "He played football last Sunday.",
            "She read the book yesterday.",
            "They studied English last night.",
            "We watched that movie last week.",
        ),
        "negative": _entry(
            "Subject + did not + base verb",
            "To say something did not happen in the past.",
            "I did not watch TV.",
            "He did not play football.",
            "They did not study yesterday.",
        ),
        "interrogative": _entry(
            "Did + subject + base verb?",
            "To ask about past actions.",
            "Did you go to school?",
            "Did she read the book?",
            "Did they watch the movie?",
        ),
        "wh_question": _entry(
            "Wh- + did + subject + base verb?",
            "To ask detailed past questions.",
            "What did you eat?",
            "Where did she go?",
            "When did they arrive?",
        ),
    },
    "Past Continuous": {
        **_entry(
            "Subject + was/were + verb-ing",
            "Action in progress in past.",
            "I was eating dinner when he arrived.",
            "He was watching TV at 8 PM.",
            "She was reading when I called.",
            "They were playing football yesterday.",
            "We were studying while it was raining.",
        ),
        "negative": _entry(
            "Subject + was/were not + verb-ing",
            "To say an action was not happening at a past time.",
            "I was not sleeping.",
            "He was not working.",
            "They were not playing football.",
        ),
        "interrogative": _entry(
            "Was/Were + subject + verb-ing?",
            "To ask if something was happening at a past time.",
            "Were you sleeping?",
            "Was she working?",
            "Were they playing football?",
        ),
        "wh_question": _entry(
            "Wh- + was/were + subject + verb-ing?",
            "To ask detailed past continuous questions.",
            "What were you doing?",
            "Where was she going?",
            "Why were they shouting?",
        ),
    },
    "Past Perfect": {
        **_entry(
            "Subject + had + past participle",
            "Action completed before another past action.",
            "I had finished my homework before dinner.",
            "He had eaten before I arrived.",
            "She had read it before class.",
            "They had left when we came.",
            "We had watched that movie before the party.",
        ),
        "negative": _entry(
            "Subject + had not + past participle",
            "To say an action had not been completed before another action.",
            "I had not done my homework.",
            "He had not eaten.",
            "They had not arrived yet.",
        ),
        "interrogative": _entry(
            "Had + subject + past participle?",
            "To ask if an action had been completed before another action.",
            "Had you finished your work?",
            "Had she left?",
            "Had they eaten dinner?",
        ),
        "wh_question": _entry(
            "Wh- + had + subject + past participle?",
            "To ask details about what was done before another past action.",
            "What had you done?",
            "Where had she gone?",
            "Why had they left?",
        ),
    },
    "Future Simple": {
        **_entry(
            "Subject + will + base verb",
            "Prediction or plan.",
            "I will go to school tomorrow.",
            "He will play football on Sunday.",
            "She will read tomorrow.",
            "They will travel next month.",
            "We will watch that movie tonight.",
        ),
        "negative": _entry(
            "Subject + will not + base verb",
            "To say something will not happen.",
            "I will not go tomorrow.",
            "He will not play football.",
            "They will not study tonight.",
        ),
        "interrogative": _entry(
            "Will + subject + base verb?",
            "To ask about future actions.",
            "Will you go to school?",
            "Will she read the book?",
            "Will they travel tomorrow?",
        ),
        "wh_question": _entry(
            "Wh- + will + subject + base verb?",
            "To ask detailed future questions.",
            "What will you do tomorrow?",
            "Where will she go?",
            "When will they arrive?",
        ),
    },
    "Future Continuous": {
        **_entry(
            "Subject + will be + verb-ing",
            "Action that will be in progress.",
            "I will be eating at noon.",
            "He will be watching TV at 8 PM.",
            "She will be reading at noon.",
            "They will be playing football tomorrow.",
            "We will be studying in the library.",
        ),
        "negative": _entry(
            "Subject + will not be + verb-ing",
            "To say an action will not be happening at a future time.",
            "I will not be working at 10.",
            "He will not be playing.",
            "They will not be studying.",
        ),
        "interrogative": _entry(
            "Will + subject + be + verb-ing?",
            "To ask about an action in progress at a future time.",
            "Will you be studying at 8?",
            "Will she be working?",
            "Will they be sleeping?",
        ),
        "wh_question": _entry(
            "Wh- + will + subject + be + verb-ing?",
            "To ask details about an action in progress in the future.",
            "What will you be doing at 9?",
            "Where will she be going?",
            "Why will they be waiting?",
        ),
    },
    "Future Perfect": {
        **_entry(
            "Subject + will have + past participle",
            "Action completed before a future time.",
            "I will have finished my homework by 8 PM.",
            "He will have eaten by the time you arrive.",
            "She will have read it by tomorrow.",
            "They will have traveled by next week.",
            "We will have watched that movie before Friday.",
        ),
        "negative": _entry(
            "Subject + will not have + past participle",
            "To say something will not be completed by a certain time.",
            "I will not have done my work by then.",
            "She will not have left by 9.",
            "They will not have finished the project.",
        ),
        "interrogative": _entry(
            "Will + subject + have + past participle?",
            "To ask if something will be completed by a certain time.",
            "Will you have finished by 10?",
            "Will she have cooked dinner?",
            "Will they have completed the task?",
        ),
        "wh_question": _entry(
            "Wh- + will + subject + have + past participle?",
            "To ask details of what will be completed by a future time.",
            "What will you have done by tomorrow?",
            "Where will she have gone?",
            "Which books will they have read?",
        ),
    },
}


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value


def thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    return value


@dataclass(frozen=True)
class ReferenceTables:
    version: str
    tags: Mapping[str, str]
    tag_links: Mapping[str, str]
    tenses: Mapping[str, Mapping[str, Any]]

    @property
    def tense_names(self) -> frozenset:
        return frozenset(self.tenses)

    def explain_tag(self, tag: str) -> Optional[str]:
        return self.tags.get(tag)

    def describe_tense(self, tense: str) -> Optional[Mapping[str, Any]]:
        return self.tenses.get(tense)

    def tense_payload(self, tense: str) -> Dict[str, Any]:
        return thaw(self.tenses.get(tense) or {})

    def as_payload(self) -> Dict[str, Any]:
        """Plain-dict copy for JSON output."""
        return {
            "version": self.version,
            "tags": thaw(self.tags),
            "tag_links": thaw(self.tag_links),
            "tenses": thaw(self.tenses),
        }


@lru_cache(maxsize=None)
def load_reference_tables(version: str = REFERENCE_EXTENDED) -> ReferenceTables:
    v = (version or "").strip().lower()
    if v == REFERENCE_BASIC:
        tags = dict(_BASIC_TAGS)
        links: Dict[str, str] = {}
        tenses = _BASIC_TENSES
    elif v == REFERENCE_EXTENDED:
        tags = {tag: text for tag, (text, _) in _EXTENDED_TAGS.items()}
        links = {tag: link for tag, (_, link) in _EXTENDED_TAGS.items() if link}
        tenses = _EXTENDED_TENSES
    else:
        raise ValueError(f"reference version must be one of: {REFERENCE_BASIC} | {REFERENCE_EXTENDED}, got: {version!r}")
    missing = [name for name in TENSE_NAMES if name not in tenses]
    if missing:
        raise RuntimeError(f"reference tables '{v}' are missing tenses: {missing}")
    return ReferenceTables(
        version=v,
        tags=_freeze(tags),
        tag_links=_freeze(links),
        tenses=_freeze(tenses),
    )


def explain_tag(tag: str, tables: ReferenceTables | None = None) -> Optional[str]:
    return (tables or load_reference_tables()).explain_tag(tag)


def tags_in_example(example: Any, tables: ReferenceTables | None = None) -> List[Dict[str, Any]]:
    """Distinct tags of one example, in order of first use, with explanations.

    Unknown tags are kept with ``explanation=None`` so the UI can still list them.
    Malformed tag entries are skipped.
    """
    ref = tables or load_reference_tables()
    tags = example.get("tags") if isinstance(example, dict) else None
    if not isinstance(tags, list):
        return []
    seen: set = set()
    rows: List[Dict[str, Any]] = []
    for item in tags:
        if not isinstance(item, dict):
            continue
        tag = item.get("tag")
        if not isinstance(tag, str) or tag in seen:
            continue
        seen.add(tag)
        rows.append({"tag": tag, "explanation": ref.explain_tag(tag), "link": ref.tag_links.get(tag)})
    return rows
