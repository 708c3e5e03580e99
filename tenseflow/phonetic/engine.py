"""Static IPA-like transcriptions for the words the templates can emit."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Protocol


class PhoneticResolver(Protocol):
    def resolve(self, word: str) -> str:
        ...


PHONETIC_MAP: Mapping[str, str] = MappingProxyType(
    {
        # pronouns
        "i": "aɪ",
        "you": "juː",
        "he": "hiː",
        "she": "ʃiː",
        "we": "wiː",
        "they": "ðeɪ",
        # lexical verbs
        "read": "riːd",
        "reads": "riːdz",
        "reading": "ˈriːdɪŋ",
        "write": "raɪt",
        "writes": "raɪts",
        "draw": "drɔː",
        "draws": "drɔːz",
        "drawing": "ˈdrɔːɪŋ",
        "play": "pleɪ",
        "plays": "pleɪz",
        "playing": "ˈpleɪɪŋ",
        "study": "ˈstʌdi",
        "studying": "ˈstʌdiɪŋ",
        "cook": "kʊk",
        "cooks": "kʊks",
        "cooking": "ˈkʊkɪŋ",
        "watch": "wɒtʃ",
        "watching": "ˈwɒtʃɪŋ",
        "called": "kɔːld",
        # nouns
        "book": "bʊk",
        "movie": "ˈmuːvi",
        "song": "sɔŋ",
        "game": "geɪm",
        "recipe": "ˈrɛsəpi",
        "story": "ˈstɔːri",
        "article": "ˈɑːrtɪkəl",
        # time expressions
        "morning": "ˈmɔːrnɪŋ",
        "afternoon": "ˌæftərˈnuːn",
        "evening": "ˈiːvnɪŋ",
        "night": "naɪt",
        "weekend": "ˈwiːkˌɛnd",
        "today": "təˈdeɪ",
        "yesterday": "ˈjɛstərdeɪ",
        "tomorrow": "təˈmɒrəʊ",
        # function words
        "a": "ə",
        "the": "ðə",
        "every": "ˈɛvri",
        "since": "sɪns",
        "when": "wɛn",
        "where": "wɛər",
        "what": "wɒt",
        "why": "waɪ",
        "how": "haʊ",
        "not": "nɒt",
        # auxiliaries and modals
        "do": "duː",
        "does": "dʌz",
        "did": "dɪd",
        "will": "wɪl",
        "be": "biː",
        "been": "bɪn",
        "is": "ɪz",
        "are": "ɑːr",
        "was": "wɒz",
        "were": "wɜːr",
        "have": "hæv",
        "has": "hæz",
        "had": "hæd",
    }
)


class StaticPhoneticResolver:
    """Case-folded lookup into a fixed map; unknown words come back as given."""

    def __init__(self, mapping: Mapping[str, str] | None = None) -> None:
        source = PHONETIC_MAP if mapping is None else mapping
        self._mapping: Mapping[str, str] = MappingProxyType({str(k).casefold(): v for k, v in source.items()})

    def resolve(self, word: Any) -> str:
        if word is None:
            return ""
        if not isinstance(word, str):
            word = str(word)
        return self._mapping.get(word.casefold(), word)


_DEFAULT_RESOLVER = StaticPhoneticResolver()


def resolve(word: str) -> str:
    return _DEFAULT_RESOLVER.resolve(word)
