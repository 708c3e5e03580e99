"""Fixed lexical pools used to parameterize generated sentences."""

from .pools import NOUNS, PRONOUNS, TIMES, VERBS_BASE, LexicalPools, PronounEntry, default_pools

__all__ = ["PronounEntry", "LexicalPools", "PRONOUNS", "VERBS_BASE", "NOUNS", "TIMES", "default_pools"]
