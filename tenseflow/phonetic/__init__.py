"""Phonetic transcription helpers."""

from .engine import PHONETIC_MAP, PhoneticResolver, StaticPhoneticResolver, resolve

__all__ = ["PhoneticResolver", "StaticPhoneticResolver", "PHONETIC_MAP", "resolve"]
