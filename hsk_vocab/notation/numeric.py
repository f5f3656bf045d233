"""Numeric pinyin codec (e.g. "ni3 hao3")."""

from typing import cast

from ..types import NEUTRAL_TONE, Tone, is_tone
from .base import NotationCodec

TONE_DIGITS = frozenset("12345")


class NumericCodec(NotationCodec):
    """Pinyin with a trailing tone digit, 5 marking the neutral tone."""

    key = "numeric"
    bu_spellings = frozenset({"bu"})
    yi_spellings = frozenset({"yi"})

    def decode(self, syllable: str) -> tuple[str, Tone]:
        if syllable and syllable[-1] in TONE_DIGITS:
            return syllable[:-1], cast(Tone, int(syllable[-1]))
        return syllable, NEUTRAL_TONE

    def encode(self, base: str, tone: int) -> str:
        if not is_tone(tone):
            return base
        return f"{base}{tone}"
