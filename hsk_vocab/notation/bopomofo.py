"""Bopomofo (Zhuyin) codec (e.g. "ㄋㄧˇ ㄏㄠˇ").

Tone 1 is unmarked, tones 2-4 take a postfix mark and the neutral tone takes
a dot placed before the syllable.
"""

from types import MappingProxyType
from typing import cast

from ..types import NEUTRAL_TONE, Tone, is_full_tone
from .base import NotationCodec

NEUTRAL_MARK = "˙"
TONE_TO_MARK = MappingProxyType({2: "ˊ", 3: "ˇ", 4: "ˋ"})
MARK_TO_TONE = MappingProxyType({mark: tone for tone, mark in TONE_TO_MARK.items()})


class BopomofoCodec(NotationCodec):
    """Zhuyin Fuhao with tone marks."""

    key = "bopomofo"
    bu_spellings = frozenset({"ㄅㄨ"})
    yi_spellings = frozenset({"ㄧ"})
    case_sensitive = True

    def decode(self, syllable: str) -> tuple[str, Tone]:
        if syllable.startswith(NEUTRAL_MARK):
            return self._strip(syllable[len(NEUTRAL_MARK):]), NEUTRAL_TONE
        tone: Tone = 1
        for char in syllable:
            if char in MARK_TO_TONE:
                tone = cast(Tone, MARK_TO_TONE[char])
                break
        return self._strip(syllable), tone

    def encode(self, base: str, tone: int) -> str:
        if tone == NEUTRAL_TONE:
            return f"{NEUTRAL_MARK}{base}"
        if tone == 1 or not is_full_tone(tone):
            return base
        return f"{base}{TONE_TO_MARK[tone]}"

    @staticmethod
    def _strip(syllable: str) -> str:
        return "".join(char for char in syllable if char not in MARK_TO_TONE)
