"""Wade-Giles codec with superscript tone numbers (e.g. "k'o³ i³")."""

from types import MappingProxyType
from typing import cast

from ..types import NEUTRAL_TONE, Tone, is_tone
from .base import NotationCodec

SUPERSCRIPTS = ("¹", "²", "³", "⁴", "⁵")
SUPERSCRIPT_TO_TONE = MappingProxyType({mark: idx + 1 for idx, mark in enumerate(SUPERSCRIPTS)})


class WadeGilesCodec(NotationCodec):
    """Wade-Giles romanization with a superscript tone digit.

    不 is spelled "pu" and 一 is spelled "i" (or "yi" in some sources).
    """

    key = "wadegiles"
    bu_spellings = frozenset({"pu"})
    yi_spellings = frozenset({"i", "yi"})

    def decode(self, syllable: str) -> tuple[str, Tone]:
        tone = NEUTRAL_TONE
        for char in reversed(syllable):
            if char in SUPERSCRIPT_TO_TONE:
                tone = cast(Tone, SUPERSCRIPT_TO_TONE[char])
                break
        base = "".join(char for char in syllable if char not in SUPERSCRIPT_TO_TONE)
        return base, tone

    def encode(self, base: str, tone: int) -> str:
        if not is_tone(tone):
            return base
        return f"{base}{SUPERSCRIPTS[tone - 1]}"
