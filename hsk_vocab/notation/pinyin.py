"""Tone-marked pinyin codec (e.g. "nǐ hǎo").

Tones 1-4 are written as a diacritic over one vowel of the syllable; an
unmarked syllable carries the neutral tone. Decoding swaps the marked vowel
for its bare form and remembers its position, and encoding puts the new mark
back on that same vowel. A base that never went through decode gets the mark
on the vowel standard pinyin orthography marks:

1. ``a`` or ``e`` if present
2. the ``o`` of ``ou``
3. otherwise the last vowel
"""

import unicodedata
from types import MappingProxyType
from typing import cast

from ..types import NEUTRAL_TONE, Tone, is_full_tone
from .base import NotationCodec

# Bare vowel -> marks for tones 1-4
TONE_MARKS = MappingProxyType({
    "a": ("ā", "á", "ǎ", "à"),
    "e": ("ē", "é", "ě", "è"),
    "i": ("ī", "í", "ǐ", "ì"),
    "o": ("ō", "ó", "ǒ", "ò"),
    "u": ("ū", "ú", "ǔ", "ù"),
    "ü": ("ǖ", "ǘ", "ǚ", "ǜ"),
    "A": ("Ā", "Á", "Ǎ", "À"),
    "E": ("Ē", "É", "Ě", "È"),
    "I": ("Ī", "Í", "Ǐ", "Ì"),
    "O": ("Ō", "Ó", "Ǒ", "Ò"),
    "U": ("Ū", "Ú", "Ǔ", "Ù"),
    "Ü": ("Ǖ", "Ǘ", "Ǚ", "Ǜ"),
})

# Marked vowel -> (bare vowel, tone)
MARK_TO_TONE = MappingProxyType({
    mark: (vowel, idx + 1)
    for vowel, marks in TONE_MARKS.items()
    for idx, mark in enumerate(marks)
})


class PinyinBase(str):
    """Bare pinyin spelling that remembers which vowel carried the tone mark."""

    mark_index: int | None

    def __new__(cls, value: str, mark_index: int | None = None) -> "PinyinBase":
        obj = super().__new__(cls, value)
        obj.mark_index = mark_index
        return obj


def _mark_position(base: str) -> int | None:
    """Return the index of the vowel that carries the tone mark."""
    pos = getattr(base, "mark_index", None)
    if pos is not None and 0 <= pos < len(base) and base[pos] in TONE_MARKS:
        return pos
    lowered = base.lower()
    for vowel in ("a", "e"):
        pos = lowered.find(vowel)
        if pos >= 0:
            return pos
    pos = lowered.find("ou")
    if pos >= 0:
        return pos
    for pos in range(len(lowered) - 1, -1, -1):
        if lowered[pos] in "iouü":
            return pos
    return None


class PinyinCodec(NotationCodec):
    """Pinyin with tone diacritics."""

    key = "pinyin"
    bu_spellings = frozenset({"bu"})
    yi_spellings = frozenset({"yi"})

    def decode(self, syllable: str) -> tuple[str, Tone]:
        syllable = unicodedata.normalize("NFC", syllable)
        for pos, char in enumerate(syllable):
            if char in MARK_TO_TONE:
                vowel, tone = MARK_TO_TONE[char]
                base = syllable[:pos] + vowel + syllable[pos + 1:]
                return PinyinBase(base, pos), cast(Tone, tone)
        return PinyinBase(syllable), NEUTRAL_TONE

    def encode(self, base: str, tone: int) -> str:
        # Unmarked is the neutral tone
        if not is_full_tone(tone):
            return str(base)
        pos = _mark_position(base)
        if pos is None:
            return str(base)
        mark = TONE_MARKS[base[pos]][tone - 1]
        return base[:pos] + mark + base[pos + 1:]
