"""Gwoyeu Romatzyh codec.

Romatzyh spells tone into the syllable itself (``kee`` vs ``ke``), which
cannot be rewritten mechanically. Phrases in this notation are carried into
the sandhi set unmodified.
"""

from ..types import NEUTRAL_TONE, Tone
from .base import NotationCodec


class PassthroughCodec(NotationCodec):
    """Identity codec for tone-in-spelling notations."""

    key = "romatzyh"
    applies_sandhi = False

    def decode(self, syllable: str) -> tuple[str, Tone]:
        return syllable, NEUTRAL_TONE

    def encode(self, base: str, tone: int) -> str:
        return base
