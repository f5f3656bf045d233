"""Type definitions shared across the vocabulary pipeline."""

from typing import Literal

# Type aliases
Tone = Literal[1, 2, 3, 4, 5]  # 1-4 = full tones, 5 = neutral
NotationKey = Literal["pinyin", "numeric", "wadegiles", "bopomofo", "romatzyh"]

NEUTRAL_TONE: Tone = 5
FULL_TONES: tuple[Tone, ...] = (1, 2, 3, 4)

# Order matches the field order of a transcription set
NOTATION_KEYS: tuple[NotationKey, ...] = (
    "pinyin",
    "numeric",
    "wadegiles",
    "bopomofo",
    "romatzyh",
)


def is_full_tone(tone: int) -> bool:
    """Return True for the four encodable tones (1-4)."""
    return tone in FULL_TONES


def is_tone(tone: int) -> bool:
    """Return True for any valid tone, neutral included (1-5)."""
    return is_full_tone(tone) or tone == NEUTRAL_TONE
