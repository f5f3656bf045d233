"""Tone sandhi rule engine.

This module implements the Mandarin Chinese tone sandhi (tone change) rules
applied to dictionary transcriptions:
1. Third tone sandhi: 3 -> 2 before another 3rd tone
2. Bu (不) rule: bu4 -> bu2 before a 4th tone
3. Yi (一) rule: yi1 -> yi4 before 1st/2nd/3rd, yi1 -> yi2 before 4th

The rules are notation-agnostic: they operate on (base spelling, tone) pairs
produced by a NotationCodec, which also tells the engine how 不 and 一 are
spelled in its notation.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .notation import NotationCodec
from .types import Tone

logger = logging.getLogger(__name__)


def compute_sandhi_tones(
    syllables: Sequence[tuple[str, Tone]],
    codec: NotationCodec,
) -> list[Tone]:
    """Compute spoken tones for a phrase.

    Syllables are visited right to left, once each. The third tone rule
    looks ahead at the *original* tone of the next syllable, so a run of
    third tones resolves to 2-2-...-3. The 不 and 一 rules look ahead at the
    *resulting* tone of the next syllable, which has already been settled.

    Examples:
        ke3 yi3 -> ke2 yi3
        ni3 hen3 hao3 -> ni2 hen2 hao3
        bu4 shi4 -> bu2 shi4
        yi1 ge4 -> yi2 ge4
        yi1 tian1 -> yi4 tian1

    Args:
        syllables: (base spelling, original tone) pairs in phrase order.
        codec: Codec of the notation, used to recognize 不 and 一.

    Returns:
        Resulting tones, same length as the input. The last syllable always
        keeps its original tone.
    """
    original = [tone for _, tone in syllables]
    result = list(original)

    for i in range(len(syllables) - 2, -1, -1):
        base, tone = syllables[i]
        orig_next = original[i + 1]
        res_next = result[i + 1]

        # Rule 1: third tone sandhi
        if tone == 3 and orig_next == 3:
            result[i] = 2
        # Rule 2: 不 before a 4th tone
        elif tone == 4 and res_next == 4 and codec.is_bu(base):
            result[i] = 2
        # Rule 3: 一 before anything but a neutral tone
        elif tone == 1 and codec.is_yi(base):
            if res_next == 4:
                result[i] = 2
            elif res_next in (1, 2, 3):
                result[i] = 4

    return result


def apply_to_phrase(phrase: str | None, codec: NotationCodec) -> str | None:
    """Apply tone sandhi to a transcribed phrase.

    Only syllables whose tone changes are re-encoded; all others are kept
    verbatim. If no tone changes, the phrase is returned as given.

    Args:
        phrase: Space-separated syllables in the codec's notation.
        codec: Codec for the phrase's notation.

    Returns:
        The phrase with sandhi applied. Empty, None or single-syllable
        phrases are returned unchanged.
    """
    if not phrase or not codec.applies_sandhi:
        return phrase

    syllables = phrase.split()
    if len(syllables) < 2:
        return phrase

    decoded = [codec.decode(syllable) for syllable in syllables]
    tones = compute_sandhi_tones(decoded, codec)

    changed = False
    for i, ((base, original_tone), new_tone) in enumerate(zip(decoded, tones)):
        if new_tone != original_tone:
            syllables[i] = codec.encode(base, new_tone)
            changed = True

    if not changed:
        return phrase

    result = " ".join(syllables)
    logger.debug(f"{codec.key}: {phrase!r} -> {result!r}")
    return result
