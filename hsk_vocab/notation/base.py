"""Base class for tone notation codecs."""

from abc import ABC, abstractmethod

from ..types import NotationKey, Tone


class NotationCodec(ABC):
    """Abstract base class for notation codecs.

    A codec knows how one transcription system writes tone on a syllable.
    It splits a syllable into its base spelling and tone, and writes a
    (possibly different) tone back onto a base spelling. The sandhi engine
    only ever sees the decoded (base, tone) pairs, so adding a notation
    means adding a codec, nothing else.

    Subclasses declare the spellings of 不 and 一 in their notation so the
    engine can recognize those words without knowing the script.
    """

    key: NotationKey
    bu_spellings: frozenset[str] = frozenset()
    yi_spellings: frozenset[str] = frozenset()
    case_sensitive: bool = False
    applies_sandhi: bool = True

    @abstractmethod
    def decode(self, syllable: str) -> tuple[str, Tone]:
        """Split a syllable into base spelling and tone.

        Args:
            syllable: One whitespace-delimited syllable.

        Returns:
            Tuple of (base spelling, tone). Tone is 5 when no marker is found.
        """
        pass

    @abstractmethod
    def encode(self, base: str, tone: int) -> str:
        """Write a tone onto a base spelling.

        Args:
            base: Base spelling as returned by decode().
            tone: Target tone, 1-5. Anything else returns the base
                unmodified.

        Returns:
            The syllable in this notation.
        """
        pass

    def _normalize(self, base: str) -> str:
        return base if self.case_sensitive else base.lower()

    def is_bu(self, base: str) -> bool:
        """Return True if the base spelling is 不 in this notation."""
        return self._normalize(base) in self.bu_spellings

    def is_yi(self, base: str) -> bool:
        """Return True if the base spelling is 一 in this notation."""
        return self._normalize(base) in self.yi_spellings

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"
