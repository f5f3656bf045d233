"""Transcription set model shared by original and sandhi transcriptions."""

from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict

from ..types import NOTATION_KEYS, NotationKey


class TranscriptionSet(BaseModel):
    """A phrase in up to five notations.

    Only fields that were explicitly provided count as populated; a sandhi
    set built from a source set carries exactly the same populated keys.
    """

    model_config = ConfigDict(extra="allow")

    pinyin: Optional[str] = None
    numeric: Optional[str] = None
    wadegiles: Optional[str] = None
    bopomofo: Optional[str] = None
    romatzyh: Optional[str] = None

    def populated(self) -> Iterator[tuple[NotationKey, str]]:
        """Yield (key, phrase) for every notation that holds a phrase."""
        for key in NOTATION_KEYS:
            value = getattr(self, key)
            if value is not None:
                yield key, value
