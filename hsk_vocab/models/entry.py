"""Vocabulary entry models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .transcription import TranscriptionSet


class Form(BaseModel):
    """One written form of a word with its readings and meanings."""

    model_config = ConfigDict(extra="allow")

    traditional: Optional[str] = None
    transcriptions: Optional[TranscriptionSet] = None
    sandhi: Optional[TranscriptionSet] = None
    meanings: list[str] = Field(default_factory=list)
    classifiers: Optional[list[str]] = None


class Entry(BaseModel):
    """A headword in the vocabulary dataset."""

    model_config = ConfigDict(extra="allow")

    simplified: str
    radical: Optional[str] = None
    level: Optional[list[str]] = None
    frequency: Optional[int] = None
    pos: list[str] = Field(default_factory=list)
    forms: Optional[list[Form]] = None

    def has_any_level(self, levels: list[str] | set[str]) -> bool:
        """Return True if the entry is tagged with any of the given levels.

        Args:
            levels: Level tags such as "new-1" or "old-3"

        Returns:
            False for entries without level tags
        """
        if not self.level:
            return False
        return any(tag in levels for tag in self.level)
