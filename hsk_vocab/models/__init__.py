"""Pydantic models for the vocabulary dataset."""

from .transcription import TranscriptionSet
from .entry import Entry, Form
from .dataset import Dataset

__all__ = [
    "TranscriptionSet",
    "Form",
    "Entry",
    "Dataset",
]
