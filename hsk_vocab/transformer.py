"""Apply tone sandhi to vocabulary entries.

Each form gains a ``sandhi`` transcription set that mirrors its
``transcriptions``: same populated keys, with the spoken tones written in.
The original transcriptions are never modified.

Ownership:
    apply_to_form and apply_to_entry enrich their argument in place.
    apply_to_dataset works on deep copies and leaves its input untouched.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .models import Entry, Form, TranscriptionSet
from .notation import CODECS
from .sandhi import apply_to_phrase

logger = logging.getLogger(__name__)


def build_sandhi_set(transcriptions: TranscriptionSet) -> TranscriptionSet:
    """Derive a sandhi set from a transcription set.

    Args:
        transcriptions: Source transcriptions. Not modified.

    Returns:
        A new TranscriptionSet with the same populated keys.
    """
    sandhi = {
        key: apply_to_phrase(phrase, CODECS[key])
        for key, phrase in transcriptions.populated()
    }
    return TranscriptionSet(**sandhi)


def apply_to_form(form: Form) -> Form:
    """Add a freshly computed sandhi set to a form, in place.

    Forms without transcriptions are left alone.
    """
    if form.transcriptions is None:
        return form
    form.sandhi = build_sandhi_set(form.transcriptions)
    return form


def apply_to_entry(entry: Entry) -> Entry:
    """Apply sandhi to every form of an entry, in place.

    Args:
        entry: The entry to enrich.

    Returns:
        The same entry object. Entries without forms are returned unchanged.
    """
    if entry.forms is None:
        logger.debug(f"Entry {entry.simplified!r} has no forms, skipping")
        return entry

    for form in entry.forms:
        apply_to_form(form)
    return entry


def apply_to_dataset(entries: Iterable[Entry]) -> list[Entry]:
    """Apply sandhi to every entry of a dataset.

    Each entry is deep-copied before it is enriched, so the input dataset
    and its nested forms are not modified.

    Args:
        entries: Dataset entries.

    Returns:
        New list of enriched entries, in input order.
    """
    result = [apply_to_entry(entry.model_copy(deep=True)) for entry in entries]
    logger.info(f"Applied tone sandhi to {len(result)} entries")
    return result
