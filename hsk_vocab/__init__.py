"""
HSK Vocab - Complete HSK vocabulary dataset tooling.

This library maintains the Mandarin vocabulary dataset and derives the
per-level word lists and compact distribution files from it, including
tone sandhi transcriptions in every supported notation.

Modules:
    types: Tone and notation type definitions
    notation: Tone codecs for pinyin, numeric, Wade-Giles, bopomofo, romatzyh
    sandhi: Tone sandhi rule engine
    transformer: Sandhi enrichment of entries and datasets
    level_filter: Exclusive and inclusive level word lists
    minify: Compact field-aliased output
"""

from .level_filter import filter_entries, filter_exclusive, filter_inclusive
from .minify import minify_entries, minify_entry
from .models import Dataset, Entry, Form, TranscriptionSet
from .notation import CODECS, NotationCodec, get_codec
from .sandhi import apply_to_phrase, compute_sandhi_tones
from .transformer import apply_to_dataset, apply_to_entry, apply_to_form
from .types import NEUTRAL_TONE, NOTATION_KEYS, NotationKey, Tone

__version__ = "0.1.0"

__all__ = [
    # Types
    "Tone",
    "NotationKey",
    "NEUTRAL_TONE",
    "NOTATION_KEYS",
    # Models
    "Dataset",
    "Entry",
    "Form",
    "TranscriptionSet",
    # Notation
    "CODECS",
    "NotationCodec",
    "get_codec",
    # Sandhi
    "apply_to_phrase",
    "compute_sandhi_tones",
    "apply_to_form",
    "apply_to_entry",
    "apply_to_dataset",
    # Word lists
    "filter_entries",
    "filter_exclusive",
    "filter_inclusive",
    "minify_entries",
    "minify_entry",
]
