"""Compact distribution format.

Entries are rewritten with single-letter field names and abbreviated level
tags (``new-1`` -> ``n1``). The original and sandhi transcription sets are
renamed with the same notation aliases.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Optional

from .models import Entry, Form, TranscriptionSet
from .types import NOTATION_KEYS

logger = logging.getLogger(__name__)

FIELD_ALIASES = MappingProxyType({
    "simplified": "s",
    "radical": "r",
    "level": "l",
    "frequency": "q",
    "pos": "p",
    "forms": "f",
    "traditional": "t",
    "transcriptions": "i",
    "sandhi": "z",
    "meanings": "m",
    "classifiers": "c",
})

NOTATION_ALIASES = MappingProxyType({
    "pinyin": "y",
    "numeric": "n",
    "wadegiles": "w",
    "bopomofo": "b",
    "romatzyh": "g",
})

LEVEL_PREFIXES = (("new-", "n"), ("old-", "o"))


def abbreviate_level(tag: str) -> str:
    """Shorten a level tag: "new-1" -> "n1", "old-6" -> "o6"."""
    for prefix, short in LEVEL_PREFIXES:
        tag = tag.replace(prefix, short)
    return tag


def minify_transcriptions(transcriptions: Optional[TranscriptionSet]) -> dict[str, Optional[str]]:
    """Rename notation keys; every alias is present, absent values are None."""
    return {
        NOTATION_ALIASES[key]: getattr(transcriptions, key) if transcriptions is not None else None
        for key in NOTATION_KEYS
    }


def minify_form(form: Form) -> dict[str, Any]:
    minified: dict[str, Any] = {
        FIELD_ALIASES["traditional"]: form.traditional,
        FIELD_ALIASES["transcriptions"]: minify_transcriptions(form.transcriptions),
    }
    if form.sandhi is not None:
        minified[FIELD_ALIASES["sandhi"]] = minify_transcriptions(form.sandhi)
    minified[FIELD_ALIASES["meanings"]] = form.meanings
    minified[FIELD_ALIASES["classifiers"]] = form.classifiers
    return minified


def minify_entry(entry: Entry) -> dict[str, Any]:
    """Rewrite an entry with short field names.

    The level field is only written for entries that carry one (filtered
    word lists drop it).
    """
    minified: dict[str, Any] = {
        FIELD_ALIASES["simplified"]: entry.simplified,
        FIELD_ALIASES["radical"]: entry.radical,
    }
    if entry.level is not None:
        minified[FIELD_ALIASES["level"]] = [abbreviate_level(tag) for tag in entry.level]
    minified[FIELD_ALIASES["frequency"]] = entry.frequency
    minified[FIELD_ALIASES["pos"]] = entry.pos
    minified[FIELD_ALIASES["forms"]] = [minify_form(form) for form in entry.forms or []]
    return minified


def minify_entries(entries: Iterable[Entry]) -> list[dict[str, Any]]:
    result = [minify_entry(entry) for entry in entries]
    logger.info(f"Minified {len(result)} entries")
    return result


def min_output_path(path: Path) -> Path:
    """Return the minified sibling of a JSON file: words.json -> words.min.json."""
    return path.with_name(path.name.replace(".json", ".min.json"))
