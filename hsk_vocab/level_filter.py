"""Level-based word list filtering.

Level tags look like ``new-3`` or ``old-6``. Two kinds of word list are
derived from the complete dataset:

- exclusive: words tagged with exactly one given level
- inclusive: words tagged with any of the given levels, used to build the
  cumulative lists (level 1, levels 1-2, levels 1-3, ...)

Filtered entries are copies with the ``level`` field removed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Literal, Sequence

from .models import Entry

logger = logging.getLogger(__name__)

FilterMode = Literal["exclusive", "inclusive"]
FILTER_MODES: tuple[FilterMode, ...] = ("exclusive", "inclusive")


def _strip_level(entry: Entry) -> Entry:
    data = entry.model_dump(exclude_unset=True, exclude={"level"})
    return Entry.model_validate(data)


def filter_exclusive(entries: Iterable[Entry], level: str) -> list[Entry]:
    """Return copies of the entries tagged with a single level.

    Args:
        entries: Source entries, not modified.
        level: Level tag, e.g. "new-1".

    Returns:
        Matching entries in input order, without their level field.
    """
    return [_strip_level(entry) for entry in entries if entry.has_any_level({level})]


def filter_inclusive(entries: Iterable[Entry], levels: Sequence[str]) -> list[Entry]:
    """Return copies of the entries tagged with any of the given levels.

    Args:
        entries: Source entries, not modified.
        levels: Level tags, e.g. ["new-1", "new-2"].

    Returns:
        Matching entries in input order, without their level field.
    """
    wanted = set(levels)
    return [_strip_level(entry) for entry in entries if entry.has_any_level(wanted)]


def filter_entries(entries: Iterable[Entry], mode: str, levels: Sequence[str]) -> list[Entry]:
    """Filter entries by level in the given mode.

    Exclusive mode only looks at the first level.

    Raises:
        ValueError: If the mode is unknown or no level is given.
    """
    if mode not in FILTER_MODES:
        raise ValueError(f"Unknown filter mode {mode!r}, expected one of {FILTER_MODES}")
    if not levels:
        raise ValueError("At least one level is required")

    if mode == "exclusive":
        result = filter_exclusive(entries, levels[0])
    else:
        result = filter_inclusive(entries, levels)
    logger.info(f"Filtered {len(result)} words ({mode}: {', '.join(levels)})")
    return result


def level_tag(scheme: str, level: int) -> str:
    """Build a level tag, e.g. level_tag("new", 3) -> "new-3"."""
    return f"{scheme}-{level}"


def wordlist_path(wordlist_dir: Path, mode: str, levels: Sequence[str]) -> Path:
    """Return the output path of a filtered word list.

    The scheme directory is taken from the first level and the file name
    from the last one: (inclusive, ["old-1", "old-2"]) -> inclusive/old/2.json

    Raises:
        ValueError: If no level is given.
    """
    if not levels:
        raise ValueError("At least one level is required")
    scheme = "old" if "old" in levels[0] else "new"
    name = levels[-1].replace("old-", "").replace("new-", "")
    return wordlist_dir / mode / scheme / f"{name}.json"
