"""Tests for level-based word list filtering."""

from pathlib import Path

import pytest

from hsk_vocab.level_filter import (
    filter_entries,
    filter_exclusive,
    filter_inclusive,
    level_tag,
    wordlist_path,
)
from hsk_vocab.transformer import apply_to_entry


class TestFilterExclusive:
    def test_single_level(self, level_entries):
        filtered = filter_exclusive(level_entries, "new-1")

        assert [entry.simplified for entry in filtered] == ["你", "好"]

    def test_other_level(self, level_entries):
        filtered = filter_exclusive(level_entries, "new-2")

        assert len(filtered) == 1
        assert filtered[0].simplified == "学"

    def test_level_removed_from_copies(self, level_entries):
        filtered = filter_exclusive(level_entries, "new-1")

        assert all("level" not in entry.model_dump(exclude_unset=True) for entry in filtered)
        assert level_entries[0].level == ["new-1"]

    def test_no_match(self, level_entries):
        assert filter_exclusive(level_entries, "new-7") == []


class TestFilterInclusive:
    def test_any_level(self, level_entries):
        filtered = filter_inclusive(level_entries, ["new-1", "new-2"])

        assert [entry.simplified for entry in filtered] == ["你", "好", "学"]

    def test_mixed_schemes(self, level_entries):
        filtered = filter_inclusive(level_entries, ["old-1", "old-2"])

        assert [entry.simplified for entry in filtered] == ["好", "习"]

    def test_entries_without_levels_skipped(self, sample_entry, level_entries):
        sample_entry.level = None
        filtered = filter_inclusive([sample_entry, *level_entries], ["new-1"])

        assert [entry.simplified for entry in filtered] == ["你", "好"]

    def test_keeps_sandhi_and_forms(self, sample_entry):
        apply_to_entry(sample_entry)
        filtered = filter_inclusive([sample_entry], ["new-1"])

        assert filtered[0].forms[0].sandhi.numeric == "ke2 yi3"
        assert filtered[0].forms[0] is not sample_entry.forms[0]


class TestFilterEntries:
    def test_exclusive_uses_first_level(self, level_entries):
        filtered = filter_entries(level_entries, "exclusive", ["new-2", "new-1"])

        assert [entry.simplified for entry in filtered] == ["学"]

    def test_inclusive(self, level_entries):
        filtered = filter_entries(level_entries, "inclusive", ["new-2", "old-2"])

        assert [entry.simplified for entry in filtered] == ["学", "习"]

    def test_unknown_mode(self, level_entries):
        with pytest.raises(ValueError, match="Unknown filter mode"):
            filter_entries(level_entries, "cumulative", ["new-1"])

    def test_no_levels(self, level_entries):
        with pytest.raises(ValueError):
            filter_entries(level_entries, "inclusive", [])


class TestPaths:
    def test_level_tag(self):
        assert level_tag("new", 3) == "new-3"

    def test_exclusive_path(self):
        path = wordlist_path(Path("wordlists"), "exclusive", ["new-3"])
        assert path == Path("wordlists/exclusive/new/3.json")

    def test_inclusive_path_uses_last_level(self):
        path = wordlist_path(Path("wordlists"), "inclusive", ["old-1", "old-2", "old-3"])
        assert path == Path("wordlists/inclusive/old/3.json")

    def test_no_levels(self):
        with pytest.raises(ValueError):
            wordlist_path(Path("wordlists"), "inclusive", [])
