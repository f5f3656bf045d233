"""Unit tests for Pydantic models."""

import json

import pytest
from pydantic import ValidationError

from hsk_vocab.models import Dataset, Entry, TranscriptionSet


def test_sample_data_structure(sample_entry):
    """Verify the entry fields of a complete.json record."""
    assert sample_entry.simplified == "可以"
    assert sample_entry.radical == "口"
    assert sample_entry.level == ["new-1", "old-1"]
    assert sample_entry.frequency == 139
    assert sample_entry.pos == ["v"]

    form = sample_entry.forms[0]
    assert form.traditional == "可以"
    assert isinstance(form.transcriptions, TranscriptionSet)
    assert form.meanings == ["can; may; possible", "not bad; pretty good"]
    assert form.classifiers is None
    assert form.sandhi is None


def test_populated_order_and_skip():
    transcriptions = TranscriptionSet(romatzyh="kee yii", numeric="ke3 yi3", pinyin=None)
    assert list(transcriptions.populated()) == [("numeric", "ke3 yi3"), ("romatzyh", "kee yii")]


def test_has_any_level(sample_entry):
    assert sample_entry.has_any_level({"old-1"})
    assert not sample_entry.has_any_level(["new-2"])
    assert not Entry(simplified="的").has_any_level({"new-1"})


def test_headword_required():
    with pytest.raises(ValidationError):
        Entry.model_validate({"radical": "口"})


def test_dataset_json_round_trip(tmp_path, sample_entry_data):
    """Verify a dataset serializes back to the keys it was loaded with."""
    sample_entry_data["extra_note"] = "preserved"
    json_path = tmp_path / "complete.json"
    json_path.write_text(json.dumps([sample_entry_data], ensure_ascii=False), encoding="utf-8")

    dataset = Dataset.from_json_file(json_path)

    assert len(dataset) == 1
    assert dataset[0].simplified == "可以"
    assert dataset.to_data() == [sample_entry_data]


def test_dataset_find(sample_entry_data):
    dataset = Dataset.model_validate([{"simplified": "的"}, sample_entry_data])

    assert dataset.find("可以").frequency == 139
    assert dataset.find("不") is None
    assert [entry.simplified for entry in dataset] == ["的", "可以"]


def test_dataset_invalid(tmp_path):
    json_path = tmp_path / "bad.json"
    json_path.write_text(json.dumps([{"forms": "nope"}]), encoding="utf-8")

    with pytest.raises(ValidationError):
        Dataset.from_json_file(json_path)


def test_dataset_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Dataset.from_json_file(tmp_path / "missing.json")
