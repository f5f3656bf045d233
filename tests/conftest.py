"""Pytest configuration and fixtures for hsk_vocab tests."""

import json
from pathlib import Path

import pytest

from hsk_vocab.models import Entry


def make_entry_data(**overrides) -> dict:
    """Raw JSON data for the 可以 entry, as stored in complete.json."""
    data = {
        "simplified": "可以",
        "radical": "口",
        "level": ["new-1", "old-1"],
        "frequency": 139,
        "pos": ["v"],
        "forms": [
            {
                "traditional": "可以",
                "transcriptions": {
                    "pinyin": "kě yǐ",
                    "numeric": "ke3 yi3",
                    "wadegiles": "k'o³ i³",
                    "bopomofo": "ㄎㄜˇ ㄧˇ",
                    "romatzyh": "kee yii",
                },
                "meanings": ["can; may; possible", "not bad; pretty good"],
                "classifiers": None,
            }
        ],
    }
    data.update(overrides)
    return data


@pytest.fixture
def sample_entry_data() -> dict:
    """Raw data for a fully transcribed entry."""
    return make_entry_data()


@pytest.fixture
def sample_entry(sample_entry_data: dict) -> Entry:
    """A fully transcribed entry (可以)."""
    return Entry.model_validate(sample_entry_data)


@pytest.fixture
def level_entries() -> list[Entry]:
    """Small entries tagged with various levels."""
    return [
        Entry(simplified="你", level=["new-1"]),
        Entry(simplified="好", level=["new-1", "old-1"]),
        Entry(simplified="学", level=["new-2"]),
        Entry(simplified="习", level=["old-2"]),
    ]


@pytest.fixture
def dataset_root(tmp_path: Path) -> Path:
    """A dataset root directory containing complete.json."""
    entries = [
        make_entry_data(),
        make_entry_data(
            simplified="不是",
            radical="一",
            level=["new-1", "old-2"],
            frequency=50,
            forms=[
                {
                    "traditional": "不是",
                    "transcriptions": {
                        "pinyin": "bù shì",
                        "numeric": "bu4 shi4",
                        "wadegiles": "pu⁴ shih⁴",
                        "bopomofo": "ㄅㄨˋ ㄕˋ",
                        "romatzyh": "bush shyh",
                    },
                    "meanings": ["no; is not"],
                    "classifiers": None,
                }
            ],
        ),
        make_entry_data(
            simplified="学习",
            radical="子",
            level=["new-2"],
            frequency=600,
            forms=[
                {
                    "traditional": "學習",
                    "transcriptions": {"pinyin": "xué xí", "numeric": "xue2 xi2"},
                    "meanings": ["to learn; to study"],
                    "classifiers": None,
                }
            ],
        ),
    ]
    path = tmp_path / "complete.json"
    path.write_text(json.dumps(entries, ensure_ascii=False, indent=2), encoding="utf-8")
    return tmp_path
