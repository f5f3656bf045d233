"""Dataset container model for vocabulary entries."""

import json
from pathlib import Path
from typing import Iterator

from pydantic import RootModel

from .entry import Entry


class Dataset(RootModel[list[Entry]]):
    """A complete vocabulary dataset: a JSON list of entries."""

    @classmethod
    def from_json_file(cls, path: Path) -> "Dataset":
        """Load dataset from JSON file.

        Args:
            path: Path to the JSON file

        Returns:
            A Dataset instance populated from the JSON data

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If the data does not match the schema
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return cls.model_validate(data)

    def to_data(self) -> list[dict]:
        """Return plain JSON-compatible data.

        Fields that were never set (neither loaded nor assigned) are left
        out, so a loaded dataset serializes back to the same keys it had.
        """
        return self.model_dump(mode="json", exclude_unset=True)

    def __iter__(self) -> Iterator[Entry]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Entry:
        return self.root[index]

    def find(self, simplified: str) -> Entry | None:
        """Get the first entry with the given headword.

        Args:
            simplified: The simplified headword to find

        Returns:
            The Entry if found, None otherwise
        """
        return next((entry for entry in self.root if entry.simplified == simplified), None)
