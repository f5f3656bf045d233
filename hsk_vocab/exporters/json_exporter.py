"""JSON exporter for datasets and word lists."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from ..models import Dataset, Entry

logger = logging.getLogger(__name__)


class JsonExporter:
    """Exports entries to JSON files.

    Full datasets and word lists are written indented; minified lists are
    written as compact JSON without whitespace.
    """

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def render(self, entries: Iterable[Entry]) -> str:
        """Serialize entries to an indented JSON string.

        Args:
            entries: A Dataset or any iterable of entries

        Returns:
            JSON text with the same keys the entries were loaded with
        """
        dataset = entries if isinstance(entries, Dataset) else Dataset(list(entries))
        return json.dumps(dataset.to_data(), indent=self.indent, ensure_ascii=False)

    def render_minified(self, data: list[dict[str, Any]]) -> str:
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))

    def export(self, entries: Iterable[Entry], output_path: Path) -> None:
        """Export entries to an indented JSON file.

        Args:
            entries: The entries to export
            output_path: Path where the JSON file will be written
        """
        self._write(self.render(entries), output_path)

    def export_minified(self, data: list[dict[str, Any]], output_path: Path) -> None:
        """Export already-minified entries to a compact JSON file.

        Args:
            data: Output of minify_entries()
            output_path: Path where the JSON file will be written
        """
        self._write(self.render_minified(data), output_path)

    def _write(self, text: str, output_path: Path) -> None:
        # Ensure directory exists
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.debug(f"Wrote {len(text.encode('utf-8'))} bytes to {output_path}")
