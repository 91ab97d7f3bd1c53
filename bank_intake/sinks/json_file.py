"""JSON file sink for exporting a batch session."""

import json
from dataclasses import is_dataclass
from pathlib import Path
from typing import Any

from bank_intake.exceptions import SinkError
from bank_intake.sinks.serialization import to_dict, to_dict_fast


class JsonFileSink:
    """Output accounts and rejection records to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any], flat: bool = True) -> Path:
        """Write a batch of records to ``<entity_type>.json``.

        ``flat`` records are converted field by field; pass ``flat=False``
        for records holding nested dataclasses.
        """
        file_path = self.output_dir / f"{entity_type}.json"
        convert = to_dict_fast if flat else to_dict
        data = [convert(r) if is_dataclass(r) else to_dict(r) for r in records]

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False, default=str)
                else:
                    json.dump(data, f, ensure_ascii=False, default=str)
        except OSError as e:
            raise SinkError(f"Cannot write {file_path}") from e

        self._counts[entity_type] = len(records)
        return file_path

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")
