from __future__ import annotations

import tempfile
import unittest
from datetime import date
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from analyzer_core.export import CSV_HEADER, export_csv, export_filename, rows_to_csv, write_artifact  # noqa: E402
from analyzer_core.models import ComponentInventory  # noqa: E402
from analyzer_core.viewmodel import derive  # noqa: E402


def _rows(search: str = ""):
    inventory = ComponentInventory.from_lists(
        {
            "omniscripts": [{"id": "1", "name": "Foo"}],
            "flows": [
                {
                    "id": "3",
                    "name": "Case Escalation",
                    "status": "Active",
                    "description": 'Routes "urgent" cases',
                    "lastModified": "2024-02-01T10:00:00.000Z",
                }
            ],
            "lwc": [{"id": "2", "name": "Bar"}],
        }
    )
    return derive(inventory, "all", search)


class CsvTests(unittest.TestCase):
    def test_single_row_example(self):
        self.assertEqual(
            rows_to_csv(_rows("foo")),
            'Component Type,Name,Status,Description,Last Modified\n"OmniScript","Foo","N/A","","N/A"\n',
        )

    def test_full_row_and_unescaped_quotes(self):
        lines = rows_to_csv(_rows("escalation")).splitlines()
        self.assertEqual(
            lines[1],
            '"Flow","Case Escalation","Active","Routes "urgent" cases","2024-02-01T10:00:00.000Z"',
        )

    def test_rows_follow_derivation_order(self):
        lines = rows_to_csv(_rows()).splitlines()
        self.assertEqual([line.split(",")[0] for line in lines[1:]], ['"OmniScript"', '"LWC"', '"Flow"'])

    def test_empty_rows_is_header_only(self):
        self.assertEqual(rows_to_csv([]), CSV_HEADER)


class ArtifactTests(unittest.TestCase):
    def test_filename_uses_date(self):
        self.assertEqual(export_filename(date(2025, 1, 7)), "salesforce_components_2025-01-07.csv")

    def test_artifact_and_delivery(self):
        artifact = export_csv(_rows("foo"), today=date(2025, 1, 7))
        self.assertEqual(artifact.mime_type, "text/csv")
        self.assertEqual(artifact.filename, "salesforce_components_2025-01-07.csv")
        with tempfile.TemporaryDirectory() as tmp:
            target = write_artifact(artifact, Path(tmp) / "exports")
            self.assertEqual(target.read_bytes(), artifact.content)
            self.assertEqual(target.name, artifact.filename)


if __name__ == "__main__":
    unittest.main()
