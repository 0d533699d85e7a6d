"""CSV export of the currently visible component rows."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path

from analyzer_core.models import DerivedRow

CSV_HEADER = "Component Type,Name,Status,Description,Last Modified\n"
EXPORT_BASENAME = "salesforce_components"
CSV_MIME_TYPE = "text/csv"


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    content: bytes
    mime_type: str = CSV_MIME_TYPE


def export_filename(today: date | None = None) -> str:
    day = today or datetime.now(timezone.utc).date()
    return f"{EXPORT_BASENAME}_{day.isoformat()}.csv"


def _csv_line(row: DerivedRow) -> str:
    record = row.record
    # Values are quoted but embedded quotes are written as-is.
    fields = (
        row.component_type,
        record.name,
        record.status or "N/A",
        record.description or "",
        record.last_modified or "N/A",
    )
    return ",".join(f'"{value}"' for value in fields) + "\n"


def rows_to_csv(rows: list[DerivedRow]) -> str:
    return CSV_HEADER + "".join(_csv_line(row) for row in rows)


def export_csv(rows: list[DerivedRow], today: date | None = None) -> ExportArtifact:
    return ExportArtifact(filename=export_filename(today), content=rows_to_csv(rows).encode("utf-8"))


def write_artifact(artifact: ExportArtifact, directory: Path) -> Path:
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / artifact.filename
    target.write_bytes(artifact.content)
    return target
