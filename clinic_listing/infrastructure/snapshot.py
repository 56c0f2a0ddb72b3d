"""
Record snapshot loading for the clinic listing CLI.

The persistence layer exports listings as CSV or JSON snapshots; this module
turns them into validated, immutable Record tuples. All I/O the project does
lives here, decoupled from the pure pipeline.

CSV snapshots carry a header row with the ``SNAPSHOT_COLUMNS`` names (``kind``
is optional). JSON snapshots are a top-level array of record objects.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from pydantic import TypeAdapter, ValidationError

from clinic_listing.domain.models import Record
from clinic_listing.exceptions import SnapshotError
from clinic_listing.utils.logging import get_logger

log = get_logger(__name__)

SNAPSHOT_COLUMNS: Tuple[str, ...] = (
    "id",
    "name",
    "description",
    "is_active",
    "display_order",
    "is_deleted",
    "created_at",
    "kind",
)
REQUIRED_COLUMNS = frozenset({"id", "name", "created_at"})

_RECORD_LIST = TypeAdapter(List[Record])


def _clean_csv_row(row: Dict[str, Any]) -> Dict[str, Any]:
    # Empty cells mean "not provided" so model defaults apply.
    return {
        key.strip(): value
        for key, value in row.items()
        if key is not None and value is not None and str(value).strip() != ""
    }


def _describe_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def read_csv_snapshot(path: Path) -> Tuple[Record, ...]:
    try:
        with path.open("r", newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            header = set(reader.fieldnames or ())
            missing = REQUIRED_COLUMNS - header
            if missing:
                raise SnapshotError(
                    f"{path}: missing required column(s): {', '.join(sorted(missing))}"
                )
            records: List[Record] = []
            # Row 1 is the header.
            for line_no, row in enumerate(reader, start=2):
                try:
                    records.append(Record.model_validate(_clean_csv_row(row)))
                except ValidationError as exc:
                    raise SnapshotError(f"{path}: row {line_no}: {_describe_error(exc)}") from exc
    except OSError as exc:
        raise SnapshotError(f"{path}: cannot read snapshot ({exc.strerror or exc})") from exc
    return tuple(records)


def read_json_snapshot(path: Path) -> Tuple[Record, ...]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"{path}: cannot read snapshot ({exc.strerror or exc})") from exc
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"{path}: invalid JSON at line {exc.lineno}: {exc.msg}") from exc
    if not isinstance(payload, list):
        raise SnapshotError(f"{path}: expected a JSON array of records")
    try:
        return tuple(_RECORD_LIST.validate_python(payload))
    except ValidationError as exc:
        raise SnapshotError(f"{path}: {_describe_error(exc)}") from exc


_READERS = {
    ".csv": read_csv_snapshot,
    ".json": read_json_snapshot,
}


def load_snapshot(path: Path | str) -> Tuple[Record, ...]:
    """
    Load a record snapshot, choosing the format from the file suffix.

    Raises
    ------
    SnapshotError
        If the suffix is unsupported, the file cannot be read, or any row
        fails validation.
    """
    snapshot_path = Path(path)
    reader = _READERS.get(snapshot_path.suffix.lower())
    if reader is None:
        raise SnapshotError(
            f"{snapshot_path}: unsupported snapshot format "
            f"'{snapshot_path.suffix}'. Supported: {', '.join(sorted(_READERS))}"
        )
    records = reader(snapshot_path)
    log.info("Snapshot loaded", extra={"path": str(snapshot_path), "records": len(records)})
    return records


def write_csv_snapshot(path: Path, records: Iterable[Record]) -> int:
    """Write ``records`` in the CSV snapshot layout and return the row count."""
    count = 0
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(SNAPSHOT_COLUMNS)
        for record in records:
            row = record.model_dump(mode="json")
            writer.writerow(
                ["" if row[column] is None else row[column] for column in SNAPSHOT_COLUMNS]
            )
            count += 1
    return count


__all__ = [
    "SNAPSHOT_COLUMNS",
    "load_snapshot",
    "read_csv_snapshot",
    "read_json_snapshot",
    "write_csv_snapshot",
]
