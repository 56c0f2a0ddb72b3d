"""
Infrastructure package for the clinic listing pipeline.

Centralizes snapshot I/O (reading exported record sets from CSV/JSON).
Keep this layer focused on I/O, decoupled from the pure query pipeline.
"""

from clinic_listing.infrastructure.snapshot import (
    SNAPSHOT_COLUMNS,
    load_snapshot,
    read_csv_snapshot,
    read_json_snapshot,
    write_csv_snapshot,
)

__all__ = [
    "SNAPSHOT_COLUMNS",
    "load_snapshot",
    "read_csv_snapshot",
    "read_json_snapshot",
    "write_csv_snapshot",
]
