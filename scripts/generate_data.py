"""
Synthetic snapshot generator for the clinic listing CLI.

Builds deterministic pseudo-random Records and writes them through
`clinic_listing.infrastructure.snapshot.write_csv_snapshot`, so generated files
use the same CSV layout the loader reads.
"""

from __future__ import annotations

import random
import sys
import tempfile
import time
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterator

import typer

from clinic_listing.domain.models import Record, RecordKind
from clinic_listing.infrastructure.snapshot import write_csv_snapshot

app = typer.Typer(help="Generate synthetic clinic record snapshots (CSV).")

_NAMES = {
    RecordKind.SPECIALIZATION: [
        "Cardiology",
        "Dermatology",
        "ENT",
        "Endocrinology",
        "Gastroenterology",
        "Neurology",
        "Oncology",
        "Ophthalmology",
        "Orthopedics",
        "Pediatrics",
        "Psychiatry",
        "Radiology",
        "Urology",
    ],
    RecordKind.CLINIC: ["Central Clinic", "North Clinic", "Shafa Clinic", "Day Care Center"],
    RecordKind.DOCTOR: ["Dr. Ahmadi", "Dr. Karimi", "Dr. Rezaei", "Dr. Hosseini", "Dr. Moradi"],
    RecordKind.SERVICE: ["Visit", "ECG", "Ultrasound", "Blood Test", "X-Ray", "Injection"],
    RecordKind.SERVICE_CATEGORY: ["Laboratory", "Imaging", "Outpatient", "Procedures"],
    RecordKind.DEPARTMENT: ["Emergency", "Internal Medicine", "Surgery", "Reception"],
}
_DESCRIPTIONS = ["", "General services", "Outpatient only", "Referral required", "Walk-in"]


def _generate_records(
    rows: int,
    seed: int,
    kind: RecordKind = RecordKind.SPECIALIZATION,
    now: datetime | None = None,
) -> Iterator[Record]:
    rng = random.Random(seed)
    names = _NAMES[kind]
    reference = now or datetime.now().replace(microsecond=0)

    for i in range(1, rows + 1):
        base_name = names[(i - 1) % len(names)]
        is_deleted = rng.random() < 0.1
        is_active = rng.random() < 0.75
        created_at = reference - timedelta(
            days=rng.randint(0, 365), minutes=rng.randint(0, 24 * 60 - 1)
        )
        yield Record(
            id=i,
            name=base_name if i <= len(names) else f"{base_name} {i}",
            description=rng.choice(_DESCRIPTIONS) or None,
            is_active=is_active,
            display_order=rng.randint(0, 20),
            is_deleted=is_deleted,
            created_at=created_at,
            kind=kind,
        )


def _generate_rows_csv(
    csv_path: Path,
    rows: int,
    seed: int,
    kind: RecordKind = RecordKind.SPECIALIZATION,
    now: datetime | None = None,
) -> int:
    return write_csv_snapshot(csv_path, _generate_records(rows, seed, kind=kind, now=now))


@app.command()
def main(
    rows: int = typer.Option(
        100,
        "--rows",
        "-r",
        help="Number of records to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    kind: RecordKind = typer.Option(
        RecordKind.SPECIALIZATION,
        "--kind",
        "-k",
        help="Record kind to generate.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Optional CSV output path (if omitted, a temp file will be used).",
    ),
) -> None:
    """
    Generate a synthetic record snapshot as CSV.
    """
    start = time.perf_counter()
    if output:
        csv_path = output
        csv_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        tmpdir = Path(tempfile.mkdtemp(prefix="clinic_snapshot_"))
        csv_path = tmpdir / f"{kind.value}.csv"

    typer.echo(f"Generating {rows:,} {kind.value} records -> {csv_path} (seed={seed})")
    written = _generate_rows_csv(csv_path, rows=rows, seed=seed, kind=kind)
    duration = time.perf_counter() - start
    typer.echo(f"{written:,} records written in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
