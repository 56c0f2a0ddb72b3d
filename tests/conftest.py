"""
Pytest configuration for the clinic listing pipeline.

Provides fixtures for:
- The three-record specialization snapshot used across pipeline tests
- A fixed "now" reference so date-based statistics are deterministic
- Settings isolation (environment overrides + cache reset)
- Snapshot files on disk for loader and CLI tests
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Callable, Generator, List

import pytest

from clinic_listing.config import get_settings
from clinic_listing.domain.models import Record
from clinic_listing.infrastructure.snapshot import write_csv_snapshot

FIXED_NOW = datetime(2024, 6, 1, 15, 30)


def make_record(**overrides) -> Record:
    """Build a Record with sensible defaults for the fields a test does not care about."""
    fields = {
        "id": 1,
        "name": "Cardiology",
        "description": None,
        "is_active": True,
        "display_order": 0,
        "is_deleted": False,
        "created_at": datetime(2024, 1, 1),
    }
    fields.update(overrides)
    return Record(**fields)


@pytest.fixture
def record_factory() -> Callable[..., Record]:
    return make_record


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def specializations() -> List[Record]:
    """
    Cardiology (active, order 2), Derma (inactive, order 1, created "today"),
    ENT (active but soft-deleted, order 3).
    """
    return [
        make_record(
            id=1,
            name="Cardiology",
            is_active=True,
            is_deleted=False,
            display_order=2,
            created_at=datetime(2024, 1, 1),
        ),
        make_record(
            id=2,
            name="Derma",
            is_active=False,
            is_deleted=False,
            display_order=1,
            created_at=datetime(2024, 6, 1),
        ),
        make_record(
            id=3,
            name="ENT",
            is_active=True,
            is_deleted=True,
            display_order=3,
            created_at=datetime(2024, 1, 1),
        ),
    ]


@pytest.fixture
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """
    Run with a clean settings cache and no stray `.env` file.

    Logging is raised to WARNING so CLI output is not interleaved with INFO lines.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("APP_ENV", "LOG_JSON", "LISTING_DEFAULT_PAGE_SIZE", "LISTING_TIMEZONE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def csv_snapshot(tmp_path: Path, specializations: List[Record]) -> Path:
    path = tmp_path / "specializations.csv"
    write_csv_snapshot(path, specializations)
    return path


@pytest.fixture
def json_snapshot(tmp_path: Path, specializations: List[Record]) -> Path:
    path = tmp_path / "specializations.json"
    path.write_text(
        json.dumps([record.model_dump(mode="json") for record in specializations]),
        encoding="utf-8",
    )
    return path
