from __future__ import annotations

import contextlib
import sys
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import typer
from pydantic import ValidationError

from clinic_listing.config import Settings, get_settings
from clinic_listing.domain.models import Record, RecordKind, SearchCriteria
from clinic_listing.exceptions import ClinicListingError, ConfigurationError
from clinic_listing.infrastructure.snapshot import load_snapshot
from clinic_listing.pipeline import run_listing
from clinic_listing.query.ordering import available_sort_keys
from clinic_listing.query.statistics import compute_statistics
from clinic_listing.reporter import print_listing, print_statistics
from clinic_listing.utils.logging import configure_logging
from clinic_listing.utils.profiler import profile_block

app = typer.Typer(help="Clinic back-office listing CLI.")

_DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


@contextlib.contextmanager
def _exit_on_error() -> Iterator[None]:
    try:
        yield
    except ClinicListingError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(f"invalid setting {location}: {first.get('msg')}") from exc


def _now(settings: Settings) -> datetime:
    if not settings.timezone:
        return datetime.now()
    try:
        zone = ZoneInfo(settings.timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"unknown LISTING_TIMEZONE '{settings.timezone}'") from exc
    return datetime.now(zone)


def _listing_title(records: Tuple[Record, ...]) -> str:
    kinds = {record.kind for record in records}
    if len(kinds) == 1:
        return kinds.pop().value.replace("_", " ").title() + " listing"
    return "Records"


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    with _exit_on_error():
        settings = _settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.log_json} | "
        f"default_page_size={settings.default_page_size} timezone={settings.timezone or 'local'} | "
        f"sort_keys={', '.join(available_sort_keys())}"
    )


@app.command()
def kinds() -> None:
    """
    List the record kinds a snapshot may carry.
    """
    typer.echo("Record kinds: " + ", ".join(kind.value for kind in RecordKind))


@app.command("list")
def list_records(
    snapshot: Path = typer.Argument(..., help="CSV or JSON record snapshot."),
    search: Optional[str] = typer.Option(
        None, "--search", "-q", help="Case-insensitive text matched against name and description."
    ),
    active: Optional[bool] = typer.Option(
        None, "--active/--inactive", help="Only active (or only inactive) records."
    ),
    created_from: Optional[datetime] = typer.Option(
        None, "--from", formats=_DATE_FORMATS, help="Inclusive lower bound on creation time."
    ),
    created_to: Optional[datetime] = typer.Option(
        None, "--to", formats=_DATE_FORMATS, help="Inclusive upper bound on creation time."
    ),
    include_deleted: bool = typer.Option(
        False, "--include-deleted", help="Include soft-deleted records."
    ),
    sort_by: Optional[str] = typer.Option(
        None,
        "--sort-by",
        "-s",
        help="Sort key (name, displayorder, createdat). Unknown keys use the default order.",
    ),
    sort_order: str = typer.Option("asc", "--sort-order", help="asc or desc."),
    page: int = typer.Option(1, "--page", "-p", help="1-based page number."),
    page_size: Optional[int] = typer.Option(
        None, "--page-size", "-n", help="Records per page (default from settings)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit the listing as JSON."),
    profile: bool = typer.Option(False, "--profile", help="Report pipeline time and memory."),
) -> None:
    """
    Filter, sort and paginate a record snapshot, with statistics over the full set.
    """
    with _exit_on_error():
        settings = _settings()
        configure_logging(level=settings.log_level, json_logs=settings.log_json)
        now = _now(settings)
        records = load_snapshot(snapshot)

    criteria = SearchCriteria(
        search_term=search,
        is_active=active,
        created_from=created_from,
        created_to=created_to,
        include_deleted=include_deleted,
        sort_by=sort_by,
        sort_order=sort_order,
        page_number=page,
        page_size=page_size if page_size is not None else settings.default_page_size,
    )

    profiler = profile_block("listing") if profile else contextlib.nullcontext()
    with profiler as profile_stats:
        result = run_listing(records, criteria, now=now)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return
    print_listing(result, title=_listing_title(records), profile=profile_stats)


@app.command()
def stats(
    snapshot: Path = typer.Argument(..., help="CSV or JSON record snapshot."),
    as_json: bool = typer.Option(False, "--json", help="Emit the statistics as JSON."),
) -> None:
    """
    Show summary counts over the full snapshot.
    """
    with _exit_on_error():
        settings = _settings()
        configure_logging(level=settings.log_level, json_logs=settings.log_json)
        now = _now(settings)
        records = load_snapshot(snapshot)

    statistics = compute_statistics(records, now)
    if as_json:
        typer.echo(statistics.model_dump_json(indent=2))
        return
    print_statistics(statistics)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
