from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from clinic_listing.domain.models import ListingResult, Page, Statistics
from clinic_listing.utils.profiler import ProfileStats


def _yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"


def build_page_table(page: Page, title: str = "Records") -> Table:
    """
    Render one page of records as a rich table.

    The caption carries the "showing X-Y of N" summary and page position.
    """
    if page.items:
        caption = (
            f"Showing {page.first_item_index}-{page.last_item_index} of {page.total_count} "
            f"│ page {page.page_number}/{page.total_pages}"
        )
    else:
        caption = f"No records on page {page.page_number} ({page.total_count} matching)"

    table = Table(title=title, box=box.ROUNDED, caption=caption)
    table.add_column("ID", justify="right", style="magenta", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Description", style="dim")
    table.add_column("Order", justify="right")
    table.add_column("Active", justify="center")
    table.add_column("Deleted", justify="center")
    table.add_column("Created", style="green", no_wrap=True)

    for record in page.items:
        table.add_row(
            str(record.id),
            record.name,
            record.description or "",
            str(record.display_order),
            _yes_no(record.is_active),
            _yes_no(record.is_deleted),
            record.created_at.strftime("%Y-%m-%d %H:%M"),
        )
    return table


def build_statistics_table(statistics: Statistics) -> Table:
    table = Table(title="Statistics", box=box.ROUNDED)
    table.add_column("Total", justify="right", style="bold")
    table.add_column("Active", justify="right", style="green")
    table.add_column("Inactive", justify="right", style="yellow")
    table.add_column("Deleted", justify="right", style="red")
    table.add_column("Created today", justify="right", style="cyan")
    table.add_row(
        f"{statistics.total_count:,}",
        f"{statistics.active_count:,}",
        f"{statistics.inactive_count:,}",
        f"{statistics.deleted_count:,}",
        f"{statistics.created_today_count:,}",
    )
    return table


def print_statistics(statistics: Statistics, console: Optional[Console] = None) -> None:
    (console or Console()).print(build_statistics_table(statistics))


def print_listing(
    result: ListingResult,
    title: str = "Records",
    profile: Optional[ProfileStats] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Print the statistics header followed by the requested page.

    When ``profile`` is given, a one-line timing/memory summary follows.
    """
    console = console or Console()
    console.print(build_statistics_table(result.statistics))
    console.print(build_page_table(result.page, title=title))

    if profile is not None:
        mem_mb = (profile.peak_rss_bytes or 0) / (1024 * 1024)
        traced_kb = (profile.peak_traced_bytes or 0) / 1024
        console.print(
            f"[dim]{profile.label}: {profile.duration_seconds * 1000:.2f} ms, "
            f"peak RSS {mem_mb:.2f} MB, peak traced {traced_kb:.1f} KB[/dim]"
        )


__all__ = [
    "build_page_table",
    "build_statistics_table",
    "print_listing",
    "print_statistics",
]
