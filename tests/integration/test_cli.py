"""
End-to-end tests for the `clinic-listing` CLI.

These run the typer app in-process against snapshot files written to a temp
directory, covering argument parsing, snapshot loading, the pipeline and both
output modes (rich tables and JSON).
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from clinic_listing.config import get_settings
from clinic_listing.main import app

pytestmark = pytest.mark.usefixtures("isolated_settings")

runner = CliRunner()


def _json_output(result) -> dict:
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


class TestListCommand:
    def test_json_listing_by_display_order(self, csv_snapshot: Path):
        payload = _json_output(
            runner.invoke(app, ["list", str(csv_snapshot), "--sort-by", "displayorder", "--json"])
        )

        assert [item["name"] for item in payload["page"]["items"]] == ["Derma", "Cardiology"]
        assert payload["page"]["total_count"] == 2
        assert payload["page"]["total_pages"] == 1
        assert payload["statistics"]["total_count"] == 3
        assert payload["statistics"]["deleted_count"] == 1

    def test_second_page(self, json_snapshot: Path):
        payload = _json_output(
            runner.invoke(
                app,
                ["list", str(json_snapshot), "-s", "displayorder", "-n", "1", "-p", "2", "--json"],
            )
        )

        assert [item["name"] for item in payload["page"]["items"]] == ["Cardiology"]
        assert payload["page"]["has_previous_page"] is True
        assert payload["page"]["has_next_page"] is False

    def test_search_and_filters(self, csv_snapshot: Path):
        payload = _json_output(
            runner.invoke(app, ["list", str(csv_snapshot), "-q", "derm", "--json"])
        )
        assert [item["id"] for item in payload["page"]["items"]] == [2]

        payload = _json_output(
            runner.invoke(
                app,
                ["list", str(csv_snapshot), "--active", "--include-deleted", "--json"],
            )
        )
        assert [item["id"] for item in payload["page"]["items"]] == [1, 3]

        payload = _json_output(
            runner.invoke(
                app,
                ["list", str(csv_snapshot), "--from", "2024-03-01", "--to", "2024-12-31", "--json"],
            )
        )
        assert [item["id"] for item in payload["page"]["items"]] == [2]

    def test_descending_name_sort(self, csv_snapshot: Path):
        payload = _json_output(
            runner.invoke(
                app,
                ["list", str(csv_snapshot), "--sort-by", "name", "--sort-order", "DESC", "--json"],
            )
        )
        assert payload["criteria"]["sort_order"] == "desc"
        assert [item["name"] for item in payload["page"]["items"]] == ["Derma", "Cardiology"]

    def test_invalid_paging_is_normalized(self, csv_snapshot: Path):
        payload = _json_output(
            runner.invoke(app, ["list", str(csv_snapshot), "-p", "0", "-n", "0", "--json"])
        )
        assert payload["criteria"]["page_number"] == 1
        assert payload["criteria"]["page_size"] == 10

    def test_default_page_size_comes_from_settings(self, csv_snapshot: Path, monkeypatch):
        monkeypatch.setenv("LISTING_DEFAULT_PAGE_SIZE", "1")
        get_settings.cache_clear()
        payload = _json_output(runner.invoke(app, ["list", str(csv_snapshot), "--json"]))
        assert payload["page"]["page_size"] == 1
        assert len(payload["page"]["items"]) == 1

    def test_table_output(self, csv_snapshot: Path):
        result = runner.invoke(app, ["list", str(csv_snapshot), "--profile"])

        assert result.exit_code == 0, result.output
        assert "Statistics" in result.stdout
        assert "Specialization listing" in result.stdout
        assert "Cardiology" in result.stdout
        assert "ENT" not in result.stdout
        assert "listing:" in result.stdout
        assert "peak traced" in result.stdout

    def test_profile_line_only_with_profile_flag(self, csv_snapshot: Path):
        result = runner.invoke(app, ["list", str(csv_snapshot)])

        assert result.exit_code == 0, result.output
        assert "peak RSS" not in result.stdout

    def test_aware_snapshot_with_naive_date_bounds(self, tmp_path: Path):
        path = tmp_path / "utc.json"
        path.write_text(
            json.dumps(
                [
                    {"id": 1, "name": "Cardiology", "created_at": "2024-01-01T00:00:00Z"},
                    {"id": 2, "name": "Derma", "created_at": "2022-06-01T00:00:00Z"},
                    {"id": 3, "name": "ENT", "created_at": "2024-03-01T10:00:00+03:30"},
                ]
            ),
            encoding="utf-8",
        )

        payload = _json_output(
            runner.invoke(
                app,
                ["list", str(path), "--from", "2023-01-01", "--sort-by", "createdat", "--json"],
            )
        )
        assert [item["id"] for item in payload["page"]["items"]] == [1, 3]

    def test_missing_snapshot_exits_with_error(self, tmp_path: Path):
        result = runner.invoke(app, ["list", str(tmp_path / "absent.csv")])

        assert result.exit_code == 1
        assert "cannot read snapshot" in result.output


class TestOtherCommands:
    def test_stats_json(self, csv_snapshot: Path):
        payload = _json_output(runner.invoke(app, ["stats", str(csv_snapshot), "--json"]))

        assert payload["total_count"] == 3
        assert payload["active_count"] == 1
        assert payload["inactive_count"] == 1
        assert payload["deleted_count"] == 1

    def test_stats_table(self, csv_snapshot: Path):
        result = runner.invoke(app, ["stats", str(csv_snapshot)])

        assert result.exit_code == 0, result.output
        assert "Created today" in result.stdout

    def test_info(self):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "default_page_size=10" in result.stdout
        assert "displayorder" in result.stdout

    def test_kinds(self):
        result = runner.invoke(app, ["kinds"])

        assert result.exit_code == 0
        assert "specialization" in result.stdout
        assert "service_category" in result.stdout


class TestConfigurationErrors:
    def test_unknown_timezone_exits_with_message(self, csv_snapshot: Path, monkeypatch):
        monkeypatch.setenv("LISTING_TIMEZONE", "Mars/Olympus_Mons")
        get_settings.cache_clear()

        result = runner.invoke(app, ["list", str(csv_snapshot)])

        assert result.exit_code == 1
        assert "unknown LISTING_TIMEZONE" in result.output

    def test_invalid_page_size_setting_exits_with_message(self, csv_snapshot: Path, monkeypatch):
        monkeypatch.setenv("LISTING_DEFAULT_PAGE_SIZE", "0")
        get_settings.cache_clear()

        for command in (["list", str(csv_snapshot)], ["stats", str(csv_snapshot)], ["info"]):
            result = runner.invoke(app, command)
            assert result.exit_code == 1
            assert "invalid setting LISTING_DEFAULT_PAGE_SIZE" in result.output
