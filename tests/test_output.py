"""Tests for JSON, CSV and Excel exports."""

import csv
import json
from datetime import date
from pathlib import Path

import pytest
from openpyxl import load_workbook

from custom_reports.config import OutputConfig
from custom_reports.models.report import (
    GroupIntervalRecord,
    GroupSummary,
    IntervalRecord,
    LegendEntry,
    ReportPayload,
)
from custom_reports.output import CSVExporter, ExcelWriter, JSONExporter, payload_to_dict


def create_payload(with_budget: bool = False) -> ReportPayload:
    """Helper to create a two-group, two-interval payload."""
    budget = {"budgeted": 30000, "budget_balance": -5000} if with_budget else {}
    intervals = [
        IntervalRecord(
            date="Jan '24",
            label="2024-01",
            interval_start_date=date(2024, 1, 1),
            interval_end_date=date(2024, 1, 31),
            stacked={"Groceries": 10000, "=Danger": 2500},
            total_debts=-12500,
            net_debts=-12500,
            total_totals=-12500,
            **budget,
        ),
        IntervalRecord(
            date="Feb '24",
            label="2024-02",
            interval_start_date=date(2024, 2, 1),
            interval_end_date=date(2024, 2, 15),
            stacked={"Groceries": 5000, "=Danger": 0},
            total_debts=-5000,
            net_debts=-5000,
            total_totals=-5000,
            **budget,
        ),
    ]
    groups = [
        GroupSummary(
            id="groceries",
            name="Groceries",
            total_debts=-15000,
            net_debts=-15000,
            total_totals=-15000,
            interval_data=(
                GroupIntervalRecord(
                    date="2024-01",
                    interval_start_date=date(2024, 1, 1),
                    interval_end_date=date(2024, 1, 31),
                    total_debts=-10000,
                ),
            ),
            **budget,
        ),
        GroupSummary(id="danger", name="=Danger", total_debts=-2500, total_totals=-2500),
    ]
    return ReportPayload(
        data=groups,
        interval_data=intervals,
        legend=[
            LegendEntry(id="groceries", name="Groceries", color="#45B29D"),
            LegendEntry(id="danger", name="=Danger", color="#EFC94C"),
        ],
        start_date=date(2024, 1, 1),
        end_date=date(2024, 2, 15),
        total_assets=0,
        total_debts=-17500,
        net_assets=0,
        net_debts=-17500,
        total_totals=-17500,
        **budget,
    )


class TestJSONExport:
    """Tests for payload_to_dict and JSONExporter."""

    def test_dates_are_iso_strings(self) -> None:
        data = payload_to_dict(create_payload())

        assert data["start_date"] == "2024-01-01"
        assert data["interval_data"][1]["interval_end_date"] == "2024-02-15"
        assert data["data"][0]["interval_data"][0]["date"] == "2024-01"

    def test_budget_keys_omitted_unless_requested(self) -> None:
        data = payload_to_dict(create_payload())

        assert "budgeted" not in data
        assert "budgeted" not in data["interval_data"][0]
        assert "budget_balance" not in data["data"][0]

    def test_budget_keys_present_when_requested(self) -> None:
        data = payload_to_dict(create_payload(with_budget=True))

        assert data["budgeted"] == 30000
        assert data["interval_data"][0]["budget_balance"] == -5000
        assert data["data"][0]["budgeted"] == 30000

    def test_export_writes_file(self, tmp_path: Path) -> None:
        path = JSONExporter().export(tmp_path / "out" / "report.json", create_payload())

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["interval_data"][0]["stacked"] == {"Groceries": 10000, "=Danger": 2500}
        assert [entry["color"] for entry in data["legend"]] == ["#45B29D", "#EFC94C"]


class TestCSVExport:
    """Tests for CSVExporter."""

    def read_rows(self, path: Path) -> list[list[str]]:
        with open(path, newline="", encoding="utf-8") as f:
            return list(csv.reader(f))

    def test_creates_two_files(self, tmp_path: Path) -> None:
        created = CSVExporter().export(tmp_path, create_payload())
        assert [p.name for p in created] == ["interval_data.csv", "group_data.csv"]

    def test_interval_rows(self, tmp_path: Path) -> None:
        interval_path, _ = CSVExporter().export(tmp_path, create_payload())
        rows = self.read_rows(interval_path)

        assert rows[0][:5] == ["Interval", "Start", "End", "Groceries", "'=Danger"]
        assert rows[1][:5] == ["Jan '24", "2024-01-01", "2024-01-31", "$100.00", "$25.00"]
        assert "Budgeted" not in rows[0]

    def test_group_rows_end_with_total(self, tmp_path: Path) -> None:
        _, group_path = CSVExporter().export(tmp_path, create_payload())
        rows = self.read_rows(group_path)

        assert [row[0] for row in rows] == ["Group", "Groceries", "'=Danger", "Total"]
        assert rows[-1][2] == "-$175.00"

    def test_budget_columns(self, tmp_path: Path) -> None:
        config = OutputConfig(currency_symbol="€")
        _, group_path = CSVExporter(config).export(tmp_path, create_payload(with_budget=True))
        rows = self.read_rows(group_path)

        assert rows[0][-2:] == ["Budgeted", "Budget Balance"]
        assert rows[1][-2:] == ["€300.00", "-€50.00"]


class TestExcelWriter:
    """Tests for ExcelWriter."""

    @pytest.fixture
    def workbook_path(self, tmp_path: Path) -> Path:
        path = tmp_path / "report.xlsx"
        ExcelWriter().write(path, create_payload())
        return path

    def test_sheets(self, workbook_path: Path) -> None:
        wb = load_workbook(workbook_path)
        assert wb.sheetnames == ["Intervals", "Groups", "Legend"]

    def test_money_cells_in_major_units(self, workbook_path: Path) -> None:
        ws = load_workbook(workbook_path)["Intervals"]

        assert ws.cell(row=1, column=4).value == "Groceries"
        assert ws.cell(row=2, column=4).value == 100
        assert ws.cell(row=2, column=7).value == -125

    def test_group_sheet_totals_row(self, workbook_path: Path) -> None:
        ws = load_workbook(workbook_path)["Groups"]

        assert ws.cell(row=4, column=1).value == "Total"
        assert ws.cell(row=4, column=3).value == -175
        assert ws.cell(row=3, column=1).value == "'=Danger"

    def test_legend_colors(self, workbook_path: Path) -> None:
        ws = load_workbook(workbook_path)["Legend"]

        assert ws.cell(row=2, column=2).value == "#45B29D"
        assert ws.cell(row=2, column=2).fill.start_color.rgb.endswith("45B29D")
