"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest

from custom_reports.cli import create_parser, get_log_level, main

LEDGER_YAML = """
category_groups:
  - id: food
    name: Food
    categories:
      - id: groceries
        name: Groceries
      - id: restaurants
        name: Restaurants
accounts:
  - id: checking
    name: Checking
transactions:
  - {date: 2024-01-05, amount: -10000, account: checking, category: groceries}
  - {date: 2024-02-03, amount: -5000, account: checking, category: groceries}
  - {date: 2024-02-14, amount: -2500, account: checking, category: restaurants}
budgets:
  - {month: 2024-01, category: groceries, amount: -20000}
"""

REPORT_YAML = """
start_date: 2024-01-01
end_date: 2024-02-29
interval: Monthly
group_by: Category
balance_type: totalDebts
"""


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Directory holding a ledger, a report and settings that log inside it."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "ledger.yaml").write_text(LEDGER_YAML, encoding="utf-8")
    (tmp_path / "report.yaml").write_text(REPORT_YAML, encoding="utf-8")
    (tmp_path / "settings.yaml").write_text(
        f"logging:\n  file: {tmp_path / 'test.log'}\n", encoding="utf-8"
    )
    return tmp_path


def run_cli(workspace: Path, *extra: str, report: str = "report.yaml") -> int:
    """Helper to run main() against the workspace files."""
    return main(
        [
            str(workspace / report),
            "--ledger", str(workspace / "ledger.yaml"),
            "--config", str(workspace / "settings.yaml"),
            *extra,
        ]
    )


class TestParser:
    """Tests for argument parsing."""

    def test_required_ledger(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["report.yaml"])

    def test_defaults(self) -> None:
        args = create_parser().parse_args(["report.yaml", "-l", "ledger.yaml"])

        assert args.report == Path("report.yaml")
        assert args.config == Path("config/settings.yaml")
        assert args.output is None
        assert args.format is None
        assert args.verbose == 0

    def test_log_levels(self) -> None:
        assert get_log_level(0) == "WARNING"
        assert get_log_level(1) == "INFO"
        assert get_log_level(3) == "DEBUG"


class TestMain:
    """Tests for main()."""

    def test_prints_report(self, workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli(workspace) == 0

        out = capsys.readouterr().out
        assert "Groceries" in out
        assert "-$175.00" in out

    def test_interval_total_matches_cells(
        self, workspace: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Row totals use the same sign as the per-group debt cells."""
        assert run_cli(workspace) == 0

        out = capsys.readouterr().out
        assert "$100.00" in out
        assert "-$100.00" not in out
        assert "$75.00" in out
        assert "-$75.00" not in out

    def test_malformed_ledger(self, workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (workspace / "ledger.yaml").write_text(
            LEDGER_YAML.replace("amount: -10000", "amount: lots"), encoding="utf-8"
        )

        assert run_cli(workspace) == 1
        assert "lots" in capsys.readouterr().out

    def test_validate_only(self, workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli(workspace, "--validate-only") == 0
        assert "valid" in capsys.readouterr().out

    def test_json_export(self, workspace: Path) -> None:
        output = workspace / "out" / "report.json"

        assert run_cli(workspace, "-o", str(output)) == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["total_debts"] == -17500
        assert [g["name"] for g in data["data"]] == ["Groceries", "Restaurants"]

    def test_csv_export(self, workspace: Path) -> None:
        output = workspace / "csv"

        assert run_cli(workspace, "-o", str(output), "--format", "csv") == 0
        assert (output / "interval_data.csv").exists()
        assert (output / "group_data.csv").exists()

    def test_xlsx_export(self, workspace: Path) -> None:
        output = workspace / "report.xlsx"

        assert run_cli(workspace, "-o", str(output), "--format", "xlsx") == 0
        assert output.exists()

    def test_log_file_from_settings(self, workspace: Path) -> None:
        assert run_cli(workspace) == 0
        assert (workspace / "test.log").exists()

    def test_missing_report(self, workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli(workspace, report="missing.yaml") == 1
        assert "not found" in capsys.readouterr().out

    def test_invalid_report(self, workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (workspace / "bad.yaml").write_text(
            "start_date: 2024-03-01\nend_date: 2024-01-01\n", encoding="utf-8"
        )

        assert run_cli(workspace, report="bad.yaml") == 1
        assert "end_date" in capsys.readouterr().out

    def test_untranslatable_condition(self, workspace: Path) -> None:
        (workspace / "cond.yaml").write_text(
            REPORT_YAML + "conditions:\n  - {field: imported_payee, op: is, value: x}\n",
            encoding="utf-8",
        )
        assert run_cli(workspace, report="cond.yaml") == 1

    def test_nothing_to_report(self, workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (workspace / "payees.yaml").write_text(
            REPORT_YAML.replace("group_by: Category", "group_by: Payee"), encoding="utf-8"
        )

        assert run_cli(workspace, report="payees.yaml") == 0
        assert "Nothing to report" in capsys.readouterr().out
