"""CSV export of report series for spreadsheet import."""

import csv
from pathlib import Path

from custom_reports.config import OutputConfig
from custom_reports.models.report import GroupSummary, ReportPayload
from custom_reports.utils.logging_config import get_logger
from custom_reports.utils.sanitize import sanitize_for_csv

logger = get_logger(__name__)


class CSVExporter:
    """Exports a report payload to CSV files.

    Creates two files in the output directory:
    - interval_data.csv (one row per interval, one column per group)
    - group_data.csv (one row per group, plus a totals row)
    """

    def __init__(self, output_config: OutputConfig | None = None):
        """Initialize CSV exporter.

        Args:
            output_config: Output settings (amount formatting).
        """
        self.output_config = output_config or OutputConfig()

    def export(self, base_dir: Path, payload: ReportPayload) -> list[Path]:
        """Export the payload.

        Args:
            base_dir: Output directory.
            payload: Report payload.

        Returns:
            List of paths to created CSV files.
        """
        base_dir.mkdir(parents=True, exist_ok=True)
        created_files = [
            self._export_interval_data(base_dir, payload),
            self._export_group_data(base_dir, payload),
        ]
        logger.info(f"Exported {len(created_files)} CSV files")
        return created_files

    def _budget_columns(self, payload: ReportPayload) -> bool:
        return payload.budgeted is not None

    def _export_interval_data(self, base_dir: Path, payload: ReportPayload) -> Path:
        output_path = base_dir / "interval_data.csv"
        group_names = [group.name for group in payload.data]
        with_budget = self._budget_columns(payload)
        fmt = self.output_config.format_amount

        with open(output_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            header = ["Interval", "Start", "End"]
            header += [sanitize_for_csv(name) for name in group_names]
            header += ["Total Assets", "Total Debts", "Net Assets", "Net Debts", "Net Total"]
            if with_budget:
                header += ["Budgeted", "Budget Balance"]
            writer.writerow(header)

            for record in payload.interval_data:
                row = [
                    record.date,
                    record.interval_start_date.isoformat(),
                    record.interval_end_date.isoformat(),
                ]
                row += [fmt(record.stacked.get(name, 0)) for name in group_names]
                row += [
                    fmt(record.total_assets),
                    fmt(record.total_debts),
                    fmt(record.net_assets),
                    fmt(record.net_debts),
                    fmt(record.total_totals),
                ]
                if with_budget:
                    row += [fmt(record.budgeted or 0), fmt(record.budget_balance or 0)]
                writer.writerow(row)

        return output_path

    def _export_group_data(self, base_dir: Path, payload: ReportPayload) -> Path:
        output_path = base_dir / "group_data.csv"
        with_budget = self._budget_columns(payload)

        with open(output_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            header = ["Group", "Total Assets", "Total Debts", "Net Assets", "Net Debts", "Net Total"]
            if with_budget:
                header += ["Budgeted", "Budget Balance"]
            writer.writerow(header)

            for group in payload.data:
                writer.writerow(
                    [sanitize_for_csv(group.name)] + self._amount_cells(group, with_budget)
                )
            writer.writerow(["Total"] + self._amount_cells(payload, with_budget))

        return output_path

    def _amount_cells(
        self, source: GroupSummary | ReportPayload, with_budget: bool
    ) -> list[str]:
        fmt = self.output_config.format_amount
        cells = [
            fmt(source.total_assets),
            fmt(source.total_debts),
            fmt(source.net_assets),
            fmt(source.net_debts),
            fmt(source.total_totals),
        ]
        if with_budget:
            cells += [fmt(source.budgeted or 0), fmt(source.budget_balance or 0)]
        return cells
