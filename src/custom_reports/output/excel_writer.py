"""Excel workbook writer for report payloads."""

from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from custom_reports.config import OutputConfig
from custom_reports.models.report import GroupSummary, ReportPayload
from custom_reports.utils.logging_config import get_logger
from custom_reports.utils.sanitize import sanitize_for_csv

logger = get_logger(__name__)


class ExcelWriter:
    """Writes a report payload to a multi-sheet Excel workbook.

    Generates sheets:
    - Intervals (interval series with one column per group)
    - Groups (per-group totals and a totals row)
    - Legend (series names and colors)
    """

    def __init__(self, output_config: OutputConfig | None = None):
        """Initialize Excel writer.

        Args:
            output_config: Output settings (amount formatting).
        """
        self.output_config = output_config or OutputConfig()

        self.header_font = Font(bold=True, color="FFFFFF")
        self.header_fill = PatternFill(
            start_color="4472C4", end_color="4472C4", fill_type="solid"
        )
        self.total_font = Font(bold=True)
        self.money_negative = Font(color="CC0000")  # Dark red
        self.centered = Alignment(horizontal="center")

        decimals = self.output_config.decimal_places
        symbol = self.output_config.currency_symbol
        zeros = "." + "0" * decimals if decimals else ""
        self.money_format = f'"{symbol}"#,##0{zeros};-"{symbol}"#,##0{zeros}'

    def write(self, output_path: Path, payload: ReportPayload) -> None:
        """Write the payload to a workbook.

        Args:
            output_path: Path for output file.
            payload: Report payload.
        """
        logger.info(f"Writing Excel workbook to {output_path}")

        wb = Workbook()
        if wb.active:
            wb.remove(wb.active)

        self._create_interval_sheet(wb, payload)
        self._create_group_sheet(wb, payload)
        self._create_legend_sheet(wb, payload)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(output_path)
        logger.info(f"Excel workbook saved: {output_path}")

    def _money(self, amount: int) -> float:
        return amount / (10 ** self.output_config.decimal_places)

    def _write_header(self, ws: Worksheet, headers: list[str]) -> None:
        for col, header in enumerate(headers, 1):
            cell = ws.cell(row=1, column=col, value=header)
            cell.font = self.header_font
            cell.fill = self.header_fill
            cell.alignment = self.centered
            ws.column_dimensions[get_column_letter(col)].width = max(12, len(header) + 2)
        ws.freeze_panes = "A2"

    def _write_money(self, ws: Worksheet, row: int, col: int, amount: int) -> None:
        cell = ws.cell(row=row, column=col, value=self._money(amount))
        cell.number_format = self.money_format
        if amount < 0:
            cell.font = self.money_negative

    def _create_interval_sheet(self, wb: Workbook, payload: ReportPayload) -> None:
        ws = wb.create_sheet("Intervals")
        group_names = [group.name for group in payload.data]
        with_budget = payload.budgeted is not None

        headers = ["Interval", "Start", "End"]
        headers += [sanitize_for_csv(name) or "" for name in group_names]
        headers += ["Total Assets", "Total Debts", "Net Assets", "Net Debts", "Net Total"]
        if with_budget:
            headers += ["Budgeted", "Budget Balance"]
        self._write_header(ws, headers)

        for row, record in enumerate(payload.interval_data, 2):
            ws.cell(row=row, column=1, value=record.date)
            ws.cell(row=row, column=2, value=record.interval_start_date)
            ws.cell(row=row, column=3, value=record.interval_end_date)
            amounts = [record.stacked.get(name, 0) for name in group_names]
            amounts += [
                record.total_assets,
                record.total_debts,
                record.net_assets,
                record.net_debts,
                record.total_totals,
            ]
            if with_budget:
                amounts += [record.budgeted or 0, record.budget_balance or 0]
            for col, amount in enumerate(amounts, 4):
                self._write_money(ws, row, col, amount)

    def _create_group_sheet(self, wb: Workbook, payload: ReportPayload) -> None:
        ws = wb.create_sheet("Groups")
        with_budget = payload.budgeted is not None

        headers = ["Group", "Total Assets", "Total Debts", "Net Assets", "Net Debts", "Net Total"]
        if with_budget:
            headers += ["Budgeted", "Budget Balance"]
        self._write_header(ws, headers)

        row = 2
        for group in payload.data:
            ws.cell(row=row, column=1, value=sanitize_for_csv(group.name))
            self._write_amounts(ws, row, group, with_budget)
            row += 1

        total_cell = ws.cell(row=row, column=1, value="Total")
        total_cell.font = self.total_font
        self._write_amounts(ws, row, payload, with_budget)

    def _write_amounts(
        self,
        ws: Worksheet,
        row: int,
        source: GroupSummary | ReportPayload,
        with_budget: bool,
    ) -> None:
        amounts = [
            source.total_assets,
            source.total_debts,
            source.net_assets,
            source.net_debts,
            source.total_totals,
        ]
        if with_budget:
            amounts += [source.budgeted or 0, source.budget_balance or 0]
        for col, amount in enumerate(amounts, 2):
            self._write_money(ws, row, col, amount)

    def _create_legend_sheet(self, wb: Workbook, payload: ReportPayload) -> None:
        ws = wb.create_sheet("Legend")
        self._write_header(ws, ["Series", "Color"])
        for row, entry in enumerate(payload.legend, 2):
            ws.cell(row=row, column=1, value=sanitize_for_csv(entry.name))
            color_cell = ws.cell(row=row, column=2, value=entry.color)
            hex_color = entry.color.lstrip("#").upper()
            color_cell.fill = PatternFill(
                start_color=hex_color, end_color=hex_color, fill_type="solid"
            )
