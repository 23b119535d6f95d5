"""Command-line interface for custom reports."""

import argparse
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from custom_reports import __version__
from custom_reports.config import (
    OutputConfig,
    Settings,
    load_ledger,
    load_report,
    load_settings,
)
from custom_reports.exceptions import ReportError
from custom_reports.models.options import ReportOptions
from custom_reports.models.report import ReportPayload
from custom_reports.processing.report_generator import generate_report
from custom_reports.sources.memory import InMemoryDataSource
from custom_reports.utils.logging_config import get_logger, setup_logging

# Load environment variables from .env file (if it exists)
load_dotenv()

console = Console()
logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog="custom-reports",
        description="Build interval/group spending reports from a ledger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s reports/spending.yaml --ledger ledger.yaml
  %(prog)s reports/budget.yaml -l ledger.yaml -o out/budget.xlsx --format xlsx
  %(prog)s reports/spending.yaml -l ledger.yaml --validate-only
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "report",
        type=Path,
        help="Report definition (YAML)",
    )

    parser.add_argument(
        "-l", "--ledger",
        type=Path,
        required=True,
        help="Ledger with categories, accounts, transactions and budgets (YAML)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config/settings.yaml"),
        help="Path to settings.yaml (default: config/settings.yaml)",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Export the report to this path (file for json/xlsx, directory for csv)",
    )

    parser.add_argument(
        "--format",
        choices=["json", "csv", "xlsx"],
        default=None,
        help="Export format (default: from settings, json)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase output verbosity (-v, -vv)",
    )

    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Validate the report definition and ledger only",
    )

    return parser


def get_log_level(verbosity: int) -> str:
    """Convert verbosity count to log level.

    Args:
        verbosity: Number of -v flags.

    Returns:
        Log level string.
    """
    if verbosity >= 2:
        return "DEBUG"
    elif verbosity >= 1:
        return "INFO"
    else:
        return "WARNING"


def display_report(
    payload: ReportPayload, options: ReportOptions, output_config: OutputConfig
) -> None:
    """Print the interval series, group totals and legend.

    Args:
        payload: Finished report.
        options: Options the report ran with.
        output_config: Amount formatting.
    """
    fmt = output_config.format_amount
    metric = options.balance_type

    table = Table(
        title=f"{metric.value} by {options.group_by.value} ({options.interval.value})"
    )
    table.add_column("Interval")
    for group in payload.data:
        table.add_column(group.name, justify="right")
    table.add_column("Total", justify="right", style="bold")

    # Total is the sum of the row's cells, in the same sign as the chart values
    for record in payload.interval_data:
        values = [record.stacked.get(group.name, 0) for group in payload.data]
        table.add_row(record.date, *(fmt(v) for v in values), fmt(sum(values)))
    console.print(table)

    console.print("\n[bold]Totals[/bold]")
    console.print(f"  Total assets: {fmt(payload.total_assets)}")
    console.print(f"  Total debts: {fmt(payload.total_debts)}")
    console.print(f"  Net assets: {fmt(payload.net_assets)}")
    console.print(f"  Net debts: {fmt(payload.net_debts)}")
    console.print(f"  Net total: {fmt(payload.total_totals)}")
    if payload.budgeted is not None:
        console.print(f"  Budgeted: {fmt(payload.budgeted)}")
        console.print(f"  Budget balance: {fmt(payload.budget_balance or 0)}")

    if payload.legend:
        console.print("\n[bold]Legend[/bold]")
        for entry in payload.legend:
            console.print(f"  [{entry.color}]■[/] {entry.name}")


def export_report(
    payload: ReportPayload, output: Path, output_format: str, output_config: OutputConfig
) -> list[Path]:
    """Write the report in the requested format.

    Returns:
        Paths of the created files.
    """
    from custom_reports.output import CSVExporter, ExcelWriter, JSONExporter

    if output_format == "csv":
        return CSVExporter(output_config).export(output, payload)
    if output_format == "xlsx":
        ExcelWriter(output_config).write(output, payload)
        return [output]
    return [JSONExporter().export(output, payload)]


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings: Settings = load_settings(args.config)
    except (ReportError, FileNotFoundError) as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    log_level = get_log_level(args.verbose) if args.verbose else settings.logging.level
    setup_logging(
        level=log_level,
        log_file=settings.logging.file,
        console_output=args.verbose > 0,
    )

    try:
        ledger = load_ledger(args.ledger)
        options = load_report(args.report, ledger)
    except (ReportError, FileNotFoundError) as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    if args.validate_only:
        console.print("[green]Report definition and ledger are valid.[/green]")
        return 0

    try:
        payload = asyncio.run(generate_report(InMemoryDataSource(ledger), options))
    except ReportError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    if payload is None:
        console.print("[yellow]Nothing to report: no groups for this grouping.[/yellow]")
        return 0

    display_report(payload, options, settings.output)

    if args.output is not None:
        output_format = args.format or settings.output.format
        created = export_report(payload, args.output, output_format, settings.output)
        for path in created:
            console.print(f"[dim]Wrote {path}[/dim]")

    return 0


if __name__ == "__main__":
    sys.exit(main())
