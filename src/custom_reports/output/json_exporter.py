"""JSON export of report payloads."""

import json
from pathlib import Path

from custom_reports.models.report import (
    GroupIntervalRecord,
    GroupSummary,
    IntervalRecord,
    LegendEntry,
    ReportPayload,
)
from custom_reports.utils.logging_config import get_logger

logger = get_logger(__name__)


def _budget_fields(record: object) -> dict[str, int]:
    # Budget fields are left out entirely when the report did not request them
    fields = {}
    for name in ("budgeted", "budget_balance"):
        value = getattr(record, name)
        if value is not None:
            fields[name] = value
    return fields


def interval_to_dict(record: IntervalRecord) -> dict[str, object]:
    """Serialize an interval record."""
    return {
        "date": record.date,
        "label": record.label,
        "interval_start_date": record.interval_start_date.isoformat(),
        "interval_end_date": record.interval_end_date.isoformat(),
        "stacked": dict(record.stacked),
        "total_assets": record.total_assets,
        "total_debts": record.total_debts,
        "net_assets": record.net_assets,
        "net_debts": record.net_debts,
        "total_totals": record.total_totals,
        **_budget_fields(record),
    }


def _group_interval_to_dict(record: GroupIntervalRecord) -> dict[str, object]:
    return {
        "date": record.date,
        "interval_start_date": record.interval_start_date.isoformat(),
        "interval_end_date": record.interval_end_date.isoformat(),
        "total_assets": record.total_assets,
        "total_debts": record.total_debts,
        "net_assets": record.net_assets,
        "net_debts": record.net_debts,
        "total_totals": record.total_totals,
        **_budget_fields(record),
    }


def group_to_dict(group: GroupSummary) -> dict[str, object]:
    """Serialize a group summary with its interval series."""
    return {
        "id": group.id,
        "name": group.name,
        "total_assets": group.total_assets,
        "total_debts": group.total_debts,
        "net_assets": group.net_assets,
        "net_debts": group.net_debts,
        "total_totals": group.total_totals,
        **_budget_fields(group),
        "interval_data": [_group_interval_to_dict(r) for r in group.interval_data],
    }


def _legend_to_dict(entry: LegendEntry) -> dict[str, str]:
    return {"id": entry.id, "name": entry.name, "color": entry.color}


def payload_to_dict(payload: ReportPayload) -> dict[str, object]:
    """Serialize a full report payload into JSON-compatible data."""
    return {
        "start_date": payload.start_date.isoformat(),
        "end_date": payload.end_date.isoformat(),
        "total_assets": payload.total_assets,
        "total_debts": payload.total_debts,
        "net_assets": payload.net_assets,
        "net_debts": payload.net_debts,
        "total_totals": payload.total_totals,
        **_budget_fields(payload),
        "legend": [_legend_to_dict(entry) for entry in payload.legend],
        "interval_data": [interval_to_dict(r) for r in payload.interval_data],
        "data": [group_to_dict(g) for g in payload.data],
    }


class JSONExporter:
    """Writes a report payload to a JSON file."""

    def export(self, output_path: Path, payload: ReportPayload) -> Path:
        """Write the payload.

        Args:
            output_path: Destination file.
            payload: Report payload.

        Returns:
            Path to the created file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(payload_to_dict(payload), f, indent=2)
        logger.info(f"Report written to {output_path}")
        return output_path
