"""Chart legend derived from the finished report series."""

from custom_reports.models.options import GraphType, GroupBy
from custom_reports.models.report import (
    BalanceType,
    GroupSummary,
    IntervalRecord,
    LegendEntry,
)

# Qualitative palette, cycled when there are more series than colors
QUALITATIVE_COLORS = [
    "#45B29D",
    "#EFC94C",
    "#E27A3F",
    "#DF5A49",
    "#5F91B8",
    "#E2A37F",
    "#55DBC1",
    "#EFDA97",
    "#DF948A",
    "#8CB5D6",
]

POSITIVE_COLOR = "#4CAF50"
NEGATIVE_COLOR = "#E53935"


def calculate_legend(
    interval_data: list[IntervalRecord],
    groups: list[GroupSummary],
    group_by: GroupBy,
    graph_type: GraphType,
    balance_type: BalanceType,
) -> list[LegendEntry]:
    """Build the legend for a report.

    Bar charts grouped by interval get one entry per interval, colored by
    the sign of its total for the active metric. Every other chart gets one
    entry per group.
    """
    if group_by == GroupBy.INTERVAL and graph_type in (GraphType.BAR, GraphType.STACKED_BAR):
        return [
            LegendEntry(
                id=record.label,
                name=record.date,
                color=NEGATIVE_COLOR if record.metric(balance_type) < 0 else POSITIVE_COLOR,
            )
            for record in interval_data
        ]

    return [
        LegendEntry(
            id=group.id,
            name=group.name,
            color=QUALITATIVE_COLORS[index % len(QUALITATIVE_COLORS)],
        )
        for index, group in enumerate(groups)
    ]
