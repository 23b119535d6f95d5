"""Empty-group filtering and trimming of the report's interval range."""

from dataclasses import dataclass, replace

from custom_reports.models.report import BalanceType, GroupSummary, IntervalRecord


@dataclass(frozen=True)
class IntervalRange:
    """Inclusive index range of the intervals a report keeps."""

    start_index: int
    end_index: int


def filter_empty_rows(show_empty: bool, data: GroupSummary, balance_type: BalanceType) -> bool:
    """Whether a group row is kept.

    Args:
        show_empty: Keep every row.
        data: Group summary.
        balance_type: Active metric.

    Returns:
        True to keep the row.
    """
    if show_empty:
        return True
    if balance_type == BalanceType.TOTAL_TOTALS:
        return data.total_assets != 0 or data.total_debts != 0
    return data.metric(balance_type) != 0


def determine_interval_range(
    groups: list[GroupSummary],
    interval_data: list[IntervalRecord],
    trim_intervals: bool,
    balance_type: BalanceType,
) -> IntervalRange:
    """Find the smallest index range that holds every non-empty interval.

    An interval is non-empty when a kept group has a non-zero value for the
    active metric in it (or, with no groups, when its interval-wide total is
    non-zero). Without trimming, or when every interval is empty, the full
    range is returned.
    """
    full = IntervalRange(0, len(interval_data) - 1)
    if not trim_intervals or not interval_data:
        return full

    if groups:
        populated = [
            index for index in range(len(interval_data))
            if any(
                index < len(group.interval_data)
                and group.interval_data[index].metric(balance_type) != 0
                for group in groups
            )
        ]
    else:
        populated = [
            index for index, record in enumerate(interval_data)
            if record.metric(balance_type) != 0
        ]

    if not populated:
        return full
    return IntervalRange(populated[0], populated[-1])


def trim_to_range(
    interval_data: list[IntervalRecord],
    groups: list[GroupSummary],
    interval_range: IntervalRange,
) -> tuple[list[IntervalRecord], list[GroupSummary]]:
    """Cut the interval series and every group's series to the same range.

    Returns:
        Tuple of (trimmed interval records, groups with trimmed series).
    """
    start, stop = interval_range.start_index, interval_range.end_index + 1
    trimmed_groups = [
        replace(group, interval_data=group.interval_data[start:stop]) for group in groups
    ]
    return interval_data[start:stop], trimmed_groups
