"""Whole-range summaries of individual groups."""

from datetime import date

from custom_reports.models.category import ReportGroup
from custom_reports.models.report import (
    BalanceType,
    GroupIntervalRecord,
    GroupSummary,
    ReportInterval,
)
from custom_reports.models.transaction import QueryRow
from custom_reports.processing.aggregator import IntervalAggregator, Totals
from custom_reports.processing.budget import BudgetAligner
from custom_reports.utils.date_utils import interval_bounds


def recalculate(
    group: ReportGroup,
    intervals: list[str],
    assets: list[QueryRow],
    debts: list[QueryRow],
    field_name: str,
    show_off_budget: bool,
    show_hidden_categories: bool,
    show_uncategorized: bool,
    start_date: date,
    end_date: date,
    budget: BudgetAligner | None = None,
    include_budget: bool = False,
) -> GroupSummary:
    """Summarize one group over the whole report range.

    The group's per-interval series uses the same visibility and matching
    rules as the interval series, so the sum of a metric over all group
    summaries equals the report's grand total for that metric.

    Args:
        group: Group to summarize.
        intervals: Interval labels.
        assets: Inflow rows.
        debts: Outflow rows.
        field_name: Row field matched against the group id.
        show_off_budget: Keep rows on off-budget accounts.
        show_hidden_categories: Keep rows in hidden categories.
        show_uncategorized: Keep rows without a category.
        start_date: First day of the report.
        end_date: Last day of the report.
        budget: Budget lookup, None when no budget data was fetched.
        include_budget: Emit the budget fields.

    Returns:
        GroupSummary with totals and the group's interval series.
    """
    interval = ReportInterval.DAILY
    if budget is not None:
        interval = budget.interval
    else:
        budget = BudgetAligner.disabled(interval, field_name)

    aggregator = IntervalAggregator(
        groups=[group],
        field_name=field_name,
        assets=assets,
        debts=debts,
        budget=budget,
        balance_type=BalanceType.TOTAL_TOTALS,
        interval=interval,
        show_off_budget=show_off_budget,
        show_hidden_categories=show_hidden_categories,
        show_uncategorized=show_uncategorized,
        include_budget=include_budget,
    )

    records: list[GroupIntervalRecord] = []
    totals = Totals()
    for index, label in enumerate(intervals):
        step = Totals().add(aggregator.group_amounts(0, label))
        totals = totals.merge(step)
        interval_start, interval_end = interval_bounds(index, intervals, start_date, end_date)
        records.append(
            GroupIntervalRecord(
                date=label,
                interval_start_date=interval_start,
                interval_end_date=interval_end,
                **_metric_fields(step, include_budget),
            )
        )

    return GroupSummary(
        id=group.id or "",
        name=group.name,
        sort_order=group.sort_order,
        interval_data=tuple(records),
        **_metric_fields(totals, include_budget),
    )


def _metric_fields(totals: Totals, include_budget: bool) -> dict[str, int | None]:
    return {
        "total_assets": totals.total_assets,
        "total_debts": totals.total_debts,
        "net_assets": totals.net_assets,
        "net_debts": totals.net_debts,
        "total_totals": totals.total_totals,
        "budgeted": totals.budgeted if include_budget else None,
        "budget_balance": totals.budget_balance if include_budget else None,
    }
