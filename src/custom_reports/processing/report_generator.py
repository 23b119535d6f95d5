"""Custom report generation: fetch, aggregate, trim, sort and assemble."""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import replace

from custom_reports.models.category import ReportGroup
from custom_reports.models.options import ReportOptions
from custom_reports.models.report import ReportInterval, ReportPayload
from custom_reports.models.transaction import QueryRow, RowKind
from custom_reports.processing.aggregator import IntervalAggregator
from custom_reports.processing.budget import BudgetAligner, budget_months
from custom_reports.processing.groups import (
    category_lists,
    group_by_selections,
    is_category_based,
)
from custom_reports.processing.legend import calculate_legend
from custom_reports.processing.sorting import sort_groups
from custom_reports.processing.summary import recalculate
from custom_reports.processing.trimming import (
    determine_interval_range,
    filter_empty_rows,
    trim_to_range,
)
from custom_reports.sources.base import ReportDataSource
from custom_reports.utils.date_utils import interval_range, week_from_date
from custom_reports.utils.logging_config import LogContext, get_logger

logger = get_logger(__name__)

ReportSink = Callable[[ReportPayload], None]
ReportRunner = Callable[[ReportDataSource, ReportSink], Awaitable[None]]


def create_custom_spreadsheet(
    options: ReportOptions,
    set_data_check: Callable[[bool], None] | None = None,
) -> ReportRunner:
    """Prepare a report run for a set of options.

    Groups are resolved immediately; everything else happens when the
    returned coroutine function is awaited with a data source and a sink.
    The sink is called exactly once with the finished payload, followed by
    ``set_data_check(True)``. When there are no groups to report on, the run
    returns without calling either.

    Args:
        options: Report options resolved against a ledger.
        set_data_check: Optional completion flag callback.

    Returns:
        Coroutine function ``run(source, set_data)``.
    """
    category_list, category_group_list = category_lists(options.category_groups)
    groups, field_name = group_by_selections(
        options.group_by,
        category_list,
        category_group_list,
        options.payees,
        options.accounts,
    )

    async def run(source: ReportDataSource, set_data: ReportSink) -> None:
        if not groups:
            logger.info(f"No {options.group_by.value.lower()} groups to report on, skipping")
            return

        with LogContext(
            logger,
            "custom report",
            interval=options.interval.value,
            group_by=options.group_by.value,
            balance_type=options.balance_type.value,
        ):
            filters = await source.make_filters(
                [cond for cond in options.conditions if not cond.custom_name]
            )
            budget_filters = await source.make_filters(
                [
                    cond for cond in options.conditions
                    if not cond.custom_name and cond.field == "category"
                ],
                apply_special_cases=False,
            )

            assets, debts = await asyncio.gather(
                source.fetch_rows(
                    RowKind.ASSETS,
                    options.start_date,
                    options.end_date,
                    options.interval,
                    options.conditions_op,
                    filters,
                ),
                source.fetch_rows(
                    RowKind.DEBTS,
                    options.start_date,
                    options.end_date,
                    options.interval,
                    options.conditions_op,
                    filters,
                ),
            )

            if options.interval == ReportInterval.WEEKLY:
                assets = _to_weeks(assets, options.first_day_of_week_idx)
                debts = _to_weeks(debts, options.first_day_of_week_idx)

            intervals = interval_range(
                options.start_date,
                options.end_date,
                options.interval,
                options.first_day_of_week_idx,
            )

            needs_budget = options.balance_type.needs_budget
            budget = BudgetAligner.disabled(options.interval, field_name)
            if needs_budget and is_category_based(field_name):
                records = await source.fetch_budget(
                    budget_months(intervals, options.interval),
                    options.conditions_op,
                    budget_filters,
                )
                budget = BudgetAligner(records, options.categories, options.interval, field_name)

            payload = build_payload(options, groups, field_name, intervals, assets, debts, budget)

        set_data(payload)
        if set_data_check is not None:
            set_data_check(True)

    return run


def _to_weeks(rows: list[QueryRow], first_day_of_week_idx: int) -> list[QueryRow]:
    return [replace(row, date=week_from_date(row.date, first_day_of_week_idx)) for row in rows]


def build_payload(
    options: ReportOptions,
    groups: list[ReportGroup],
    field_name: str,
    intervals: list[str],
    assets: list[QueryRow],
    debts: list[QueryRow],
    budget: BudgetAligner,
) -> ReportPayload:
    """Run the synchronous stages of a report on fetched rows.

    Args:
        options: Report options.
        groups: Resolved groups.
        field_name: Row field the groups match.
        intervals: Interval labels.
        assets: Inflow rows bucketed to interval labels.
        debts: Outflow rows bucketed to interval labels.
        budget: Budget lookup.

    Returns:
        The finished report payload.
    """
    include_budget = options.balance_type.needs_budget
    visibility = {
        "show_off_budget": options.show_off_budget,
        "show_hidden_categories": options.show_hidden_categories,
        "show_uncategorized": options.show_uncategorized,
    }

    aggregator = IntervalAggregator(
        groups=groups,
        field_name=field_name,
        assets=assets,
        debts=debts,
        budget=budget,
        balance_type=options.balance_type,
        interval=options.interval,
        include_budget=include_budget,
        **visibility,
    )
    interval_data, totals = aggregator.aggregate(intervals, options.start_date, options.end_date)

    calc_data = [
        recalculate(
            group=group,
            intervals=intervals,
            assets=assets,
            debts=debts,
            field_name=field_name,
            start_date=options.start_date,
            end_date=options.end_date,
            budget=budget,
            include_budget=include_budget,
            **visibility,
        )
        for group in groups
    ]

    # Filter first so that trimming reflects the visible groups
    calc_data_filtered = [
        group for group in calc_data
        if filter_empty_rows(options.show_empty, group, options.balance_type)
    ]

    if options.trim_intervals:
        trim_range = determine_interval_range(
            calc_data_filtered, interval_data, options.trim_intervals, options.balance_type
        )
        interval_data, calc_data_filtered = trim_to_range(
            interval_data, calc_data_filtered, trim_range
        )
        logger.debug(
            f"Trimmed intervals to {trim_range.start_index}..{trim_range.end_index} "
            f"of {len(intervals)}"
        )

    sorted_data = sort_groups(calc_data_filtered, options.balance_type, options.sort_by)

    legend = calculate_legend(
        interval_data,
        sorted_data,
        options.group_by,
        options.graph_type,
        options.balance_type,
    )

    logger.debug(
        f"Built report with {len(sorted_data)} of {len(groups)} groups "
        f"over {len(interval_data)} intervals"
    )

    return ReportPayload(
        data=sorted_data,
        interval_data=interval_data,
        legend=legend,
        start_date=options.start_date,
        end_date=options.end_date,
        total_assets=totals.total_assets,
        total_debts=totals.total_debts,
        net_assets=totals.net_assets,
        net_debts=totals.net_debts,
        total_totals=totals.total_assets + totals.total_debts,
        budgeted=totals.budgeted if include_budget else None,
        budget_balance=totals.budget_balance if include_budget else None,
    )


async def generate_report(
    source: ReportDataSource, options: ReportOptions
) -> ReportPayload | None:
    """Run a report and return its payload, or None when there were no groups."""
    results: list[ReportPayload] = []
    run = create_custom_spreadsheet(options)
    await run(source, results.append)
    return results[0] if results else None
