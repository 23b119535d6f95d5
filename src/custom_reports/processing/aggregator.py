"""Per-interval aggregation of query rows into report totals."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date

from custom_reports.models.category import ReportGroup
from custom_reports.models.report import BalanceType, IntervalRecord, ReportInterval
from custom_reports.models.transaction import QueryRow
from custom_reports.processing.budget import BudgetAligner
from custom_reports.processing.visibility import filter_hidden_items, matches_group
from custom_reports.utils.date_utils import format_interval, interval_bounds
from custom_reports.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class GroupAmounts:
    """Raw amounts of one group within one interval."""

    assets: int = 0
    debts: int = 0  # zero or negative
    budget: int = 0

    @property
    def net(self) -> int:
        return self.assets + self.debts

    @property
    def budget_balance(self) -> int:
        return self.budget - abs(self.debts)


def metric_value(balance_type: BalanceType, amounts: GroupAmounts) -> int:
    """Value a group contributes to the chart for the active metric."""
    match balance_type:
        case BalanceType.TOTAL_ASSETS:
            return amounts.assets
        case BalanceType.TOTAL_DEBTS:
            return abs(amounts.debts)
        case BalanceType.NET_ASSETS:
            return amounts.net if amounts.net > 0 else 0
        case BalanceType.NET_DEBTS:
            return abs(amounts.net) if amounts.net < 0 else 0
        case BalanceType.TOTAL_TOTALS:
            return amounts.net
        case BalanceType.BUDGETED:
            return abs(amounts.budget)
        case BalanceType.BUDGET_BALANCE:
            return amounts.budget_balance


@dataclass(frozen=True)
class Totals:
    """Running sums of every metric.

    ``net_assets`` sums the positive per-group net amounts and ``net_debts``
    the negative ones, so ``net_assets + net_debts == total_totals``.
    """

    total_assets: int = 0
    total_debts: int = 0
    net_assets: int = 0
    net_debts: int = 0
    total_totals: int = 0
    budgeted: int = 0
    budget_balance: int = 0

    def add(self, amounts: GroupAmounts) -> "Totals":
        """Return new totals including one group's amounts."""
        net = amounts.net
        return Totals(
            total_assets=self.total_assets + amounts.assets,
            total_debts=self.total_debts + amounts.debts,
            net_assets=self.net_assets + (net if net > 0 else 0),
            net_debts=self.net_debts + (net if net < 0 else 0),
            total_totals=self.total_totals + net,
            budgeted=self.budgeted + abs(amounts.budget),
            budget_balance=self.budget_balance + amounts.budget_balance,
        )

    def merge(self, other: "Totals") -> "Totals":
        """Return the element-wise sum of two totals."""
        return Totals(
            total_assets=self.total_assets + other.total_assets,
            total_debts=self.total_debts + other.total_debts,
            net_assets=self.net_assets + other.net_assets,
            net_debts=self.net_debts + other.net_debts,
            total_totals=self.total_totals + other.total_totals,
            budgeted=self.budgeted + other.budgeted,
            budget_balance=self.budget_balance + other.budget_balance,
        )


class IntervalAggregator:
    """Folds asset/debt rows and budget data into one record per interval.

    Every metric is accumulated regardless of which one is active; the
    active metric only decides the per-group "stacked" values.
    """

    def __init__(
        self,
        groups: list[ReportGroup],
        field_name: str,
        assets: list[QueryRow],
        debts: list[QueryRow],
        budget: BudgetAligner,
        balance_type: BalanceType,
        interval: ReportInterval,
        show_off_budget: bool = False,
        show_hidden_categories: bool = False,
        show_uncategorized: bool = False,
        include_budget: bool = False,
    ):
        """Initialize the aggregator.

        Args:
            groups: Groups the report is broken down by.
            field_name: Row field matched against group ids.
            assets: Inflow rows, dates already bucketed to interval labels.
            debts: Outflow rows, dates already bucketed to interval labels.
            budget: Budget lookup for the groups.
            balance_type: Active metric.
            interval: Report granularity.
            show_off_budget: Keep rows on off-budget accounts.
            show_hidden_categories: Keep rows in hidden categories.
            show_uncategorized: Keep rows without a category.
            include_budget: Emit the budget fields on interval records.
        """
        self.groups = groups
        self.field_name = field_name
        self.budget = budget
        self.balance_type = balance_type
        self.interval = interval
        self.include_budget = include_budget
        self.group_by_category = field_name in ("category", "categoryGroup")

        flags = (show_off_budget, show_hidden_categories, show_uncategorized)
        self._assets = [self._sum_by_date(group, assets, *flags) for group in groups]
        self._debts = [self._sum_by_date(group, debts, *flags) for group in groups]

    def _sum_by_date(
        self,
        group: ReportGroup,
        rows: list[QueryRow],
        show_off_budget: bool,
        show_hidden_categories: bool,
        show_uncategorized: bool,
    ) -> dict[str, int]:
        sums: dict[str, int] = defaultdict(int)
        visible = filter_hidden_items(
            group,
            rows,
            show_off_budget,
            show_hidden_categories,
            show_uncategorized,
            self.group_by_category,
        )
        for row in visible:
            if matches_group(row, group, self.field_name, self.group_by_category):
                sums[row.date] += row.amount
        return sums

    def group_amounts(self, index: int, label: str) -> GroupAmounts:
        """Amounts of the group at ``index`` within the interval ``label``."""
        return GroupAmounts(
            assets=self._assets[index].get(label, 0),
            debts=self._debts[index].get(label, 0),
            budget=self.budget.amount_for(self.groups[index], label),
        )

    def build_interval(
        self, label: str, interval_start: date, interval_end: date
    ) -> tuple[IntervalRecord, Totals]:
        """Build the record of one interval and the totals it contributes."""
        stacked: dict[str, int] = {}
        totals = Totals()
        for index, group in enumerate(self.groups):
            amounts = self.group_amounts(index, label)
            stacked[group.name] = metric_value(self.balance_type, amounts)
            totals = totals.add(amounts)

        record = IntervalRecord(
            date=format_interval(label, self.interval),
            label=label,
            interval_start_date=interval_start,
            interval_end_date=interval_end,
            stacked=stacked,
            total_assets=totals.total_assets,
            total_debts=totals.total_debts,
            net_assets=totals.net_assets,
            net_debts=totals.net_debts,
            total_totals=totals.total_totals,
            budgeted=totals.budgeted if self.include_budget else None,
            budget_balance=totals.budget_balance if self.include_budget else None,
        )
        return record, totals

    def aggregate(
        self, intervals: list[str], start_date: date, end_date: date
    ) -> tuple[list[IntervalRecord], Totals]:
        """Build the interval series and the grand totals.

        Args:
            intervals: Interval labels from interval_range().
            start_date: First day of the report.
            end_date: Last day of the report.

        Returns:
            Tuple of (interval records, grand totals).
        """
        records: list[IntervalRecord] = []
        grand = Totals()
        for index, label in enumerate(intervals):
            interval_start, interval_end = interval_bounds(index, intervals, start_date, end_date)
            record, totals = self.build_interval(label, interval_start, interval_end)
            records.append(record)
            grand = grand.merge(totals)

        logger.debug(
            f"Aggregated {len(intervals)} intervals over {len(self.groups)} groups: "
            f"assets={grand.total_assets}, debts={grand.total_debts}"
        )
        return records, grand
