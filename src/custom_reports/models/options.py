"""Report definition: selectors and the options one report run consumes."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from custom_reports.models.account import Account, Payee
from custom_reports.models.category import Category, CategoryGroup
from custom_reports.models.condition import RuleCondition
from custom_reports.models.report import BalanceType, ReportInterval


class GroupBy(Enum):
    """Dimension a report is broken down by."""

    CATEGORY = "Category"
    GROUP = "Group"
    PAYEE = "Payee"
    ACCOUNT = "Account"
    INTERVAL = "Interval"  # Category groups, legend per interval


class SortBy(Enum):
    """Order of the group rows."""

    ASC = "asc"
    DESC = "desc"
    NAME = "name"
    BUDGET = "budget"


class GraphType(Enum):
    """Chart the report is rendered as."""

    TABLE = "TableGraph"
    BAR = "BarGraph"
    STACKED_BAR = "StackedBarGraph"
    AREA = "AreaGraph"
    DONUT = "DonutGraph"
    LINE = "LineGraph"


class ConditionsOp(Enum):
    """How filter conditions are combined."""

    AND = "and"
    OR = "or"


@dataclass
class ReportOptions:
    """Everything one report run needs, resolved against a ledger.

    Attributes:
        start_date: First day of the report.
        end_date: Last day of the report.
        interval: Granularity of the time buckets.
        category_groups: Category groups with their categories.
        conditions: Filter conditions.
        conditions_op: Combination of the conditions.
        show_empty: Keep groups whose active metric is zero.
        show_off_budget: Include rows on off-budget accounts.
        show_hidden_categories: Include rows in hidden categories.
        show_uncategorized: Include rows without a category.
        trim_intervals: Drop leading/trailing empty intervals.
        group_by: Grouping mode.
        balance_type: Active metric.
        sort_by: Group ordering.
        payees: Payees available for payee grouping.
        accounts: Accounts available for account grouping.
        graph_type: Chart hint for the legend.
        first_day_of_week_idx: First day of the week, 0 = Sunday.
    """

    start_date: date
    end_date: date
    interval: ReportInterval = ReportInterval.MONTHLY
    category_groups: list[CategoryGroup] = field(default_factory=list)
    conditions: list[RuleCondition] = field(default_factory=list)
    conditions_op: ConditionsOp = ConditionsOp.AND
    show_empty: bool = False
    show_off_budget: bool = False
    show_hidden_categories: bool = False
    show_uncategorized: bool = False
    trim_intervals: bool = False
    group_by: GroupBy = GroupBy.CATEGORY
    balance_type: BalanceType = BalanceType.TOTAL_DEBTS
    sort_by: SortBy = SortBy.DESC
    payees: list[Payee] = field(default_factory=list)
    accounts: list[Account] = field(default_factory=list)
    graph_type: GraphType = GraphType.BAR
    first_day_of_week_idx: int = 0

    @property
    def categories(self) -> list[Category]:
        """Flat list of every category across groups."""
        return [cat for group in self.category_groups for cat in group.categories]
