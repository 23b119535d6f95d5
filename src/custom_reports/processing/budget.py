"""Alignment of month-keyed budget records onto report intervals."""

from collections import defaultdict
from collections.abc import Iterable

from custom_reports.models.category import Category, ReportGroup
from custom_reports.models.report import ReportInterval
from custom_reports.models.transaction import BudgetRecord
from custom_reports.utils.date_utils import month_number, month_range_inclusive, parse_label


def months_for_interval(label: str, interval: ReportInterval) -> list[int]:
    """Return the YYYYMM months one interval covers.

    Monthly labels cover their own month, yearly labels all twelve months
    of the year, and daily/weekly labels the month containing the label's day.
    """
    match interval:
        case ReportInterval.YEARLY:
            year = int(label)
            return [year * 100 + month for month in range(1, 13)]
        case ReportInterval.MONTHLY | ReportInterval.DAILY | ReportInterval.WEEKLY:
            return [month_number(label)]


def budget_months(intervals: list[str], interval: ReportInterval) -> list[int]:
    """Return every YYYYMM month needed to budget an interval sequence."""
    match interval:
        case ReportInterval.MONTHLY:
            return [month_number(label) for label in intervals]
        case ReportInterval.YEARLY:
            return [month for label in intervals for month in months_for_interval(label, interval)]
        case ReportInterval.DAILY | ReportInterval.WEEKLY:
            months = month_range_inclusive(parse_label(intervals[0]), parse_label(intervals[-1]))
            return [month_number(month) for month in months]


class BudgetAligner:
    """Looks up budgeted amounts for a group within an interval.

    Budget amounts only exist for categories, so the aligner answers 0
    unless budget data was requested and the report groups by category or
    category group.
    """

    def __init__(
        self,
        records: Iterable[BudgetRecord],
        categories: Iterable[Category],
        interval: ReportInterval,
        field_name: str,
        enabled: bool = True,
    ):
        """Initialize the aligner.

        Args:
            records: Budget records returned by the budget query.
            categories: Every category, for category-group membership.
            interval: Report granularity.
            field_name: Row field the report groups by.
            enabled: Whether budget data was requested.
        """
        self.interval = interval
        self.field_name = field_name
        self.enabled = enabled and field_name in ("category", "categoryGroup")
        self._group_of = {cat.id: cat.group_id for cat in categories}

        # month -> category -> summed amount
        self._by_month: dict[int, dict[str, int]] = defaultdict(lambda: defaultdict(int))
        for record in records:
            self._by_month[record.month][record.category] += record.amount

    @classmethod
    def disabled(cls, interval: ReportInterval, field_name: str) -> "BudgetAligner":
        """Aligner that answers 0 for every lookup."""
        return cls([], [], interval, field_name, enabled=False)

    def amount_for(self, group: ReportGroup, label: str) -> int:
        """Sum the budget of a group over the months of one interval.

        Args:
            group: Category or category group.
            label: Interval label.

        Returns:
            Signed budget amount, 0 when not applicable.
        """
        if not self.enabled or not group.id:
            return 0

        total = 0
        for month in months_for_interval(label, self.interval):
            for category, amount in self._by_month.get(month, {}).items():
                if self._belongs(category, group.id):
                    total += amount
        return total

    def _belongs(self, category: str, group_id: str) -> bool:
        if self.field_name == "category":
            return category == group_id
        return self._group_of.get(category) == group_id
