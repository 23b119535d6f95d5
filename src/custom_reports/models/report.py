"""Report data models: metric/interval enumerations and output records."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class BalanceType(Enum):
    """Metric that converts asset/debt rows into one number per group."""

    TOTAL_ASSETS = "totalAssets"  # Gross inflow
    TOTAL_DEBTS = "totalDebts"  # Gross outflow
    NET_ASSETS = "netAssets"  # Net gain
    NET_DEBTS = "netDebts"  # Net loss
    TOTAL_TOTALS = "totalTotals"  # Net total
    BUDGETED = "budgeted"
    BUDGET_BALANCE = "budgetBalance"

    @property
    def needs_budget(self) -> bool:
        """Whether this metric is computed from budget-plan data."""
        return self in (BalanceType.BUDGETED, BalanceType.BUDGET_BALANCE)


class ReportInterval(Enum):
    """Granularity of the report's time buckets."""

    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    YEARLY = "Yearly"


@dataclass(frozen=True)
class LegendEntry:
    """One series label of the chart legend."""

    id: str
    name: str
    color: str


@dataclass(frozen=True)
class IntervalRecord:
    """Interval-wide totals for one bucket of the report.

    Attributes:
        date: Display form of the interval label.
        label: The interval label the record was built from.
        interval_start_date: First day of the bucket (clipped to the report start).
        interval_end_date: Last day of the bucket (clipped to the report end).
        stacked: Active metric value keyed by group name.
        total_assets: Sum of inflows across groups.
        total_debts: Sum of outflows across groups (zero or negative).
        net_assets: Sum of positive per-group net amounts.
        net_debts: Sum of negative per-group net amounts.
        total_totals: Sum of per-group net amounts.
        budgeted: Sum of absolute budgeted amounts, None unless requested.
        budget_balance: Sum of budget balances, None unless requested.
    """

    date: str
    label: str
    interval_start_date: date
    interval_end_date: date
    stacked: dict[str, int] = field(default_factory=dict)
    total_assets: int = 0
    total_debts: int = 0
    net_assets: int = 0
    net_debts: int = 0
    total_totals: int = 0
    budgeted: int | None = None
    budget_balance: int | None = None

    def metric(self, balance_type: BalanceType) -> int:
        """Return the interval-wide total for a metric (0 when absent)."""
        return _metric_field(self, balance_type)


@dataclass(frozen=True)
class GroupIntervalRecord:
    """One group's amounts within a single interval."""

    date: str
    interval_start_date: date
    interval_end_date: date
    total_assets: int = 0
    total_debts: int = 0
    net_assets: int = 0
    net_debts: int = 0
    total_totals: int = 0
    budgeted: int | None = None
    budget_balance: int | None = None

    def metric(self, balance_type: BalanceType) -> int:
        """Return this record's value for a metric (0 when absent)."""
        return _metric_field(self, balance_type)


@dataclass(frozen=True)
class GroupSummary:
    """Whole-range summary of one group, with its own interval series."""

    id: str
    name: str
    total_assets: int = 0
    total_debts: int = 0
    net_assets: int = 0
    net_debts: int = 0
    total_totals: int = 0
    budgeted: int | None = None
    budget_balance: int | None = None
    sort_order: int = 0
    interval_data: tuple[GroupIntervalRecord, ...] = ()

    def metric(self, balance_type: BalanceType) -> int:
        """Return this group's whole-range value for a metric (0 when absent)."""
        return _metric_field(self, balance_type)


@dataclass(frozen=True)
class ReportPayload:
    """Finished report delivered to the sink."""

    data: list[GroupSummary]
    interval_data: list[IntervalRecord]
    legend: list[LegendEntry]
    start_date: date
    end_date: date
    total_assets: int
    total_debts: int
    net_assets: int
    net_debts: int
    total_totals: int
    budgeted: int | None = None
    budget_balance: int | None = None

    def metric(self, balance_type: BalanceType) -> int:
        """Return the grand total for a metric (0 when absent)."""
        return _metric_field(self, balance_type)


_METRIC_ATTRS = {
    BalanceType.TOTAL_ASSETS: "total_assets",
    BalanceType.TOTAL_DEBTS: "total_debts",
    BalanceType.NET_ASSETS: "net_assets",
    BalanceType.NET_DEBTS: "net_debts",
    BalanceType.TOTAL_TOTALS: "total_totals",
    BalanceType.BUDGETED: "budgeted",
    BalanceType.BUDGET_BALANCE: "budget_balance",
}


def _metric_field(record: object, balance_type: BalanceType) -> int:
    value = getattr(record, _METRIC_ATTRS[balance_type])
    return value if value is not None else 0
