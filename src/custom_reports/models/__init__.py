"""Data models for ledgers, report definitions and report output."""

from custom_reports.models.account import Account, Payee
from custom_reports.models.category import (
    Category,
    CategoryGroup,
    ReportGroup,
    UncategorizedKind,
)
from custom_reports.models.condition import RuleCondition
from custom_reports.models.options import (
    ConditionsOp,
    GraphType,
    GroupBy,
    ReportOptions,
    SortBy,
)
from custom_reports.models.report import (
    BalanceType,
    GroupIntervalRecord,
    GroupSummary,
    IntervalRecord,
    LegendEntry,
    ReportInterval,
    ReportPayload,
)
from custom_reports.models.transaction import (
    BudgetRecord,
    QueryRow,
    RowKind,
    Transaction,
)

__all__ = [
    "Account",
    "Payee",
    "Category",
    "CategoryGroup",
    "ReportGroup",
    "UncategorizedKind",
    "RuleCondition",
    "ConditionsOp",
    "GraphType",
    "GroupBy",
    "ReportOptions",
    "SortBy",
    "BalanceType",
    "GroupIntervalRecord",
    "GroupSummary",
    "IntervalRecord",
    "LegendEntry",
    "ReportInterval",
    "ReportPayload",
    "BudgetRecord",
    "QueryRow",
    "RowKind",
    "Transaction",
]
