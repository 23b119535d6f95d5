"""Read-side contract between the report generator and a ledger store.

Each method corresponds to one query the report generator issues. Filters
are opaque to the generator: whatever make_filters() returns is handed back
to fetch_rows() and fetch_budget() unchanged.
"""

from datetime import date
from typing import Any, Protocol

from custom_reports.models.condition import RuleCondition
from custom_reports.models.options import ConditionsOp
from custom_reports.models.report import ReportInterval
from custom_reports.models.transaction import BudgetRecord, QueryRow, RowKind


class ReportDataSource(Protocol):
    """Asynchronous query interface used to build custom reports."""

    async def make_filters(
        self,
        conditions: list[RuleCondition],
        apply_special_cases: bool = True,
    ) -> list[Any]:
        """Translate user conditions into the store's filter representation.

        Raises:
            ConditionError: If a condition cannot be translated.
        """
        ...

    async def fetch_rows(
        self,
        kind: RowKind,
        start_date: date,
        end_date: date,
        interval: ReportInterval,
        conditions_op: ConditionsOp,
        filters: list[Any],
    ) -> list[QueryRow]:
        """Inflow ("assets") or outflow ("debts") rows summed per interval and group keys.

        Daily and Weekly queries return day labels; Monthly returns
        ``YYYY-MM`` and Yearly ``YYYY`` labels.
        """
        ...

    async def fetch_budget(
        self,
        months: list[int],
        conditions_op: ConditionsOp,
        filters: list[Any],
    ) -> list[BudgetRecord]:
        """Budget records for the given YYYYMM months."""
        ...
