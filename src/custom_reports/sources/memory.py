"""In-memory data source backed by a ledger loaded from YAML."""

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from custom_reports.exceptions import ConditionError
from custom_reports.models.account import Account, Payee
from custom_reports.models.category import Category, CategoryGroup
from custom_reports.models.condition import RuleCondition
from custom_reports.models.options import ConditionsOp
from custom_reports.models.report import ReportInterval
from custom_reports.models.transaction import BudgetRecord, QueryRow, RowKind, Transaction
from custom_reports.utils.date_utils import bucket_date
from custom_reports.utils.logging_config import get_logger

logger = get_logger(__name__)

Predicate = Callable[[object], bool]

SUPPORTED_FIELDS = {"category", "payee", "account", "amount", "notes"}

_COMPARISONS: dict[str, Callable[[object, object], bool]] = {
    "is": lambda actual, expected: actual == expected,
    "isNot": lambda actual, expected: actual != expected,
    "oneOf": lambda actual, expected: actual in (expected or []),  # type: ignore[operator]
    "notOneOf": lambda actual, expected: actual not in (expected or []),  # type: ignore[operator]
    "contains": lambda actual, expected: str(expected).lower() in str(actual or "").lower(),
    "doesNotContain": lambda actual, expected: str(expected).lower() not in str(actual or "").lower(),
    "gt": lambda actual, expected: actual is not None and actual > expected,  # type: ignore[operator]
    "gte": lambda actual, expected: actual is not None and actual >= expected,  # type: ignore[operator]
    "lt": lambda actual, expected: actual is not None and actual < expected,  # type: ignore[operator]
    "lte": lambda actual, expected: actual is not None and actual <= expected,  # type: ignore[operator]
}


@dataclass
class Ledger:
    """Everything the in-memory source can report on.

    Attributes:
        category_groups: Category groups with their categories.
        payees: Payees.
        accounts: Accounts.
        transactions: Ledger transactions.
        budgets: Monthly budget records.
    """

    category_groups: list[CategoryGroup] = field(default_factory=list)
    payees: list[Payee] = field(default_factory=list)
    accounts: list[Account] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    budgets: list[BudgetRecord] = field(default_factory=list)

    @property
    def categories(self) -> list[Category]:
        """Flat list of every category across groups."""
        return [cat for group in self.category_groups for cat in group.categories]


def translate_condition(condition: RuleCondition, apply_special_cases: bool = True) -> Predicate:
    """Translate one condition into a predicate over transactions or budget records.

    With special cases on, an amount condition carrying the ``inflow`` or
    ``outflow`` option only matches that side of the flow and compares
    against the positive magnitude.

    Raises:
        ConditionError: If the field or operator is not supported.
    """
    if condition.field not in SUPPORTED_FIELDS:
        raise ConditionError(f"Unsupported condition field: {condition.field!r}")
    compare = _COMPARISONS.get(condition.op)
    if compare is None:
        raise ConditionError(f"Unsupported condition operator: {condition.op!r}")

    name = condition.field
    expected = condition.value

    if apply_special_cases and name == "amount":
        if condition.options.get("inflow"):
            return lambda obj: getattr(obj, "amount") > 0 and compare(getattr(obj, "amount"), expected)
        if condition.options.get("outflow"):
            return lambda obj: getattr(obj, "amount") < 0 and compare(-getattr(obj, "amount"), expected)

    return lambda obj: compare(getattr(obj, name, None), expected)


def _combine(filters: list[Predicate], conditions_op: ConditionsOp) -> Predicate:
    if not filters:
        return lambda obj: True
    if conditions_op == ConditionsOp.OR:
        return lambda obj: any(f(obj) for f in filters)
    return lambda obj: all(f(obj) for f in filters)


class InMemoryDataSource:
    """ReportDataSource over a Ledger held in memory."""

    def __init__(self, ledger: Ledger):
        """Initialize the data source.

        Args:
            ledger: Ledger to query.
        """
        self.ledger = ledger
        self._categories = {cat.id: cat for cat in ledger.categories}
        self._groups = {group.id: group for group in ledger.category_groups}
        self._accounts = {account.id: account for account in ledger.accounts}
        self._payees = {payee.id: payee for payee in ledger.payees}

    async def make_filters(
        self,
        conditions: list[RuleCondition],
        apply_special_cases: bool = True,
    ) -> list[Predicate]:
        """Translate conditions into predicates."""
        return [translate_condition(cond, apply_special_cases) for cond in conditions]

    async def fetch_rows(
        self,
        kind: RowKind,
        start_date: date,
        end_date: date,
        interval: ReportInterval,
        conditions_op: ConditionsOp,
        filters: list[Predicate],
    ) -> list[QueryRow]:
        """Sum matching transactions per interval label and group keys."""
        matches = _combine(filters, conditions_op)
        # Daily and Weekly queries group by day; weeks are formed by the caller
        bucket_interval = ReportInterval.DAILY if interval == ReportInterval.WEEKLY else interval

        sums: dict[tuple, int] = defaultdict(int)
        for txn in self.ledger.transactions:
            if not start_date <= txn.date <= end_date:
                continue
            if kind == RowKind.ASSETS and txn.amount <= 0:
                continue
            if kind == RowKind.DEBTS and txn.amount >= 0:
                continue
            if not matches(txn):
                continue
            sums[self._row_key(txn, bucket_date(txn.date, bucket_interval))] += txn.amount

        rows = [
            QueryRow(
                date=key[0],
                amount=amount,
                category=key[1],
                category_group=key[2],
                payee=key[3],
                account=key[4],
                category_hidden=key[5],
                category_group_hidden=key[6],
                account_off_budget=key[7],
                transfer_account=key[8],
            )
            for key, amount in sums.items()
        ]
        rows.sort(key=lambda r: (r.date, r.category or "", r.payee or "", r.account or ""))
        logger.debug(f"Fetched {len(rows)} {kind.value} rows for {start_date}..{end_date}")
        return rows

    def _row_key(self, txn: Transaction, label: str) -> tuple:
        category: Optional[Category] = self._categories.get(txn.category) if txn.category else None
        group = self._groups.get(category.group_id) if category else None
        account = self._accounts.get(txn.account)
        payee = self._payees.get(txn.payee) if txn.payee else None
        return (
            label,
            category.id if category else None,
            group.id if group else None,
            txn.payee,
            txn.account,
            category.hidden if category else False,
            group.hidden if group else False,
            account.off_budget if account else False,
            payee.transfer_account if payee else None,
        )

    async def fetch_budget(
        self,
        months: list[int],
        conditions_op: ConditionsOp,
        filters: list[Predicate],
    ) -> list[BudgetRecord]:
        """Budget records in the given months that pass the filters."""
        wanted = set(months)
        matches = _combine(filters, conditions_op)
        records = [
            record for record in self.ledger.budgets
            if record.month in wanted and matches(record)
        ]
        logger.debug(f"Fetched {len(records)} budget records for {len(wanted)} months")
        return records
