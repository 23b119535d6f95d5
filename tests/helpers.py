"""Builders and doubles shared by the test modules."""

from datetime import date

from custom_reports.models.category import Category, CategoryGroup
from custom_reports.models.options import GroupBy, ReportOptions, SortBy
from custom_reports.models.report import BalanceType, ReportInterval
from custom_reports.models.transaction import BudgetRecord, QueryRow, RowKind
from custom_reports.sources.memory import Ledger


class StubDataSource:
    """ReportDataSource returning canned rows and recording its calls."""

    def __init__(
        self,
        assets: list[QueryRow] | None = None,
        debts: list[QueryRow] | None = None,
        budgets: list[BudgetRecord] | None = None,
        error: Exception | None = None,
    ):
        self.assets = assets or []
        self.debts = debts or []
        self.budgets = budgets or []
        self.error = error
        self.filter_calls: list[tuple[list, bool]] = []
        self.row_calls: list[RowKind] = []
        self.budget_calls: list[list[int]] = []

    async def make_filters(self, conditions, apply_special_cases=True):
        self.filter_calls.append((list(conditions), apply_special_cases))
        return list(conditions)

    async def fetch_rows(self, kind, start_date, end_date, interval, conditions_op, filters):
        self.row_calls.append(kind)
        if self.error is not None:
            raise self.error
        return list(self.assets if kind == RowKind.ASSETS else self.debts)

    async def fetch_budget(self, months, conditions_op, filters):
        self.budget_calls.append(list(months))
        return list(self.budgets)


def grocery_groups() -> list[CategoryGroup]:
    """One category group holding a single Groceries category."""
    return [
        CategoryGroup(
            id="food",
            name="Food",
            categories=[Category(id="groceries", name="Groceries", group_id="food")],
        )
    ]


def grocery_row(label: str, amount: int, **overrides) -> QueryRow:
    """Query row in the Groceries category."""
    values = {
        "date": label,
        "amount": amount,
        "category": "groceries",
        "category_group": "food",
        "payee": "grocer",
        "account": "checking",
    }
    values.update(overrides)
    return QueryRow(**values)


def grocery_options(**overrides) -> ReportOptions:
    """Monthly Jan-Mar 2024 totalDebts report over the Groceries category."""
    values = {
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 3, 31),
        "interval": ReportInterval.MONTHLY,
        "category_groups": grocery_groups(),
        "group_by": GroupBy.CATEGORY,
        "balance_type": BalanceType.TOTAL_DEBTS,
        "sort_by": SortBy.DESC,
    }
    values.update(overrides)
    return ReportOptions(**values)


def ledger_options(ledger: Ledger, **overrides) -> ReportOptions:
    """Monthly Jan-Mar 2024 options resolved against a ledger."""
    values = {
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 3, 31),
        "interval": ReportInterval.MONTHLY,
        "category_groups": ledger.category_groups,
        "payees": ledger.payees,
        "accounts": ledger.accounts,
    }
    values.update(overrides)
    return ReportOptions(**values)
