"""Shared fixtures: a small ledger and a stub data source."""

from datetime import date

import pytest

from custom_reports.models.account import Account, Payee
from custom_reports.models.category import Category, CategoryGroup
from custom_reports.models.transaction import BudgetRecord, Transaction
from custom_reports.sources.memory import InMemoryDataSource, Ledger
from tests.helpers import StubDataSource, grocery_row


@pytest.fixture
def grocery_source() -> StubDataSource:
    """Zero inflows and 100/50/75 outflows for Groceries, Jan-Mar 2024."""
    return StubDataSource(
        assets=[
            grocery_row("2024-01", 0),
            grocery_row("2024-02", 0),
            grocery_row("2024-03", 0),
        ],
        debts=[
            grocery_row("2024-01", -100),
            grocery_row("2024-02", -50),
            grocery_row("2024-03", -75),
        ],
    )


@pytest.fixture
def ledger() -> Ledger:
    """Ledger with income, food, a hidden category, transfers and an off-budget account."""
    income = CategoryGroup(
        id="income",
        name="Income",
        sort_order=0,
        categories=[Category(id="salary", name="Salary", group_id="income")],
    )
    food = CategoryGroup(
        id="food",
        name="Food",
        sort_order=1,
        categories=[
            Category(id="groceries", name="Groceries", group_id="food", sort_order=0),
            Category(id="restaurants", name="Restaurants", group_id="food", sort_order=1),
            Category(id="gifts", name="Gifts", group_id="food", hidden=True, sort_order=2),
        ],
    )
    return Ledger(
        category_groups=[food, income],
        payees=[
            Payee(id="grocer", name="Grocer"),
            Payee(id="employer", name="Employer"),
            Payee(id="diner", name="Diner"),
            Payee(id="to_savings", name="Transfer: Savings", transfer_account="savings"),
            Payee(id="to_checking", name="Transfer: Checking", transfer_account="checking"),
        ],
        accounts=[
            Account(id="checking", name="Checking", sort_order=0),
            Account(id="savings", name="Savings", sort_order=1),
            Account(id="brokerage", name="Brokerage", off_budget=True, sort_order=2),
        ],
        transactions=[
            Transaction(date(2024, 1, 5), -10000, "checking", "groceries", "grocer"),
            Transaction(date(2024, 1, 20), 300000, "checking", "salary", "employer"),
            Transaction(date(2024, 1, 25), -4000, "checking", "gifts", "grocer"),
            Transaction(date(2024, 2, 3), -5000, "checking", "groceries", "grocer"),
            Transaction(date(2024, 2, 14), -2500, "checking", "restaurants", "diner"),
            Transaction(date(2024, 2, 15), 1000, "checking", "restaurants", "diner"),
            Transaction(date(2024, 2, 20), -3000, "brokerage", None, None),
            Transaction(date(2024, 3, 10), -7500, "checking", "groceries", "grocer"),
            Transaction(date(2024, 3, 12), -2000, "checking", None, "grocer"),
            Transaction(date(2024, 3, 15), -50000, "checking", None, "to_savings"),
            Transaction(date(2024, 3, 15), 50000, "savings", None, "to_checking"),
        ],
        budgets=[
            BudgetRecord(month, category, amount)
            for month in (202401, 202402, 202403)
            for category, amount in (("groceries", -20000), ("restaurants", -5000))
        ],
    )


@pytest.fixture
def ledger_source(ledger: Ledger) -> InMemoryDataSource:
    """In-memory data source over the ledger fixture."""
    return InMemoryDataSource(ledger)

