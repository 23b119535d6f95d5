"""Ledger transactions and the query rows/budget records reports consume."""

import uuid
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class RowKind(Enum):
    """Which side of the flow a query returns."""

    ASSETS = "assets"  # Inflows (amount >= 0)
    DEBTS = "debts"  # Outflows (amount <= 0)


@dataclass
class Transaction:
    """Ledger transaction as stored by the data source.

    Attributes:
        date: Transaction date.
        amount: Signed amount in minor currency units (positive = inflow).
        account: Account ID.
        category: Category ID (None if uncategorized).
        payee: Payee ID.
        notes: Free-form notes.
        id: Unique identifier.
    """

    date: date
    amount: int
    account: str
    category: Optional[str] = None
    payee: Optional[str] = None
    notes: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "Transaction":
        """Create a Transaction from a dictionary (e.g., from YAML).

        ``date`` may be a date (as PyYAML loads unquoted ISO dates) or an
        ISO string.
        """
        raw_date = data["date"]
        txn_date = raw_date if isinstance(raw_date, date) else date.fromisoformat(str(raw_date))
        txn = cls(
            date=txn_date,
            amount=int(data["amount"]),  # type: ignore[arg-type]
            account=str(data["account"]),
            category=str(data["category"]) if data.get("category") else None,
            payee=str(data["payee"]) if data.get("payee") else None,
            notes=str(data.get("notes") or ""),
        )
        if "id" in data:
            txn.id = str(data["id"])
        return txn

    def __repr__(self) -> str:
        return (
            f"Transaction(date={self.date}, amount={self.amount}, "
            f"account={self.account!r}, category={self.category!r})"
        )


@dataclass(frozen=True)
class QueryRow:
    """Aggregated row returned by an "assets" or "debts" query.

    Attributes:
        date: Interval label (day label for Daily and Weekly queries).
        amount: Summed amount in minor currency units.
        category: Category ID, None when uncategorized.
        category_group: Category group ID, None when uncategorized.
        payee: Payee ID.
        account: Account ID.
        category_hidden: Whether the category is hidden.
        category_group_hidden: Whether the category's group is hidden.
        account_off_budget: Whether the account is off budget.
        transfer_account: Counterpart account when the row is a transfer.
    """

    date: str
    amount: int
    category: Optional[str] = None
    category_group: Optional[str] = None
    payee: Optional[str] = None
    account: Optional[str] = None
    category_hidden: bool = False
    category_group_hidden: bool = False
    account_off_budget: bool = False
    transfer_account: Optional[str] = None

    def key_for(self, field_name: str) -> Optional[str]:
        """Return the grouping key for "category", "categoryGroup", "payee" or "account"."""
        match field_name:
            case "category":
                return self.category
            case "categoryGroup":
                return self.category_group
            case "payee":
                return self.payee
            case "account":
                return self.account
        raise ValueError(f"Unknown grouping field: {field_name}")


@dataclass(frozen=True)
class BudgetRecord:
    """Budgeted amount for one category in one month.

    Amounts are stored negative for spending plans; reports surface them as
    absolute values.
    """

    month: int  # YYYYMM
    category: str
    amount: int

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "BudgetRecord":
        """Create a BudgetRecord from a dictionary (e.g., from YAML)."""
        month = str(data["month"]).replace("-", "")
        return cls(
            month=int(month),
            category=str(data["category"]),
            amount=int(data["amount"]),  # type: ignore[arg-type]
        )
