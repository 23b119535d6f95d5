"""Account and payee data models."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Account:
    """Represents a ledger account.

    Attributes:
        id: Unique identifier for this account.
        name: Human-readable account name (e.g., "Checking ****1234").
        off_budget: Whether the account is tracked outside the budget.
        sort_order: Order for displaying accounts.
    """

    id: str
    name: str
    off_budget: bool = False
    sort_order: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "Account":
        """Create an Account from a dictionary (e.g., from YAML).

        Args:
            data: Dictionary containing account data.

        Returns:
            A new Account instance.
        """
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", data["id"])),
            off_budget=bool(data.get("off_budget", False)),
            sort_order=int(data.get("sort_order", 0)),  # type: ignore[arg-type]
        )

    def __repr__(self) -> str:
        return f"Account(id={self.id!r}, name={self.name!r}, off_budget={self.off_budget})"


@dataclass
class Payee:
    """Payee of a transaction.

    A payee with a ``transfer_account`` stands for a transfer into that
    account rather than an outside party.
    """

    id: str
    name: str
    transfer_account: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "Payee":
        """Create a Payee from a dictionary (e.g., from YAML)."""
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", data["id"])),
            transfer_account=(
                str(data["transfer_account"]) if data.get("transfer_account") else None
            ),
        )

    def __repr__(self) -> str:
        return f"Payee(id={self.id!r}, name={self.name!r})"
