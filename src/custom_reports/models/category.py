"""Category, category group and report group descriptors."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class UncategorizedKind(Enum):
    """Kind of synthetic bucket that collects rows without a category."""

    OTHER = "other"  # Plain uncategorized spending and income
    TRANSFER = "transfer"  # Transfers between on-budget accounts
    OFF_BUDGET = "off_budget"  # Activity on off-budget accounts
    ALL = "all"  # Everything above, used when grouping by category group


@dataclass
class Category:
    """Budget category.

    Attributes:
        id: Unique identifier for this category.
        name: Human-readable category name.
        group_id: Category group this category belongs to.
        hidden: Whether the category is hidden from reports by default.
        sort_order: Order within its group.
    """

    id: str
    name: str
    group_id: str
    hidden: bool = False
    sort_order: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "Category":
        """Create a Category from a dictionary (e.g., from YAML).

        Args:
            data: Dictionary containing category data.

        Returns:
            A new Category instance.
        """
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", data["id"])),
            group_id=str(data["group"]),
            hidden=bool(data.get("hidden", False)),
            sort_order=int(data.get("sort_order", 0)),  # type: ignore[arg-type]
        )

    def __repr__(self) -> str:
        return f"Category(id={self.id!r}, name={self.name!r}, group={self.group_id!r})"


@dataclass
class CategoryGroup:
    """Group of budget categories.

    Attributes:
        id: Unique identifier for this group.
        name: Human-readable group name.
        hidden: Whether the group is hidden from reports by default.
        sort_order: Display order of the group.
        categories: Categories that belong to this group.
    """

    id: str
    name: str
    hidden: bool = False
    sort_order: int = 0
    categories: list[Category] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "CategoryGroup":
        """Create a CategoryGroup (and its categories) from a dictionary."""
        group_id = str(data["id"])
        categories = []
        for cat_data in data.get("categories", None) or []:  # type: ignore[union-attr]
            cat_data = {"group": group_id, **cat_data}  # type: ignore[dict-item]
            categories.append(Category.from_dict(cat_data))

        return cls(
            id=group_id,
            name=str(data.get("name", group_id)),
            hidden=bool(data.get("hidden", False)),
            sort_order=int(data.get("sort_order", 0)),  # type: ignore[arg-type]
            categories=categories,
        )

    def __repr__(self) -> str:
        return f"CategoryGroup(id={self.id!r}, name={self.name!r}, categories={len(self.categories)})"


@dataclass(frozen=True)
class ReportGroup:
    """One entry of the list a report is broken down by.

    Wraps a category, category group, payee or account. Synthetic
    uncategorized buckets carry no id and an ``uncategorized`` kind.

    Attributes:
        id: Identifier matched against the row's grouping field.
        name: Display name, also the key of the interval "stacked" values.
        uncategorized: Kind of synthetic bucket, None for real entities.
        group_id: Owning category group (categories only).
        hidden: Whether the underlying entity is hidden.
        sort_order: Budget order, used by the "budget" sort.
    """

    id: Optional[str]
    name: str
    uncategorized: Optional[UncategorizedKind] = None
    group_id: Optional[str] = None
    hidden: bool = False
    sort_order: int = 0

    @property
    def is_uncategorized(self) -> bool:
        """Whether this is a synthetic uncategorized bucket."""
        return self.uncategorized is not None
