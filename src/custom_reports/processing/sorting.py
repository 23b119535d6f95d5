"""Ordering of group rows."""

from collections.abc import Callable

from custom_reports.models.options import SortBy
from custom_reports.models.report import BalanceType, GroupSummary


def sort_data(balance_type: BalanceType, sort_by: SortBy) -> Callable[[GroupSummary], tuple]:
    """Return the sort key for the active metric and direction.

    ``asc``/``desc`` order by the absolute value of the active metric with
    ties broken by name; ``name`` orders case-insensitively by name;
    ``budget`` keeps the budget order of categories and groups.
    """
    match sort_by:
        case SortBy.NAME:
            return lambda g: (g.name.casefold(),)
        case SortBy.BUDGET:
            return lambda g: (g.sort_order,)
        case SortBy.ASC:
            return lambda g: (abs(g.metric(balance_type)), g.name.casefold())
        case SortBy.DESC:
            # Negated so that name ties stay alphabetical
            return lambda g: (-abs(g.metric(balance_type)), g.name.casefold())


def sort_groups(
    groups: list[GroupSummary], balance_type: BalanceType, sort_by: SortBy
) -> list[GroupSummary]:
    """Return a sorted copy of the group rows."""
    return sorted(groups, key=sort_data(balance_type, sort_by))
