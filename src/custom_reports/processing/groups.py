"""Resolution of a grouping mode into the list of groups a report shows."""

from typing import Literal

from custom_reports.models.account import Account, Payee
from custom_reports.models.category import CategoryGroup, ReportGroup, UncategorizedKind
from custom_reports.models.options import GroupBy

GroupField = Literal["category", "categoryGroup", "payee", "account"]

# Synthetic buckets appended after the real categories
UNCATEGORIZED_CATEGORY = ReportGroup(
    id=None, name="Uncategorized", uncategorized=UncategorizedKind.OTHER
)
OFF_BUDGET_CATEGORY = ReportGroup(
    id=None, name="Off budget", uncategorized=UncategorizedKind.OFF_BUDGET
)
TRANSFER_CATEGORY = ReportGroup(
    id=None, name="Transfers", uncategorized=UncategorizedKind.TRANSFER
)
UNCATEGORIZED_GROUP = ReportGroup(
    id=None, name="Uncategorized & Off budget", uncategorized=UncategorizedKind.ALL
)


def category_lists(
    category_groups: list[CategoryGroup],
) -> tuple[list[ReportGroup], list[ReportGroup]]:
    """Build the category and category-group lists in budget order.

    Categories are ordered by their group's sort order, then their own, and
    followed by the synthetic uncategorized, off-budget and transfer buckets.
    The group list ends with one bucket holding all three.

    Args:
        category_groups: Category groups with their categories.

    Returns:
        Tuple of (category list, category-group list).
    """
    ordered_groups = sorted(category_groups, key=lambda g: g.sort_order)

    category_list: list[ReportGroup] = []
    for group in ordered_groups:
        for cat in sorted(group.categories, key=lambda c: c.sort_order):
            category_list.append(
                ReportGroup(
                    id=cat.id,
                    name=cat.name,
                    group_id=group.id,
                    hidden=cat.hidden or group.hidden,
                    sort_order=len(category_list),
                )
            )
    for bucket in (UNCATEGORIZED_CATEGORY, OFF_BUDGET_CATEGORY, TRANSFER_CATEGORY):
        category_list.append(_with_order(bucket, len(category_list)))

    group_list = [
        ReportGroup(id=group.id, name=group.name, hidden=group.hidden, sort_order=index)
        for index, group in enumerate(ordered_groups)
    ]
    group_list.append(_with_order(UNCATEGORIZED_GROUP, len(group_list)))

    return category_list, group_list


def _with_order(bucket: ReportGroup, sort_order: int) -> ReportGroup:
    return ReportGroup(
        id=bucket.id,
        name=bucket.name,
        uncategorized=bucket.uncategorized,
        sort_order=sort_order,
    )


def group_by_selections(
    group_by: GroupBy,
    category_list: list[ReportGroup],
    category_group_list: list[ReportGroup],
    payees: list[Payee],
    accounts: list[Account],
) -> tuple[list[ReportGroup], GroupField]:
    """Resolve a grouping mode into its groups and the row field they match.

    Args:
        group_by: Grouping mode.
        category_list: Output of category_lists (categories).
        category_group_list: Output of category_lists (groups).
        payees: Payees of the ledger.
        accounts: Accounts of the ledger.

    Returns:
        Tuple of (groups, row field name).
    """
    match group_by:
        case GroupBy.CATEGORY:
            return category_list, "category"
        case GroupBy.GROUP | GroupBy.INTERVAL:
            return category_group_list, "categoryGroup"
        case GroupBy.PAYEE:
            return [
                ReportGroup(id=payee.id, name=payee.name, sort_order=index)
                for index, payee in enumerate(payees)
            ], "payee"
        case GroupBy.ACCOUNT:
            ordered = sorted(accounts, key=lambda a: a.sort_order)
            return [
                ReportGroup(id=account.id, name=account.name, sort_order=index)
                for index, account in enumerate(ordered)
            ], "account"


def is_category_based(field_name: GroupField) -> bool:
    """Whether groups are categories or category groups."""
    return field_name in ("category", "categoryGroup")
