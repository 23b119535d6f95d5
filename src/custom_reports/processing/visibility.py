"""Row visibility rules: hidden categories, off-budget accounts, uncategorized rows."""

from collections.abc import Iterable

from custom_reports.models.category import ReportGroup, UncategorizedKind
from custom_reports.models.transaction import QueryRow


def filter_hidden_items(
    group: ReportGroup,
    rows: Iterable[QueryRow],
    show_off_budget: bool,
    show_hidden_categories: bool,
    show_uncategorized: bool,
    group_by_category: bool,
) -> list[QueryRow]:
    """Drop the rows a report must not show for a group.

    For a synthetic uncategorized bucket under category-based grouping, the
    result is narrowed to the rows that bucket owns. The buckets are
    disjoint, so no uncategorized row is counted twice even though
    matches_group() does not compare ids for them.

    Args:
        group: Group being evaluated.
        rows: Query rows.
        show_off_budget: Keep rows on off-budget accounts.
        show_hidden_categories: Keep rows in hidden categories or groups.
        show_uncategorized: Keep rows without a category.
        group_by_category: Whether groups are categories or category groups.

    Returns:
        Visible rows, in input order.
    """
    visible = [
        row for row in rows
        if _is_visible(row, show_off_budget, show_hidden_categories, group_by_category)
    ]

    if not show_uncategorized:
        visible = [row for row in visible if row.category is not None]

    if group.is_uncategorized and group_by_category:
        return [
            row for row in visible
            if row.category is None and _in_bucket(row, group.uncategorized)
        ]

    return visible


def _is_visible(
    row: QueryRow,
    show_off_budget: bool,
    show_hidden_categories: bool,
    group_by_category: bool,
) -> bool:
    if group_by_category and not show_hidden_categories:
        if row.category_hidden or row.category_group_hidden:
            return False
    if not show_off_budget and row.account_off_budget:
        return False
    return True


def _in_bucket(row: QueryRow, kind: UncategorizedKind) -> bool:
    match kind:
        case UncategorizedKind.OTHER:
            return row.transfer_account is None and not row.account_off_budget
        case UncategorizedKind.TRANSFER:
            return row.transfer_account is not None and not row.account_off_budget
        case UncategorizedKind.OFF_BUDGET:
            return row.account_off_budget
        case UncategorizedKind.ALL:
            return True


def matches_group(
    row: QueryRow,
    group: ReportGroup,
    field_name: str,
    group_by_category: bool,
) -> bool:
    """Whether a visible row belongs to a group.

    Uncategorized buckets under category-based grouping match every row;
    filter_hidden_items() has already narrowed the rows to the bucket.
    """
    if group.is_uncategorized and group_by_category:
        return True
    return row.key_for(field_name) == group.id
