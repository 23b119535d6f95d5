"""Tests for budget month alignment."""

from custom_reports.models.category import Category, ReportGroup, UncategorizedKind
from custom_reports.models.report import ReportInterval
from custom_reports.models.transaction import BudgetRecord
from custom_reports.processing.budget import BudgetAligner, budget_months, months_for_interval

CATEGORIES = [
    Category(id="groceries", name="Groceries", group_id="food"),
    Category(id="restaurants", name="Restaurants", group_id="food"),
    Category(id="rent", name="Rent", group_id="housing"),
]

RECORDS = [
    BudgetRecord(202401, "groceries", -100),
    BudgetRecord(202401, "restaurants", -40),
    BudgetRecord(202401, "rent", -1000),
    BudgetRecord(202402, "groceries", -120),
    BudgetRecord(202312, "groceries", -90),
]

GROCERIES = ReportGroup(id="groceries", name="Groceries", group_id="food")
FOOD = ReportGroup(id="food", name="Food")


class TestMonthsForInterval:
    """Tests for months_for_interval and budget_months."""

    def test_monthly_label_is_its_own_month(self) -> None:
        assert months_for_interval("2024-02", ReportInterval.MONTHLY) == [202402]

    def test_yearly_label_covers_twelve_months(self) -> None:
        months = months_for_interval("2024", ReportInterval.YEARLY)
        assert months == [202400 + m for m in range(1, 13)]

    def test_daily_and_weekly_resolve_owning_month(self) -> None:
        assert months_for_interval("2024-03-31", ReportInterval.DAILY) == [202403]
        assert months_for_interval("2023-12-31", ReportInterval.WEEKLY) == [202312]

    def test_budget_months_monthly(self) -> None:
        months = budget_months(["2024-01", "2024-02"], ReportInterval.MONTHLY)
        assert months == [202401, 202402]

    def test_budget_months_yearly(self) -> None:
        months = budget_months(["2023", "2024"], ReportInterval.YEARLY)
        assert len(months) == 24
        assert months[0] == 202301
        assert months[-1] == 202412

    def test_budget_months_weekly_spans_first_to_last_label(self) -> None:
        months = budget_months(["2023-12-31", "2024-01-07", "2024-02-04"], ReportInterval.WEEKLY)
        assert months == [202312, 202401, 202402]


class TestBudgetAligner:
    """Tests for BudgetAligner.amount_for."""

    def test_category_grouping_matches_by_id(self) -> None:
        aligner = BudgetAligner(RECORDS, CATEGORIES, ReportInterval.MONTHLY, "category")

        assert aligner.amount_for(GROCERIES, "2024-01") == -100
        assert aligner.amount_for(GROCERIES, "2024-02") == -120
        assert aligner.amount_for(GROCERIES, "2024-03") == 0

    def test_group_grouping_sums_member_categories(self) -> None:
        aligner = BudgetAligner(RECORDS, CATEGORIES, ReportInterval.MONTHLY, "categoryGroup")

        assert aligner.amount_for(FOOD, "2024-01") == -140
        assert aligner.amount_for(ReportGroup(id="housing", name="Housing"), "2024-01") == -1000

    def test_yearly_sums_all_months(self) -> None:
        aligner = BudgetAligner(RECORDS, CATEGORIES, ReportInterval.YEARLY, "category")

        assert aligner.amount_for(GROCERIES, "2024") == -220
        assert aligner.amount_for(GROCERIES, "2023") == -90

    def test_daily_uses_month_of_day(self) -> None:
        aligner = BudgetAligner(RECORDS, CATEGORIES, ReportInterval.DAILY, "category")
        assert aligner.amount_for(GROCERIES, "2024-01-15") == -100

    def test_zero_for_group_without_id(self) -> None:
        aligner = BudgetAligner(RECORDS, CATEGORIES, ReportInterval.MONTHLY, "category")
        bucket = ReportGroup(id=None, name="Uncategorized", uncategorized=UncategorizedKind.OTHER)
        assert aligner.amount_for(bucket, "2024-01") == 0

    def test_zero_when_not_category_based(self) -> None:
        aligner = BudgetAligner(RECORDS, CATEGORIES, ReportInterval.MONTHLY, "payee")

        assert aligner.enabled is False
        assert aligner.amount_for(ReportGroup(id="groceries", name="x"), "2024-01") == 0

    def test_disabled_aligner(self) -> None:
        aligner = BudgetAligner.disabled(ReportInterval.MONTHLY, "category")
        assert aligner.amount_for(GROCERIES, "2024-01") == 0

    def test_duplicate_records_are_summed(self) -> None:
        records = [BudgetRecord(202401, "groceries", -10), BudgetRecord(202401, "groceries", -5)]
        aligner = BudgetAligner(records, CATEGORIES, ReportInterval.MONTHLY, "category")
        assert aligner.amount_for(GROCERIES, "2024-01") == -15
