"""Report processing pipeline components."""

from custom_reports.processing.aggregator import IntervalAggregator, metric_value
from custom_reports.processing.budget import BudgetAligner
from custom_reports.processing.groups import category_lists, group_by_selections
from custom_reports.processing.legend import calculate_legend
from custom_reports.processing.report_generator import (
    create_custom_spreadsheet,
    generate_report,
)
from custom_reports.processing.sorting import sort_data, sort_groups
from custom_reports.processing.summary import recalculate
from custom_reports.processing.trimming import (
    determine_interval_range,
    filter_empty_rows,
    trim_to_range,
)
from custom_reports.processing.visibility import filter_hidden_items

__all__ = [
    "IntervalAggregator",
    "metric_value",
    "BudgetAligner",
    "category_lists",
    "group_by_selections",
    "calculate_legend",
    "create_custom_spreadsheet",
    "generate_report",
    "sort_data",
    "sort_groups",
    "recalculate",
    "determine_interval_range",
    "filter_empty_rows",
    "trim_to_range",
    "filter_hidden_items",
]
