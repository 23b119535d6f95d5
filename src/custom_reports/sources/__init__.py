"""Data sources that answer the queries of the report generator."""

from custom_reports.sources.base import ReportDataSource
from custom_reports.sources.memory import InMemoryDataSource, Ledger, translate_condition

__all__ = [
    "ReportDataSource",
    "InMemoryDataSource",
    "Ledger",
    "translate_condition",
]
