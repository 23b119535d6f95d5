"""Custom financial reports: interval and group aggregation of ledger activity."""

__version__ = "0.1.0"
