"""Shared utilities for date handling, logging and output sanitization."""
