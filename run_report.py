#!/usr/bin/env python3
"""Custom financial report runner.

This is the main entry point script for custom reports.
It wraps the package CLI for convenient execution.

Usage:
    python run_report.py reports/spending.yaml --ledger ledger.yaml

For full documentation and options:
    python run_report.py --help
"""

import sys
from pathlib import Path

# Add src to path for development installs
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from custom_reports.cli import main

if __name__ == "__main__":
    sys.exit(main())
