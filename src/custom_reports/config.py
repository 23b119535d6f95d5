"""Configuration loading: settings, report definitions and ledgers."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional, TypeVar

import yaml

from custom_reports.exceptions import ConfigError
from custom_reports.models.account import Account, Payee
from custom_reports.models.category import CategoryGroup
from custom_reports.models.condition import RuleCondition
from custom_reports.models.options import (
    ConditionsOp,
    GraphType,
    GroupBy,
    ReportOptions,
    SortBy,
)
from custom_reports.models.report import BalanceType, ReportInterval
from custom_reports.models.transaction import BudgetRecord, Transaction
from custom_reports.sources.memory import Ledger
from custom_reports.utils.logging_config import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


@dataclass
class OutputConfig:
    """Configuration for report output.

    Attributes:
        format: Export format (json, csv or xlsx).
        currency_symbol: Currency symbol for display.
        decimal_places: Digits of the minor currency unit.
    """

    format: str = "json"
    currency_symbol: str = "$"
    decimal_places: int = 2

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "OutputConfig":
        """Create from dictionary."""
        output_format = str(data.get("format", "json")).lower()
        if output_format not in ("json", "csv", "xlsx"):
            raise ConfigError(f"unsupported format {output_format!r}", key="output.format")
        return cls(
            format=output_format,
            currency_symbol=str(data.get("currency_symbol", "$")),
            decimal_places=int(data.get("decimal_places", 2)),  # type: ignore[arg-type]
        )

    def format_amount(self, amount: int) -> str:
        """Render an amount in minor units as currency text (e.g. "-$12.50")."""
        scale = 10 ** self.decimal_places
        sign = "-" if amount < 0 else ""
        whole, minor = divmod(abs(amount), scale)
        if self.decimal_places == 0:
            return f"{sign}{self.currency_symbol}{whole:,}"
        return f"{sign}{self.currency_symbol}{whole:,}.{minor:0{self.decimal_places}d}"


@dataclass
class LoggingConfig:
    """Configuration for logging.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        file: Path to log file.
    """

    level: str = "INFO"
    file: str = "custom_reports.log"

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "LoggingConfig":
        """Create from dictionary."""
        return cls(
            level=str(data.get("level", "INFO")),
            file=str(data.get("file", "custom_reports.log")),
        )


@dataclass
class Settings:
    """Application settings from settings.yaml."""

    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_yaml_file(path: Path) -> dict[str, object]:
    """Load a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML content.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ConfigError: If the file is not valid YAML or not a mapping.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML: {e}", key=str(path)) from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigError(f"expected a mapping, got {type(content).__name__}", key=str(path))
    return content


def load_settings(path: Optional[Path]) -> Settings:
    """Load settings, falling back to defaults when the file is missing."""
    settings = Settings()
    if path is None or not path.exists():
        logger.warning(f"Settings file not found: {path}, using defaults")
        return settings

    data = load_yaml_file(path)
    if "output" in data:
        settings.output = OutputConfig.from_dict(data["output"] or {})  # type: ignore[arg-type]
    if "logging" in data:
        settings.logging = LoggingConfig.from_dict(data["logging"] or {})  # type: ignore[arg-type]

    logger.info(f"Loaded settings from {path}")
    return settings


def parse_enum(enum_type: type[E], value: object, key: str) -> E:
    """Parse an enum by value, raising ConfigError with the offending key."""
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(str(member.value) for member in enum_type)
        raise ConfigError(f"invalid value {value!r} (expected one of: {allowed})", key=key) from None


def _parse_date(data: dict[str, object], key: str) -> date:
    if key not in data:
        raise ConfigError("missing required key", key=key)
    value = data[key]
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ConfigError(f"invalid date {value!r} (expected YYYY-MM-DD)", key=key) from None


def load_ledger(path: Path) -> Ledger:
    """Load a ledger (categories, payees, accounts, transactions, budgets).

    Args:
        path: Path to the ledger YAML file.

    Returns:
        Ledger instance.
    """
    data = load_yaml_file(path)

    def section(name: str) -> list[dict[str, object]]:
        items = data.get(name) or []
        if not isinstance(items, list):
            raise ConfigError(f"must be a list, got {type(items).__name__}", key=name)
        return items

    try:
        ledger = Ledger(
            category_groups=[CategoryGroup.from_dict(item) for item in section("category_groups")],
            payees=[Payee.from_dict(item) for item in section("payees")],
            accounts=[Account.from_dict(item) for item in section("accounts")],
            transactions=[Transaction.from_dict(item) for item in section("transactions")],
            budgets=[BudgetRecord.from_dict(item) for item in section("budgets")],
        )
    except KeyError as e:
        raise ConfigError(f"missing required key {e}", key=str(path)) from e
    except (TypeError, ValueError) as e:
        raise ConfigError(f"invalid value: {e}", key=str(path)) from e

    logger.info(
        f"Loaded ledger from {path}: {len(ledger.categories)} categories, "
        f"{len(ledger.accounts)} accounts, {len(ledger.transactions)} transactions"
    )
    return ledger


def report_options_from_dict(data: dict[str, object], ledger: Ledger) -> ReportOptions:
    """Build ReportOptions from a report definition and a ledger.

    Raises:
        ConfigError: On missing keys, bad dates or unknown selector values.
    """
    start_date = _parse_date(data, "start_date")
    end_date = _parse_date(data, "end_date")
    if end_date < start_date:
        raise ConfigError(f"{end_date} is before start_date {start_date}", key="end_date")

    raw_conditions = data.get("conditions") or []
    if not isinstance(raw_conditions, list):
        raise ConfigError("must be a list", key="conditions")
    try:
        conditions = [RuleCondition.from_dict(cond) for cond in raw_conditions]
    except KeyError as e:
        raise ConfigError(f"missing {e}", key="conditions") from e

    raw_first_day = data.get("first_day_of_week_idx", 0)
    try:
        first_day = int(raw_first_day)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ConfigError(
            f"invalid value {raw_first_day!r} (expected 0-6)", key="first_day_of_week_idx"
        ) from None
    if not 0 <= first_day <= 6:
        raise ConfigError("must be between 0 (Sunday) and 6", key="first_day_of_week_idx")

    return ReportOptions(
        start_date=start_date,
        end_date=end_date,
        interval=parse_enum(ReportInterval, data.get("interval", "Monthly"), "interval"),
        category_groups=ledger.category_groups,
        conditions=conditions,
        conditions_op=parse_enum(ConditionsOp, data.get("conditions_op", "and"), "conditions_op"),
        show_empty=bool(data.get("show_empty", False)),
        show_off_budget=bool(data.get("show_off_budget", False)),
        show_hidden_categories=bool(data.get("show_hidden_categories", False)),
        show_uncategorized=bool(data.get("show_uncategorized", False)),
        trim_intervals=bool(data.get("trim_intervals", False)),
        group_by=parse_enum(GroupBy, data.get("group_by", "Category"), "group_by"),
        balance_type=parse_enum(BalanceType, data.get("balance_type", "totalDebts"), "balance_type"),
        sort_by=parse_enum(SortBy, data.get("sort_by", "desc"), "sort_by"),
        payees=ledger.payees,
        accounts=ledger.accounts,
        graph_type=parse_enum(GraphType, data.get("graph_type", "BarGraph"), "graph_type"),
        first_day_of_week_idx=first_day,
    )


def load_report(path: Path, ledger: Ledger) -> ReportOptions:
    """Load a report definition file and resolve it against a ledger."""
    options = report_options_from_dict(load_yaml_file(path), ledger)
    logger.info(
        f"Loaded report {path.name}: {options.group_by.value} by {options.interval.value}, "
        f"{options.balance_type.value}"
    )
    return options
