"""Report filter conditions."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class RuleCondition:
    """User-authored filter condition.

    Attributes:
        field: Transaction field the condition applies to.
        op: Operator name (e.g. "is", "oneOf", "gt").
        value: Operand; a list for "oneOf"/"notOneOf".
        options: Operator options such as ``{"inflow": True}`` for amounts.
        custom_name: Set on saved-filter references, which are not translated.
    """

    field: str
    op: str
    value: object = None
    options: dict[str, object] = field(default_factory=dict)
    custom_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "RuleCondition":
        """Create a RuleCondition from a dictionary (e.g., from YAML)."""
        return cls(
            field=str(data["field"]),
            op=str(data["op"]),
            value=data.get("value"),
            options=dict(data.get("options") or {}),  # type: ignore[call-overload]
            custom_name=str(data["custom_name"]) if data.get("custom_name") else None,
        )
