from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class UsageVariableType(str, Enum):
    INT = "int"
    FLOAT = "float"
    STRING = "string"


@dataclass(frozen=True)
class UsageItem:
    """One named usage value a resource kind accepts from the usage file."""

    key: str
    value_type: UsageVariableType
    default_value: Optional[Any] = None
    description: str = ""


_INT_MAX = Decimal(2**63 - 1)
_INT_MIN = Decimal(-(2**63))


def _to_decimal(key: str, raw: Any) -> Decimal:
    # YAML booleans are ints in Python; never treat them as quantities.
    if isinstance(raw, bool):
        raise ValueError(f"'{key}' expects a number, got a boolean")
    if isinstance(raw, (int, float)):
        value = Decimal(str(raw))
    elif isinstance(raw, str):
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            raise ValueError(f"'{key}' expects a number, got {raw!r}") from None
    else:
        raise ValueError(f"'{key}' expects a number, got {type(raw).__name__}")
    if not value.is_finite():
        raise ValueError(f"'{key}' expects a finite number, got {raw!r}")
    return value


@dataclass
class UsageData:
    """Untyped usage attributes declared for one resource address.

    Values may be arbitrarily nested; each resource kind reads only the keys it
    declares. The typed getters return None for absent keys and raise
    ValueError when a present value cannot be converted.
    """

    address: str
    attributes: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str) -> Optional[Any]:
        return self.attributes.get(key)

    def has(self, key: str) -> bool:
        return key in self.attributes

    def get_float(self, key: str) -> Optional[Decimal]:
        raw = self.attributes.get(key)
        if raw is None:
            return None
        return _to_decimal(key, raw)

    def get_int(self, key: str) -> Optional[int]:
        raw = self.attributes.get(key)
        if raw is None:
            return None
        value = _to_decimal(key, raw)
        # Checked before int() so "1e2000000" never expands into millions of digits.
        if value.adjusted() > 18 or not _INT_MIN <= value <= _INT_MAX:
            raise ValueError(f"'{key}' is out of the 64-bit integer range, got {raw!r}")
        if value != value.to_integral_value():
            raise ValueError(f"'{key}' expects an integer, got {raw!r}")
        return int(value)

    def get_string(self, key: str) -> Optional[str]:
        raw = self.attributes.get(key)
        if raw is None:
            return None
        if isinstance(raw, (dict, list)):
            raise ValueError(f"'{key}' expects a string, got {type(raw).__name__}")
        return str(raw)

    def get_typed(self, key: str, value_type: UsageVariableType) -> Optional[Any]:
        if value_type is UsageVariableType.INT:
            return self.get_int(key)
        if value_type is UsageVariableType.FLOAT:
            return self.get_float(key)
        return self.get_string(key)


def new_usage_map(resource_usage: Mapping[str, Mapping[str, Any]]) -> Dict[str, UsageData]:
    return {
        str(address): UsageData(address=str(address), attributes=dict(attrs or {}))
        for address, attrs in resource_usage.items()
    }


__all__ = ["UsageVariableType", "UsageItem", "UsageData", "new_usage_map"]
