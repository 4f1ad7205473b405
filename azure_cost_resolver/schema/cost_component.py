from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional

from .filters import PriceFilter, ProductFilter


def _dec(value: Optional[Decimal]) -> Optional[str]:
    return None if value is None else str(value)


@dataclass(frozen=True)
class CostComponent:
    """One billable line item of a resource, resolved against the catalog by its filters."""

    name: str
    unit: str
    unit_multiplier: Decimal
    product_filter: ProductFilter
    price_filter: PriceFilter
    monthly_quantity: Optional[Decimal] = None  # None until usage is known
    hourly_quantity: Optional[Decimal] = None

    def __post_init__(self) -> None:
        if self.unit_multiplier < 0:
            raise ValueError(f"unit_multiplier must be >= 0 for cost component '{self.name}'")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "unit": self.unit,
            "unitMultiplier": str(self.unit_multiplier),
            "monthlyQuantity": _dec(self.monthly_quantity),
            "hourlyQuantity": _dec(self.hourly_quantity),
            "productFilter": self.product_filter.to_dict(),
            "priceFilter": self.price_filter.to_dict(),
        }


__all__ = ["CostComponent"]
