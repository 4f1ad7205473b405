"""Filters describing what to ask the price catalog for.

A ProductFilter identifies one product; a PriceFilter selects one of the
prices attached to it (tier, purchase option, term).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class AttributeFilter:
    """Matches one product attribute exactly (value) or by pattern (value_regex)."""

    key: str
    value: Optional[str] = None
    value_regex: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"key": self.key}
        if self.value is not None:
            out["value"] = self.value
        if self.value_regex is not None:
            out["value_regex"] = self.value_regex
        return out


@dataclass(frozen=True)
class ProductFilter:
    vendor_name: Optional[str] = None
    region: Optional[str] = None
    service: Optional[str] = None
    product_family: Optional[str] = None
    attribute_filters: Tuple[AttributeFilter, ...] = field(default_factory=tuple)

    def attribute(self, key: str) -> Optional[AttributeFilter]:
        for af in self.attribute_filters:
            if af.key == key:
                return af
        return None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.vendor_name is not None:
            out["vendorName"] = self.vendor_name
        if self.region is not None:
            out["region"] = self.region
        if self.service is not None:
            out["service"] = self.service
        if self.product_family is not None:
            out["productFamily"] = self.product_family
        out["attributeFilters"] = [af.to_dict() for af in self.attribute_filters]
        return out


_PRICE_FILTER_KEYS = (
    ("purchase_option", "purchaseOption"),
    ("start_usage_amount", "startUsageAmount"),
    ("end_usage_amount", "endUsageAmount"),
    ("unit", "unit"),
    ("term_length", "termLength"),
    ("term_purchase_length", "termPurchaseLength"),
    ("term_offering_class", "termOfferingClass"),
)


@dataclass(frozen=True)
class PriceFilter:
    purchase_option: Optional[str] = None
    start_usage_amount: Optional[str] = None
    end_usage_amount: Optional[str] = None
    unit: Optional[str] = None
    term_length: Optional[str] = None
    term_purchase_length: Optional[str] = None
    term_offering_class: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for attr, key in _PRICE_FILTER_KEYS:
            value = getattr(self, attr)
            if value is not None:
                out[key] = value
        return out


__all__ = ["AttributeFilter", "ProductFilter", "PriceFilter"]
