from .cost_component import CostComponent
from .filters import AttributeFilter, PriceFilter, ProductFilter
from .resource import Resource
from .usage import UsageData, UsageItem, UsageVariableType, new_usage_map

__all__ = [
    "AttributeFilter",
    "ProductFilter",
    "PriceFilter",
    "CostComponent",
    "Resource",
    "UsageData",
    "UsageItem",
    "UsageVariableType",
    "new_usage_map",
]
