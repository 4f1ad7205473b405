"""Azure Queue Storage.

Resource information: https://azure.microsoft.com/en-gb/pricing/details/storage/queues/
Pricing information: https://azure.microsoft.com/en-gb/pricing/details/storage/queues/#pricing
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ...config import DEFAULT_PURCHASE_OPTION, DEFAULT_START_USAGE_AMOUNT, VENDOR_NAME
from ...diagnostics import UNSUPPORTED_CONFIGURATION, Diagnostic
from ...schema import AttributeFilter, CostComponent, PriceFilter, ProductFilter, UsageItem, UsageVariableType
from ..base import BaseResourceModel, UsageField, attr_setter

_OPERATIONS_PER_UNIT = Decimal(10000)


@dataclass(frozen=True)
class _ReplicationRule:
    class_1_operations: bool
    geo_replication_transfer: bool


# Keyed by upper-cased replication type. GZRS variants bill class 1 operations
# under a different meter; only geo-replicated types pay for replication traffic.
_REPLICATION_RULES: Dict[str, _ReplicationRule] = {
    "LRS": _ReplicationRule(class_1_operations=True, geo_replication_transfer=False),
    "ZRS": _ReplicationRule(class_1_operations=True, geo_replication_transfer=False),
    "GRS": _ReplicationRule(class_1_operations=True, geo_replication_transfer=True),
    "RA-GRS": _ReplicationRule(class_1_operations=True, geo_replication_transfer=True),
    "GZRS": _ReplicationRule(class_1_operations=False, geo_replication_transfer=True),
    "RA-GZRS": _ReplicationRule(class_1_operations=False, geo_replication_transfer=True),
}

SUPPORTED_REPLICATION_TYPES: Tuple[str, ...] = tuple(_REPLICATION_RULES)

_USAGE_FIELDS: Tuple[UsageField, ...] = (
    UsageField(
        UsageItem("monthly_storage_gb", UsageVariableType.FLOAT, description="Total size of queue storage in GB"),
        attr_setter("monthly_storage_gb"),
    ),
    UsageField(
        UsageItem("monthly_class_1_operations", UsageVariableType.INT, description="Monthly number of Class 1 operations"),
        attr_setter("monthly_class_1_operations"),
    ),
    UsageField(
        UsageItem("monthly_class_2_operations", UsageVariableType.INT, description="Monthly number of Class 2 operations"),
        attr_setter("monthly_class_2_operations"),
    ),
    UsageField(
        UsageItem(
            "monthly_geo_replication_data_transfer_gb",
            UsageVariableType.FLOAT,
            description="Monthly data replicated to the secondary region in GB",
        ),
        attr_setter("monthly_geo_replication_data_transfer_gb"),
    ),
)


def _per_10k(operations: Optional[int]) -> Optional[Decimal]:
    if operations is None:
        return None
    return Decimal(operations) / _OPERATIONS_PER_UNIT


@dataclass
class StorageQueue(BaseResourceModel):
    address: str
    region: str
    account_replication_type: str

    monthly_storage_gb: Optional[Decimal] = None
    monthly_class_1_operations: Optional[int] = None
    monthly_class_2_operations: Optional[int] = None
    monthly_geo_replication_data_transfer_gb: Optional[Decimal] = None

    core_type = "StorageQueue"

    @classmethod
    def from_attributes(cls, address: str, region: str, attributes: Mapping[str, Any]) -> "StorageQueue":
        return cls(
            address=address,
            region=region,
            account_replication_type=str(attributes.get("account_replication_type") or ""),
        )

    @classmethod
    def usage_fields(cls) -> List[UsageField]:
        return list(_USAGE_FIELDS)

    @property
    def replication(self) -> str:
        return self.account_replication_type.upper()

    def build_cost_components(self) -> Tuple[List[CostComponent], Optional[Diagnostic]]:
        rule = _REPLICATION_RULES.get(self.replication)
        if rule is None:
            return [], Diagnostic(
                kind=UNSUPPORTED_CONFIGURATION,
                address=self.address,
                message=(
                    f"Skipping resource {self.address}. "
                    f"Storage queues don't support {self.account_replication_type} redundancy"
                ),
            )

        components = [self._data_storage_cost_component()]
        components.extend(self._operations_cost_components(rule))
        components.extend(self._geo_replication_data_transfer_cost_components(rule))
        return components, None

    def _product_filter(self, *attribute_filters: AttributeFilter) -> ProductFilter:
        return ProductFilter(
            vendor_name=VENDOR_NAME,
            region=self.region,
            service="Storage",
            product_family="Storage",
            attribute_filters=tuple(attribute_filters),
        )

    @staticmethod
    def _price_filter() -> PriceFilter:
        return PriceFilter(
            purchase_option=DEFAULT_PURCHASE_OPTION,
            start_usage_amount=DEFAULT_START_USAGE_AMOUNT,
        )

    def _data_storage_cost_component(self) -> CostComponent:
        return CostComponent(
            name="Capacity",
            unit="GB",
            unit_multiplier=Decimal(1),
            monthly_quantity=self.monthly_storage_gb,
            product_filter=self._product_filter(
                AttributeFilter(key="productName", value="Queues v2"),
                AttributeFilter(key="skuName", value=f"Standard {self.replication}"),
                AttributeFilter(key="meterName", value=f"{self.replication} Data Stored"),
            ),
            price_filter=self._price_filter(),
        )

    def _operations_cost_component(self, name: str, meter_regex: str, operations: Optional[int]) -> CostComponent:
        return CostComponent(
            name=name,
            unit="10k operations",
            unit_multiplier=Decimal(1),
            monthly_quantity=_per_10k(operations),
            product_filter=self._product_filter(
                AttributeFilter(key="productName", value="Queues v2"),
                AttributeFilter(key="skuName", value=f"Standard {self.replication}"),
                AttributeFilter(key="meterName", value_regex=meter_regex),
            ),
            price_filter=self._price_filter(),
        )

    def _operations_cost_components(self, rule: _ReplicationRule) -> List[CostComponent]:
        components: List[CostComponent] = []
        if rule.class_1_operations:
            components.append(
                self._operations_cost_component(
                    "Class 1 operations", "Class 1 Operations$", self.monthly_class_1_operations
                )
            )
        components.append(
            self._operations_cost_component("Class 2 operations", "Class 2 Operations$", self.monthly_class_2_operations)
        )
        return components

    def _geo_replication_data_transfer_cost_components(self, rule: _ReplicationRule) -> List[CostComponent]:
        if not rule.geo_replication_transfer:
            return []

        return [
            CostComponent(
                name="Geo-replication data transfer",
                unit="GB",
                unit_multiplier=Decimal(1),
                monthly_quantity=self.monthly_geo_replication_data_transfer_gb,
                product_filter=self._product_filter(
                    AttributeFilter(key="productName", value="Storage - Bandwidth"),
                    AttributeFilter(key="skuName", value="Geo-Replication v2"),
                    AttributeFilter(key="meterName", value="Geo-Replication v2 Data Transfer"),
                ),
                price_filter=self._price_filter(),
            )
        ]


__all__ = ["StorageQueue", "SUPPORTED_REPLICATION_TYPES"]
