from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Protocol, Sequence, Tuple

from ..diagnostics import FIELD_PROJECTION, Diagnostic, DiagnosticsSink
from ..schema import CostComponent, Resource, UsageData, UsageItem

_LOGGER = logging.getLogger(__name__)


class ResourceModel(Protocol):
    """A resource-kind-specific pricing policy."""

    core_type: str
    address: str

    def usage_schema(self) -> List[UsageItem]: ...

    def populate_usage(self, usage_data: Optional[UsageData], sink: Optional[DiagnosticsSink] = None) -> None: ...

    def build_cost_components(self) -> Tuple[List[CostComponent], Optional[Diagnostic]]: ...


@dataclass(frozen=True)
class UsageField:
    """A declared usage item paired with the function that stores it on the resource."""

    item: UsageItem
    setter: Callable[[Any, Any], None]

    @property
    def key(self) -> str:
        return self.item.key


def attr_setter(name: str) -> Callable[[Any, Any], None]:
    def _set(resource: Any, value: Any) -> None:
        setattr(resource, name, value)

    return _set


def populate_args_with_usage(
    resource: Any,
    fields: Sequence[UsageField],
    usage_data: Optional[UsageData],
    sink: Optional[DiagnosticsSink] = None,
) -> None:
    """Copy declared usage values from usage_data onto resource.

    Keys the resource does not declare are ignored and declared keys missing
    from the map keep their defaults. A value that cannot be converted to its
    declared type is reported and skipped; the remaining fields are still set.
    """
    if usage_data is None:
        return

    address = getattr(resource, "address", usage_data.address)
    for f in fields:
        if not usage_data.has(f.key):
            continue
        try:
            value = usage_data.get_typed(f.key, f.item.value_type)
        except ValueError as ex:
            message = f"Ignoring usage value '{f.key}' for {address}: {ex}"
            if sink is not None:
                sink.warn(FIELD_PROJECTION, address, message)
            else:
                _LOGGER.warning(message)
            continue
        if value is None:
            continue
        f.setter(resource, value)


class BaseResourceModel:
    """Default helpers shared by resource models."""

    core_type: str = "Resource"

    @classmethod
    def usage_fields(cls) -> List[UsageField]:
        return []

    def usage_schema(self) -> List[UsageItem]:
        return [f.item for f in self.usage_fields()]

    def populate_usage(self, usage_data: Optional[UsageData], sink: Optional[DiagnosticsSink] = None) -> None:
        populate_args_with_usage(self, self.usage_fields(), usage_data, sink)

    def build_cost_components(self) -> Tuple[List[CostComponent], Optional[Diagnostic]]:
        return [], None


def build_resource(model: ResourceModel, sink: Optional[DiagnosticsSink] = None) -> Optional[Resource]:
    """Build a Resource from a populated model, or None when the model cannot be priced.

    None means "skip this resource"; the reason goes to the sink (or the log).
    """
    components, diagnostic = model.build_cost_components()
    if diagnostic is not None:
        if sink is not None:
            sink.report(diagnostic)
        else:
            _LOGGER.warning(diagnostic.message)
        return None

    return Resource(
        name=model.address,
        core_type=model.core_type,
        cost_components=components,
        usage_schema=model.usage_schema(),
    )


__all__ = [
    "ResourceModel",
    "BaseResourceModel",
    "UsageField",
    "attr_setter",
    "populate_args_with_usage",
    "build_resource",
]
