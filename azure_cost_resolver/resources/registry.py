from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from .azure.storage_queue import StorageQueue
from .base import ResourceModel

ResourceFactory = Callable[[str, str, Mapping[str, Any]], ResourceModel]


@dataclass
class ResourceRegistry:
    """Lookup table for resource model factories by core type or IaC resource type."""

    factories: Dict[str, ResourceFactory] = field(default_factory=dict)
    aliases: Dict[str, str] = field(default_factory=dict)  # IaC type -> core type

    def register(self, core_type: str, factory: ResourceFactory, aliases: Optional[List[str]] = None) -> None:
        self.factories[core_type] = factory
        for alias in aliases or []:
            self.aliases[alias] = core_type

    def resolve(self, resource_type: str) -> Optional[str]:
        if resource_type in self.factories:
            return resource_type
        return self.aliases.get(resource_type)

    def get(self, resource_type: str) -> Optional[ResourceFactory]:
        core_type = self.resolve(resource_type)
        if core_type is None:
            return None
        return self.factories[core_type]

    def create(self, resource_type: str, address: str, region: str, attributes: Mapping[str, Any]) -> Optional[ResourceModel]:
        factory = self.get(resource_type)
        if factory is None:
            return None
        return factory(address, region, attributes)


def build_default_registry() -> ResourceRegistry:
    reg = ResourceRegistry()
    reg.register(StorageQueue.core_type, StorageQueue.from_attributes, aliases=["azurerm_storage_queue"])
    return reg
