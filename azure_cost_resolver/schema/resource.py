from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .cost_component import CostComponent
from .usage import UsageItem


@dataclass(frozen=True)
class Resource:
    """A priced resource: its name plus the ordered cost components to resolve."""

    name: str
    core_type: str
    cost_components: List[CostComponent] = field(default_factory=list)
    usage_schema: List[UsageItem] = field(default_factory=list)

    def component(self, name: str) -> Optional[CostComponent]:
        for c in self.cost_components:
            if c.name == name:
                return c
        return None

    def component_names(self) -> List[str]:
        return [c.name for c in self.cost_components]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "coreType": self.core_type,
            "costComponents": [c.to_dict() for c in self.cost_components],
        }


__all__ = ["Resource"]
