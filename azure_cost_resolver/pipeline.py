"""Synchronous run: usage file -> usage overlay -> cost components per resource."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .config import USAGE_FILE
from .diagnostics import DiagnosticsSink
from .resources.base import build_resource
from .resources.registry import ResourceRegistry, build_default_registry
from .schema import Resource, UsageData
from .usage.usage_file import load_from_file

_LOGGER = logging.getLogger(__name__)


def build_resources(
    raw_resources: Iterable[Mapping[str, Any]],
    usage_map: Optional[Dict[str, UsageData]] = None,
    *,
    registry: Optional[ResourceRegistry] = None,
    sink: Optional[DiagnosticsSink] = None,
) -> List[Resource]:
    """Build every resource that can be priced.

    Each raw resource is a mapping with "type", "address", "region" and
    "attributes", as produced by the IaC ingestion step. Unknown types and
    unsupported configurations are skipped; the others keep input order.
    """
    registry = registry or build_default_registry()
    usage_map = usage_map or {}

    out: List[Resource] = []
    for raw in raw_resources:
        resource_type = str(raw.get("type") or "")
        address = str(raw.get("address") or "")
        model = registry.create(
            resource_type,
            address,
            str(raw.get("region") or ""),
            raw.get("attributes") or {},
        )
        if model is None:
            _LOGGER.debug("Skipping resource %s. Resource type %s is not supported", address, resource_type)
            continue

        model.populate_usage(usage_map.get(address), sink)

        resource = build_resource(model, sink)
        if resource is not None:
            out.append(resource)
    return out


def run(
    raw_resources: Iterable[Mapping[str, Any]],
    usage_file: Union[str, Path, None] = USAGE_FILE,
    *,
    registry: Optional[ResourceRegistry] = None,
    sink: Optional[DiagnosticsSink] = None,
) -> List[Resource]:
    usage_map = load_from_file(usage_file)
    return build_resources(raw_resources, usage_map, registry=registry, sink=sink)


__all__ = ["build_resources", "run"]
