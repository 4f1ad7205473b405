from .azure import StorageQueue
from .base import BaseResourceModel, ResourceModel, UsageField, build_resource, populate_args_with_usage
from .registry import ResourceRegistry, build_default_registry

__all__ = [
    "BaseResourceModel",
    "ResourceModel",
    "ResourceRegistry",
    "StorageQueue",
    "UsageField",
    "build_default_registry",
    "build_resource",
    "populate_args_with_usage",
]
