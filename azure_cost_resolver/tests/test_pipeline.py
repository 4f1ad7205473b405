from decimal import Decimal

import pytest

from azure_cost_resolver.diagnostics import FIELD_PROJECTION, UNSUPPORTED_CONFIGURATION
from azure_cost_resolver.errors import VersionRangeError
from azure_cost_resolver.pipeline import build_resources, run
from azure_cost_resolver.resources import StorageQueue, build_default_registry


def _raw(address: str, replication: str, resource_type: str = "azurerm_storage_queue") -> dict:
    return {
        "type": resource_type,
        "address": address,
        "region": "westeurope",
        "attributes": {"account_replication_type": replication},
    }


RAW_RESOURCES = [
    _raw("azurerm_storage_queue.lrs", "LRS"),
    _raw("azurerm_storage_queue.bad", "XYZ"),
    _raw("azurerm_storage_queue.ragzrs", "RA-GZRS"),
]


def test_end_to_end_scenario(sink):
    resources = build_resources(RAW_RESOURCES, {}, sink=sink)

    assert [r.name for r in resources] == ["azurerm_storage_queue.lrs", "azurerm_storage_queue.ragzrs"]
    assert resources[0].component_names() == ["Capacity", "Class 1 operations", "Class 2 operations"]
    assert resources[1].component_names() == ["Capacity", "Class 2 operations", "Geo-replication data transfer"]
    assert [d.kind for d in sink.diagnostics] == [UNSUPPORTED_CONFIGURATION]
    assert sink.diagnostics[0].address == "azurerm_storage_queue.bad"


def test_run_applies_usage_file(sink, write_usage_file):
    path = write_usage_file(
        "version: 0.1\n"
        "resource_usage:\n"
        "  azurerm_storage_queue.lrs:\n"
        "    monthly_storage_gb: 50\n"
        "    monthly_class_1_operations: not-a-number\n"
        "    unrelated_key: 1\n"
        "  azurerm_storage_queue.not_in_plan:\n"
        "    monthly_storage_gb: 1\n"
    )

    resources = run(RAW_RESOURCES, path, sink=sink)

    lrs = resources[0]
    assert lrs.component("Capacity").monthly_quantity == Decimal(50)
    assert lrs.component("Class 1 operations").monthly_quantity is None
    assert resources[1].component("Capacity").monthly_quantity is None
    assert sorted(d.kind for d in sink.diagnostics) == sorted([FIELD_PROJECTION, UNSUPPORTED_CONFIGURATION])


def test_run_without_usage_file(sink):
    resources = run(RAW_RESOURCES, "", sink=sink)

    assert len(resources) == 2
    assert all(c.monthly_quantity is None for r in resources for c in r.cost_components)


def test_run_propagates_usage_file_errors(write_usage_file):
    path = write_usage_file("version: 0.2\n")

    with pytest.raises(VersionRangeError):
        run(RAW_RESOURCES, path)


def test_unknown_resource_types_are_skipped(sink):
    resources = build_resources(
        [_raw("azurerm_storage_blob.b", "LRS", resource_type="azurerm_storage_blob"), _raw("q.a", "zrs", "StorageQueue")],
        sink=sink,
    )

    assert [r.name for r in resources] == ["q.a"]
    assert len(sink) == 0


def test_registry_resolves_core_type_and_alias():
    reg = build_default_registry()

    assert reg.resolve("azurerm_storage_queue") == "StorageQueue"
    assert reg.resolve("StorageQueue") == "StorageQueue"
    assert reg.get("azurerm_storage_account") is None
    model = reg.create("azurerm_storage_queue", "q.x", "eastus", {"account_replication_type": "GRS"})
    assert isinstance(model, StorageQueue)
    assert model.region == "eastus"
