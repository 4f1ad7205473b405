from pathlib import Path

import pytest

from azure_cost_resolver.errors import FileReadError, ParseError, UsageFileError, VersionRangeError
from azure_cost_resolver.usage import check_version, load_from_file, parse_usage_file, parse_yaml

USAGE_YAML = """\
version: 0.1
resource_usage:
  azurerm_storage_queue.example:
    monthly_storage_gb: 1000
    monthly_class_1_operations: 200000
  azurerm_storage_queue.nested:
    backups:
      - region: eastus
        gb: 10
  azurerm_storage_queue.empty:
"""


@pytest.mark.parametrize("version", ["0.1", "v0.1", "0.1.0", "v0.1.0"])
def test_check_version_accepts_supported(version):
    assert check_version(version)


@pytest.mark.parametrize("version", ["0.2", "0.0", "", "v", "abc", "1.0", "0.1.1", "0.1.0-rc1", "01.1"])
def test_check_version_rejects_out_of_range_or_malformed(version):
    assert not check_version(version)


@pytest.mark.parametrize("version", ['"0.2"', '"0.0"', '""'])
def test_parse_yaml_rejects_version_with_range_in_message(version):
    with pytest.raises(VersionRangeError, match="Supported versions are 0.1 ≤ x ≤ 0.1") as excinfo:
        parse_yaml(f"version: {version}\nresource_usage: {{}}\n")

    assert excinfo.value.min_version == "0.1"
    assert excinfo.value.max_version == "0.1"


@pytest.mark.parametrize("version", ["0.10", ".1", "0.100", "1e-1"])
def test_parse_yaml_reads_unquoted_version_as_written(version):
    with pytest.raises(VersionRangeError):
        parse_yaml(f"version: {version}\nresource_usage: {{}}\n")


def test_parse_yaml_rejects_missing_version():
    with pytest.raises(VersionRangeError):
        parse_yaml("resource_usage: {}\n")


@pytest.mark.parametrize("version", ["0.1", '"0.1"', '"v0.1"'])
def test_parse_yaml_accepts_numeric_and_prefixed_versions(version):
    assert parse_yaml(f"version: {version}\n") == {}


def test_parse_yaml_builds_usage_map():
    usage = parse_yaml(USAGE_YAML.encode("utf-8"))

    assert set(usage) == {
        "azurerm_storage_queue.example",
        "azurerm_storage_queue.nested",
        "azurerm_storage_queue.empty",
    }
    example = usage["azurerm_storage_queue.example"]
    assert example.address == "azurerm_storage_queue.example"
    assert example.get_int("monthly_class_1_operations") == 200000
    assert usage["azurerm_storage_queue.nested"].get("backups") == [{"region": "eastus", "gb": 10}]
    assert usage["azurerm_storage_queue.empty"].attributes == {}


def test_parse_usage_file_keeps_version_text():
    parsed = parse_usage_file("version: v0.1\nresource_usage:\n  a.b: {x: 1}\n")

    assert parsed.version == "v0.1"
    assert parsed.resource_usage == {"a.b": {"x": 1}}


@pytest.mark.parametrize(
    "content",
    [
        "version: 0.1\nresource_usage: [\n",
        "- just\n- a list\n",
        "version: 0.1\nresource_usage: [1, 2]\n",
        "version: 0.1\nresource_usage:\n  a.b: 12\n",
        "version: [0, 1]\n",
    ],
)
def test_parse_yaml_rejects_malformed_structure(content):
    with pytest.raises(ParseError, match="Error parsing usage YAML"):
        parse_yaml(content)


def test_malformed_yaml_chains_cause():
    with pytest.raises(ParseError) as excinfo:
        parse_yaml("version: 0.1\nresource_usage: {a: [}\n")

    assert excinfo.value.__cause__ is not None


@pytest.mark.parametrize("path", ["", None])
def test_load_from_file_without_path_returns_empty_map(path):
    assert load_from_file(path) == {}


def test_load_from_file_reads_yaml(write_usage_file):
    path = write_usage_file(USAGE_YAML)

    usage = load_from_file(path)

    assert usage["azurerm_storage_queue.example"].get_float("monthly_storage_gb") == 1000
    assert load_from_file(str(path)).keys() == usage.keys()


def test_load_from_file_missing_file_raises_file_read_error(tmp_path: Path):
    missing = tmp_path / "nope.yml"

    with pytest.raises(FileReadError, match="Error reading usage file") as excinfo:
        load_from_file(missing)

    assert isinstance(excinfo.value.__cause__, OSError)
    assert excinfo.value.path == str(missing)


def test_load_from_file_version_error_is_a_usage_file_error(write_usage_file):
    path = write_usage_file("version: 0.2\nresource_usage: {}\n")

    with pytest.raises(UsageFileError, match="Invalid usage file version"):
        load_from_file(path)
