"""Usage file loader.

A usage file is YAML with two top-level keys:

    version: 0.1
    resource_usage:
      azurerm_storage_queue.example:
        monthly_storage_gb: 100

The loader is strict about structure and version and lenient about content:
what each resource reads out of its entry is decided later by its usage schema.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from ..config import MAX_USAGE_FILE_VERSION, MIN_USAGE_FILE_VERSION
from ..errors import FileReadError, ParseError, VersionRangeError
from ..schema import UsageData, new_usage_map

_LOGGER = logging.getLogger(__name__)

# vMAJOR[.MINOR[.PATCH[-PRERELEASE]]][+BUILD]; shorthand forms take no prerelease.
_SEMVER_RE = re.compile(
    r"^v(0|[1-9]\d*)"
    r"(?:\.(0|[1-9]\d*)"
    r"(?:\.(0|[1-9]\d*)(?:-([0-9A-Za-z.-]+))?)?)?"
    r"(?:\+[0-9A-Za-z.-]+)?$"
)


@dataclass(frozen=True)
class UsageFile:
    version: str
    resource_usage: Dict[str, Dict[str, Any]] = field(default_factory=dict)


def _semver_key(v: str) -> Optional[Tuple[int, int, int, int, str]]:
    m = _SEMVER_RE.match(v)
    if not m:
        return None
    major, minor, patch, pre = m.groups()
    # A prerelease sorts before the release it precedes.
    return (int(major), int(minor or 0), int(patch or 0), 0 if pre else 1, pre or "")


def check_version(v: str) -> bool:
    if not v.startswith("v"):
        v = "v" + v
    key = _semver_key(v)
    if key is None:
        return False
    lo = _semver_key("v" + MIN_USAGE_FILE_VERSION)
    hi = _semver_key("v" + MAX_USAGE_FILE_VERSION)
    return lo <= key <= hi


def _version_text(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw.strip()
    raise ParseError(f"Error parsing usage YAML: version must be a string, got {type(raw).__name__}")


def _resource_usage(raw: Any) -> Dict[str, Dict[str, Any]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ParseError("Error parsing usage YAML: resource_usage must be a mapping")

    out: Dict[str, Dict[str, Any]] = {}
    for address, attrs in raw.items():
        if attrs is None:
            attrs = {}
        if not isinstance(attrs, dict):
            raise ParseError(f"Error parsing usage YAML: usage for '{address}' must be a mapping")
        out[str(address)] = attrs
    return out


def parse_usage_file(raw: Union[bytes, str]) -> UsageFile:
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as ex:
        raise ParseError(f"Error parsing usage YAML: {ex}") from ex

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParseError("Error parsing usage YAML: top-level YAML must be a mapping")

    # Re-read with BaseLoader so "version: 0.10" stays "0.10" instead of the float 0.1.
    untyped = yaml.load(raw, Loader=yaml.BaseLoader) or {}

    return UsageFile(
        version=_version_text(untyped.get("version")),
        resource_usage=_resource_usage(data.get("resource_usage")),
    )


def parse_yaml(raw: Union[bytes, str]) -> Dict[str, UsageData]:
    usage_file = parse_usage_file(raw)

    if not check_version(usage_file.version):
        raise VersionRangeError(usage_file.version, MIN_USAGE_FILE_VERSION, MAX_USAGE_FILE_VERSION)

    return new_usage_map(usage_file.resource_usage)


def load_from_file(usage_file: Union[str, Path, None]) -> Dict[str, UsageData]:
    """Load the usage map from usage_file; an empty path means no usage was supplied."""
    if not usage_file:
        return {}

    _LOGGER.debug("Loading usage data from usage file %s", usage_file)

    path = Path(usage_file)
    try:
        raw = path.read_bytes()
    except OSError as ex:
        raise FileReadError(str(path)) from ex

    usage_map = parse_yaml(raw)
    _LOGGER.debug("Loaded usage data for %d resources", len(usage_map))
    return usage_map


__all__ = ["UsageFile", "check_version", "parse_usage_file", "parse_yaml", "load_from_file"]
