"""Errors raised while loading the usage file.

All of them abort the loading step only; the caller gets either a complete
usage map or one of these, never a partial map.
"""

from __future__ import annotations


class UsageFileError(ValueError):
    """Base class for usage file loading failures."""


class FileReadError(UsageFileError):
    def __init__(self, path: str, message: str = "Error reading usage file"):
        super().__init__(f"{message}: {path}")
        self.path = path


class ParseError(UsageFileError):
    pass


class VersionRangeError(UsageFileError):
    def __init__(self, version: str, min_version: str, max_version: str):
        super().__init__(
            f"Invalid usage file version. Supported versions are {min_version} ≤ x ≤ {max_version}"
        )
        self.version = version
        self.min_version = min_version
        self.max_version = max_version


__all__ = ["UsageFileError", "FileReadError", "ParseError", "VersionRangeError"]
