"""Azure cost component resolution with usage overlays.

Embedding callers set up logging once with ``configure_logging`` and then call
``run`` with the ingested resources and the usage file path:

    configure_logging("INFO", log_file="run.log")
    resources = run(raw_resources, "infracost-usage.yml", sink=DiagnosticsSink())
"""

from .diagnostics import Diagnostic, DiagnosticsSink
from .errors import FileReadError, ParseError, UsageFileError, VersionRangeError
from .pipeline import build_resources, run
from .resources import StorageQueue, build_default_registry, build_resource
from .usage import load_from_file
from .utils.log import configure_logging

__all__ = [
    "Diagnostic",
    "DiagnosticsSink",
    "FileReadError",
    "ParseError",
    "UsageFileError",
    "VersionRangeError",
    "StorageQueue",
    "build_default_registry",
    "build_resource",
    "build_resources",
    "configure_logging",
    "load_from_file",
    "run",
]
