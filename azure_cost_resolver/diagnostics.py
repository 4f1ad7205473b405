"""Non-fatal, per-resource warnings raised while projecting usage and building resources."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

_LOGGER = logging.getLogger(__name__)

UNSUPPORTED_CONFIGURATION = "unsupported_configuration"
FIELD_PROJECTION = "field_projection"


@dataclass(frozen=True)
class Diagnostic:
    kind: str  # UNSUPPORTED_CONFIGURATION | FIELD_PROJECTION
    address: str
    message: str


@dataclass
class DiagnosticsSink:
    """Collects diagnostics, logs them, and optionally echoes them to a console.

    Reporting never raises: a warning about one resource must not stop the
    processing of its siblings.
    """

    console: Optional[Console] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        _LOGGER.warning(diagnostic.message)
        if self.console is not None:
            self.console.print(f"[yellow]Warning: {escape(diagnostic.message)}[/yellow]", highlight=False)

    def warn(self, kind: str, address: str, message: str) -> Diagnostic:
        d = Diagnostic(kind=kind, address=address, message=message)
        self.report(d)
        return d

    def of_kind(self, kind: str) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.kind == kind]

    def __len__(self) -> int:
        return len(self.diagnostics)


__all__ = [
    "Diagnostic",
    "DiagnosticsSink",
    "UNSUPPORTED_CONFIGURATION",
    "FIELD_PROJECTION",
]
