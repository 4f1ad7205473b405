import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1].parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from azure_cost_resolver.diagnostics import DiagnosticsSink


@pytest.fixture
def sink():
    return DiagnosticsSink()


@pytest.fixture
def write_usage_file(tmp_path: Path):
    def _write(content: str, name: str = "infracost-usage.yml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
