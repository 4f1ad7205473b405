"""Process-wide logging setup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ..config import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: Optional[str] = None, log_file: Path | str | None = None) -> logging.Logger:
    log_handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        log_handlers.append(logging.FileHandler(path, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=log_handlers,
        force=True,
    )
    return logging.getLogger("azure_cost_resolver")


__all__ = ["configure_logging"]
