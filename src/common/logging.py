"""
Lightweight logging helpers for the project.

Notes:
- Each module obtains its own logger with `logging.getLogger(__name__)`.
- Entry points that find no logging configuration can apply a sane minimal one exactly once.
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str = "INFO") -> None:
    """Apply a minimal logging configuration once.

    - No-op if the root logger already has handlers
    - Meant to be called from the CLI or another top-level runner
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
