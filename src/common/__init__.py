"""
Where: `common` package.
What: ambient infrastructure shared by the engine and its entry points (logging, env, config).
Why: keep the `swatch` domain layer free of process/environment concerns.
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
