"""
Where: `common.settings`
What: one typed snapshot of the runtime settings, loaded at import time.
Why: keep defaults, YAML overrides and environment overrides in a single place.

Precedence (lowest first): built-in defaults, the `swatch:` section of the
YAML config, `SWATCH_*` environment variables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .config import load_config
from .env import env_int, env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "WARNING"

    # Generation defaults
    BASE_COLOR: str = "#8B5CF6"
    HARMONY: str = "complementary"
    EXPORT_FORMAT: str = "css"
    RANDOM_SEED: int | None = None


_settings = _Settings()


def _file_section() -> Dict[str, Any]:
    section = load_config().get("swatch", {})
    return section if isinstance(section, dict) else {}


def reload() -> None:
    """Re-read the YAML config and environment into the snapshot."""
    defaults = _Settings()
    file_cfg = _file_section()

    def _str(key: str, env_name: str, fallback: str) -> str:
        from_file = file_cfg.get(key)
        base = str(from_file) if from_file is not None else fallback
        return env_str(env_name, base) or base

    _settings.LOG_LEVEL = _str("log_level", "SWATCH_LOG_LEVEL", defaults.LOG_LEVEL).upper()
    _settings.BASE_COLOR = _str("base_color", "SWATCH_BASE_COLOR", defaults.BASE_COLOR)
    _settings.HARMONY = _str("harmony", "SWATCH_HARMONY", defaults.HARMONY)
    _settings.EXPORT_FORMAT = _str("export_format", "SWATCH_EXPORT_FORMAT", defaults.EXPORT_FORMAT)

    seed = file_cfg.get("random_seed")
    _settings.RANDOM_SEED = env_int(
        "SWATCH_RANDOM_SEED", seed if isinstance(seed, int) else None, min_value=0
    )


def get() -> _Settings:
    """Return the current settings snapshot."""
    return _settings


# initial load
reload()


__all__ = ["get", "reload", "_Settings"]
