"""
Where: `common.env`
What: small typed parsers for environment variables.
Why: replace scattered `os.getenv` calls plus their fallback/guard code.
"""

from __future__ import annotations

import os
from typing import Optional


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """String environment variable; unset or blank yields `default`."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """Integer environment variable (missing/invalid values yield the default).

    Parameters
    ----------
    name : str
        Variable name.
    default : Optional[int]
        Fallback value (`None` is allowed).
    min_value : Optional[int]
        Lower bound; smaller values are raised to it.

    Returns
    -------
    Optional[int]
        The parsed integer, or `default` when unset or invalid.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw)
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """Boolean environment variable (accepts 0/1 and true/false spellings)."""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    try:
        # numbers first
        return int(raw) != 0
    except ValueError:
        s = raw.strip().lower()
        if s in {"true", "t", "yes", "y", "on"}:
            return True
        if s in {"false", "f", "no", "n", "off"}:
            return False
        return bool(default)


__all__ = ["env_str", "env_int", "env_bool"]
