"""
Where: `common.config`
What: fail-soft loading of the YAML configuration files.
Why: let a checkout override defaults without touching code or the environment.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """Guess the project root.

    - Returns the nearest ancestor holding `.git`, `pyproject.toml` or `configs/`.
    - Falls back to `start.parent.parent` when nothing matches.
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    # typical: <repo>/src/common/config.py -> <repo>
    return cur.parent.parent


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """Load the configuration as a dict (fail-soft).

    Precedence:
    1) `configs/default.yaml` (base)
    2) root `config.yaml` (overrides the base)

    - Missing or malformed files contribute nothing.
    - Only top-level keys are overridden; nested dicts are not deep-merged.
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = project_root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    root_config_path = project_root / "config.yaml"
    if root_config_path.exists():
        base.update(_safe_load_yaml(root_config_path))

    return base


__all__ = ["load_config"]
