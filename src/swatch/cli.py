from __future__ import annotations

"""Command-line front end.

Generates a palette from a base color and harmony rule and prints it in
one of the export formats. Defaults come from :mod:`common.settings`.

Usage::

    python -m swatch --color "#8B5CF6" --harmony triadic --format json
    python -m swatch --random --seed 7 --format scss --output palette.scss
"""

import argparse
import logging
from pathlib import Path
from typing import Sequence

import numpy as np

from common import settings
from common.logging import setup_default_logging

from .api import generate_palette
from .engine import is_valid_hex, random_color
from .export import ExportFormat, export_palette
from .harmony import HarmonyRule

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    cfg = settings.get()
    p = argparse.ArgumentParser(
        prog="swatch",
        description="Generate a harmonic color palette with shade ramps and export it.",
    )
    src = p.add_mutually_exclusive_group()
    src.add_argument("--color", default=cfg.BASE_COLOR, help="base color, #RGB or #RRGGBB")
    src.add_argument("--random", action="store_true", help="use a random base color")
    p.add_argument("--seed", type=int, default=cfg.RANDOM_SEED, help="seed for --random")
    p.add_argument(
        "--harmony",
        default=cfg.HARMONY,
        help="one of: " + ", ".join(r.value for r in HarmonyRule),
    )
    p.add_argument(
        "--format",
        dest="fmt",
        default=cfg.EXPORT_FORMAT,
        choices=[f.value for f in ExportFormat],
        help="export format",
    )
    p.add_argument("--output", type=Path, default=None, help="write to file instead of stdout")
    p.add_argument("--log-level", default=cfg.LOG_LEVEL, help="logging level")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level)

    if args.random:
        base = random_color(np.random.default_rng(args.seed))
        logger.info("random base color %s", base)
    else:
        base = args.color
        if not is_valid_hex(base.strip()):
            parser.error(f"invalid hex color: {base!r}")

    try:
        rule = HarmonyRule.from_value(args.harmony)
        fmt = ExportFormat.from_value(args.fmt)
    except ValueError as exc:
        logger.error("%s", exc)
        parser.error(str(exc))

    palette = generate_palette(base, rule)
    text = export_palette(palette, fmt)

    if args.output is not None:
        args.output.write_text(text + "\n", encoding="utf-8")
        logger.info("wrote %s palette to %s", fmt.value, args.output)
    else:
        print(text)
    return 0


__all__ = ["build_parser", "main"]
