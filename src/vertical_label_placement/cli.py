"""Command-line interface for vertical-label-placement.

Usage:
    vertical-label-placement -s 10 -- -10 -1 1 10
    vertical-label-placement -s 10 --min 0 --max 100 Start=-10 Peak=1 End=10
    vertical-label-placement -s 10 --svg preview.svg 0 1 2
"""

from __future__ import annotations

__all__ = ["build_parser", "main"]

import argparse
import sys
from pathlib import Path

from vertical_label_placement.constants import DEFAULT_SEPARATION, DEFAULT_STRATEGY
from vertical_label_placement.labels import Label, place_labels
from vertical_label_placement.placement import LimitStrategy
from vertical_label_placement.render.svg import render_svg
from vertical_label_placement.themes import THEMES


def _parse_label(value: str) -> Label:
    """Parse ``POS`` or ``TEXT=POS`` into a Label."""
    text, sep, pos = value.rpartition("=")
    if not sep:
        text = ""
    try:
        position = int(pos)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected an integer position or TEXT=POS, got {value!r}"
        ) from None
    return Label(text=text or pos, position=position)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vertical-label-placement",
        description=(
            "Place labels along a vertical axis so that they keep a minimum "
            "separation while staying as close as possible to their markers."
        ),
    )
    parser.add_argument(
        "labels",
        nargs="*",
        type=_parse_label,
        metavar="POS|TEXT=POS",
        help="Marker positions, optionally with a caption",
    )
    parser.add_argument(
        "-s",
        "--separation",
        type=int,
        default=DEFAULT_SEPARATION,
        help=f"Minimum gap between consecutive labels (default {DEFAULT_SEPARATION})",
    )
    parser.add_argument("--min", dest="min_bound", type=int, help="Lowest allowed position")
    parser.add_argument("--max", dest="max_bound", type=int, help="Highest allowed position")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in LimitStrategy],
        default=DEFAULT_STRATEGY,
        help="How to move an out-of-range placement inside the limits",
    )
    parser.add_argument("--svg", type=Path, help="Write an SVG preview to this path")
    parser.add_argument(
        "--theme",
        choices=sorted(THEMES),
        default="default",
        help="Colour theme for the SVG preview",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.separation < 0:
        parser.error(f"--separation must be non-negative, got {args.separation}")
    if (args.min_bound is None) != (args.max_bound is None):
        parser.error("--min and --max must be given together")

    try:
        placements = place_labels(
            args.labels,
            args.separation,
            min_bound=args.min_bound,
            max_bound=args.max_bound,
            strategy=args.strategy,
        )
    except ValueError as e:
        parser.error(str(e))

    for p in placements:
        if p.text == str(p.preferred):
            print(p.y)
        else:
            print(f"{p.text}\t{p.y}")

    if args.svg is not None:
        limits = None
        if args.min_bound is not None:
            limits = (args.min_bound, args.max_bound)
        svg = render_svg(placements, THEMES[args.theme], limits=limits)
        args.svg.write_text(svg)

    return 0


if __name__ == "__main__":
    sys.exit(main())
