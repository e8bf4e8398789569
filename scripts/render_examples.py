#!/usr/bin/env python3
"""Batch render the reference placements to SVG.

Outputs go to /tmp/vertical_label_placement_renders/.

Usage:
    python scripts/render_examples.py
"""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from vertical_label_placement.labels import Label, place_labels  # noqa: E402
from vertical_label_placement.placement import is_separated, max_offset  # noqa: E402
from vertical_label_placement.render.svg import render_svg  # noqa: E402
from vertical_label_placement.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/vertical_label_placement_renders")

# name -> (positions, separation, limits)
EXAMPLES: dict[str, tuple[list[int], int, tuple[int, int] | None]] = {
    "spread": ([-10, -1, 1, 10], 10, None),
    "spread_positive_limits": ([-10, -1, 1, 10], 10, (0, 100)),
    "spread_negative_limits": ([-10, -1, 1, 10], 10, (-100, 0)),
    "spread_overflowing_limits": ([-10, -1, 1, 10], 10, (-10, 10)),
    "conflicting_pair": ([0, 1], 10, None),
    "two_clusters": ([-20, -20, -20, 20, 20, 20], 10, None),
    "cascading_merge": ([0, 10, 20, 30, 31], 10, None),
    "separate_groups_limited": ([0, 100], 10, (0, 50)),
}


def render_example(
    name: str,
    output_dir: Path,
    *,
    strategy: str,
    theme_name: str,
    scale: float,
) -> list[str]:
    """Place and render one example. Returns a list of issues."""
    positions, separation, limits = EXAMPLES[name]
    labels = [Label(f"{name}[{i}]", p) for i, p in enumerate(positions)]
    issues: list[str] = []

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        if limits is None:
            placements = place_labels(labels, separation)
        else:
            placements = place_labels(labels, separation, *limits, strategy=strategy)
    issues.extend(f"WARNING: {w.message}" for w in caught)

    placed = [p.y for p in placements]
    if not is_separated(placed, separation):
        issues.append(f"SEPARATION ERROR: {placed}")
    issues.append(f"max offset {max_offset(positions, placed)}: {placed}")

    svg = render_svg(placements, THEMES[theme_name], scale=scale, limits=limits)
    (output_dir / f"{name}_{strategy}.svg").write_text(svg)
    return issues


def main():
    parser = argparse.ArgumentParser(description="Batch render the reference placements")
    parser.add_argument("--strategy", choices=["clamp", "shift"], default="clamp")
    parser.add_argument("--theme", choices=sorted(THEMES), default="default")
    parser.add_argument("--scale", type=float, default=4.0, help="Pixels per position unit")
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    print(f"Rendering {len(EXAMPLES)} examples to {OUTPUT_DIR}/ (strategy: {args.strategy})")
    print()

    max_name_len = max(len(name) for name in EXAMPLES)
    any_errors = False

    for name in EXAMPLES:
        issues = render_example(
            name, OUTPUT_DIR, strategy=args.strategy, theme_name=args.theme, scale=args.scale
        )
        status = "OK"
        if any("WARNING" in i for i in issues):
            status = "WARN"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
