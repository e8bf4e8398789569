"""SVG preview of a label placement.

Draws the axis as a vertical line with a dot at every marker, and each
label at its placed position to the right, joined to its marker by a
straight connector. Positions map to SVG y coordinates (growing
downward), scaled by ``scale``.
"""

from __future__ import annotations

__all__ = ["render_svg"]

from collections.abc import Sequence

import drawsvg as draw

from vertical_label_placement.constants import (
    AXIS_WIDTH,
    AXIS_X,
    CANVAS_PADDING,
    CANVAS_WIDTH,
    CONNECTOR_WIDTH,
    FONT_FAMILY,
    FONT_SIZE,
    LABEL_GAP,
    LABEL_X,
    MARKER_RADIUS,
)
from vertical_label_placement.labels import LabelPlacement
from vertical_label_placement.render.style import Theme
from vertical_label_placement.themes import DEFAULT_THEME


def render_svg(
    placements: Sequence[LabelPlacement],
    theme: Theme = DEFAULT_THEME,
    scale: float = 1.0,
    width: float = CANVAS_WIDTH,
    padding: float = CANVAS_PADDING,
    font_size: float = FONT_SIZE,
    limits: tuple[int, int] | None = None,
) -> str:
    """Render placements to an SVG document string.

    If *limits* is given, dashed guides are drawn at both bounds.
    """
    extent = [v for p in placements for v in (p.preferred, p.y)]
    if limits is not None:
        extent.extend(limits)
    top = min(extent, default=0)
    bottom = max(extent, default=0)
    height = (bottom - top) * scale + 2 * padding

    def to_y(position: int) -> float:
        return padding + (position - top) * scale

    d = draw.Drawing(width, height)

    if theme.background_color != "none":
        d.append(draw.Rectangle(0, 0, width, height, fill=theme.background_color))

    d.append(
        draw.Line(
            AXIS_X,
            0,
            AXIS_X,
            height,
            stroke=theme.axis_color,
            stroke_width=AXIS_WIDTH,
        )
    )

    if limits is not None:
        for bound in limits:
            d.append(
                draw.Line(
                    AXIS_X,
                    to_y(bound),
                    width,
                    to_y(bound),
                    stroke=theme.connector_color,
                    stroke_width=CONNECTOR_WIDTH,
                    stroke_dasharray="4,3",
                )
            )

    for p in placements:
        marker_y = to_y(p.preferred)
        label_y = to_y(p.y)
        d.append(
            draw.Line(
                AXIS_X,
                marker_y,
                LABEL_X,
                label_y,
                stroke=theme.connector_color,
                stroke_width=CONNECTOR_WIDTH,
            )
        )
        d.append(
            draw.Circle(
                AXIS_X,
                marker_y,
                MARKER_RADIUS,
                fill=theme.marker_color,
            )
        )
        d.append(
            draw.Text(
                p.text,
                font_size,
                LABEL_X + LABEL_GAP,
                label_y,
                fill=theme.label_color,
                font_family=FONT_FAMILY,
                dominant_baseline="middle",
            )
        )

    return d.as_svg()
