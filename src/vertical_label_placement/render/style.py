"""Colour theme for SVG previews."""

from __future__ import annotations

__all__ = ["Theme"]

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Colours used when drawing a placement."""

    name: str
    background_color: str
    axis_color: str
    marker_color: str
    connector_color: str
    label_color: str
