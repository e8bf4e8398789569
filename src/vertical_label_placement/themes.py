"""Built-in render themes."""

from __future__ import annotations

__all__ = ["DEFAULT_THEME", "LIGHT_THEME", "THEMES"]

from vertical_label_placement.render.style import Theme

DEFAULT_THEME = Theme(
    name="default",
    background_color="#ffffff",
    axis_color="#555555",
    marker_color="#d62728",
    connector_color="#999999",
    label_color="#222222",
)

# Transparent background for embedding in other documents
LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    axis_color="#333333",
    marker_color="#1f77b4",
    connector_color="#bbbbbb",
    label_color="#333333",
)

THEMES: dict[str, Theme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    LIGHT_THEME.name: LIGHT_THEME,
}
