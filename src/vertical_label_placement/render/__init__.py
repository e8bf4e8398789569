"""SVG rendering subpackage.

Public API:
- render_svg: Render a list of label placements to an SVG string
- Theme: Render colour theme dataclass
"""

from vertical_label_placement.render.style import Theme
from vertical_label_placement.render.svg import render_svg

__all__ = ["Theme", "render_svg"]
