"""Default values shared by placement, rendering and the CLI."""

from __future__ import annotations

# --- Placement ---

DEFAULT_SEPARATION = 10
DEFAULT_STRATEGY = "clamp"

# --- Rendering ---

CANVAS_WIDTH = 320.0
CANVAS_PADDING = 24.0
AXIS_X = 80.0
LABEL_X = 180.0
LABEL_GAP = 6.0  # Between the connector end and the label text
MARKER_RADIUS = 3.0
CONNECTOR_WIDTH = 1.0
AXIS_WIDTH = 1.5
FONT_SIZE = 12.0
FONT_FAMILY = "Helvetica, Arial, sans-serif"
