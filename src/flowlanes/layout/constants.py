"""Layout constants used across layout modules."""

# ---------------------------------------------------------------------------
# Node boxes
# ---------------------------------------------------------------------------
NODE_WIDTH: float = 100.0
"""Width of every node box."""

NODE_HEIGHT: float = 40.0
"""Height of a node box holding a single edge lane."""

NODE_MARGIN: float = 60.0
"""Horizontal gap between neighbouring node boxes."""

# ---------------------------------------------------------------------------
# Edge lanes
# ---------------------------------------------------------------------------
LANE_SPACING: float = 24.0
"""Vertical distance between consecutive edge lanes."""

LEVEL_PADDING: float = 4.0
"""Extra box height added per stacked lane."""

ARROW_SIZE: float = 5.0
"""Half-height (and depth) of an arrowhead."""

# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------
FONT_SIZE: float = 14.0
"""Node label font size."""
