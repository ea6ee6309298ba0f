"""Caller-supplied layout parameters."""

from __future__ import annotations

from dataclasses import dataclass

from flowlanes.layout.constants import (
    ARROW_SIZE,
    FONT_SIZE,
    LANE_SPACING,
    LEVEL_PADDING,
    NODE_HEIGHT,
    NODE_MARGIN,
    NODE_WIDTH,
)


@dataclass
class LayoutConfig:
    """Numeric parameters that scale the computed geometry."""

    node_width: float = NODE_WIDTH
    node_height: float = NODE_HEIGHT
    node_margin: float = NODE_MARGIN
    lane_spacing: float = LANE_SPACING
    level_padding: float = LEVEL_PADDING
    font_size: float = FONT_SIZE
    arrow_size: float = ARROW_SIZE

    def __post_init__(self) -> None:
        for name in ("node_width", "node_height", "font_size"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("node_margin", "lane_spacing", "level_padding", "arrow_size"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")
        if self.lane_spacing > self.node_height + self.level_padding:
            # Each extra lane adds node_height + level_padding of box height
            raise ValueError(
                f"lane_spacing ({self.lane_spacing}) must not exceed "
                f"node_height + level_padding ({self.node_height + self.level_padding})"
            )

    @property
    def slot_width(self) -> float:
        """Horizontal distance between the left sides of adjacent slots."""
        return self.node_width + self.node_margin
