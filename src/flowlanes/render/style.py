"""Theme and style constants for flowchart rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a flowchart."""

    name: str
    background_color: str
    node_fill: str
    node_stroke: str
    node_stroke_width: float
    edge_color: str
    edge_width: float
    label_color: str
    label_font_family: str
    title_color: str
    title_font_size: float
    node_corner_radius: float = 0.0
