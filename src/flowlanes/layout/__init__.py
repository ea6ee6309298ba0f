from flowlanes.layout.config import LayoutConfig
from flowlanes.layout.engine import compute_layout
from flowlanes.layout.geometry import EdgePath, Geometry, NodeBox, compute_geometry
from flowlanes.layout.levels import assign_levels
from flowlanes.layout.positions import compute_horizontal_positions

__all__ = [
    "EdgePath",
    "Geometry",
    "LayoutConfig",
    "NodeBox",
    "assign_levels",
    "compute_geometry",
    "compute_horizontal_positions",
    "compute_layout",
]
