"""Layout coordinator: combines slot positioning, level assignment and geometry."""

from __future__ import annotations

import logging

from flowlanes.layout.config import LayoutConfig
from flowlanes.layout.geometry import Geometry, compute_geometry
from flowlanes.layout.levels import assign_levels
from flowlanes.layout.positions import (
    compute_horizontal_positions,
    compute_vertical_positions,
)
from flowlanes.parser.model import FlowGraph

logger = logging.getLogger(__name__)


def compute_layout(graph: FlowGraph, config: LayoutConfig | None = None) -> Geometry:
    """Lay out a parsed flowchart and return its geometry.

    Annotates edge levels and node max levels on ``graph`` in place.
    """
    config = config or LayoutConfig()

    positions = compute_horizontal_positions(graph, config)
    levels = assign_levels(graph)
    geometry = compute_geometry(
        graph,
        positions,
        levels,
        config,
        y_positions=compute_vertical_positions(graph),
    )

    logger.debug(
        "Layout: %d nodes, %d edges, %.0fx%.0f",
        len(geometry.nodes), len(geometry.edges), geometry.width, geometry.height,
    )
    return geometry
