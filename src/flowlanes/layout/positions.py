"""Slot positioning (X coordinates).

Every node sits in the slot given by its index; vertical placement is
uniform, only box heights vary (see geometry).
"""

from __future__ import annotations

__all__ = ["compute_horizontal_positions", "compute_vertical_positions"]

from flowlanes.layout.config import LayoutConfig
from flowlanes.parser.model import FlowGraph


def compute_horizontal_positions(
    graph: FlowGraph,
    config: LayoutConfig | None = None,
) -> dict[str, float]:
    """Return a dict mapping node name -> left X of its box."""
    config = config or LayoutConfig()
    return {name: node.index * config.slot_width for name, node in graph.nodes.items()}


def compute_vertical_positions(graph: FlowGraph) -> dict[str, float]:
    """Return a dict mapping node name -> top Y of its box (always 0)."""
    return {name: 0.0 for name in graph.nodes}
