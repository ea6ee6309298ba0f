"""Geometry export: node boxes, edge polylines and arrowheads.

Turns slot positions and edge levels into concrete coordinates. The result
is renderer-agnostic; renderers draw it verbatim and make no layout
decisions of their own.
"""

from __future__ import annotations

__all__ = ["EdgePath", "Geometry", "NodeBox", "compute_geometry", "node_box_height"]

from dataclasses import dataclass, field

from flowlanes.layout.config import LayoutConfig
from flowlanes.parser.model import FlowGraph

Point = tuple[float, float]


@dataclass
class NodeBox:
    """Bounding box of a node."""

    name: str
    x: float
    y: float
    width: float
    height: float


@dataclass
class EdgePath:
    """A routed edge: polyline waypoints plus an arrowhead at ``end``."""

    source: str
    target: str
    level: int
    start: Point
    end: Point
    points: list[Point]
    arrowhead: list[Point]


@dataclass
class Geometry:
    """Complete diagram geometry."""

    nodes: list[NodeBox] = field(default_factory=list)
    edges: list[EdgePath] = field(default_factory=list)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y) over boxes and edge points."""
        xs: list[float] = []
        ys: list[float] = []
        for box in self.nodes:
            xs += [box.x, box.x + box.width]
            ys += [box.y, box.y + box.height]
        for path in self.edges:
            for px, py in path.points + path.arrowhead:
                xs.append(px)
                ys.append(py)
        if not xs:
            return 0.0, 0.0, 0.0, 0.0
        return min(xs), min(ys), max(xs), max(ys)

    @property
    def width(self) -> float:
        min_x, _, max_x, _ = self.bounds
        return max_x - min_x

    @property
    def height(self) -> float:
        _, min_y, _, max_y = self.bounds
        return max_y - min_y

    def to_dict(self) -> dict:
        """Return plain node and edge records suitable for JSON."""
        return {
            "nodes": [
                {
                    "name": box.name,
                    "x": box.x,
                    "y": box.y,
                    "width": box.width,
                    "height": box.height,
                }
                for box in self.nodes
            ],
            "edges": [
                {
                    "from": path.source,
                    "to": path.target,
                    "level": path.level,
                    "startPoint": list(path.start),
                    "endPoint": list(path.end),
                    "points": [list(p) for p in path.points],
                    "arrowheadPoints": [list(p) for p in path.arrowhead],
                }
                for path in self.edges
            ],
        }


def node_box_height(max_level: int, config: LayoutConfig) -> float:
    """Box height needed to hold ``max_level + 1`` stacked lanes."""
    lanes = max_level + 1
    return config.node_height * lanes + config.level_padding * lanes


def compute_geometry(
    graph: FlowGraph,
    positions: dict[str, float],
    levels: list[int],
    config: LayoutConfig | None = None,
    y_positions: dict[str, float] | None = None,
) -> Geometry:
    """Compute node boxes and edge paths.

    Args:
        graph: The parsed flowchart.
        positions: Left X per node, from compute_horizontal_positions().
        levels: Edge levels in input edge order, from assign_levels().
        config: Layout parameters.
        y_positions: Top Y per node. Defaults to 0 for every node.
    """
    config = config or LayoutConfig()
    if len(levels) != len(graph.edges):
        raise ValueError(
            f"Expected {len(graph.edges)} edge levels, got {len(levels)}"
        )

    tops = y_positions or {}
    max_levels = {name: 0 for name in graph.nodes}
    for edge, level in zip(graph.edges, levels):
        max_levels[edge.source] = max(max_levels[edge.source], level)
        max_levels[edge.target] = max(max_levels[edge.target], level)

    loops_seen = {name: 0 for name in graph.nodes}
    geometry = Geometry()
    for name in graph.nodes:
        geometry.nodes.append(NodeBox(
            name=name,
            x=positions[name],
            y=tops.get(name, 0.0),
            width=config.node_width,
            height=node_box_height(max_levels[name], config),
        ))

    for edge, level in zip(graph.edges, levels):
        src_x = positions[edge.source]
        tgt_x = positions[edge.target]
        lane_offset = config.lane_spacing * level
        src_y = tops.get(edge.source, 0.0) + config.node_height / 2 + lane_offset
        tgt_y = tops.get(edge.target, 0.0) + config.node_height / 2 + lane_offset

        if edge.is_self_loop:
            points = _self_loop_points(
                src_x, tops.get(edge.source, 0.0), loops_seen[edge.source], config
            )
            loops_seen[edge.source] += 1
            direction = "down"
        elif graph.nodes[edge.target].index > graph.nodes[edge.source].index:
            points = [(src_x + config.node_width, src_y), (tgt_x, tgt_y)]
            direction = "right"
        else:
            # Back edge: leave the left side, enter the right side
            points = [(src_x, src_y), (tgt_x + config.node_width, tgt_y)]
            direction = "left"

        geometry.edges.append(EdgePath(
            source=edge.source,
            target=edge.target,
            level=level,
            start=points[0],
            end=points[-1],
            points=points,
            arrowhead=_arrowhead(points[-1], config.arrow_size, direction),
        ))

    return geometry


def _self_loop_points(
    x: float,
    top: float,
    nth: int,
    config: LayoutConfig,
) -> list[Point]:
    """Loop over the top of the box, clear of the lanes on either side.

    Leaves at three quarters of the width and comes back down at one quarter.
    Repeated self-loops on one node nest, each one wider and higher than the
    last.
    """
    loop_y = top - (config.level_padding + config.arrow_size) * (nth + 1)
    spread = config.arrow_size * nth
    exit_x = x + config.node_width * 3 / 4 + spread
    entry_x = x + config.node_width / 4 - spread
    return [
        (exit_x, top),
        (exit_x, loop_y),
        (entry_x, loop_y),
        (entry_x, top),
    ]


def _arrowhead(tip: Point, size: float, direction: str) -> list[Point]:
    x, y = tip
    if direction == "down":
        return [(x - size, y - size), (x, y), (x + size, y - size)]
    back = x - size if direction == "right" else x + size
    return [(back, y - size), (x, y), (back, y + size)]
