"""Edge lane (level) assignment.

Edges are drawn as horizontal runs between slots. Two edges whose slot
intervals strictly overlap would be drawn on top of each other if they
shared a lane, so each edge gets an integer level such that overlapping
edges never share one.

Greedy interval colouring: edges are processed shortest span first, and
each edge is pushed one level above every overlapping edge already placed.
Touching at an endpoint is not an overlap, so a chain A-->B, B-->C stays on
level 0.
"""

from __future__ import annotations

__all__ = [
    "assign_levels",
    "edge_span",
    "find_collisions",
    "lane_count",
    "spans_overlap",
]

import logging

from flowlanes.parser.model import Edge, FlowGraph

logger = logging.getLogger(__name__)


def edge_span(edge: Edge, index: dict[str, int]) -> tuple[int, int]:
    """Return the (low, high) slot interval of an edge."""
    a = index[edge.source]
    b = index[edge.target]
    return (a, b) if a <= b else (b, a)


def spans_overlap(a: tuple[int, int], b: tuple[int, int]) -> bool:
    """Return True if two spans strictly overlap.

    Spans sharing only an endpoint do not overlap. Identical non-empty spans
    always do; a zero-width span never does.
    """
    if a[0] == a[1] or b[0] == b[1]:
        return False
    return a[0] < b[1] and a[1] > b[0]


def assign_levels(graph: FlowGraph) -> list[int]:
    """Assign each edge a level and each node its max incident level.

    Annotates ``edge.level`` and ``node.max_level`` in place.

    Returns the edge levels in input edge order.
    """
    index = graph.node_index()
    spans = [edge_span(edge, index) for edge in graph.edges]

    for edge in graph.edges:
        edge.level = 0

    # sorted() is stable: equal widths keep input order
    order = sorted(range(len(graph.edges)), key=lambda i: spans[i][1] - spans[i][0])

    placed: list[int] = []
    for i in order:
        edge = graph.edges[i]
        for j in placed:
            if spans_overlap(spans[i], spans[j]):
                edge.level = max(edge.level, graph.edges[j].level + 1)
        placed.append(i)

    for node in graph.nodes.values():
        node.max_level = 0
    for edge in graph.edges:
        for name in (edge.source, edge.target):
            node = graph.nodes[name]
            node.max_level = max(node.max_level, edge.level)

    levels = [edge.level for edge in graph.edges]
    logger.debug("Assigned %d edges to %d lanes", len(levels), lane_count(graph))
    return levels


def lane_count(graph: FlowGraph) -> int:
    """Return the number of lanes in use (0 for a graph without edges)."""
    if not graph.edges:
        return 0
    return max(edge.level for edge in graph.edges) + 1


def find_collisions(graph: FlowGraph) -> list[tuple[Edge, Edge]]:
    """Return pairs of overlapping edges that share a level."""
    index = graph.node_index()
    spans = [edge_span(edge, index) for edge in graph.edges]
    collisions: list[tuple[Edge, Edge]] = []
    for i, a in enumerate(graph.edges):
        for j in range(i + 1, len(graph.edges)):
            b = graph.edges[j]
            if a.level == b.level and spans_overlap(spans[i], spans[j]):
                collisions.append((a, b))
    return collisions
