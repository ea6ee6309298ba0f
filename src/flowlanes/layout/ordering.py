"""Alternative slot orderings and direction checks.

The default slot order is first appearance in the definition. A topological
order instead places every node to the right of its predecessors, so edges
of an acyclic diagram all point rightward. Cycles are handled by collapsing
each strongly connected component and keeping its members together.
"""

from __future__ import annotations

__all__ = ["back_edges", "is_acyclic", "to_digraph", "topological_order"]

import networkx as nx

from flowlanes.parser.model import Edge, FlowGraph


def to_digraph(graph: FlowGraph) -> nx.DiGraph:
    """Build a networkx DiGraph with one node per flowchart node."""
    G = nx.DiGraph()
    for name in graph.nodes:
        G.add_node(name)
    for edge in graph.edges:
        G.add_edge(edge.source, edge.target)
    return G


def topological_order(graph: FlowGraph) -> list[str]:
    """Return node names in topological order, ties by first appearance."""
    index = graph.node_index()
    G = to_digraph(graph)

    C = nx.condensation(G)
    members = nx.get_node_attributes(C, "members")

    order: list[str] = []
    for component in nx.lexicographical_topological_sort(
        C, key=lambda c: min(index[name] for name in members[c])
    ):
        order.extend(sorted(members[component], key=index.__getitem__))
    return order


def is_acyclic(graph: FlowGraph) -> bool:
    """Return True if the diagram has no cycles (self-loops included)."""
    return nx.is_directed_acyclic_graph(to_digraph(graph))


def back_edges(graph: FlowGraph) -> list[Edge]:
    """Return edges drawn right-to-left (target slot before source slot)."""
    return [
        edge for edge in graph.edges
        if graph.nodes[edge.target].index < graph.nodes[edge.source].index
    ]
