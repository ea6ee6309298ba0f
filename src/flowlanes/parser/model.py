"""Data model for flowchart graphs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Node:
    """A box in the flowchart."""

    name: str
    index: int
    inputs: set[str] = field(default_factory=set)
    outputs: set[str] = field(default_factory=set)
    # Populated by level assignment
    max_level: int = 0


@dataclass
class Edge:
    """A directed edge between two nodes."""

    source: str
    target: str
    # Populated by level assignment
    level: int = 0

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


@dataclass
class FlowGraph:
    """Complete flowchart definition.

    Node insertion order is slot order; edges keep input order.
    """

    nodes: dict[str, Node] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)

    def add_node(self, name: str) -> Node:
        """Return the node called ``name``, creating it in the next slot."""
        node = self.nodes.get(name)
        if node is None:
            node = Node(name=name, index=len(self.nodes))
            self.nodes[name] = node
        return node

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)
        self.nodes[edge.source].outputs.add(edge.target)
        self.nodes[edge.target].inputs.add(edge.source)

    def node_index(self) -> dict[str, int]:
        """Return a mapping of node name -> slot index."""
        return {name: node.index for name, node in self.nodes.items()}
