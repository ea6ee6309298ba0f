from flowlanes.parser.model import Edge, FlowGraph, Node
from flowlanes.parser.text import parse_flowchart

__all__ = ["Edge", "FlowGraph", "Node", "parse_flowchart"]
