"""Parser for ``A --> B`` flowchart definitions.

Uses a simple line-by-line approach: one edge per line, ``-->`` as the only
delimiter. Mermaid-style ``%%`` comments and a leading ``graph LR`` /
``flowchart LR`` declaration are skipped so small Mermaid snippets parse as-is.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from flowlanes.errors import MalformedEdge, NodeNotFound
from flowlanes.parser.model import Edge, FlowGraph

logger = logging.getLogger(__name__)

ARROW = "-->"

_DECLARATION_PATTERN = re.compile(r"^(graph|flowchart)(\s+\w+)?\s*;?$")


def parse_flowchart(
    text: str | Iterable[str],
    nodes: Iterable[str] | None = None,
) -> FlowGraph:
    """Parse a flowchart definition into a fresh FlowGraph.

    Args:
        text: The definition, either as one string or as a sequence of lines.
        nodes: Optional explicit node list. When given, slots follow this
            list and every edge endpoint must appear in it.

    Raises:
        MalformedEdge: A line lacks the arrow, has more than one, or has an
            empty endpoint.
        NodeNotFound: An edge names a node missing from ``nodes``.
    """
    lines = text.splitlines() if isinstance(text, str) else list(text)

    graph = FlowGraph()
    explicit = nodes is not None
    if nodes is not None:
        for name in nodes:
            name = name.strip()
            if name:
                graph.add_node(name)

    seen_content = False
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("%%"):
            continue

        # Mermaid declaration, only before the first edge
        if not seen_content and _DECLARATION_PATTERN.match(stripped):
            seen_content = True
            continue
        seen_content = True

        source, target = _split_edge(stripped, line_number, line)

        if explicit:
            for name in (source, target):
                if name not in graph.nodes:
                    raise NodeNotFound(name, line_number)
        else:
            graph.add_node(source)
            graph.add_node(target)

        graph.add_edge(Edge(source=source, target=target))

    logger.debug("Parsed %d nodes, %d edges", len(graph.nodes), len(graph.edges))
    return graph


def _split_edge(stripped: str, line_number: int, line: str) -> tuple[str, str]:
    """Split ``A --> B`` into trimmed endpoint names."""
    parts = stripped.split(ARROW)
    if len(parts) == 1:
        raise MalformedEdge(line_number, line, f"missing '{ARROW}'")
    if len(parts) > 2:
        raise MalformedEdge(line_number, line, f"more than one '{ARROW}'")

    source, target = parts[0].strip(), parts[1].strip()
    if not source or not target:
        raise MalformedEdge(line_number, line, "empty node name")
    return source, target
