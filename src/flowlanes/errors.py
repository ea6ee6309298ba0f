"""Errors raised while reading a flowchart definition."""

from __future__ import annotations

__all__ = ["FlowchartError", "MalformedEdge", "NodeNotFound"]


class FlowchartError(ValueError):
    """Base class for flowchart definition errors."""


class MalformedEdge(FlowchartError):
    """A definition line is not of the form ``A --> B``."""

    def __init__(self, line_number: int, line: str, reason: str = "expected 'A --> B'"):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line.strip()!r}")


class NodeNotFound(FlowchartError):
    """An edge references a node absent from an explicit node list."""

    def __init__(self, name: str, line_number: int | None = None):
        self.name = name
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{where}node not found: {name!r}")
