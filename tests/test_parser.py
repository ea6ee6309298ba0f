"""Tests for the flowchart definition parser."""

from pathlib import Path

import pytest

from flowlanes.errors import MalformedEdge, NodeNotFound
from flowlanes.parser.text import parse_flowchart

FIXTURES = Path(__file__).parent / "fixtures"


def test_parse_single_edge():
    graph = parse_flowchart("A --> B\n")
    assert list(graph.nodes) == ["A", "B"]
    assert len(graph.edges) == 1
    assert graph.edges[0].source == "A"
    assert graph.edges[0].target == "B"


def test_parse_accepts_line_sequence():
    graph = parse_flowchart(["A --> B", "B --> C"])
    assert [n.index for n in graph.nodes.values()] == [0, 1, 2]


def test_index_is_first_appearance():
    graph = parse_flowchart("C --> A\nB --> C\nA --> D\n")
    indices = {name: node.index for name, node in graph.nodes.items()}
    assert indices == {"C": 0, "A": 1, "B": 2, "D": 3}


def test_whitespace_is_insignificant():
    graph = parse_flowchart("   load data-->  train model   \n")
    assert list(graph.nodes) == ["load data", "train model"]


def test_blank_lines_skipped():
    graph = parse_flowchart("\nA --> B\n\n   \nB --> C\n")
    assert len(graph.edges) == 2


def test_comments_and_declaration_skipped():
    graph = parse_flowchart("%% comment\ngraph LR\n    A --> B\n")
    assert list(graph.nodes) == ["A", "B"]
    assert len(graph.edges) == 1


def test_flowchart_declaration_skipped():
    graph = parse_flowchart("flowchart TD\nA --> B\n")
    assert len(graph.edges) == 1


def test_inputs_and_outputs_populated():
    graph = parse_flowchart("A --> B\nA --> C\nC --> B\n")
    assert graph.nodes["A"].outputs == {"B", "C"}
    assert graph.nodes["A"].inputs == set()
    assert graph.nodes["B"].inputs == {"A", "C"}
    assert graph.nodes["C"].inputs == {"A"}
    assert graph.nodes["C"].outputs == {"B"}


def test_edges_keep_input_order():
    graph = parse_flowchart("B --> C\nA --> B\nA --> C\n")
    assert [(e.source, e.target) for e in graph.edges] == [
        ("B", "C"), ("A", "B"), ("A", "C"),
    ]


def test_parallel_edges_kept():
    graph = parse_flowchart("A --> B\nA --> B\n")
    assert len(graph.edges) == 2
    assert len(graph.nodes) == 2


def test_self_loop_accepted():
    graph = parse_flowchart("A --> A\n")
    assert list(graph.nodes) == ["A"]
    assert graph.edges[0].is_self_loop
    assert graph.nodes["A"].inputs == {"A"}
    assert graph.nodes["A"].outputs == {"A"}


def test_missing_arrow_raises():
    with pytest.raises(MalformedEdge) as excinfo:
        parse_flowchart("A B\n")
    assert excinfo.value.line_number == 1
    assert "A B" in str(excinfo.value)


def test_empty_endpoint_raises():
    with pytest.raises(MalformedEdge):
        parse_flowchart("A -->   \n")
    with pytest.raises(MalformedEdge):
        parse_flowchart("--> B\n")


def test_chained_arrows_raise():
    with pytest.raises(MalformedEdge):
        parse_flowchart("A --> B --> C\n")


def test_error_reports_line_number():
    with pytest.raises(MalformedEdge) as excinfo:
        parse_flowchart((FIXTURES / "bad.flow").read_text())
    assert excinfo.value.line_number == 2


def test_malformed_edge_is_value_error():
    with pytest.raises(ValueError):
        parse_flowchart("nothing here\n")


def test_explicit_node_order():
    graph = parse_flowchart("A --> C\nB --> D\n", nodes=["A", "B", "C", "D"])
    indices = {name: node.index for name, node in graph.nodes.items()}
    assert indices == {"A": 0, "B": 1, "C": 2, "D": 3}


def test_explicit_nodes_include_isolated():
    graph = parse_flowchart("A --> B\n", nodes=["A", "lonely", "B"])
    assert graph.nodes["lonely"].index == 1
    assert graph.nodes["B"].index == 2


def test_explicit_node_duplicates_collapse():
    graph = parse_flowchart("A --> B\n", nodes=["A", "B", "A"])
    assert list(graph.nodes) == ["A", "B"]


def test_unknown_node_raises():
    with pytest.raises(NodeNotFound) as excinfo:
        parse_flowchart("A --> B\nB --> X\n", nodes=["A", "B"])
    assert excinfo.value.name == "X"
    assert excinfo.value.line_number == 2


def test_fixture_simple():
    graph = parse_flowchart((FIXTURES / "simple.flow").read_text())
    assert list(graph.nodes) == ["load", "clean", "train", "report"]
    assert len(graph.edges) == 4
