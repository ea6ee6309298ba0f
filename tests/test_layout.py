"""Tests for slot positioning, ordering and the layout coordinator."""

import pytest

from flowlanes.layout.config import LayoutConfig
from flowlanes.layout.engine import compute_layout
from flowlanes.layout.ordering import back_edges, is_acyclic, topological_order
from flowlanes.layout.positions import (
    compute_horizontal_positions,
    compute_vertical_positions,
)
from flowlanes.parser.text import parse_flowchart


def test_horizontal_positions_default_config():
    graph = parse_flowchart("A --> B\nB --> C\n")
    assert compute_horizontal_positions(graph) == {"A": 0.0, "B": 160.0, "C": 320.0}


def test_horizontal_positions_custom_config():
    graph = parse_flowchart("A --> B\nB --> C\n")
    config = LayoutConfig(node_width=50, node_margin=10)
    positions = compute_horizontal_positions(graph, config)
    assert positions == {"A": 0.0, "B": 60.0, "C": 120.0}


def test_positions_ignore_levels():
    graph = parse_flowchart("A --> B\nA --> B\n")
    before = compute_horizontal_positions(graph)
    compute_layout(graph)
    assert compute_horizontal_positions(graph) == before


def test_vertical_positions_uniform():
    graph = parse_flowchart("A --> B\nB --> C\nA --> C\n")
    assert set(compute_vertical_positions(graph).values()) == {0.0}


def test_config_rejects_bad_values():
    with pytest.raises(ValueError):
        LayoutConfig(node_width=0)
    with pytest.raises(ValueError):
        LayoutConfig(lane_spacing=-1)


def test_config_rejects_lanes_outside_boxes():
    with pytest.raises(ValueError, match="lane_spacing"):
        LayoutConfig(node_height=20, level_padding=2, lane_spacing=30)
    # Exactly one box step per lane is allowed
    assert LayoutConfig(node_height=20, level_padding=2, lane_spacing=22).lane_spacing == 22


def test_lanes_stay_inside_endpoint_boxes():
    graph = parse_flowchart("A --> B\nA --> B\nA --> B\nA --> B\n")
    geometry = compute_layout(graph, LayoutConfig(lane_spacing=44))
    boxes = {box.name: box for box in geometry.nodes}
    for path in geometry.edges:
        for (x, y), name in ((path.start, path.source), (path.end, path.target)):
            box = boxes[name]
            assert box.y < y < box.y + box.height


def test_config_slot_width():
    assert LayoutConfig(node_width=80, node_margin=20).slot_width == 100


def test_topological_order_acyclic():
    graph = parse_flowchart("C --> D\nA --> B\nB --> C\n")
    assert topological_order(graph) == ["A", "B", "C", "D"]


def test_topological_order_ties_by_first_appearance():
    graph = parse_flowchart("X --> Z\nY --> Z\n")
    assert topological_order(graph) == ["X", "Y", "Z"]


def test_topological_order_keeps_cycle_together():
    graph = parse_flowchart("A --> C\nB --> D\nA --> D\nC --> C\nD --> B\n")
    assert topological_order(graph) == ["A", "C", "B", "D"]


def test_topological_order_feeds_explicit_nodes():
    graph = parse_flowchart("C --> D\nA --> B\nB --> C\n")
    reordered = parse_flowchart("C --> D\nA --> B\nB --> C\n",
                                nodes=topological_order(graph))
    assert back_edges(reordered) == []
    assert reordered.node_index() == {"A": 0, "B": 1, "C": 2, "D": 3}


def test_back_edges():
    graph = parse_flowchart("A --> B\nB --> A\nA --> A\n")
    backs = back_edges(graph)
    assert [(e.source, e.target) for e in backs] == [("B", "A")]


def test_is_acyclic():
    assert is_acyclic(parse_flowchart("A --> B\nB --> C\n"))
    assert not is_acyclic(parse_flowchart("A --> B\nB --> A\n"))
    assert not is_acyclic(parse_flowchart("A --> A\n"))


def test_compute_layout_annotates_graph():
    graph = parse_flowchart("A --> B\nB --> C\nA --> C\n")
    geometry = compute_layout(graph)
    assert [e.level for e in graph.edges] == [0, 0, 1]
    assert graph.nodes["A"].max_level == 1
    assert len(geometry.nodes) == 3
    assert len(geometry.edges) == 3


def test_compute_layout_deterministic():
    text = "A --> C\nB --> D\nA --> D\nC --> C\nD --> B\n"
    first = compute_layout(parse_flowchart(text)).to_dict()
    for _ in range(3):
        assert compute_layout(parse_flowchart(text)).to_dict() == first


def test_independent_graphs_do_not_interfere():
    g1 = parse_flowchart("A --> B\nA --> B\n")
    g2 = parse_flowchart("A --> B\n")
    compute_layout(g1)
    compute_layout(g2)
    assert [e.level for e in g1.edges] == [0, 1]
    assert [e.level for e in g2.edges] == [0]
