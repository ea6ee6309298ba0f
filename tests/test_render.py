"""Tests for SVG rendering."""

import xml.etree.ElementTree as ET

from flowlanes.layout.engine import compute_layout
from flowlanes.parser.text import parse_flowchart
from flowlanes.render.svg import render_svg
from flowlanes.themes import DARK_THEME, LIGHT_THEME


def _render_simple(theme=LIGHT_THEME, title=""):
    graph = parse_flowchart("Input --> Process\nProcess --> Output\nInput --> Output\n")
    geometry = compute_layout(graph)
    return render_svg(geometry, theme, title=title)


def test_render_produces_valid_svg():
    svg = _render_simple()
    root = ET.fromstring(svg)
    assert root.tag.endswith("svg")


def test_render_contains_node_labels():
    svg = _render_simple()
    assert "Input" in svg
    assert "Process" in svg
    assert "Output" in svg


def test_render_contains_title():
    svg = _render_simple(title="My Flow")
    assert "My Flow" in svg


def test_render_one_rect_per_node_plus_background():
    root = ET.fromstring(_render_simple())
    rects = [el for el in root.iter() if el.tag.endswith("rect")]
    assert len(rects) == 4


def test_render_edge_and_arrowhead_paths():
    root = ET.fromstring(_render_simple())
    paths = [el for el in root.iter() if el.tag.endswith("path")]
    # One polyline and one arrowhead per edge
    assert len(paths) == 6


def test_render_dark_theme_background():
    svg = _render_simple(DARK_THEME)
    assert DARK_THEME.background_color in svg


def test_render_self_loop_fits_canvas():
    graph = parse_flowchart("A --> A\n")
    svg = render_svg(compute_layout(graph), LIGHT_THEME)
    root = ET.fromstring(svg)
    assert float(root.get("height")) > 53


def test_render_empty_graph():
    svg = render_svg(compute_layout(parse_flowchart("")), LIGHT_THEME)
    assert svg.startswith("<svg")


def test_render_ends_with_newline():
    assert _render_simple().endswith("\n")
