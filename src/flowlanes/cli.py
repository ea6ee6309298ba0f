"""CLI for flowlanes."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from flowlanes import __version__
from flowlanes.errors import FlowchartError
from flowlanes.layout import LayoutConfig, compute_layout
from flowlanes.layout.constants import (
    ARROW_SIZE,
    FONT_SIZE,
    LANE_SPACING,
    LEVEL_PADDING,
    NODE_HEIGHT,
    NODE_MARGIN,
    NODE_WIDTH,
)
from flowlanes.layout.levels import assign_levels, find_collisions, lane_count
from flowlanes.layout.ordering import back_edges, is_acyclic, topological_order
from flowlanes.parser import FlowGraph, parse_flowchart
from flowlanes.render import render_svg, svg_to_png
from flowlanes.themes import THEMES


def _load_graph(input_file: Path, order: str = "input") -> FlowGraph:
    """Parse a definition file, exiting with status 1 on a parse error."""
    text = input_file.read_text()
    try:
        graph = parse_flowchart(text)
        if order == "topological":
            graph = parse_flowchart(text, nodes=topological_order(graph))
    except FlowchartError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)
    return graph


def layout_options(func):
    """Attach the shared layout sizing options to a command."""
    options = [
        click.option("--order", type=click.Choice(["input", "topological"]),
                     default="input",
                     help="Node slot order (default: first appearance)"),
        click.option("--node-width", type=float, default=NODE_WIDTH,
                     help=f"Node box width (default: {NODE_WIDTH:g})"),
        click.option("--node-height", type=float, default=NODE_HEIGHT,
                     help=f"Single-lane node box height (default: {NODE_HEIGHT:g})"),
        click.option("--node-margin", type=float, default=NODE_MARGIN,
                     help=f"Gap between node boxes (default: {NODE_MARGIN:g})"),
        click.option("--lane-spacing", type=float, default=LANE_SPACING,
                     help=f"Vertical distance between edge lanes (default: {LANE_SPACING:g})"),
        click.option("--level-padding", type=float, default=LEVEL_PADDING,
                     help=f"Extra box height per lane (default: {LEVEL_PADDING:g})"),
        click.option("--font-size", type=float, default=FONT_SIZE,
                     help=f"Node label font size (default: {FONT_SIZE:g})"),
        click.option("--arrow-size", type=float, default=ARROW_SIZE,
                     help=f"Arrowhead size (default: {ARROW_SIZE:g})"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _make_config(**kwargs) -> LayoutConfig:
    try:
        return LayoutConfig(**kwargs)
    except ValueError as e:
        raise click.BadParameter(str(e))


def _output_format(output: Path | None, fmt: str | None) -> str:
    """Resolve the render format from --format and the output suffix."""
    suffix = output.suffix.lower().lstrip(".") if output is not None else ""
    if suffix not in ("svg", "png"):
        return fmt or "svg"
    if fmt is not None and fmt != suffix:
        raise click.BadParameter(
            f"--format {fmt} does not match output file suffix '.{suffix}'",
            param_hint="'--format'",
        )
    return suffix


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log layout details to stderr.")
def cli(verbose: bool) -> None:
    """flowlanes: Lay out 'A --> B' flowcharts with collision-free edge lanes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(name)s: %(message)s")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output file path. Defaults to <input>.svg or <input>.png")
@click.option("--format", "fmt", type=click.Choice(["svg", "png"]), default=None,
              help="Output format (default: from the -o suffix, else svg)")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
              help="Visual theme (default: light)")
@click.option("--title", default="", help="Title drawn above the diagram")
@click.option("--scale", type=float, default=2.0,
              help="PNG scale factor (default: 2)")
@layout_options
def render(
    input_file: Path,
    output: Path | None,
    fmt: str | None,
    theme: str,
    title: str,
    scale: float,
    order: str,
    **sizes: float,
) -> None:
    """Render a flowchart definition to SVG or PNG."""
    config = _make_config(**sizes)
    fmt = _output_format(output, fmt)
    graph = _load_graph(input_file, order)
    geometry = compute_layout(graph, config)

    svg = render_svg(geometry, THEMES[theme], config, title=title)

    if output is None:
        output = input_file.with_suffix(f".{fmt}")

    if fmt == "png":
        output.write_bytes(svg_to_png(svg, scale=scale))
    else:
        output.write_text(svg)
    click.echo(f"Rendered {len(graph.nodes)} nodes, "
               f"{len(graph.edges)} edges, "
               f"{lane_count(graph)} lanes -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output JSON path. Defaults to stdout")
@layout_options
def export(input_file: Path, output: Path | None, order: str, **sizes: float) -> None:
    """Export computed node boxes and edge paths as JSON."""
    config = _make_config(**sizes)
    graph = _load_graph(input_file, order)
    geometry = compute_layout(graph, config)

    text = json.dumps(geometry.to_dict(), indent=2) + "\n"
    if output is None:
        click.echo(text, nl=False)
    else:
        output.write_text(text)
        click.echo(f"Exported {len(geometry.nodes)} nodes, "
                   f"{len(geometry.edges)} edges -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a flowchart definition."""
    graph = _load_graph(input_file)
    assign_levels(graph)

    errors = []

    # Level assignment guarantees this; report rather than assume
    for a, b in find_collisions(graph):
        errors.append(f"Edges {a.source} -> {a.target} and "
                      f"{b.source} -> {b.target} share lane {a.level}")

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(graph.nodes)} nodes, "
               f"{len(graph.edges)} edges, "
               f"{lane_count(graph)} lanes")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--order", type=click.Choice(["input", "topological"]), default="input",
              help="Node slot order (default: first appearance)")
def info(input_file: Path, order: str) -> None:
    """Show information about a flowchart definition."""
    graph = _load_graph(input_file, order)
    assign_levels(graph)

    self_loops = sum(1 for edge in graph.edges if edge.is_self_loop)

    click.echo(f"Nodes: {len(graph.nodes)}")
    for node in graph.nodes.values():
        click.echo(f"  [{node.index}] {node.name}: "
                   f"{len(node.inputs)} in, {len(node.outputs)} out, "
                   f"max level {node.max_level}")
    click.echo(f"Edges: {len(graph.edges)}")
    click.echo(f"Lanes: {lane_count(graph)}")
    click.echo(f"Back edges: {len(back_edges(graph))}")
    click.echo(f"Self-loops: {self_loops}")
    click.echo(f"Acyclic: {'yes' if is_acyclic(graph) else 'no'}")
