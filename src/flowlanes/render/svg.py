"""SVG generation for flowcharts using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from flowlanes.layout.config import LayoutConfig
from flowlanes.layout.geometry import Geometry
from flowlanes.render.style import Theme

TITLE_GAP = 12.0


def render_svg(
    geometry: Geometry,
    theme: Theme,
    config: LayoutConfig | None = None,
    padding: float = 20.0,
    title: str = "",
) -> str:
    """Render computed geometry to an SVG string."""
    config = config or LayoutConfig()

    if not geometry.nodes:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>\n'

    min_x, min_y, _, _ = geometry.bounds
    title_height = theme.title_font_size + TITLE_GAP if title else 0.0

    # Shift everything so the drawing starts at (padding, padding + title)
    dx = padding - min_x
    dy = padding + title_height - min_y

    svg_width = int(geometry.width + padding * 2) + 1
    svg_height = int(geometry.height + padding * 2 + title_height) + 1

    d = draw.Drawing(svg_width, svg_height)
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    if title:
        d.append(draw.Text(
            title,
            theme.title_font_size,
            padding, padding + theme.title_font_size,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    _render_nodes(d, geometry, theme, config, dx, dy)
    _render_edges(d, geometry, theme, dx, dy)

    svg = d.as_svg()
    if not svg.endswith("\n"):
        svg += "\n"
    return svg


def _render_nodes(
    d: draw.Drawing,
    geometry: Geometry,
    theme: Theme,
    config: LayoutConfig,
    dx: float,
    dy: float,
) -> None:
    """Draw node boxes with centred labels."""
    for box in geometry.nodes:
        d.append(draw.Rectangle(
            box.x + dx, box.y + dy,
            box.width, box.height,
            rx=theme.node_corner_radius, ry=theme.node_corner_radius,
            fill=theme.node_fill,
            stroke=theme.node_stroke,
            stroke_width=theme.node_stroke_width,
        ))
        d.append(draw.Text(
            box.name,
            config.font_size,
            box.x + dx + box.width / 2, box.y + dy + box.height / 2,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            text_anchor="middle",
            dominant_baseline="central",
        ))


def _render_edges(
    d: draw.Drawing,
    geometry: Geometry,
    theme: Theme,
    dx: float,
    dy: float,
) -> None:
    """Draw edge polylines and open arrowheads on top of the boxes."""
    for path in geometry.edges:
        d.append(draw.Lines(
            *_flatten(path.points, dx, dy),
            close=False,
            fill="none",
            stroke=theme.edge_color,
            stroke_width=theme.edge_width,
        ))
        d.append(draw.Lines(
            *_flatten(path.arrowhead, dx, dy),
            close=False,
            fill="none",
            stroke=theme.edge_color,
            stroke_width=theme.edge_width,
        ))


def _flatten(points: list[tuple[float, float]], dx: float, dy: float) -> list[float]:
    coords: list[float] = []
    for x, y in points:
        coords += [x + dx, y + dy]
    return coords


def svg_to_png(svg: str, scale: float = 2.0) -> bytes:
    """Rasterise an SVG string to PNG bytes with cairosvg."""
    import cairosvg

    return cairosvg.svg2png(bytestring=svg.encode(), scale=scale)
