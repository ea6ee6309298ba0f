from flowlanes.render.svg import render_svg, svg_to_png
from flowlanes.render.style import Theme

__all__ = ["Theme", "render_svg", "svg_to_png"]
