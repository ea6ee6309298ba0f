"""Light theme (black on white)."""

from flowlanes.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    node_fill="#ffffff",
    node_stroke="#000000",
    node_stroke_width=1.0,
    edge_color="#000000",
    edge_width=1.0,
    label_color="#000000",
    label_font_family="Arial, Helvetica, sans-serif",
    title_color="#111111",
    title_font_size=20.0,
)
