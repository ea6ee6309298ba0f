"""Dark grey theme."""

from flowlanes.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    node_fill="#3a3a3a",
    node_stroke="#e0e0e0",
    node_stroke_width=1.5,
    edge_color="#e0e0e0",
    edge_width=1.5,
    label_color="#ffffff",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    title_color="#ffffff",
    title_font_size=20.0,
    node_corner_radius=4.0,
)
