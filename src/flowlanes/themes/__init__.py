"""Theme definitions for flowcharts."""

from flowlanes.themes.dark import DARK_THEME
from flowlanes.themes.light import LIGHT_THEME

THEMES = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "LIGHT_THEME", "DARK_THEME"]
