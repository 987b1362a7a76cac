"""
arena_life module: render/colors.py

Central color palette.
"""

BG = (26, 26, 26)
HUD_TEXT = (235, 235, 235)
HEADING = (230, 230, 230)


def to_rgb255(color) -> tuple:
    """(r, g, b) in [0, 1] -> pygame color."""
    return tuple(int(max(0.0, min(1.0, c)) * 255) for c in color)


def fade(color, opacity: float, bg=BG) -> tuple:
    """Blend a [0, 1] color over the background at ``opacity``."""
    fg = to_rgb255(color)
    a = max(0.0, min(1.0, opacity))
    return tuple(int(bg[i] + (fg[i] - bg[i]) * a) for i in range(3))
