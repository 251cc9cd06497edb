"""Column shading policies.

Two mutually exclusive policies, selected by the camera's fog flag:

- Fog: grayscale intensity derived from the projected column height,
  255 * (1 - min(1, (height + H/2) / H)) on all three channels. Short (far)
  columns fade toward mid gray, columns at least half the display height
  tall come out black.
- Flat: every hit column gets FOREGROUND_COLOR.

Columns without a hit are never shaded; the background shows through.
"""

# 8-bit RGB triple
Color = tuple[int, int, int]

BACKGROUND_COLOR: Color = (255, 255, 255)
FOREGROUND_COLOR: Color = (0, 0, 0)


def fog_intensity(height: float, display_height: int) -> int:
    """Compute the fog gray level for a column.

    Args:
        height: Projected column height before clamping.
        display_height: Viewport height in pixels.

    Returns:
        Gray level in [0, 255], truncated toward zero.
    """
    ratio = min(1.0, (height + display_height / 2.0) / display_height)
    return int((1.0 - ratio) * 255.0)


def shade(height: float, display_height: int, fog: bool) -> Color:
    """Pick the color of a hit column under the active policy."""
    if fog:
        level = fog_intensity(height, display_height)
        return (level, level, level)
    return FOREGROUND_COLOR
