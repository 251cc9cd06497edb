"""Column projection for the raycaster.

Each cast ray owns one vertical screen strip (a column). This module turns a
hit distance into the column's on-screen height and lays the columns out
across the viewport.

Projection:
    height = screen_height / (distance * cos(incidence))

where incidence = |heading - ray_angle|. Multiplying the raw per-ray distance
by cos(incidence) gives the perpendicular distance to the camera's view
plane; without it, walls bow outward toward the edges of the field of view
(fisheye). The returned height is unclamped; callers clamp it to the
viewport.

Layout:
    Rays sweep from heading + fov/2 down to heading - fov/2 while the column
    index increases from 0, so the leftmost column looks furthest
    counter-clockwise. Column width is screen_width // samples; leftover
    pixels at the right edge stay unfilled.

Example:
    >>> from raycaster.core.projection import Viewport, distance_to_height
    >>> viewport = Viewport()
    >>> distance_to_height(2.0, 0.0, viewport.height)
    240.0
"""

import math
from dataclasses import dataclass

# =============================================================================
# Viewport
# =============================================================================

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 480


@dataclass(frozen=True)
class Viewport:
    """Pixel dimensions of the render target.

    Attributes:
        width: Width in pixels.
        height: Height in pixels.
    """

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Viewport dimensions must be positive: {self.width}x{self.height}"
            )


@dataclass(frozen=True)
class Rect:
    """Axis-aligned screen rectangle with a top-left origin.

    Attributes:
        x: Left edge in pixels.
        y: Top edge in pixels.
        width: Width in pixels.
        height: Height in pixels.
    """

    x: int
    y: int
    width: int
    height: int


# =============================================================================
# Projection
# =============================================================================


def incidence_angle(heading: float, ray_angle: float) -> float:
    """Angle between the view direction and a ray, in radians."""
    return abs(heading - ray_angle)


def distance_to_height(distance: float, incidence: float, screen_height: int) -> float:
    """Convert a hit distance into a fisheye-corrected column height.

    Args:
        distance: Distance from the camera to the hit along the ray.
        incidence: Angle between the ray and the camera heading.
        screen_height: Viewport height in pixels.

    Returns:
        Projected height in pixels. May exceed the viewport; a zero
        perpendicular distance gives math.inf.
    """
    perpendicular = distance * math.cos(incidence)
    if perpendicular == 0.0:
        return math.inf
    return screen_height / perpendicular


def column_width(screen_width: int, samples: int) -> int:
    """Width in pixels of each column for the given ray count."""
    return screen_width // samples


def sweep_angles(heading: float, fov: float, samples: int) -> list[float]:
    """Compute the ray angle of every column, left to right.

    Args:
        heading: Camera heading in radians.
        fov: Field of view in radians.
        samples: Number of rays.

    Returns:
        samples angles, starting at heading + fov/2 and decreasing by
        fov/samples per column.
    """
    start = heading + fov / 2.0
    step = fov / samples
    return [start - i * step for i in range(samples)]


def column_rect(index: int, width: int, height: float, viewport: Viewport) -> Rect:
    """Lay out the rectangle of one column.

    Args:
        index: Column index, 0 at the left edge.
        width: Column width in pixels.
        height: Projected (unclamped) column height.
        viewport: The render target dimensions.

    Returns:
        The column rectangle, clamped to the viewport height and vertically
        centered.
    """
    clamped = int(min(height, viewport.height))
    y = viewport.height // 2 - clamped // 2
    return Rect(x=index * width, y=y, width=width, height=clamped)
