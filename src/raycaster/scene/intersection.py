"""Scene-level ray queries against the obstacle map.

The map is a plain tuple of obstacle corners. Queries scan every obstacle
and keep the closest hit; at tens of cells and hundreds of rays per frame a
linear scan is all that is needed.

Example:
    >>> from raycaster.core.ray import Point
    >>> from raycaster.scene.intersection import nearest_hit
    >>> obstacles = (Point(5.0, -0.5), Point(2.0, -0.5))
    >>> nearest_hit(Point(0.0, 0.0), Point(1.0, 0.0), obstacles)
    2.0
"""

from collections.abc import Iterable

from raycaster.core.ray import Point, Vector
from raycaster.geometry.cube import intersect

# Immutable ordered collection of obstacle corners
ObstacleMap = tuple[Point, ...]


def nearest_hit(
    origin: Point,
    direction: Vector,
    obstacles: Iterable[Point],
) -> float | None:
    """Find the distance to the closest obstacle along a ray.

    Args:
        origin: The starting point of the ray.
        direction: The unit direction of the ray.
        obstacles: Lower corners of the obstacle cells. Order and
            duplicates do not affect the result.

    Returns:
        The smallest hit distance, or None if the map is empty or every
        obstacle is missed.
    """
    closest: float | None = None
    for obstacle in obstacles:
        distance = intersect(origin, direction, obstacle)
        if distance is not None and (closest is None or distance < closest):
            closest = distance
    return closest
