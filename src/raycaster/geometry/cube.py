"""Unit cube primitive with ray-cube intersection.

An obstacle is a unit-size axis-aligned square cell identified by its lower
corner. The cell spans [corner.x, corner.x + 1] x [corner.y, corner.y + 1].

Ray-cell intersection uses the slab method:
1. For every axis, compute the ray parameters where it crosses the two
   boundary lines of the cell on that axis
2. Narrow a running [tmin, tmax] interval with each pair
3. The ray hits the cell if the interval is non-empty and starts in front
   of the origin

Example:
    >>> from raycaster.core.ray import Point
    >>> from raycaster.geometry.cube import intersect
    >>> intersect(Point(0.0, 0.5), Point(1.0, 0.0), Point(3.0, 0.0))
    3.0
"""

import math

from raycaster.core.ray import Point, Vector, length

# Edge length of every obstacle cell
CELL_SIZE = 1.0


def _slab(origin: float, direction: float, lower: float) -> tuple[float, float]:
    """Return the entry/exit parameters of a ray across one slab."""
    t1 = (lower - origin) / direction
    t2 = (lower + CELL_SIZE - origin) / direction
    return min(t1, t2), max(t1, t2)


def _inside_slab(origin: float, lower: float) -> bool:
    return lower <= origin <= lower + CELL_SIZE


def intersect(origin: Point, direction: Vector, obstacle: Point) -> float | None:
    """Test for ray-cell intersection.

    An axis whose direction component is exactly zero does not narrow the
    interval. Such a ray runs parallel to that slab, so it can only reach
    the cell when the origin already lies between the slab's two lines.

    Args:
        origin: The starting point of the ray.
        direction: The direction of the ray (unit length for the returned
            value to be a world distance).
        obstacle: Lower corner of the unit cell.

    Returns:
        Distance from the origin to the entry point, or None on a miss or
        when the cell starts behind the origin.
    """
    tmin = -math.inf
    tmax = math.inf

    if direction.x != 0.0:
        entry, exit_ = _slab(origin.x, direction.x, obstacle.x)
        tmin = max(tmin, entry)
        tmax = min(tmax, exit_)
    elif not _inside_slab(origin.x, obstacle.x):
        return None

    if direction.y != 0.0:
        entry, exit_ = _slab(origin.y, direction.y, obstacle.y)
        tmin = max(tmin, entry)
        tmax = min(tmax, exit_)
    elif not _inside_slab(origin.y, obstacle.y):
        return None

    if tmax >= tmin and tmin >= 0.0:
        return tmin * length(direction)
    return None
