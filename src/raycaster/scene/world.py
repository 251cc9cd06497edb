"""Default obstacle map.

The world is a handful of unit cells placed in front of the default camera
at the origin, which looks along the diagonal (heading pi/4):

    y
    6 | #
    5 |     #   #
    4 |     #   #
    3 |     #   #
    2 |
    1 | #
      +------------- x
        1   3   5

Example:
    >>> from raycaster.scene.world import generate_map
    >>> obstacles = generate_map()
    >>> len(obstacles)
    8
"""

from collections.abc import Iterable

from raycaster.core.ray import Point
from raycaster.scene.intersection import ObstacleMap

# =============================================================================
# World Constants
# =============================================================================

DEFAULT_CELLS: tuple[tuple[float, float], ...] = (
    (1.0, 1.0),
    (3.0, 3.0),
    (3.0, 4.0),
    (1.0, 6.0),
    (3.0, 5.0),
    (5.0, 3.0),
    (5.0, 4.0),
    (5.0, 5.0),
)


# =============================================================================
# Map Factory
# =============================================================================


def generate_map(cells: Iterable[tuple[float, float]] = DEFAULT_CELLS) -> ObstacleMap:
    """Build an immutable obstacle map from cell corners.

    Args:
        cells: (x, y) lower corners of the obstacle cells. Defaults to the
            built-in scene.

    Returns:
        A tuple of obstacle Points in the given order.
    """
    return tuple(Point(float(x), float(y)) for x, y in cells)
