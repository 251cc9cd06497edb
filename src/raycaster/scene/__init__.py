"""Scene module for the obstacle map and ray queries.

Components:
    intersection: Nearest-hit query over the obstacle map
    world: Default obstacle map factory

The map is an immutable tuple of obstacle corners, built once at startup and
shared read-only by the live window and the exporter.
"""

from .intersection import ObstacleMap, nearest_hit
from .world import DEFAULT_CELLS, generate_map

__all__ = [
    "ObstacleMap",
    "nearest_hit",
    "DEFAULT_CELLS",
    "generate_map",
]
