"""Geometry module for obstacle primitives.

Components:
    cube: Unit axis-aligned cell with slab-method ray intersection

Intersection routines return the hit distance as a float, or None on a
miss. There are no sentinel distances.
"""

from .cube import CELL_SIZE, intersect

__all__ = [
    "CELL_SIZE",
    "intersect",
]
