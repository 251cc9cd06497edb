"""Point/vector data structure and 2D vector utilities.

This module provides the Point dataclass used both as a world position and
as a ray direction, together with the small set of helpers the raycaster
needs. Everything here is plain Python float math so that the same
functions drive the live window and the offline exporter.

Example:
    >>> from raycaster.core.ray import Point, angle_to_vector, ray_at
    >>> direction = angle_to_vector(0.0)
    >>> ray_at(Point(0.0, 0.0), direction, 2.5)
    Point(x=2.5, y=0.0)
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A pair of floating-point coordinates.

    Attributes:
        x: Horizontal world coordinate (or x component of a direction).
        y: Vertical world coordinate (or y component of a direction).
    """

    x: float
    y: float


# Directions share the representation of positions
Vector = Point


def rad(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return (degrees / 180.0) * math.pi


def angle_to_vector(theta: float) -> Vector:
    """Build the unit direction vector for an angle.

    Args:
        theta: Angle in radians, measured counter-clockwise from +x.

    Returns:
        The vector (cos theta, sin theta), unit length by construction.
    """
    return Vector(math.cos(theta), math.sin(theta))


def length(v: Vector) -> float:
    """Compute the Euclidean length of a vector."""
    return math.hypot(v.x, v.y)


def ray_at(origin: Point, direction: Vector, t: float) -> Point:
    """Compute the point along a ray at parameter t.

    Args:
        origin: Start of the ray.
        direction: Direction of the ray.
        t: Parameter value. Positive values are in front of the origin.

    Returns:
        The point origin + t * direction.
    """
    return Point(origin.x + t * direction.x, origin.y + t * direction.y)
