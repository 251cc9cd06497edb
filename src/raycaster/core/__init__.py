"""Core rendering module.

This module contains the fundamental building blocks of the raycaster:

Components:
    ray: Point/vector data structure and vector helpers
    projection: Distance-to-height projection and column layout
    shading: Fog and flat column shading
    integrator: Shared ray-cast / project / shade pipeline

The pipeline casts one ray per screen column, projects the nearest hit into a
fisheye-corrected column height and shades it by depth. Both the live window
and the PNG exporter consume the render geometry it produces.
"""

from .projection import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Rect,
    Viewport,
    column_rect,
    column_width,
    distance_to_height,
    incidence_angle,
    sweep_angles,
)
from .ray import Point, Vector, angle_to_vector, length, rad, ray_at
from .shading import BACKGROUND_COLOR, FOREGROUND_COLOR, Color, fog_intensity, shade

# Note: integrator is NOT imported here to avoid circular imports.
# Import directly from raycaster.core.integrator when needed.

__all__ = [
    "Point",
    "Vector",
    "angle_to_vector",
    "length",
    "rad",
    "ray_at",
    "Viewport",
    "Rect",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "column_rect",
    "column_width",
    "distance_to_height",
    "incidence_angle",
    "sweep_angles",
    "Color",
    "BACKGROUND_COLOR",
    "FOREGROUND_COLOR",
    "fog_intensity",
    "shade",
]
