"""Shared ray-cast / project / shade pipeline.

This module turns a camera and an obstacle map into render geometry, the
list of shaded column rectangles for one frame, and draws that geometry into
any sink that can fill rectangles. The live window and the PNG exporter both
go through render_geometry() and draw_geometry(), so they always agree on
what a frame looks like.

Pipeline per column i:
1. Ray angle from the sweep (heading + fov/2 - i * fov/samples)
2. Nearest obstacle distance along that ray (skip the column on a miss)
3. Fisheye-corrected projected height
4. Color from the fog or flat policy
5. Rectangle at x = i * column_width, clamped and vertically centered

Example:
    >>> from raycaster.camera.state import CameraState
    >>> from raycaster.core.integrator import render_geometry
    >>> from raycaster.core.projection import Viewport
    >>> from raycaster.scene.world import generate_map
    >>> geometry = render_geometry(CameraState(), generate_map(), Viewport())
    >>> all(fill.rect.width == 1 for fill in geometry)
    True
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from raycaster.camera.state import CameraState
from raycaster.core.projection import (
    Rect,
    Viewport,
    column_rect,
    column_width,
    distance_to_height,
    incidence_angle,
    sweep_angles,
)
from raycaster.core.ray import Point, angle_to_vector
from raycaster.core.shading import Color, shade
from raycaster.scene.intersection import nearest_hit


@dataclass(frozen=True)
class ColumnFill:
    """One shaded column of render geometry.

    Attributes:
        rect: Screen rectangle of the column.
        color: Fill color of the column.
    """

    rect: Rect
    color: Color


class RectSink(Protocol):
    """Anything that can fill an axis-aligned rectangle with a color."""

    def fill_rect(self, rect: Rect, color: Color) -> None: ...


def render_geometry(
    camera: CameraState,
    obstacles: Iterable[Point],
    viewport: Viewport,
) -> list[ColumnFill]:
    """Cast one ray per column and build the shaded column rectangles.

    Args:
        camera: Position, heading, field of view, ray count and fog flag.
        obstacles: Obstacle map to cast against.
        viewport: Dimensions of the render target.

    Returns:
        Column fills in sweep order (left to right). Columns whose ray hits
        nothing are omitted.
    """
    obstacles = tuple(obstacles)
    width = column_width(viewport.width, camera.samples)
    geometry: list[ColumnFill] = []

    for index, theta in enumerate(sweep_angles(camera.heading, camera.fov, camera.samples)):
        distance = nearest_hit(camera.position, angle_to_vector(theta), obstacles)
        if distance is None:
            continue

        height = distance_to_height(
            distance, incidence_angle(camera.heading, theta), viewport.height
        )
        geometry.append(
            ColumnFill(
                rect=column_rect(index, width, height, viewport),
                color=shade(height, viewport.height, camera.fog),
            )
        )

    return geometry


def draw_geometry(sink: RectSink, geometry: Iterable[ColumnFill]) -> None:
    """Draw column fills in order; later fills overwrite earlier ones."""
    for column in geometry:
        sink.fill_rect(column.rect, column.color)
