"""Offline snapshot rendering and PNG export.

The exporter runs the same column pipeline as the live window, but from a
fixed viewpoint described by ExportSettings rather than the live camera, and
rasterizes the columns into an in-memory pixel buffer instead of a window
surface. The buffer is then encoded as an 8-bit RGB PNG with Pillow.

Supported formats:
    - PNG (8-bit RGB via Pillow)

Example:
    >>> from raycaster.preview.export import ExportSettings, render_snapshot, save_png
    >>> from raycaster.scene.world import generate_map
    >>>
    >>> buffer = render_snapshot(generate_map(), ExportSettings())
    >>> save_png(buffer, "snapshot.png")
"""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from raycaster.camera.state import (
    DEFAULT_FOV,
    DEFAULT_SAMPLES,
    STARTING_HEADING,
    STARTING_POSITION,
    CameraState,
)
from raycaster.core.integrator import draw_geometry, render_geometry
from raycaster.core.projection import Rect, Viewport
from raycaster.core.ray import Point
from raycaster.core.shading import Color

# Bytes per pixel (8-bit RGB)
PIXEL_STRIDE = 3


class ExportError(RuntimeError):
    """Raised when a snapshot cannot be encoded or written."""


@dataclass(frozen=True)
class ExportSettings:
    """Viewpoint and quality of exported snapshots.

    Snapshots are taken from this fixed viewpoint, not from wherever the
    live camera currently is. Pass a different instance to export from
    elsewhere.

    Attributes:
        position: Camera position for the snapshot.
        heading: Camera heading in radians.
        fov: Field of view in radians.
        samples: Number of rays cast; at most viewport.width.
        fog: Whether fog shading is applied.
        viewport: Output image dimensions.
    """

    position: Point = field(default=STARTING_POSITION)
    heading: float = STARTING_HEADING
    fov: float = DEFAULT_FOV
    samples: int = DEFAULT_SAMPLES
    fog: bool = True
    viewport: Viewport = field(default_factory=Viewport)

    def __post_init__(self) -> None:
        if not 1 <= self.samples <= self.viewport.width:
            raise ValueError(
                f"samples must be in [1, {self.viewport.width}], got {self.samples}"
            )

    def camera(self) -> CameraState:
        """Camera state equivalent to this export viewpoint."""
        return CameraState(
            position=self.position,
            heading=self.heading,
            fov=self.fov,
            samples=self.samples,
            fog=self.fog,
        )


class PixelBuffer:
    """Flat row-major RGB byte buffer with a top-left origin.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        data: uint8 array of length width * height * 3.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate a white buffer.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.
        """
        self.width = width
        self.height = height
        self.data: npt.NDArray[np.uint8] = np.full(
            width * height * PIXEL_STRIDE, 255, dtype=np.uint8
        )

    def as_array(self) -> npt.NDArray[np.uint8]:
        """View the buffer as an image array of shape (height, width, 3)."""
        return self.data.reshape(self.height, self.width, PIXEL_STRIDE)

    def fill_rect(self, rect: Rect, color: Color) -> None:
        """Write color into every pixel covered by rect.

        Pixels outside the buffer are ignored.
        """
        x0 = max(rect.x, 0)
        y0 = max(rect.y, 0)
        x1 = min(rect.x + rect.width, self.width)
        y1 = min(rect.y + rect.height, self.height)
        if x1 <= x0 or y1 <= y0:
            return
        self.as_array()[y0:y1, x0:x1] = color

    def to_bytes(self) -> bytes:
        """Copy the raw buffer contents."""
        return self.data.tobytes()


def render_snapshot(obstacles: Iterable[Point], settings: ExportSettings) -> PixelBuffer:
    """Render the export viewpoint into a fresh pixel buffer.

    Args:
        obstacles: Obstacle map to render.
        settings: Export viewpoint and dimensions.

    Returns:
        A PixelBuffer with the background in white and the shaded columns
        drawn in sweep order.
    """
    viewport = settings.viewport
    geometry = render_geometry(settings.camera(), obstacles, viewport)

    buffer = PixelBuffer(viewport.width, viewport.height)
    draw_geometry(buffer, geometry)
    return buffer


def timestamped_filename(now: float | None = None) -> str:
    """Build the export filename <epoch-seconds>.png.

    Args:
        now: Seconds since the epoch. Defaults to the current time.
    """
    if now is None:
        now = time.time()
    return f"{int(now)}.png"


def save_png(buffer: PixelBuffer, filepath: str | Path) -> None:
    """Save a pixel buffer as an 8-bit RGB PNG file.

    Args:
        buffer: The pixel buffer to encode.
        filepath: Output file path (should end in .png).

    Raises:
        ExportError: If the file cannot be created, written or encoded.
    """
    try:
        pil_image = PILImage.fromarray(buffer.as_array())
        pil_image.save(filepath, format="PNG")
    except (OSError, ValueError) as e:
        raise ExportError(f"Failed to write {filepath}: {e}") from e


def export_snapshot(
    obstacles: Iterable[Point],
    settings: ExportSettings | None = None,
    output_dir: str | Path = ".",
) -> Path:
    """Render a snapshot and write it as <epoch-seconds>.png.

    Args:
        obstacles: Obstacle map to render.
        settings: Export viewpoint. Defaults to ExportSettings().
        output_dir: Directory the file is written to.

    Returns:
        Path of the written file.

    Raises:
        ExportError: If the file cannot be written.
    """
    if settings is None:
        settings = ExportSettings()

    buffer = render_snapshot(obstacles, settings)
    path = Path(output_dir) / timestamped_filename()
    print(f"Saving with filename {path}")
    save_png(buffer, path)
    return path
