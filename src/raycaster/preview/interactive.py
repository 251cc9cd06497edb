"""Interactive preview window using Taichi GGUI.

This module provides the live half of the raycaster: a window whose image is
a Taichi field, keyboard controls that drive the camera, and snapshot export
on demand.

Features:
    - Taichi GGUI window with a field-backed drawing surface
    - Rectangle fills and clears done by Taichi kernels
    - Keyboard controls mapped to camera transitions
    - Redraw only when the camera changed since the last frame
    - Fixed ~60 iterations per second loop
    - PNG export of the fixed export viewpoint

Controls:
    - W / S: move forward / backward
    - A / D: rotate left / right
    - 1 / 2: narrow / widen the field of view
    - 3 / 4: halve / double the number of rays
    - F: toggle fog shading
    - R: export a PNG snapshot
    - Q / Escape: quit

Example:
    >>> from raycaster.preview.interactive import InteractivePreview
    >>> from raycaster.scene.world import generate_map
    >>>
    >>> preview = InteractivePreview(generate_map())
    >>> preview.run()  # Blocks until the window is closed
"""

import os
import platform
import sys
import time
from collections.abc import Iterable
from pathlib import Path

import numpy as np
import numpy.typing as npt
import taichi as ti

from raycaster.camera.controls import ControlSettings, InputEvent, apply_event
from raycaster.camera.state import DEFAULT_SAMPLES, CameraState
from raycaster.core.integrator import draw_geometry, render_geometry
from raycaster.core.projection import Rect, Viewport
from raycaster.core.ray import Point
from raycaster.core.shading import BACKGROUND_COLOR, Color
from raycaster.preview.export import ExportError, ExportSettings, export_snapshot


WINDOW_TITLE = "procedural-raytracer"

# Target loop cadence; the sleep does not compensate for frame time
FRAME_INTERVAL = 1.0 / 60.0

KEY_BINDINGS: dict[str, InputEvent] = {
    ti.ui.ESCAPE: InputEvent.QUIT,
    "q": InputEvent.QUIT,
    "w": InputEvent.MOVE_FORWARD,
    "s": InputEvent.MOVE_BACKWARD,
    "a": InputEvent.ROTATE_LEFT,
    "d": InputEvent.ROTATE_RIGHT,
    "1": InputEvent.DECREASE_FOV,
    "2": InputEvent.INCREASE_FOV,
    "3": InputEvent.HALVE_RESOLUTION,
    "4": InputEvent.DOUBLE_RESOLUTION,
    "f": InputEvent.TOGGLE_FOG,
    "r": InputEvent.EXPORT,
}


# =============================================================================
# Surface Kernels
# =============================================================================

# Taichi reads kernel annotations as live objects; this module must not
# postpone annotation evaluation.


@ti.kernel
def _clear_kernel(image: ti.template(), r: ti.f32, g: ti.f32, b: ti.f32):
    for i, j in image:
        image[i, j] = ti.Vector([r, g, b])


@ti.kernel
def _fill_rect_kernel(
    image: ti.template(),
    x: ti.i32,
    y: ti.i32,
    w: ti.i32,
    h: ti.i32,
    r: ti.f32,
    g: ti.f32,
    b: ti.f32,
):
    # Screen rows grow downward, field rows grow upward
    top = image.shape[1] - 1
    for i, j in ti.ndrange(w, h):
        image[x + i, top - (y + j)] = ti.Vector([r, g, b])


def _to_unit(color: Color) -> tuple[float, float, float]:
    """Convert an 8-bit color to the [0, 1] floats stored in the field."""
    return color[0] / 255.0, color[1] / 255.0, color[2] / 255.0


class LiveSurface:
    """Drawing surface backed by a Taichi field.

    The field uses Taichi's (x, y) indexing with the origin at the
    bottom-left, which is what Canvas.set_image expects. Rectangles are given
    in screen coordinates (origin top-left) and flipped by the fill kernel.

    Attributes:
        width: Surface width in pixels.
        height: Surface height in pixels.
        image: Taichi Vector.field of shape (width, height), RGB in [0, 1].
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.image: ti.MatrixField = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        self.clear(BACKGROUND_COLOR)

    def clear(self, color: Color) -> None:
        """Fill the whole surface with color."""
        _clear_kernel(self.image, *_to_unit(color))

    def fill_rect(self, rect: Rect, color: Color) -> None:
        """Fill a screen rectangle; the part outside the surface is dropped."""
        x0 = max(rect.x, 0)
        y0 = max(rect.y, 0)
        x1 = min(rect.x + rect.width, self.width)
        y1 = min(rect.y + rect.height, self.height)
        if x1 <= x0 or y1 <= y0:
            return
        _fill_rect_kernel(self.image, x0, y0, x1 - x0, y1 - y0, *_to_unit(color))

    def to_numpy(self) -> npt.NDArray[np.uint8]:
        """Read the surface back as an 8-bit (height, width, 3) image."""
        data = self.image.to_numpy()
        image = np.flipud(np.transpose(data, (1, 0, 2)))
        return np.round(image * 255.0).astype(np.uint8)


class InteractivePreview:
    """Interactive raycaster window using Taichi GGUI.

    The preview owns the camera state, the obstacle map, the live surface and
    the window. Everything the loop touches is reachable from this object;
    there is no module-level mutable state.

    Attributes:
        viewport: Window dimensions.
        obstacles: The (immutable) obstacle map.
        camera: Current camera state.
        controls: Step sizes and limits for keyboard transitions.
        export_settings: Viewpoint used for PNG export.
        output_dir: Directory exported PNG files are written to.
        surface: The field-backed drawing surface.

    Example:
        >>> preview = InteractivePreview(generate_map())
        >>> preview.run()
    """

    def __init__(
        self,
        obstacles: Iterable[Point],
        *,
        viewport: Viewport | None = None,
        camera: CameraState | None = None,
        controls: ControlSettings | None = None,
        export_settings: ExportSettings | None = None,
        output_dir: str | Path = ".",
        title: str = WINDOW_TITLE,
    ) -> None:
        """Initialize the preview.

        Args:
            obstacles: Obstacle map to render.
            viewport: Window dimensions (default 800x480).
            camera: Initial camera state (default CameraState() with at most
                one ray per viewport column).
            controls: Keyboard step sizes; max_samples defaults to the
                viewport width.
            export_settings: Export viewpoint (default ExportSettings()).
            output_dir: Directory for exported PNG files.
            title: Window title.

        Raises:
            ValueError: If the camera or the controls allow more rays than
                the viewport has columns.

        Note:
            The window itself is not created until run() is called.
        """
        self.viewport = viewport if viewport is not None else Viewport()
        self.obstacles = tuple(obstacles)
        if camera is None:
            camera = CameraState(samples=min(DEFAULT_SAMPLES, self.viewport.width))
        if controls is None:
            controls = ControlSettings(max_samples=self.viewport.width)
        if camera.samples > self.viewport.width:
            raise ValueError(
                f"camera samples {camera.samples} exceed viewport width {self.viewport.width}"
            )
        if controls.max_samples > self.viewport.width:
            raise ValueError(
                f"max_samples {controls.max_samples} exceeds viewport width "
                f"{self.viewport.width}"
            )
        self.camera = camera
        self.controls = controls
        self.export_settings = (
            export_settings if export_settings is not None else ExportSettings()
        )
        self.output_dir = Path(output_dir)
        self._title = title

        self.surface = LiveSurface(self.viewport.width, self.viewport.height)
        self._dirty = True

        # Defer window creation until run() to support headless checks
        self._window: ti.ui.Window | None = None
        self._canvas: ti.ui.Canvas | None = None

    def open_window(self) -> None:
        """Create the Taichi GGUI window and canvas."""
        if self._window is not None:
            return

        self._window = ti.ui.Window(
            name=self._title,
            res=(self.viewport.width, self.viewport.height),
            vsync=False,
        )
        self._canvas = self._window.get_canvas()

    @property
    def window(self) -> ti.ui.Window:
        """Get the Taichi GGUI window, initializing if needed."""
        if self._window is None:
            self.open_window()
        assert self._window is not None
        return self._window

    @property
    def canvas(self) -> ti.ui.Canvas:
        """Get the canvas for rendering."""
        if self._canvas is None:
            self.open_window()
        assert self._canvas is not None
        return self._canvas

    @property
    def needs_redraw(self) -> bool:
        """Whether the camera changed since the last rendered frame."""
        return self._dirty

    def is_running(self) -> bool:
        """Check if the window is still open."""
        return self.window.running

    # =========================================================================
    # Input
    # =========================================================================

    def poll_events(self) -> list[InputEvent]:
        """Collect key presses since the last poll as InputEvents.

        Unbound keys are ignored.
        """
        events = []
        for key_event in self.window.get_events(ti.ui.PRESS):
            event = KEY_BINDINGS.get(key_event.key)
            if event is not None:
                events.append(event)
        return events

    def handle_event(self, event: InputEvent) -> bool:
        """Apply one input event.

        Args:
            event: The event to handle.

        Returns:
            False if the event asks the preview to quit, True otherwise.
        """
        if event is InputEvent.QUIT:
            self.close()
            return False

        if event is InputEvent.EXPORT:
            self.export_png()
            return True

        new_camera = apply_event(self.camera, event, self.controls)
        if new_camera != self.camera:
            self.camera = new_camera
            self._dirty = True
            if event is InputEvent.MOVE_FORWARD:
                position = self.camera.position
                print(f"Current position: ({position.x}, {position.y})")
        return True

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_frame(self) -> None:
        """Redraw the surface from the current camera state."""
        self.surface.clear(BACKGROUND_COLOR)
        geometry = render_geometry(self.camera, self.obstacles, self.viewport)
        draw_geometry(self.surface, geometry)
        self._dirty = False

    def show_frame(self) -> None:
        """Present the surface in the window.

        Presenting also pumps the window's event queue, so this runs every
        iteration even when nothing was redrawn.
        """
        self.canvas.set_image(self.surface.image)
        self.window.show()

    def run(self) -> None:
        """Run the main window loop.

        Each iteration polls input, applies it, redraws if the camera changed,
        presents the frame and sleeps for FRAME_INTERVAL. Blocks until the
        window is closed or a quit key is pressed.
        """
        self.open_window()

        while self.is_running():
            for event in self.poll_events():
                if not self.handle_event(event):
                    return

            if self._dirty:
                self.render_frame()

            self.show_frame()
            time.sleep(FRAME_INTERVAL)

    def export_png(self) -> Path | None:
        """Export a snapshot of the export viewpoint to <epoch-seconds>.png.

        A failed export is reported and the session continues.

        Returns:
            Path of the written file, or None if the export failed.
        """
        try:
            return export_snapshot(self.obstacles, self.export_settings, self.output_dir)
        except ExportError as e:
            print(f"Error: {e}", file=sys.stderr)
            return None

    def close(self) -> None:
        """Close the preview window."""
        if self._window is not None:
            self._window.running = False

    @staticmethod
    def is_display_available() -> bool:
        """Check if a display is available for GUI rendering.

        Returns:
            True if a display is available, False for headless environments.
        """
        display = os.environ.get("DISPLAY")
        wayland = os.environ.get("WAYLAND_DISPLAY")
        system = platform.system()

        # On macOS, display is always available if not in SSH
        if system == "Darwin":
            ssh_connection = os.environ.get("SSH_CONNECTION")
            if ssh_connection and not display:
                return False
            return True

        if system == "Windows":
            return True

        return bool(display or wayland)
