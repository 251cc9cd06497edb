"""Tests for the live drawing surface and the interactive preview.

These tests never open a real window: the preview only creates one in run()
or open_window(), so event handling and frame rendering can be exercised
headless, and the loop runs against a scripted stand-in window.

Tests cover:
- LiveSurface clears and fills, including the vertical flip
- Agreement between the live surface and the export buffer
- Viewport-dependent ray count limits
- Event handling, redraw flag and quit
- Event polling and the main loop
- Export from the interactive session
- Key bindings
"""

from types import SimpleNamespace

import numpy as np
import pytest


class TestLiveSurface:
    """Tests for the Taichi field surface."""

    def test_starts_as_background(self):
        """Test that a new surface is all white."""
        from raycaster.preview.interactive import LiveSurface

        surface = LiveSurface(16, 8)
        image = surface.to_numpy()

        assert image.shape == (8, 16, 3)
        assert np.all(image == 255)

    def test_clear(self):
        """Test that clear fills every pixel."""
        from raycaster.preview.interactive import LiveSurface

        surface = LiveSurface(16, 8)
        surface.clear((10, 20, 30))

        assert np.all(surface.to_numpy() == (10, 20, 30))

    def test_fill_rect_screen_coordinates(self):
        """Test that rectangles use a top-left origin."""
        from raycaster.core.projection import Rect
        from raycaster.preview.interactive import LiveSurface

        surface = LiveSurface(16, 8)
        surface.fill_rect(Rect(x=2, y=0, width=3, height=2), (0, 0, 0))
        image = surface.to_numpy()

        assert np.all(image[0:2, 2:5] == 0)
        assert np.all(image[2:, :] == 255)

        # Field rows count up from the bottom
        field = surface.image.to_numpy()
        assert np.all(field[2:5, 6:8] == 0.0)
        assert np.all(field[:, 0:6] == 1.0)

    def test_fill_rect_clipped(self):
        """Test that the part of a rectangle outside the surface is dropped."""
        from raycaster.core.projection import Rect
        from raycaster.preview.interactive import LiveSurface

        surface = LiveSurface(16, 8)
        surface.fill_rect(Rect(x=14, y=6, width=10, height=10), (0, 0, 0))
        surface.fill_rect(Rect(x=30, y=30, width=2, height=2), (0, 0, 0))

        assert np.count_nonzero(np.all(surface.to_numpy() == 0, axis=2)) == 4

    def test_matches_pixel_buffer(self, default_map):
        """Test that live and export rasterizers produce the same image."""
        from raycaster.camera.state import CameraState
        from raycaster.core.integrator import draw_geometry, render_geometry
        from raycaster.core.projection import Viewport
        from raycaster.preview.export import PixelBuffer
        from raycaster.preview.interactive import LiveSurface

        viewport = Viewport()
        geometry = render_geometry(CameraState(samples=200), default_map, viewport)

        surface = LiveSurface(viewport.width, viewport.height)
        buffer = PixelBuffer(viewport.width, viewport.height)
        draw_geometry(surface, geometry)
        draw_geometry(buffer, geometry)

        assert np.array_equal(surface.to_numpy(), buffer.as_array())


@pytest.fixture
def preview(default_map, tmp_path):
    """An interactive preview without a window, exporting into tmp_path."""
    from raycaster.preview.interactive import InteractivePreview

    return InteractivePreview(default_map, output_dir=tmp_path)


class TestInteractivePreview:
    """Tests for InteractivePreview event handling and rendering."""

    def test_initial_state(self, preview):
        """Test that the first frame is pending and no window exists yet."""
        from raycaster.camera.state import CameraState

        assert preview.camera == CameraState()
        assert preview.needs_redraw
        assert preview.controls.max_samples == 800
        assert preview._window is None

    def test_render_frame_clears_redraw(self, preview):
        """Test that rendering draws the scene and settles the frame."""
        preview.render_frame()

        assert not preview.needs_redraw
        assert np.any(preview.surface.to_numpy() != 255)

    def test_movement_marks_redraw(self, preview, capsys):
        """Test that a camera change requests a redraw."""
        from raycaster.preview.interactive import InputEvent

        preview.render_frame()

        assert preview.handle_event(InputEvent.MOVE_FORWARD)
        assert preview.needs_redraw
        assert preview.camera.position.x > 0.0
        assert "Current position:" in capsys.readouterr().out

    def test_no_change_keeps_frame(self, preview):
        """Test that an event that changes nothing does not redraw."""
        from raycaster.preview.interactive import InputEvent

        preview.render_frame()

        # Already at the maximum ray count
        assert preview.handle_event(InputEvent.DOUBLE_RESOLUTION)
        assert not preview.needs_redraw

    def test_toggle_fog(self, preview):
        """Test that fog toggling switches the shading policy."""
        from raycaster.preview.interactive import InputEvent

        preview.handle_event(InputEvent.TOGGLE_FOG)
        preview.render_frame()

        assert set(np.unique(preview.surface.to_numpy())) <= {0, 255}

    def test_quit(self, preview):
        """Test that quit ends the session."""
        from raycaster.preview.interactive import InputEvent

        assert preview.handle_event(InputEvent.QUIT) is False

    def test_export_writes_png(self, preview, tmp_path):
        """Test that export writes a file and leaves the camera alone."""
        from raycaster.preview.interactive import InputEvent

        preview.handle_event(InputEvent.MOVE_FORWARD)
        camera = preview.camera

        assert preview.handle_event(InputEvent.EXPORT)
        assert preview.camera == camera
        assert len(list(tmp_path.glob("*.png"))) == 1

    def test_export_uses_fixed_viewpoint(self, preview, monkeypatch):
        """Test that exports do not follow the live camera."""
        from raycaster.preview import export
        from raycaster.preview.interactive import InputEvent

        monkeypatch.setattr(export.time, "time", lambda: 1000.0)
        first = preview.export_png()

        preview.handle_event(InputEvent.ROTATE_LEFT)
        preview.handle_event(InputEvent.MOVE_FORWARD)
        monkeypatch.setattr(export.time, "time", lambda: 2000.0)
        second = preview.export_png()

        assert first is not None and second is not None
        assert first.read_bytes() == second.read_bytes()

    def test_export_failure_continues(self, default_map, tmp_path, capsys):
        """Test that a failed export is reported and the session goes on."""
        from raycaster.preview.interactive import InputEvent, InteractivePreview

        preview = InteractivePreview(default_map, output_dir=tmp_path / "missing")

        assert preview.export_png() is None
        assert preview.handle_event(InputEvent.EXPORT)
        assert "Error:" in capsys.readouterr().err


class TestKeyBindings:
    """Tests for the keyboard layout."""

    def test_every_event_is_bound(self):
        """Test that each input event has at least one key."""
        from raycaster.camera.controls import InputEvent
        from raycaster.preview.interactive import KEY_BINDINGS

        assert set(KEY_BINDINGS.values()) == set(InputEvent)

    @pytest.mark.parametrize(
        "key,event_name",
        [
            ("w", "MOVE_FORWARD"),
            ("s", "MOVE_BACKWARD"),
            ("a", "ROTATE_LEFT"),
            ("d", "ROTATE_RIGHT"),
            ("1", "DECREASE_FOV"),
            ("2", "INCREASE_FOV"),
            ("3", "HALVE_RESOLUTION"),
            ("4", "DOUBLE_RESOLUTION"),
            ("f", "TOGGLE_FOG"),
            ("r", "EXPORT"),
            ("q", "QUIT"),
        ],
    )
    def test_binding(self, key, event_name):
        """Test the individual key assignments."""
        from raycaster.camera.controls import InputEvent
        from raycaster.preview.interactive import KEY_BINDINGS

        assert KEY_BINDINGS[key] is InputEvent[event_name]


class TestViewportLimits:
    """Tests for ray counts against the viewport width."""

    def test_default_camera_fits_narrow_viewport(self, default_map):
        """Test that the default camera casts at most one ray per column."""
        from raycaster.core.projection import Viewport
        from raycaster.preview.interactive import InteractivePreview

        preview = InteractivePreview(default_map, viewport=Viewport(400, 240))
        preview.render_frame()

        assert preview.camera.samples == 400
        assert preview.controls.max_samples == 400
        assert np.any(preview.surface.to_numpy() != 255)

    def test_rejects_camera_wider_than_viewport(self, default_map):
        """Test that a camera with more rays than columns is refused."""
        from raycaster.camera.state import CameraState
        from raycaster.core.projection import Viewport
        from raycaster.preview.interactive import InteractivePreview

        with pytest.raises(ValueError):
            InteractivePreview(
                default_map, viewport=Viewport(400, 240), camera=CameraState(samples=800)
            )

    def test_rejects_controls_wider_than_viewport(self, default_map):
        """Test that controls cannot double past the viewport width."""
        from raycaster.camera.controls import ControlSettings
        from raycaster.camera.state import CameraState
        from raycaster.core.projection import Viewport
        from raycaster.preview.interactive import InteractivePreview

        with pytest.raises(ValueError):
            InteractivePreview(
                default_map,
                viewport=Viewport(400, 240),
                camera=CameraState(samples=100),
                controls=ControlSettings(max_samples=800),
            )


class ScriptedWindow:
    """Stand-in for ti.ui.Window that replays one key list per iteration.

    The window stops running after the last scripted iteration is shown.
    """

    def __init__(self, script):
        self.script = list(script)
        self.running = True
        self.shown = 0
        self.event_kinds = []

    def get_events(self, kind=None):
        self.event_kinds.append(kind)
        keys = self.script.pop(0) if self.script else []
        return [SimpleNamespace(key=key) for key in keys]

    def show(self):
        self.shown += 1
        if not self.script:
            self.running = False


class ScriptedCanvas:
    def __init__(self):
        self.images = []

    def set_image(self, image):
        self.images.append(image)


def _attach(preview, window):
    canvas = ScriptedCanvas()
    preview._window = window
    preview._canvas = canvas
    return canvas


class TestMainLoop:
    """Tests for poll_events and run against a scripted window."""

    def test_poll_events_maps_keys(self, preview):
        """Test that bound keys become events and unbound keys are dropped."""
        import taichi as ti

        from raycaster.preview.interactive import InputEvent

        window = ScriptedWindow([["w", "x", ti.ui.ESCAPE]])
        _attach(preview, window)

        assert preview.poll_events() == [InputEvent.MOVE_FORWARD, InputEvent.QUIT]
        assert window.event_kinds == [ti.ui.PRESS]

    def test_redraws_only_when_dirty(self, preview, monkeypatch):
        """Test that frames are presented every iteration but redrawn on change."""
        from raycaster.preview import interactive

        monkeypatch.setattr(interactive.time, "sleep", lambda seconds: None)

        renders = []
        render_frame = preview.render_frame

        def counting_render_frame():
            renders.append(preview.camera)
            render_frame()

        monkeypatch.setattr(preview, "render_frame", counting_render_frame)

        # Initial frame, idle, move, unbound key
        window = ScriptedWindow([[], [], ["w"], ["x"]])
        canvas = _attach(preview, window)
        start = preview.camera

        preview.run()

        assert window.shown == 4
        assert len(canvas.images) == 4
        assert len(renders) == 2
        assert renders[0] == start
        assert renders[1].position != start.position
        assert not preview.needs_redraw
        assert not window.running

    def test_quit_key_stops_loop(self, preview, monkeypatch):
        """Test that a quit key ends run() and closes the window."""
        from raycaster.preview import interactive

        monkeypatch.setattr(interactive.time, "sleep", lambda seconds: None)

        window = ScriptedWindow([[], ["q"], ["w"], []])
        _attach(preview, window)
        start = preview.camera

        preview.run()

        assert window.shown == 1
        assert not window.running
        assert preview.camera == start

    def test_closed_window_never_renders(self, preview, monkeypatch):
        """Test that nothing is drawn once the window stops running."""
        from raycaster.preview import interactive

        monkeypatch.setattr(interactive.time, "sleep", lambda seconds: None)

        window = ScriptedWindow([])
        window.running = False
        _attach(preview, window)

        preview.run()

        assert window.shown == 0
        assert preview.needs_redraw
