"""Preview module for output and visualization.

This module handles the two render sinks and offline display:

Components:
    interactive: Taichi GGUI window with keyboard controls
    export: Pixel buffer rendering and PNG export
    display: Matplotlib display of exported snapshots

Example:
    >>> from raycaster.preview import ExportSettings, render_snapshot, save_png
    >>> from raycaster.scene import generate_map
    >>>
    >>> buffer = render_snapshot(generate_map(), ExportSettings())
    >>> save_png(buffer, "snapshot.png")

For the interactive window:
    >>> from raycaster.preview import InteractivePreview
    >>> preview = InteractivePreview(generate_map())
    >>> preview.run()
"""

from raycaster.preview.display import show_preview
from raycaster.preview.export import (
    ExportError,
    ExportSettings,
    PixelBuffer,
    export_snapshot,
    render_snapshot,
    save_png,
    timestamped_filename,
)
from raycaster.preview.interactive import InteractivePreview, LiveSurface

__all__ = [
    # Interactive preview
    "InteractivePreview",
    "LiveSurface",
    # Display functions
    "show_preview",
    # Export functions
    "ExportError",
    "ExportSettings",
    "PixelBuffer",
    "export_snapshot",
    "render_snapshot",
    "save_png",
    "timestamped_filename",
]
