"""Matplotlib-based display for exported snapshots.

This module shows an exported pixel buffer in a Matplotlib figure, which is
handy when rendering snapshots without opening the interactive window.

Example:
    >>> from raycaster.preview.display import show_preview
    >>> from raycaster.preview.export import ExportSettings, render_snapshot
    >>> from raycaster.scene.world import generate_map
    >>>
    >>> buffer = render_snapshot(generate_map(), ExportSettings())
    >>> show_preview(buffer)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from raycaster.preview.export import PixelBuffer


def show_preview(
    buffer: PixelBuffer,
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 4.8),
    block: bool = True,
) -> None:
    """Display a pixel buffer as a Matplotlib figure.

    Args:
        buffer: The pixel buffer to display.
        title: Custom title (default shows the buffer size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until figure is closed.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)

    ax.imshow(buffer.as_array())
    ax.axis("off")

    if title is None:
        title = f"Snapshot - {buffer.width}x{buffer.height}"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
