"""Procedural 2D raycaster with a Taichi preview window and PNG export.

This package casts a fan of camera-relative rays across a grid of unit-cube
obstacles and turns the nearest hit of each ray into a shaded screen column:
- Slab-method ray/cell intersection
- Fisheye-corrected column projection
- Fog (depth) or flat shading
- Live rendering into a Taichi GGUI window
- Offline export into a NumPy pixel buffer encoded as PNG

Subpackages:
    core: Vector helpers, projection, shading and the shared column pipeline
    geometry: Ray/unit-cube intersection
    scene: Obstacle map and nearest-hit queries
    camera: Camera state and input transitions
    preview: Interactive window, PNG export and Matplotlib display
"""

__version__ = "0.1.0"
