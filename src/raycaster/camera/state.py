"""Camera state for the raycaster.

The camera is a position on the map, a heading, a horizontal field of view,
the number of rays cast per frame, and whether fog shading is enabled. A
single CameraState is created at startup and replaced (never mutated) by the
input transitions in raycaster.camera.controls.

Angles are in radians. The heading is unbounded: rotating keeps adding or
subtracting the rotation step without wrapping.

Example:
    >>> from raycaster.camera.state import CameraState
    >>> state = CameraState()
    >>> state.samples
    800
"""

import math
from dataclasses import dataclass, field

from raycaster.core.ray import Point

# =============================================================================
# Camera Defaults
# =============================================================================

STARTING_POSITION = Point(0.0, 0.0)
STARTING_HEADING = math.pi / 4.0
# ~75 degrees
DEFAULT_FOV = math.pi * 0.416
DEFAULT_SAMPLES = 800


@dataclass(frozen=True)
class CameraState:
    """Snapshot of the camera parameters.

    Attributes:
        position: Camera position in world space.
        heading: View direction in radians (center of the field of view).
        fov: Horizontal field of view in radians.
        samples: Number of rays (screen columns) cast per frame. Must be at
            least 1; the upper bound (screen width) is enforced by the
            input transitions.
        fog: Whether columns are shaded by depth instead of a flat color.
    """

    position: Point = field(default=STARTING_POSITION)
    heading: float = STARTING_HEADING
    fov: float = DEFAULT_FOV
    samples: int = DEFAULT_SAMPLES
    fog: bool = True

    def __post_init__(self) -> None:
        if self.samples < 1:
            raise ValueError(f"samples must be at least 1, got {self.samples}")
