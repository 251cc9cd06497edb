"""Camera module for view state and keyboard control.

Components:
    state: Camera position, heading, field of view, ray count and fog flag
    controls: Input events and the pure state transitions bound to them

Camera states are immutable; every input produces a new state, which keeps
the transitions testable without a window.
"""

from .controls import (
    TRANSITIONS,
    ControlSettings,
    InputEvent,
    apply_event,
)
from .state import (
    DEFAULT_FOV,
    DEFAULT_SAMPLES,
    STARTING_HEADING,
    STARTING_POSITION,
    CameraState,
)

__all__ = [
    "CameraState",
    "STARTING_POSITION",
    "STARTING_HEADING",
    "DEFAULT_FOV",
    "DEFAULT_SAMPLES",
    "InputEvent",
    "ControlSettings",
    "TRANSITIONS",
    "apply_event",
]
