"""Input events and camera state transitions.

Every recognized input is an InputEvent. Events that change the camera map to
a pure transition function taking the current CameraState and the
ControlSettings and returning the next CameraState. The mapping is
independent of how events are polled, so the window loop only has to turn
key presses into InputEvents.

Range checks live here: resolution is clamped to [1, max_samples] and the
field of view to [min_fov, max_fov], so the projection code never sees an
invalid configuration.

Example:
    >>> from raycaster.camera.controls import ControlSettings, InputEvent, apply_event
    >>> from raycaster.camera.state import CameraState
    >>> state = apply_event(CameraState(), InputEvent.HALVE_RESOLUTION, ControlSettings())
    >>> state.samples
    400
"""

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum

from raycaster.camera.state import CameraState
from raycaster.core.ray import angle_to_vector, rad, ray_at

# =============================================================================
# Control Constants
# =============================================================================

MOVE_SPEED = 0.5
ROTATION_SPEED = rad(2.0)
FOV_STEP = rad(1.0)
MIN_FOV = rad(1.0)
MAX_FOV = rad(179.0)


class InputEvent(Enum):
    """Input events recognized by the interactive preview."""

    QUIT = "quit"
    MOVE_FORWARD = "move_forward"
    MOVE_BACKWARD = "move_backward"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"
    DECREASE_FOV = "decrease_fov"
    INCREASE_FOV = "increase_fov"
    HALVE_RESOLUTION = "halve_resolution"
    DOUBLE_RESOLUTION = "double_resolution"
    TOGGLE_FOG = "toggle_fog"
    EXPORT = "export"


@dataclass(frozen=True)
class ControlSettings:
    """Step sizes and limits applied by the transitions.

    Attributes:
        move_speed: World units moved per forward/backward event.
        rotation_speed: Radians turned per rotate event.
        fov_step: Radians added/removed per field-of-view event.
        min_fov: Smallest allowed field of view in radians.
        max_fov: Largest allowed field of view in radians. Must stay below
            pi so edge rays keep a positive cosine.
        max_samples: Largest allowed ray count, normally the screen width.
    """

    move_speed: float = MOVE_SPEED
    rotation_speed: float = ROTATION_SPEED
    fov_step: float = FOV_STEP
    min_fov: float = MIN_FOV
    max_fov: float = MAX_FOV
    max_samples: int = 800


Transition = Callable[[CameraState, ControlSettings], CameraState]


# =============================================================================
# Transitions
# =============================================================================


def move_forward(state: CameraState, settings: ControlSettings) -> CameraState:
    direction = angle_to_vector(state.heading)
    return replace(state, position=ray_at(state.position, direction, settings.move_speed))


def move_backward(state: CameraState, settings: ControlSettings) -> CameraState:
    direction = angle_to_vector(state.heading)
    return replace(state, position=ray_at(state.position, direction, -settings.move_speed))


def rotate_left(state: CameraState, settings: ControlSettings) -> CameraState:
    return replace(state, heading=state.heading + settings.rotation_speed)


def rotate_right(state: CameraState, settings: ControlSettings) -> CameraState:
    return replace(state, heading=state.heading - settings.rotation_speed)


def _clamp_fov(fov: float, settings: ControlSettings) -> float:
    return min(max(fov, settings.min_fov), settings.max_fov)


def decrease_fov(state: CameraState, settings: ControlSettings) -> CameraState:
    return replace(state, fov=_clamp_fov(state.fov - settings.fov_step, settings))


def increase_fov(state: CameraState, settings: ControlSettings) -> CameraState:
    return replace(state, fov=_clamp_fov(state.fov + settings.fov_step, settings))


def halve_resolution(state: CameraState, settings: ControlSettings) -> CameraState:
    return replace(state, samples=max(1, state.samples // 2))


def double_resolution(state: CameraState, settings: ControlSettings) -> CameraState:
    return replace(state, samples=min(state.samples * 2, settings.max_samples))


def toggle_fog(state: CameraState, settings: ControlSettings) -> CameraState:
    return replace(state, fog=not state.fog)


TRANSITIONS: dict[InputEvent, Transition] = {
    InputEvent.MOVE_FORWARD: move_forward,
    InputEvent.MOVE_BACKWARD: move_backward,
    InputEvent.ROTATE_LEFT: rotate_left,
    InputEvent.ROTATE_RIGHT: rotate_right,
    InputEvent.DECREASE_FOV: decrease_fov,
    InputEvent.INCREASE_FOV: increase_fov,
    InputEvent.HALVE_RESOLUTION: halve_resolution,
    InputEvent.DOUBLE_RESOLUTION: double_resolution,
    InputEvent.TOGGLE_FOG: toggle_fog,
}


def apply_event(
    state: CameraState,
    event: InputEvent,
    settings: ControlSettings,
) -> CameraState:
    """Apply the transition bound to an event.

    Args:
        state: The current camera state.
        event: The input event to apply.
        settings: Step sizes and limits for the transition.

    Returns:
        The next camera state. Events without a camera transition (QUIT,
        EXPORT) return the state unchanged.
    """
    transition = TRANSITIONS.get(event)
    if transition is None:
        return state
    return transition(state, settings)
