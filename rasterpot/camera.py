"""A free-flying camera steered by movement keys and mouse motion."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

import numpy as np

from rasterpot.transform import identity, normalize, rotate_x, rotate_y, rotate_z

FOV_STEP = 15.0
MIN_FOVY = 15.0
MAX_FOVY = 90.0
MOUSE_SENSITIVITY = 0.1
QUIT_KEY = "escape"
ZOOM_IN_KEY = "z"
ZOOM_OUT_KEY = "x"


class Movement(enum.Flag):
    """Directions the camera is currently being pushed in."""

    NONE = 0
    FORWARD = enum.auto()
    LEFT = enum.auto()
    BACK = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()


_KEY_MOVEMENT = {
    "w": Movement.FORWARD,
    "a": Movement.LEFT,
    "s": Movement.BACK,
    "d": Movement.RIGHT,
    "q": Movement.UP,
    "e": Movement.DOWN,
}


def _axis(movement, positive, negative):
    return float(bool(movement & positive)) - float(bool(movement & negative))


@dataclass
class Camera:
    """Camera state: position, viewing angles in degrees, field of view and speed."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    direction: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))
    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0
    fovy: float = MAX_FOVY
    speed: float = 5.0
    movement: Movement = Movement.NONE

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=float).reshape(3).copy()
        self.direction = np.asarray(self.direction, dtype=float).reshape(3).copy()

    def update(self, dt):
        """Recompute the viewing direction and move for ``dt`` seconds."""
        rot = identity()
        rot = rotate_y(rot, math.radians(self.yaw))
        rot = rotate_x(rot, math.radians(self.pitch))
        rot = rotate_z(rot, math.radians(self.roll))
        self.direction = normalize((rot @ np.array([0.0, 0.0, 1.0, 1.0]))[:3])

        step = dt * self.speed
        front = self.direction
        up = np.array([0.0, 1.0, 0.0])
        right = np.cross(up, front)
        self.position = (
            self.position
            + front * _axis(self.movement, Movement.FORWARD, Movement.BACK) * step
            + right * _axis(self.movement, Movement.RIGHT, Movement.LEFT) * step
            + up * _axis(self.movement, Movement.UP, Movement.DOWN) * step
        )

    def key_down(self, key):
        """Handle a key press; return True when the key asks to quit."""
        key = key.lower()
        if key in _KEY_MOVEMENT:
            self.movement |= _KEY_MOVEMENT[key]
        elif key == ZOOM_IN_KEY:
            self.zoom_in()
        elif key == ZOOM_OUT_KEY:
            self.zoom_out()
        elif key == QUIT_KEY:
            return True
        return False

    def key_up(self, key):
        """Handle a key release, stopping the matching movement."""
        movement = _KEY_MOVEMENT.get(key.lower())
        if movement is not None:
            self.movement &= ~movement

    def mouse_motion(self, dx, dy):
        """Turn the camera by a relative mouse movement."""
        self.yaw += dx * MOUSE_SENSITIVITY
        self.pitch += dy * MOUSE_SENSITIVITY

    def zoom_in(self):
        """Narrow the field of view by one step, not below the minimum."""
        self.fovy = max(self.fovy - FOV_STEP, MIN_FOVY)

    def zoom_out(self):
        """Widen the field of view by one step, not above the maximum."""
        self.fovy = min(self.fovy + FOV_STEP, MAX_FOVY)