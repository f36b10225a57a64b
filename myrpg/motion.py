"""Movement directions and the camera that follows the player."""

from __future__ import annotations

from dataclasses import dataclass

VELOCITY = 3
LIM_CAM_X = 1000500
LIM_CAM_Y = 1000660
LIM_SPRITE_X = 99900
LIM_SPRITE_Y = 991000
MIDS = 280
MIDS_X = 290
MIN_CAM_X = 100
MIN_CAM_Y = 200

CAMERA_START = (1000.0, 2300.0)
VIEW_SIZE = (420.0, 220.0)


@dataclass
class Direction:
    """Four directional flags, used both for movement and for collisions."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False

    def any(self) -> bool:
        """Tell whether at least one flag is set."""
        return self.left or self.right or self.up or self.down

    def reset(self) -> None:
        """Clear every flag."""
        self.left = self.right = self.up = self.down = False


@dataclass
class Camera:
    """Camera position, its pending moved position and whether it is blocked."""

    position: tuple[float, float] = CAMERA_START
    moved: tuple[float, float] = CAMERA_START
    blocked: bool = False

    def sync(self, blocked: bool) -> tuple[float, float, float, float]:
        """Accept the moved position, or roll it back when blocked.

        Returns the visible rectangle as ``(x, y, width, height)``.
        """
        self.blocked = bool(blocked)
        if self.blocked:
            self.moved = self.position
        else:
            self.position = self.moved
        return (*self.position, *VIEW_SIZE)


def clamp_camera(camera: Camera) -> tuple[float, float]:
    """Keep the camera's moved position inside the world limits and return it."""
    x, y = camera.moved
    x = max(MIN_CAM_X, min(x, LIM_CAM_X))
    y = max(MIN_CAM_Y, min(y, LIM_CAM_Y))
    camera.moved = (x, y)
    return camera.moved


def move_camera(
    direction: Direction, position: tuple[float, float], camera: Camera
) -> tuple[float, float]:
    """Move the camera along ``direction`` given the player ``position``.

    Returns the camera's new moved position, clamped to the world.
    """
    x, y = camera.moved
    current_x, current_y = position
    if direction.up and current_y < LIM_SPRITE_Y - MIDS:
        y -= VELOCITY
    if direction.down and current_y > MIDS:
        y += VELOCITY
    if direction.left and current_x < LIM_SPRITE_X - MIDS_X:
        x -= VELOCITY
    if direction.right and current_x > MIDS_X:
        x += VELOCITY
    camera.moved = (x, y)
    return clamp_camera(camera)