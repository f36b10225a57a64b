"""The player's walking animation and the reading of direction input."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

import pygame

from myrpg.motion import Direction

CHARACTER_SHEET = "./src/sprite/player/characters.png"
CHARACTER_SCALE = 0.68
PLAYER_START = (1162.0, 2426.0)
PLAYER_RADIUS = 10.0

FRAME_WIDTH = 32
FRAME_HEIGHT = 50
FRAME_COUNT = 3
FRAME_DURATION = 0.1
FIRST_LEFT = 160
WRAP_LEFT = 64
FRAME_STEP = 32

JOYSTICK_X = 0
JOYSTICK_Y = 1
JOYSTICK_THRESHOLD = 50.0


class Facing(Enum):
    """Walking direction; the value is the row of its frames on the sheet."""

    DOWN = 190
    LEFT = 240
    RIGHT = 290
    UP = 340


def _first_lefts() -> dict[Facing, int]:
    return {facing: FIRST_LEFT for facing in Facing}


@dataclass
class Animation:
    """Frame timing and the current frame column for each facing."""

    frame_width: int = FRAME_WIDTH
    frame_height: int = FRAME_HEIGHT
    frame_count: int = FRAME_COUNT
    frame_duration: float = FRAME_DURATION
    elapsed: float = 0.0
    current_frame: int = 0
    lefts: dict[Facing, int] = field(default_factory=_first_lefts)

    def advance(self, facing: Facing, elapsed: float) -> bool:
        """Add ``elapsed`` seconds; step the frames of ``facing`` when due.

        Returns True when the frame changed.
        """
        if elapsed < 0:
            raise ValueError("elapsed time cannot be negative")
        self.elapsed += elapsed
        if self.elapsed < self.frame_duration:
            return False
        self.current_frame = (self.current_frame + 1) % self.frame_count
        left = self.lefts[facing] - FRAME_STEP
        self.lefts[facing] = FIRST_LEFT if left == WRAP_LEFT else left
        self.elapsed = 0.0
        return True

    def frame_rect(self, facing: Facing) -> tuple[int, int, int, int]:
        """Return the sheet rectangle shown for ``facing``."""
        return (self.lefts[facing], facing.value, self.frame_width, self.frame_height)


def read_direction_keys(keys: Mapping[int, bool], direction: Direction) -> Direction:
    """Set the flags of ``direction`` for every arrow key held in ``keys``."""
    if keys[pygame.K_UP]:
        direction.up = True
    if keys[pygame.K_DOWN]:
        direction.down = True
    if keys[pygame.K_LEFT]:
        direction.left = True
    if keys[pygame.K_RIGHT]:
        direction.right = True
    return direction


def joystick_direction(axis: int, position: float, direction: Direction) -> Direction:
    """Set the flags of ``direction`` for a joystick axis pushed past the threshold."""
    if axis == JOYSTICK_X:
        if position < -JOYSTICK_THRESHOLD:
            direction.left = True
        if position > JOYSTICK_THRESHOLD:
            direction.right = True
    elif axis == JOYSTICK_Y:
        if position < -JOYSTICK_THRESHOLD:
            direction.up = True
        if position > JOYSTICK_THRESHOLD:
            direction.down = True
    return direction