"""World rules: walking, pixel collisions, doors and the arena gates they open."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from myrpg.config import DoorEntry
from myrpg.motion import VELOCITY, Direction
from myrpg.textparse import has_prefix

DOOR_RADIUS = 10
DOOR_CAMERA_OFFSET = (200, 100)
BLOCKING_RED = 255

# Offsets, relative to the player, of the pixels sampled on a collision layer.
PROBE_OFFSETS: dict[str, tuple[int, int]] = {
    "left": (0, 5),
    "right": (20, 0),
    "up": (5, -2),
    "down": (5, 12),
}

Point = tuple[float, float]


@dataclass
class ArenaDoors:
    """Which of the three arena gates are open."""

    left: bool = False
    mid: bool = False
    right: bool = False

    def enter(self, name: str) -> None:
        """Update the gates after the player walks through the door called ``name``."""
        if has_prefix(name, "LEFT_OPEN"):
            self.left = True
        if has_prefix(name, "MID_OPEN"):
            self.mid = True
        if has_prefix(name, "RIGHT_OPEN"):
            self.right = True
        if has_prefix(name, "OUT_ARENA"):
            self.left = self.mid = self.right = False


def move_position(position: Point, direction: Direction) -> Point:
    """Return ``position`` moved one step along every set flag of ``direction``."""
    x, y = position
    if direction.up:
        y -= VELOCITY
    if direction.down:
        y += VELOCITY
    if direction.left:
        x -= VELOCITY
    if direction.right:
        x += VELOCITY
    return (x, y)


def find_door(
    doors: Iterable[DoorEntry], position: Point, arena: ArenaDoors | None = None
) -> DoorEntry | None:
    """Return the first door within reach of ``position``, or None.

    When a door is found and ``arena`` is given, the arena gates are updated.
    """
    px, py = position
    for door in doors:
        dx, dy = door.position
        if math.hypot(px - dx, py - dy) < DOOR_RADIUS:
            if arena is not None:
                arena.enter(door.name)
            return door
    return None


def door_camera_target(door: DoorEntry) -> Point:
    """Return where the camera goes when the player takes ``door``."""
    tx, ty = door.target
    return (tx - DOOR_CAMERA_OFFSET[0], ty - DOOR_CAMERA_OFFSET[1])


def collision_probes(
    position: Point, origin: Sequence[float]
) -> dict[str, tuple[int, int]]:
    """Return, per direction, the pixel of a layer placed at ``origin`` to sample."""
    px, py = position
    ox, oy = origin
    return {
        name: (int(px + dx - ox), int(py + dy - oy))
        for name, (dx, dy) in PROBE_OFFSETS.items()
    }


def blocked_directions(
    probe_colors: Iterable[Mapping[str, Sequence[int]]],
) -> Direction:
    """Turn sampled colors into collision flags: a red channel of 255 blocks.

    ``probe_colors`` holds, for each collision layer, a mapping from
    direction name to the color found there.
    """
    collision = Direction()
    for colors in probe_colors:
        for name, color in colors.items():
            if name not in PROBE_OFFSETS:
                raise ValueError(f"unknown direction {name!r}")
            if color[0] == BLOCKING_RED:
                setattr(collision, name, True)
    return collision


def restore_if_blocked(
    collision: Direction, old_position: Point, position: Point
) -> tuple[Point, bool]:
    """Return the position to keep and whether the move was blocked."""
    if collision.any():
        return old_position, True
    return position, False