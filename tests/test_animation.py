from collections import defaultdict

import pygame
import pytest

from myrpg.animation import (
    FIRST_LEFT,
    FRAME_COUNT,
    FRAME_DURATION,
    JOYSTICK_X,
    JOYSTICK_Y,
    Animation,
    Facing,
    joystick_direction,
    read_direction_keys,
)
from myrpg.motion import Direction


def test_initial_frame_rects():
    animation = Animation()
    assert animation.frame_rect(Facing.DOWN) == (160, 190, 32, 50)
    assert animation.frame_rect(Facing.UP) == (160, 340, 32, 50)


def test_advance_waits_for_duration():
    animation = Animation()
    assert animation.advance(Facing.LEFT, FRAME_DURATION / 4) is False
    assert animation.frame_rect(Facing.LEFT)[0] == FIRST_LEFT


def test_advance_steps_back_one_column():
    animation = Animation()
    assert animation.advance(Facing.RIGHT, FRAME_DURATION) is True
    assert animation.frame_rect(Facing.RIGHT)[0] == 128
    assert animation.elapsed == 0.0


def test_advance_accumulates_time():
    animation = Animation()
    assert animation.advance(Facing.DOWN, 0.05) is False
    assert animation.advance(Facing.DOWN, 0.05) is True


def test_advance_cycles_back_to_first_column():
    animation = Animation()
    seen = set()
    for _ in range(FRAME_COUNT):
        animation.advance(Facing.UP, FRAME_DURATION)
        seen.add(animation.frame_rect(Facing.UP)[0])
    assert animation.frame_rect(Facing.UP)[0] == FIRST_LEFT
    assert len(seen) == FRAME_COUNT
    assert animation.current_frame == 0


def test_facings_are_independent():
    animation = Animation()
    animation.advance(Facing.LEFT, FRAME_DURATION)
    assert animation.frame_rect(Facing.DOWN)[0] == FIRST_LEFT


def test_advance_rejects_negative_time():
    with pytest.raises(ValueError):
        Animation().advance(Facing.DOWN, -1.0)


def test_read_direction_keys_sets_pressed():
    keys = defaultdict(bool, {pygame.K_UP: True, pygame.K_RIGHT: True})
    direction = read_direction_keys(keys, Direction())
    assert direction == Direction(up=True, right=True)


def test_read_direction_keys_keeps_existing_flags():
    direction = read_direction_keys(defaultdict(bool), Direction(down=True))
    assert direction == Direction(down=True)


def test_joystick_horizontal():
    assert joystick_direction(JOYSTICK_X, -60.0, Direction()) == Direction(left=True)
    assert joystick_direction(JOYSTICK_X, 60.0, Direction()) == Direction(right=True)


def test_joystick_vertical():
    assert joystick_direction(JOYSTICK_Y, -60.0, Direction()) == Direction(up=True)
    assert joystick_direction(JOYSTICK_Y, 60.0, Direction()) == Direction(down=True)


def test_joystick_below_threshold():
    assert joystick_direction(JOYSTICK_X, 30.0, Direction()).any() is False
    assert joystick_direction(JOYSTICK_Y, -50.0, Direction()).any() is False