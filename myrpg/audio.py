"""Sound helpers: loudness of recorded samples and background music."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable

import pygame

from myrpg.textparse import PathLike

MUSIC_FILE = "musique.ogg"
MUSIC_VOLUME = 0.5
FULL_SCALE = 32767.0
DECIBEL_OFFSET = 90.3


def calculate_decibel(samples: Iterable[int]) -> float:
    """Return the loudness of 16-bit samples in decibels, offset so full scale is 90.3.

    No samples give 0.0; silence gives minus infinity.
    """
    values = list(samples)
    if not values:
        return 0.0
    rms = math.sqrt(sum(value * value for value in values) / len(values))
    if rms == 0:
        return -math.inf
    return 20.0 * math.log10(rms / FULL_SCALE) + DECIBEL_OFFSET


def play_music(path: PathLike = MUSIC_FILE) -> None:
    """Play the music file at ``path`` in a loop at half volume."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"music file not found: {path}")
    if pygame.mixer.get_init() is None:
        pygame.mixer.init()
    pygame.mixer.music.load(os.fspath(path))
    pygame.mixer.music.set_volume(MUSIC_VOLUME)
    pygame.mixer.music.play(loops=-1)