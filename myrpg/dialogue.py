"""Dialogue boxes shown one line at a time, advanced by mouse clicks."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

import pygame

FONT_PATH = "old_font.ttf"
BOX_IMAGE = "dialogue.png"
FONT_SIZE = 40
TEXT_COLOR = (0, 0, 0)
TEXT_POSITION = (170, 780)
BOX_SCALE = 2.2
BOX_POSITION = (20, -50)


@dataclass
class DialogueBox:
    """A sequence of lines and the index of the one being shown."""

    lines: tuple[str, ...]
    index: int = 0

    def __post_init__(self) -> None:
        self.lines = tuple(self.lines)

    def advance(self) -> str | None:
        """Move to the next line and return it, or None once past the end."""
        if not self.finished():
            self.index += 1
        return self.current()

    def finished(self) -> bool:
        """Tell whether every line has been shown."""
        return self.index >= len(self.lines)

    def current(self) -> str | None:
        """Return the line being shown, or None when finished."""
        return None if self.finished() else self.lines[self.index]


def _load_font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    if os.path.exists(FONT_PATH):
        return pygame.font.Font(FONT_PATH, FONT_SIZE)
    return pygame.font.Font(None, FONT_SIZE)


def _load_box() -> pygame.Surface | None:
    if not os.path.exists(BOX_IMAGE):
        return None
    image = pygame.image.load(BOX_IMAGE)
    width, height = image.get_size()
    return pygame.transform.scale(
        image, (int(width * BOX_SCALE), int(height * BOX_SCALE))
    )


def _draw(
    screen: pygame.Surface,
    box_image: pygame.Surface | None,
    font: pygame.font.Font,
    text: str,
) -> None:
    screen.fill((0, 0, 0))
    if box_image is not None:
        screen.blit(box_image, BOX_POSITION)
    screen.blit(font.render(text, True, TEXT_COLOR), TEXT_POSITION)
    if pygame.display.get_surface() is not None:
        pygame.display.flip()


def display_dialogue(screen: pygame.Surface, lines: Sequence[str]) -> bool:
    """Show ``lines`` one by one until all are clicked through.

    Returns True when every line was shown, False if the window was closed first.
    """
    box = DialogueBox(tuple(lines))
    font = _load_font()
    box_image = _load_box()
    while not box.finished():
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN:
                box.advance()
        text = box.current()
        if text is None:
            break
        _draw(screen, box_image, font, text)
    return box.finished()