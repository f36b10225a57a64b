"""Title menu: pages of buttons, the save file check and the menu loop."""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

import pygame

from myrpg.textparse import PathLike

CONFIG_FILE = "config.txt"
CONFIG_CONTENT = "0, 0, 0, 0"

BUTTON_SIZE = (500, 130)
BUTTON_ORIGIN = (250, 100)
BUTTON_X = 960
OUTLINE_THICKNESS = 2

TITLE_POSITION = (900, 100)
TITLE_SIZE = 30
FONT_PATH = "arial.ttf"
LOADING_IMAGE = "src/sprite/menu/loading_screen.png"
FRAME_RATE = 60

WHITE = (255, 255, 255)
RED = (255, 0, 0)
BLACK = (0, 0, 0)


class View(IntEnum):
    """The pages of the menu and the states it can leave in."""

    QUIT = -1
    MAIN = 0
    PLAY = 1
    NEW_GAME = 2
    LOAD_GAME = 3
    OPTIONS = 4
    VOLUME = 5
    LOADING = 6


TITLES: dict[View, str] = {
    View.MAIN: "My_RPG",
    View.PLAY: "Jouer",
    View.OPTIONS: "Options",
    View.VOLUME: "Volume",
}


@dataclass
class Button:
    """A menu button: the page it opens, where it stands and how it looks."""

    target: View
    position: tuple[float, float]
    image_path: str = ""
    enabled: bool = True
    highlighted: bool = False

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """The button area as ``(left, top, width, height)``."""
        x, y = self.position
        return (x - BUTTON_ORIGIN[0], y - BUTTON_ORIGIN[1], *BUTTON_SIZE)

    def contains(self, point: tuple[float, float]) -> bool:
        """Tell whether ``point`` lies on the button."""
        left, top, width, height = self.rect
        x, y = point
        return left <= x < left + width and top <= y < top + height


def _page(
    targets: tuple[View, View, View],
    images: tuple[str, str, str],
    heights: tuple[int, int, int],
) -> list[Button]:
    return [
        Button(target, (BUTTON_X, y), f"src/sprite/menu/{image}")
        for target, image, y in zip(targets, images, heights)
    ]


def _default_pages() -> dict[View, list[Button]]:
    lower = (400, 600, 980)
    return {
        View.MAIN: _page(
            (View.PLAY, View.OPTIONS, View.QUIT),
            ("play_button.png", "options_button.png", "leave_button.png"),
            (400, 600, 800),
        ),
        View.PLAY: _page(
            (View.NEW_GAME, View.LOAD_GAME, View.MAIN),
            ("new_game.png", "load_game.png", "return.png"),
            lower,
        ),
        View.OPTIONS: _page(
            (View.OPTIONS, View.VOLUME, View.MAIN),
            ("resolution_option.png", "audio_option.png", "return.png"),
            lower,
        ),
        View.VOLUME: _page(
            (View.MAIN, View.MAIN, View.OPTIONS),
            ("son_but.png", "musique_but.png", "return.png"),
            lower,
        ),
    }


def create_config_file(path: PathLike = CONFIG_FILE) -> None:
    """Write a fresh save file at ``path``."""
    Path(path).write_text(CONFIG_CONTENT, encoding="utf-8")


def has_save(path: PathLike = CONFIG_FILE) -> bool:
    """Tell whether a non-empty save file exists at ``path``."""
    try:
        return os.path.getsize(path) >= 1
    except OSError:
        return False


@dataclass
class Menu:
    """The current page, the buttons of every page and the save file location."""

    config_path: PathLike = CONFIG_FILE
    view: View = View.MAIN
    pages: dict[View, list[Button]] = field(default_factory=_default_pages)

    def buttons_for(self, view: View) -> list[Button]:
        """Return the buttons shown on ``view``; pages without buttons give none."""
        return list(self.pages.get(View(view), []))

    def _update_availability(self) -> None:
        saved = has_save(self.config_path)
        new_game, load_game = self.pages[View.PLAY][:2]
        new_game.enabled = not saved
        load_game.enabled = saved

    def handle_hover(self, point: tuple[float, float], pressed: bool) -> View:
        """Highlight the enabled button under ``point`` and follow it when pressed.

        Returns the view shown afterwards.
        """
        clicked = None
        for button in self.buttons_for(self.view):
            if button.contains(point):
                if button.enabled:
                    button.highlighted = True
                    if pressed:
                        clicked = button.target
            else:
                button.highlighted = False
        if clicked is not None:
            self.view = clicked
        return self.view

    def _visit(self, pages: tuple[View, ...], point, pressed: bool) -> bool:
        for page in pages:
            if self.view == page:
                before = self.view
                self.handle_hover(point, pressed)
                if self.view != before:
                    # A click opens one page only; the next page does not see it.
                    pressed = False
        return pressed

    def step(self, point: tuple[float, float], pressed: bool) -> View:
        """Run one frame of menu logic and return the resulting view."""
        if self.view == View.QUIT:
            return View.QUIT
        self._update_availability()
        pressed = self._visit((View.MAIN, View.PLAY), point, pressed)
        if self.view == View.NEW_GAME:
            create_config_file(self.config_path)
            self.view = View.LOADING
        if self.view == View.LOAD_GAME:
            self.view = View.LOADING
        self._visit((View.OPTIONS, View.VOLUME), point, pressed)
        return self.view


@functools.lru_cache(maxsize=None)
def _load_image(path: str) -> pygame.Surface | None:
    if not os.path.exists(path):
        return None
    return pygame.image.load(path)


def _load_font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    if os.path.exists(FONT_PATH):
        return pygame.font.Font(FONT_PATH, TITLE_SIZE)
    return pygame.font.Font(None, TITLE_SIZE)


def _draw_menu(surface: pygame.Surface, menu: Menu, font: pygame.font.Font) -> None:
    if menu.view == View.LOADING:
        image = _load_image(LOADING_IMAGE)
        if image is not None:
            surface.blit(image, (0, 0))
        return
    title = TITLES.get(menu.view)
    if title is None:
        return
    surface.blit(font.render(title, True, WHITE), TITLE_POSITION)
    for button in menu.buttons_for(menu.view):
        area = pygame.Rect(button.rect)
        pygame.draw.rect(surface, WHITE if button.enabled else RED, area)
        if button.highlighted:
            outline = area.inflate(OUTLINE_THICKNESS * 2, OUTLINE_THICKNESS * 2)
            pygame.draw.rect(surface, RED, outline, OUTLINE_THICKNESS)
        image = _load_image(button.image_path)
        if image is not None:
            surface.blit(image, area.topleft)


def run_menu(screen: pygame.Surface) -> bool:
    """Show the menu until the player starts a game (True) or leaves (False)."""
    menu = Menu()
    font = _load_font()
    clock = pygame.time.Clock()
    leaving = False
    while True:
        pressed = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                pressed = True
        screen.fill(BLACK)
        if menu.step(pygame.mouse.get_pos(), pressed) == View.QUIT:
            return False
        if leaving:
            return True
        _draw_menu(screen, menu, font)
        leaving = menu.view == View.LOADING
        if pygame.display.get_surface() is not None:
            pygame.display.flip()
        clock.tick(FRAME_RATE)