"""The player's inventory: a 5 x 6 item grid, three armor slots and their mouse handling."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import pygame

GRID_ROWS = 5
GRID_COLUMNS = 6
ARMOR_SLOTS = 3
CELL_SIZE = 30
GRID_OFFSET = (170, 42)
ARMOR_DRAW_OFFSET = (205 + 5 * CELL_SIZE, 50)
ARMOR_CLICK_OFFSET_X = 205 + 5 * CELL_SIZE + CELL_SIZE
ARMOR_SPACING = 36
DRAG_OFFSET = 8

SPRITE_SIZE = (208 // 13, 144 // 9)
SHEET_SIZE = (208, 144)
SHEET_ROW_DIVISOR = 9
SHEET_COLUMN_DIVISOR = 13

ARMOR_ITEMS = frozenset({35, 36})
TOGGLE_DELAY = 0.1
BACKGROUND_COLOR = (0, 0, 0, 150)
BACKGROUND_SIZE = (600, 500)
PANEL_POSITION = (20, -20)
PANEL_SCALE = 0.5

ITEM_SHEET = "./src/sprite/inventory/item.png"
PANEL_IMAGE = "./src/sprite/inventory.png"

Rect = tuple[int, int, int, int]


def create_sprite_rects(
    sprite_width: int, sprite_height: int, sheet_width: int, sheet_height: int
) -> list[list[Rect]]:
    """Cut a sheet into a grid of ``(left, top, width, height)`` rectangles, row by row."""
    if sprite_width <= 0 or sprite_height <= 0:
        raise ValueError("sprite size must be positive")
    rows = sheet_height // sprite_height
    columns = sheet_width // sprite_width
    return [
        [
            (column * sprite_width, row * sprite_height, sprite_width, sprite_height)
            for column in range(columns)
        ]
        for row in range(rows)
    ]


def item_rect(rects: list[list[Rect]], item: int) -> Rect:
    """Return the sheet rectangle that shows ``item`` (items are numbered from 1)."""
    if item < 1:
        raise ValueError(f"no sprite for item {item}")
    item_id = item - 1
    row = item_id // SHEET_ROW_DIVISOR
    column = item_id % SHEET_COLUMN_DIVISOR
    if row >= len(rects) or column >= len(rects[row]):
        raise ValueError(f"item {item} lies outside the sprite sheet")
    return rects[row][column]


def grid_cell(
    world_x: float, world_y: float, camera_x: float, camera_y: float
) -> tuple[int, int] | None:
    """Return the ``(column, row)`` of the grid cell under a world point, or None."""
    column = int((world_x - camera_x - GRID_OFFSET[0]) / CELL_SIZE)
    row = int((world_y - camera_y - GRID_OFFSET[1]) / CELL_SIZE)
    if 0 <= column < GRID_COLUMNS and 0 <= row < GRID_ROWS:
        return column, row
    return None


def armor_slot(
    world_x: float, world_y: float, camera_x: float, camera_y: float
) -> int | None:
    """Return the armor slot under a world point, or None."""
    column = int((world_x - camera_x - ARMOR_CLICK_OFFSET_X) / CELL_SIZE)
    slot = int((world_y - camera_y - ARMOR_DRAW_OFFSET[1]) / ARMOR_SPACING)
    if column == 0 and 0 <= slot < ARMOR_SLOTS:
        return slot
    return None


def _empty_grid() -> list[list[int]]:
    return [[0] * GRID_COLUMNS for _ in range(GRID_ROWS)]


def _default_rects() -> list[list[Rect]]:
    return create_sprite_rects(*SPRITE_SIZE, *SHEET_SIZE)


@dataclass
class Inventory:
    """Item grid (0 means empty), armor slots, open state and drag state."""

    grid: list[list[int]] = field(default_factory=_empty_grid)
    armor: list[int] = field(default_factory=lambda: [0] * ARMOR_SLOTS)
    is_open: bool = False
    key_released: bool = True
    dragging: bool = False
    drag_cell: tuple[int, int] = (0, 0)
    sprite_rects: list[list[Rect]] = field(default_factory=_default_rects)

    @staticmethod
    def _check_cell(column: int, row: int) -> None:
        if not (0 <= column < GRID_COLUMNS and 0 <= row < GRID_ROWS):
            raise ValueError(f"cell ({column}, {row}) is outside the grid")

    def _first_empty(self) -> tuple[int, int] | None:
        return next(
            (
                (column, row)
                for row, cells in enumerate(self.grid)
                for column, item in enumerate(cells)
                if item == 0
            ),
            None,
        )

    def add_item(self, item: int) -> bool:
        """Put ``item`` into the first empty cell; False when the grid is full."""
        cell = self._first_empty()
        if cell is None:
            return False
        column, row = cell
        self.grid[row][column] = item
        return True

    def start_drag(self, column: int, row: int) -> None:
        """Start dragging the item in the given cell."""
        self._check_cell(column, row)
        self.dragging = True
        self.drag_cell = (column, row)

    def drop(self, column: int, row: int) -> bool:
        """Swap the dragged cell with the given one and stop dragging."""
        if not self.dragging:
            return False
        self._check_cell(column, row)
        from_column, from_row = self.drag_cell
        self.grid[from_row][from_column], self.grid[row][column] = (
            self.grid[row][column],
            self.grid[from_row][from_column],
        )
        self.dragging = False
        return True

    def equip(self, column: int, row: int) -> bool:
        """Move an armor item from the grid into the empty first armor slot."""
        self._check_cell(column, row)
        if self.grid[row][column] in ARMOR_ITEMS and self.armor[0] == 0:
            self.armor[0], self.grid[row][column] = self.grid[row][column], 0
            return True
        return False

    def unequip(self, slot: int) -> bool:
        """Move the item of an armor slot back into the first empty grid cell."""
        if not 0 <= slot < ARMOR_SLOTS:
            raise ValueError(f"no armor slot {slot}")
        if self.armor[slot] == 0:
            return False
        cell = self._first_empty()
        if cell is None:
            return False
        column, row = cell
        self.grid[row][column], self.armor[slot] = self.armor[slot], 0
        return True

    def trash(self, column: int, row: int) -> None:
        """Empty the given cell."""
        self._check_cell(column, row)
        self.grid[row][column] = 0

    def update_toggle(self, key_pressed: bool, elapsed_seconds: float) -> bool:
        """Open or close the inventory on a fresh key press.

        Returns True when the state changed, so the caller restarts its delay clock.
        """
        if key_pressed and elapsed_seconds >= TOGGLE_DELAY and self.key_released:
            self.is_open = not self.is_open
            self.key_released = False
            return True
        if not key_pressed:
            self.key_released = True
        return False

    def left_pressed(
        self, world_x: float, world_y: float, camera_x: float, camera_y: float
    ) -> None:
        """Begin a drag when the open inventory is clicked on a cell."""
        if not self.is_open:
            return
        cell = grid_cell(world_x, world_y, camera_x, camera_y)
        if cell is not None:
            self.start_drag(*cell)

    def left_released(
        self, world_x: float, world_y: float, camera_x: float, camera_y: float
    ) -> None:
        """Finish a drag, swapping cells when released over the grid."""
        if not self.dragging:
            return
        cell = grid_cell(world_x, world_y, camera_x, camera_y)
        if cell is None:
            self.dragging = False
        else:
            self.drop(*cell)

    def right_released(
        self, world_x: float, world_y: float, camera_x: float, camera_y: float
    ) -> None:
        """Equip the clicked grid item, or unequip the clicked armor slot."""
        if not self.is_open:
            return
        cell = grid_cell(world_x, world_y, camera_x, camera_y)
        if cell is not None:
            self.equip(*cell)
        slot = armor_slot(world_x, world_y, camera_x, camera_y)
        if slot is not None:
            self.unequip(slot)

    def middle_released(
        self, world_x: float, world_y: float, camera_x: float, camera_y: float
    ) -> None:
        """Throw away the clicked grid item."""
        if not self.is_open:
            return
        cell = grid_cell(world_x, world_y, camera_x, camera_y)
        if cell is not None:
            self.trash(*cell)

    def _placements(
        self,
        camera_x: float,
        camera_y: float,
        mouse: tuple[float, float] | None,
    ) -> Iterator[tuple[int, tuple[float, float]]]:
        for row, cells in enumerate(self.grid):
            for column, item in enumerate(cells):
                if item:
                    yield item, (
                        camera_x + GRID_OFFSET[0] + column * CELL_SIZE,
                        camera_y + GRID_OFFSET[1] + row * CELL_SIZE,
                    )
        for slot, item in enumerate(self.armor):
            if item:
                yield item, (
                    camera_x + ARMOR_DRAW_OFFSET[0],
                    camera_y + ARMOR_DRAW_OFFSET[1] + slot * ARMOR_SPACING,
                )
        if self.dragging and mouse is not None:
            column, row = self.drag_cell
            item = self.grid[row][column]
            if item:
                yield item, (mouse[0] - DRAG_OFFSET, mouse[1] - DRAG_OFFSET)

    def draw(
        self,
        surface: pygame.Surface,
        sheet: pygame.Surface,
        panel: pygame.Surface | None = None,
        camera_x: float = 0.0,
        camera_y: float = 0.0,
        mouse: tuple[float, float] | None = None,
    ) -> None:
        """Draw the open inventory: backdrop, panel, items and the dragged item."""
        if not self.is_open:
            return
        background = pygame.Surface(BACKGROUND_SIZE, pygame.SRCALPHA)
        background.fill(BACKGROUND_COLOR)
        surface.blit(background, (camera_x, camera_y))
        if panel is not None:
            surface.blit(
                panel, (camera_x + PANEL_POSITION[0], camera_y + PANEL_POSITION[1])
            )
        for item, position in self._placements(camera_x, camera_y, mouse):
            surface.blit(sheet, position, pygame.Rect(item_rect(self.sprite_rects, item)))