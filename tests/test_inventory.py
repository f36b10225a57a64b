import pygame
import pytest

from myrpg.inventory import (
    ARMOR_SLOTS,
    GRID_COLUMNS,
    GRID_ROWS,
    Inventory,
    armor_slot,
    create_sprite_rects,
    grid_cell,
    item_rect,
)


def _open_inventory():
    inventory = Inventory()
    inventory.is_open = True
    return inventory


def test_sprite_rects_cover_sheet():
    rects = create_sprite_rects(16, 16, 208, 144)
    assert len(rects) == 9
    assert all(len(row) == 13 for row in rects)
    assert rects[0][0] == (0, 0, 16, 16)
    assert rects[2][5] == (5 * 16, 2 * 16, 16, 16)


def test_sprite_rects_reject_zero_size():
    with pytest.raises(ValueError):
        create_sprite_rects(0, 16, 208, 144)


def test_item_rect_first_item():
    rects = create_sprite_rects(16, 16, 208, 144)
    assert item_rect(rects, 1) == rects[0][0]


def test_item_rect_uses_sheet_layout():
    rects = create_sprite_rects(16, 16, 208, 144)
    assert item_rect(rects, 35) == rects[34 // 9][34 % 13]


def test_item_rect_rejects_empty_item():
    rects = create_sprite_rects(16, 16, 208, 144)
    with pytest.raises(ValueError):
        item_rect(rects, 0)


def test_grid_cell_corners():
    assert grid_cell(170, 42, 0, 0) == (0, 0)
    assert grid_cell(170 + 5 * 30 + 1, 42 + 4 * 30 + 1, 0, 0) == (5, 4)
    assert grid_cell(170 + 6 * 30, 42, 0, 0) is None
    assert grid_cell(1170, 1042, 1000, 1000) == (0, 0)


def test_armor_slot():
    assert armor_slot(385, 50, 0, 0) == 0
    assert armor_slot(385, 50 + 2 * 36, 0, 0) == 2
    assert armor_slot(385 + 30, 50, 0, 0) is None
    assert armor_slot(385, 50 + 3 * 36, 0, 0) is None


def test_new_inventory_is_empty():
    inventory = Inventory()
    assert len(inventory.grid) == GRID_ROWS
    assert all(cell == 0 for row in inventory.grid for cell in row)
    assert inventory.armor == [0] * ARMOR_SLOTS
    assert not inventory.is_open


def test_add_item_fills_rows_in_order():
    inventory = Inventory()
    for item in range(1, GRID_COLUMNS + 2):
        assert inventory.add_item(item)
    assert inventory.grid[0] == list(range(1, GRID_COLUMNS + 1))
    assert inventory.grid[1][0] == GRID_COLUMNS + 1


def test_add_item_full_grid():
    inventory = Inventory()
    for _ in range(GRID_ROWS * GRID_COLUMNS):
        assert inventory.add_item(7)
    assert inventory.add_item(7) is False


def test_drag_and_drop_swaps():
    inventory = _open_inventory()
    inventory.add_item(3)
    inventory.left_pressed(171, 43, 0, 0)
    assert inventory.dragging
    inventory.left_released(170 + 2 * 30 + 1, 42 + 30 + 1, 0, 0)
    assert not inventory.dragging
    assert inventory.grid[0][0] == 0
    assert inventory.grid[1][2] == 3


def test_release_outside_grid_cancels():
    inventory = _open_inventory()
    inventory.add_item(3)
    inventory.left_pressed(171, 43, 0, 0)
    inventory.left_released(5, 5, 0, 0)
    assert not inventory.dragging
    assert inventory.grid[0][0] == 3


def test_closed_inventory_ignores_press():
    inventory = Inventory()
    inventory.left_pressed(171, 43, 0, 0)
    assert not inventory.dragging


def test_start_drag_outside_grid_raises():
    with pytest.raises(ValueError):
        Inventory().start_drag(GRID_COLUMNS, 0)


def test_equip_armor_item():
    inventory = Inventory()
    inventory.add_item(35)
    assert inventory.equip(0, 0)
    assert inventory.armor[0] == 35
    assert inventory.grid[0][0] == 0


def test_equip_refuses_other_items_and_full_slot():
    inventory = Inventory()
    inventory.add_item(5)
    assert inventory.equip(0, 0) is False
    inventory.armor[0] = 36
    inventory.add_item(35)
    assert inventory.equip(1, 0) is False
    assert inventory.grid[0][1] == 35


def test_unequip_returns_to_first_empty_cell():
    inventory = Inventory()
    inventory.add_item(1)
    inventory.armor[0] = 36
    assert inventory.unequip(0)
    assert inventory.armor[0] == 0
    assert inventory.grid[0][1] == 36


def test_unequip_empty_slot():
    assert Inventory().unequip(1) is False
    with pytest.raises(ValueError):
        Inventory().unequip(ARMOR_SLOTS)


def test_right_click_round_trip():
    inventory = _open_inventory()
    inventory.add_item(35)
    inventory.right_released(171, 43, 0, 0)
    assert inventory.armor[0] == 35
    inventory.right_released(386, 51, 0, 0)
    assert inventory.armor[0] == 0
    assert inventory.grid[0][0] == 35


def test_middle_click_trashes():
    inventory = _open_inventory()
    inventory.add_item(4)
    inventory.middle_released(171, 43, 0, 0)
    assert inventory.grid[0][0] == 0


def test_toggle_needs_release_and_delay():
    inventory = Inventory()
    assert inventory.update_toggle(True, 1.0)
    assert inventory.is_open
    assert inventory.update_toggle(True, 1.0) is False
    assert inventory.update_toggle(False, 1.0) is False
    assert inventory.key_released
    assert inventory.update_toggle(True, 0.05) is False
    assert inventory.is_open
    assert inventory.update_toggle(True, 0.2)
    assert not inventory.is_open


def test_draw_places_item():
    inventory = _open_inventory()
    inventory.add_item(1)
    sheet = pygame.Surface((208, 144))
    sheet.fill((255, 0, 0))
    target = pygame.Surface((800, 600))
    target.fill((255, 255, 255))
    inventory.draw(target, sheet)
    assert tuple(target.get_at((175, 47)))[:3] == (255, 0, 0)


def test_draw_closed_does_nothing():
    inventory = Inventory()
    inventory.add_item(1)
    sheet = pygame.Surface((208, 144))
    sheet.fill((255, 0, 0))
    target = pygame.Surface((800, 600))
    target.fill((255, 255, 255))
    inventory.draw(target, sheet)
    assert tuple(target.get_at((175, 47)))[:3] == (255, 255, 255)