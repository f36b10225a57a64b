"""Turn-based boss battle: hit points, action buttons and damage rules."""

from __future__ import annotations

from dataclasses import dataclass

from myrpg.textparse import PathLike, get_number, parse_battle_numbers, read_file

BATTLE_FILE = "battle.txt"

SWORD_DAMAGE = 15
AXE_DAMAGE = 10
BOSS_DAMAGE = 10
AXE_HEAL = 5

ACTION_NONE = 0
ACTION_SWORD = 1
ACTION_AXE = 2
ACTION_SPECIAL = 3

SPECIAL_MESSAGE = "L'aventurier utilise son attaque spéciale"

Rect = tuple[int, int, int, int]

ACTION_RECTS: dict[int, Rect] = {
    ACTION_SWORD: (500, 800, 300, 200),
    ACTION_AXE: (900, 800, 300, 200),
    ACTION_SPECIAL: (1300, 800, 300, 200),
}
PANEL_RECT: Rect = (540, 0, 700, 700)
HP_RECTS: tuple[Rect, Rect] = ((30, 350, 170, 30), (1550, 500, 170, 30))

BUTTON_COLOR = (255, 255, 255)
HP_COLOR = (178, 178, 178)

SPRITE_SCALE = 10
FIGHTER_SHEET = "Characters.png"
WEAPON_SHEET = "sprite/inventory/item.png"
# (sheet, frame rectangle on the sheet, position on screen)
SPRITES: tuple[tuple[str, Rect, tuple[int, int]], ...] = (
    (FIGHTER_SHEET, (160, 290, 32, 50), (0, 400)),
    (FIGHTER_SHEET, (0, 240, 32, 50), (1500, 0)),
    (WEAPON_SHEET, (176, 0, 16, 16), (500, 800)),
    (WEAPON_SHEET, (192, 48, 16, 16), (900, 800)),
)


def _contains(rect: Rect, x: float, y: float) -> bool:
    left, top, width, height = rect
    return left <= x < left + width and top <= y < top + height


@dataclass
class Battle:
    """Hit points of the player and the boss, the damage values and the chosen action."""

    health: int
    enemy_health: int
    max_health: int
    enemy_max_health: int
    sword_damage: int = SWORD_DAMAGE
    axe_damage: int = AXE_DAMAGE
    boss_damage: int = BOSS_DAMAGE
    action: int = ACTION_NONE

    @classmethod
    def from_text(cls, text: str) -> Battle:
        """Build a battle from text whose first and third numbers are the hit points."""
        numbers = parse_battle_numbers(text)
        if len(numbers) < 3:
            raise ValueError(
                f"battle description needs at least 3 numbers, got {len(numbers)}"
            )
        health = get_number(numbers[0])
        enemy_health = get_number(numbers[2])
        return cls(
            health=health,
            enemy_health=enemy_health,
            max_health=health,
            enemy_max_health=enemy_health,
        )

    def choose_action(self, point: tuple[float, float]) -> int | None:
        """Select the action whose button lies under ``point``.

        Returns the action chosen, or None when no button was hit; the
        current choice is then kept.
        """
        x, y = point
        chosen = None
        for action, rect in ACTION_RECTS.items():
            if _contains(rect, x, y):
                chosen = action
        if chosen is not None:
            self.action = chosen
        return chosen

    def _exchange(self, player_damage: int) -> None:
        self.health = max(self.health - self.boss_damage, 0)
        self.enemy_health = max(self.enemy_health - player_damage, 0)

    def apply_turn(self) -> int:
        """Resolve the chosen action, clear the choice and return the action applied."""
        action, self.action = self.action, ACTION_NONE
        if action == ACTION_SWORD:
            self._exchange(self.sword_damage)
        elif action == ACTION_AXE:
            self._exchange(self.axe_damage)
            self.health += AXE_HEAL
        elif action == ACTION_SPECIAL:
            print(SPECIAL_MESSAGE)
        return action

    def is_over(self) -> bool:
        """Tell whether either side has run out of hit points."""
        return self.health <= 0 or self.enemy_health <= 0


def load_battle(path: PathLike = BATTLE_FILE) -> Battle:
    """Read a battle description from ``path``."""
    return Battle.from_text(read_file(path))