# myrpg

Building blocks for a small top-down role-playing game on pygame. The package covers
the game rules and a few screens: it reads map, character and door configuration files,
moves the player and the camera, handles pixel collisions and doors, keeps an inventory
with armour slots, runs turn-based boss battles, shows dialogue boxes and runs a title menu.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Modules

- `myrpg.textparse`: text helpers. `split_fields(text, separators)` splits on any of the
  separator characters and drops empty fields. `get_number(text)` reads the first run of
  digits and makes it negative if a `-` comes right before it. It returns 0 when there are
  no digits or when the value is above 32767. `int_to_str(number)` gives the decimal text,
  with an empty string for 0. The module also has `parse_battle_numbers`, `read_file`,
  `read_optional_file` and `has_prefix`.
- `myrpg.config`: `load_map_config`, `load_pnj_config` and `load_door_config`. They read
  the files `src/config_file/config_map_over_world.txt`, `config_pnj.txt` and
  `config_door.txt` by default. They return `MapEntry` and `DoorEntry` records in file
  order, and a line with too few fields raises `ValueError`.
  - A map line holds a name, a kind, x, y and an image path.
  - A character line holds the same fields plus a dialogue file, whose lines are separated by `|`.
  - A door line holds a name, x, y and the target x and y.
- `myrpg.motion`: `Direction` (four flags), `Camera`, and the functions `move_camera`
  and `clamp_camera`, which keep the camera inside the world limits.
- `myrpg.world`: `move_position`, pixel collision probes (`collision_probes`,
  `blocked_directions`, `restore_if_blocked`), door lookup (`find_door`,
  `door_camera_target`) and `ArenaDoors`, which opens and closes the three arena gates.
- `myrpg.animation`: the walking `Animation` for each `Facing`, `read_direction_keys`
  for arrow keys and `joystick_direction` for joystick axes.
- `myrpg.inventory`: `Inventory` has a 5 × 6 grid and three armour slots. Its methods
  cover adding items, dragging items between cells, equipping items 35 and 36 as armour,
  unequipping, trashing, and opening or closing on a key press. It also has mouse handlers
  that take world and camera coordinates, and a `draw` method.
- `myrpg.dialogue`: `DialogueBox` steps through lines.
  `display_dialogue(screen, lines)` shows them one by one and moves on with each mouse click.
- `myrpg.battle`: `Battle` holds both fighters' hit points.
  - `Battle.from_text` takes the first and third numbers of the text as starting health.
  - `load_battle` reads `battle.txt`.
  - The sword action deals 15 damage. The axe action deals 10 and heals the player 5.
  - The boss hits back for 10 on every attack.
  - The special action only prints a message.
- `myrpg.audio`: `calculate_decibel(samples)` gives the loudness of 16-bit samples.
  `play_music(path)` loops a music file at half volume.
- `myrpg.menu`: the title menu. It has pages of `Button`s (`View`) and a `Menu`
  state machine. `create_config_file` and `has_save` manage the `config.txt` save
  marker. `run_menu(screen)` runs the menu loop and returns True when a game is started.

## Example

```python
from myrpg.battle import Battle
from myrpg.inventory import Inventory
from myrpg.textparse import split_fields, get_number

battle = Battle.from_text("100\n0\n80\n")
battle.choose_action((600, 850))   # the sword box
battle.apply_turn()
print(battle.health, battle.enemy_health)   # 90 65
print(battle.is_over())                     # False

inventory = Inventory()
inventory.add_item(35)
inventory.equip(0, 0)
print(inventory.armor)                      # [35, 0, 0]

print(split_fields("[DOOR] [10] [20]", " []"))   # ['DOOR', '10', '20']
print(get_number("x=-42"))                       # -42
```

## What the package does not do

The package does not install a command that launches the game. It has no overworld
loop that ties the map, player, inventory and doors together in a window. It also has
no screen that draws and runs a boss battle. The battle rules, the menu loop and the
dialogue display can each be used on their own, but wiring them into a playable game
is left to the caller.