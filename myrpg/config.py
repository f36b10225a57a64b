"""Loading of the map, character and door configuration files."""

from __future__ import annotations

from dataclasses import dataclass

from myrpg.textparse import PathLike, get_number, read_file, split_fields

MAP_CONFIG = "./src/config_file/config_map_over_world.txt"
PNJ_CONFIG = "./src/config_file/config_pnj.txt"
DOOR_CONFIG = "./src/config_file/config_door.txt"

_ENTRY_SEPARATORS = " []:\n"
_DOOR_SEPARATORS = " []\n"


@dataclass(frozen=True)
class MapEntry:
    """A map layer or character: its name, kind, position, image and dialogue."""

    name: str
    kind: str
    position: tuple[int, int]
    image_path: str
    dialogue: tuple[str, ...] = ()


@dataclass(frozen=True)
class DoorEntry:
    """A door: where it stands and where it leads."""

    name: str
    position: tuple[int, int]
    target: tuple[int, int]


def _records(path: PathLike, separators: str, needed: int) -> list[list[str]]:
    records = []
    for number, line in enumerate(split_fields(read_file(path), "\n"), start=1):
        fields = split_fields(line, separators)
        if len(fields) < needed:
            raise ValueError(
                f"{path}: line {number} has {len(fields)} fields, {needed} expected"
            )
        records.append(fields)
    return records


def _entry(fields: list[str], dialogue: tuple[str, ...] = ()) -> MapEntry:
    return MapEntry(
        name=fields[0],
        kind=fields[1],
        position=(get_number(fields[2]), get_number(fields[3])),
        image_path=fields[4],
        dialogue=dialogue,
    )


def load_map_config(path: PathLike = MAP_CONFIG) -> list[MapEntry]:
    """Read the map layers listed in ``path``, in file order."""
    return [_entry(fields) for fields in _records(path, _ENTRY_SEPARATORS, 5)]


def load_pnj_config(path: PathLike = PNJ_CONFIG) -> list[MapEntry]:
    """Read the characters listed in ``path``, each with its dialogue lines."""
    return [
        _entry(fields, tuple(split_fields(read_file(fields[5]), "|")))
        for fields in _records(path, _ENTRY_SEPARATORS, 6)
    ]


def load_door_config(path: PathLike = DOOR_CONFIG) -> list[DoorEntry]:
    """Read the doors listed in ``path``, in file order."""
    return [
        DoorEntry(
            name=fields[0],
            position=(get_number(fields[1]), get_number(fields[2])),
            target=(get_number(fields[3]), get_number(fields[4])),
        )
        for fields in _records(path, _DOOR_SEPARATORS, 5)
    ]