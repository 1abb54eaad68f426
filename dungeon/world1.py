"""The rooms of the first world and how they connect.

Map of the world (b: boss, k: key, s: start)::

    F     b
    E     |
    D k-+-+
    C +-+ +-+-k
    B +-+-+-+
    A   k s
      1 2 3 4 5
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Iterable

from dungeon.consumable import Key
from dungeon.enemies import (
    ArmoredZombie,
    BigFire,
    BigSlime,
    BossZombie,
    Ghost,
    Skeleton,
    Sorcerer,
    Zombie,
)
from dungeon.geometry import Rect, Vector2
from dungeon.level import FinishRect, Level

RESOURCE_DIR = Path("res") / "World1"

TILE = 48

LevelFactory = Callable[[Any], Level]


def _new_level(game: Any, name: str) -> Level:
    level = Level(game)
    level.parse_ptlt_file(RESOURCE_DIR / f"level{name}.ptlt")
    return level


def _at(x: float, y: float) -> Vector2:
    """A point given in tile units."""
    return Vector2(x * TILE, y * TILE)


def _add_exits(level: Level, exits: Iterable[tuple[str, LevelFactory]]) -> None:
    level.finish_rect_list.extend(
        FinishRect.from_side(side, factory) for side, factory in exits
    )


def level_1b(game: Any) -> Level:
    level = _new_level(game, "1B")
    level.enemy_list.append(BigFire(game, _at(20, 6), 121))
    _add_exits(level, [("r", level_2b), ("t", level_1c)])
    return level


def level_1c(game: Any) -> Level:
    level = _new_level(game, "1C")
    level.enemy_list.append(BigFire(game, _at(26, 8), 131))
    level.enemy_list.append(Skeleton(game, _at(20, 6), 132))
    _add_exits(level, [("b", level_1b), ("r", level_2c)])
    return level


def level_1d(game: Any) -> Level:
    level = _new_level(game, "1D")
    level.consumable_list.append(Key(game, _at(20, 9), 1))
    _add_exits(level, [("r", level_2d)])
    return level


def level_2a(game: Any) -> Level:
    level = _new_level(game, "2A")
    level.consumable_list.append(Key(game, _at(20, 12), 2))
    _add_exits(level, [("t", level_2b)])
    return level


def level_2b(game: Any) -> Level:
    level = _new_level(game, "2B")
    level.enemy_list.append(Sorcerer(game, _at(10, 9), 221))
    level.enemy_list.append(ArmoredZombie(game, _at(20, 6), 222))
    level.enemy_list.append(ArmoredZombie(game, _at(20, 12), 223))
    _add_exits(
        level, [("r", level_3b), ("b", level_2a), ("l", level_1b), ("t", level_2c)]
    )
    return level


def level_2c(game: Any) -> Level:
    level = _new_level(game, "2C")
    level.enemy_list.append(BigSlime(game, _at(20, 10.5), 231))
    level.enemy_list.append(BigSlime(game, _at(20, 12.5), 232))
    level.enemy_list.append(Sorcerer(game, _at(23, 11.5), 233))
    _add_exits(level, [("b", level_2b), ("l", level_1c), ("t", level_2d)])
    return level


def level_2d(game: Any) -> Level:
    level = _new_level(game, "2D")
    level.enemy_list.append(Sorcerer(game, _at(10, 6), 241))
    level.enemy_list.append(Sorcerer(game, _at(30, 6), 242))
    level.enemy_list.append(BigSlime(game, _at(20, 6), 243))
    level.enemy_list.append(Ghost(game, _at(35, 18), 246))
    _add_exits(level, [("b", level_2c), ("l", level_1d), ("r", level_3d)])
    return level


def level_3a(game: Any) -> Level:
    level = _new_level(game, "3A")
    level.enemy_list.append(Zombie(game, _at(17, 6), 311))
    level.enemy_list.append(Zombie(game, _at(23, 6), 312))
    _add_exits(level, [("t", level_3b)])
    return level


def level_3b(game: Any) -> Level:
    level = _new_level(game, "3B")
    level.enemy_list.append(Sorcerer(game, _at(10, 6), 321))
    level.enemy_list.append(Sorcerer(game, _at(30, 6), 322))
    _add_exits(level, [("b", level_3a), ("r", level_4b), ("l", level_2b)])
    music = game.background_music
    if not music.is_playing():
        music.play()
    return level


def level_3c(game: Any) -> Level:
    level = _new_level(game, "3C")
    level.enemy_list.append(Skeleton(game, _at(18, 11), 331))
    level.enemy_list.append(BigFire(game, _at(20, 11), 332))
    level.enemy_list.append(BigFire(game, _at(18, 9), 333))
    _add_exits(level, [("r", level_4c), ("t", level_3d)])
    return level


def level_3d(game: Any) -> Level:
    level = _new_level(game, "3D")
    level.enemy_list.append(Sorcerer(game, _at(20, 3), 341))
    level.enemy_list.append(Skeleton(game, _at(18, 4), 342))
    level.enemy_list.append(Skeleton(game, _at(22, 4), 343))
    level.enemy_list.append(ArmoredZombie(game, _at(16, 9), 344))
    level.enemy_list.append(ArmoredZombie(game, _at(20, 13), 345))
    _add_exits(level, [("t", level_3e), ("l", level_2d), ("b", level_3c)])
    return level


def level_3e(game: Any) -> Level:
    """The gate room in front of the boss; it needs every key."""
    level = Level(game)
    level.gate_level = True
    level.parse_ptlt_file(RESOURCE_DIR / "level3E.ptlt")
    _add_exits(level, [("b", level_3d)])
    level.gate_area = Rect(0, 0, 23 * TILE, 6 * TILE)
    level.gate_finish_rect = FinishRect(
        Rect(0, 0, TILE * 40, 2.5 * TILE), (False, True), level_3f
    )
    level.door_position = (19, 0)
    return level


def level_3f(game: Any) -> Level:
    level = _new_level(game, "3F")
    level.enemy_list.append(BossZombie(game, Vector2(960, 160), 1101))
    return level


def level_4b(game: Any) -> Level:
    level = _new_level(game, "4B")
    level.enemy_list.append(Ghost(game, _at(30, 5), 421))
    level.enemy_list.append(Ghost(game, _at(10, 20), 422))
    level.enemy_list.append(Sorcerer(game, _at(20, 10), 423))
    _add_exits(level, [("l", level_3b), ("t", level_4c)])
    return level


def level_4c(game: Any) -> Level:
    level = _new_level(game, "4C")
    level.enemy_list.append(BigSlime(game, _at(10, 6), 431))
    level.enemy_list.append(BigSlime(game, _at(30, 6), 432))
    level.enemy_list.append(Ghost(game, _at(5, 18), 433))
    level.enemy_list.append(Ghost(game, _at(35, 18), 434))
    _add_exits(level, [("b", level_4b), ("r", level_5c), ("l", level_3c)])
    return level


def level_5c(game: Any) -> Level:
    level = _new_level(game, "5C")
    level.consumable_list.append(Key(game, _at(20, 9), 3))
    _add_exits(level, [("l", level_4c)])
    return level