"""Rooms of the dungeon: their map, inhabitants, pick-ups and exits."""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterator

from dungeon.consumable import Potion
from dungeon.geometry import Rect, Sprite, Vector2
from dungeon.tile import Tile

_LINE_COUNT = 6

# tile_px * sprite_scale * tiles_x / tiles_y
_SCREEN_WIDTH = 16 * 3 * 40
_SCREEN_HEIGHT = 16 * 3 * 23


@dataclass
class LevelLayout:
    """The grid of a level as stored in a ``.ptlt`` file."""

    tiles_x: int
    tiles_y: int
    bg_tile_ids: list[int]
    bg_tile_rotations: list[int]
    fg_tile_ids: list[int]
    fg_tile_rotations: list[int]
    solid_tiles: list[int]

    def cells(self) -> Iterator[tuple[int, int, int, int, int, int, int]]:
        """Yield (column, row, bg_id, bg_rot, fg_id, fg_rot, solid) per cell."""
        layers = zip(
            self.bg_tile_ids,
            self.bg_tile_rotations,
            self.fg_tile_ids,
            self.fg_tile_rotations,
            self.solid_tiles,
        )
        for index, values in enumerate(layers):
            row, col = divmod(index, self.tiles_x)
            yield (col, row, *values)


def _parse_line(line: str) -> list[int]:
    segments = line.split(",")
    if segments[-1] == "":
        segments.pop()
    try:
        return [int(segment) for segment in segments]
    except ValueError as exc:
        raise ValueError(f"invalid number in level line {line!r}") from exc


def parse_ptlt(text: str) -> LevelLayout:
    """Parse the six comma-separated lines of a level file.

    The lines are: level size, background ids, background rotations,
    foreground ids, foreground rotations and solid flags.
    """
    rows = [_parse_line(line) for line in text.splitlines()]
    if len(rows) > _LINE_COUNT:
        raise ValueError(f"level has {len(rows)} lines, expected {_LINE_COUNT}")
    rows += [[] for _ in range(_LINE_COUNT - len(rows))]
    info, *layers = rows
    if len(info) < 2:
        raise ValueError("level size line needs a width and a height")
    tiles_x, tiles_y = info[0], info[1]
    if tiles_x <= 0 or tiles_y <= 0:
        raise ValueError(f"invalid level size {tiles_x}x{tiles_y}")
    count = tiles_x * tiles_y
    if any(len(layer) < count for layer in layers):
        raise ValueError(f"every tile line needs {count} values")
    return LevelLayout(tiles_x, tiles_y, *(layer[:count] for layer in layers))


@dataclass
class FinishRect:
    """An exit area that loads another level when the player touches it.

    ``axis`` tells along which axes the player's position is mirrored
    when entering the next level.
    """

    rect: Rect
    axis: tuple[bool, bool]
    level_factory: Callable[[Any], Any]

    @classmethod
    def from_side(cls, side: str, level_factory: Callable[[Any], Any]) -> FinishRect:
        """An exit along the top ('t'), bottom ('b'), left ('l') or right ('r')."""
        sides = {
            "t": (Rect(0, 0, _SCREEN_WIDTH, 1), (False, True)),
            "b": (Rect(0, _SCREEN_HEIGHT, _SCREEN_WIDTH, 1), (False, True)),
            "l": (Rect(0, 0, 1, _SCREEN_HEIGHT), (True, False)),
            "r": (Rect(_SCREEN_WIDTH, 0, 1, _SCREEN_HEIGHT), (True, False)),
        }
        try:
            rect, axis = sides[side]
        except KeyError:
            raise ValueError(f"unknown exit side {side!r}") from None
        return cls(rect, axis, level_factory)

    def check_player_collision(self, player_bounds: Rect) -> bool:
        return player_bounds.intersects(self.rect)


class Level:
    """A single room with tiles, walls, enemies, pick-ups, exits and maybe a gate."""

    def __init__(self, game: Any) -> None:
        self.game = game
        self.texture = game.sprite_sheet
        self.tiles_x = 40
        self.tiles_y = 23
        self.tile_px = 16
        self.sprite_scale = 3.0
        self.bg_tiles: list[Tile] = []
        self.fg_tiles: list[Tile] = []
        self.solid_tiles_rect: list[Rect] = []
        self.enemy_list: list[Any] = []
        self.consumable_list: list[Any] = []
        self.finish_rect_list: list[FinishRect] = []
        self.gate_level = False
        self.gate_is_open = False
        self.key_req = 3
        self.door_sprite: Sprite | None = None
        self.gate_area = Rect()
        self.gate_finish_rect: FinishRect | None = None
        self.door_position: tuple[int, int] = (0, 0)
        self.rng = random.Random()

    def parse_ptlt_file(self, file_path: str | Path) -> None:
        """Build tiles and wall rectangles from a level file."""
        layout = parse_ptlt(Path(file_path).read_text())
        self.tiles_x = layout.tiles_x
        self.tiles_y = layout.tiles_y
        cell = self.game.sprite_size * self.sprite_scale
        for col, row, bg_id, bg_rot, fg_id, fg_rot, solid in layout.cells():
            if bg_id != -1:
                self.bg_tiles.append(
                    Tile(self.game, bg_id, bg_rot, self.sprite_scale, (col, row))
                )
            if fg_id != -1:
                self.fg_tiles.append(
                    Tile(self.game, fg_id, fg_rot, self.sprite_scale, (col, row))
                )
            if solid == 1:
                self.solid_tiles_rect.append(Rect(col * cell, row * cell, cell, cell))

    def enemies_set_collision_bounds(self) -> None:
        """Make every enemy collide with this level's walls."""
        for enemy in self.enemy_list:
            enemy.collision_bounds = self.solid_tiles_rect

    def render_background(self) -> None:
        for tile in self.bg_tiles:
            tile.render()
        for tile in self.fg_tiles:
            tile.render()
        if self.gate_is_open and self.door_sprite is not None:
            self.game.window.draw(self.door_sprite)

    def update_enemies(self) -> None:
        """Remove the dead (maybe dropping a potion) and update the living."""
        for enemy in self.enemy_list:
            if not enemy.is_dead:
                continue
            if self.rng.randrange(4) == 0 and enemy.drops_potions:
                self.consumable_list.append(Potion(self.game, enemy.position.copy()))
            self.game.dead_enemies[enemy.id] = True
        living = [enemy for enemy in self.enemy_list if not enemy.is_dead]
        self.enemy_list[:] = living
        for enemy in living:
            enemy.update_common()
            enemy.step()
            enemy.update()

    def render_enemies(self) -> None:
        for enemy in self.enemy_list:
            enemy.render()

    def update_consumables(self) -> None:
        self.consumable_list[:] = [c for c in self.consumable_list if not c.end_of_life]
        for consumable in list(self.consumable_list):
            consumable.step()

    def render_consumables(self) -> None:
        for consumable in self.consumable_list:
            consumable.render()

    def render_key_count(self) -> None:
        """Show collected keys against the keys needed, on gate levels."""
        key_count = self.game.player.key_count
        if not self.gate_level or key_count == -1:
            return
        bound = self.game.window_bound
        self.game.hud.write(
            f"{key_count}|{self.key_req}", bound.width / 2.0, bound.height / 6.0
        )

    def update_door(self) -> None:
        """Open the gate once the player brings enough keys to it."""
        if not self.gate_level or self.gate_is_open:
            return
        player = self.game.player
        at_gate = player.key_count == self.key_req and player.sprite.global_bounds().intersects(
            self.gate_area
        )
        if not (at_gate or player.key_count == -1):
            return
        self.gate_is_open = True
        player.key_count = -1
        door_x, door_y = self.door_position
        self.door_sprite = Sprite(
            texture=self.game.sprite_sheet,
            texture_rect=Rect(160, 112, 32, 32),
            scale=Vector2(3.0, 3.0),
            position=Vector2(door_x * 48, door_y * 48),
        )
        if self.gate_finish_rect is not None:
            self.finish_rect_list.append(self.gate_finish_rect)

    def update_finish_rects(self) -> None:
        """Move to the next level when the player walks into an exit."""
        player = self.game.player
        for finish_rect in self.finish_rect_list:
            if finish_rect.check_player_collision(player.sprite.global_bounds()):
                self.game.init_level(
                    finish_rect.level_factory(self.game),
                    self.game.mirrored_vector(player.position, finish_rect.axis, True),
                )
                break

    def render(self) -> None:
        self.render_background()
        self.render_consumables()
        self.render_enemies()
        self.render_key_count()