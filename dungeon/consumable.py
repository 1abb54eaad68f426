"""Pick-ups that pop out of enemies or lie around a level."""

from __future__ import annotations

import math
from typing import Any

from dungeon.entity import Entity
from dungeon.geometry import Rect, Vector2, rad_to_deg


class Consumable(Entity):
    """An item the player can collect, thrown away from the player on spawn."""

    def __init__(
        self, game: Any, sprite_rect: Rect, start_position: Vector2, name: str
    ) -> None:
        super().__init__(game)
        self.name = name
        self.sheet_rect = sprite_rect
        self.id: int | None = None
        self.force = 0.0
        player_pos = game.player.position
        self.angle = rad_to_deg(
            math.atan2(start_position.y - player_pos.y, start_position.x - player_pos.x)
        )
        self.end_of_life = False
        self.make_sprite()
        self.sprite.scale = Vector2(2.5, 2.5)
        self.set_position(start_position.x, start_position.y)
        self.start_knockback(self.angle, 9)


class Potion(Consumable):
    """Restores one heart."""

    def __init__(self, game: Any, start_position: Vector2) -> None:
        super().__init__(game, Rect(194, 176, 12, 16), start_position, "potion")


class Key(Consumable):
    """Opens the gate; once taken it stays gone for the rest of the run."""

    def __init__(self, game: Any, start_position: Vector2, key_id: int) -> None:
        super().__init__(game, Rect(32, 257, 16, 15), start_position, "key")
        self.id = key_id
        taken_keys = game.taken_keys
        if key_id not in taken_keys:
            taken_keys[key_id] = False
        elif taken_keys[key_id]:
            self.end_of_life = True