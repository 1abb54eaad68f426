"""Missiles fired by enemies."""

from __future__ import annotations

import math
from typing import Any

from dungeon.entity import Entity
from dungeon.geometry import Rect, Vector2, deg_to_rad


class Projectile(Entity):
    """Flies in a straight line until it hits a wall or leaves the screen."""

    def __init__(
        self,
        game: Any,
        collision_bounds: list[Rect],
        sprite_rect: Rect,
        sprite_angle: float,
        start_position: Vector2,
        angle: float,
        speed: float,
    ) -> None:
        super().__init__(game)
        self.scale = 3.0
        self.sheet_rect = sprite_rect
        self.speed = speed
        self.angle = angle
        self.end_of_life = False
        self.make_sprite()
        self.sprite.rotation = (360 - (angle - 90) + sprite_angle) % 360
        self.collision_bounds = collision_bounds
        self.set_position(start_position.x, start_position.y)

    def update(self) -> None:
        radians = deg_to_rad(self.angle)
        self.direction = Vector2(
            self.speed * math.sin(radians), self.speed * math.cos(radians)
        )
        hit_x, hit_y = self.wall_collision_check()
        on_screen = self.sprite.global_bounds().intersects(self.game.window_bound)
        if hit_x or hit_y or not on_screen:
            self.end_of_life = True
            return
        step = self.direction * self.game.time_unit
        self.sprite.move(step.x, step.y)
        self.position = self.sprite.position.copy()