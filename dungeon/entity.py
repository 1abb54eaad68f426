"""Base class for everything that moves around a level."""

from __future__ import annotations

import math
from typing import Any

from dungeon.geometry import WHITE, Rect, Sprite, Vector2, deg_to_rad
from dungeon.stopwatch import Stopwatch


class Entity:
    """A sprite with movement, knockback and wall collisions."""

    def __init__(self, game: Any) -> None:
        self.game = game
        self.direction = Vector2(0.0, 0.0)
        self.position = Vector2(0.0, 0.0)
        self.texture = game.sprite_sheet
        self.sprite = Sprite()
        level = game.current_level
        self.collision_bounds: list[Rect] = (
            level.solid_tiles_rect if level is not None else []
        )
        self.has_collisions = True
        self.sheet_rect = Rect(0, 0, 0, 0)
        self.scale = 3.0
        self.speed = 0.0
        self.kb_stopwatch = Stopwatch(0, game, False)
        self.kb_angle = 0

    def make_sprite(self) -> None:
        """Cut the entity's region from the sprite sheet and centre it."""
        rect = self.sheet_rect
        self.sprite.scale = Vector2(3.0, 3.0)
        self.sprite.texture = self.texture
        self.sprite.texture_rect = Rect(rect.left, rect.top, rect.width, rect.height)
        self.sprite.origin = Vector2(rect.width / 2, rect.height / 2)

    def step(self) -> None:
        """Apply knockback and wall collisions, then move by ``direction``."""
        kb = self.kb_stopwatch
        if not kb.is_stop:
            if kb.update():
                self.apply_knockback()
            else:
                self.direction = Vector2(0.0, 0.0)
                self.sprite.color = WHITE

        blocked_x, blocked_y = self.wall_collision_check()
        if self.has_collisions:
            if blocked_x:
                self.direction.x = 0.0
            if blocked_y:
                self.direction.y = 0.0

        self.direction = self.direction * self.game.time_unit
        self.sprite.move(self.direction.x, self.direction.y)
        self.position = self.sprite.position.copy()

    def update(self) -> None:
        self.step()

    def render(self) -> None:
        self.game.window.draw(self.sprite)

    def wall_collision_check(self) -> tuple[bool, bool]:
        """Whether moving along x, or along y, would hit a wall."""
        bounds = self.sprite.global_bounds()
        ghost_x = Rect(
            bounds.left + self.direction.x, bounds.top, bounds.width, bounds.height
        )
        ghost_y = Rect(
            bounds.left, bounds.top + self.direction.y, bounds.width, bounds.height
        )
        hit_x = any(ghost_x.intersects(wall) for wall in self.collision_bounds)
        hit_y = any(ghost_y.intersects(wall) for wall in self.collision_bounds)
        return hit_x, hit_y

    def set_position(self, x: float, y: float) -> None:
        self.sprite.position = Vector2(x, y)

    def apply_knockback(self) -> None:
        force = self.kb_stopwatch.stop_time - self.kb_stopwatch.current_time
        angle = deg_to_rad(self.kb_angle)
        self.direction = Vector2(force * math.cos(angle), force * math.sin(angle))

    def start_knockback(self, angle: float, force: float) -> None:
        self.kb_stopwatch.is_stop = False
        self.kb_stopwatch.stop_time = force
        self.kb_angle = int(angle)