"""The hero controlled by the keyboard and mouse."""

from __future__ import annotations

import math
from typing import Any

from dungeon.entity import Entity
from dungeon.geometry import RED, Rect, Vector2, rad_to_deg
from dungeon.item import Item


class Player(Entity):
    """The player character, carrying a sword."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.scale = 3.0
        self.max_hp = 3
        self.current_hp = 3
        self.key_count = 0
        self.damage = 20
        self.sheet_rect = Rect(224, 236, 16, 20)
        self.speed = 7.0
        self.player_mouse_angle = 0.0
        self.weapon = Item(self)
        self.make_sprite()
        self.sprite.origin = Vector2(
            float(self.sheet_rect.width) / 2, float(self.sheet_rect.height) / 1.5
        )

    def update(self) -> None:
        if self.direction.x < 0:
            self.sprite.scale = Vector2(-self.scale, self.scale)
        elif self.direction.x > 0:
            self.sprite.scale = Vector2(self.scale, self.scale)
        self.handle_enemy_collision()
        self.handle_consumable_collision()
        self.set_mouse_angle()
        self.weapon.update()
        if self.current_hp <= 0:
            self.game.game_over = True

    def render(self) -> None:
        self.weapon.render()
        self.game.window.draw(self.sprite)

    def set_mouse_angle(self) -> None:
        """Angle in degrees from the mouse cursor to the player."""
        mouse = self.game.mouse_pos
        self.player_mouse_angle = rad_to_deg(
            math.atan2(self.position.y - mouse.y, self.position.x - mouse.x)
        )

    def hit(self, angle: float, force: float) -> None:
        """Lose a heart (unless still reeling) and get knocked back."""
        if self.kb_stopwatch.is_stop:
            self.current_hp -= 1
        self.start_knockback(angle, force)
        self.sprite.color = RED
        self.game.start_sfx("Hit2")

    def handle_consumable_collision(self) -> None:
        """Pick up potions (when hurt) and keys that the player touches."""
        bounds = self.sprite.global_bounds()
        for consumable in self.game.current_level.consumable_list:
            if not consumable.sprite.global_bounds().intersects(bounds):
                continue
            if consumable.name == "potion" and self.current_hp < self.max_hp:
                self.current_hp += 1
                consumable.end_of_life = True
                self.game.start_sfx("PotionPickup")
            elif consumable.name == "key":
                self.key_count += 1
                consumable.end_of_life = True
                self.game.taken_keys[consumable.id] = True
                self.game.start_sfx("KeyPickup")

    def _angle_from(self, point: Vector2) -> float:
        return rad_to_deg(
            math.atan2(self.position.y - point.y, self.position.x - point.x)
        )

    def handle_enemy_collision(self) -> None:
        """Take hits from touching enemies and their projectiles."""
        for enemy in self.game.current_level.enemy_list:
            if enemy.sprite.global_bounds().intersects(self.sprite.global_bounds()):
                self.hit(self._angle_from(enemy.sprite.position), enemy.kb_force)
            if enemy.has_projectiles:
                for projectile in enemy.projectiles:
                    if projectile.sprite.global_bounds().intersects(
                        self.sprite.global_bounds()
                    ):
                        angle = self._angle_from(projectile.sprite.position)
                        projectile.end_of_life = True
                        self.hit(angle, enemy.kb_force)