"""The player's sword."""

from __future__ import annotations

import math
from typing import Any

from dungeon.entity import Entity
from dungeon.geometry import Rect, Vector2, deg_to_rad
from dungeon.stopwatch import Stopwatch


class Item(Entity):
    """A sword that orbits the player, follows the cursor and swings on attack."""

    def __init__(self, player: Any) -> None:
        super().__init__(player.game)
        self.player = player
        self.cooldown_sw = Stopwatch(16.0, player.game, False)
        self.attack_sw = Stopwatch(11.0, player.game, False)
        self.scale = 3.0
        self.damage = 34.0
        self.angle = 0.0
        self.charge = 0
        self.sheet_rect = Rect(163, 32, 10, 32)
        self.make_sprite()

    def make_sprite(self) -> None:
        """Cut the blade from the sprite sheet with its grip as the pivot."""
        rect = self.sheet_rect
        self.sprite.texture = self.texture
        self.sprite.texture_rect = Rect(rect.left, rect.top, rect.width, rect.height)
        self.sprite.scale = Vector2(self.scale, self.scale)
        self.sprite.origin = Vector2(8.0, 28.0)

    def update(self) -> None:
        self.cooldown_sw.update()
        self.attack_sw.update()
        self.handle_enemy_collision()
        self.set_item_angle()
        self.set_item_position()

    def render(self) -> None:
        self.game.window.draw(self.sprite)

    @property
    def is_attacking(self) -> bool:
        return not self.attack_sw.is_stop

    def set_item_position(self) -> None:
        """Place the sword on a circle around the player, towards the cursor."""
        anchor = self.player.position.copy()
        anchor.y -= 10
        self.sprite.position = anchor

        angle = self.player.player_mouse_angle - 95.0
        if self.is_attacking:
            angle += self.attack_sw.current_time * 8
        radians = deg_to_rad(angle)
        self.sprite.move(55 * math.sin(radians), 55 * math.cos(radians) * -1)

    def set_item_angle(self) -> None:
        """Point the blade away from the player, turning further mid-swing."""
        self.angle = self.player.player_mouse_angle - 120 - 90
        rotation = self.angle
        if self.is_attacking:
            rotation += self.attack_sw.current_time * 15
        self.sprite.rotation = rotation % 360

    def init_attack(self) -> None:
        """Start a swing and its cooldown."""
        self.attack_sw.is_stop = False
        self.cooldown_sw.is_stop = False
        self.charge = 0
        self.game.start_sfx("SwordSwing")

    def handle_enemy_collision(self) -> None:
        """While swinging, hit enemies and destroy projectiles under the blade."""
        if not self.is_attacking:
            return
        blade = self.sprite.global_bounds()
        owner = self.player.position
        for enemy in self.game.current_level.enemy_list:
            enemy_pos = enemy.sprite.position
            if not enemy.is_hit and enemy.sprite.global_bounds().intersects(blade):
                attack_degree = int(
                    math.atan2(owner.y - enemy_pos.y, owner.x - enemy_pos.x)
                    * 180
                    / math.pi
                )
                enemy.hit(attack_degree - 180, 12, self.damage)
            if enemy.has_projectiles:
                for projectile in enemy.projectiles:
                    if projectile.sprite.global_bounds().intersects(blade):
                        projectile.end_of_life = True
                        self.game.start_sfx("FireBusrt")