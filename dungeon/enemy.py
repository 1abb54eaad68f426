"""Common behaviour of every hostile creature."""

from __future__ import annotations

import math
from typing import Any

from dungeon.entity import Entity
from dungeon.geometry import BLACK, RED, WHITE, Rect, Vector2, rad_to_deg
from dungeon.projectile import Projectile


class Enemy(Entity):
    """An entity that can be hit, dies, and may shoot projectiles.

    The level drives an enemy each frame by calling ``update_common``,
    then ``step`` and finally the kind-specific ``update``.
    """

    def __init__(self, game: Any, start_position: Vector2, enemy_id: int) -> None:
        super().__init__(game)
        self.set_position(start_position.x, start_position.y)
        self.max_hp = 0
        self.current_hp = 0
        self.damage = 0
        self.kb_force = 0.0
        self.id = enemy_id
        self.is_hit = False
        self.is_dead = False
        self.has_projectiles = False
        self.drops_potions = True
        self.is_invincible = False
        self.has_healthbar = False
        self.projectiles: list[Any] = []
        game.dead_enemies.setdefault(enemy_id, False)

    def hit(self, angle: float, force: float, damage: float) -> None:
        """Take damage (unless still reeling) and get knocked back."""
        if self.is_invincible:
            return
        if self.kb_stopwatch.is_stop:
            self.current_hp -= damage
        self.start_knockback(angle, force)
        self.is_hit = True
        self.sprite.color = RED
        self.game.start_sfx("Hit1")

    def health_bar_rects(self) -> tuple[Rect, Rect]:
        """The outline and the filled part of the boss health bar."""
        width = self.game.window_bound.width
        outline = Rect(150.0, 8.0, width - 300.0, 19.0)
        filled = (width - 308.0) / float(self.max_hp) * float(self.current_hp)
        bar = Rect(154.0, 12.0, filled, 11.0)
        return outline, bar

    def render_health_bar(self) -> None:
        outline, bar = self.health_bar_rects()
        self.game.window.draw_rect(outline, BLACK)
        self.game.window.draw_rect(bar, RED)

    def update_common(self) -> None:
        """Death check, hit recovery and projectile bookkeeping."""
        if self.current_hp <= 0:
            self.is_dead = True
        if self.sprite.color == WHITE:
            self.is_hit = False
        if self.has_projectiles:
            self.projectiles = [p for p in self.projectiles if not p.end_of_life]
            for projectile in self.projectiles:
                projectile.update()

    def update(self) -> None:
        """Behaviour specific to a kind of enemy; a plain enemy has none."""

    def render(self) -> None:
        super().render()
        if self.has_healthbar:
            self.render_health_bar()
        if self.has_projectiles:
            for projectile in self.projectiles:
                projectile.render()

    def _chase(self, speed: float) -> None:
        """Head straight for the player at ``speed``."""
        here = self.sprite.position
        target = self.game.player.position
        angle = math.atan2(target.y - here.y, target.x - here.x)
        self.direction = Vector2(speed * math.cos(angle), speed * math.sin(angle))

    def _angle_to_player(self) -> float:
        """Firing angle towards the player in the projectile's convention."""
        target = self.game.player.position
        return (
            rad_to_deg(
                math.atan2(
                    target.y - self.position.y,
                    (target.x - self.position.x) * -1,
                )
            )
            - 90
        )

    def _fire(self, sheet_rect: Rect, sprite_angle: float, speed: float) -> Projectile:
        projectile = Projectile(
            self.game,
            self.collision_bounds,
            sheet_rect,
            sprite_angle,
            self.position.copy(),
            self._angle_to_player(),
            speed,
        )
        self.projectiles.append(projectile)
        return projectile