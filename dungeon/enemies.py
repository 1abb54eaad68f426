"""The kinds of enemies that populate the dungeon."""

from __future__ import annotations

import math
import random
from typing import Any

from dungeon.enemy import Enemy
from dungeon.geometry import Rect, Vector2, deg_to_rad
from dungeon.stopwatch import Stopwatch


class Zombie(Enemy):
    """Shambles towards the player."""

    def __init__(self, game: Any, start_position: Vector2, enemy_id: int) -> None:
        super().__init__(game, start_position, enemy_id)
        self.scale = 3.0
        self.max_hp = 100
        self.current_hp = 100
        self.damage = 20
        self.sheet_rect = Rect(18, 160, 12, 16)
        self.speed = 3.0
        self.kb_force = 14.0
        self.make_sprite()

    def update(self) -> None:
        self._chase(self.speed)


class ArmoredZombie(Enemy):
    """A slower, tougher zombie."""

    def __init__(self, game: Any, start_position: Vector2, enemy_id: int) -> None:
        super().__init__(game, start_position, enemy_id)
        self.scale = 3.0
        self.max_hp = 160
        self.current_hp = 160
        self.damage = 20
        self.sheet_rect = Rect(48, 160, 16, 16)
        self.speed = 2.5
        self.kb_force = 14.0
        self.make_sprite()

    def update(self) -> None:
        self._chase(self.speed)


class Sorcerer(Enemy):
    """Stands still and casts bolts at the player; being hit delays the cast."""

    def __init__(self, game: Any, start_position: Vector2, enemy_id: int) -> None:
        super().__init__(game, start_position, enemy_id)
        self.projectile_sw = Stopwatch(60.0, game, True)
        self.scale = 3.0
        self.max_hp = 100
        self.current_hp = 100
        self.damage = 20
        self.sheet_rect = Rect(81, 144, 15, 16)
        self.speed = 480.0
        self.kb_force = 15.0
        self.has_projectiles = True
        self.make_sprite()

    def update(self) -> None:
        if self.is_hit:
            self.projectile_sw.current_time = 0.0
        if not self.projectile_sw.update():
            self._fire(Rect(34, 245, 12, 10), 0, 12)


class Skeleton(Enemy):
    """Throws bones at the player at a steady pace."""

    def __init__(self, game: Any, start_position: Vector2, enemy_id: int) -> None:
        super().__init__(game, start_position, enemy_id)
        self.projectile_sw = Stopwatch(60.0, game, True)
        self.scale = 3.0
        self.max_hp = 60
        self.current_hp = 60
        self.damage = 20
        self.sheet_rect = Rect(18, 144, 15, 16)
        self.speed = 8.0
        self.kb_force = 15.0
        self.has_projectiles = True
        self.make_sprite()

    def update(self) -> None:
        if not self.projectile_sw.update():
            self._fire(Rect(65, 243, 13, 12), 45, 10)


class Ghost(Enemy):
    """Drifts through walls towards the player."""

    def __init__(self, game: Any, start_position: Vector2, enemy_id: int) -> None:
        super().__init__(game, start_position, enemy_id)
        self.max_hp = 100
        self.current_hp = 100
        self.damage = 20
        self.sheet_rect = Rect(50, 208, 14, 16)
        self.speed = 8.0
        self.kb_force = 14.0
        self.has_collisions = False
        self.make_sprite()
        self.sprite.scale = Vector2(4.0, 4.0)

    def update(self) -> None:
        self._chase(3)


class BigSlime(Enemy):
    """Stays put and spawns small slimes; a hit resets the spawn timer."""

    def __init__(self, game: Any, start_position: Vector2, enemy_id: int) -> None:
        super().__init__(game, start_position, enemy_id)
        self.child_sw = Stopwatch(80, game, True)
        self.scale = 3.0
        self.max_hp = 60
        self.current_hp = 60
        self.damage = 20
        self.sheet_rect = Rect(80, 192, 16, 16)
        self.speed = 8.0
        self.kb_force = 14.0
        self.child_sw.current_time = 60.0
        self.make_sprite()

    def update(self) -> None:
        if self.is_hit:
            self.child_sw.current_time = 0.0
        if not self.child_sw.update():
            self.game.current_level.enemy_list.append(
                SmallSlime(self.game, self.position.copy(), -1)
            )


class SmallSlime(Enemy):
    """Spawned by a big slime; chases the player and drops nothing."""

    def __init__(self, game: Any, start_position: Vector2, enemy_id: int) -> None:
        super().__init__(game, start_position, enemy_id)
        self.scale = 3.0
        self.max_hp = 30
        self.current_hp = 30
        self.damage = 20
        self.sheet_rect = Rect(81, 214, 14, 12)
        self.speed = 8.0
        self.kb_force = 14.0
        self.drops_potions = False
        self.make_sprite()

    def update(self) -> None:
        self._chase(3)


class BigFire(Enemy):
    """Follows the player, leaving a trail of short-lived flames."""

    def __init__(self, game: Any, start_position: Vector2, enemy_id: int) -> None:
        super().__init__(game, start_position, enemy_id)
        self.child_sw = Stopwatch(20.0, game, True)
        self.scale = 3.0
        self.max_hp = 60
        self.current_hp = 60
        self.damage = 20
        self.sheet_rect = Rect(32, 192, 16, 16)
        self.speed = 2.5
        self.kb_force = 14.0
        self.make_sprite()

    def update(self) -> None:
        if not self.child_sw.update():
            self.game.current_level.enemy_list.append(
                SmallFire(self.game, self.position.copy(), -1)
            )
        self._chase(self.speed)


class SmallFire(Enemy):
    """An invincible flame that burns out after a fixed number of frames."""

    def __init__(self, game: Any, start_position: Vector2, enemy_id: int) -> None:
        super().__init__(game, start_position, enemy_id)
        self.scale = 3.0
        self.max_hp = 30
        self.current_hp = 30
        self.damage = 20
        self.sheet_rect = Rect(33, 208, 14, 16)
        self.speed = 8.0
        self.kb_force = 11.0
        self.drops_potions = False
        self.is_invincible = True
        self.lifetime_max_frame = 160
        self.lifetime_current_frame = 0
        self.make_sprite()

    def update(self) -> None:
        self.lifetime_current_frame += 1
        if self.lifetime_current_frame >= self.lifetime_max_frame:
            self.is_dead = True


class BossZombie(Enemy):
    """The final boss: wanders between quadrants shooting, then dashes."""

    def __init__(self, game: Any, start_position: Vector2, enemy_id: int) -> None:
        super().__init__(game, start_position, enemy_id)
        self.projectile_sw = Stopwatch(30.0, game, True)
        self.dash_charge_sw = Stopwatch(80.0, game, False)
        self.rng = random.Random()
        self.scale = 3.0
        self.max_hp = 600
        self.current_hp = 600
        self.sheet_rect = Rect(102, 182, 20, 26)
        self.speed = 5.0
        self.dash_speed = 14.0
        self.kb_force = 14.0
        self.has_projectiles = True
        self.has_healthbar = True
        self.destination_pt = Rect(700, 640, 5, 5)
        self.is_in_dash = False
        self.movement_count = 0
        self.max_movement_count = 6
        self.dash_count = 0
        self.max_dash_count = 3
        self.dash_angle = 0.0
        self.make_sprite()

    def update(self) -> None:
        if self.current_hp <= 0:
            self.game.activate_win_state()
        if self.is_in_dash:
            self._dash()
        else:
            self._wander()

    def _wander(self) -> None:
        here = self.sprite.position.copy()
        if not self.projectile_sw.update():
            projectile = self._fire(Rect(152, 98, 6, 13), 90, 10)
            scale = projectile.sprite.scale
            projectile.sprite.scale = Vector2(scale.x * 1.3, scale.y * 1.3)

        if self.sprite.global_bounds().intersects(self.destination_pt):
            self._pick_destination(here)
            self.movement_count += 1
            if self.movement_count >= self.max_movement_count:
                self.is_in_dash = True
                self.dash_charge_sw.is_stop = False
                self.movement_count = 0
        else:
            angle = math.atan2(
                self.destination_pt.top - here.y, self.destination_pt.left - here.x
            )
            self.direction = Vector2(
                self.speed * math.cos(angle), self.speed * math.sin(angle)
            )

    def _pick_destination(self, here: Vector2) -> None:
        """Choose a random point in a screen quadrant other than the current one."""
        x = self.rng.randrange(480) + 480
        y = self.rng.randrange(288) + 240
        current_quad = (1 if here.x > 960 else 0) + (2 if here.y > 588 else 0)
        destination_quad = self.rng.randrange(3)
        if destination_quad >= current_quad:
            destination_quad += 1
        if destination_quad in (1, 3):
            x += 480
        if destination_quad in (2, 3):
            y += 240
        self.destination_pt.left = x
        self.destination_pt.top = y

    def _dash(self) -> None:
        charge = self.dash_charge_sw
        if not charge.is_stop:
            if charge.update():
                wobble = (int(charge.current_time / 3.0) % 2) - 0.5
                self.direction.x += wobble * 4.0
            else:
                self.dash_angle = self._angle_to_player() + 0.0
            return

        radians = deg_to_rad(self.dash_angle)
        self.direction = Vector2(
            self.dash_speed * math.sin(radians), self.dash_speed * math.cos(radians)
        )
        hit_x, hit_y = self.wall_collision_check()
        if hit_x or hit_y:
            self.dash_count += 1
            if self.dash_count > self.max_dash_count:
                self.is_in_dash = False
                self.dash_count = 0
            else:
                charge.is_stop = False