from types import SimpleNamespace

import pytest

from dungeon.entity import Entity
from dungeon.geometry import RED, WHITE, Rect, Vector2


class FakeWindow:
    def __init__(self):
        self.drawn = []

    def draw(self, sprite):
        self.drawn.append(sprite)


def make_game(solid=(), time_unit=1.0, with_level=True):
    level = SimpleNamespace(solid_tiles_rect=list(solid)) if with_level else None
    return SimpleNamespace(
        time_unit=time_unit,
        sprite_sheet="sheet",
        current_level=level,
        window=FakeWindow(),
        window_bound=Rect(0, 0, 1920, 1080),
    )


def make_entity(game):
    entity = Entity(game)
    entity.sheet_rect = Rect(10, 20, 16, 16)
    entity.make_sprite()
    return entity


def test_collision_bounds_come_from_level():
    wall = Rect(0, 0, 48, 48)
    game = make_game([wall])
    assert Entity(game).collision_bounds == [wall]


def test_no_level_means_no_walls():
    assert Entity(make_game(with_level=False)).collision_bounds == []


def test_make_sprite_uses_sheet_rect():
    entity = make_entity(make_game())
    assert entity.sprite.texture_rect == Rect(10, 20, 16, 16)
    assert entity.sprite.origin == Vector2(8, 8)
    assert entity.sprite.texture == "sheet"


def test_step_moves_by_direction_and_time_unit():
    game = make_game(time_unit=2.0)
    entity = make_entity(game)
    entity.set_position(100, 100)
    entity.direction = Vector2(3, -1)
    entity.step()
    assert entity.position == Vector2(100 + 3 * 2.0, 100 - 1 * 2.0)
    assert entity.position == entity.sprite.position


def test_set_position_does_not_sync_position_until_step():
    entity = make_entity(make_game())
    entity.set_position(40, 50)
    assert entity.sprite.position == Vector2(40, 50)
    assert entity.position == Vector2(0, 0)
    entity.step()
    assert entity.position == Vector2(40, 50)


def test_wall_blocks_only_colliding_axis():
    wall = Rect(130, 0, 20, 1000)
    game = make_game([wall])
    entity = make_entity(game)
    entity.set_position(100, 100)
    entity.direction = Vector2(10, 5)
    assert entity.wall_collision_check() == (True, False)
    entity.step()
    assert entity.position.x == 100
    assert entity.position.y == 105


def test_without_collisions_entity_walks_through_walls():
    wall = Rect(130, 0, 20, 1000)
    entity = make_entity(make_game([wall]))
    entity.has_collisions = False
    entity.set_position(100, 100)
    entity.direction = Vector2(10, 0)
    entity.step()
    assert entity.position.x == 110


def test_start_knockback_truncates_angle():
    entity = make_entity(make_game())
    entity.start_knockback(-45.9, 9)
    assert entity.kb_angle == -45
    assert not entity.kb_stopwatch.is_stop
    assert entity.kb_stopwatch.stop_time == 9


def test_apply_knockback_follows_angle():
    entity = make_entity(make_game())
    entity.start_knockback(0, 5)
    entity.apply_knockback()
    assert entity.direction.x == pytest.approx(5)
    assert entity.direction.y == pytest.approx(0, abs=1e-9)


def test_knockback_pushes_then_ends():
    entity = make_entity(make_game())
    entity.set_position(500, 500)
    entity.sprite.color = RED
    entity.start_knockback(180, 5)
    entity.step()
    assert entity.position.x < 500
    for _ in range(10):
        entity.step()
    assert entity.kb_stopwatch.is_stop
    assert entity.direction == Vector2(0, 0)
    assert entity.sprite.color == WHITE


def test_render_draws_sprite():
    game = make_game()
    entity = make_entity(game)
    entity.render()
    assert game.window.drawn == [entity.sprite]