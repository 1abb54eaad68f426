from types import SimpleNamespace

import pytest

from dungeon.geometry import RED, Rect, Sprite, Vector2
from dungeon.item import Item
from dungeon.player import Player


class FakeWindow:
    def __init__(self):
        self.drawn = []

    def draw(self, obj):
        self.drawn.append(obj)


class FakeGame:
    def __init__(self):
        self.sprite_sheet = object()
        self.current_level = None
        self.time_unit = 1.0
        self.window = FakeWindow()
        self.sounds = []
        self.taken_keys = {}
        self.mouse_pos = Vector2(0.0, 0.0)
        self.game_over = False

    def start_sfx(self, name):
        self.sounds.append(name)


def make_sprite_at(x, y, width=16, height=16):
    return Sprite(
        texture_rect=Rect(0, 0, width, height),
        position=Vector2(x, y),
        origin=Vector2(width / 2, height / 2),
        scale=Vector2(3, 3),
    )


@pytest.fixture
def game():
    return FakeGame()


@pytest.fixture
def player(game):
    hero = Player(game)
    game.current_level = SimpleNamespace(
        solid_tiles_rect=[], enemy_list=[], consumable_list=[]
    )
    hero.set_position(100.0, 100.0)
    hero.position = Vector2(100.0, 100.0)
    return hero


def test_initial_stats(player):
    assert player.max_hp == 3
    assert player.current_hp == 3
    assert player.key_count == 0
    assert player.speed == 7.0


def test_sprite_origin_and_region(player):
    assert player.sprite.texture_rect == Rect(224, 236, 16, 20)
    assert player.sprite.origin.x == 8.0
    assert player.sprite.origin.y == pytest.approx(20 / 1.5)


def test_weapon_belongs_to_player(player):
    assert isinstance(player.weapon, Item)
    assert player.weapon.player is player


def test_hit_costs_one_heart_then_knockback_protects(player, game):
    player.hit(0, 14.0)
    assert player.current_hp == 2
    assert not player.kb_stopwatch.is_stop
    assert player.sprite.color == RED
    player.hit(0, 14.0)
    assert player.current_hp == 2
    assert game.sounds == ["Hit2", "Hit2"]


def test_mouse_angle(player, game):
    game.mouse_pos = Vector2(200.0, 100.0)
    player.set_mouse_angle()
    assert player.player_mouse_angle == pytest.approx(180.0)


def test_update_flips_sprite_with_direction(player):
    player.direction = Vector2(-1.0, 0.0)
    player.update()
    assert player.sprite.scale == Vector2(-3.0, 3.0)
    player.direction = Vector2(1.0, 0.0)
    player.update()
    assert player.sprite.scale == Vector2(3.0, 3.0)


def test_update_sets_game_over_when_dead(player, game):
    player.current_hp = 0
    player.update()
    assert player.player_mouse_angle == pytest.approx(45.0)
    assert player.current_hp == 0
    assert game.game_over


def test_potion_heals_when_hurt(player, game):
    potion = SimpleNamespace(
        sprite=make_sprite_at(100, 100), name="potion", id=None, end_of_life=False
    )
    game.current_level.consumable_list.append(potion)
    player.current_hp = 2
    player.handle_consumable_collision()
    assert player.current_hp == 3
    assert potion.end_of_life
    assert game.sounds == ["PotionPickup"]


def test_potion_ignored_at_full_health(player, game):
    potion = SimpleNamespace(
        sprite=make_sprite_at(100, 100), name="potion", id=None, end_of_life=False
    )
    game.current_level.consumable_list.append(potion)
    player.handle_consumable_collision()
    assert player.current_hp == 3
    assert not potion.end_of_life


def test_key_pickup_records_taken_key(player, game):
    key = SimpleNamespace(
        sprite=make_sprite_at(100, 100), name="key", id=2, end_of_life=False
    )
    game.current_level.consumable_list.append(key)
    player.handle_consumable_collision()
    assert player.key_count == 1
    assert key.end_of_life
    assert game.taken_keys == {2: True}
    assert game.sounds == ["KeyPickup"]


def test_distant_consumable_not_collected(player, game):
    key = SimpleNamespace(
        sprite=make_sprite_at(900, 900), name="key", id=2, end_of_life=False
    )
    game.current_level.consumable_list.append(key)
    player.handle_consumable_collision()
    assert player.key_count == 0
    assert not key.end_of_life


def test_touching_enemy_hurts(player, game):
    enemy = SimpleNamespace(
        sprite=make_sprite_at(110, 100),
        kb_force=14.0,
        has_projectiles=False,
        projectiles=[],
    )
    game.current_level.enemy_list.append(enemy)
    player.handle_enemy_collision()
    assert player.current_hp == 2
    assert player.kb_stopwatch.stop_time == 14.0


def test_projectile_hurts_and_is_destroyed(player, game):
    projectile = SimpleNamespace(sprite=make_sprite_at(100, 105), end_of_life=False)
    enemy = SimpleNamespace(
        sprite=make_sprite_at(900, 900),
        kb_force=15.0,
        has_projectiles=True,
        projectiles=[projectile],
    )
    game.current_level.enemy_list.append(enemy)
    player.handle_enemy_collision()
    assert projectile.end_of_life
    assert player.current_hp == 2


def test_render_draws_weapon_then_player(player, game):
    player.render()
    assert game.window.drawn == [player.weapon.sprite, player.sprite]