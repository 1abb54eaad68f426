from types import SimpleNamespace

import pygame
import pytest

from dungeon.geometry import Rect
from dungeon.hud import Hud, format_game_time


class FakeWindow:
    def __init__(self):
        self.sprites = []
        self.texts = []

    def draw(self, sprite):
        self.sprites.append((sprite.texture_rect, sprite.position.copy()))

    def blit_centered(self, surface, x, y):
        self.texts.append((surface, x, y))


@pytest.fixture
def game(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    player = SimpleNamespace(max_hp=3, current_hp=2, key_count=2)
    return SimpleNamespace(
        sprite_sheet=pygame.Surface((64, 64)),
        window=FakeWindow(),
        window_bound=Rect(0, 0, 1280, 720),
        player=player,
        framerate=60.0,
        game_time=12.5,
    )


@pytest.fixture
def hud(game):
    return Hud(game)


def test_format_game_time_minutes_and_centiseconds():
    assert format_game_time(125.5) == "Time : 2:5.50"


def test_format_game_time_zero():
    assert format_game_time(0.0) == "Time : 0:0.0"


def test_format_game_time_exact_minute():
    assert format_game_time(60.25) == "Time : 1:0.25"


def test_hearts_draw_empty_then_full(hud, game):
    hud.draw_hearts()
    drawn = game.window.sprites
    assert len(drawn) == game.player.max_hp + game.player.current_hp
    empty = drawn[: game.player.max_hp]
    full = drawn[game.player.max_hp :]
    assert all(rect == hud.heart_sprite_empty.texture_rect for rect, _ in empty)
    assert all(rect == hud.heart_sprite.texture_rect for rect, _ in full)
    assert empty[0][1] == full[0][1]


def test_hearts_are_evenly_spaced(hud, game):
    hud.draw_hearts()
    xs = [pos.x for _, pos in game.window.sprites[: game.player.max_hp]]
    steps = {b - a for a, b in zip(xs, xs[1:])}
    assert len(steps) == 1
    assert steps.pop() > 0


def test_keys_drawn_below_hearts(hud, game):
    hud.draw_hearts()
    heart_y = game.window.sprites[0][1].y
    game.window.sprites.clear()
    hud.draw_keys()
    assert len(game.window.sprites) == game.player.key_count
    assert all(rect == hud.key_sprite.texture_rect for rect, _ in game.window.sprites)
    assert all(pos.y > heart_y for _, pos in game.window.sprites)


def test_no_keys_drawn_once_gate_opened(hud, game):
    game.player.key_count = -1
    hud.draw_keys()
    assert game.window.sprites == []


def test_framerate_near_right_edge(hud, game):
    hud.draw_framerate()
    [(_, x, y)] = game.window.texts
    assert x == game.window_bound.width - 40.0
    assert y < game.window_bound.height / 2


def test_pause_is_centred(hud, game):
    hud.draw_pause()
    [(_, x, y)] = game.window.texts
    assert (x, y) == (game.window_bound.width / 2, game.window_bound.height / 3)


def test_game_over_has_two_lines(hud, game):
    hud.draw_game_over()
    texts = game.window.texts
    assert len(texts) == 2
    assert texts[0][2] < texts[1][2]


def test_help_menu_lines_go_down(hud, game):
    hud.draw_help_menu()
    texts = game.window.texts
    assert len(texts) == 5
    ys = [y for _, _, y in texts]
    assert ys == sorted(ys)
    assert all(x == game.window_bound.width / 2 for _, x, _ in texts)


def test_win_screen_shows_time_under_message(hud, game):
    hud.draw_win_screen()
    texts = game.window.texts
    assert len(texts) == 2
    assert texts[0][2] < texts[1][2]
    assert texts[1][2] == game.window_bound.height / 2


def test_multiline_text_is_taller(hud):
    single = hud.render_text("Thanks  for  playing")
    double = hud.render_text("Thanks  for  playing\nPress 'r' to restart")
    assert double.get_height() > single.get_height()


def test_write_passes_position(hud, game):
    hud.write("3|3", 10.0, 20.0)
    [(surface, x, y)] = game.window.texts
    assert (x, y) == (10.0, 20.0)
    assert surface.get_width() > 0