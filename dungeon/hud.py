"""On-screen text and the heads-up display of hearts and keys."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

import pygame

from dungeon.geometry import WHITE, Rect, Sprite, Vector2

FONT_PATH = Path("res") / "PressStart2P-vaV7.ttf"
FONT_SIZE = 20
LINE_SPACING = 1.4
ICON_STEP = 45
ICON_SCALE = 2.5
HELP_LINES = (
    (-1.0, "How to play:"),
    (1.0, "The sword follows the cursor"),
    (2.0, "Left Click to attack"),
    (3.0, "W,A,S,D for moving"),
)


def format_game_time(seconds: float) -> str:
    """The line of the win screen giving the time a run took."""
    whole = int(seconds)
    minutes = (whole - whole % 60) // 60
    secs = whole - minutes * 60
    centiseconds = int((seconds - whole) * 100)
    return f"Time : {minutes}:{secs}.{centiseconds}"


def _load_font(path: Path, size: int) -> pygame.font.Font:
    pygame.font.init()
    try:
        return pygame.font.Font(str(path), size)
    except (OSError, pygame.error):
        return pygame.font.Font(None, size)


def _icon(texture: Any, rect: Rect) -> Sprite:
    return Sprite(
        texture=texture, texture_rect=rect, scale=Vector2(ICON_SCALE, ICON_SCALE)
    )


class Hud:
    """Draws hearts, keys, the framerate and the menus over the level."""

    def __init__(self, game: Any) -> None:
        self.game = game
        self.font = _load_font(FONT_PATH, FONT_SIZE)
        sheet = game.sprite_sheet
        self.heart_sprite = _icon(sheet, Rect(0, 16 * 15, 16, 16))
        self.heart_sprite_empty = _icon(sheet, Rect(16, 16 * 15, 16, 16))
        self.key_sprite = _icon(sheet, Rect(32, 257, 16, 14))

    @property
    def _size(self) -> tuple[float, float]:
        bound = self.game.window_bound
        return bound.width, bound.height

    def render_text(self, text: str) -> pygame.Surface:
        """Render possibly multi-line text onto a transparent surface."""
        lines = [self.font.render(line, True, WHITE) for line in text.split("\n")]
        step = round(self.font.get_linesize() * LINE_SPACING)
        width = max(surface.get_width() for surface in lines)
        height = step * (len(lines) - 1) + lines[-1].get_height()
        block = pygame.Surface((max(width, 1), max(height, 1)), pygame.SRCALPHA)
        for number, surface in enumerate(lines):
            block.blit(surface, (0, number * step))
        return block

    def write(self, text: str, x: float, y: float) -> None:
        """Draw text centred on the point (x, y)."""
        self.game.window.blit_centered(self.render_text(text), x, y)

    def _draw_row(self, sprite: Sprite, count: int, top: float) -> None:
        for index in range(count):
            placed = replace(sprite, position=Vector2(5 + ICON_STEP * index, top))
            self.game.window.draw(placed)

    def draw_hearts(self) -> None:
        player = self.game.player
        self._draw_row(self.heart_sprite_empty, player.max_hp, 0)
        self._draw_row(self.heart_sprite, player.current_hp, 0)

    def draw_keys(self) -> None:
        self._draw_row(self.key_sprite, self.game.player.key_count, 45)

    def draw_framerate(self) -> None:
        width, _ = self._size
        self.write(str(int(self.game.framerate)), width - 40.0, 18.0)

    def draw_pause(self) -> None:
        width, height = self._size
        self.write("Paused", width / 2.0, height / 3.0)

    def draw_game_over(self) -> None:
        width, height = self._size
        self.write("Game Over", width / 2.0, height / 3.0)
        self.write("Press Enter to restart", width / 2.0, height / 1.05)

    def draw_help_menu(self) -> None:
        width, height = self._size
        for offset, line in HELP_LINES:
            self.write(line, width / 2.0, height / 3.0 + 40.0 * offset)
        self.write("Press any key to start", width / 2.0, height / 1.05)

    def draw_win_screen(self) -> None:
        width, height = self._size
        self.write(
            "Thanks  for  playing\nPress 'r' to restart",
            width / 2.0,
            height / 2.0 - 90.0,
        )
        self.write(format_game_time(self.game.game_time), width / 2.0, height / 2.0)