"""The game window, main loop and global game state."""

from __future__ import annotations

import math
import sys
import time
from pathlib import Path
from typing import Any, Sequence

import pygame

from dungeon.audio import SfxPlayer
from dungeon.geometry import WHITE, Color, Rect, Sprite, Vector2, mirrored_vector
from dungeon.hud import Hud
from dungeon.player import Player
from dungeon.world1 import level_3a

RESOURCE_DIR = Path("res")
SPRITE_SHEET = RESOURCE_DIR / "0x72_16x16DungeonTileset.v4.png"
SFX_FILE = RESOURCE_DIR / "sfx.wav"
MUSIC_FILE = RESOURCE_DIR / "033253562-dungeon.wav"

BACKGROUND: Color = (96, 8, 64)
START_POSITION = (20 * 48, 20 * 48)
FULLSCREEN_SIZE = (1920, 1080)
WINDOWED_SIZE = (1280, 720)
FRAMERATE_LIMIT = 144
WINDOW_TITLE = "Dungeon"
_WHEEL_BUTTONS = (4, 5)


class _Window:
    """A pygame display that knows how to draw sprites and text."""

    def __init__(self, fullscreen: bool) -> None:
        size = FULLSCREEN_SIZE if fullscreen else WINDOWED_SIZE
        flags = pygame.FULLSCREEN if fullscreen else pygame.NOFRAME
        pygame.display.set_caption(WINDOW_TITLE)
        self.surface = pygame.display.set_mode(size, flags)
        self.is_open = True
        self._clock = pygame.time.Clock()

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    def close(self) -> None:
        self.is_open = False

    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def display(self) -> None:
        pygame.display.flip()
        self._clock.tick(FRAMERATE_LIMIT)

    def draw(self, sprite: Sprite) -> None:
        texture = sprite.texture
        if texture is None:
            return
        rect = sprite.texture_rect
        area = pygame.Rect(
            int(rect.left), int(rect.top), int(abs(rect.width)), int(abs(rect.height))
        ).clip(texture.get_rect())
        if area.width == 0 or area.height == 0:
            return
        sx, sy = sprite.scale.x, sprite.scale.y
        width = max(1, round(area.width * abs(sx)))
        height = max(1, round(area.height * abs(sy)))
        image = pygame.transform.scale(texture.subsurface(area), (width, height))
        if sx < 0 or sy < 0:
            image = pygame.transform.flip(image, sx < 0, sy < 0)
        if sprite.color != WHITE:
            image.fill((*sprite.color, 255), special_flags=pygame.BLEND_RGBA_MULT)

        pivot_x = sprite.origin.x * abs(sx)
        pivot_y = sprite.origin.y * abs(sy)
        if sx < 0:
            pivot_x = width - pivot_x
        if sy < 0:
            pivot_y = height - pivot_y
        cx, cy = width / 2 - pivot_x, height / 2 - pivot_y
        theta = math.radians(sprite.rotation)
        rx = cx * math.cos(theta) - cy * math.sin(theta)
        ry = cx * math.sin(theta) + cy * math.cos(theta)
        if sprite.rotation:
            image = pygame.transform.rotate(image, -sprite.rotation)
        target = image.get_rect(
            center=(round(sprite.position.x + rx), round(sprite.position.y + ry))
        )
        self.surface.blit(image, target)

    def draw_rect(self, rect: Rect, color: Color) -> None:
        pygame.draw.rect(
            self.surface,
            color,
            pygame.Rect(
                round(rect.left), round(rect.top), round(rect.width), round(rect.height)
            ),
        )

    def blit_centered(self, surface: pygame.Surface, x: float, y: float) -> None:
        self.surface.blit(surface, surface.get_rect(center=(round(x), round(y))))


class _BackgroundMusic:
    """Looping background track; silently absent when it cannot be loaded."""

    def __init__(self, path: Path) -> None:
        self._loaded = False
        self._started = False
        try:
            pygame.mixer.music.load(str(path))
            self._loaded = True
        except (pygame.error, OSError, NotImplementedError):
            self._loaded = False

    def is_playing(self) -> bool:
        if self._loaded:
            return bool(pygame.mixer.music.get_busy())
        return self._started

    def play(self) -> None:
        self._started = True
        if self._loaded:
            try:
                pygame.mixer.music.play(loops=-1)
            except pygame.error:
                self._loaded = False


class Game:
    """Owns the window, the player, the current level and the run's state."""

    def __init__(self, fullscreen: bool) -> None:
        pygame.init()
        self.window = _Window(fullscreen)
        width, height = self.window.size
        self.window_bound = Rect(0.0, 0.0, float(width), float(height))
        self.sprite_sheet = pygame.image.load(str(SPRITE_SHEET)).convert_alpha()
        self.sprite_size = 16

        self.time_unit = 1.0
        self.current_frame = 1
        self.framerate = 0.0
        self.current_level: Any = None
        self.dead_enemies: dict[int, bool] = {}
        self.taken_keys: dict[int, bool] = {}
        self.mouse_pos = Vector2(0.0, 0.0)

        self.player = Player(self)
        self.hud = Hud(self)

        try:
            self.sfx: SfxPlayer | None = SfxPlayer(SFX_FILE)
        except (OSError, ValueError):
            self.sfx = None
        self.background_music = _BackgroundMusic(MUSIC_FILE)

        self._frame_start = time.monotonic()
        self._game_clock_start = time.monotonic()
        self.game_time = 0.0

        self.pause = False
        self.game_over = False
        self.help_menu = True
        self.win_state = False

    def init_level(self, level: Any, player_pos: Vector2) -> None:
        """Make ``level`` current and place the player at ``player_pos``."""
        self.current_level = level
        for enemy in level.enemy_list:
            if self.dead_enemies.get(enemy.id):
                enemy.is_dead = True
        self.player.collision_bounds = level.solid_tiles_rect
        level.enemies_set_collision_bounds()
        self.player.set_position(player_pos.x, player_pos.y)

    def restart(self) -> None:
        """Start a new run from the first room."""
        self.player = Player(self)
        self.dead_enemies.clear()
        self.taken_keys.clear()
        self._game_clock_start = time.monotonic()
        self.init_level(level_3a(self), Vector2(*START_POSITION))
        self.game_over = False
        self.win_state = False

    def is_open(self) -> bool:
        return self.window.is_open

    def update(self) -> None:
        """Advance the game by one frame."""
        now = time.monotonic()
        if self.current_frame % 20 == 0:
            elapsed = now - self._frame_start
            if elapsed > 0:
                self.framerate = 1.0 / elapsed
                self.time_unit = elapsed * 60
        self._frame_start = now
        self.current_frame += 1

        self.poll_events()
        if self.sfx is not None:
            self.sfx.update()
        self.mouse_pos = Vector2(*pygame.mouse.get_pos())

        if self.pause or self.game_over or self.help_menu:
            return

        self.handle_key_press()
        self.player.step()
        self.player.update()
        self.current_level.update_finish_rects()
        self.current_level.update_enemies()
        self.current_level.update_consumables()
        self.current_level.update_door()

    def render(self) -> None:
        """Draw the frame: level, player, then the overlays."""
        self.window.clear(BACKGROUND)
        self.current_level.render()
        self.player.render()
        self.hud.draw_framerate()
        if self.win_state:
            self.hud.draw_win_screen()
        if self.pause and not self.game_over:
            self.hud.draw_pause()
        if self.game_over:
            self.hud.draw_game_over()
        if self.help_menu:
            self.hud.draw_help_menu()
        self.hud.draw_hearts()
        self.hud.draw_keys()
        self.window.display()

    def poll_events(self) -> None:
        """Handle window closing, attacks, pausing and restarting."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.window.close()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button in _WHEEL_BUTTONS:
                    continue
                if event.button == 1 and self.player.weapon.cooldown_sw.is_stop:
                    self.player.weapon.init_attack()
                self.help_menu = False
            elif event.type == pygame.KEYDOWN:
                self.help_menu = False
                if event.key == pygame.K_ESCAPE:
                    self.pause = not self.pause
                elif event.key == pygame.K_RETURN:
                    if self.game_over:
                        self.restart()
                elif event.key == pygame.K_r:
                    if self.win_state:
                        self.restart()

    def handle_key_press(self) -> None:
        """Set the player's direction from the W, A, S and D keys."""
        pressed = pygame.key.get_pressed()
        speed = self.player.speed
        dx = dy = 0.0
        if pressed[pygame.K_w]:
            dy -= speed
        if pressed[pygame.K_a]:
            dx -= speed
        if pressed[pygame.K_s]:
            dy += speed
        if pressed[pygame.K_d]:
            dx += speed
        if dx != 0.0 and dy != 0.0:
            dx /= 1.5
            dy /= 1.5
        self.player.direction = Vector2(dx, dy)

    def activate_win_state(self) -> None:
        self.win_state = True
        self.game_time = time.monotonic() - self._game_clock_start

    def start_sfx(self, name: str) -> None:
        if self.sfx is not None:
            self.sfx.start(name)

    def mirrored_vector(
        self, vec: Vector2, axis: tuple[bool, bool], center_offset: bool
    ) -> Vector2:
        return mirrored_vector(vec, axis, self.window_bound, center_offset)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; a first argument starting with 'w' opens a window."""
    args = list(sys.argv[1:] if argv is None else argv)
    fullscreen = not args or not args[0].startswith("w")
    game = Game(fullscreen)
    try:
        game.init_level(level_3a(game), Vector2(*START_POSITION))
        while game.is_open():
            game.update()
            game.render()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())