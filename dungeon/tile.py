"""Static map tiles cut from the sprite sheet."""

from __future__ import annotations

from typing import Any

from dungeon.geometry import Rect, Sprite, Vector2


class Tile:
    """One square of a level's background or foreground.

    ``position`` is the (column, row) of the tile on the level grid and
    ``rotation`` counts quarter turns.
    """

    def __init__(
        self,
        game: Any,
        tile_id: int,
        rotation: int,
        scale: float,
        position: tuple[int, int],
    ) -> None:
        self.game = game
        size = float(game.sprite_size)
        sprites_per_line = int(game.sprite_sheet.get_width() / size)
        row, column = divmod(tile_id, sprites_per_line)
        col, grid_row = position
        cell = size * scale
        self.sprite = Sprite(
            texture=game.sprite_sheet,
            texture_rect=Rect(
                column * game.sprite_size,
                row * game.sprite_size,
                game.sprite_size,
                game.sprite_size,
            ),
            origin=Vector2(size / 2, size / 2),
            rotation=(rotation * 90.0) % 360,
            scale=Vector2(scale, scale),
            position=Vector2(col * cell + cell / 2, grid_row * cell + cell / 2),
        )

    def render(self) -> None:
        self.game.window.draw(self.sprite)