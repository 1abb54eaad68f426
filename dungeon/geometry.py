"""Vectors, rectangles and sprite placement used by every game object."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
BLACK: Color = (0, 0, 0)


@dataclass
class Vector2:
    """A mutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def copy(self) -> Vector2:
        return Vector2(self.x, self.y)


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles overlap with a non-empty area."""
        min_x1, max_x1 = sorted((self.left, self.right))
        min_y1, max_y1 = sorted((self.top, self.bottom))
        min_x2, max_x2 = sorted((other.left, other.right))
        min_y2, max_y2 = sorted((other.top, other.bottom))
        inter_left = max(min_x1, min_x2)
        inter_top = max(min_y1, min_y2)
        inter_right = min(max_x1, max_x2)
        inter_bottom = min(max_y1, max_y2)
        return inter_left < inter_right and inter_top < inter_bottom


@dataclass
class Sprite:
    """A region of a texture placed, scaled and rotated in the world."""

    texture: Any = None
    texture_rect: Rect = field(default_factory=Rect)
    position: Vector2 = field(default_factory=Vector2)
    origin: Vector2 = field(default_factory=Vector2)
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))
    rotation: float = 0.0
    color: Color = WHITE

    def global_bounds(self) -> Rect:
        """Bounding box of the transformed sprite in world coordinates."""
        width = abs(self.texture_rect.width)
        height = abs(self.texture_rect.height)
        theta = math.radians(self.rotation)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        xs, ys = [], []
        for px, py in ((0.0, 0.0), (width, 0.0), (0.0, height), (width, height)):
            lx = (px - self.origin.x) * self.scale.x
            ly = (py - self.origin.y) * self.scale.y
            xs.append(lx * cos_t - ly * sin_t + self.position.x)
            ys.append(lx * sin_t + ly * cos_t + self.position.y)
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def move(self, dx: float, dy: float) -> None:
        self.position = Vector2(self.position.x + dx, self.position.y + dy)


def deg_to_rad(degree: float) -> float:
    return degree / 180 * math.pi


def rad_to_deg(radian: float) -> float:
    return radian * 180 / math.pi


def mirrored_vector(
    vec: Vector2, axis: tuple[bool, bool], bounds: Rect, center_offset: bool
) -> Vector2:
    """Reflect a point across the window along the chosen axes.

    With ``center_offset`` the mirrored point is nudged back inside the
    screen so that the player does not land on a level exit again.
    """
    x, y = vec.x, vec.y
    mirror_x, mirror_y = axis
    if mirror_x:
        x = bounds.width - x
        nudge = 10 if center_offset else 0
        x = x + nudge if x < bounds.width / 2 else x - nudge
    if mirror_y:
        y = bounds.height - y
        if y < bounds.height / 2:
            y += 51 if center_offset else 0
    return Vector2(x, y)