"""Basic scene items: rectangles, image-backed items and platforms."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

import pygame

PixmapSource = Union[pygame.Surface, str, "os.PathLike[str]", None]

PEN_WIDTH = 1.0
DEFAULT_PLATFORM_COLOR = (160, 160, 164)
DEFAULT_BORDER_COLOR = (0, 0, 0)


def load_pixmap(source: PixmapSource) -> pygame.Surface | None:
    """Return a surface for *source*, or None when there is nothing usable.

    A surface is returned as is; a path is loaded from disk.  An empty path
    or an image that cannot be read gives None.
    """
    if source is None:
        return None
    if isinstance(source, pygame.Surface):
        return source
    path = os.fspath(source)
    if not path:
        return None
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError):
        return None


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with floating point geometry."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def translated(self, dx: float, dy: float) -> Rect:
        """Return the rectangle moved by (dx, dy)."""
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def scaled(self, sx: float, sy: float) -> Rect:
        """Return the rectangle scaled about the origin, normalised."""
        left, right = sorted((self.left * sx, self.right * sx))
        top, bottom = sorted((self.top * sy, self.bottom * sy))
        return Rect(left, top, right - left, bottom - top)

    def intersects(self, other: Rect) -> bool:
        """Tell whether the two rectangles overlap with a non-empty area."""
        if self.is_empty or other.is_empty:
            return False
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )


class Item:
    """A positioned scene object drawn from an optional image."""

    def __init__(self, pixmap_path: PixmapSource = "") -> None:
        self.x = 0.0
        self.y = 0.0
        self.transform_scale: tuple[float, float] = (1.0, 1.0)
        self.pixmap: pygame.Surface | None = load_pixmap(pixmap_path)
        self.pixmap_offset: tuple[float, float] = (0.0, 0.0)
        self.pixmap_scale = 1.0

    @property
    def pos(self) -> tuple[float, float]:
        return (self.x, self.y)

    @pos.setter
    def pos(self, value: tuple[float, float]) -> None:
        self.x, self.y = float(value[0]), float(value[1])

    def set_pixmap(self, pixmap: pygame.Surface | None) -> None:
        """Replace the image shown by the item."""
        self.pixmap = pixmap

    def bounding_rect(self) -> Rect:
        """The item's extent in its own coordinates, given by its image."""
        if self.pixmap is None:
            return Rect()
        width, height = self.pixmap.get_size()
        ox, oy = self.pixmap_offset
        return Rect(ox, oy, width, height)

    def scene_bounding_rect(self) -> Rect:
        """The item's extent in scene coordinates."""
        sx, sy = self.transform_scale
        return self.bounding_rect().scaled(sx, sy).translated(self.x, self.y)

    def collides_with(self, other: Item) -> bool:
        """Tell whether this item's scene extent overlaps *other*'s."""
        if other is self:
            return False
        return self.scene_bounding_rect().intersects(other.scene_bounding_rect())


class Platform(Item):
    """A solid rectangle that characters can stand on."""

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        super().__init__()
        self.width = float(width)
        self.height = float(height)
        self.pos = (x, y)
        self.color = pygame.Color(*DEFAULT_PLATFORM_COLOR)
        self.border_color = pygame.Color(*DEFAULT_BORDER_COLOR)

    @property
    def rect(self) -> Rect:
        """The filled area in the platform's own coordinates."""
        return Rect(0.0, 0.0, self.width, self.height)

    def set_color(self, color) -> None:
        """Change the fill colour; accepts anything pygame.Color accepts."""
        self.color = pygame.Color(color)

    def bounding_rect(self) -> Rect:
        half = PEN_WIDTH / 2
        return Rect(-half, -half, self.width + PEN_WIDTH, self.height + PEN_WIDTH)