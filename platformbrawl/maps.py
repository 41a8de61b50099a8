"""Background maps that define the floor and the spawn point."""

from __future__ import annotations

from platformbrawl.items import Item, PixmapSource, Rect

FLOOR_MARGIN = 150


class Map(Item):
    """A background image scaled to the scene."""

    def __init__(self, pixmap_path: PixmapSource = "") -> None:
        super().__init__(pixmap_path)

    def scale_to_fit(self, scene_rect: Rect) -> float:
        """Scale the map uniformly to fit *scene_rect* and centre it.

        Returns the scale factor applied.
        """
        item_rect = self.bounding_rect()
        if item_rect.is_empty:
            raise ValueError("map has no image to scale")
        factor = min(
            scene_rect.width / item_rect.width,
            scene_rect.height / item_rect.height,
        )
        sx, sy = self.transform_scale
        self.transform_scale = (sx * factor, sy * factor)
        self.pos = (
            (scene_rect.width - item_rect.width * factor) / 2,
            (scene_rect.height - item_rect.height * factor) / 2,
        )
        return factor

    def floor_height(self) -> float:
        """The Y coordinate of the ground; the map's middle by default."""
        rect = self.scene_bounding_rect()
        return rect.top + rect.height * 0.5

    def spawn_pos(self) -> tuple[float, float]:
        """Where a character appears: horizontally centred, on the floor."""
        rect = self.scene_bounding_rect()
        return ((rect.left + rect.right) / 2, self.floor_height())


class Battlefield(Map):
    """The battle map, whose floor lies a fixed margin above its bottom."""

    def __init__(self, pixmap_path: PixmapSource) -> None:
        super().__init__(pixmap_path)

    def floor_height(self) -> float:
        return self.scene_bounding_rect().bottom - FLOOR_MARGIN