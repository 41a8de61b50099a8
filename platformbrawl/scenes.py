"""Scenes: a fixed-step update loop and the battle scene with its player."""

from __future__ import annotations

from enum import Enum

from platformbrawl.character import SimpleCharacter, WeaponType
from platformbrawl.items import Item, PixmapSource, Platform, Rect
from platformbrawl.maps import Battlefield

FRAMES_PER_SECOND = 90
FRAME_INTERVAL_MS = 1000 // FRAMES_PER_SECOND

SCENE_WIDTH = 1280
SCENE_HEIGHT = 720
PLATFORM_WIDTH = 410
PLATFORM_HEIGHT = 20
PLATFORM_SPREAD = 360
LOWER_PLATFORM_Y = 360
UPPER_PLATFORM_Y = 160


class Key(Enum):
    """Keys the battle scene reacts to."""

    LEFT = "a"
    RIGHT = "d"
    CROUCH = "s"
    JUMP = "w"
    PICK = "j"


class Scene:
    """A scene advanced by timestamps: input, then movement, then picking."""

    def __init__(self, width: float, height: float) -> None:
        self.scene_rect = Rect(0.0, 0.0, float(width), float(height))
        self.delta_time = 0.0
        self._last_time: int | None = None

    @property
    def width(self) -> float:
        return self.scene_rect.width

    @property
    def height(self) -> float:
        return self.scene_rect.height

    def update(self, now_ms: int) -> None:
        """Advance the scene to the time *now_ms*, in milliseconds."""
        if self._last_time is None:
            self.delta_time = 0.0
        else:
            self.delta_time = (now_ms - self._last_time) / 1000.0
        self._last_time = now_ms

        self.process_input()
        self.process_movement()
        self.process_picking()

    def process_input(self) -> None:
        """Turn held keys into intentions; nothing by default."""

    def process_movement(self) -> None:
        """Move things for the current time step; nothing by default."""

    def process_picking(self) -> None:
        """Handle picking things up; nothing by default."""


class BattleScene(Scene):
    """The battlefield with one player and three platforms."""

    def __init__(
        self,
        map_path: PixmapSource,
        stand_path: PixmapSource,
        crouch_path: PixmapSource,
    ) -> None:
        super().__init__(SCENE_WIDTH, SCENE_HEIGHT)

        self.map = Battlefield(map_path)
        self.map.scale_to_fit(self.scene_rect)

        self.player = SimpleCharacter(stand_path, crouch_path)
        self.player.pos = self.map.spawn_pos()
        self.player.set_weapon(WeaponType.FIST)

        center_x = SCENE_WIDTH / 2
        half = PLATFORM_WIDTH / 2
        self.platforms: list[Platform] = [
            Platform(center_x - PLATFORM_SPREAD - half, LOWER_PLATFORM_Y,
                     PLATFORM_WIDTH, PLATFORM_HEIGHT),
            Platform(center_x + PLATFORM_SPREAD - half, LOWER_PLATFORM_Y,
                     PLATFORM_WIDTH, PLATFORM_HEIGHT),
            Platform(center_x - half, UPPER_PLATFORM_Y,
                     PLATFORM_WIDTH, PLATFORM_HEIGHT),
        ]

    @property
    def items(self) -> list[Item]:
        """Everything in the scene, in drawing order."""
        return [self.map, self.player, *self.platforms]

    def key_press(self, key: object) -> bool:
        """React to a key going down; return whether it was handled."""
        player = self.player
        if key is Key.LEFT:
            player.left_down = True
        elif key is Key.RIGHT:
            player.right_down = True
        elif key is Key.CROUCH:
            player.crouching = True
        elif key is Key.JUMP:
            player.start_jump()
        elif key is Key.PICK:
            player.pick_down = True
        else:
            return False
        return True

    def key_release(self, key: object) -> bool:
        """React to a key going up; return whether it was handled."""
        player = self.player
        if key is Key.LEFT:
            player.left_down = False
        elif key is Key.RIGHT:
            player.right_down = False
        elif key is Key.CROUCH:
            player.crouching = False
        elif key is Key.PICK:
            player.pick_down = False
        else:
            return False
        return True

    def process_input(self) -> None:
        self.player.process_input()

    def process_movement(self) -> None:
        player = self.player
        if player.crouching:
            return
        new_x = player.x + player.velocity[0] * self.delta_time
        player.apply_vertical_movement(
            self.delta_time, self.map.floor_height(), self.platforms
        )
        player.x = float(new_x)

    def process_picking(self) -> None:
        """Nothing can be picked up on this map yet."""