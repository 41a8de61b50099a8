"""The player character: input state, jumping, gravity and weapons."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

import pygame

from platformbrawl.items import Item, PixmapSource, Platform, load_pixmap

logger = logging.getLogger(__name__)

GRAVITY = 2000.0
JUMP_VELOCITY = -1000.0
MOVE_SPEED = 300
SPRITE_SCALE = 3.0
WEAPON_OFFSET = (10, -20)


class WeaponType(Enum):
    FIST = "fist"
    RIFLE = "rifle"
    SNIPER = "sniper"
    BALL = "ball"


class SimpleCharacter(Item):
    """A character that walks, crouches, jumps and carries a weapon.

    The character's position is the middle of its feet.
    """

    def __init__(self, stand_path: PixmapSource, crouch_path: PixmapSource) -> None:
        super().__init__()
        self._stand = load_pixmap(stand_path)
        self._crouch = load_pixmap(crouch_path)
        self.pixmap = self._stand
        width, height = self._stand.get_size() if self._stand is not None else (0, 0)
        self.pixmap_offset = (-(width // 2), -height)
        self.pixmap_scale = SPRITE_SCALE

        self.left_down = False
        self.right_down = False
        self.pick_down = False
        self._last_pick_down = False
        self._picking = False
        self._crouching = False

        self._velocity = (0.0, 0.0)
        self._jumping = False
        self._on_ground = True
        self._vertical_velocity = 0.0

        self._weapon = WeaponType.FIST
        self.weapon_image: pygame.Surface | None = None
        self.weapon_offset = WEAPON_OFFSET

    @property
    def crouching(self) -> bool:
        return self._crouching

    @crouching.setter
    def crouching(self, down: bool) -> None:
        if self._jumping:
            return
        if self._crouching != down:
            self._crouching = down
            self.pixmap = self._crouch if down else self._stand

    @property
    def picking(self) -> bool:
        """True only on the update in which the pick key went down."""
        return self._picking

    @property
    def velocity(self) -> tuple[float, float]:
        return self._velocity

    @property
    def vertical_velocity(self) -> float:
        return self._vertical_velocity

    @property
    def jumping(self) -> bool:
        return self._jumping

    @property
    def on_ground(self) -> bool:
        return self._on_ground

    @property
    def weapon(self) -> WeaponType:
        return self._weapon

    def start_jump(self) -> None:
        """Leave the ground if standing upright on it."""
        if self._on_ground and not self._crouching:
            self._jumping = True
            self._on_ground = False
            self._vertical_velocity = JUMP_VELOCITY

    def process_input(self) -> None:
        """Turn the held keys into a horizontal velocity and facing."""
        vx = 0.0
        if self.left_down and not self._crouching:
            vx = -MOVE_SPEED
            self.transform_scale = (1.0, 1.0)
        if self.right_down and not self._crouching:
            vx = MOVE_SPEED
            self.transform_scale = (-1.0, 1.0)
        self._velocity = (vx, 0.0)

        self._picking = not self._last_pick_down and self.pick_down
        self._last_pick_down = self.pick_down

    def apply_vertical_movement(
        self,
        delta_time: float,
        floor_y: float,
        platforms: Iterable[Item] = (),
    ) -> None:
        """Apply gravity for *delta_time* seconds and land on platforms or the floor."""
        self._vertical_velocity += GRAVITY * delta_time
        new_y = self.y + self._vertical_velocity * delta_time

        landed_on_platform = False
        for item in platforms:
            if not isinstance(item, Platform) or not self.collides_with(item):
                continue
            logger.debug("collided with platform at y=%s", item.y)
            if new_y > item.y - 1:
                new_y = item.y
                self._land()
                landed_on_platform = True
                break

        if not landed_on_platform and new_y >= floor_y:
            new_y = floor_y
            self._land()

        self.y = float(new_y)

    def _land(self) -> None:
        self._vertical_velocity = 0.0
        self._on_ground = True
        self._jumping = False

    def set_weapon(self, weapon: WeaponType, pixmap_path: PixmapSource = "") -> None:
        """Equip *weapon*, shown with the given image; a fist shows nothing."""
        self._weapon = weapon
        if weapon is WeaponType.FIST:
            self.remove_weapon()
            return
        self.weapon_image = load_pixmap(pixmap_path)

    def remove_weapon(self) -> None:
        """Drop any weapon and go back to bare fists."""
        self.weapon_image = None
        self._weapon = WeaponType.FIST