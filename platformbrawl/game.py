"""The game window: draws the battle scene and feeds it keys and time."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import pygame

from platformbrawl.items import Rect
from platformbrawl.scenes import FRAMES_PER_SECOND, BattleScene, Key

BACKGROUND_IMAGE = Path("Items", "Background", "newBackground.png")
STAND_IMAGE = Path("Items", "Characters", "c1stand.png")
CROUCH_IMAGE = Path("Items", "Characters", "c1crouch.png")
WINDOW_TITLE = "Platform Brawl"

_KEYS = {
    pygame.K_a: Key.LEFT,
    pygame.K_d: Key.RIGHT,
    pygame.K_s: Key.CROUCH,
    pygame.K_w: Key.JUMP,
    pygame.K_j: Key.PICK,
}


def _blit_scaled(
    surface: pygame.Surface, image: pygame.Surface, rect: Rect, flip: bool
) -> None:
    size = (max(round(rect.width), 0), max(round(rect.height), 0))
    if size[0] == 0 or size[1] == 0:
        return
    scaled = pygame.transform.scale(image, size)
    if flip:
        scaled = pygame.transform.flip(scaled, True, False)
    surface.blit(scaled, (round(rect.x), round(rect.y)))


class Game:
    """A battle scene shown in a fixed-size window."""

    def __init__(self, asset_dir: str | os.PathLike[str]) -> None:
        assets = Path(asset_dir)
        self.scene = BattleScene(
            assets / BACKGROUND_IMAGE,
            assets / STAND_IMAGE,
            assets / CROUCH_IMAGE,
        )
        self.running = False

    @property
    def size(self) -> tuple[int, int]:
        return (int(self.scene.width), int(self.scene.height))

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Pass a pygame event to the scene; return whether it was used."""
        if event.type == pygame.QUIT:
            self.running = False
            return True
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = _KEYS.get(event.key)
            if key is None:
                return False
            if event.type == pygame.KEYDOWN:
                return self.scene.key_press(key)
            return self.scene.key_release(key)
        return False

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the map, the player and the platforms onto *surface*."""
        surface.fill((0, 0, 0))
        scene = self.scene

        game_map = scene.map
        if game_map.pixmap is not None:
            _blit_scaled(surface, game_map.pixmap, game_map.scene_bounding_rect(), False)

        self._draw_player(surface)

        for platform in scene.platforms:
            area = pygame.Rect(
                round(platform.x), round(platform.y),
                round(platform.width), round(platform.height),
            )
            pygame.draw.rect(surface, platform.color, area)
            pygame.draw.rect(surface, platform.border_color, area, 1)

    def _draw_player(self, surface: pygame.Surface) -> None:
        player = self.scene.player
        sx, sy = player.transform_scale
        flip = sx < 0
        if player.pixmap is not None:
            width, height = player.pixmap.get_size()
            ox, oy = player.pixmap_offset
            scale = player.pixmap_scale
            rect = (
                Rect(ox, oy, width, height)
                .scaled(scale, scale)
                .scaled(sx, sy)
                .translated(player.x, player.y)
            )
            _blit_scaled(surface, player.pixmap, rect, flip)
        if player.weapon_image is not None:
            width, height = player.weapon_image.get_size()
            ox, oy = player.weapon_offset
            rect = Rect(ox, oy, width, height).scaled(sx, sy).translated(player.x, player.y)
            _blit_scaled(surface, player.weapon_image, rect, flip)

    def run(self) -> None:
        """Open the window and run the loop until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(self.size)
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            self.running = True
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.scene.update(pygame.time.get_ticks())
                self.draw(screen)
                pygame.display.flip()
                clock.tick(FRAMES_PER_SECOND)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="A two-dimensional platform fighter.")
    parser.add_argument(
        "--assets",
        default="assets",
        help="directory holding the game's images (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    try:
        game = Game(args.assets)
    except ValueError as exc:
        print(f"cannot start: {exc}", file=sys.stderr)
        return 1
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())