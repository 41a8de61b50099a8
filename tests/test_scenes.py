import pygame
import pytest

from platformbrawl.character import MOVE_SPEED, WeaponType
from platformbrawl.items import Rect
from platformbrawl.scenes import (
    LOWER_PLATFORM_Y,
    PLATFORM_WIDTH,
    SCENE_HEIGHT,
    SCENE_WIDTH,
    UPPER_PLATFORM_Y,
    BattleScene,
    Key,
    Scene,
)


class RecordingScene(Scene):
    def __init__(self):
        super().__init__(100, 50)
        self.calls = []

    def process_input(self):
        self.calls.append("input")

    def process_movement(self):
        self.calls.append(("movement", self.delta_time))

    def process_picking(self):
        self.calls.append("picking")


def make_scene():
    background = pygame.Surface((640, 360))
    stand = pygame.Surface((10, 20))
    crouch = pygame.Surface((10, 12))
    return BattleScene(background, stand, crouch)


def test_scene_rect_from_size():
    scene = Scene(100, 50)
    assert scene.scene_rect == Rect(0.0, 0.0, 100.0, 50.0)
    assert (scene.width, scene.height) == (100.0, 50.0)


def test_first_update_has_zero_delta():
    scene = Scene(100, 50)
    scene.update(5000)
    assert scene.delta_time == 0.0


def test_update_runs_steps_in_order():
    scene = RecordingScene()
    Scene.update(scene, 5000)
    assert scene.calls == ["input", ("movement", 0.0), "picking"]


def test_following_update_measures_seconds():
    scene = Scene(100, 50)
    scene.update(1000)
    scene.update(1250)
    assert scene.delta_time == pytest.approx(0.25)


def test_map_is_scaled_to_the_scene():
    scene = make_scene()
    assert scene.scene_rect == Rect(0.0, 0.0, SCENE_WIDTH, SCENE_HEIGHT)
    assert scene.map.scene_bounding_rect() == Rect(0.0, 0.0, SCENE_WIDTH, SCENE_HEIGHT)


def test_player_spawns_on_map_spawn_point_with_fists():
    scene = make_scene()
    assert scene.player.pos == scene.map.spawn_pos()
    assert scene.player.weapon is WeaponType.FIST


def test_platform_layout():
    scene = make_scene()
    left, right, top = scene.platforms
    assert [p.y for p in scene.platforms] == [LOWER_PLATFORM_Y, LOWER_PLATFORM_Y, UPPER_PLATFORM_Y]
    assert all(p.width == PLATFORM_WIDTH for p in scene.platforms)
    assert left.x + right.x + PLATFORM_WIDTH == pytest.approx(SCENE_WIDTH)
    assert top.x + PLATFORM_WIDTH / 2 == pytest.approx(SCENE_WIDTH / 2)
    assert scene.items == [scene.map, scene.player, left, right, top]


def test_movement_keys_press_and_release():
    scene = make_scene()
    assert scene.key_press(Key.LEFT) is True
    assert scene.key_press(Key.RIGHT) is True
    assert (scene.player.left_down, scene.player.right_down) == (True, True)
    scene.key_release(Key.LEFT)
    scene.key_release(Key.RIGHT)
    assert (scene.player.left_down, scene.player.right_down) == (False, False)


def test_crouch_key():
    scene = make_scene()
    scene.key_press(Key.CROUCH)
    assert scene.player.crouching is True
    scene.key_release(Key.CROUCH)
    assert scene.player.crouching is False


def test_unknown_keys_are_not_handled():
    scene = make_scene()
    assert scene.key_press("x") is False
    assert scene.key_release(Key.JUMP) is False


def test_walking_right_moves_by_speed_times_delta():
    scene = make_scene()
    start_x = scene.player.x
    scene.key_press(Key.RIGHT)
    scene.update(0)
    scene.update(100)
    assert scene.player.x == pytest.approx(start_x + MOVE_SPEED * 0.1)
    assert scene.player.y == pytest.approx(scene.map.floor_height())


def test_crouching_blocks_walking():
    scene = make_scene()
    start = scene.player.pos
    scene.key_press(Key.CROUCH)
    scene.key_press(Key.LEFT)
    scene.update(0)
    scene.update(200)
    assert scene.player.pos == start


def test_jump_lifts_player_off_floor():
    scene = make_scene()
    floor = scene.map.floor_height()
    scene.key_press(Key.JUMP)
    scene.update(0)
    scene.update(20)
    assert scene.player.y < floor
    assert scene.player.jumping is True


def test_pick_is_true_for_one_update_only():
    scene = make_scene()
    scene.key_press(Key.PICK)
    scene.update(0)
    assert scene.player.picking is True
    scene.update(10)
    assert scene.player.picking is False


def test_player_lands_on_upper_platform():
    scene = make_scene()
    top = scene.platforms[2]
    scene.player.pos = (top.x + PLATFORM_WIDTH / 2, top.y + 10)
    scene.update(0)
    assert scene.player.y == top.y
    assert scene.player.on_ground is True