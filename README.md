# platformbrawl

A small side-view brawler. One fighter stands on a battlefield that is
scaled to fit a 1280×720 window. There are three floating platforms: two
at mid height on the left and right, and one higher up in the middle.
Gravity pulls the fighter down until it lands on a platform or on the
battlefield floor. The floor sits 150 pixels above the bottom of the
background image.

## Installing

```
pip install .
```

This also installs pygame.

## Images

The package contains no images. It loads them from an asset directory
laid out like this:

```
<assets>/Items/Background/newBackground.png
<assets>/Items/Characters/c1stand.png
<assets>/Items/Characters/c1crouch.png
```

If the background image is missing or cannot be read, the game prints
`cannot start: ...` and exits with status 1.

## Playing

```
platformbrawl
```

By default the images are read from `./assets`. To use another directory,
pass `--assets`:

```
platformbrawl --assets path/to/assets
```

Controls:

| Key | Action                                                   |
|-----|----------------------------------------------------------|
| A   | move left                                                |
| D   | move right (the sprite is mirrored)                      |
| W   | jump (only from the ground, and not while crouching)     |
| S   | crouch while held (ignored while jumping)                |
| J   | pick (registers once per press)                          |

While crouching, the fighter neither walks nor falls. The loop aims for
90 frames per second. Movement is scaled by the real time that passes
between frames.

## Using the pieces

The game logic works without a window:

- `platformbrawl.items` has `Rect` (`translated`, `scaled`, `intersects`),
  the base `Item` (`bounding_rect`, `scene_bounding_rect`, `collides_with`)
  and `Platform` (`set_color`).
- `platformbrawl.maps` has `Map` and `Battlefield`. `scale_to_fit` scales
  the background uniformly into a scene rectangle and centres it. It raises
  `ValueError` if there is no image. `floor_height` and `spawn_pos` give the
  ground line and the spawn point.
- `platformbrawl.character` has `SimpleCharacter` and `WeaponType`. Use
  `start_jump`, `process_input` and
  `apply_vertical_movement(delta_time, floor_y, platforms)`, plus the
  `crouching`, `picking`, `velocity` and `weapon` properties.
- `platformbrawl.scenes` has `Scene`. Its `update(now_ms)` computes the
  time step and then runs input, movement and picking. It also has
  `BattleScene`, which takes `Key` values through `key_press` and
  `key_release`.
- `platformbrawl.game` has `Game`, the pygame window, and `main`.

## What it does not do

There is one player only, with no opponent and no fighting. Weapons can be
set on a character through `set_weapon`, but nothing in the battle scene
hands them out. The pick key is tracked, but `BattleScene.process_picking`
does nothing. There is no sound, no menu and no score.

## Running the tests

```
pip install .[test]
pytest
```