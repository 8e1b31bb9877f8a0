# arachnid

A small top-down 2D game built on pygame. You steer a character around a
walled, tiled arena while a large spider, made of a body and six legs, sits
near the top of the screen.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
arachnid
```

This opens a 1200×720 window and runs until Escape is pressed or the window
is closed. To stop on its own after a fixed number of frames:

```
arachnid --frames 600
```

Controls:

- Arrow keys or WASD move the player.
- Escape quits.

The game looks for its images relative to the current directory:
`images/protago.png`, `images/SpiderBase.png`, `images/SpiderLeg.png`,
`images/SpiderLegI.png`, `images/pointer.png`,
`images/backgrounds/bg_flat.png` and `images/backgrounds/Backgroundsample.png`.
An image that cannot be loaded is logged and the game carries on without it.
Log messages are written to `gf2d.log` in the current directory, replacing
any earlier log.

## Using the pieces

The modules can be used on their own:

- `arachnid.camera.Camera` holds a view position and size, can centre itself
  on a target with `center_on`, and, once `enable_binding(True)` is set, keeps
  the view inside the rectangle given to `set_bounds`. `offset()` gives the
  vector to add to world coordinates to draw relative to the camera.
- `arachnid.graphics.Graphics` opens the window, owns a render surface at the
  logical resolution, paces frames (`set_frame_delay`, `frames_per_second`),
  presents frames with `next_frame` and saves screenshots with
  `save_screenshot`. It works as a context manager.
- `arachnid.sprite.SpriteManager` is a fixed pool of `Sprite` slots. It loads
  sprite sheets with `load_all` or `load_image`, shares an image already
  loaded from the same file, counts references (`free`, `delete`,
  `clear_all`), and draws single frames with `render`, `draw`, `draw_image`
  and `draw_to_surface`, supporting scaling, flipping, rotation, colour
  shifting and clipping. Failures raise `SpriteError`.
- `arachnid.draw` draws pixels, lines, rectangles, circles, diamonds,
  polygons and Bézier curves onto a pygame surface. The point generators it
  uses (`bezier_points`, `bezier4_points`, `circle_points`, `diamond_lines`)
  return plain lists of points and need no display.
- `arachnid.entity.EntityManager` is a fixed-size pool of `Entity` objects
  with `think_all`, `update_all` and `draw_all` passes. A full pool raises
  `EntityError`. `EntityTeam` and `CollisionLayer` label entities.
- `arachnid.world.World` is a grid of tile indices (0 for no tile). It can
  draw its tiles, outline them with `draw_bounds`, pre-render them into one
  sprite with `build_tile_layer`, and bind a camera to that layer with
  `setup_camera`. `world_test_new` builds the 65 × 45 arena walled in on every
  edge.
- `arachnid.player` creates the keyboard-driven player (`player_new`);
  `direction_from_keys`, `player_think` and `player_update` are its movement
  rules.
- `arachnid.spider` creates the spider body and its six legs (`spider_new`,
  `leg_new`).

```python
from arachnid.camera import Camera

camera = Camera()
camera.set_size((1200, 720))
camera.set_bounds((0, 0, 4000, 3000))
camera.enable_binding(True)
camera.center_on((2000, 100))
print(camera.position)   # (1400.0, 0.0)
print(camera.offset())   # (-1400.0, -0.0)
```

## What it does not do

- There is no collision or physics: the player passes through the arena's
  walls, and entities' collision layers are only labels.
- The spider and its legs have no behaviour; they are drawn but do not move
  or attack.
- The camera follows the player, but drawing does not yet apply the camera
  offset, and the game never builds the world's tile layer, so the camera is
  not bound to the world during play.
- There are no menus, sound, scores or saved games.