# bubbleworld

The game logic for a small bubble-shooting platform arcade game. It does not
depend on any graphics library. The package has these modules:

- `bubbleworld.sprite`: `Rect` source rectangles, frame-based animations
  (`Sprite`, `Animation`, `AnimMode`) and single-frame images
  (`StaticImage`). `Sprite.update()` steps the animation by one tick.
  `Sprite.frame()` returns the rectangle to draw, or `None`.
- `bubbleworld.text`: `BitmapFont`, a fixed-size font on a character sheet.
  `glyph_rect()` gives the sheet cell of one character and raises
  `ValueError` if the character is not on the sheet. `layout()` returns
  `Glyph` placements for a string. A character missing from the sheet is
  skipped, but it still takes up its width.
- `bubbleworld.tiles`: the `Tile` catalogue, each tile's sheet rectangle
  (`tile_rect`) and the tile predicates. These include `is_static`,
  `is_solid`, `is_floor`, `is_floor_or_ceiling`, `is_half_wall_left`,
  `is_half_wall_right`, `is_half_cube_left`, `is_half_cube_right`,
  `is_laser`, `is_lock` and `is_ladder_top`.
- `bubbleworld.tilemap`: `Point`, `AABB` and `TileMap`.
  - `TileMap.load()` takes tile ids in row order and raises `ValueError` if
    their number does not match the size.
  - `tile_at()` returns `AIR` outside the map.
  - Collision tests take an `AABB`. They cover walls and half walls, air,
    head, laser and falling.
  - `test_collision_ground(box, py)` returns the corrected resting y position,
    or `None` when there is no ground.
  - `get_swept_area_x()` returns the horizontal span a box can cover before it
    reaches a solid tile.
  - `render()` lists a screen position and a sheet rectangle for each visible
    tile. Laser tiles use the animated laser frame.
- `bubbleworld.levels`: the five built-in 16×13 stages.
  - `level_layout(stage)` returns the rows of tile ids.
  - `load_level(stage, tile_size)` returns a `LevelPlan`. The plan holds the
    tiles, the player start positions, `EnemySpawn` entries of each
    `EnemyKind`, bubbles, objects, dots and the number of enemies to clear.
  - Both raise `ValueError` for an unknown stage.
- `bubbleworld.scene`: `Scene`, which holds the state of the stage being
  played:
  - the loaded `TileMap` and the placements for the stage;
  - the enemies-remaining count (`enemy_popped()`);
  - the stage-clear countdown (`next_scene_trigger` becomes true after more
    than 7 seconds with no enemies left);
  - the 0.3-second bubble cooldown (`can_shoot_bubble()`);
  - the bubbles that rise from the vents on stage 2 (`spawn_stage_bubbles()`);
  - the `DebugMode` cycle (`cycle_debug()`).

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from bubbleworld.scene import Scene

scene = Scene(tile_size=16)
scene.load_level(1)

for _ in range(60):
    scene.tick(1 / 60)
    if scene.can_shoot_bubble():
        ...  # let the player shoot a bubble
```

```python
from bubbleworld.levels import load_level

plan = load_level(2, tile_size=16)
print(plan.player, plan.enemies_to_clear)
for spawn in plan.enemies:
    print(spawn.kind, spawn.position)
```

```python
from bubbleworld.tilemap import AABB, Point, TileMap
from bubbleworld.levels import level_layout

tilemap = TileMap(tile_size=16)
rows = level_layout(1)
tilemap.load([tile for row in rows for tile in row], len(rows[0]), len(rows))
box = AABB(Point(40, 160), 16, 16)
print(tilemap.test_collision_ground(box, box.pos.y + box.height))
```

## What it does not do

This package has no window, no drawing, no sound and no keyboard input. It
has no command to start a game. Front ends ask it for rectangles and
positions and draw them themselves.

Players appear only as start positions, and enemies only as spawn entries.
Nothing here moves them, and nothing checks collisions between players,
enemies, bubbles or items. Scores and lives are not tracked either.