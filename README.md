# pocketknight

Building blocks for a small top-down arcade game set on a group of
islands: a simple collision model, sprite-sheet animations, map tile
sets, asset loading, goblin enemies and TNT explosions. Images, fonts
and drawing go through pygame.

## Installing

```
pip install .
pip install ".[test]"   # with pytest, to run the tests
```

## Modules

- `pocketknight.enums`
  - `DifficultyLevel` with `EASY`, `MEDIUM`, `HARD` and `NONE`.
  - `TntColor` with `BLUE` and `RED`.
- `pocketknight.engine`
  - `Rect(left, top, width, height)` with `intersects(other)`; touching
    edges do not count as an overlap.
  - `Clock(time_source=time.monotonic)` with `elapsed()` and `restart()`;
    `restart()` returns the time that had elapsed.
  - `Entity`, an abstract base with an `is_alive` flag and
    `update_state()`.
  - `Collidable`, adding `global_bounds()`, `is_colliding_with(other)`
    (bounds overlap) and `on_collision_with(other)` (which by default
    records `other` as `last_collision`).
  - `Attack(bounds=None, clock=None)`, a hit area that marks itself dead
    on the first `update_state()` after 0.1 s on its clock.
  - `MapBorder(width, height, x, y)`, an immovable wall.
  - `random_int(low, high)`, a uniform integer with both ends included;
    raises `ValueError` if `low > high`.
- `pocketknight.animation`
  - `Sprite`, a positioned and scaled region of a texture, with
    `move(offset)` and `draw(target)`.
  - `Animation(texture, width, height, frames_in_texture,
    rows_in_texture, row, frame_count)`, which cuts one row of a sprite
    sheet into frames; `update_frame(clock)` steps to the next frame
    (wrapping around) once 0.1 s have passed and restarts the clock;
    `apply_texture(sprite)` shows the current frame on a sprite.
  - `MapTile(texture=None, rect=None)` with `position`, `scale` and
    `render(target)`.
  - `MapTileAnimated(animation, clock=None)`, a tile with its own copy of
    an animation, advanced by `update_textures()`.
- `pocketknight.tiles`
  - `tile_layout(group)` gives the cell positions of the tiles of
    `"grass"`, `"sand"`, `"wall"`, `"stairs"` or `"bridge"`, keyed by
    names such as `"MapTileGrassCornerLeftUp"`; any other group raises
    `ValueError`.
  - `build_tile_maps(textures, tile_size)` builds `MapTile`s for every
    group plus a `"shadow"` group with the 192×192 `"MapTileShadow"`;
    a non-positive `tile_size` raises `ValueError`.
- `pocketknight.assets`
  - `Assets(root="..")` loads textures from `root/TinySwords/` and the
    font `root/Fonts/alagard.ttf`. A file that cannot be loaded is
    logged as a warning and left as `None` (the default pygame font is
    used instead of a missing font).
  - `texture(name)`, `animation(name)`, `tiles(group)` (fresh copies;
    the groups of `pocketknight.tiles` plus `"shadow"` and `"foam"`,
    otherwise `ValueError`) and `subtitle(name)`.
  - `Subtitle`, an outlined line of text drawn with `render(target)`;
    the named subtitles are `easy`, `medium`, `hard`, `wave1`, `wave2`,
    `wave3`, `attackBySpace`, `plantTnt`, `bewareOfTnt`, `gameOver` and
    `victory!`.
- `pocketknight.explosion`
  - `Explosion(tnt_position, assets, time_source=time.monotonic)`, a
    64×64 attack area at the TNT's position whose animation plays on
    `update_state()`; `time_of_explosion` is the clock started when it
    went off.
- `pocketknight.goblin`
  - `Goblin(assets, *, prey=(), time_source=time.monotonic)`. Each
    `update_state()` first walks it in from its island (west, north or
    east) and then chases `chased_position`. `is_colliding_with(other)`
    starts an attack when `other` is an instance of one of the `prey`
    types inside its reach. `on_collision_with` takes 20–30 health for a
    live `Explosion`, 10–20 for a live `Attack`, and otherwise stops the
    goblin until it no longer touches that object. At 0 health it dies.

## Example

```python
from pocketknight.engine import Attack, Clock, MapBorder, Rect, random_int

damage = random_int(10, 20)   # from 10 to 20, both included

wall = MapBorder(100, 20, 0, 0)
hit = Attack(Rect(10, 10, 32, 32))
assert hit.is_colliding_with(wall)

clock = Clock()
if clock.elapsed() >= 5:
    clock.restart()
```

## What it does not do

The package has no game loop, window, menu, knight, sheep, meat,
mushrooms, TNT goblins or map layout, and it has no command to start a
game. It provides the pieces above; a program that opens a window,
places the entities and calls `update_state`, the collision methods and
`render` each frame has to be written on top of it. The image and font
files are not included either; `Assets` looks for them below its `root`.