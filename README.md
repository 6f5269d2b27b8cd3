# sandgeon

Building blocks for roguelike dungeon floors. A floor is a set of rooms and
one-tile-wide tunnels inside a fixed playfield on an 80×60 screen grid. The
package models that floor: the grid geometry, the per-level size rules for
rooms and tunnels, the background tile at each position, alternate terrain
state, stairs, and the entities standing on the floor's upper layers. It also
has per-level generation parameters and random helpers for placing rooms.

The package needs nothing beyond the Python standard library (3.10 or later).

## Installing

```
pip install .
```

Install with the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
import random

from sandgeon.dngn_floor import DngnFloor, Layer
from sandgeon.floor_ops import place_entity, render_bg_tiles
from sandgeon.gen_params import rand_rect_in_pfnb
from sandgeon.geometry import Rect2, Vec2
from sandgeon.room_tunnel import RoomTunnel

floor = DngnFloor(level_index=0, pos3_z=0)
floor.append(RoomTunnel(Rect2(Vec2(2, 2), Vec2(6, 5))))   # a room
floor.append(RoomTunnel(Rect2(Vec2(8, 4), Vec2(5, 1))))   # a horizontal tunnel

floor.phys_bg_tile_at(Vec2(3, 3))      # BgTile.ROOM_FLOOR
floor.phys_bg_tile_at(Vec2(9, 4))      # BgTile.TUNNEL_FLOOR
floor.phys_pos_to_rt_index(Vec2(9, 4)) # 1

place_entity(floor, Vec2(3, 3), 0, Layer.ITEMS_TRAPS, 7)

tiles = render_bg_tiles(floor)         # {Vec2: BgTile}, walls included

rng = random.Random(1234)
rect = rand_rect_in_pfnb(rng, Vec2(5, 5), Vec2(12, 12))
```

### Modules

- `sandgeon.geometry`: the frozen `Vec2` and `Rect2` grid types, `PathDir`
  with `path_dir_to_side_pos`, the screen and playfield layout constants
  (such as `PFIELD_PHYS_RECT2` and `PFIELD_PHYS_NO_BRDR_RECT2`), and the
  playfield helpers `r2_fits_in_pfnb`, `r2_intersects_pfnb`,
  `r2_build_in_pfield`, `r2_build_in_pfnb`, `r2_pos_in_border`,
  `r2_pos_in_internal_border` and the `r2_*_side_1ge_past_in_pfnb` side
  strips.
- `sandgeon.room_tunnel`: `BgTile`, the kinds of background tile, and
  `RoomTunnel`, a room or tunnel with its rectangle, generation side,
  alternate terrain, door points and connection indices. The per-level
  tables behind `is_room`, `is_horiz_tunnel`, `is_vert_tunnel`,
  `is_tunnel` and `is_valid` live here too, along with the matching
  `r2_is_*` functions.
- `sandgeon.dngn_floor`: `DngnFloor`, plus `AltTerrainState`,
  `AltTerrainInfo` and `Layer`.
  - `len(floor)`, iteration and indexing go over its rooms and tunnels.
  - `append` adds one, up to the level's maximum count.
  - `erase_tunnel_during_gen` removes a tunnel while the floor holds more
    than the level's minimum, renumbering connection indices.
  - `phys_bg_tile_at(pos)` gives the tile at a playfield position, taking
    stairs and alternate terrain state into account.
  - `bg_tile_at(pos, index)` gives the tile drawn for one room or tunnel,
    including its wall border.
  - `rt_at(pos)` and `phys_pos_to_rt_index(pos)` find the room or tunnel
    that covers a position.
  - `neighbors(rect)` lists rooms and tunnels sharing a collision-grid
    cell with a rectangle.
  - `to_dict()` and `DngnFloor.from_dict(data, level_index)` save and load
    the floor number, alternate terrain state and upper-layer entities.
- `sandgeon.floor_ops`: `place_entity` and `remove_entity` keep a floor's
  upper layers, refusing positions outside any room or tunnel, positions
  already taken and other floors. `render_bg_tiles` gives the background of
  the whole floor as a position-to-tile mapping.
- `sandgeon.gen_params`: per-level parameters (`allowed_alt_terrain`,
  `gen_extend_amount_tsf`, `gen_parallel_tunnel_min_dist`) and random
  helpers taking a `random.Random`: `rand_vec2`, `rand_point_in`,
  `rand_rect_in` and `rand_rect_in_pfnb`.

## What the package does not do

- It does not generate a whole floor by itself: there is no driver that
  grows rooms and tunnels from one another, trims dead ends, adds doors and
  stairs, or lays down terrain patches. Floors are built by calling
  `DngnFloor.append` and setting stairs and terrain directly.
- It has no command-line program and draws nothing to a screen;
  `render_bg_tiles` returns data for a caller to display.
- `to_dict` does not store the rooms and tunnels themselves, only the
  persistent state listed above.