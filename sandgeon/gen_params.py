"""Per-level generation parameters and random helpers for the layout generator."""

from __future__ import annotations

import random

from .geometry import PFIELD_PHYS_NO_BRDR_RECT2, Rect2, Vec2
from .room_tunnel import NUM_LEVELS, BgTile, level_value

__all__ = [
    "allowed_alt_terrain",
    "gen_extend_amount_tsf",
    "gen_parallel_tunnel_min_dist",
    "rand_vec2",
    "rand_point_in",
    "rand_rect_in",
    "rand_rect_in_pfnb",
]


def _weighted(*entries: tuple[int, BgTile]) -> tuple[BgTile, ...]:
    """Repeat each tile by its weight, so a uniform pick honours the weights."""
    return tuple(tile for count, tile in entries for _ in range(count))


_ALLOWED_ALT_TERRAIN = (
    # Level 1
    _weighted((2, BgTile.WATER), (1, BgTile.SPIKES)),
    # Level 2
    _weighted((1, BgTile.WATER), (1, BgTile.SPIKES), (1, BgTile.PIT)),
    # Level 3
    _weighted((2, BgTile.WATER), (2, BgTile.SPIKES), (1, BgTile.PIT)),
    # Level 4
    _weighted((1, BgTile.LAVA), (2, BgTile.SPIKES), (1, BgTile.PIT)),
    # Level 5
    _weighted((1, BgTile.LAVA), (1, BgTile.SPIKES)),
)

# "TSF" is short for "to shrink from".
_GEN_EXTEND_AMOUNT_TSF = (15,) * NUM_LEVELS
_GEN_PARALLEL_TUNNEL_MIN_DIST = (4,) * NUM_LEVELS


def allowed_alt_terrain(level_index: int) -> tuple[BgTile, ...]:
    """The alt terrain tiles a level may use, repeated by weight."""
    return level_value(_ALLOWED_ALT_TERRAIN, level_index)


def gen_extend_amount_tsf(level_index: int) -> int:
    """How far a new room or tunnel is grown before shrinking it back."""
    return level_value(_GEN_EXTEND_AMOUNT_TSF, level_index)


def gen_parallel_tunnel_min_dist(level_index: int) -> int:
    """The smallest allowed gap between two parallel tunnels."""
    return level_value(_GEN_PARALLEL_TUNNEL_MIN_DIST, level_index)


def rand_vec2(rng: random.Random, low: Vec2, high: Vec2) -> Vec2:
    """A vector with each component drawn inclusively between `low` and `high`."""
    return Vec2(rng.randint(low.x, high.x), rng.randint(low.y, high.y))


def rand_point_in(rng: random.Random, rect: Rect2) -> Vec2:
    """A grid position inside `rect`."""
    if rect.size_2d.x <= 0 or rect.size_2d.y <= 0:
        raise ValueError(f"cannot pick a point in an empty rectangle: {rect}")
    return rand_vec2(rng, rect.tl_corner(), rect.br_corner())


def _rand_extent(rng: random.Random, low: int, high: int, room: int) -> int:
    if low > high:
        raise ValueError(f"minimum size {low} exceeds maximum size {high}")
    if low > room:
        raise ValueError(f"minimum size {low} does not fit in {room}")
    return rng.randint(low, min(high, room))


def rand_rect_in(
    rng: random.Random, bounds: Rect2, min_size: Vec2, max_size: Vec2
) -> Rect2:
    """A rectangle of random size in [min_size, max_size] lying wholly in `bounds`."""
    size = Vec2(
        _rand_extent(rng, min_size.x, max_size.x, bounds.size_2d.x),
        _rand_extent(rng, min_size.y, max_size.y, bounds.size_2d.y),
    )
    pos = Vec2(
        rng.randint(bounds.left_x(), bounds.right_x() - size.x + 1),
        rng.randint(bounds.top_y(), bounds.bottom_y() - size.y + 1),
    )
    return Rect2(pos, size)


def rand_rect_in_pfnb(
    rng: random.Random, min_size: Vec2, max_size: Vec2
) -> Rect2:
    """A random rectangle lying wholly in the borderless playfield."""
    return rand_rect_in(rng, PFIELD_PHYS_NO_BRDR_RECT2, min_size, max_size)