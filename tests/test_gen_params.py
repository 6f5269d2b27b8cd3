import random

import pytest

from sandgeon.gen_params import (
    allowed_alt_terrain,
    gen_extend_amount_tsf,
    gen_parallel_tunnel_min_dist,
    rand_point_in,
    rand_rect_in,
    rand_rect_in_pfnb,
    rand_vec2,
)
from sandgeon.geometry import PFIELD_PHYS_NO_BRDR_RECT2, Rect2, Vec2
from sandgeon.room_tunnel import BgTile


def test_allowed_alt_terrain_level_one_weights():
    assert allowed_alt_terrain(0) == (BgTile.WATER, BgTile.WATER, BgTile.SPIKES)


def test_allowed_alt_terrain_last_level():
    assert allowed_alt_terrain(4) == (BgTile.LAVA, BgTile.SPIKES)


def test_allowed_alt_terrain_never_includes_floor_tiles():
    for level in range(5):
        tiles = set(allowed_alt_terrain(level))
        assert tiles <= {BgTile.WATER, BgTile.SPIKES, BgTile.PIT, BgTile.LAVA}


@pytest.mark.parametrize("level", [-1, 5])
def test_bad_level_index_raises(level):
    with pytest.raises(IndexError):
        allowed_alt_terrain(level)
    with pytest.raises(IndexError):
        gen_extend_amount_tsf(level)
    with pytest.raises(IndexError):
        gen_parallel_tunnel_min_dist(level)


def test_extend_and_parallel_values():
    assert gen_extend_amount_tsf(0) == 15
    assert gen_parallel_tunnel_min_dist(2) == 4


def test_rand_vec2_in_range():
    rng = random.Random(1)
    for _ in range(200):
        v = rand_vec2(rng, Vec2(2, -3), Vec2(5, 1))
        assert 2 <= v.x <= 5
        assert -3 <= v.y <= 1


def test_rand_vec2_bad_range():
    with pytest.raises(ValueError):
        rand_vec2(random.Random(0), Vec2(5, 0), Vec2(2, 0))


def test_rand_point_in_rect():
    rng = random.Random(2)
    rect = Rect2(Vec2(3, 4), Vec2(2, 3))
    for _ in range(100):
        assert rect.contains_point(rand_point_in(rng, rect))


def test_rand_point_in_empty_rect():
    with pytest.raises(ValueError):
        rand_point_in(random.Random(0), Rect2(Vec2(1, 1), Vec2(0, 2)))


def test_rand_rect_in_fits_and_respects_sizes():
    rng = random.Random(3)
    bounds = Rect2(Vec2(10, 10), Vec2(20, 15))
    for _ in range(200):
        rect = rand_rect_in(rng, bounds, Vec2(3, 3), Vec2(6, 6))
        assert bounds.arg_inside(rect)
        assert 3 <= rect.size_2d.x <= 6
        assert 3 <= rect.size_2d.y <= 6


def test_rand_rect_in_min_too_large():
    with pytest.raises(ValueError):
        rand_rect_in(random.Random(0), Rect2(Vec2(0, 0), Vec2(4, 4)),
                     Vec2(5, 1), Vec2(6, 2))


def test_rand_rect_in_min_above_max():
    with pytest.raises(ValueError):
        rand_rect_in(random.Random(0), Rect2(Vec2(0, 0), Vec2(40, 40)),
                     Vec2(6, 1), Vec2(3, 2))


def test_rand_rect_in_pfnb_full_size_is_whole_playfield():
    size = PFIELD_PHYS_NO_BRDR_RECT2.size_2d
    rect = rand_rect_in_pfnb(random.Random(4), size, size)
    assert rect == PFIELD_PHYS_NO_BRDR_RECT2


def test_rand_rect_in_pfnb_is_deterministic_per_seed():
    a = rand_rect_in_pfnb(random.Random(9), Vec2(5, 5), Vec2(12, 12))
    b = rand_rect_in_pfnb(random.Random(9), Vec2(5, 5), Vec2(12, 12))
    assert a == b
    assert PFIELD_PHYS_NO_BRDR_RECT2.arg_inside(a)