import pytest

from sandgeon.geometry import (
    BOTTOM_OFFSET,
    LEFT_OFFSET,
    PFIELD_PHYS_NO_BRDR_RECT2,
    PFIELD_PHYS_RECT2,
    PFIELD_WINDOW_END_POS,
    RIGHT_OFFSET,
    TL_CORNER_OFFSET,
    TOP_OFFSET,
    W_BRDR_SCREEN_SIZE_2D,
    PathDir,
    Rect2,
    Vec2,
    path_dir_to_side_pos,
    r2_bottom_side_1ge_past_in_pfnb,
    r2_build_in_pfield,
    r2_build_in_pfnb,
    r2_fits_in_other,
    r2_fits_in_pfnb,
    r2_intersects_pfnb,
    r2_left_side_1ge_past_in_pfnb,
    r2_pos_in_border,
    r2_pos_in_internal_border,
    r2_right_side_1ge_past_in_pfnb,
    r2_top_side_1ge_past_in_pfnb,
)


def test_vec2_add_sub_round_trip():
    a, b = Vec2(3, -7), Vec2(11, 4)
    assert (a + b) - b == a
    assert a - a == Vec2(0, 0)


def test_build_in_grid_corners():
    tl, br = Vec2(2, 3), Vec2(5, 7)
    r = Rect2.build_in_grid(tl, br)
    assert r.tl_corner() == tl
    assert r.br_corner() == br
    assert r.tr_corner() == Vec2(br.x, tl.y)
    assert r.bl_corner() == Vec2(tl.x, br.y)
    assert r.pos + r.size_2d - Vec2(1, 1) == br


def test_build_in_grid_lim_clamps():
    lim = Rect2.build_in_grid(Vec2(2, 2), Vec2(10, 10))
    r = Rect2.build_in_grid_lim(Vec2(-5, 4), Vec2(6, 50), lim)
    assert r.tl_corner() == Vec2(lim.left_x(), 4)
    assert r.br_corner() == Vec2(6, lim.bottom_y())
    assert lim.arg_inside(r)


def test_intersect_and_adjacency():
    a = Rect2.build_in_grid(Vec2(0, 0), Vec2(2, 2))
    touching = Rect2.build_in_grid(Vec2(3, 0), Vec2(5, 2))
    overlapping = Rect2.build_in_grid(Vec2(2, 0), Vec2(4, 2))
    assert not a.intersect(touching)
    assert a.intersect(overlapping)
    assert overlapping.intersect(a)


def test_empty_rect_never_intersects():
    a = Rect2.build_in_grid(Vec2(0, 0), Vec2(4, 4))
    empty = Rect2(Vec2(1, 1), Vec2(0, 3))
    assert not a.intersect(empty)


def test_contains_point():
    r = Rect2.build_in_grid(Vec2(1, 1), Vec2(3, 3))
    assert r.contains_point(Vec2(1, 3))
    assert not r.contains_point(r.br_corner() + RIGHT_OFFSET)


def test_arg_inside():
    outer = Rect2.build_in_grid(Vec2(0, 0), Vec2(9, 9))
    inner = Rect2.build_in_grid(Vec2(0, 2), Vec2(9, 5))
    assert outer.arg_inside(inner)
    assert not inner.arg_inside(outer)
    assert r2_fits_in_other(inner, outer)


def test_inflated_lim():
    r = Rect2.build_in_grid(Vec2(10, 10), Vec2(12, 12))
    grown = r.build_in_grid_inflated_lim(Vec2(1, 2), Vec2(3, 0), PFIELD_PHYS_RECT2)
    assert grown.tl_corner() == r.tl_corner() - Vec2(1, 2)
    assert grown.br_corner() == r.br_corner() + Vec2(3, 0)


def test_side_rects_in_pfnb():
    r = Rect2.build_in_grid(Vec2(5, 5), Vec2(8, 9))
    left = r2_left_side_1ge_past_in_pfnb(r)
    assert left.tl_corner() == r.tl_corner() + LEFT_OFFSET
    assert left.br_corner() == r.bl_corner() + LEFT_OFFSET
    top = r2_top_side_1ge_past_in_pfnb(r)
    assert top.tl_corner() == r.tl_corner() + TOP_OFFSET
    assert top.br_corner() == r.tr_corner() + TOP_OFFSET
    right = r2_right_side_1ge_past_in_pfnb(r)
    assert right.tl_corner() == r.tr_corner() + RIGHT_OFFSET
    bottom = r2_bottom_side_1ge_past_in_pfnb(r)
    assert bottom.br_corner() == r.br_corner() + BOTTOM_OFFSET
    for side in (left, top, right, bottom):
        assert not side.intersect(r)


def test_path_dir():
    pos = Vec2(4, 4)
    assert path_dir_to_side_pos(pos, PathDir.LEFT) == pos + LEFT_OFFSET
    assert path_dir_to_side_pos(pos, PathDir.BOTTOM) == pos + BOTTOM_OFFSET
    assert str(PathDir.LEFT) == "PathDir::Left"
    assert str(PathDir.BOTTOM) == "PathDir::Bottom"


def test_path_dir_invalid():
    with pytest.raises(ValueError):
        path_dir_to_side_pos(Vec2(0, 0), 7)


def test_screen_constants():
    assert W_BRDR_SCREEN_SIZE_2D == Vec2(80, 60)
    assert PFIELD_WINDOW_END_POS == Vec2(59, 49)


def test_playfield_rects_nest():
    assert PFIELD_PHYS_RECT2.arg_inside(PFIELD_PHYS_NO_BRDR_RECT2)
    assert PFIELD_PHYS_NO_BRDR_RECT2.tl_corner() == PFIELD_PHYS_RECT2.tl_corner() + Vec2(1, 1)
    assert r2_fits_in_pfnb(PFIELD_PHYS_NO_BRDR_RECT2)
    assert not r2_fits_in_pfnb(PFIELD_PHYS_RECT2)
    assert r2_intersects_pfnb(PFIELD_PHYS_RECT2)


def test_build_in_pfield_and_pfnb_clamp():
    r = r2_build_in_pfield(Vec2(-10, -10), Vec2(1000, 1000))
    assert r == PFIELD_PHYS_RECT2
    r = r2_build_in_pfnb(Vec2(-10, -10), Vec2(1000, 1000))
    assert r == PFIELD_PHYS_NO_BRDR_RECT2


def test_borders():
    r = Rect2.build_in_grid(Vec2(5, 5), Vec2(9, 8))
    assert r2_pos_in_border(r, r.tl_corner() + TL_CORNER_OFFSET)
    assert not r2_pos_in_internal_border(r, r.tl_corner() + TL_CORNER_OFFSET)
    assert r2_pos_in_internal_border(r, r.br_corner())
    assert not r2_pos_in_border(r, r.br_corner())
    centre = Vec2(7, 6)
    assert not r2_pos_in_border(r, centre)
    assert not r2_pos_in_internal_border(r, centre)