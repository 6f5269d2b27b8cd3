"""Integer grid geometry and the fixed screen and playfield layout."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Vec2",
    "Rect2",
    "PathDir",
    "path_dir_to_side_pos",
    "r2_intersects_pfnb",
    "r2_fits_in_other",
    "r2_fits_in_pfnb",
    "r2_build_in_pfield",
    "r2_build_in_pfnb",
    "r2_pos_in_internal_border",
    "r2_pos_in_border",
    "r2_left_side_1ge_past_in_pfnb",
    "r2_top_side_1ge_past_in_pfnb",
    "r2_right_side_1ge_past_in_pfnb",
    "r2_bottom_side_1ge_past_in_pfnb",
]


@dataclass(frozen=True)
class Vec2:
    """An integer 2D vector or grid position."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass(frozen=True)
class Rect2:
    """An axis-aligned rectangle of grid cells, given by corner and size."""

    pos: Vec2 = Vec2()
    size_2d: Vec2 = Vec2()

    @classmethod
    def build_in_grid(cls, tl_corner: Vec2, br_corner: Vec2) -> Rect2:
        """Build the rectangle spanning both corners inclusively."""
        size = Vec2(
            max(0, br_corner.x - tl_corner.x + 1),
            max(0, br_corner.y - tl_corner.y + 1),
        )
        return cls(tl_corner, size)

    @classmethod
    def build_in_grid_lim(
        cls, tl_corner: Vec2, br_corner: Vec2, lim: Rect2
    ) -> Rect2:
        """Like `build_in_grid`, with both corners clamped into `lim`."""
        lx, rx = lim.left_x(), lim.right_x()
        ty, by = lim.top_y(), lim.bottom_y()
        tl = Vec2(_clamp(tl_corner.x, lx, rx), _clamp(tl_corner.y, ty, by))
        br = Vec2(_clamp(br_corner.x, lx, rx), _clamp(br_corner.y, ty, by))
        return cls.build_in_grid(tl, br)

    def left_x(self) -> int:
        return self.pos.x

    def top_y(self) -> int:
        return self.pos.y

    def right_x(self) -> int:
        return self.pos.x + self.size_2d.x - 1

    def bottom_y(self) -> int:
        return self.pos.y + self.size_2d.y - 1

    def tl_corner(self) -> Vec2:
        return Vec2(self.left_x(), self.top_y())

    def tr_corner(self) -> Vec2:
        return Vec2(self.right_x(), self.top_y())

    def bl_corner(self) -> Vec2:
        return Vec2(self.left_x(), self.bottom_y())

    def br_corner(self) -> Vec2:
        return Vec2(self.right_x(), self.bottom_y())

    def _is_empty(self) -> bool:
        return self.size_2d.x <= 0 or self.size_2d.y <= 0

    def contains_point(self, pos: Vec2) -> bool:
        """Whether the grid cell `pos` lies inside this rectangle."""
        return (
            self.left_x() <= pos.x <= self.right_x()
            and self.top_y() <= pos.y <= self.bottom_y()
        )

    def intersect(self, other: Rect2) -> bool:
        """Whether the two rectangles share at least one grid cell."""
        if self._is_empty() or other._is_empty():
            return False
        return (
            self.left_x() <= other.right_x()
            and other.left_x() <= self.right_x()
            and self.top_y() <= other.bottom_y()
            and other.top_y() <= self.bottom_y()
        )

    def arg_inside(self, other: Rect2) -> bool:
        """Whether `other` lies wholly inside this rectangle."""
        return (
            other.left_x() >= self.left_x()
            and other.right_x() <= self.right_x()
            and other.top_y() >= self.top_y()
            and other.bottom_y() <= self.bottom_y()
        )

    def build_in_grid_inflated_lim(
        self, tl_amount: Vec2, br_amount: Vec2, lim: Rect2
    ) -> Rect2:
        """Grow the top-left and bottom-right corners outward, clamped to `lim`."""
        return Rect2.build_in_grid_lim(
            self.tl_corner() - tl_amount, self.br_corner() + br_amount, lim
        )

    def left_side_1ge_past_lim(self, lim: Rect2) -> Rect2:
        """The column just left of this rectangle, clamped to `lim`."""
        x = self.left_x() - 1
        return Rect2.build_in_grid_lim(
            Vec2(x, self.top_y()), Vec2(x, self.bottom_y()), lim
        )

    def top_side_1ge_past_lim(self, lim: Rect2) -> Rect2:
        """The row just above this rectangle, clamped to `lim`."""
        y = self.top_y() - 1
        return Rect2.build_in_grid_lim(
            Vec2(self.left_x(), y), Vec2(self.right_x(), y), lim
        )

    def right_side_1ge_past_lim(self, lim: Rect2) -> Rect2:
        """The column just right of this rectangle, clamped to `lim`."""
        x = self.right_x() + 1
        return Rect2.build_in_grid_lim(
            Vec2(x, self.top_y()), Vec2(x, self.bottom_y()), lim
        )

    def bottom_side_1ge_past_lim(self, lim: Rect2) -> Rect2:
        """The row just below this rectangle, clamped to `lim`."""
        y = self.bottom_y() + 1
        return Rect2.build_in_grid_lim(
            Vec2(self.left_x(), y), Vec2(self.right_x(), y), lim
        )

    def __str__(self) -> str:
        return f"{{pos{self.pos} size_2d{self.size_2d}}}"


CDIFF = 0.1

LEFT_OFFSET = Vec2(-1, 0)
TOP_OFFSET = Vec2(0, -1)
RIGHT_OFFSET = Vec2(1, 0)
BOTTOM_OFFSET = Vec2(0, 1)
TL_CORNER_OFFSET = LEFT_OFFSET + TOP_OFFSET
TR_CORNER_OFFSET = RIGHT_OFFSET + TOP_OFFSET
BL_CORNER_OFFSET = LEFT_OFFSET + BOTTOM_OFFSET
BR_CORNER_OFFSET = RIGHT_OFFSET + BOTTOM_OFFSET


class PathDir(Enum):
    """A step direction on the grid."""

    LEFT = 0
    TOP = 1
    RIGHT = 2
    BOTTOM = 3

    def __str__(self) -> str:
        return f"PathDir::{self.name.capitalize()}"


_PATH_DIR_OFFSETS = {
    PathDir.LEFT: LEFT_OFFSET,
    PathDir.TOP: TOP_OFFSET,
    PathDir.RIGHT: RIGHT_OFFSET,
    PathDir.BOTTOM: BOTTOM_OFFSET,
}


def path_dir_to_side_pos(pos: Vec2, direction: PathDir) -> Vec2:
    """The neighbouring position of `pos` in `direction`."""
    try:
        return pos + _PATH_DIR_OFFSETS[direction]
    except (KeyError, TypeError):
        raise ValueError(f"invalid direction: {direction!r}") from None


MSG_LOG_WIDGET_SELECTED_SPACING_SIZE = 3
MSG_LOG_WIDGET_SPACING_SIZE = 6

# Sizes in tilemap entries.
W_BRDR_SCREEN_SIZE_2D = Vec2(80, 60)
SCREEN_SIZE_2D = W_BRDR_SCREEN_SIZE_2D - Vec2(2, 2)

PFIELD_WINDOW_POS = Vec2(0, 0)
PFIELD_WINDOW_END_POS = Vec2(
    W_BRDR_SCREEN_SIZE_2D.x - 1 - 20, W_BRDR_SCREEN_SIZE_2D.y - 1 - 10
)
PFIELD_WINDOW_RECT2 = Rect2.build_in_grid(PFIELD_WINDOW_POS, PFIELD_WINDOW_END_POS)
PFIELD_WINDOW_SIZE_2D = PFIELD_WINDOW_RECT2.size_2d

# "Phys" coordinates are those inside the playfield window, not counting
# its drawn border.
PFIELD_PHYS_POS = Vec2(0, 0)
PFIELD_PHYS_END_POS = PFIELD_WINDOW_END_POS - Vec2(2, 2)
PFIELD_PHYS_RECT2 = Rect2.build_in_grid(PFIELD_PHYS_POS, PFIELD_PHYS_END_POS)
# An internal border inside the playfield, so that the borders of rooms
# and tunnels always fit.
PFIELD_PHYS_NO_BRDR_RECT2 = Rect2.build_in_grid(
    PFIELD_PHYS_POS + Vec2(1, 1), PFIELD_PHYS_END_POS - Vec2(1, 1)
)
PFIELD_PHYS_SIZE_2D = PFIELD_PHYS_RECT2.size_2d

CGC2D_GRID_ELEM_SIZE_2D = Vec2(10, 10)
CGC2D_NUM_GRID_ELEMS_2D = Vec2(
    math.ceil(PFIELD_PHYS_SIZE_2D.x / CGC2D_GRID_ELEM_SIZE_2D.x),
    math.ceil(PFIELD_PHYS_SIZE_2D.y / CGC2D_GRID_ELEM_SIZE_2D.y),
)


def r2_intersects_pfnb(rect: Rect2) -> bool:
    """Whether `rect` touches the borderless playfield."""
    return PFIELD_PHYS_NO_BRDR_RECT2.intersect(rect)


def r2_fits_in_other(rect: Rect2, inside_rect: Rect2) -> bool:
    """Whether `rect` lies wholly inside `inside_rect`."""
    return inside_rect.arg_inside(rect)


def r2_fits_in_pfnb(rect: Rect2) -> bool:
    """Whether `rect` lies wholly inside the borderless playfield."""
    return r2_fits_in_other(rect, PFIELD_PHYS_NO_BRDR_RECT2)


def r2_build_in_pfield(tl_corner: Vec2, br_corner: Vec2) -> Rect2:
    return Rect2.build_in_grid_lim(tl_corner, br_corner, PFIELD_PHYS_RECT2)


def r2_build_in_pfnb(tl_corner: Vec2, br_corner: Vec2) -> Rect2:
    return Rect2.build_in_grid_lim(tl_corner, br_corner, PFIELD_PHYS_NO_BRDR_RECT2)


def r2_pos_in_internal_border(rect: Rect2, pos: Vec2) -> bool:
    """Whether `pos` is on the outermost ring of cells of `rect`."""
    return (
        (pos.x in (rect.left_x(), rect.right_x())
         and rect.top_y() <= pos.y <= rect.bottom_y())
        or (pos.y in (rect.top_y(), rect.bottom_y())
            and rect.left_x() <= pos.x <= rect.right_x())
    )


def r2_pos_in_border(rect: Rect2, pos: Vec2) -> bool:
    """Whether `pos` is on the ring of cells just outside `rect`."""
    lx, rx = rect.left_x() - 1, rect.right_x() + 1
    ty, by = rect.top_y() - 1, rect.bottom_y() + 1
    return (
        (pos.x in (lx, rx) and ty <= pos.y <= by)
        or (pos.y in (ty, by) and lx <= pos.x <= rx)
    )


def r2_left_side_1ge_past_in_pfnb(rect: Rect2) -> Rect2:
    return rect.left_side_1ge_past_lim(PFIELD_PHYS_NO_BRDR_RECT2)


def r2_top_side_1ge_past_in_pfnb(rect: Rect2) -> Rect2:
    return rect.top_side_1ge_past_lim(PFIELD_PHYS_NO_BRDR_RECT2)


def r2_right_side_1ge_past_in_pfnb(rect: Rect2) -> Rect2:
    return rect.right_side_1ge_past_lim(PFIELD_PHYS_NO_BRDR_RECT2)


def r2_bottom_side_1ge_past_in_pfnb(rect: Rect2) -> Rect2:
    return rect.bottom_side_1ge_past_lim(PFIELD_PHYS_NO_BRDR_RECT2)


LOG_WINDOW_POS = Vec2(0, PFIELD_WINDOW_END_POS.y)
LOG_WINDOW_END_POS = Vec2(PFIELD_WINDOW_END_POS.x, W_BRDR_SCREEN_SIZE_2D.y - 1)

HUD_WINDOW_POS = Vec2(PFIELD_WINDOW_END_POS.x, PFIELD_WINDOW_POS.y)
HUD_WINDOW_END_POS = Vec2(W_BRDR_SCREEN_SIZE_2D.x - 1, W_BRDR_SCREEN_SIZE_2D.y - 1)

POPUP_WINDOW_POS = Vec2(13, 10)
POPUP_WINDOW_END_POS = Vec2(HUD_WINDOW_POS.x - 1, W_BRDR_SCREEN_SIZE_2D.y - 15)

YES_NO_WINDOW_POS = Vec2(2, W_BRDR_SCREEN_SIZE_2D.y // 2)
YES_NO_WINDOW_END_POS = Vec2(
    YES_NO_WINDOW_POS.x + 3
    + MSG_LOG_WIDGET_SELECTED_SPACING_SIZE
    + MSG_LOG_WIDGET_SPACING_SIZE
    + 1,
    YES_NO_WINDOW_POS.y + 2 + 1 + 2,
)

TEXT_YES_NO_WINDOW_POS = Vec2(2, W_BRDR_SCREEN_SIZE_2D.y // 2)
TEXT_YES_NO_WINDOW_END_POS = Vec2(
    TEXT_YES_NO_WINDOW_POS.x + 30 + 1 + 2,
    TEXT_YES_NO_WINDOW_POS.y + 4 + 1 + 2,
)