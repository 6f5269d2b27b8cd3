"""Rooms and tunnels of a dungeon floor, and their per-level size rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, TypeVar

from .geometry import (
    Rect2,
    Vec2,
    r2_fits_in_pfnb,
    r2_pos_in_border,
    r2_pos_in_internal_border,
)

__all__ = [
    "BgTile",
    "RoomTunnel",
    "r2_is_tunnel",
    "r2_is_horiz_tunnel",
    "r2_is_vert_tunnel",
    "r2_is_room",
    "r2_is_valid",
]


class BgTile(Enum):
    """Kinds of background tile on the playfield."""

    BLANK = "blank"
    ERROR = "error"
    WALL = "wall"
    ROOM_FLOOR = "room_floor"
    TUNNEL_FLOOR = "tunnel_floor"
    DOOR = "door"
    LOCKED_DOOR = "locked_door"
    UP_STAIRS = "up_stairs"
    DOWN_STAIRS = "down_stairs"
    WATER = "water"
    SPIKES = "spikes"
    PIT = "pit"
    LAVA = "lava"


NUM_LEVELS = 5

# Per-level tables, indexed by level index.
MIN_NUM_ROOM_TUNNELS = (25,) * NUM_LEVELS
MAX_NUM_ROOM_TUNNELS = (64,) * NUM_LEVELS
MIN_NUM_ROOMS = (10,) * NUM_LEVELS
MIN_NUM_LOCKS = (3,) * NUM_LEVELS
MAX_NUM_LOCKS = (5,) * NUM_LEVELS

TUNNEL_THICKNESS = 1

TUNNEL_MIN_LEN = (4,) * NUM_LEVELS
TUNNEL_MAX_LEN = (12,) * NUM_LEVELS

ROOM_MIN_SIZE_2D = (Vec2(5, 5),) * NUM_LEVELS
ROOM_MAX_SIZE_2D = (Vec2(12, 12),) * NUM_LEVELS

_T = TypeVar("_T")


def level_value(table: Sequence[_T], level_index: int) -> _T:
    """Look up `table` at `level_index`, rejecting negative indices."""
    if not 0 <= level_index < len(table):
        raise IndexError(f"level index out of range: {level_index}")
    return table[level_index]


def r2_is_horiz_tunnel(rect: Rect2, level_index: int) -> bool:
    return (
        rect.size_2d.x >= level_value(TUNNEL_MIN_LEN, level_index)
        and rect.size_2d.y == TUNNEL_THICKNESS
    )


def r2_is_vert_tunnel(rect: Rect2, level_index: int) -> bool:
    return (
        rect.size_2d.x == TUNNEL_THICKNESS
        and rect.size_2d.y >= level_value(TUNNEL_MIN_LEN, level_index)
    )


def r2_is_tunnel(rect: Rect2, level_index: int) -> bool:
    return r2_is_horiz_tunnel(rect, level_index) or r2_is_vert_tunnel(
        rect, level_index
    )


def r2_is_room(rect: Rect2, level_index: int) -> bool:
    low = level_value(ROOM_MIN_SIZE_2D, level_index)
    high = level_value(ROOM_MAX_SIZE_2D, level_index)
    return (
        low.x <= rect.size_2d.x <= high.x
        and low.y <= rect.size_2d.y <= high.y
    )


def r2_is_valid(rect: Rect2, level_index: int) -> bool:
    return r2_is_tunnel(rect, level_index) or r2_is_room(rect, level_index)


def _default_rect() -> Rect2:
    return Rect2(Vec2(0, 0), Vec2(TUNNEL_THICKNESS, TUNNEL_MIN_LEN[0]))


@dataclass(eq=False)
class RoomTunnel:
    """A room or a tunnel within the dungeon, in phys playfield coordinates.

    Instances compare and hash by identity, so they can key lookup tables.
    """

    rect: Rect2 = field(default_factory=_default_rect)
    gen_side: int = 0
    alt_terrain: dict[Vec2, BgTile] = field(default_factory=dict)
    door_pts: set[Vec2] = field(default_factory=set)
    conn_indices: set[int] = field(default_factory=set)

    def pos_in_border(self, pos: Vec2) -> bool:
        return r2_pos_in_border(self.rect, pos)

    def pos_in_internal_border(self, pos: Vec2) -> bool:
        return r2_pos_in_internal_border(self.rect, pos)

    def fits_in_pfnb(self) -> bool:
        return r2_fits_in_pfnb(self.rect)

    def is_tunnel(self, level_index: int) -> bool:
        return r2_is_tunnel(self.rect, level_index)

    def is_horiz_tunnel(self, level_index: int) -> bool:
        return r2_is_horiz_tunnel(self.rect, level_index)

    def is_vert_tunnel(self, level_index: int) -> bool:
        return r2_is_vert_tunnel(self.rect, level_index)

    def is_room(self, level_index: int) -> bool:
        return r2_is_room(self.rect, level_index)

    def is_valid(self, level_index: int) -> bool:
        return r2_is_valid(self.rect, level_index)