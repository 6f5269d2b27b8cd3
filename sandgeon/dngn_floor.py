"""A dungeon floor: its rooms and tunnels, stairs, terrain state and entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from .geometry import (
    CGC2D_GRID_ELEM_SIZE_2D,
    CGC2D_NUM_GRID_ELEMS_2D,
    PFIELD_PHYS_NO_BRDR_RECT2,
    Rect2,
    Vec2,
)
from .room_tunnel import (
    MAX_NUM_ROOM_TUNNELS,
    MIN_NUM_ROOM_TUNNELS,
    BgTile,
    RoomTunnel,
    level_value,
)

__all__ = [
    "AltTerrainState",
    "AltTerrainInfo",
    "Layer",
    "DngnFloor",
    "MIN_NUM_FAKE_STAIRS_POSITIONS",
    "MAX_NUM_FAKE_STAIRS_POSITIONS",
]

MIN_NUM_FAKE_STAIRS_POSITIONS = 0
MAX_NUM_FAKE_STAIRS_POSITIONS = 3


class AltTerrainState(Enum):
    """What a piece of alternate terrain currently shows."""

    NORMAL = 0
    DESTROYED = 1
    SHOW_ALT = 2


@dataclass
class AltTerrainInfo:
    """Mutable state of one piece of alternate terrain."""

    state: AltTerrainState = AltTerrainState.NORMAL
    alt_bg_tile: BgTile = BgTile.ERROR

    def to_dict(self) -> dict[str, Any]:
        return {"state": self.state.name, "alt_bg_tile": self.alt_bg_tile.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AltTerrainInfo:
        try:
            return cls(
                state=AltTerrainState[data["state"]],
                alt_bg_tile=BgTile(data["alt_bg_tile"]),
            )
        except KeyError as exc:
            raise ValueError(f"invalid alt terrain info: {data!r}") from exc


class Layer(Enum):
    """Playfield layers that hold at most one entity per position."""

    ITEMS_TRAPS = 0
    CHARS_MACHS = 1


def _cell_range(low: int, high: int, elem: int, count: int) -> range:
    first = max(0, min(low // elem, count - 1))
    last = max(0, min(high // elem, count - 1))
    return range(first, last + 1)


class DngnFloor:
    """The dungeon floor, either while being generated or once finished."""

    def __init__(self, level_index: int, pos3_z: int = -1) -> None:
        level_value(MAX_NUM_ROOM_TUNNELS, level_index)
        self.level_index = level_index
        self.pos3_z = pos3_z
        self._rts: list[RoomTunnel] = []
        self._grid: dict[tuple[int, int], set[RoomTunnel]] = {}
        self.ustairs_pos: Vec2 | None = None
        self.dstairs_pos: Vec2 | None = None
        self.fake_stairs_positions: list[Vec2] = []
        # Only some kinds of alt terrain can be destroyed or changed, so
        # not every alt terrain position has an entry here.
        self.alt_terrain_info: dict[Vec2, AltTerrainInfo] = {}
        self.upper_layers: dict[Layer, dict[Vec2, int]] = {
            layer: {} for layer in Layer
        }

    # --- serialization -------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """The serialized part of the floor as plain data."""
        return {
            "pos3_z": self.pos3_z,
            "alt_terrain_info": [
                {"pos": [pos.x, pos.y], **info.to_dict()}
                for pos, info in self.alt_terrain_info.items()
            ],
            "upper_layers": {
                layer.name: [[pos.x, pos.y, ent_id] for pos, ent_id in umap.items()]
                for layer, umap in self.upper_layers.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], level_index: int) -> DngnFloor:
        try:
            floor = cls(level_index, int(data["pos3_z"]))
            for entry in data["alt_terrain_info"]:
                x, y = entry["pos"]
                floor.alt_terrain_info[Vec2(int(x), int(y))] = (
                    AltTerrainInfo.from_dict(entry)
                )
            for name, entries in data["upper_layers"].items():
                umap = floor.upper_layers[Layer[name]]
                for x, y, ent_id in entries:
                    umap[Vec2(int(x), int(y))] = int(ent_id)
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid floor data: {exc}") from exc
        return floor

    # --- tile queries ---------------------------------------------------

    def bg_tile_at(self, pos: Vec2, index: int) -> BgTile | None:
        """The tile drawn at `pos` for the room or tunnel at `index`.

        `pos` may be in that room or tunnel's outer border.
        """
        rt = self._rts[index]
        if rt.pos_in_border(pos):
            covered = any(
                other.rect.contains_point(pos) for other in self._rts[:index]
            )
            return None if covered else BgTile.WALL
        return self.phys_bg_tile_at(pos)

    def rt_at(self, phys_pos: Vec2) -> RoomTunnel | None:
        """The room or tunnel covering `phys_pos` inside the playfield."""
        if not PFIELD_PHYS_NO_BRDR_RECT2.contains_point(phys_pos):
            return None
        return self._containing(phys_pos)

    def phys_bg_tile_at(self, phys_pos: Vec2) -> BgTile | None:
        """The background tile at `phys_pos`, or None where there is none."""
        rt = self.rt_at(phys_pos)
        if rt is None:
            return None
        if self.ustairs_pos == phys_pos:
            return BgTile.UP_STAIRS
        if self.dstairs_pos == phys_pos:
            return BgTile.DOWN_STAIRS
        info = self.alt_terrain_info.get(phys_pos)
        if phys_pos in rt.alt_terrain and not (
            info is not None and info.state is AltTerrainState.DESTROYED
        ):
            if info is not None and info.state is AltTerrainState.SHOW_ALT:
                return info.alt_bg_tile
            return rt.alt_terrain[phys_pos]
        if rt.is_tunnel(self.level_index):
            return BgTile.TUNNEL_FLOOR
        return BgTile.ROOM_FLOOR

    def phys_pos_to_rt_index(self, phys_pos: Vec2) -> int | None:
        """The index of the room or tunnel covering `phys_pos`, if any."""
        rt = self._containing(phys_pos)
        return None if rt is None else self._index_of(rt)

    def _containing(self, pos: Vec2) -> RoomTunnel | None:
        for rt in self.neighbors(Rect2(pos, Vec2(1, 1))):
            if rt.rect.contains_point(pos):
                return rt
        return None

    def _index_of(self, rt: RoomTunnel) -> int:
        return next(i for i, item in enumerate(self._rts) if item is rt)

    # --- collision grid -------------------------------------------------

    def _cells(self, rect: Rect2) -> Iterator[tuple[int, int]]:
        if rect.size_2d.x <= 0 or rect.size_2d.y <= 0:
            return
        elem, count = CGC2D_GRID_ELEM_SIZE_2D, CGC2D_NUM_GRID_ELEMS_2D
        for cy in _cell_range(rect.top_y(), rect.bottom_y(), elem.y, count.y):
            for cx in _cell_range(rect.left_x(), rect.right_x(), elem.x, count.x):
                yield cx, cy

    def _grid_insert(self, rt: RoomTunnel) -> None:
        for cell in self._cells(rt.rect):
            self._grid.setdefault(cell, set()).add(rt)

    def _grid_erase(self, rt: RoomTunnel) -> None:
        for members in self._grid.values():
            members.discard(rt)

    def neighbors(self, rect: Rect2) -> list[RoomTunnel]:
        """Rooms and tunnels sharing a collision-grid cell with `rect`, in order."""
        found: set[RoomTunnel] = set()
        for cell in self._cells(rect):
            found.update(self._grid.get(cell, ()))
        return [rt for rt in self._rts if rt in found]

    # --- editing --------------------------------------------------------

    def append(self, rt: RoomTunnel) -> None:
        limit = level_value(MAX_NUM_ROOM_TUNNELS, self.level_index)
        if len(self._rts) + 1 > limit:
            raise ValueError(
                f"floor cannot hold more rooms and tunnels: "
                f"{len(self._rts)} {self.level_index} {limit}"
            )
        self._rts.append(rt)
        self._grid_insert(rt)

    def clear_before_gen(self) -> None:
        """Forget the layout ahead of a new generation run."""
        self._rts.clear()
        self._grid.clear()
        self.ustairs_pos = None
        self.dstairs_pos = None
        self.alt_terrain_info.clear()

    def erase_tunnel_during_gen(self, index: int) -> bool:
        """Remove the tunnel at `index` if the floor can spare it.

        Alt terrain state inside the tunnel is dropped, and connection
        indices of the remaining rooms and tunnels are renumbered.
        """
        rt = self._rts[index]
        if not (
            len(self._rts) > level_value(MIN_NUM_ROOM_TUNNELS, self.level_index)
            and rt.is_tunnel(self.level_index)
        ):
            return False
        if any(n.rect.intersect(rt.rect) for n in self.neighbors(rt.rect)):
            for pos in list(self.alt_terrain_info):
                if rt.rect.contains_point(pos):
                    del self.alt_terrain_info[pos]
        self._grid_erase(rt)
        del self._rts[index]
        for item in self._rts:
            item.conn_indices = {
                conn - 1 if conn > index else conn
                for conn in item.conn_indices
                if conn != index
            }
        return True

    def upper_layer(self, layer: Layer) -> dict[Vec2, int]:
        """The position-to-entity map of an upper playfield layer."""
        if not isinstance(layer, Layer):
            raise ValueError(f"not an upper layer: {layer!r}")
        return self.upper_layers[layer]

    # --- container protocol ---------------------------------------------

    def __len__(self) -> int:
        return len(self._rts)

    def __iter__(self) -> Iterator[RoomTunnel]:
        return iter(self._rts)

    def __getitem__(self, index: int) -> RoomTunnel:
        return self._rts[index]