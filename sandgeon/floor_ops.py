"""Entity placement on a floor's upper layers and background tile rendering."""

from __future__ import annotations

from .dngn_floor import DngnFloor, Layer
from .geometry import Vec2
from .room_tunnel import BgTile

__all__ = ["place_entity", "remove_entity", "render_bg_tiles"]


def _checked_layer(
    floor: DngnFloor, pos: Vec2, pos3_z: int, layer: Layer, action: str
) -> dict[Vec2, int]:
    if pos3_z != floor.pos3_z:
        raise ValueError(
            f"cannot {action} entity at {pos}: floor {pos3_z} "
            f"is not this floor ({floor.pos3_z})"
        )
    if not isinstance(layer, Layer):
        raise ValueError(f"cannot {action} entity at {pos}: not an upper layer: {layer!r}")
    # Keeps entities from standing inside walls.
    if floor.phys_pos_to_rt_index(pos) is None:
        raise ValueError(
            f"cannot {action} entity at {pos}: no room or tunnel there"
        )
    return floor.upper_layer(layer)


def place_entity(
    floor: DngnFloor, pos: Vec2, pos3_z: int, layer: Layer, ent_id: int
) -> None:
    """Record entity `ent_id` at `pos` on an upper layer of `floor`."""
    umap = _checked_layer(floor, pos, pos3_z, layer, "place")
    if pos in umap:
        raise ValueError(f"cannot place entity at {pos}: position already taken")
    umap[pos] = ent_id


def remove_entity(floor: DngnFloor, pos: Vec2, pos3_z: int, layer: Layer) -> int:
    """Remove and return the entity at `pos` on an upper layer of `floor`."""
    umap = _checked_layer(floor, pos, pos3_z, layer, "remove")
    if pos not in umap:
        raise ValueError(f"cannot remove entity at {pos}: no entity there")
    return umap.pop(pos)


def render_bg_tiles(floor: DngnFloor) -> dict[Vec2, BgTile]:
    """The background tile at every drawn position, rooms and tunnels in order.

    Each room or tunnel is drawn with its surrounding wall border; later
    ones draw over earlier ones.
    """
    out: dict[Vec2, BgTile] = {}
    for index, rt in enumerate(floor):
        rect = rt.rect
        for y in range(rect.top_y() - 1, rect.bottom_y() + 2):
            for x in range(rect.left_x() - 1, rect.right_x() + 2):
                pos = Vec2(x, y)
                tile = floor.bg_tile_at(pos, index)
                if tile is not None:
                    out[pos] = tile
    return out