"""Roguelike dungeon floor model: geometry, rooms and tunnels, tiles, terrain and layout helpers."""

__version__ = "0.1.0"