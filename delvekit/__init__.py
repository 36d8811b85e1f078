"""Entities, components, stats, status effects, rooms, encounters and procedural dungeon floors for turn-based roguelikes."""

__version__ = "0.1.0"