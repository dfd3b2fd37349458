"""Shared logic: hex math, tiles, grid, pathfinding and the editing session."""
