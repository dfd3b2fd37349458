"""
Terrain table, tiles and the proposal merge.

This package holds the per-tile state of a map; the grid that stores the
tiles lives in hexpath.core.hex.
"""
