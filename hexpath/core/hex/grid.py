"""
Purpose: Hexagonal map of tiles keyed by axial coordinate, with the edit API.
Dependencies: core/hex/utils.py, core/map/tile.py, core/config.py, structlog.
Ext Hooks: Other map shapes (rectangle, triangle) as alternate generators.
"""

import structlog

from hexpath.core.config import HEX_SIZE, MAP_RADIUS
from hexpath.core.hex.utils import Hex, get_neighbors, hex_to_key, hex_to_pixel, parse_hex, pixel_to_hex
from hexpath.core.map.tile import Tile

logger = structlog.get_logger()


class HexGrid:
    def __init__(self, radius=MAP_RADIUS, hex_size=HEX_SIZE):
        if isinstance(radius, bool) or not isinstance(radius, int) or radius < 0:
            raise ValueError(f"Map radius must be a non-negative integer, got {radius!r}")
        self.radius = radius
        self.hex_size = hex_size
        self.tiles = {}  # Hex: Tile object
        self._initialize_grid()

    def _initialize_grid(self):
        # Every hex within `radius` steps of the origin, all plains
        for q in range(-self.radius, self.radius + 1):
            r1 = max(-self.radius, -q - self.radius)
            r2 = min(self.radius, -q + self.radius)
            for r in range(r1, r2 + 1):
                self.tiles[Hex(q, r)] = Tile()

    def __contains__(self, coord):
        return self.get(coord) is not None

    def __len__(self):
        return len(self.tiles)

    def __iter__(self):
        return iter(self.tiles)

    def get(self, coord):
        """Tile at coord, or None when it lies outside the map (or isn't a coordinate)."""
        try:
            return self.tiles.get(parse_hex(coord))
        except ValueError:
            return None

    def set_terrain(self, coord, terrain):
        tile = self.get(coord)
        if tile is None:
            logger.warning("Terrain edit outside map", coord=str(coord))
            return False
        tile.set_terrain(terrain)
        return True

    def toggle_road(self, coord):
        tile = self.get(coord)
        if tile is None:
            logger.warning("Road edit outside map", coord=str(coord))
            return False
        tile.toggle_road()
        return True

    def road_neighbors(self, coord):
        """Road flags of the six neighbors, indexed like DIRECTIONS."""
        flags = []
        for neighbor in get_neighbors(parse_hex(coord)):
            tile = self.tiles.get(neighbor)
            flags.append(tile is not None and tile.has_road)
        return flags

    def hex_to_pixel(self, coord):
        """Convert axial coordinates to pixel position."""
        return hex_to_pixel(parse_hex(coord), self.hex_size)

    def pixel_to_hex(self, x, y):
        """Convert pixel to axial coordinates."""
        return pixel_to_hex(x, y, self.hex_size)

    def get_grid_state(self):
        state = {}
        for pos, tile in self.tiles.items():
            entry = pos.to_dict()
            entry.update(tile.to_dict())
            state[hex_to_key(pos)] = entry
        return state


def generate_map(radius, hex_size=HEX_SIZE):
    return HexGrid(radius, hex_size)
