"""
Purpose: Hex tiles with terrain, road overlay and derived movement cost.
Dependencies: core/map/terrain.py.
Ext Hooks: Add more overlays (e.g., bridges over water).
Server: JSON serializable through to_dict.
"""

from hexpath.core.map.terrain import BLOCKED, DEFAULT_TERRAIN, is_blocking, parse_terrain, tile_cost


class Tile:
    """
    Cost is never set directly: it is recomputed from (terrain, has_road)
    by every mutator so the two can't drift apart.
    """

    def __init__(self, terrain=DEFAULT_TERRAIN, has_road=False):
        self._terrain = parse_terrain(terrain)
        self._has_road = bool(has_road) and not is_blocking(self._terrain)
        self._cost = tile_cost(self._terrain, self._has_road)

    @property
    def terrain(self):
        return self._terrain

    @property
    def has_road(self):
        return self._has_road

    @property
    def cost(self):
        return self._cost

    @property
    def blocked(self):
        return self._cost == BLOCKED

    def set_terrain(self, terrain):
        """Repaint the tile; blocking terrain clears any road."""
        self._terrain = parse_terrain(terrain)
        if is_blocking(self._terrain):
            self._has_road = False
        self._cost = tile_cost(self._terrain, self._has_road)

    def toggle_road(self):
        """Flip the road flag on passable terrain. Returns the new flag."""
        if is_blocking(self._terrain):
            return False
        self._has_road = not self._has_road
        self._cost = tile_cost(self._terrain, self._has_road)
        return self._has_road

    def to_dict(self):
        return {
            'terrain': self._terrain.value,
            'cost': self._cost if not self.blocked else None,
            'hasRoad': self._has_road,
            'blocked': self.blocked,
        }

    def __repr__(self):
        return f"Tile({self._terrain.value}, road={self._has_road}, cost={self._cost})"
