"""
Purpose: Map-editing session - owns the grid and serializes edit, search, edit.
Dependencies: core/hex/grid.py, core/pathfinding/a_star.py, core/map/merge.py, core/config.py.
Ext Hooks: Undo history of tile edits.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import structlog

from hexpath.core.config import MAP_RADIUS, MAX_RADIUS, MIN_RADIUS
from hexpath.core.hex.grid import HexGrid
from hexpath.core.hex.utils import ORIGIN, Hex
from hexpath.core.map.merge import apply_proposals
from hexpath.core.pathfinding.a_star import a_star, path_cost

logger = structlog.get_logger()


@dataclass
class MapSession:
    """
    Holds the only reference to the current grid and the player's position.

    Every query gets the grid passed in explicitly; the session is just the
    place that decides when the grid is replaced or edited.
    """

    radius: int = MAP_RADIUS
    grid: HexGrid = None
    player_pos: Hex = ORIGIN
    target: Optional[Hex] = None  # Last goal the player moved to
    last_path: List[Hex] = field(default_factory=list)

    def __post_init__(self):
        if self.grid is None:
            self.grid = HexGrid(self.radius)

    def regenerate(self, radius=None):
        """Fresh map; an explicit radius is clamped to [MIN_RADIUS, MAX_RADIUS]."""
        if radius is not None:
            radius = max(MIN_RADIUS, min(MAX_RADIUS, radius))
        grid = HexGrid(self.radius if radius is None else radius)
        self.grid = grid
        self.radius = grid.radius
        self.player_pos = ORIGIN
        self.target = None
        self.last_path = []

    def reset(self):
        self.regenerate()

    def resize(self, delta):
        """Grow or shrink by delta within [MIN_RADIUS, MAX_RADIUS]; False if nothing changed."""
        new_radius = max(MIN_RADIUS, min(MAX_RADIUS, self.radius + delta))
        if new_radius == self.radius:
            return False
        self.regenerate(new_radius)
        return True

    def paint(self, coord, terrain):
        return self.grid.set_terrain(coord, terrain)

    def toggle_road(self, coord):
        return self.grid.toggle_road(coord)

    def preview_path(self, goal):
        return a_star(self.player_pos, goal, self.grid)

    def move_to(self, goal):
        """Walk the player to goal if reachable; returns the path taken."""
        path = a_star(self.player_pos, goal, self.grid)
        if path:
            self.player_pos = path[-1]
            self.target = path[-1]
            self.last_path = path
        return path

    def apply_proposals(self, proposals):
        self.grid = apply_proposals(HexGrid(self.radius), proposals)
        self.player_pos = ORIGIN
        self.target = None
        self.last_path = []

    def generate_with(self, source: Callable, description: str) -> bool:
        """
        Ask an external terrain source for proposals and merge them.
        The source is called as source(description, radius). If it raises,
        the current map stays as it was.
        """
        try:
            proposals = source(description, self.radius)
        except Exception as e:
            logger.error("Terrain generation failed", error=str(e), radius=self.radius)
            return False
        self.apply_proposals(proposals)
        return True

    def path_cost(self, path):
        return path_cost(path, self.grid)

    def to_dict(self):
        return {
            "radius": self.radius,
            "playerPos": self.player_pos.to_dict(),
            "target": self.target.to_dict() if self.target else None,
            "tiles": self.grid.get_grid_state(),
        }
