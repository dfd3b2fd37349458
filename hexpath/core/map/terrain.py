"""
Purpose: Closed terrain table (base costs, blocking, display data).
Dependencies: core/config.py for ROAD_COST, structlog.
Ext Hooks: Add terrain kinds; every kind needs a TERRAIN_CONFIG row.
"""

from enum import Enum

import structlog

from hexpath.core.config import ROAD_COST

logger = structlog.get_logger()

BLOCKED = float('inf')  # Cost sentinel for impassable tiles


class TerrainType(str, Enum):
    PLAINS = "PLAINS"
    FOREST = "FOREST"  # Light forest
    DENSE_FOREST = "DENSE_FOREST"
    MOUNTAIN = "MOUNTAIN"
    WATER = "WATER"
    SAND = "SAND"
    WALL = "WALL"  # Indestructible obstacle
    SMALL_BUILDING = "SMALL_BUILDING"
    BIG_BUILDING = "BIG_BUILDING"


DEFAULT_TERRAIN = TerrainType.PLAINS

# Colors are plain data for whatever draws the map; nothing here renders.
TERRAIN_CONFIG = {
    TerrainType.PLAINS: {"cost": 1, "label": "Plains (1)", "color": "#4ade80"},
    TerrainType.FOREST: {"cost": 2, "label": "Light Forest (2)", "color": "#15803d"},
    TerrainType.DENSE_FOREST: {"cost": 3, "label": "Dense Forest (3)", "color": "#064e3b"},
    TerrainType.SAND: {"cost": 1.5, "label": "Sand (1.5)", "color": "#fde047"},
    TerrainType.MOUNTAIN: {"cost": 4, "label": "Mountain (4)", "color": "#57534e"},
    TerrainType.WATER: {"cost": BLOCKED, "label": "Water (Block)", "color": "#3b82f6"},
    TerrainType.WALL: {"cost": BLOCKED, "label": "Wall (Block)", "color": "#1e293b"},
    TerrainType.SMALL_BUILDING: {"cost": 1, "label": "Small Building (1)", "color": "#94a3b8"},
    TerrainType.BIG_BUILDING: {"cost": 1, "label": "Big Building (1)", "color": "#475569"},
}


def base_cost(terrain: TerrainType) -> float:
    return TERRAIN_CONFIG[terrain]["cost"]


def is_blocking(terrain: TerrainType) -> bool:
    return base_cost(terrain) == BLOCKED


def tile_cost(terrain: TerrainType, has_road: bool) -> float:
    """Cost of entering a tile; roads never apply on blocking terrain."""
    if is_blocking(terrain):
        return BLOCKED
    return ROAD_COST if has_road else base_cost(terrain)


def min_step_cost() -> float:
    """Cheapest possible cost of entering any passable tile."""
    passable = [cfg["cost"] for cfg in TERRAIN_CONFIG.values() if cfg["cost"] != BLOCKED]
    return min([ROAD_COST] + passable)


def parse_terrain(value) -> TerrainType:
    """Read a terrain name leniently; None or unknown names fall back to plains."""
    if value is None:
        return DEFAULT_TERRAIN
    if isinstance(value, TerrainType):
        return value
    try:
        return TerrainType(str(value).strip().upper())
    except ValueError:
        logger.warning("Unknown terrain, using default", terrain=value, default=DEFAULT_TERRAIN.value)
        return DEFAULT_TERRAIN


def lookup_terrain(value) -> TerrainType:
    """Strict counterpart of parse_terrain for direct edits; raises ValueError on unknown names."""
    if isinstance(value, TerrainType):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Terrain must be a name, got {value!r}")
    try:
        return TerrainType(value.strip().upper())
    except ValueError:
        raise ValueError(f"Unknown terrain: {value!r}") from None
