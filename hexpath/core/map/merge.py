"""
Purpose: Merge generated terrain proposals onto a freshly generated map.
Dependencies: core/hex/grid.py, core/map/tile.py, core/map/terrain.py, structlog.
Ext Hooks: Validate proposals against map themes before merging.

Proposals come from an untrusted generator, so every record is read
leniently and a bad one is skipped rather than failing the batch.
"""

from dataclasses import dataclass

import structlog

from hexpath.core.hex.grid import HexGrid
from hexpath.core.hex.utils import ORIGIN, Hex, parse_hex
from hexpath.core.map.terrain import DEFAULT_TERRAIN, TerrainType, parse_terrain
from hexpath.core.map.tile import Tile

logger = structlog.get_logger()


@dataclass
class TerrainProposal:
    q: int
    r: int
    terrain: TerrainType = DEFAULT_TERRAIN
    has_road: bool = False

    @property
    def hex(self) -> Hex:
        return Hex(self.q, self.r)

    @classmethod
    def from_dict(cls, record):
        """Build from a generator record; raises ValueError if q/r are unusable."""
        if not isinstance(record, dict):
            raise ValueError(f"Proposal must be a mapping, got {type(record).__name__}")
        pos = parse_hex(record)
        has_road = record.get("hasRoad", record.get("has_road", False))
        return cls(pos.q, pos.r, parse_terrain(record.get("terrain")), has_road is True)


def apply_proposals(grid: HexGrid, proposals) -> HexGrid:
    """Overwrite matching tiles, then force the origin back to open plains."""
    applied = skipped = 0
    for record in proposals or []:
        try:
            proposal = record if isinstance(record, TerrainProposal) else TerrainProposal.from_dict(record)
        except ValueError as e:
            logger.warning("Skipping malformed proposal", record=repr(record), error=str(e))
            skipped += 1
            continue

        if proposal.hex not in grid.tiles:
            skipped += 1
            continue
        grid.tiles[proposal.hex] = Tile(proposal.terrain, proposal.has_road)
        applied += 1

    # Start location must always be enterable
    grid.tiles[ORIGIN] = Tile()
    logger.info("Merged terrain proposals", applied=applied, skipped=skipped, radius=grid.radius)
    return grid


def generate_from_proposals(radius, proposals) -> HexGrid:
    return apply_proposals(HexGrid(radius), proposals)
