from .grid import HexGrid, generate_map
from .utils import DIRECTIONS, ORIGIN, Hex, get_neighbors, hex_distance, make_hex

__all__ = ["HexGrid", "generate_map", "DIRECTIONS", "ORIGIN", "Hex", "get_neighbors", "hex_distance", "make_hex"]
