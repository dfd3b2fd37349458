"""
Purpose: Axial hex math (coordinates, neighbors, distance, pixel picking).
Dependencies: math, dataclasses.
Ext Hooks: Add rings/spirals for area effects.
Shared: Used by the grid, the pathfinder and the HTTP layer for key parsing.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

SQRT3 = math.sqrt(3)


@dataclass(frozen=True)
class Hex:
    """Axial coordinate; s is derived so q + r + s == 0 always holds."""
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, other):
        return Hex(self.q + other.q, self.r + other.r)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.q, self.r)

    def to_dict(self):
        return {"q": self.q, "r": self.r, "s": self.s}


def make_hex(q, r) -> Hex:
    return Hex(q, r)


ORIGIN = Hex(0, 0)

# Order matters: road rendering indexes neighbor flags by direction.
# 0: East, 1: NE, 2: NW, 3: West, 4: SW, 5: SE
DIRECTIONS = [
    Hex(1, 0), Hex(1, -1), Hex(0, -1),
    Hex(-1, 0), Hex(-1, 1), Hex(0, 1),
]


def get_neighbors(hex_: Hex) -> List[Hex]:
    return [hex_ + d for d in DIRECTIONS]


def hex_distance(a: Hex, b: Hex) -> int:
    # Cube distance; always an integer since the component deltas sum to zero
    return (abs(a.q - b.q) + abs(a.r - b.r) + abs(a.s - b.s)) // 2


def hex_round(q: float, r: float, s: float) -> Hex:
    """Round fractional cube coordinates to the hex that contains them."""
    rq, rr, rs = _round_half_up(q), _round_half_up(r), _round_half_up(s)
    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs
    return Hex(int(rq), int(rr))


def _round_half_up(x: float) -> int:
    # round() goes half-to-even, which would pick a different hex on exact edges
    return math.floor(x + 0.5)


def hex_to_pixel(hex_: Hex, size: float) -> Tuple[float, float]:
    """Convert axial coordinates to the pixel center of a pointy-top hex."""
    x = size * (SQRT3 * hex_.q + SQRT3 / 2 * hex_.r)
    y = size * (1.5 * hex_.r)
    return x, y


def pixel_to_hex(x: float, y: float, size: float) -> Hex:
    """Convert a pixel position back to the pointy-top hex containing it."""
    q = (SQRT3 / 3 * x - y / 3) / size
    r = (2 / 3 * y) / size
    return hex_round(q, r, -q - r)


def hex_to_key(hex_: Hex) -> str:
    return f"{hex_.q},{hex_.r}"


def parse_hex(value) -> Hex:
    """
    Accept a Hex, a (q, r) pair, a {"q", "r"} mapping or a "q,r" string.
    Raises ValueError for anything else.
    """
    if isinstance(value, Hex):
        return value
    if isinstance(value, str):
        parts = value.strip().strip("()").replace(" ", "").split(",")
        if len(parts) != 2:
            raise ValueError(f"Bad hex key: {value!r}")
        return Hex(int(parts[0]), int(parts[1]))
    if isinstance(value, dict):
        if "q" not in value or "r" not in value:
            raise ValueError(f"Hex mapping needs q and r: {value!r}")
        return _checked(_as_int(value["q"]), _as_int(value["r"]), value.get("s"))
    if isinstance(value, (tuple, list)) and len(value) in (2, 3):
        return _checked(_as_int(value[0]), _as_int(value[1]), value[2] if len(value) == 3 else None)
    raise ValueError(f"Cannot read hex coordinate from {value!r}")


def _checked(q, r, s=None) -> Hex:
    """Hex from q, r; an explicit s must satisfy q + r + s == 0."""
    if s is not None and q + r + _as_int(s) != 0:
        raise ValueError(f"Cube coordinate breaks q + r + s == 0: {(q, r, s)!r}")
    return Hex(q, r)


def _as_int(value) -> int:
    # bool is an int subclass; reject it along with floats like 1.5
    if isinstance(value, bool):
        raise ValueError(f"Not an integer coordinate: {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Not an integer coordinate: {value!r}")
    try:
        return int(value)
    except TypeError:
        raise ValueError(f"Not an integer coordinate: {value!r}") from None
