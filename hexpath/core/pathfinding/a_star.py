"""
Purpose: A* pathfinding on the hex grid with per-tile entry costs and obstacles.
Dependencies: core/hex/utils.py (get_neighbors, hex_distance), core/map/terrain.py, heapq.
Ext Hooks: Movement budgets (truncate by accumulated cost).
Shared: Called on every hover/click, so it keeps no state between calls.
"""

import heapq
from itertools import count

import structlog

from hexpath.core.hex.utils import get_neighbors, hex_distance, parse_hex
from hexpath.core.map.terrain import min_step_cost

logger = structlog.get_logger()

INF = float('inf')


class _Node:
    __slots__ = ('g', 'h', 'f', 'parent')

    def __init__(self, h):
        self.g = INF
        self.h = h
        self.f = INF
        self.parent = None


def a_star(start, goal, grid):
    """
    Cheapest path from start to goal, both included, or [] when the goal
    is off the map, blocked, or walled off.

    Entering a tile costs that tile's cost. The hex-distance heuristic is
    scaled by the cheapest possible step (a road) so it never overestimates.
    """
    start = parse_hex(start)
    goal = parse_hex(goal)
    goal_tile = grid.get(goal)
    if goal_tile is None or goal_tile.blocked:
        return []

    scale = min_step_cost()
    nodes = {}
    closed = set()
    tie = count()  # FIFO among equal f

    start_node = _Node(hex_distance(start, goal) * scale)
    start_node.g = 0
    start_node.f = start_node.h
    nodes[start] = start_node
    open_heap = [(start_node.f, next(tie), start)]

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current in closed:
            continue  # Stale entry left behind by a later relaxation

        if current == goal:
            path = reconstruct_path(nodes, current)
            logger.debug("A* found path", start=start.as_tuple(), goal=goal.as_tuple(),
                         steps=len(path) - 1, cost=nodes[goal].g, expanded=len(closed))
            return path

        closed.add(current)
        current_node = nodes[current]

        for neighbor in get_neighbors(current):
            if neighbor in closed:
                continue
            tile = grid.tiles.get(neighbor)
            if tile is None or tile.blocked:
                continue

            tentative_g = current_node.g + tile.cost
            node = nodes.get(neighbor)
            if node is None:
                node = _Node(hex_distance(neighbor, goal) * scale)
                nodes[neighbor] = node

            if tentative_g < node.g:
                node.g = tentative_g
                node.f = tentative_g + node.h
                node.parent = current
                heapq.heappush(open_heap, (node.f, next(tie), neighbor))

    logger.debug("A* found no path", start=start.as_tuple(), goal=goal.as_tuple(), expanded=len(closed))
    return []


find_path = a_star


def reconstruct_path(nodes, current):
    """Follow parent links back to the start and return start -> current."""
    path = [current]
    while nodes[current].parent is not None:
        current = nodes[current].parent
        path.append(current)
    path.reverse()
    return path


def path_cost(path, grid):
    """Summed cost of every tile entered after the start."""
    total = 0
    for pos in path[1:]:
        tile = grid.get(pos)
        if tile is None or tile.blocked:
            return INF
        total += tile.cost
    return total
