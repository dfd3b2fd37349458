"""
Hex map editing and A* pathfinding over weighted terrain.
"""

__version__ = "0.1.0"
