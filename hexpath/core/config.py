"""
Purpose: Configs for hexes, map size and movement costs.
Dependencies: os (env overrides for deployment-specific values).
Ext Hooks: Add per-map cost tables.
"""

import os

HEX_SIZE = 35  # Pixel radius of one hex
MAP_RADIUS = 6
MIN_RADIUS = 2
MAX_RADIUS = 12
ROAD_COST = 0.75  # Replaces terrain cost on any passable tile with a road
SERVER_URL = os.environ.get("HEXPATH_SERVER_URL", "http://localhost:5000")
LOG_LEVEL = os.environ.get("HEXPATH_LOG_LEVEL", "INFO")
DEBUG = os.environ.get("HEXPATH_DEBUG", "").lower() in ("1", "true", "yes")  # Werkzeug debugger; never in production
