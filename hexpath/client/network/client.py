"""
Purpose: Wrap map-server calls with retry/back-off for robustness.
Dependencies: requests, time, structlog, core/config.py.
Ext Hooks: Add authentication.
Client Only: HTTP client with resilience.
"""

import time
from typing import Any, Dict, Optional

import requests
import structlog

from hexpath.core.config import SERVER_URL
from hexpath.core.hex.utils import hex_to_key, parse_hex

logger = structlog.get_logger()


class NetworkClient:
    def __init__(self, base_url: str = SERVER_URL, max_retries: int = 3, retry_delay: float = 1.0, backoff_factor: float = 2.0):
        self.base_url = base_url.rstrip('/')
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.backoff_factor = backoff_factor

    def _request_with_retry(self, method: str, endpoint: str, data: Optional[Dict[str, Any]] = None, timeout: float = 5.0) -> Optional[Dict[str, Any]]:
        url = f"{self.base_url}{endpoint}"
        delay = self.retry_delay
        for attempt in range(self.max_retries):
            try:
                response = requests.request(method, url, json=data, timeout=timeout)
                if response.status_code == 200:
                    return response.json()
                if 400 <= response.status_code < 500:
                    # Our request is wrong; retrying won't change that
                    logger.warning("Request rejected", url=url, status=response.status_code)
                    return None
                logger.warning("Server error", url=url, status=response.status_code, attempt=attempt + 1)
            except requests.exceptions.RequestException as e:
                logger.warning("Network error", url=url, error=str(e), attempt=attempt + 1)

            if attempt < self.max_retries - 1:
                logger.info("Retrying", url=url, delay=delay)
                time.sleep(delay)
                delay *= self.backoff_factor
        return None

    def post_with_retry(self, endpoint: str, data: Dict[str, Any], timeout: float = 5.0) -> Optional[Dict[str, Any]]:
        """Post with exponential backoff retry."""
        return self._request_with_retry("POST", endpoint, data, timeout)

    def get_with_retry(self, endpoint: str, timeout: float = 5.0) -> Optional[Dict[str, Any]]:
        return self._request_with_retry("GET", endpoint, None, timeout)

    def get_map(self):
        return self.get_with_retry("/api/map")

    def find_path(self, start, goal):
        """Path as a list of Hex, [] if there is none, None if the server is unreachable."""
        result = self.post_with_retry("/api/move_path", {
            "start": hex_to_key(parse_hex(start)),
            "goal": hex_to_key(parse_hex(goal)),
        })
        if result is None:
            return None
        return [parse_hex(p) for p in result.get("path", [])]

    def set_terrain(self, coord, terrain):
        return self.post_with_retry("/api/tiles/terrain", {"coord": hex_to_key(parse_hex(coord)), "terrain": str(getattr(terrain, "value", terrain))})

    def toggle_road(self, coord):
        return self.post_with_retry("/api/tiles/road", {"coord": hex_to_key(parse_hex(coord))})

    def submit_proposals(self, proposals):
        return self.post_with_retry("/api/map/proposals", {"proposals": list(proposals)})
