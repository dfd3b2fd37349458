"""HTTP client for the map server."""
