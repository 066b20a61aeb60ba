"""HTTP API for the server-backed deployment mode."""
