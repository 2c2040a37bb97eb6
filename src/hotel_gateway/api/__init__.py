"""HTTP API for the hotel gateway."""
