"""HTTP API for the math engine."""
