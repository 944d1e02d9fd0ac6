"""REST API for Noir."""
