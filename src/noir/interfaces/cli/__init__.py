"""Command-line interface for Noir."""
